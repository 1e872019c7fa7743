from __future__ import annotations

from typing import Optional

from openai import OpenAI


class OpenAIAdvisoryClient:
    def __init__(
        self,
        model: str,
        api_key: str,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
        temperature: float = 0.7,
        max_tokens: int = 1500,
    ):
        if not api_key.strip():
            raise RuntimeError("OPENAI_API_KEY is missing")

        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens

        client_kwargs = {
            "api_key": api_key.strip(),
            "base_url": base_url or None,
            # Single attempt per advisory call.
            "max_retries": 0,
        }
        if timeout_s is not None:
            client_kwargs["timeout"] = timeout_s
        self._client = OpenAI(**client_kwargs)

    @property
    def enabled(self) -> bool:
        return True

    @property
    def model(self) -> str:
        return self._model

    def generate(self, prompt: str, system_role: str) -> str | None:
        response = self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": system_role},
                {"role": "user", "content": prompt},
            ],
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        if not response.choices:
            return None
        content = response.choices[0].message.content
        return content or None
