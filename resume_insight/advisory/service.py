from __future__ import annotations

import logging
import time
from typing import Any

from resume_insight.core.config import Settings, settings as default_settings
from resume_insight.schemas import AdvisoryStatus

from .factory import get_advisory_client
from .parsing import extract_json_object
from .types import AdvisoryClient, AdvisoryPrompt

logger = logging.getLogger(__name__)


class AdvisoryUnavailableError(RuntimeError):
    def __init__(self, message: str, *, code: str = "advisory_disabled"):
        super().__init__(message)
        self.code = code


class AdvisoryService:
    """Single-shot, fail-open access to the advisory capability."""

    def __init__(self, client: AdvisoryClient):
        self._client = client

    @property
    def enabled(self) -> bool:
        return self._client.enabled

    @property
    def model(self) -> str:
        return self._client.model

    def require_enabled(self) -> None:
        if not self._client.enabled:
            raise AdvisoryUnavailableError("Advisory service is not enabled. Set USE_AI and OPENAI_API_KEY.")

    def advise(self, request: AdvisoryPrompt) -> dict[str, Any] | None:
        if not self._client.enabled:
            logger.debug("advisory_call_skipped kind=%s reason=disabled", request.kind)
            return None

        started = time.perf_counter()
        try:
            raw = self._client.generate(request.prompt, request.system_role)
        except Exception as exc:  # noqa: BLE001 - rule-based fallback is expected
            logger.warning(
                "advisory_call_failed kind=%s model=%s prompt_len=%s: %s",
                request.kind,
                self._client.model,
                len(request.prompt),
                exc,
            )
            return None

        latency_ms = int((time.perf_counter() - started) * 1000)
        payload = extract_json_object(raw)
        if payload is None:
            logger.warning(
                "advisory_response_unparseable kind=%s model=%s latency_ms=%s response_len=%s",
                request.kind,
                self._client.model,
                latency_ms,
                len(raw or ""),
            )
            return None

        logger.info("advisory_call_ok kind=%s model=%s latency_ms=%s", request.kind, self._client.model, latency_ms)
        return payload


def get_advisory_service() -> AdvisoryService:
    return AdvisoryService(get_advisory_client())


def get_advisory_status(cfg: Settings | None = None) -> AdvisoryStatus:
    current = cfg or default_settings
    return AdvisoryStatus(
        enabled=current.use_ai,
        configured=current.advisory_configured,
        model=current.openai_model,
        status="active" if current.advisory_enabled else "disabled",
    )
