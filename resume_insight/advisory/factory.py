from functools import lru_cache

from resume_insight.core.config import Settings, settings as default_settings

from .providers import DisabledAdvisoryClient, OpenAIAdvisoryClient
from .types import AdvisoryClient


def build_advisory_client(cfg: Settings) -> AdvisoryClient:
    if not cfg.advisory_enabled:
        return DisabledAdvisoryClient(model=cfg.openai_model)

    return OpenAIAdvisoryClient(
        model=cfg.openai_model,
        api_key=cfg.openai_api_key or "",
        base_url=cfg.openai_base_url,
        timeout_s=cfg.advisory_timeout_s,
        temperature=cfg.advisory_temperature,
        max_tokens=cfg.advisory_max_tokens,
    )


@lru_cache(maxsize=1)
def get_advisory_client() -> AdvisoryClient:
    return build_advisory_client(default_settings)
