from .disabled_provider import DisabledAdvisoryClient
from .openai_provider import OpenAIAdvisoryClient

__all__ = ["DisabledAdvisoryClient", "OpenAIAdvisoryClient"]
