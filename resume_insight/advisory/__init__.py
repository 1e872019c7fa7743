from .parsing import extract_json_object
from .service import AdvisoryService, AdvisoryUnavailableError, get_advisory_service, get_advisory_status
from .types import AdvisoryClient, AdvisoryKind, AdvisoryPrompt

__all__ = [
    "AdvisoryClient",
    "AdvisoryKind",
    "AdvisoryPrompt",
    "AdvisoryService",
    "AdvisoryUnavailableError",
    "extract_json_object",
    "get_advisory_service",
    "get_advisory_status",
]
