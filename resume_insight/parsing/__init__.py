from .extractor import extract_profile

__all__ = ["extract_profile"]
