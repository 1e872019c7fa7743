from functools import lru_cache

from resume_insight.core.config import settings

from .tables import SectionTip, VocabularyTables, build_vocabulary, load_vocabulary


@lru_cache(maxsize=1)
def get_vocabulary() -> VocabularyTables:
    return load_vocabulary(settings.vocabulary_path)


__all__ = ["SectionTip", "VocabularyTables", "build_vocabulary", "get_vocabulary", "load_vocabulary"]
