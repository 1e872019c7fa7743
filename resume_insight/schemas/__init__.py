from .advisory import (
    AdvisoryStatus,
    CareerPath,
    CareerPhase,
    PrioritySkill,
    ProjectIdea,
    SectionSuggestions,
    Suggestion,
)
from .analysis import AnalysisResult, ScoreSet
from .match import KeywordHit, MatchResult, MatchScores
from .profile import NAME_NOT_FOUND, EducationEntry, ExperienceEntry, StructuredProfile

__all__ = [
    "AdvisoryStatus",
    "AnalysisResult",
    "CareerPath",
    "CareerPhase",
    "EducationEntry",
    "ExperienceEntry",
    "KeywordHit",
    "MatchResult",
    "MatchScores",
    "NAME_NOT_FOUND",
    "PrioritySkill",
    "ProjectIdea",
    "ScoreSet",
    "SectionSuggestions",
    "StructuredProfile",
    "Suggestion",
]
