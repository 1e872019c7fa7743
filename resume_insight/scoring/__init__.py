from .insights import (
    extract_keywords,
    generate_recommendations,
    identify_missing_skills,
    identify_strengths,
    identify_weaknesses,
)
from .rules import calculate_ats_score, calculate_resume_score, calculate_skill_match, score_profile

__all__ = [
    "calculate_ats_score",
    "calculate_resume_score",
    "calculate_skill_match",
    "extract_keywords",
    "generate_recommendations",
    "identify_missing_skills",
    "identify_strengths",
    "identify_weaknesses",
    "score_profile",
]
