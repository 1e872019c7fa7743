from .resume_service import (
    analyze_resume,
    generate_career_path,
    generate_improvement_suggestions,
    match_resume_to_job,
)

__all__ = [
    "analyze_resume",
    "generate_career_path",
    "generate_improvement_suggestions",
    "match_resume_to_job",
]
