from .job_matcher import calculate_overall_score, match_job

__all__ = ["calculate_overall_score", "match_job"]
