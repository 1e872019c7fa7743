from __future__ import annotations

from resume_insight.schemas import ScoreSet, StructuredProfile
from resume_insight.vocabulary import VocabularyTables, get_vocabulary

from .utils import clamp_score, contains_casefold, round_half_up

ATS_BASE_SCORE = 60
RESUME_BASE_SCORE = 50
UNKNOWN_ROLE_SKILL_MATCH = 75

# Pipes and mis-decoded arrows usually come from tables or multi-column layouts.
_LAYOUT_ARTIFACTS = ("|", "â†’")


def calculate_ats_score(text: str, profile: StructuredProfile) -> int:
    score = ATS_BASE_SCORE
    if profile.email:
        score += 5
    if profile.phone:
        score += 5
    score += min(len(profile.skills) * 2, 20)
    if profile.experience:
        score += 10
    if profile.education:
        score += 5
    content = text or ""
    # An empty document has no layout to judge.
    if content and not any(artifact in content for artifact in _LAYOUT_ARTIFACTS):
        score += 5
    return clamp_score(score)


def calculate_resume_score(profile: StructuredProfile) -> int:
    score = RESUME_BASE_SCORE

    skill_count = len(profile.skills)
    if skill_count >= 8:
        score += 15
    elif skill_count >= 5:
        score += 10

    experience_count = len(profile.experience)
    if experience_count >= 3:
        score += 15
    elif experience_count >= 1:
        score += 10

    if profile.education:
        score += 10
    if profile.certifications:
        score += 10
    if profile.email and profile.phone:
        score += 10

    return clamp_score(score)


def has_skill(skills: list[str], term: str) -> bool:
    return any(contains_casefold(skill, term) for skill in skills)


def calculate_skill_match(
    skills: list[str],
    target_role: str | None,
    vocabulary: VocabularyTables | None = None,
) -> int:
    vocab = vocabulary or get_vocabulary()
    required = vocab.required_skills_for(target_role)
    if not required:
        return UNKNOWN_ROLE_SKILL_MATCH

    matched = sum(1 for requirement in required if has_skill(skills, requirement))
    return clamp_score(round_half_up(min(matched / len(required) * 100, 100)))


def score_profile(
    text: str,
    profile: StructuredProfile,
    target_role: str | None,
    vocabulary: VocabularyTables | None = None,
) -> ScoreSet:
    return ScoreSet(
        ats_score=calculate_ats_score(text, profile),
        resume_score=calculate_resume_score(profile),
        skill_match=calculate_skill_match(profile.skills, target_role, vocabulary),
    )
