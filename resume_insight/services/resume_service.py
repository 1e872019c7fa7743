from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from resume_insight.advisory import AdvisoryService, get_advisory_service
from resume_insight.advisory.prompts import (
    career_path_prompt,
    job_match_prompt,
    resume_analysis_prompt,
    section_suggestions_prompt,
)
from resume_insight.matching import match_job
from resume_insight.parsing import extract_profile
from resume_insight.schemas import (
    AnalysisResult,
    CareerPath,
    CareerPhase,
    MatchResult,
    PrioritySkill,
    ProjectIdea,
    ScoreSet,
    SectionSuggestions,
    StructuredProfile,
    Suggestion,
)
from resume_insight.scoring import (
    extract_keywords,
    generate_recommendations,
    identify_missing_skills,
    identify_strengths,
    identify_weaknesses,
    score_profile,
)
from resume_insight.scoring.utils import clamp_score, round_half_up
from resume_insight.vocabulary import VocabularyTables, get_vocabulary

logger = logging.getLogger(__name__)

DEFAULT_TARGET_ROLE = "Software Engineer"
DEFAULT_EXPERIENCE_LEVEL = "mid"
SECTIONS = ("summary", "experience", "skills", "overall")

_SKILLS_PER_PHASE = 2
_MONTHS_PER_PHASE = 3


def _advisory_score(value: Any, default: int) -> int:
    raw = value.get("score") if isinstance(value, dict) else value
    if raw is None or isinstance(raw, bool):
        return default
    try:
        return clamp_score(round_half_up(float(raw)), default=default)
    except (TypeError, ValueError, OverflowError):
        return default


def _advisory_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item).strip() for item in value if str(item).strip()]


def _resolve(advisory: AdvisoryService | None) -> AdvisoryService:
    return advisory if advisory is not None else get_advisory_service()


def analyze_resume(
    resume_text: str,
    target_role: str | None = None,
    experience_level: str | None = None,
    *,
    profile: StructuredProfile | None = None,
    vocabulary: VocabularyTables | None = None,
    advisory: AdvisoryService | None = None,
) -> AnalysisResult:
    """Score a resume and derive insights, preferring advisory output when available.

    ``experience_level`` is only forwarded to advisory prompts; rule-based
    scores do not depend on it.
    """
    vocab = vocabulary or get_vocabulary()
    text = resume_text or ""
    extracted = profile or extract_profile(text, vocab)
    role = (target_role or "").strip()

    scores = score_profile(text, extracted, role, vocab)
    keywords = extract_keywords(text, vocab)
    baseline = AnalysisResult(
        scores=scores,
        strengths=identify_strengths(extracted),
        weaknesses=identify_weaknesses(extracted),
        missing_skills=identify_missing_skills(extracted.skills, role, vocab),
        recommendations=generate_recommendations(extracted),
        keywords=keywords,
        advisory_powered=False,
    )

    request = resume_analysis_prompt(
        text,
        extracted,
        role or DEFAULT_TARGET_ROLE,
        (experience_level or "").strip() or DEFAULT_EXPERIENCE_LEVEL,
    )
    payload = _resolve(advisory).advise(request)
    if payload is None:
        return baseline

    return AnalysisResult(
        scores=ScoreSet(
            ats_score=_advisory_score(payload.get("atsScore"), scores.ats_score),
            resume_score=_advisory_score(payload.get("resumeScore"), scores.resume_score),
            skill_match=scores.skill_match,
        ),
        strengths=_advisory_list(payload.get("strengths")),
        weaknesses=_advisory_list(payload.get("weaknesses")),
        missing_skills=_advisory_list(payload.get("missingSkills")),
        recommendations=_advisory_list(payload.get("recommendations")),
        keywords=keywords,
        advisory_powered=True,
    )


def match_resume_to_job(
    resume_text: str,
    job_description_text: str,
    *,
    profile: StructuredProfile | None = None,
    vocabulary: VocabularyTables | None = None,
    advisory: AdvisoryService | None = None,
) -> MatchResult:
    vocab = vocabulary or get_vocabulary()
    text = resume_text or ""
    jd_text = job_description_text or ""
    extracted = profile or extract_profile(text, vocab)

    result = match_job(extracted, jd_text, resume_text=text, vocabulary=vocab)

    insights = _resolve(advisory).advise(job_match_prompt(text, jd_text, result))
    if insights is not None:
        result.advisory_insights = insights
        result.advisory_powered = True
    return result


def build_rule_based_career_path(
    profile: StructuredProfile,
    target_role: str | None,
    vocabulary: VocabularyTables | None = None,
) -> CareerPath:
    vocab = vocabulary or get_vocabulary()
    role = (target_role or "").strip()
    if not vocab.recommended_skills_for(role):
        return CareerPath(timeline="Not available")

    missing = identify_missing_skills(profile.skills, role, vocab)
    if not missing:
        return CareerPath(timeline="Ready to apply")

    phases: list[CareerPhase] = []
    for index in range(0, len(missing), _SKILLS_PER_PHASE):
        chunk = missing[index : index + _SKILLS_PER_PHASE]
        start = len(phases) * _MONTHS_PER_PHASE
        phases.append(
            CareerPhase(
                phase=f"Learn {' and '.join(chunk)}",
                duration=f"{start}-{start + _MONTHS_PER_PHASE} months",
                skills=chunk,
                description=f"Build working knowledge of {', '.join(chunk)} and apply it in a small project.",
            )
        )

    priority_skills = [
        PrioritySkill(
            skill=skill,
            priority="high" if position < 2 else "medium",
            estimated_time="4-6 weeks",
            reason=f"Commonly expected for {role} roles",
        )
        for position, skill in enumerate(missing)
    ]
    project_skills = list(dict.fromkeys(missing[:2] + profile.skills[:2]))
    project_ideas = [
        ProjectIdea(
            title=f"{role.replace('-', ' ').title()} portfolio project",
            description=f"Ship a small end-to-end project that uses {', '.join(project_skills)}.",
            skills=project_skills,
            duration=f"{_MONTHS_PER_PHASE * 2} weeks",
        )
    ]
    return CareerPath(
        timeline=f"{len(phases) * _MONTHS_PER_PHASE} months",
        phases=phases,
        priority_skills=priority_skills,
        project_ideas=project_ideas,
    )


def generate_career_path(
    profile: StructuredProfile,
    target_role: str | None = None,
    experience_level: str | None = None,
    *,
    vocabulary: VocabularyTables | None = None,
    advisory: AdvisoryService | None = None,
) -> CareerPath:
    baseline = build_rule_based_career_path(profile, target_role, vocabulary)
    request = career_path_prompt(
        profile,
        (target_role or "").strip() or DEFAULT_TARGET_ROLE,
        (experience_level or "").strip() or DEFAULT_EXPERIENCE_LEVEL,
    )
    payload = _resolve(advisory).advise(request)
    if payload is None:
        return baseline

    try:
        return CareerPath.model_validate({**payload, "advisoryPowered": True})
    except ValidationError as exc:
        logger.warning("advisory_career_path_invalid errors=%s", exc.error_count())
        return baseline


def normalize_section(section: str | None) -> str:
    key = (section or "").strip().lower()
    return key if key in SECTIONS else "overall"


def build_rule_based_suggestions(section: str, vocabulary: VocabularyTables | None = None) -> SectionSuggestions:
    vocab = vocabulary or get_vocabulary()
    key = normalize_section(section)
    tips = vocab.tips_for(key)
    return SectionSuggestions(
        section=key,
        suggestions=[Suggestion(type=tip.type, improved=tip.improved, reasoning=tip.reasoning) for tip in tips],
        examples=[],
    )


def generate_improvement_suggestions(
    content: str,
    section: str | None = None,
    *,
    vocabulary: VocabularyTables | None = None,
    advisory: AdvisoryService | None = None,
) -> SectionSuggestions:
    key = normalize_section(section)
    baseline = build_rule_based_suggestions(key, vocabulary)
    payload = _resolve(advisory).advise(section_suggestions_prompt(content or "", key))
    if payload is None:
        return baseline

    try:
        return SectionSuggestions.model_validate({**payload, "section": key, "advisoryPowered": True})
    except ValidationError as exc:
        logger.warning("advisory_suggestions_invalid section=%s errors=%s", key, exc.error_count())
        return baseline
