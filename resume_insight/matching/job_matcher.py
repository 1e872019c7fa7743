from __future__ import annotations

import re

from resume_insight.parsing.utils import vocabulary_hits
from resume_insight.schemas import KeywordHit, MatchResult, MatchScores, StructuredProfile
from resume_insight.scoring.rules import has_skill
from resume_insight.scoring.utils import clamp_score, contains_casefold, percentage, round_half_up
from resume_insight.vocabulary import VocabularyTables, get_vocabulary

SKILLS_WEIGHT = 0.4
EXPERIENCE_WEIGHT = 0.35
KEYWORDS_WEIGHT = 0.25

MAX_MATCH_RECOMMENDATIONS = 5
LOW_MATCH_THRESHOLD = 70

_YEARS_RE = re.compile(r"(\d+)\+?\s*years?", re.IGNORECASE)


def extract_job_skills(job_description_text: str, vocabulary: VocabularyTables) -> list[str]:
    return vocabulary_hits(job_description_text, vocabulary.skills)


def extract_job_keywords(job_description_text: str, vocabulary: VocabularyTables) -> list[str]:
    return vocabulary_hits(job_description_text, vocabulary.job_keywords)


def match_skills(profile_skills: list[str], job_skills: list[str]) -> tuple[list[str], list[str]]:
    """Return (matched, missing).

    ``matched`` is drawn from the profile and ``missing`` from the job, so the
    two lists are not complements of each other. With job skills
    ["Java", "JavaScript"] and profile skills ["JavaScript"], one skill is
    matched and none is missing; with profile skills ["Java", "JavaScript"]
    and job skills ["Java"], two skills are matched.
    """
    matched = [
        skill for skill in profile_skills if any(contains_casefold(skill, job_skill) for job_skill in job_skills)
    ]
    missing = [job_skill for job_skill in job_skills if not has_skill(profile_skills, job_skill)]
    return matched, missing


def count_occurrences(text: str, keyword: str) -> int:
    return len(re.findall(re.escape(keyword), text, re.IGNORECASE))


def match_keywords(resume_text: str, job_keywords: list[str]) -> tuple[list[KeywordHit], list[str]]:
    lowered = (resume_text or "").lower()
    matched: list[KeywordHit] = []
    missing: list[str] = []
    for keyword in job_keywords:
        if keyword.lower() in lowered:
            matched.append(KeywordHit(keyword=keyword, count=count_occurrences(lowered, keyword)))
        else:
            missing.append(keyword)
    return matched, missing


def calculate_experience_match(profile: StructuredProfile, job_description_text: str) -> int:
    role_count = len(profile.experience)
    year_match = _YEARS_RE.search(job_description_text or "")

    if not year_match:
        return 85 if role_count > 0 else 60

    if role_count == 0:
        return 50

    required_years = int(year_match.group(1))
    if required_years <= 2 and role_count >= 1:
        return 90
    if required_years <= 5 and role_count >= 2:
        return 90
    if required_years > 5 and role_count >= 3:
        return 85
    return 75


def calculate_overall_score(skills: int, experience: int, keywords: int) -> int:
    weighted = skills * SKILLS_WEIGHT + experience * EXPERIENCE_WEIGHT + keywords * KEYWORDS_WEIGHT
    return clamp_score(round_half_up(weighted))


def generate_match_recommendations(result: MatchResult) -> list[str]:
    scores = result.match_scores
    recommendations: list[str] = []

    if scores.overall < LOW_MATCH_THRESHOLD:
        recommendations.append("Your match score is below 70% - consider adding missing skills and keywords")
    if result.missing_skills:
        recommendations.append(
            f"Add these {len(result.missing_skills)} missing skills: {', '.join(result.missing_skills[:3])}"
        )
    if result.missing_keywords:
        recommendations.append(f"Incorporate these keywords: {', '.join(result.missing_keywords[:3])}")
    if scores.skills < LOW_MATCH_THRESHOLD:
        recommendations.append("Focus on learning the key technical skills mentioned in the job description")
    if scores.keywords < LOW_MATCH_THRESHOLD:
        recommendations.append("Tailor your resume by adding relevant keywords from the job description")
    recommendations.append("Customize your professional summary to align with the job requirements")

    return recommendations[:MAX_MATCH_RECOMMENDATIONS]


def match_job(
    profile: StructuredProfile,
    job_description_text: str,
    *,
    resume_text: str = "",
    vocabulary: VocabularyTables | None = None,
) -> MatchResult:
    """Rule-based comparison of a profile against a job description.

    ``resume_text`` is the raw resume the profile was extracted from; keyword
    hits and counts are taken from it.
    """
    vocab = vocabulary or get_vocabulary()
    jd_text = job_description_text or ""

    job_skills = extract_job_skills(jd_text, vocab)
    job_keywords = extract_job_keywords(jd_text, vocab)

    matched_skills, missing_skills = match_skills(profile.skills, job_skills)
    matched_keywords, missing_keywords = match_keywords(resume_text, job_keywords)

    skills_score = clamp_score(percentage(len(matched_skills), len(job_skills)))
    keywords_score = clamp_score(percentage(len(matched_keywords), len(job_keywords)))
    experience_score = calculate_experience_match(profile, jd_text)

    result = MatchResult(
        match_scores=MatchScores(
            overall=calculate_overall_score(skills_score, experience_score, keywords_score),
            skills=skills_score,
            experience=experience_score,
            keywords=keywords_score,
        ),
        matched_skills=matched_skills,
        missing_skills=missing_skills,
        matched_keywords=matched_keywords,
        missing_keywords=missing_keywords,
    )
    result.recommendations = generate_match_recommendations(result)
    return result
