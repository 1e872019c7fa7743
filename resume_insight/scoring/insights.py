from __future__ import annotations

from resume_insight.schemas import StructuredProfile
from resume_insight.vocabulary import VocabularyTables, get_vocabulary

from .rules import has_skill

MAX_MISSING_SKILLS = 6
MAX_RECOMMENDATIONS = 6

BASE_RECOMMENDATIONS = (
    "Add quantifiable achievements with metrics and numbers",
    "Use action verbs to start bullet points (Developed, Implemented, Optimized)",
    "Tailor your resume to match the job description keywords",
    "Keep resume length to 1-2 pages maximum",
    "Include links to GitHub, portfolio, or LinkedIn",
)


def identify_strengths(profile: StructuredProfile) -> list[str]:
    strengths: list[str] = []
    if len(profile.skills) >= 8:
        strengths.append("Strong technical skills - Multiple technologies listed")
    if len(profile.experience) >= 3:
        strengths.append("Diverse work experience across multiple roles")
    if profile.certifications:
        strengths.append("Professional certifications demonstrate commitment to growth")
    if profile.email and profile.phone:
        strengths.append("Complete contact information for easy reach")
    return strengths


def identify_weaknesses(profile: StructuredProfile) -> list[str]:
    weaknesses: list[str] = []
    if len(profile.skills) < 5:
        weaknesses.append("Limited technical skills listed - add more relevant technologies")
    if not profile.certifications:
        weaknesses.append("No certifications listed - consider adding relevant credentials")
    if len(profile.experience) < 2:
        weaknesses.append("Limited work experience shown - elaborate on projects and responsibilities")
    return weaknesses


def identify_missing_skills(
    skills: list[str],
    target_role: str | None,
    vocabulary: VocabularyTables | None = None,
) -> list[str]:
    vocab = vocabulary or get_vocabulary()
    recommended = vocab.recommended_skills_for(target_role)
    missing = [skill for skill in recommended if not has_skill(skills, skill)]
    return missing[:MAX_MISSING_SKILLS]


def generate_recommendations(profile: StructuredProfile) -> list[str]:
    recommendations = list(BASE_RECOMMENDATIONS)
    if not profile.certifications:
        recommendations.append("Consider obtaining relevant certifications for your target role")
    if len(profile.skills) < 8:
        recommendations.append("Expand your skills section with more relevant technologies")
    return recommendations[:MAX_RECOMMENDATIONS]


def extract_keywords(text: str, vocabulary: VocabularyTables | None = None) -> list[str]:
    vocab = vocabulary or get_vocabulary()
    lowered = (text or "").lower()
    return [keyword for keyword in vocab.resume_keywords if keyword.lower() in lowered]
