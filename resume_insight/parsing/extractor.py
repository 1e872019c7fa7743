from __future__ import annotations

import re

from resume_insight.schemas import NAME_NOT_FOUND, EducationEntry, ExperienceEntry, StructuredProfile
from resume_insight.vocabulary import VocabularyTables, get_vocabulary

from .utils import contains_any, last_year, line_after, matching_markers, split_lines, vocabulary_hits

_EMAIL_RE = re.compile(r"[\w.-]+@[\w.-]+\.\w+", re.ASCII)
# Loose on purpose: dates and other digit runs can match.
_PHONE_RE = re.compile(r"(?:\+?\d{1,3}[-.\s]?)?(?:\(?\d{3}\)?[-.\s]?)?\d{3}[-.\s]?\d{4}", re.ASCII)
_MAX_EXPERIENCE_ENTRIES = 5


def extract_name(lines: list[str]) -> str:
    first = lines[0].strip() if lines else ""
    return first or NAME_NOT_FOUND


def extract_email(text: str) -> str:
    match = _EMAIL_RE.search(text)
    return match.group(0) if match else ""


def extract_phone(text: str) -> str:
    match = _PHONE_RE.search(text)
    return match.group(0) if match else ""


def extract_skills(text: str, vocabulary: VocabularyTables) -> list[str]:
    return vocabulary_hits(text, vocabulary.skills)


def extract_experience(lines: list[str], vocabulary: VocabularyTables) -> list[ExperienceEntry]:
    entries: list[ExperienceEntry] = []
    current: ExperienceEntry | None = None

    for index, line in enumerate(lines):
        if not contains_any(line, vocabulary.job_titles):
            continue
        if current is not None:
            entries.append(current)
        current = ExperienceEntry(title=line.strip(), company=line_after(lines, index))

    if current is not None:
        entries.append(current)

    return entries[:_MAX_EXPERIENCE_ENTRIES]


def extract_education(lines: list[str], vocabulary: VocabularyTables) -> list[EducationEntry]:
    education: list[EducationEntry] = []
    for index, line in enumerate(lines):
        for _ in matching_markers(line, vocabulary.degrees):
            institution = line_after(lines, index)
            education.append(
                EducationEntry(
                    degree=line.strip(),
                    institution=institution,
                    year=last_year(line) or last_year(institution),
                )
            )
    return education


def extract_certifications(lines: list[str], vocabulary: VocabularyTables) -> list[str]:
    found = [line.strip() for line in lines if matching_markers(line, vocabulary.certifications)]
    return list(dict.fromkeys(found))


def extract_profile(text: str, vocabulary: VocabularyTables | None = None) -> StructuredProfile:
    """Build a StructuredProfile from plain resume text.

    Every field falls back to an empty value when its pattern is absent, so
    this never raises for content reasons.
    """
    vocab = vocabulary or get_vocabulary()
    content = text or ""
    lines = split_lines(content)

    return StructuredProfile(
        name=extract_name(lines),
        email=extract_email(content),
        phone=extract_phone(content),
        skills=extract_skills(content, vocab),
        experience=extract_experience(lines, vocab),
        education=extract_education(lines, vocab),
        certifications=extract_certifications(lines, vocab),
    )
