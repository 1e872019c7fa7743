from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

_DEFAULT_VOCABULARY_PATH = Path(__file__).with_name("vocabulary.yaml")

_LIST_KEYS = (
    "skills",
    "job_titles",
    "degrees",
    "certifications",
    "resume_keywords",
    "job_keywords",
)
_ROLE_KEYS = ("role_required_skills", "role_recommended_skills")


@dataclass(frozen=True)
class SectionTip:
    type: str
    improved: str
    reasoning: str


@dataclass(frozen=True)
class VocabularyTables:
    """Read-only reference data shared by every extraction and scoring call."""

    skills: tuple[str, ...]
    job_titles: tuple[str, ...]
    degrees: tuple[str, ...]
    certifications: tuple[str, ...]
    resume_keywords: tuple[str, ...]
    job_keywords: tuple[str, ...]
    role_required_skills: Mapping[str, tuple[str, ...]]
    role_recommended_skills: Mapping[str, tuple[str, ...]]
    section_tips: Mapping[str, tuple[SectionTip, ...]]

    def required_skills_for(self, role: str | None) -> tuple[str, ...]:
        return self.role_required_skills.get((role or "").strip(), ())

    def recommended_skills_for(self, role: str | None) -> tuple[str, ...]:
        return self.role_recommended_skills.get((role or "").strip(), ())

    def tips_for(self, section: str | None) -> tuple[SectionTip, ...]:
        key = (section or "").strip().lower()
        return self.section_tips.get(key) or self.section_tips.get("overall", ())


def _string_tuple(raw: Any, *, field: str, path: Path) -> tuple[str, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise RuntimeError(f"Invalid vocabulary '{path}': '{field}' must be a list.")
    return tuple(str(item).strip() for item in raw if str(item).strip())


def _role_table(raw: Any, *, field: str, path: Path) -> Mapping[str, tuple[str, ...]]:
    if raw is None:
        return MappingProxyType({})
    if not isinstance(raw, dict):
        raise RuntimeError(f"Invalid vocabulary '{path}': '{field}' must be a mapping.")
    table = {
        str(role).strip(): _string_tuple(skills, field=f"{field}.{role}", path=path)
        for role, skills in raw.items()
    }
    return MappingProxyType(table)


def _section_tips(raw: Any, *, path: Path) -> Mapping[str, tuple[SectionTip, ...]]:
    if raw is None:
        return MappingProxyType({})
    if not isinstance(raw, dict):
        raise RuntimeError(f"Invalid vocabulary '{path}': 'section_tips' must be a mapping.")
    tips: dict[str, tuple[SectionTip, ...]] = {}
    for section, items in raw.items():
        entries = []
        for item in items or []:
            if not isinstance(item, dict):
                continue
            entries.append(
                SectionTip(
                    type=str(item.get("type", "")).strip(),
                    improved=str(item.get("improved", "")).strip(),
                    reasoning=str(item.get("reasoning", "")).strip(),
                )
            )
        tips[str(section).strip().lower()] = tuple(entries)
    return MappingProxyType(tips)


def build_vocabulary(raw: Mapping[str, Any], *, source: Path | None = None) -> VocabularyTables:
    path = source or _DEFAULT_VOCABULARY_PATH
    lists = {key: _string_tuple(raw.get(key), field=key, path=path) for key in _LIST_KEYS}
    roles = {key: _role_table(raw.get(key), field=key, path=path) for key in _ROLE_KEYS}
    return VocabularyTables(
        **lists,
        **roles,
        section_tips=_section_tips(raw.get("section_tips"), path=path),
    )


def load_vocabulary(path: str | Path | None = None) -> VocabularyTables:
    """Load vocabulary tables from YAML; defaults to the packaged vocabulary.yaml."""
    source = Path(path) if path else _DEFAULT_VOCABULARY_PATH
    if not source.exists():
        raise RuntimeError(f"Vocabulary file not found at '{source}'.")

    try:
        raw = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read vocabulary '{source}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in vocabulary '{source}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid vocabulary '{source}': expected a top-level mapping.")

    return build_vocabulary(parsed, source=source)
