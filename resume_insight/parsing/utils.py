from __future__ import annotations

import re

_YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")


def split_lines(text: str) -> list[str]:
    # Only "\n" separates lines; "\r" is removed by strip() on each line.
    return text.split("\n")


def line_after(lines: list[str], index: int) -> str:
    if index + 1 < len(lines):
        return lines[index + 1].strip()
    return ""


def contains_any(text: str, markers: tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(marker.lower() in lowered for marker in markers)


def matching_markers(text: str, markers: tuple[str, ...]) -> list[str]:
    """Markers found in text, case-sensitive, in marker order."""
    return [marker for marker in markers if marker in text]


def last_year(text: str) -> str:
    years = _YEAR_RE.findall(text)
    return years[-1] if years else ""


def vocabulary_hits(text: str, vocabulary: tuple[str, ...]) -> list[str]:
    lowered = text.lower()
    found = [term for term in vocabulary if term.lower() in lowered]
    return list(dict.fromkeys(found))
