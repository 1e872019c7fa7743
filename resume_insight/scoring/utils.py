from __future__ import annotations

import math
from typing import Any


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_score(value: Any, default: int = 0) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return max(0, min(100, number))


def percentage(part: int, total: int) -> int:
    return round_half_up(part / max(total, 1) * 100)


def contains_casefold(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()
