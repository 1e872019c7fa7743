from __future__ import annotations

import json
from typing import Any


def extract_json_object(text: str | None) -> dict[str, Any] | None:
    """Parse the span from the first "{" to the last "}" as a JSON object.

    Best effort only: braces are not balanced, so prose containing stray
    braces around the payload, or two JSON fragments in one reply, yields
    None rather than a partial result.
    """
    if not text:
        return None
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return None
    try:
        parsed = json.loads(text[start : end + 1])
    except (json.JSONDecodeError, RecursionError):
        return None
    return parsed if isinstance(parsed, dict) else None
