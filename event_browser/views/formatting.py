from __future__ import annotations

import re
from typing import Optional

_WORD_START = re.compile(r"\b\w")


def format_label(text: Optional[str]) -> str:
    """'very_low' -> 'Very Low'. Missing values render as ''."""
    if not text:
        return ""
    return _WORD_START.sub(lambda m: m.group(0).upper(), str(text).replace("_", " "))


def score_class(score: float) -> str:
    """CSS class for the score badge."""
    if score >= 80:
        return "score-excellent"
    if score >= 60:
        return "score-good"
    if score >= 40:
        return "score-fair"
    return "score-poor"
