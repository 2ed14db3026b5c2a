from __future__ import annotations

from typing import Mapping, Optional

# ---------------------------------------------------------------------------
# Categorical label -> 1..4 score.
#
# Unknown, empty or missing labels resolve to DEFAULT_SCORE ("medium").
# ---------------------------------------------------------------------------

MIN_SCORE = 1
MAX_SCORE = 4
DEFAULT_SCORE = 2

IMPORTANCE_SCALE: Mapping[str, int] = {
    "low": 1,
    "medium": 2,
    "high": 3,
    "critical": 4,
}

RELEVANCE_SCALE: Mapping[str, int] = {
    "low": 1,
    "medium": 2,
    "high": 3,
    "very high": 4,
}


def _label_key(label: object) -> str:
    if not isinstance(label, str):
        return ""
    # "Very  High" -> "very high"
    return " ".join(label.split()).lower()


def _lookup(scale: Mapping[str, int], label: object) -> int:
    return scale.get(_label_key(label), DEFAULT_SCORE)


def map_importance(label: Optional[str]) -> int:
    """Importance label (low/medium/high/critical) -> 1..4."""
    return _lookup(IMPORTANCE_SCALE, label)


def map_relevance(label: Optional[str]) -> int:
    """Relevance label (low/medium/high/very high) -> 1..4."""
    return _lookup(RELEVANCE_SCALE, label)


def is_known_importance(label: Optional[str]) -> bool:
    return _label_key(label) in IMPORTANCE_SCALE


def is_known_relevance(label: Optional[str]) -> bool:
    return _label_key(label) in RELEVANCE_SCALE
