from __future__ import annotations

from typing import Iterable, List

from skillrecon.core import UnifiedSkillEntry
from skillrecon.scores import MIN_SCORE


def priority_value(entry: UnifiedSkillEntry) -> int:
    """importance_value, else relevance_value, else the floor value."""
    if entry.importance_value is not None:
        return entry.importance_value
    if entry.relevance_value is not None:
        return entry.relevance_value
    return MIN_SCORE


def rank_skills(entries: Iterable[UnifiedSkillEntry], n: int) -> List[UnifiedSkillEntry]:
    """
    Top-n entries of one framework scope.

    Gap entries rank above non-gap entries, then by priority_value, both
    descending. sorted() is stable, so ties keep their input order.
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise ValueError(f"n must be an int, got {n!r}")
    if n <= 0:
        return []

    ordered = sorted(entries, key=lambda e: (e.is_gap, priority_value(e)), reverse=True)
    return ordered[:n]
