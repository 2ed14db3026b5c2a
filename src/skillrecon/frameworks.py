from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

# ---------------------------------------------------------------------------
# Framework scopes and their numeric level axes.
#
# The upper bound of the level axis is a property of the framework, never of
# an individual skill. Charts for a framework with no registered scale are a
# configuration error.
# ---------------------------------------------------------------------------

GENERAL = "General"
SFIA_9 = "SFIA 9"
DIGCOMP_22 = "DigComp 2.2"


class UnknownFrameworkError(ValueError):
    """Raised when a framework has no registered level scale."""


@dataclass(frozen=True)
class FrameworkScale:
    name: str
    max_level: int


BUILTIN_SCALES: Mapping[str, FrameworkScale] = {
    SFIA_9: FrameworkScale(SFIA_9, 7),          # seven levels of responsibility
    DIGCOMP_22: FrameworkScale(DIGCOMP_22, 8),  # eight proficiency levels
    GENERAL: FrameworkScale(GENERAL, 7),
}

# Word levels used by generated reports; matched after digit extraction fails.
WORD_LEVELS: Mapping[str, int] = {
    "foundation": 1,
    "basic": 1,
    "beginner": 1,
    "intermediate": 3,
    "advanced": 5,
    "expert": 7,
    "specialized": 7,
    "master": 7,
}

_DIGITS = re.compile(r"(\d+)")


def build_scales(overrides: Optional[Mapping[str, int]] = None) -> Dict[str, FrameworkScale]:
    """Built-in scales updated with ``{framework: max_level}`` overrides."""
    out = dict(BUILTIN_SCALES)
    for name, max_level in (overrides or {}).items():
        out[name] = FrameworkScale(name, max_level)
    return out


def get_scale(framework: str, scales: Optional[Mapping[str, FrameworkScale]] = None) -> FrameworkScale:
    scales = BUILTIN_SCALES if scales is None else scales
    scale = scales.get(framework)
    if scale is None:
        known = ", ".join(sorted(scales))
        raise UnknownFrameworkError(f"No level scale registered for framework '{framework}' (known: {known})")
    if not _valid_max_level(scale.max_level):
        raise UnknownFrameworkError(f"Invalid max_level for framework '{framework}': {scale.max_level!r}")
    return scale


def clamp_level(value: int, scale: FrameworkScale) -> int:
    return max(1, min(scale.max_level, value))


def parse_level(label: Optional[str], scale: FrameworkScale) -> int:
    """
    Level label -> integer on the framework axis.

    "Level 4" / "4" / "L4" -> 4; word levels via WORD_LEVELS; anything
    else -> 1. Always clamped into [1, scale.max_level].
    """
    text = (label or "").strip().lower()
    m = _DIGITS.search(text)
    if m:
        return clamp_level(int(m.group(1)), scale)
    return clamp_level(WORD_LEVELS.get(text, 1), scale)


def _valid_max_level(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate_scales(scales: Mapping[str, object], *, strict: bool = True) -> List[str]:
    """
    Validate ``{framework: max_level}`` (or ``{framework: FrameworkScale}``).
    Returns human-readable issues; raises ValueError when strict and any exist.
    """
    issues: List[str] = []
    for name, value in scales.items():
        if not isinstance(name, str) or not name.strip():
            issues.append(f"framework name must be a non-empty string: {name!r}")
            continue
        max_level = value.max_level if isinstance(value, FrameworkScale) else value
        if not _valid_max_level(max_level):
            issues.append(f"{name}: max_level must be a positive int, got {max_level!r}")

    if strict and issues:
        raise ValueError("Framework scale validation failed:\n- " + "\n- ".join(issues))
    return issues
