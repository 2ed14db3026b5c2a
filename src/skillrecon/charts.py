from __future__ import annotations

from typing import Mapping, Optional, Sequence, Tuple

from skillrecon.core import BarPoint, ChartProjection, PieSlices, RadarPoint, UnifiedSkillEntry
from skillrecon.frameworks import FrameworkScale, clamp_level, get_scale, parse_level
from skillrecon.ranking import priority_value, rank_skills

RADAR_LIMIT = 8


def entry_level(entry: UnifiedSkillEntry, scale: FrameworkScale) -> int:
    """Level on the framework axis; entries without a level label fall back to their priority."""
    if entry.level.strip():
        return parse_level(entry.level, scale)
    return clamp_level(priority_value(entry), scale)


def bar_point(entry: UnifiedSkillEntry, scale: FrameworkScale) -> BarPoint:
    level = entry_level(entry, scale)
    return BarPoint(
        name=entry.name,
        required_level=level if entry.required else 0,
        user_level=level if entry.user_has else 0,
        validated_level=level if entry.validated else 0,
        max_level=scale.max_level,
    )


def build_bar(entries: Sequence[UnifiedSkillEntry], scale: FrameworkScale) -> Tuple[BarPoint, ...]:
    return tuple(bar_point(e, scale) for e in entries)


def build_pie(entries: Sequence[UnifiedSkillEntry]) -> PieSlices:
    """Partition into validated / user-has-only / required-only; sums to len(entries)."""
    required_only = validated = user_has_only = 0
    for e in entries:
        if e.validated:
            validated += 1
        elif e.user_has:
            user_has_only += 1
        else:
            required_only += 1
    return PieSlices(required_only=required_only, validated=validated, user_has_only=user_has_only)


def build_radar(
    entries: Sequence[UnifiedSkillEntry],
    scale: FrameworkScale,
    *,
    limit: int = RADAR_LIMIT,
) -> Tuple[RadarPoint, ...]:
    out = []
    for e in rank_skills(entries, limit):
        p = bar_point(e, scale)
        out.append(
            RadarPoint(
                subject=e.name,
                required=p.required_level,
                user_has=p.user_level,
                validated=p.validated_level,
                gap=max(p.required_level - p.user_level, 0),
            )
        )
    return tuple(out)


def build_projection(
    framework: str,
    entries: Sequence[UnifiedSkillEntry],
    *,
    scales: Optional[Mapping[str, FrameworkScale]] = None,
    radar_limit: int = RADAR_LIMIT,
) -> ChartProjection:
    """
    All three projections for one framework scope.

    Raises UnknownFrameworkError when ``framework`` has no level scale.
    Entries from other frameworks are ignored.
    """
    scale = get_scale(framework, scales)
    scoped = [e for e in entries if e.framework == framework]
    return ChartProjection(
        framework=framework,
        max_level=scale.max_level,
        bar=build_bar(scoped, scale),
        pie=build_pie(scoped),
        radar=build_radar(scoped, scale, limit=radar_limit),
    )
