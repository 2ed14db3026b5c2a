from skillrecon.core.models import (  # noqa: F401
    BarPoint,
    ChartProjection,
    FrameworkSkillRecord,
    GapRecord,
    PieSlices,
    RadarPoint,
    SkillKey,
    StrengthRecord,
    UnifiedSkillEntry,
    skill_key,
)

__all__ = [
    "BarPoint",
    "ChartProjection",
    "FrameworkSkillRecord",
    "GapRecord",
    "PieSlices",
    "RadarPoint",
    "SkillKey",
    "StrengthRecord",
    "UnifiedSkillEntry",
    "skill_key",
]
