from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


# (framework, lowercased skill name)
SkillKey = Tuple[str, str]


def skill_key(framework: str, name: str) -> SkillKey:
    return (framework.strip(), name.strip().lower())


@dataclass(frozen=True)
class FrameworkSkillRecord:
    """A skill a framework declares relevant to the target role."""

    name: str
    framework: str
    level: str = ""
    description: str = ""


@dataclass(frozen=True)
class GapRecord:
    """Assertion that a skill is required but not held at the required level."""

    name: str
    importance: str = ""
    description: str = ""
    framework: Optional[str] = None


@dataclass(frozen=True)
class StrengthRecord:
    """Assertion that the user holds (and has validated) a skill."""

    name: str
    level: str = ""
    relevance: str = ""
    description: str = ""
    framework: Optional[str] = None


@dataclass(frozen=True)
class UnifiedSkillEntry:
    """Reconciled view of one skill inside one framework scope."""

    name: str
    framework: str
    level: str = ""
    description: str = ""
    required: bool = False
    validated: bool = False
    user_has: bool = False
    importance: Optional[str] = None
    importance_value: Optional[int] = None    # 1..4
    relevance: Optional[str] = None
    relevance_value: Optional[int] = None     # 1..4
    gap_description: Optional[str] = None
    strength_description: Optional[str] = None

    @property
    def key(self) -> SkillKey:
        return skill_key(self.framework, self.name)

    @property
    def is_gap(self) -> bool:
        return self.gap_description is not None

    def as_json(self) -> dict:
        return {
            "name": self.name,
            "framework": self.framework,
            "level": self.level,
            "description": self.description,
            "required": self.required,
            "validated": self.validated,
            "userHas": self.user_has,
            "importance": self.importance,
            "importanceValue": self.importance_value,
            "relevance": self.relevance,
            "relevanceValue": self.relevance_value,
            "gapDescription": self.gap_description,
            "strengthDescription": self.strength_description,
        }


@dataclass(frozen=True)
class BarPoint:
    name: str
    required_level: int
    user_level: int
    validated_level: int
    max_level: int

    def as_json(self) -> dict:
        return {
            "name": self.name,
            "requiredLevel": self.required_level,
            "userLevel": self.user_level,
            "validatedLevel": self.validated_level,
            "maxLevel": self.max_level,
        }


@dataclass(frozen=True)
class PieSlices:
    required_only: int
    validated: int
    user_has_only: int

    @property
    def total(self) -> int:
        return self.required_only + self.validated + self.user_has_only

    def as_json(self) -> dict:
        return {
            "requiredOnly": self.required_only,
            "validated": self.validated,
            "userHasOnly": self.user_has_only,
        }


@dataclass(frozen=True)
class RadarPoint:
    subject: str
    required: int
    user_has: int
    validated: int
    gap: int

    def as_json(self) -> dict:
        return {
            "subject": self.subject,
            "required": self.required,
            "userHas": self.user_has,
            "validated": self.validated,
            "gap": self.gap,
        }


@dataclass(frozen=True)
class ChartProjection:
    """Bar/pie/radar inputs for one framework scope."""

    framework: str
    max_level: int
    bar: Tuple[BarPoint, ...]
    pie: PieSlices
    radar: Tuple[RadarPoint, ...]

    @property
    def is_empty(self) -> bool:
        return self.pie.total == 0

    def as_json(self) -> dict:
        return {
            "framework": self.framework,
            "maxLevel": self.max_level,
            "bar": [p.as_json() for p in self.bar],
            "pie": self.pie.as_json(),
            "radar": [p.as_json() for p in self.radar],
        }
