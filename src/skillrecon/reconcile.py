from __future__ import annotations

from dataclasses import replace
from typing import Callable, Dict, Iterable, List, Optional

from skillrecon.core import (
    FrameworkSkillRecord,
    GapRecord,
    SkillKey,
    StrengthRecord,
    UnifiedSkillEntry,
    skill_key,
)
from skillrecon.frameworks import GENERAL
from skillrecon.scores import is_known_importance, is_known_relevance, map_importance, map_relevance

Registry = Dict[SkillKey, UnifiedSkillEntry]
Logger = Optional[Callable[[str], None]]


def _declared(framework: Optional[str]) -> Optional[str]:
    if framework is None:
        return None
    framework = framework.strip()
    return framework or None


def _check_label(label: Optional[str], known: Callable[[Optional[str]], bool], kind: str, logger: Logger) -> None:
    # blank labels are simply absent; anything else unrecognised scores as medium
    if logger and isinstance(label, str) and label.strip() and not known(label):
        logger(f"UNKNOWN_{kind}:{label.strip()}")


def find_entry(registry: Registry, name: str, framework: Optional[str]) -> Optional[SkillKey]:
    """
    Locate an entry by case-insensitive name.

    With a declared framework only that scope is searched. Without one, the
    first name match in insertion order wins, across all frameworks.
    """
    declared = _declared(framework)
    if declared is not None:
        key = skill_key(declared, name)
        return key if key in registry else None

    target = name.strip().lower()
    for key in registry:
        if key[1] == target:
            return key
    return None


def _seed(registry: Registry, records: Iterable[FrameworkSkillRecord], logger: Logger) -> None:
    for rec in records:
        if not rec.name.strip():
            if logger:
                logger(f"SKIPPED_FRAMEWORK_SKILL:{rec.framework}:blank name")
            continue
        key = skill_key(rec.framework, rec.name)
        if key in registry:
            # first catalog record wins
            if logger:
                logger(f"DUPLICATE_FRAMEWORK_SKILL:{key[0]}:{key[1]}")
            continue
        entry = UnifiedSkillEntry(
            name=rec.name.strip(),
            framework=key[0],
            level=rec.level,
            description=rec.description,
            required=True,
            validated=False,
            user_has=False,
        )
        registry[entry.key] = entry


def _apply_gaps(registry: Registry, gaps: Iterable[GapRecord], default_framework: str, logger: Logger) -> None:
    for gap in gaps:
        if not gap.name.strip():
            if logger:
                logger("SKIPPED_GAP:blank name")
            continue

        _check_label(gap.importance, is_known_importance, "IMPORTANCE", logger)
        importance_value = map_importance(gap.importance)
        key = find_entry(registry, gap.name, gap.framework)
        if key is not None:
            registry[key] = replace(
                registry[key],
                gap_description=gap.description,
                importance=gap.importance,
                importance_value=importance_value,
                required=True,
                user_has=False,
            )
            continue

        framework = _declared(gap.framework) or default_framework
        entry = UnifiedSkillEntry(
            name=gap.name.strip(),
            framework=framework,
            description=gap.description,
            required=True,
            validated=False,
            user_has=False,
            importance=gap.importance,
            importance_value=importance_value,
            gap_description=gap.description,
        )
        registry[entry.key] = entry


def _apply_strengths(
    registry: Registry,
    strengths: Iterable[StrengthRecord],
    default_framework: str,
    logger: Logger,
) -> None:
    for strength in strengths:
        if not strength.name.strip():
            if logger:
                logger("SKIPPED_STRENGTH:blank name")
            continue

        _check_label(strength.relevance, is_known_relevance, "RELEVANCE", logger)
        relevance_value = map_relevance(strength.relevance)
        key = find_entry(registry, strength.name, strength.framework)
        if key is not None:
            existing = registry[key]
            if existing.gap_description is not None and logger:
                logger(f"GAP_AND_STRENGTH:{key[0]}:{key[1]}")
            registry[key] = replace(
                existing,
                strength_description=strength.description,
                relevance=strength.relevance,
                relevance_value=relevance_value,
                user_has=True,
                validated=True,
            )
            continue

        framework = _declared(strength.framework) or default_framework
        entry = UnifiedSkillEntry(
            name=strength.name.strip(),
            framework=framework,
            level=strength.level,
            description=strength.description,
            required=False,
            validated=True,
            user_has=True,
            relevance=strength.relevance,
            relevance_value=relevance_value,
            strength_description=strength.description,
        )
        registry[entry.key] = entry


def reconcile_skills(
    framework_skills: Iterable[FrameworkSkillRecord],
    gaps: Iterable[GapRecord] = (),
    strengths: Iterable[StrengthRecord] = (),
    *,
    default_framework: str = GENERAL,
    logger: Logger = None,
) -> Registry:
    """
    Merge catalog records with gap and strength assertions.

    Order is fixed: catalog seed, then gaps, then strengths. A skill asserted
    as both gap and strength therefore ends with user_has/validated set while
    keeping its gap description and required flag.

    Returns a fresh insertion-ordered dict keyed by (framework, lowercased name).
    """
    default_framework = default_framework.strip()
    registry: Registry = {}
    _seed(registry, framework_skills, logger)
    _apply_gaps(registry, gaps, default_framework, logger)
    _apply_strengths(registry, strengths, default_framework, logger)
    return registry


def entries_for(registry: Registry, framework: str) -> List[UnifiedSkillEntry]:
    """Framework-scoped slice, insertion order preserved."""
    return [entry for key, entry in registry.items() if key[0] == framework]


def frameworks_in(registry: Registry) -> List[str]:
    """Distinct frameworks in first-seen order."""
    seen: Dict[str, None] = {}
    for key in registry:
        seen.setdefault(key[0], None)
    return list(seen)
