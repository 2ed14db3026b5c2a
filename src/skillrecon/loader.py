from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple

from skillrecon.core import FrameworkSkillRecord, GapRecord, StrengthRecord
from skillrecon.frameworks import DIGCOMP_22, SFIA_9


# ---------------------------------------------------------------------------
# Upstream record shapes (as produced by the report generator / catalog):
#
#   sfiaSkills:           [{"skill", "level", "description"}]
#   digcompCompetencies:  [{"competency", "level", "description"}]
#   frameworkSkills:      [{"skill", "framework", "level", "description"}]
#   skillGaps:            [{"skill", "importance", "description", "framework"?}]
#   skillStrengths:       [{"skill", "level", "relevance", "description", "framework"?}]
#
# Parsing is lenient: bad items are skipped and reported, never raised.
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AnalysisInput:
    framework_skills: Tuple[FrameworkSkillRecord, ...] = ()
    gaps: Tuple[GapRecord, ...] = ()
    strengths: Tuple[StrengthRecord, ...] = ()
    warnings: Tuple[str, ...] = ()


def _text(item: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = item.get(key)
        if isinstance(value, str):
            return value.strip()
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
    return ""


def _framework(item: Mapping[str, Any]) -> Optional[str]:
    return _text(item, "framework") or None


def _items(raw: Any, ctx: str, warnings: List[str]) -> List[Tuple[int, Mapping[str, Any]]]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        warnings.append(f"NOT_A_LIST:{ctx}")
        return []
    out: List[Tuple[int, Mapping[str, Any]]] = []
    for idx, item in enumerate(raw):
        if not isinstance(item, Mapping):
            warnings.append(f"SKIPPED_{ctx}:{idx}")
            continue
        out.append((idx, item))
    return out


def load_framework_skills(
    raw: Any,
    framework: Optional[str] = None,
    *,
    ctx: str = "FRAMEWORK_SKILL",
    warnings: Optional[List[str]] = None,
) -> List[FrameworkSkillRecord]:
    """
    Catalog items -> FrameworkSkillRecord. ``framework`` applies to every
    item; without it each item must carry its own ``framework``.
    """
    warnings = [] if warnings is None else warnings
    out: List[FrameworkSkillRecord] = []
    for idx, item in _items(raw, ctx, warnings):
        name = _text(item, "skill", "competency", "name")
        fw = framework or _framework(item)
        if not name or not fw:
            warnings.append(f"SKIPPED_{ctx}:{idx}")
            continue
        out.append(
            FrameworkSkillRecord(
                name=name,
                framework=fw,
                level=_text(item, "level"),
                description=_text(item, "description"),
            )
        )
    return out


def load_gaps(raw: Any, *, warnings: Optional[List[str]] = None) -> List[GapRecord]:
    warnings = [] if warnings is None else warnings
    out: List[GapRecord] = []
    for idx, item in _items(raw, "GAP", warnings):
        name = _text(item, "skill", "name")
        if not name:
            warnings.append(f"SKIPPED_GAP:{idx}")
            continue
        out.append(
            GapRecord(
                name=name,
                importance=_text(item, "importance"),
                description=_text(item, "description"),
                framework=_framework(item),
            )
        )
    return out


def load_strengths(raw: Any, *, warnings: Optional[List[str]] = None) -> List[StrengthRecord]:
    warnings = [] if warnings is None else warnings
    out: List[StrengthRecord] = []
    for idx, item in _items(raw, "STRENGTH", warnings):
        name = _text(item, "skill", "name")
        if not name:
            warnings.append(f"SKIPPED_STRENGTH:{idx}")
            continue
        out.append(
            StrengthRecord(
                name=name,
                level=_text(item, "level"),
                relevance=_text(item, "relevance"),
                description=_text(item, "description"),
                framework=_framework(item),
            )
        )
    return out


def load_analysis_input(data: Any) -> AnalysisInput:
    """Combined upstream document -> AnalysisInput (never raises on shape defects)."""
    warnings: List[str] = []
    if not isinstance(data, Mapping):
        return AnalysisInput(warnings=("NOT_AN_OBJECT:analysis input",))

    framework_skills: List[FrameworkSkillRecord] = []
    framework_skills += load_framework_skills(data.get("sfiaSkills"), SFIA_9, ctx="SFIA_SKILL", warnings=warnings)
    framework_skills += load_framework_skills(
        data.get("digcompCompetencies"), DIGCOMP_22, ctx="DIGCOMP_COMPETENCY", warnings=warnings
    )
    framework_skills += load_framework_skills(data.get("frameworkSkills"), warnings=warnings)

    gaps = load_gaps(data.get("skillGaps"), warnings=warnings)
    strengths = load_strengths(data.get("skillStrengths"), warnings=warnings)

    return AnalysisInput(
        framework_skills=tuple(framework_skills),
        gaps=tuple(gaps),
        strengths=tuple(strengths),
        warnings=tuple(warnings),
    )


def read_json(path: Optional[Path], stdin_text: Optional[str] = None) -> Any:
    """JSON from a file, or from ``stdin_text`` when ``path`` is None."""
    raw = stdin_text if path is None else Path(path).read_text(encoding="utf-8")
    return json.loads(raw or "null")

