from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from skillrecon.charts import build_projection
from skillrecon.config import EngineConfig
from skillrecon.core import ChartProjection, FrameworkSkillRecord, GapRecord, StrengthRecord, UnifiedSkillEntry
from skillrecon.frameworks import GENERAL
from skillrecon.loader import load_analysis_input
from skillrecon.ranking import rank_skills
from skillrecon.reconcile import entries_for, frameworks_in, reconcile_skills
from skillrecon.report import NormalizedReport, normalize_report


@dataclass(frozen=True)
class NormalizeResult:
    report: NormalizedReport
    warnings: Tuple[str, ...]

    def as_json(self) -> dict:
        return self.report.as_dict()


@dataclass(frozen=True)
class FrameworkView:
    """Everything a framework tab renders: entries, ranked top-N and charts."""

    framework: str
    entries: Tuple[UnifiedSkillEntry, ...]
    top: Tuple[UnifiedSkillEntry, ...]
    charts: ChartProjection

    @property
    def gaps(self) -> Tuple[UnifiedSkillEntry, ...]:
        return tuple(e for e in self.entries if e.is_gap)

    @property
    def strengths(self) -> Tuple[UnifiedSkillEntry, ...]:
        return tuple(e for e in self.entries if e.strength_description is not None)

    def as_json(self) -> dict:
        return {
            "framework": self.framework,
            "entries": [e.as_json() for e in self.entries],
            "top": [e.as_json() for e in self.top],
            "gaps": [e.name for e in self.gaps],
            "strengths": [e.name for e in self.strengths],
            "charts": self.charts.as_json(),
            "empty": self.charts.is_empty,
        }


@dataclass(frozen=True)
class AnalysisResult:
    views: Tuple[FrameworkView, ...]
    warnings: Tuple[str, ...] = ()

    def view(self, framework: str) -> Optional[FrameworkView]:
        for v in self.views:
            if v.framework == framework:
                return v
        return None

    def as_json(self) -> dict:
        return {
            "frameworks": [v.as_json() for v in self.views],
            "warnings": list(self.warnings),
        }


def normalize_document(raw: Any) -> NormalizeResult:
    logs: List[str] = []

    def logger(msg: str) -> None:
        logs.append(msg)

    report = normalize_report(raw, logger=logger)
    return NormalizeResult(report=report, warnings=tuple(logs))


def _view_frameworks(
    found: Sequence[str],
    *,
    requested: Optional[Sequence[str]],
    config: EngineConfig,
    warnings: List[str],
) -> List[str]:
    if requested:
        # explicit requests are validated by get_scale (raises)
        return list(requested)

    out: List[str] = []
    scales = config.scales
    for fw in found:
        if fw == GENERAL and not config.include_general:
            continue
        if fw not in scales:
            warnings.append(f"NO_SCALE:{fw}")
            continue
        out.append(fw)
    return out


def analyze_skills(
    framework_skills: Iterable[FrameworkSkillRecord],
    gaps: Iterable[GapRecord] = (),
    strengths: Iterable[StrengthRecord] = (),
    *,
    config: Optional[EngineConfig] = None,
    frameworks: Optional[Sequence[str]] = None,
    top_n: Optional[int] = None,
) -> AnalysisResult:
    """
    Reconcile the three record streams and build one view per framework.

    ``frameworks`` restricts (and orders) the views; an explicitly requested
    framework without a level scale raises UnknownFrameworkError. Frameworks
    discovered in the data without a scale are skipped with a warning.
    """
    cfg = config or EngineConfig()
    cfg.validate()
    n = cfg.top_n if top_n is None else top_n

    logs: List[str] = []

    def logger(msg: str) -> None:
        logs.append(msg)

    registry = reconcile_skills(
        framework_skills,
        gaps,
        strengths,
        default_framework=cfg.default_framework,
        logger=logger,
    )

    scales = cfg.scales
    views: List[FrameworkView] = []
    for fw in _view_frameworks(frameworks_in(registry), requested=frameworks, config=cfg, warnings=logs):
        scoped = entries_for(registry, fw)
        views.append(
            FrameworkView(
                framework=fw,
                entries=tuple(scoped),
                top=tuple(rank_skills(scoped, n)),
                charts=build_projection(fw, scoped, scales=scales, radar_limit=cfg.radar_limit),
            )
        )

    return AnalysisResult(views=tuple(views), warnings=tuple(logs))


def analyze_document(
    data: Any,
    *,
    config: Optional[EngineConfig] = None,
    frameworks: Optional[Sequence[str]] = None,
    top_n: Optional[int] = None,
) -> AnalysisResult:
    """Combined upstream JSON document -> AnalysisResult (loader warnings included)."""
    inp = load_analysis_input(data)
    result = analyze_skills(
        inp.framework_skills,
        inp.gaps,
        inp.strengths,
        config=config,
        frameworks=frameworks,
        top_n=top_n,
    )
    return AnalysisResult(views=result.views, warnings=inp.warnings + result.warnings)
