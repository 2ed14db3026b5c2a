from skillrecon.charts import build_projection
from skillrecon.ranking import rank_skills
from skillrecon.reconcile import reconcile_skills
from skillrecon.report import NormalizedReport, normalize_report
from skillrecon.scores import map_importance, map_relevance

__all__ = [
    "NormalizedReport",
    "build_projection",
    "map_importance",
    "map_relevance",
    "normalize_report",
    "rank_skills",
    "reconcile_skills",
]
