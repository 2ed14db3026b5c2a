from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

# ---------------------------------------------------------------------------
# Career analysis report contract: eleven sections plus a timestamp.
#
# Attribute names are snake_case; the JSON key of every field is its
# camelCase form (see report.normalize.json_key). Every field carries a
# default, so a record built with no arguments is the fully-defaulted value.
# ---------------------------------------------------------------------------


# ---- 1. Executive summary ----

@dataclass(frozen=True)
class FitScore:
    score: float = 0
    out_of: float = 10
    description: str = "No score available"


@dataclass(frozen=True)
class ExecutiveSummary:
    summary: str = ""
    career_goal: str = ""
    fit_score: FitScore = field(default_factory=FitScore)
    key_findings: List[str] = field(default_factory=list)


# ---- 2. Skill mapping ----

@dataclass(frozen=True)
class MappedSkill:
    skill: str = ""
    proficiency: float = 0
    description: str = ""
    category: str = ""


@dataclass(frozen=True)
class SkillMapping:
    skills_analysis: str = ""
    sfia_skills: List[MappedSkill] = field(default_factory=list)
    dig_comp_skills: List[MappedSkill] = field(default_factory=list)
    other_skills: List[MappedSkill] = field(default_factory=list)


# ---- 3. Skill gap analysis ----

@dataclass(frozen=True)
class ChartDataset:
    label: str = ""
    data: List[float] = field(default_factory=list)


@dataclass(frozen=True)
class ChartData:
    labels: List[str] = field(default_factory=list)
    datasets: List[ChartDataset] = field(default_factory=list)


@dataclass(frozen=True)
class KeyGap:
    skill: str = ""
    current_level: float = 0
    required_level: float = 0
    gap: float = 0
    priority: str = ""
    improvement_suggestion: str = ""


@dataclass(frozen=True)
class KeyStrength:
    skill: str = ""
    current_level: float = 0
    required_level: float = 0
    advantage: float = 0
    leverage_suggestion: str = ""


@dataclass(frozen=True)
class SkillGapAnalysis:
    target_role: str = ""
    current_proficiency_data: ChartData = field(default_factory=ChartData)
    gap_analysis_data: ChartData = field(default_factory=ChartData)
    ai_analysis: str = ""
    key_gaps: List[KeyGap] = field(default_factory=list)
    key_strengths: List[KeyStrength] = field(default_factory=list)


# ---- 4. Career pathway options ----

@dataclass(frozen=True)
class PathwayStep:
    step: str = ""
    timeframe: str = ""
    description: str = ""


@dataclass(frozen=True)
class UniversityPathway:
    degree: str = ""
    institutions: List[str] = field(default_factory=list)
    duration: str = ""
    outcomes: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class VocationalPathway:
    certification: str = ""
    providers: List[str] = field(default_factory=list)
    duration: str = ""
    outcomes: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class CareerPathwayOptions:
    pathway_description: str = ""
    current_role: str = ""
    target_role: str = ""
    timeframe: str = ""
    pathway_steps: List[PathwayStep] = field(default_factory=list)
    university_pathway: List[UniversityPathway] = field(default_factory=list)
    vocational_pathway: List[VocationalPathway] = field(default_factory=list)
    ai_insights: str = ""


# ---- 5. Development plan ----

@dataclass(frozen=True)
class SkillDevelopment:
    skill: str = ""
    current_level: float = 0
    target_level: float = 0
    timeframe: str = ""
    resources: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class SkillToAcquire:
    skill: str = ""
    reason: str = ""
    timeframe: str = ""
    resources: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class DevelopmentPlan:
    overview: str = ""
    technical_skills: List[SkillDevelopment] = field(default_factory=list)
    soft_skills: List[SkillDevelopment] = field(default_factory=list)
    skills_to_acquire: List[SkillToAcquire] = field(default_factory=list)


# ---- 6. Educational programs ----

@dataclass(frozen=True)
class RecommendedProgram:
    name: str = ""
    provider: str = ""
    duration: str = ""
    format: str = ""
    skills_covered: List[str] = field(default_factory=list)
    description: str = ""


@dataclass(frozen=True)
class ProjectIdea:
    title: str = ""
    description: str = ""
    skills_developed: List[str] = field(default_factory=list)
    difficulty: str = ""
    time_estimate: str = ""


@dataclass(frozen=True)
class EducationalPrograms:
    introduction: str = ""
    recommended_programs: List[RecommendedProgram] = field(default_factory=list)
    project_ideas: List[ProjectIdea] = field(default_factory=list)


# ---- 7. Learning roadmap ----

@dataclass(frozen=True)
class PhaseResource:
    type: str = ""
    name: str = ""
    link: str = ""


@dataclass(frozen=True)
class RoadmapPhase:
    phase: str = ""
    timeframe: str = ""
    focus: str = ""
    milestones: List[str] = field(default_factory=list)
    resources: List[PhaseResource] = field(default_factory=list)


@dataclass(frozen=True)
class LearningRoadmap:
    overview: str = ""
    phases: List[RoadmapPhase] = field(default_factory=list)


# ---- 8. Similar roles ----

@dataclass(frozen=True)
class SimilarRole:
    role: str = ""
    similarity_score: float = 0
    key_skill_overlap: List[str] = field(default_factory=list)
    additional_skills_needed: List[str] = field(default_factory=list)
    summary: str = ""


@dataclass(frozen=True)
class SimilarRoles:
    introduction: str = ""
    roles: List[SimilarRole] = field(default_factory=list)


# ---- 9. Quick tips ----

@dataclass(frozen=True)
class QuickWin:
    tip: str = ""
    timeframe: str = ""
    impact: str = ""


@dataclass(frozen=True)
class QuickTips:
    introduction: str = ""
    quick_wins: List[QuickWin] = field(default_factory=list)
    industry_insights: List[str] = field(default_factory=list)


# ---- 10. Growth trajectory ----

@dataclass(frozen=True)
class Salary:
    min: float = 0
    max: float = 0
    currency: str = ""


@dataclass(frozen=True)
class TrajectoryStage:
    role: str = ""
    timeline: str = ""
    responsibilities: List[str] = field(default_factory=list)
    skills_required: List[str] = field(default_factory=list)
    salary: Salary = field(default_factory=Salary)


@dataclass(frozen=True)
class GrowthTrajectory:
    introduction: str = ""
    short_term: TrajectoryStage = field(default_factory=TrajectoryStage)
    medium_term: TrajectoryStage = field(default_factory=TrajectoryStage)
    long_term: TrajectoryStage = field(default_factory=TrajectoryStage)


# ---- 11. Learning path roadmap ----

@dataclass(frozen=True)
class CareerStage:
    stage: str = ""
    timeframe: str = ""
    role: str = ""
    skills: List[str] = field(default_factory=list)
    milestones: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class LearningPathRoadmap:
    overview: str = ""
    career_trajectory: List[CareerStage] = field(default_factory=list)


# ---- report ----

@dataclass(frozen=True)
class NormalizedReport:
    executive_summary: ExecutiveSummary = field(default_factory=ExecutiveSummary)
    skill_mapping: SkillMapping = field(default_factory=SkillMapping)
    skill_gap_analysis: SkillGapAnalysis = field(default_factory=SkillGapAnalysis)
    career_pathway_options: CareerPathwayOptions = field(default_factory=CareerPathwayOptions)
    development_plan: DevelopmentPlan = field(default_factory=DevelopmentPlan)
    educational_programs: EducationalPrograms = field(default_factory=EducationalPrograms)
    learning_roadmap: LearningRoadmap = field(default_factory=LearningRoadmap)
    similar_roles: SimilarRoles = field(default_factory=SimilarRoles)
    quick_tips: QuickTips = field(default_factory=QuickTips)
    growth_trajectory: GrowthTrajectory = field(default_factory=GrowthTrajectory)
    learning_path_roadmap: LearningPathRoadmap = field(default_factory=LearningPathRoadmap)
    timestamp: str = ""

    def as_dict(self) -> dict:
        from skillrecon.report.normalize import to_json

        return to_json(self)


SECTION_KEYS = (
    "executiveSummary",
    "skillMapping",
    "skillGapAnalysis",
    "careerPathwayOptions",
    "developmentPlan",
    "educationalPrograms",
    "learningRoadmap",
    "similarRoles",
    "quickTips",
    "growthTrajectory",
    "learningPathRoadmap",
)
