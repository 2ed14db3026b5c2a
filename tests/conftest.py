import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

from skillrecon.core import FrameworkSkillRecord  # noqa: E402


@pytest.fixture(scope="session")
def project_root() -> Path:
    return ROOT


@pytest.fixture()
def sfia_catalog():
    return [
        FrameworkSkillRecord("Stakeholder management", "SFIA 9", "Level 4", "Manage stakeholder relationships"),
        FrameworkSkillRecord("Programming", "SFIA 9", "Level 3", "Design and write software"),
        FrameworkSkillRecord("Data management", "SFIA 9", "Level 5", "Manage data assets"),
    ]


@pytest.fixture()
def digcomp_catalog():
    return [
        FrameworkSkillRecord("Programming", "DigComp 2.2", "Intermediate", "Plan and develop instructions"),
        FrameworkSkillRecord("Protecting devices", "DigComp 2.2", "Level 6", "Protect devices and content"),
    ]


@pytest.fixture()
def analysis_document():
    return {
        "sfiaSkills": [
            {"skill": "Stakeholder management", "level": "Level 4", "description": "Manage relationships"},
            {"skill": "Programming", "level": "Level 3", "description": "Write software"},
        ],
        "digcompCompetencies": [
            {"competency": "Protecting devices", "level": "Advanced", "description": "Protect devices"},
        ],
        "skillGaps": [
            {"skill": "Stakeholder management", "importance": "High", "description": "Limited exposure", "framework": "SFIA 9"},
            {"skill": "Cloud architecture", "importance": "Critical", "description": "No cloud design work"},
        ],
        "skillStrengths": [
            {"skill": "Communication", "level": "Proficient", "relevance": "High", "description": "Clear writer"},
            {"skill": "programming", "level": "Level 3", "relevance": "Very High", "description": "Daily Python"},
        ],
    }

