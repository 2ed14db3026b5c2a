from pathlib import Path

from skillrecon.core import FrameworkSkillRecord, GapRecord, StrengthRecord
from skillrecon.loader import load_analysis_input, load_framework_skills, load_gaps, load_strengths, read_json


def test_load_analysis_input_maps_upstream_shapes(analysis_document):
    inp = load_analysis_input(analysis_document)

    assert inp.framework_skills == (
        FrameworkSkillRecord("Stakeholder management", "SFIA 9", "Level 4", "Manage relationships"),
        FrameworkSkillRecord("Programming", "SFIA 9", "Level 3", "Write software"),
        FrameworkSkillRecord("Protecting devices", "DigComp 2.2", "Advanced", "Protect devices"),
    )
    assert inp.gaps[0] == GapRecord("Stakeholder management", "High", "Limited exposure", "SFIA 9")
    assert inp.gaps[1].framework is None
    assert inp.strengths[1] == StrengthRecord("programming", "Level 3", "Very High", "Daily Python")
    assert inp.warnings == ()


def test_bad_items_are_skipped_with_warnings():
    warnings = []
    gaps = load_gaps(["Programming", {"importance": "High"}, {"skill": "  SQL ", "framework": "  "}], warnings=warnings)

    assert gaps == [GapRecord("SQL", "", "", None)]
    assert warnings == ["SKIPPED_GAP:0", "SKIPPED_GAP:1"]


def test_framework_skills_require_a_framework():
    warnings = []
    records = load_framework_skills(
        [{"skill": "Teamwork", "framework": "ESCO", "level": 3}, {"skill": "Orphan"}],
        warnings=warnings,
    )

    assert records == [FrameworkSkillRecord("Teamwork", "ESCO", "3", "")]
    assert warnings == ["SKIPPED_FRAMEWORK_SKILL:1"]


def test_strengths_accept_name_alias():
    assert load_strengths([{"name": "Writing", "relevance": "low"}]) == [StrengthRecord("Writing", "", "low", "")]


def test_non_list_sections_and_non_object_documents():
    inp = load_analysis_input({"skillGaps": {"skill": "x"}, "sfiaSkills": None})
    assert inp.gaps == ()
    assert inp.warnings == ("NOT_A_LIST:GAP",)

    assert load_analysis_input("nope").warnings == ("NOT_AN_OBJECT:analysis input",)


def test_read_json_from_file_and_text(tmp_path: Path):
    path = tmp_path / "in.json"
    path.write_text('{"a": 1}', encoding="utf-8")

    assert read_json(path) == {"a": 1}
    assert read_json(None, "[1]") == [1]
    assert read_json(None, "") is None
