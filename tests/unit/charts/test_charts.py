import pytest

from skillrecon.charts import build_bar, build_pie, build_projection, build_radar, entry_level
from skillrecon.core import FrameworkSkillRecord, GapRecord, StrengthRecord, UnifiedSkillEntry
from skillrecon.frameworks import UnknownFrameworkError, build_scales, get_scale
from skillrecon.reconcile import entries_for, reconcile_skills


@pytest.fixture()
def sfia_entries(sfia_catalog):
    registry = reconcile_skills(
        sfia_catalog,
        [GapRecord("Stakeholder management", "High", "Limited exposure", "SFIA 9")],
        [
            StrengthRecord("Programming", "Level 3", "Very High", "Daily Python", "SFIA 9"),
            StrengthRecord("Test automation", "Level 2", "Medium", "Wrote CI suites", "SFIA 9"),
        ],
    )
    return entries_for(registry, "SFIA 9")


def test_bar_triple_follows_flags(sfia_entries):
    bars = {p.name: p for p in build_bar(sfia_entries, get_scale("SFIA 9"))}

    stakeholder = bars["Stakeholder management"]
    assert (stakeholder.required_level, stakeholder.user_level, stakeholder.validated_level) == (4, 0, 0)

    programming = bars["Programming"]
    assert (programming.required_level, programming.user_level, programming.validated_level) == (3, 3, 3)

    automation = bars["Test automation"]
    assert (automation.required_level, automation.user_level, automation.validated_level) == (0, 2, 2)

    assert {p.max_level for p in bars.values()} == {7}


def test_bar_axis_bound_comes_from_framework(digcomp_catalog):
    registry = reconcile_skills(digcomp_catalog)
    points = build_bar(entries_for(registry, "DigComp 2.2"), get_scale("DigComp 2.2"))

    assert [p.max_level for p in points] == [8, 8]
    assert [p.required_level for p in points] == [3, 6]


def test_entry_without_level_label_uses_priority():
    scale = get_scale("General")
    gap = UnifiedSkillEntry(name="Cloud", framework="General", required=True, importance_value=4, gap_description="d")
    bare = UnifiedSkillEntry(name="Bare", framework="General", required=True)

    assert entry_level(gap, scale) == 4
    assert entry_level(bare, scale) == 1


def test_pie_partitions_all_entries(sfia_entries):
    pie = build_pie(sfia_entries)

    assert pie.required_only == 2   # Stakeholder management, Data management
    assert pie.validated == 2       # Programming, Test automation
    assert pie.user_has_only == 0
    assert pie.total == len(sfia_entries)


def test_pie_user_has_without_validation():
    entries = [
        UnifiedSkillEntry(name="A", framework="General", user_has=True),
        UnifiedSkillEntry(name="B", framework="General"),
    ]
    pie = build_pie(entries)

    assert (pie.required_only, pie.validated, pie.user_has_only) == (1, 0, 1)


def test_radar_is_top_eight_by_rank():
    catalog = [FrameworkSkillRecord(f"Skill {i}", "SFIA 9", f"Level {i % 7 + 1}") for i in range(10)]
    gaps = [GapRecord("Skill 9", "Critical", "big gap", "SFIA 9"), GapRecord("Skill 2", "Low", "small gap", "SFIA 9")]
    entries = entries_for(reconcile_skills(catalog, gaps), "SFIA 9")

    radar = build_radar(entries, get_scale("SFIA 9"))

    assert len(radar) == 8
    assert [p.subject for p in radar[:3]] == ["Skill 9", "Skill 2", "Skill 0"]
    skill9 = radar[0]
    assert (skill9.required, skill9.user_has, skill9.gap) == (3, 0, 3)


def test_projection_scopes_entries_and_uses_scales(sfia_catalog, digcomp_catalog):
    registry = reconcile_skills(sfia_catalog + digcomp_catalog)
    everything = list(registry.values())

    projection = build_projection("DigComp 2.2", everything)

    assert projection.max_level == 8
    assert projection.pie.total == 2
    assert [p.name for p in projection.bar] == ["Programming", "Protecting devices"]
    assert not projection.is_empty


def test_projection_for_empty_scope_is_explicitly_empty():
    projection = build_projection("SFIA 9", [])

    assert projection.is_empty
    assert projection.bar == ()
    assert projection.radar == ()
    assert projection.as_json()["pie"] == {"requiredOnly": 0, "validated": 0, "userHasOnly": 0}


def test_projection_unknown_framework_raises():
    with pytest.raises(UnknownFrameworkError):
        build_projection("ESCO", [])


def test_projection_with_custom_scale():
    scales = build_scales({"ESCO": 4})
    entries = [UnifiedSkillEntry(name="Teamwork", framework="ESCO", level="Level 6", required=True)]

    projection = build_projection("ESCO", entries, scales=scales, radar_limit=1)

    assert projection.bar[0].required_level == 4
    assert projection.bar[0].max_level == 4
    assert len(projection.radar) == 1
