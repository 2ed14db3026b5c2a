from __future__ import annotations

import io
import json

import pytest

from skillrecon.cli import main as cli_main


def _run_cli(argv):
    return cli_main(argv)


@pytest.fixture()
def analysis_file(tmp_path, analysis_document):
    path = tmp_path / "analysis.json"
    path.write_text(json.dumps(analysis_document), encoding="utf-8")
    return path


def test_normalize_prints_full_report(tmp_path, capsys):
    raw = tmp_path / "generated.json"
    raw.write_text(json.dumps({"executiveSummary": {"keyFindings": "one"}}), encoding="utf-8")

    code = _run_cli(["normalize", str(raw)])
    captured = capsys.readouterr()

    assert code == 0
    payload = json.loads(captured.out)
    assert payload["executiveSummary"]["keyFindings"] == []
    assert payload["executiveSummary"]["fitScore"]["description"] == "No score available"
    assert "executiveSummary.keyFindings" in captured.err


def test_normalize_reads_stdin_quietly(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("null"))

    code = _run_cli(["normalize", "-", "--quiet"])
    captured = capsys.readouterr()

    assert code == 0
    assert json.loads(captured.out)["learningPathRoadmap"] == {"overview": "", "careerTrajectory": []}
    assert captured.err == ""


def test_invalid_json_exits(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        _run_cli(["normalize", str(bad)])
    assert "Invalid input JSON" in str(exc.value)


def test_analyze_emits_framework_views(analysis_file, capsys):
    code = _run_cli(["analyze", str(analysis_file), "--framework", "SFIA 9", "--top", "1"])
    captured = capsys.readouterr()

    assert code == 0
    payload = json.loads(captured.out)
    assert [fw["framework"] for fw in payload["frameworks"]] == ["SFIA 9"]
    sfia = payload["frameworks"][0]
    assert [e["name"] for e in sfia["top"]] == ["Stakeholder management"]
    assert sfia["charts"]["maxLevel"] == 7
    assert sfia["charts"]["pie"] == {"requiredOnly": 1, "validated": 1, "userHasOnly": 0}


def test_analyze_unknown_framework_exits_2(analysis_file, capsys):
    code = _run_cli(["analyze", str(analysis_file), "--framework", "ESCO"])
    captured = capsys.readouterr()

    assert code == 2
    assert "ESCO" in captured.err


def test_analyze_with_config_override(analysis_file, tmp_path, capsys):
    override = tmp_path / "override.json"
    override.write_text(json.dumps({"include_general": False, "frameworks": {"SFIA 9": 6}}), encoding="utf-8")

    code = _run_cli(["analyze", str(analysis_file), "--config", str(override)])
    payload = json.loads(capsys.readouterr().out)

    assert code == 0
    assert [fw["framework"] for fw in payload["frameworks"]] == ["SFIA 9", "DigComp 2.2"]
    assert payload["frameworks"][0]["charts"]["maxLevel"] == 6


def test_analyze_invalid_config_exits_2(analysis_file, tmp_path, capsys):
    override = tmp_path / "override.json"
    override.write_text(json.dumps({"top_n": 0}), encoding="utf-8")

    code = _run_cli(["analyze", str(analysis_file), "--config", str(override)])

    assert code == 2
    assert "top_n" in capsys.readouterr().err
