"""Tests for the command-line capacity report."""

import json

import pytest

import main


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(main, "configure_logging", lambda *args, **kwargs: None)


def test_load_input_data_default():
    data = main.load_input_data()
    assert len(data['scenarios']) >= 1


def test_load_input_data_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main.load_input_data(tmp_path / "missing.json")

    assert exc_info.value.code == 1
    assert "not found" in capsys.readouterr().out


def test_load_input_data_invalid_json(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text("{not json")

    with pytest.raises(SystemExit) as exc_info:
        main.load_input_data(path)

    assert exc_info.value.code == 1
    assert "Invalid JSON" in capsys.readouterr().out


def test_analyze_scenario():
    result = main.analyze_scenario({"pipe_size": '4"', "nominal_weight": 14.0, "step": 1000, "max_torque": 2000})
    assert [p.torque for p in result['raw_curve']] == [0, 1000, 2000]


def test_main_prints_report(tmp_path, capsys):
    path = tmp_path / "input.json"
    path.write_text(json.dumps({"scenarios": [{
        "name": "Test pipe",
        "pipe_size": '5"',
        "nominal_weight": 19.5,
        "grade": "G-105",
        "step": 5000,
        "max_torque": 80000,
    }]}))

    main.main([str(path)])

    out = capsys.readouterr().out
    assert "Scenario: Test pipe" in out
    assert "G-105" in out
    assert "6 torque sample(s)" in out
    assert "ANALYSIS COMPLETE" in out


def test_main_rejects_invalid_scenario(tmp_path, capsys):
    path = tmp_path / "input.json"
    path.write_text(json.dumps({"scenarios": [{"name": "Bad", "pipe_size": '7"', "nominal_weight": 19.5}]}))

    with pytest.raises(SystemExit) as exc_info:
        main.main([str(path)])

    assert exc_info.value.code == 1
    assert "Scenario 'Bad'" in capsys.readouterr().out


@pytest.mark.parametrize("overrides", [
    {"step": "500"},
    {"nominal_weight": "19.5"},
    {"safety_factor_percent": None},
    {"max_torque": [80000]},
    {"grade": 105},
])
def test_main_rejects_non_numeric_fields(tmp_path, capsys, overrides):
    scenario = {"name": "Typed", "pipe_size": '5"', "nominal_weight": 19.5}
    scenario.update(overrides)
    path = tmp_path / "input.json"
    path.write_text(json.dumps({"scenarios": [scenario]}))

    with pytest.raises(SystemExit) as exc_info:
        main.main([str(path)])

    assert exc_info.value.code == 1
    assert "Scenario 'Typed'" in capsys.readouterr().out
