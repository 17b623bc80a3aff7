"""Unit tests for CLI commands."""

import json

import pytest

from nbamatchup.cli import main


@pytest.fixture(autouse=True)
def no_catalog_env(monkeypatch):
    for key in ("NBAMATCHUP_CATALOG_PATH", "ANALYSIS_DELAY", "LINE_STEP", "HOME_ADVANTAGE",
                "WIN_PROB_MIN", "OVER_DIFF_DIVISOR", "NBAMATCHUP_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def test_list_teams(capsys):
    assert main(["list-teams"]) == 0
    out = capsys.readouterr().out
    assert "Boston Celtics" in out
    assert "NYK" in out


def test_list_teams_bad_catalog(tmp_path, capsys):
    assert main(["list-teams", "--catalog", str(tmp_path / "missing.csv")]) == 2
    assert "not found" in capsys.readouterr().err


def test_predict_prints_card(capsys):
    assert main(["predict", "--home", "BOS", "--away", "LAL", "--delay", "0"]) == 0
    out = capsys.readouterr().out
    assert "BOS 113 - LAL 75" in out


def test_predict_json(capsys):
    assert main(["predict", "--home", "bos", "--away", "lal", "--delay", "0", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["over_under_line"] == 190.5
    assert payload["spread_cover_code"] == "BOS"


def test_predict_writes_csv(tmp_path):
    path = tmp_path / "forecast.csv"
    assert main(["predict", "--home", "DEN", "--away", "MIA", "--delay", "0",
                 "--output", str(path)]) == 0
    assert path.read_text(encoding="utf-8").startswith("winner_name,")


def test_predict_writes_json(tmp_path):
    path = tmp_path / "forecast.json"
    assert main(["predict", "--home", "DEN", "--away", "MIA", "--delay", "0",
                 "--output", str(path)]) == 0
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["prediction"]["home_code"] == "DEN"
    assert payload["run_id"]


def test_predict_same_team(capsys):
    assert main(["predict", "--home", "BOS", "--away", "BOS", "--delay", "0"]) == 2
    assert "cannot play itself" in capsys.readouterr().err


def test_predict_unknown_team(capsys):
    assert main(["predict", "--home", "BOS", "--away", "XYZ", "--delay", "0"]) == 2
    assert "XYZ" in capsys.readouterr().err


def test_predict_config_file(tmp_path, capsys):
    config = tmp_path / "model.env"
    config.write_text("HOME_ADVANTAGE=0\nANALYSIS_DELAY=0\n", encoding="utf-8")
    assert main(["predict", "--home", "BOS", "--away", "LAL", "--config", str(config), "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["home_score"] == 110


def test_requires_command():
    with pytest.raises(SystemExit):
        main([])


@pytest.mark.parametrize("key,value", [
    ("LINE_STEP", "0"),
    ("HOME_ADVANTAGE", "nan"),
    ("WIN_PROB_MIN", "0.95"),
    ("OVER_DIFF_DIVISOR", "0"),
])
def test_predict_bad_model_setting(monkeypatch, capsys, key, value):
    monkeypatch.setenv(key, value)
    assert main(["predict", "--home", "BOS", "--away", "LAL", "--delay", "0"]) == 2
    err = capsys.readouterr().err
    assert "error:" in err
    assert "Traceback" not in err


def test_predict_unreadable_config(tmp_path, capsys):
    config = tmp_path / "model.env"
    config.write_bytes(b"\xff\xfe\x00\x01")
    assert main(["predict", "--home", "BOS", "--away", "LAL", "--config", str(config)]) == 2
    assert "Could not read config" in capsys.readouterr().err


def test_list_teams_bad_model_setting(monkeypatch, capsys):
    monkeypatch.setenv("LINE_STEP", "0")
    assert main(["list-teams"]) == 2
    assert "line_step" in capsys.readouterr().err


def test_predict_log_level(capsys):
    assert main(["predict", "--home", "BOS", "--away", "LAL", "--delay", "0",
                 "--log-level", "warning"]) == 0
    assert "BOS 113 - LAL 75" in capsys.readouterr().out
