import json
from pathlib import Path

import pytest

from scopedtestid.__main__ import main


def test_cli_composes_identifier(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["app", "form", "submit"]) == 0
    assert capsys.readouterr().out == 'data-testid="app-form-submit"\n'


def test_cli_applies_flags(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(
        ["settings", "profile", "Save Now", "--separator", ":", "--case", "upper", "--space-replacement", "_"]
    )
    assert exit_code == 0
    assert capsys.readouterr().out == 'data-testid="SETTINGS:PROFILE:SAVE_NOW"\n'


def test_cli_disabled_prints_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["app", "--disabled"]) == 0
    assert capsys.readouterr().out == ""


def test_cli_reads_settings_file_before_flags(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"attribute_name": "data-qa", "separator": "/"}), encoding="utf-8")

    assert main(["app", "leaf", "--config", str(config_path), "--separator", "."]) == 0
    assert capsys.readouterr().out == 'data-qa="app.leaf"\n'


def test_cli_falls_back_to_defaults_for_missing_settings(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["app", "--config", str(tmp_path / "missing.json")]) == 0
    assert capsys.readouterr().out == 'data-testid="app"\n'
