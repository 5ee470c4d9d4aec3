"""Tests for the command line helper."""

import json
from pathlib import Path

import pytest

from nmeta.cli import format_metadata, main
from nmeta.domain.models import ClientMetadata


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("NMETA_HEADER", "NMETA_PLATFORMS", "NMETA_ENVIRONMENTS", "NMETA_CONFIG_FILE"):
        monkeypatch.delenv(name, raising=False)


def test_parse_command_outputs_json(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a valid header, when running parse --json, then the field mapping is printed."""
    exit_code = main(["parse", "ios;local;1.0.0;10.1;iphone-x", "--json"])

    assert exit_code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["platform"] == "ios"
    assert data["majorVersion"] == 1
    assert data["device"] == "iphone-x"


def test_parse_command_outputs_table(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a web header, when running parse, then missing values are shown as '-'."""
    exit_code = main(["parse", "web;production;"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "platform" in out
    assert "device           -" in out


def test_parse_command_reports_invalid_header(capsys: pytest.CaptureFixture[str]) -> None:
    """Given an invalid header, when running parse, then it exits 1 with the reason on stderr."""
    exit_code = main(["parse", "ios;local;1.0.0;10.1"])

    assert exit_code == 1
    assert "Missing device" in capsys.readouterr().err


def test_format_command_normalises_web_header(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a web header with extra segments, when formatting, then they are dropped."""
    exit_code = main(["format", "web;staging;1.0.0;x;y"])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "web;staging;"


def test_config_command_uses_toml_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a TOML config, when running config, then the effective configuration is printed."""
    config_path = tmp_path / "nmeta.toml"
    config_path.write_text('[nmeta]\nheader = "X-Meta"\n', encoding="utf-8")

    exit_code = main(["config", "--config", str(config_path)])

    assert exit_code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["header"] == "X-Meta"
    assert "web" in data["platforms"]


def test_missing_config_file_exits_with_error(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a missing config file, when running parse, then it exits 1."""
    exit_code = main(["parse", "web;local;", "--config", "/nonexistent.toml"])

    assert exit_code == 1
    assert "Configuration file not found" in capsys.readouterr().err


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    """Given no command, when running, then help is printed and exit code is 1."""
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_format_metadata_aligns_keys() -> None:
    """Given metadata, when formatting, then one line per field is produced."""
    text = format_metadata(ClientMetadata(platform="web", environment="local"))

    assert len(text.splitlines()) == 8
    assert text.splitlines()[0] == "platform         web"
