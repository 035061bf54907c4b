"""CLI smoke tests."""

import json
from pathlib import Path

import pytest

from main import main


@pytest.fixture(autouse=True)
def _isolated_process_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("API_KEY", "PORT", "NODE_ENV"):
        monkeypatch.delenv(name, raising=False)


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert "usage: env-validate" in capsys.readouterr().out


def test_validate_passes(project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (project_dir / ".env").write_text("API_KEY=valid-api-key-123\n")

    assert main(["validate", "--allow-unknown"]) == 0
    assert "Environment validation passed!" in capsys.readouterr().out


def test_validate_fails_with_exit_code(project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["validate", "--allow-unknown"]) == 1
    captured = capsys.readouterr()
    assert "Required environment variable \"API_KEY\" is missing or empty" in captured.out
    assert "Missing required variables: API_KEY" in captured.err


def test_validate_no_exit_returns_zero(project_dir: Path) -> None:
    assert main(["validate", "--allow-unknown", "--no-exit", "--silent"]) == 0


def test_validate_json_output(project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (project_dir / ".env").write_text("API_KEY=short\n")

    assert main(["validate", "--allow-unknown", "--json"]) == 1
    data = json.loads(capsys.readouterr().out)
    assert data["valid"] is False
    assert data["invalidKeys"] == ["API_KEY"]
    assert data["values"]["PORT"] == 3000


def test_validate_reads_config_file(project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (project_dir / "alt.env").write_text("API_KEY=valid-api-key-123\n")
    (project_dir / "tool.yaml").write_text("validator:\n  env_path: alt.env\n  allow_unknown: true\n")

    assert main(["validate", "-c", "tool.yaml"]) == 0


def test_validate_missing_schema(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.chdir(tmp_path)

    assert main(["validate"]) == 1
    assert "Schema file not found" in capsys.readouterr().err


def test_check_reports_errors(project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (project_dir / ".env").write_text("API_KEY=valid-api-key-123\nPORT=99999\n")

    assert main(["check"]) == 1
    captured = capsys.readouterr()
    assert "Environment validation failed" in captured.err
    assert 'Invalid value for "PORT": must be <= 65535' in captured.out


def test_check_passes(project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (project_dir / ".env").write_text("API_KEY=valid-api-key-123\n")

    assert main(["check", "-s", ".env.schema.json", "-e", ".env"]) == 0
    assert "Environment validation passed" in capsys.readouterr().out


def test_init_writes_schema_once(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.chdir(tmp_path)

    assert main(["init"]) == 0
    assert json.loads((tmp_path / ".env.schema.json").read_text())["type"] == "object"
    assert main(["init"]) == 1
    assert "already exists" in capsys.readouterr().err
    assert main(["init", "--force"]) == 0
