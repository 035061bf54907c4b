"""Tests for the startup validation helper."""

import io
from pathlib import Path

import pytest

from env_schema.model import SchemaLoadError
from utils.console import ConsoleReporter
from utils.env_validator import EnvValidationError, build_validator, validate_environment


def _config(project_dir: Path, **overrides: object) -> dict:
    validator = {
        "schema_path": str(project_dir / ".env.schema.json"),
        "env_path": str(project_dir / ".env"),
        "allow_unknown": True,
    }
    validator.update(overrides)
    return {"validator": validator}


def test_returns_typed_values(project_dir: Path) -> None:
    (project_dir / ".env").write_text("API_KEY=valid-api-key-123\nPORT=8080\n")

    values = validate_environment(_config(project_dir, silent=True), live_env={})

    assert values == {"NODE_ENV": "development", "PORT": 8080, "API_KEY": "valid-api-key-123"}


def test_live_environment_overrides_file(project_dir: Path) -> None:
    (project_dir / ".env").write_text("API_KEY=valid-api-key-123\nPORT=8080\n")

    values = validate_environment(_config(project_dir, silent=True), live_env={"PORT": "9090"})

    assert values["PORT"] == 9090


def test_invalid_environment_raises_with_outcome(project_dir: Path) -> None:
    out, err = io.StringIO(), io.StringIO()

    with pytest.raises(EnvValidationError) as excinfo:
        validate_environment(_config(project_dir), ConsoleReporter(out=out, err=err), live_env={})

    assert excinfo.value.outcome.missing_keys == ("API_KEY",)
    assert "API_KEY" in str(excinfo.value)
    assert "Missing required variables: API_KEY" in err.getvalue()


def test_invalid_environment_without_exit_returns_partial_values(project_dir: Path) -> None:
    (project_dir / ".env").write_text("PORT=abc\n")

    values = validate_environment(
        _config(project_dir, exit_on_error=False, silent=True), live_env={}
    )

    assert values == {"NODE_ENV": "development"}


def test_bad_schema_fails_at_construction(project_dir: Path) -> None:
    (project_dir / ".env.schema.json").write_text('{"type": "array"}')

    with pytest.raises(SchemaLoadError):
        build_validator(_config(project_dir), live_env={})
