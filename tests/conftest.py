import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def schema_document() -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "NODE_ENV": {
                "type": "string",
                "enum": ["development", "production", "test"],
                "default": "development",
            },
            "PORT": {"type": "integer", "minimum": 1, "maximum": 65535, "default": 3000},
            "API_KEY": {"type": "string", "minLength": 10},
        },
        "required": ["API_KEY"],
    }


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, schema_document: Dict[str, Any]) -> Path:
    """A working directory holding .env.schema.json and an empty .env."""

    (tmp_path / ".env.schema.json").write_text(json.dumps(schema_document))
    (tmp_path / ".env").write_text("")
    monkeypatch.chdir(tmp_path)
    return tmp_path
