"""Example schema scaffolding used by the ``init`` command."""

import json
import os
from typing import Any, Dict

from .loader import DEFAULT_SCHEMA_PATH


EXAMPLE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "NODE_ENV": {
            "type": "string",
            "enum": ["development", "production", "test"],
            "default": "development",
            "description": "Application environment",
        },
        "PORT": {
            "type": "integer",
            "minimum": 1,
            "maximum": 65535,
            "default": 3000,
            "description": "Server port number",
        },
        "DATABASE_URL": {
            "type": "string",
            "format": "uri",
            "description": "Database connection URL",
        },
        "API_KEY": {
            "type": "string",
            "minLength": 32,
            "description": "API key for external service",
        },
        "DEBUG": {
            "type": "boolean",
            "default": False,
            "description": "Enable debug mode",
        },
        "MAX_CONNECTIONS": {
            "type": "integer",
            "minimum": 1,
            "default": 100,
            "description": "Maximum number of database connections",
        },
    },
    "required": ["DATABASE_URL", "API_KEY"],
    "additionalProperties": False,
}


class ScaffoldExistsError(Exception):
    """Raised when the target schema file exists and overwriting was not requested."""


def write_example_schema(path: str = DEFAULT_SCHEMA_PATH, force: bool = False) -> str:
    """Write EXAMPLE_SCHEMA to ``path`` and return the absolute path written."""

    target = os.path.abspath(path)
    if os.path.exists(target) and not force:
        raise ScaffoldExistsError("Schema file already exists. Use --force to overwrite.")

    parent = os.path.dirname(target)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(target, "w", encoding="utf-8") as f:
        json.dump(EXAMPLE_SCHEMA, f, indent=2)
        f.write("\n")
    return target


__all__ = ["EXAMPLE_SCHEMA", "ScaffoldExistsError", "write_example_schema"]
