"""Schema file loading.

Schemas are stored as JSON (``.env.schema.json`` by convention) or YAML
(``.yaml`` / ``.yml``). Any failure to read or parse the file surfaces as a
SchemaLoadError so that no partially loaded schema is ever used.
"""

import json
import logging
import os
from typing import Any

import yaml

from .model import Schema, SchemaLoadError, schema_from_dict


logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATH = ".env.schema.json"

_YAML_SUFFIXES = (".yaml", ".yml")


def _parse_schema_text(path: str, text: str) -> Any:
    if path.lower().endswith(_YAML_SUFFIXES):
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise SchemaLoadError(f"Failed to load schema: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaLoadError(f"Failed to load schema: {exc}") from exc


def load_schema(path: str = DEFAULT_SCHEMA_PATH) -> Schema:
    """Load and structurally validate the schema stored at ``path``."""

    schema_path = os.path.abspath(path)
    if not os.path.exists(schema_path):
        raise SchemaLoadError(f"Schema file not found: {schema_path}")

    try:
        with open(schema_path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as exc:
        raise SchemaLoadError(f"Failed to load schema: {exc}") from exc

    schema = schema_from_dict(_parse_schema_text(schema_path, text))
    logger.debug(
        "Loaded schema %s: %d properties, %d required",
        schema_path,
        len(schema.properties),
        len(schema.required),
    )
    return schema


__all__ = ["DEFAULT_SCHEMA_PATH", "load_schema"]
