"""Configuration loading and validation for the environment validator.

Responsibilities:
- Load the optional env_validator.yaml tool configuration
- Merge it over built-in defaults
- Type-check known sections and fail fast on invalid values
"""

import copy
import os
from typing import Any, Dict, Optional

import yaml


class ConfigError(Exception):
    """Raised when the configuration file or its values are invalid."""


DEFAULT_CONFIG_PATH = "env_validator.yaml"

DEFAULT_CONFIG: Dict[str, Any] = {
    "validator": {
        "schema_path": ".env.schema.json",
        "env_path": ".env",
        "strict": True,
        "allow_unknown": False,
        "exit_on_error": True,
        "silent": False,
    },
    "logging": {
        "level": "WARNING",
        "color": True,
        "colors": {
            "debug": "blue",
            "info": "green",
            "warning": "yellow",
            "error": "red",
            "critical": "red",
            "function_names": "cyan",
        },
    },
}


_TYPE_MAP = {
    "string": str,
    "boolean": bool,
    "dict": dict,
    "optional_string": (str, type(None)),
}

_CONFIG_SCHEMA: Dict[str, Any] = {
    "sections": {
        "validator": {
            "type": "dict",
            "keys": {
                "schema_path": {"type": "string"},
                "env_path": {"type": "optional_string"},
                "strict": {"type": "boolean"},
                "allow_unknown": {"type": "boolean"},
                "exit_on_error": {"type": "boolean"},
                "silent": {"type": "boolean"},
            },
        },
        "logging": {
            "type": "dict",
            "keys": {
                "level": {"type": "string"},
                "color": {"type": "boolean"},
                "colors": {"type": "dict"},
            },
        },
    },
}


def _load_yaml_file(path: str) -> Any:
    if not os.path.exists(path):
        raise ConfigError(f"Configuration file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Failed to parse YAML file {path}: {exc}") from exc


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _validate_section(config: Dict[str, Any], section_name: str, section_schema: Dict[str, Any]) -> None:
    section_value = config[section_name]
    expected_type = _TYPE_MAP.get(section_schema.get("type", "dict"))
    if expected_type is not None and not isinstance(section_value, expected_type):
        raise ConfigError(
            f"Section '{section_name}' must be of type {section_schema.get('type')} "
            f"but got {type(section_value).__name__}"
        )

    for key, key_schema in section_schema.get("keys", {}).items():
        if key not in section_value:
            continue
        value = section_value[key]
        expected_type_name = key_schema.get("type", "string")
        expected_py_type = _TYPE_MAP.get(expected_type_name)
        if expected_py_type is not None and not isinstance(value, expected_py_type):
            raise ConfigError(
                f"Configuration key '{section_name}.{key}' must be of type {expected_type_name} "
                f"but got {type(value).__name__}"
            )


def _validate_config_schema(config: Dict[str, Any], schema: Dict[str, Any]) -> None:
    for section_name, section_schema in schema.get("sections", {}).items():
        if section_name in config:
            _validate_section(config, section_name, section_schema)


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load the tool configuration merged over DEFAULT_CONFIG.

    An explicitly given ``config_path`` must exist. Without one, the default
    file is used when present and the built-in defaults otherwise.
    """

    if config_path is None:
        if not os.path.exists(DEFAULT_CONFIG_PATH):
            return copy.deepcopy(DEFAULT_CONFIG)
        config_path = DEFAULT_CONFIG_PATH

    raw_config = _load_yaml_file(config_path)
    if not isinstance(raw_config, dict):
        raise ConfigError(f"Configuration file {config_path} must contain a mapping")

    # Check the user's values before defaults hide a wrongly typed section.
    _validate_config_schema(raw_config, _CONFIG_SCHEMA)
    return _deep_merge(DEFAULT_CONFIG, raw_config)


def apply_overrides(config: Dict[str, Any], section: str, overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``config`` with non-None ``overrides`` applied to ``section``."""

    updated = copy.deepcopy(config)
    target = updated.setdefault(section, {})
    for key, value in overrides.items():
        if value is not None:
            target[key] = value
    _validate_config_schema(updated, _CONFIG_SCHEMA)
    return updated


__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_PATH",
    "ConfigError",
    "apply_overrides",
    "load_config",
]
