"""Environment snapshot providers.

A provider is a zero-argument callable returning a mapping of variable name
to raw string. The default provider overlays the live process environment on
top of a dotenv file, so values exported in the shell win over the file.
"""

import logging
import os
from typing import Callable, Dict, Mapping, Optional

from dotenv import dotenv_values


logger = logging.getLogger(__name__)

DEFAULT_ENV_PATH = ".env"

EnvSource = Callable[[], Mapping[str, str]]


def load_env_file(path: str = DEFAULT_ENV_PATH) -> Dict[str, str]:
    """Parse a dotenv file; keys declared without a value are dropped.

    A missing file is not an error: a warning is logged and an empty mapping
    returned.
    """

    env_path = os.path.abspath(path)
    if not os.path.exists(env_path):
        logger.warning("Environment file not found: %s", env_path)
        return {}
    return {
        key: str(value)
        for key, value in dotenv_values(env_path).items()
        if value is not None
    }


def merge_env(file_env: Mapping[str, str], live_env: Mapping[str, str]) -> Dict[str, str]:
    merged = dict(file_env)
    for key, value in live_env.items():
        if value is not None:
            merged[key] = value
    return merged


def make_env_source(
    env_path: Optional[str] = DEFAULT_ENV_PATH,
    live_env: Optional[Mapping[str, str]] = None,
) -> EnvSource:
    """Build a provider that re-reads its sources on every call.

    ``live_env`` defaults to ``os.environ`` looked up at call time. Pass
    ``env_path=None`` to skip the dotenv file entirely.
    """

    def _snapshot() -> Dict[str, str]:
        file_env = load_env_file(env_path) if env_path else {}
        live = os.environ if live_env is None else live_env
        return merge_env(file_env, live)

    return _snapshot


def static_env_source(env: Mapping[str, str]) -> EnvSource:
    """Provider returning a fixed copy of ``env``; used for tests and embedding."""

    frozen = dict(env)
    return lambda: dict(frozen)


__all__ = [
    "DEFAULT_ENV_PATH",
    "EnvSource",
    "load_env_file",
    "make_env_source",
    "merge_env",
    "static_env_source",
]
