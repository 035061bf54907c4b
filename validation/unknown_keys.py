"""Detection of environment variables that the schema does not declare."""

from typing import Iterable, List, Mapping


# Prefixes of variables set by shells, package managers and runtimes.
SYSTEM_KEY_PREFIXES = ("npm_", "NODE_", "PATH", "HOME", "USER", "SHELL")


def is_system_key(name: str) -> bool:
    return name.startswith(SYSTEM_KEY_PREFIXES)


def find_unknown_keys(env: Mapping[str, str], declared: Iterable[str]) -> List[str]:
    """Return undeclared, non-system keys of ``env`` in iteration order."""

    declared_names = set(declared)
    return [
        name
        for name in env
        if name not in declared_names and not is_system_key(name)
    ]


__all__ = ["SYSTEM_KEY_PREFIXES", "find_unknown_keys", "is_system_key"]
