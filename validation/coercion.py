"""Coercion of raw environment strings into typed values.

Numbers follow JavaScript ``Number()`` parsing rather than Python ``float()``
so that schemas behave the same regardless of which tool reads them:
``"inf"``, ``"nan"`` and ``"1_000"`` are rejected, ``"0x1F"`` and
``"Infinity"`` are accepted, and whitespace-only input parses as zero.
"""

import math
import re
from typing import Union


CoercedValue = Union[str, int, float, bool]

TRUTHY_VALUES = frozenset({"true", "1", "yes", "on"})
FALSY_VALUES = frozenset({"false", "0", "no", "off", ""})

_DECIMAL_NUMERAL = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_INFINITY_NUMERAL = re.compile(r"([+-]?)Infinity")
_PREFIXED_NUMERALS = (
    (re.compile(r"0[xX]([0-9a-fA-F]+)"), 16),
    (re.compile(r"0[oO]([0-7]+)"), 8),
    (re.compile(r"0[bB]([01]+)"), 2),
)


class CoercionError(ValueError):
    """Raised when a raw string cannot represent the declared type."""


def parse_numeral(raw: str) -> float:
    """Parse ``raw`` as a floating-point numeral; returns NaN when it is not one."""

    text = raw.strip()
    if not text:
        return 0.0
    if _DECIMAL_NUMERAL.fullmatch(text):
        return float(text)
    infinity = _INFINITY_NUMERAL.fullmatch(text)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf
    for pattern, base in _PREFIXED_NUMERALS:
        match = pattern.fullmatch(text)
        if match:
            try:
                return float(int(match.group(1), base))
            except OverflowError:
                return math.inf
    return math.nan


def _coerce_number(raw: str, type_name: str) -> float:
    number = parse_numeral(raw)
    if math.isnan(number):
        raise CoercionError(f'Cannot convert "{raw}" to {type_name}')
    return number


def _coerce_integer(raw: str) -> int:
    number = _coerce_number(raw, "integer")
    if math.isinf(number):
        raise CoercionError(f'Cannot convert "{raw}" to integer')
    return int(math.trunc(number))


def _coerce_boolean(raw: str) -> bool:
    token = raw.strip().lower()
    if token in TRUTHY_VALUES:
        return True
    if token in FALSY_VALUES:
        return False
    raise CoercionError(f'Cannot convert "{raw}" to boolean')


def coerce_value(raw: str, type_name: str) -> CoercedValue:
    """Convert ``raw`` into the Python value for ``type_name``.

    Unrecognised type names are passed through as strings.
    """

    if type_name == "number":
        return _coerce_number(raw, "number")
    if type_name == "integer":
        return _coerce_integer(raw)
    if type_name == "boolean":
        return _coerce_boolean(raw)
    return raw


__all__ = [
    "FALSY_VALUES",
    "TRUTHY_VALUES",
    "CoercedValue",
    "CoercionError",
    "coerce_value",
    "parse_numeral",
]
