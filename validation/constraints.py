"""Constraint checks applied to coerced environment values.

Every constraint is evaluated independently so a value can collect several
violations. A constraint that does not apply to the value's Python type (for
example ``pattern`` on a number) is skipped rather than reported.
"""

import re
from dataclasses import dataclass
from numbers import Real
from typing import Any, List

from env_schema.model import Property

from .formats import check_format


@dataclass(frozen=True)
class ConstraintViolation:
    """A single failed constraint: the schema keyword and a readable message."""

    keyword: str
    message: str


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _enum_member_equal(value: Any, member: Any) -> bool:
    if isinstance(value, bool) or isinstance(member, bool):
        return isinstance(value, bool) and isinstance(member, bool) and value == member
    if _is_number(value) and _is_number(member):
        return value == member
    return type(value) is type(member) and value == member


def _utf16_length(value: str) -> int:
    return len(value.encode("utf-16-le")) // 2


def _format_limit(limit: Any) -> str:
    if isinstance(limit, float) and limit.is_integer():
        return str(int(limit))
    return str(limit)


def _check_enum(value: Any, prop: Property) -> List[ConstraintViolation]:
    if prop.enum is None:
        return []
    if any(_enum_member_equal(value, member) for member in prop.enum):
        return []
    return [ConstraintViolation("enum", "must be equal to one of the allowed values")]


def _check_range(value: Any, prop: Property) -> List[ConstraintViolation]:
    if not _is_number(value):
        return []
    violations: List[ConstraintViolation] = []
    if prop.minimum is not None and value < prop.minimum:
        violations.append(ConstraintViolation("minimum", f"must be >= {_format_limit(prop.minimum)}"))
    if prop.maximum is not None and value > prop.maximum:
        violations.append(ConstraintViolation("maximum", f"must be <= {_format_limit(prop.maximum)}"))
    return violations


def _check_length(value: Any, prop: Property) -> List[ConstraintViolation]:
    if not isinstance(value, str):
        return []
    length = _utf16_length(value)
    violations: List[ConstraintViolation] = []
    if prop.min_length is not None and length < prop.min_length:
        violations.append(
            ConstraintViolation(
                "minLength", f"must NOT have fewer than {_format_limit(prop.min_length)} characters"
            )
        )
    if prop.max_length is not None and length > prop.max_length:
        violations.append(
            ConstraintViolation(
                "maxLength", f"must NOT have more than {_format_limit(prop.max_length)} characters"
            )
        )
    return violations


def _check_pattern(value: Any, prop: Property) -> List[ConstraintViolation]:
    if prop.pattern is None or not isinstance(value, str):
        return []
    try:
        compiled = re.compile(prop.pattern)
    except re.error:
        return [ConstraintViolation("pattern", f'has invalid pattern "{prop.pattern}"')]
    if compiled.search(value):
        return []
    return [ConstraintViolation("pattern", f'must match pattern "{prop.pattern}"')]


def _check_format(value: Any, prop: Property) -> List[ConstraintViolation]:
    if prop.format is None or not isinstance(value, str):
        return []
    if check_format(prop.format, value) is False:
        return [ConstraintViolation("format", f'must match format "{prop.format}"')]
    return []


_CHECKS = (_check_enum, _check_range, _check_length, _check_pattern, _check_format)


def find_violations(value: Any, prop: Property) -> List[ConstraintViolation]:
    """Return every constraint of ``prop`` that ``value`` fails, in keyword order."""

    violations: List[ConstraintViolation] = []
    for check in _CHECKS:
        violations.extend(check(value, prop))
    return violations


def check_constraints(value: Any, prop: Property) -> List[str]:
    """Return violation messages for ``value``; an empty list means it passes."""

    return [violation.message for violation in find_violations(value, prop)]


__all__ = ["ConstraintViolation", "check_constraints", "find_violations"]
