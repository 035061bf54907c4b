"""Environment validation engine.

Exposes the validator, its options and the outcome value objects.
"""

from .coercion import CoercionError, coerce_value
from .constraints import ConstraintViolation, check_constraints, find_violations
from .engine import SENTINEL_ERROR_KEY, EnvValidator, ValidatorOptions
from .result import ValidationIssue, ValidationOutcome, ValidationWarning
from .unknown_keys import SYSTEM_KEY_PREFIXES, find_unknown_keys, is_system_key

__all__ = [
    "SENTINEL_ERROR_KEY",
    "SYSTEM_KEY_PREFIXES",
    "CoercionError",
    "ConstraintViolation",
    "EnvValidator",
    "ValidationIssue",
    "ValidationOutcome",
    "ValidationWarning",
    "ValidatorOptions",
    "check_constraints",
    "coerce_value",
    "find_unknown_keys",
    "find_violations",
    "is_system_key",
]
