"""Value objects returned by a validation run."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class ValidationIssue:
    """An error entry: the variable name, a message and, for bad values, what was seen."""

    key: str
    message: str
    value: Optional[str] = None
    expected_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"key": self.key, "message": self.message}
        if self.value is not None:
            data["value"] = self.value
        if self.expected_type is not None:
            data["expectedType"] = self.expected_type
        return data


@dataclass(frozen=True)
class ValidationWarning:
    key: str
    message: str
    value: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"key": self.key, "message": self.message}
        if self.value is not None:
            data["value"] = self.value
        return data


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of one ``EnvValidator.validate`` call.

    ``values`` holds the final typed value of each property that passed
    validation or fell back to its default.
    """

    errors: Tuple[ValidationIssue, ...] = ()
    warnings: Tuple[ValidationWarning, ...] = ()
    missing_keys: Tuple[str, ...] = ()
    invalid_keys: Tuple[str, ...] = ()
    values: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))
        object.__setattr__(self, "warnings", tuple(self.warnings))
        object.__setattr__(self, "missing_keys", tuple(self.missing_keys))
        object.__setattr__(self, "invalid_keys", tuple(self.invalid_keys))
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @property
    def valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [error.to_dict() for error in self.errors],
            "warnings": [warning.to_dict() for warning in self.warnings],
            "missingKeys": list(self.missing_keys),
            "invalidKeys": list(self.invalid_keys),
            "values": dict(self.values),
        }


__all__ = ["ValidationIssue", "ValidationOutcome", "ValidationWarning"]
