"""Schema model for environment variable validation.

The schema is an object-style description: a mapping of variable names to
property constraints plus an ordered list of required names. It is built
once from a parsed document and never modified afterwards.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple


class SchemaLoadError(Exception):
    """Raised when a schema is missing or structurally invalid."""


PROPERTY_TYPES = ("string", "number", "integer", "boolean")

# Schema document key -> Property attribute.
_PROPERTY_FIELDS = {
    "description": "description",
    "enum": "enum",
    "pattern": "pattern",
    "minimum": "minimum",
    "maximum": "maximum",
    "minLength": "min_length",
    "maxLength": "max_length",
    "format": "format",
}

_MISSING = object()


@dataclass(frozen=True)
class Property:
    """Constraints declared for a single environment variable."""

    type: str = "string"
    description: Optional[str] = None
    default: Any = None
    has_default: bool = False
    enum: Optional[Tuple[Any, ...]] = None
    pattern: Optional[str] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    format: Optional[str] = None


@dataclass(frozen=True)
class Schema:
    properties: Mapping[str, Property] = field(default_factory=dict)
    required: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @property
    def property_names(self) -> Tuple[str, ...]:
        return tuple(self.properties)


def property_from_dict(name: str, data: Mapping[str, Any]) -> Property:
    """Build a Property from its schema document entry."""

    if not isinstance(data, Mapping):
        raise SchemaLoadError(f"Property '{name}' must be an object")

    kwargs: Dict[str, Any] = {"type": str(data.get("type", "string"))}
    for doc_key, attr in _PROPERTY_FIELDS.items():
        if doc_key in data and data[doc_key] is not None:
            kwargs[attr] = data[doc_key]

    if "enum" in kwargs:
        if not isinstance(kwargs["enum"], (list, tuple)):
            raise SchemaLoadError(f"Property '{name}' enum must be a list")
        kwargs["enum"] = tuple(kwargs["enum"])

    default = data.get("default", _MISSING)
    if default is not _MISSING and default is not None:
        kwargs["default"] = default
        kwargs["has_default"] = True

    return Property(**kwargs)


def _dedupe(names: List[str]) -> Tuple[str, ...]:
    seen = set()
    ordered: List[str] = []
    for name in names:
        if name not in seen:
            seen.add(name)
            ordered.append(name)
    return tuple(ordered)


def schema_from_dict(data: Any) -> Schema:
    """Validate the top-level structure of a parsed schema and build a Schema.

    Only the object shape is enforced: ``type`` must be ``"object"`` and
    ``properties`` must be a mapping. Required names that are not declared as
    properties are accepted.
    """

    if not isinstance(data, Mapping):
        raise SchemaLoadError("Invalid schema format - must be a valid JSON Schema object")
    if data.get("type") != "object":
        raise SchemaLoadError("Invalid schema format - must be a valid JSON Schema object")
    properties = data.get("properties")
    if not isinstance(properties, Mapping):
        raise SchemaLoadError("Invalid schema format - must be a valid JSON Schema object")

    required = data.get("required") or []
    if not isinstance(required, (list, tuple)):
        raise SchemaLoadError("Schema 'required' must be a list of variable names")

    return Schema(
        properties={str(name): property_from_dict(str(name), prop) for name, prop in properties.items()},
        required=_dedupe([str(name) for name in required]),
    )


__all__ = [
    "PROPERTY_TYPES",
    "Property",
    "Schema",
    "SchemaLoadError",
    "property_from_dict",
    "schema_from_dict",
]
