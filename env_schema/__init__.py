"""Schema model and loading for environment validation."""

from .loader import DEFAULT_SCHEMA_PATH, load_schema
from .model import PROPERTY_TYPES, Property, Schema, SchemaLoadError, schema_from_dict
from .scaffold import EXAMPLE_SCHEMA, ScaffoldExistsError, write_example_schema

__all__ = [
    "DEFAULT_SCHEMA_PATH",
    "EXAMPLE_SCHEMA",
    "PROPERTY_TYPES",
    "Property",
    "ScaffoldExistsError",
    "Schema",
    "SchemaLoadError",
    "load_schema",
    "schema_from_dict",
    "write_example_schema",
]
