"""Validation engine for environment variables.

Responsibilities:
- Check that required variables are present and non-empty
- Coerce each declared variable to its schema type and check its constraints
- Fall back to schema defaults for unset variables
- Warn about variables the schema does not declare

``EnvValidator.validate`` always returns a ValidationOutcome. Failures while
reading the environment are reported inside the outcome instead of raised.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional
import logging

from env_schema.loader import DEFAULT_SCHEMA_PATH, load_schema
from env_schema.model import Property, Schema
from utils.env_loader import DEFAULT_ENV_PATH, EnvSource, make_env_source

from .coercion import CoercionError, coerce_value
from .constraints import check_constraints
from .result import ValidationIssue, ValidationOutcome, ValidationWarning
from .unknown_keys import find_unknown_keys


logger = logging.getLogger(__name__)

SENTINEL_ERROR_KEY = "VALIDATION_ERROR"


@dataclass(frozen=True)
class ValidatorOptions:
    """Engine switches.

    ``allow_unknown`` suppresses unknown-variable warnings. ``strict`` is
    carried through from configuration and does not change any check.
    """

    strict: bool = True
    allow_unknown: bool = False


def _is_unset(env: Mapping[str, str], name: str) -> bool:
    value = env.get(name)
    return value is None or value == ""


def _render_default(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class EnvValidator:
    """Validate environment snapshots against a loaded Schema."""

    def __init__(
        self,
        schema: Schema,
        env_source: EnvSource,
        options: Optional[ValidatorOptions] = None,
    ) -> None:
        self._schema = schema
        self._env_source = env_source
        self._options = options or ValidatorOptions()

    @classmethod
    def from_files(
        cls,
        schema_path: str = DEFAULT_SCHEMA_PATH,
        env_path: Optional[str] = DEFAULT_ENV_PATH,
        options: Optional[ValidatorOptions] = None,
        live_env: Optional[Mapping[str, str]] = None,
    ) -> "EnvValidator":
        """Build a validator from a schema file and a dotenv-backed source.

        Raises SchemaLoadError if the schema cannot be loaded.
        """

        schema = load_schema(schema_path)
        return cls(schema, make_env_source(env_path, live_env), options)

    @property
    def schema(self) -> Schema:
        return self._schema

    @property
    def options(self) -> ValidatorOptions:
        return self._options

    def validate(self) -> ValidationOutcome:
        try:
            env = dict(self._env_source())
            outcome = self._validate_snapshot(env)
        except Exception as exc:  # noqa: BLE001
            logger.error("Environment validation aborted: %s", exc)
            return ValidationOutcome(
                errors=(ValidationIssue(key=SENTINEL_ERROR_KEY, message=str(exc) or type(exc).__name__),),
            )

        logger.debug(
            "Validated %d variables: %d errors, %d warnings",
            len(env),
            len(outcome.errors),
            len(outcome.warnings),
        )
        return outcome

    def _validate_snapshot(self, env: Mapping[str, str]) -> ValidationOutcome:
        errors: List[ValidationIssue] = []
        warnings: List[ValidationWarning] = []
        missing_keys: List[str] = []
        invalid_keys: List[str] = []
        values: Dict[str, Any] = {}

        for name in self._schema.required:
            if _is_unset(env, name):
                missing_keys.append(name)
                errors.append(
                    ValidationIssue(
                        key=name,
                        message=f'Required environment variable "{name}" is missing or empty',
                    )
                )

        for name, prop in self._schema.properties.items():
            if _is_unset(env, name):
                if prop.has_default:
                    values[name] = prop.default
                    warnings.append(
                        ValidationWarning(
                            key=name,
                            message=f'Using default value for "{name}"',
                            value=_render_default(prop.default),
                        )
                    )
                continue

            raw = env[name]
            error = self._check_property(name, raw, prop, values)
            if error is not None:
                invalid_keys.append(name)
                errors.append(error)

        if not self._options.allow_unknown:
            for name in find_unknown_keys(env, self._schema.property_names):
                warnings.append(
                    ValidationWarning(
                        key=name,
                        message=f'Unknown environment variable "{name}" not defined in schema',
                        value=env[name],
                    )
                )

        return ValidationOutcome(
            errors=tuple(errors),
            warnings=tuple(warnings),
            missing_keys=tuple(missing_keys),
            invalid_keys=tuple(invalid_keys),
            values=values,
        )

    @staticmethod
    def _check_property(
        name: str,
        raw: str,
        prop: Property,
        values: Dict[str, Any],
    ) -> Optional[ValidationIssue]:
        """Coerce and check one variable; record its value or return the error."""

        try:
            coerced = coerce_value(raw, prop.type)
        except CoercionError as exc:
            return ValidationIssue(
                key=name,
                message=f'Invalid value for "{name}": {exc}',
                value=raw,
                expected_type=prop.type,
            )

        try:
            messages = check_constraints(coerced, prop)
        except (TypeError, ValueError) as exc:
            # A wrongly typed constraint in the schema stays with its own key.
            messages = [f"has an unusable constraint: {exc}"]
        if messages:
            return ValidationIssue(
                key=name,
                message=f'Invalid value for "{name}": {messages[0]}',
                value=raw,
                expected_type=prop.type,
            )

        values[name] = coerced
        return None


__all__ = ["SENTINEL_ERROR_KEY", "EnvValidator", "ValidatorOptions"]
