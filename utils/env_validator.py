"""Startup environment validation.

Responsibilities:
- Build a validator from the ``validator`` configuration section
- Print the outcome unless silenced
- Fail when the environment is invalid and ``exit_on_error`` is set
- Hand back the typed values of the declared variables
"""

import logging
from typing import Any, Dict, Optional

from validation.engine import EnvValidator, ValidatorOptions
from validation.result import ValidationOutcome

from .config_loader import DEFAULT_CONFIG
from .console import ConsoleReporter


logger = logging.getLogger(__name__)


class EnvValidationError(Exception):
    """Raised when the environment fails validation and failing is requested."""

    def __init__(self, outcome: ValidationOutcome) -> None:
        keys = list(outcome.missing_keys) + list(outcome.invalid_keys)
        if not keys:
            keys = [error.key for error in outcome.errors]
        super().__init__("Environment validation failed: " + ", ".join(keys))
        self.outcome = outcome


def _validator_settings(config: Dict[str, Any]) -> Dict[str, Any]:
    settings = dict(DEFAULT_CONFIG["validator"])
    settings.update(config.get("validator", {}) or {})
    return settings


def build_validator(config: Dict[str, Any], live_env: Optional[Dict[str, str]] = None) -> EnvValidator:
    """Create an EnvValidator from configuration; raises SchemaLoadError on a bad schema."""

    settings = _validator_settings(config)
    options = ValidatorOptions(
        strict=bool(settings["strict"]),
        allow_unknown=bool(settings["allow_unknown"]),
    )
    return EnvValidator.from_files(
        schema_path=settings["schema_path"],
        env_path=settings["env_path"],
        options=options,
        live_env=live_env,
    )


def validate_environment(
    config: Dict[str, Any],
    reporter: Optional[ConsoleReporter] = None,
    live_env: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Validate the environment described by ``config`` and return typed values.

    Behavior is controlled by:
    - validator.silent
    - validator.exit_on_error
    """

    settings = _validator_settings(config)
    reporter = reporter or ConsoleReporter(silent=bool(settings["silent"]))

    outcome = build_validator(config, live_env=live_env).validate()
    reporter.report(outcome)

    if not outcome.valid:
        logger.info("Environment invalid: %d errors", len(outcome.errors))
        if settings["exit_on_error"]:
            raise EnvValidationError(outcome)

    return dict(outcome.values)


__all__ = ["EnvValidationError", "build_validator", "validate_environment"]
