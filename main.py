"""Command line entry point for the environment validator.

Commands:
- validate: full colored report, non-zero exit on failure unless --no-exit
- check: one-line pass/fail with error bullets
- init: write an example .env.schema.json
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from env_schema.loader import DEFAULT_SCHEMA_PATH
from env_schema.model import SchemaLoadError
from env_schema.scaffold import ScaffoldExistsError, write_example_schema
from utils.colored_logging import setup_colored_logging
from utils.config_loader import ConfigError, apply_overrides, load_config
from utils.console import ConsoleReporter
from utils.env_loader import DEFAULT_ENV_PATH
from utils.env_validator import EnvValidationError, build_validator, validate_environment


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="env-validate",
        description="Validate environment variables against a JSON schema",
    )
    subparsers = parser.add_subparsers(dest="command")

    validate_parser = subparsers.add_parser("validate", help="Validate environment variables")
    validate_parser.add_argument("-c", "--config", dest="config_path", default=None, help="Path to env_validator.yaml")
    validate_parser.add_argument("-s", "--schema", dest="schema_path", default=None, help="Path to schema file")
    validate_parser.add_argument("-e", "--env", dest="env_path", default=None, help="Path to .env file")
    validate_parser.add_argument("--no-strict", dest="strict", action="store_const", const=False, default=None, help="Disable strict mode")
    validate_parser.add_argument("--allow-unknown", dest="allow_unknown", action="store_const", const=True, default=None, help="Allow unknown environment variables")
    validate_parser.add_argument("--no-exit", dest="exit_on_error", action="store_const", const=False, default=None, help="Do not exit non-zero on validation errors")
    validate_parser.add_argument("--silent", dest="silent", action="store_const", const=True, default=None, help="Suppress output")
    validate_parser.add_argument("--json", action="store_true", help="Print the validation outcome as JSON")
    validate_parser.set_defaults(handler=_cmd_validate)

    check_parser = subparsers.add_parser("check", help="Quick validation check")
    check_parser.add_argument("-s", "--schema", dest="schema_path", default=DEFAULT_SCHEMA_PATH, help="Path to schema file")
    check_parser.add_argument("-e", "--env", dest="env_path", default=DEFAULT_ENV_PATH, help="Path to .env file")
    check_parser.set_defaults(handler=_cmd_check)

    init_parser = subparsers.add_parser("init", help="Initialize a new .env.schema.json file")
    init_parser.add_argument("-f", "--force", action="store_true", help="Overwrite existing schema file")
    init_parser.add_argument("-o", "--output", dest="output_path", default=DEFAULT_SCHEMA_PATH, help="Where to write the schema")
    init_parser.set_defaults(handler=_cmd_init)

    return parser


def _cmd_validate(args: argparse.Namespace) -> int:
    config = load_config(args.config_path)
    config = apply_overrides(
        config,
        "validator",
        {
            "schema_path": args.schema_path,
            "env_path": args.env_path,
            "strict": args.strict,
            "allow_unknown": args.allow_unknown,
            "exit_on_error": args.exit_on_error,
            "silent": args.silent,
        },
    )
    setup_colored_logging(config)

    if args.json:
        outcome = build_validator(config).validate()
        print(json.dumps(outcome.to_dict(), indent=2, default=str))
        if not outcome.valid and config["validator"]["exit_on_error"]:
            return 1
        return 0

    validate_environment(config)
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    config: Dict[str, Any] = {"validator": {"schema_path": args.schema_path, "env_path": args.env_path}}
    outcome = build_validator(config).validate()
    reporter = ConsoleReporter()

    if outcome.valid:
        reporter.success("Environment validation passed")
        return 0

    reporter.error("Environment validation failed")
    reporter.bullets((error.message for error in outcome.errors), "red")
    return 1


def _cmd_init(args: argparse.Namespace) -> int:
    path = write_example_schema(args.output_path, force=args.force)
    ConsoleReporter().success(f"Created {path} with example schema")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "handler", None) is None:
        parser.print_help()
        return 0

    try:
        return args.handler(args)
    except EnvValidationError:
        # Details were already printed by the reporter.
        return 1
    except (ConfigError, SchemaLoadError, ScaffoldExistsError) as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
