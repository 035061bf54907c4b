"""Colored console rendering of validation outcomes."""

import sys
from typing import Iterable, Optional, TextIO

from termcolor import colored

from validation.result import ValidationOutcome


class ConsoleReporter:
    """Print status lines, bullet lists and outcome summaries.

    Every method is a no-op when ``silent`` is set. Errors go to ``err``,
    everything else to ``out``.
    """

    def __init__(
        self,
        silent: bool = False,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> None:
        self.silent = silent
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    def _emit(self, text: str, stream: TextIO) -> None:
        if not self.silent:
            print(text, file=stream)

    def success(self, message: str) -> None:
        self._emit(colored(f"✓ {message}", "green"), self.out)

    def error(self, message: str) -> None:
        self._emit(colored(f"✗ {message}", "red"), self.err)

    def warn(self, message: str) -> None:
        self._emit(colored(f"⚠ {message}", "yellow"), self.out)

    def info(self, message: str) -> None:
        self._emit(colored(f"ℹ {message}", "blue"), self.out)

    def section(self, title: str) -> None:
        self._emit(colored(f"\n{title}:", "cyan", attrs=["bold"]), self.out)

    def bullets(self, items: Iterable[str], color: str = "blue") -> None:
        for item in items:
            self._emit(colored(f"  • {item}", color), self.out)

    def report(self, outcome: ValidationOutcome) -> None:
        """Render errors, then warnings, then the missing and invalid key summaries."""

        if outcome.valid:
            self.success("Environment validation passed!")
        else:
            self.error("Environment validation failed!")

        if outcome.errors:
            self.section("Errors")
            self.bullets((error.message for error in outcome.errors), "red")

        if outcome.warnings:
            self.section("Warnings")
            self.bullets((warning.message for warning in outcome.warnings), "yellow")

        if outcome.missing_keys:
            self.error(f"Missing required variables: {', '.join(outcome.missing_keys)}")

        if outcome.invalid_keys:
            self.error(f"Invalid variables: {', '.join(outcome.invalid_keys)}")


__all__ = ["ConsoleReporter"]
