"""Diagnostic logging for env-validate runs.

Validation results are printed by the console reporter; this module only
configures the root logger that carries diagnostics (schema loading, missing
dotenv files, aborted runs). Level names are tinted with termcolor using the
``logging.colors`` palette, and ``logging.color: false`` turns tinting off.
"""

import logging
from typing import Any, Dict, Optional

from termcolor import colored


LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
DEBUG_LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s.%(funcName)s:%(lineno)d %(message)s"
DATE_FORMAT = "%H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Tint the level name, and the function name when it appears in the format."""

    def __init__(self, colors: Dict[str, str], *args: Any, use_color: bool = True, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.colors = colors
        self.use_color = use_color

    def _tint(self, text: str, color: Optional[str]) -> str:
        if not self.use_color or not color:
            return text
        return colored(text, color)

    def format(self, record: logging.LogRecord) -> str:
        tinted = logging.makeLogRecord(record.__dict__)
        tinted.levelname = self._tint(record.levelname, self.colors.get(record.levelname.lower()))
        tinted.funcName = self._tint(record.funcName, self.colors.get("function_names"))
        return super().format(tinted)


def _resolve_level(config: Dict[str, Any]) -> int:
    level_name = str(config.get("logging", {}).get("level", "WARNING")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    if config.get("validator", {}).get("silent"):
        level = max(level, logging.ERROR)
    return level


def setup_colored_logging(config: Dict[str, Any]) -> logging.Logger:
    """Point the root logger at stderr with one colored handler.

    DEBUG runs switch to a format with timestamps and call sites.
    """

    logging_cfg = config.get("logging", {})
    level = _resolve_level(config)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(
        ColoredFormatter(
            logging_cfg.get("colors", {}),
            fmt=DEBUG_LOG_FORMAT if level <= logging.DEBUG else LOG_FORMAT,
            datefmt=DATE_FORMAT,
            use_color=bool(logging_cfg.get("color", True)),
        )
    )
    root.addHandler(handler)
    return root


__all__ = ["ColoredFormatter", "setup_colored_logging"]
