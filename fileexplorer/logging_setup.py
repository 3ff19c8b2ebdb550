"""Logging configuration for the command-line entry point.

Console output of the session is user-facing text, so diagnostic logging is
silent unless a level or a log file is requested.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from .config import normalize_log_level

LOGGER_NAME = "fileexplorer"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_FILE_LEVEL = "INFO"

_HANDLER_MARKER = "_fileexplorer_handler"


def _remove_installed_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            logger.removeHandler(handler)
            handler.close()


def configure_logging(level: str | None = None, log_file: Path | None = None) -> logging.Logger:
    """Install exactly one handler on the package logger.

    - ``log_file`` given: append to that file (level defaults to INFO).
    - only ``level`` given: write to stderr.
    - neither: a ``NullHandler``.

    Raises ``ValueError`` for unknown level names. Calling again replaces the
    handler installed by the previous call.
    """
    normalized = None
    if level is not None:
        normalized = normalize_log_level(level)
        if normalized is None:
            raise ValueError(f"unknown log level: {level!r}")

    logger = logging.getLogger(LOGGER_NAME)
    _remove_installed_handlers(logger)

    handler: logging.Handler
    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        normalized = normalized or DEFAULT_FILE_LEVEL
    elif normalized is not None:
        handler = logging.StreamHandler(sys.stderr)
    else:
        handler = logging.NullHandler()

    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    setattr(handler, _HANDLER_MARKER, True)
    logger.addHandler(handler)
    logger.setLevel(normalized or logging.WARNING)
    logger.propagate = False
    return logger
