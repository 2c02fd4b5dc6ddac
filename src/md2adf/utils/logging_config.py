"""Logging setup for md2adf."""

from __future__ import annotations

import logging
import sys

_PACKAGE_LOGGER = "md2adf"
_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the md2adf namespace."""
    return logging.getLogger(name)


def configure_logging(level: str | int = "WARNING") -> None:
    """Attach a single stderr handler to the package logger.

    Logs go to stderr so they never interleave with JSON written to stdout.
    Calling this again only adjusts the level.

    Raises:
        ValueError: If ``level`` is not a known logging level name.
    """
    global _configured

    if isinstance(level, str):
        level = level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {level!r}")

    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(level)
    if _configured:
        return

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    _configured = True
