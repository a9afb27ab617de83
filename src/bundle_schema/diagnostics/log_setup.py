"""Console logging setup for the command line entry point."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

PACKAGE_LOGGER_NAME = "bundle_schema"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class _ConsoleHandler(logging.StreamHandler):
    """Marker type so repeated setup replaces only our own handler."""


def resolve_log_level(name: str | None, *, debug: bool = False) -> int:
    """Map a level name to a logging level; `debug` wins over the name."""
    if debug:
        return logging.DEBUG
    if name is None:
        return logging.INFO
    try:
        return LOG_LEVELS[name.strip().lower()]
    except KeyError as exc:
        raise ValueError(f"Unsupported log level: {name}") from exc


def configure_logging(level: int = logging.INFO, stream: TextIO | None = None) -> logging.Logger:
    """Attach a single console handler to the package logger and set its level."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, _ConsoleHandler):
            logger.removeHandler(handler)

    handler = _ConsoleHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.debug("Debugging enabled.")
    return logger
