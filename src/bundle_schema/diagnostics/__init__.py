"""Diagnostics exports."""

from .log_setup import LOG_LEVELS, PACKAGE_LOGGER_NAME, configure_logging, resolve_log_level

__all__ = ["LOG_LEVELS", "PACKAGE_LOGGER_NAME", "configure_logging", "resolve_log_level"]
