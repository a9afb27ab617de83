"""Shared fixtures for tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from bundle_schema.diagnostics import PACKAGE_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo console logging installed by CLI runs between tests."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
