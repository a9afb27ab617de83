"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from bundle_schema.diagnostics.log_setup import LOG_LEVELS

from .runtime_settings import BundleConfiguration

DEFAULT_LOG_LEVEL = "info"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> BundleConfiguration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file: {exc}") from exc

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.parent
    inputs = _parse_inputs(parsed.get("inputs"), base_path)
    output = _parse_output(parsed.get("output"), base_path)
    log_level = _parse_log_level(parsed.get("log_level", DEFAULT_LOG_LEVEL))

    return BundleConfiguration(path=path, inputs=inputs, output=output, log_level=log_level)


def _parse_inputs(value: Any, base_path: Path) -> tuple[Path, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, Sequence):
        raise ConfigurationError("inputs must be a string or list of strings.")
    resolved = []
    for item in value:
        raw_path = _require_non_empty_string(item, "inputs entries")
        resolved.append(_resolve_path(base_path, raw_path))
    return tuple(resolved)


def _parse_output(value: Any, base_path: Path) -> Path | None:
    if value is None:
        return None
    return _resolve_path(base_path, _require_non_empty_string(value, "output"))


def _parse_log_level(value: Any) -> str:
    level = _require_non_empty_string(value, "log_level").lower()
    if level not in LOG_LEVELS:
        choices = ", ".join(LOG_LEVELS)
        raise ConfigurationError(f"log_level must be one of: {choices}.")
    return level


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
