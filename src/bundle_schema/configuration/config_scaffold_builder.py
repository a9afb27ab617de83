"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "bundle-schema.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Bundle configuration template for bundle-schema.
# Replace every <REQUIRED> placeholder before running bundle --config.
# Replace <OPTIONAL> placeholders only when your setup needs them.

# Schema files to register. Each root schema must declare an absolute $id.
# Relative paths resolve against the directory of this file.
inputs:
  - "<REQUIRED>"

# Where to write the registry index (relative id -> canonical $id).
# output: "<OPTIONAL>"

# One of debug, info, warning, error.
# log_level: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML bundle configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
