"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class BundleConfiguration:
    """Top-level configuration aggregate."""

    path: Path
    inputs: tuple[Path, ...]
    output: Path | None
    log_level: str
