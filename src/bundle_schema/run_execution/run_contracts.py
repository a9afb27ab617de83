"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from bundle_schema.registry.registry_models import RegistrationOutcome
from bundle_schema.registry.schema_registry import SchemaRegistry


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one bundling run."""

    input_paths: tuple[str, ...] = ()
    output_path: str | None = None
    config_path: str | None = None


@dataclass(frozen=True)
class RunPlan:
    """Inputs and settings resolved from the request and optional configuration."""

    input_paths: tuple[Path, ...]
    output_path: Path | None
    log_level: str


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    registry: SchemaRegistry
    outcomes: tuple[RegistrationOutcome, ...]
    skipped_inputs: int
    output_path: Path | None = None

    @property
    def registered(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.is_stored)

    @property
    def dropped(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.is_stored)
