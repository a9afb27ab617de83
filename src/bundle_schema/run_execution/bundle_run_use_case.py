"""Bundle run use-case service."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from bundle_schema.configuration import ConfigurationError, load_configuration
from bundle_schema.configuration.loader import DEFAULT_LOG_LEVEL
from bundle_schema.input_loading import load_documents
from bundle_schema.registry import SchemaRegistry

from .run_contracts import RunOutcome, RunPlan, RunRequest

_LOGGER = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a bundle run cannot be completed."""


def plan_bundle_run(request: RunRequest) -> RunPlan:
    """Merge command line inputs with the optional configuration file.

    Configuration inputs come first, command line inputs are appended, and a
    command line output path overrides the configured one.
    """
    input_paths: list[Path] = []
    output_path: Path | None = None
    log_level = DEFAULT_LOG_LEVEL
    if request.config_path:
        try:
            configuration = load_configuration(request.config_path)
        except ConfigurationError as exc:
            raise RunExecutionError(str(exc)) from exc
        input_paths.extend(configuration.inputs)
        output_path = configuration.output
        log_level = configuration.log_level

    input_paths.extend(Path(raw_path) for raw_path in request.input_paths)
    if request.output_path:
        output_path = Path(request.output_path)
    if not input_paths:
        raise RunExecutionError("At least one input schema file is required.")

    return RunPlan(input_paths=tuple(input_paths), output_path=output_path, log_level=log_level)


def execute_bundle_plan(plan: RunPlan, *, registry: SchemaRegistry | None = None) -> RunOutcome:
    """Load every planned input, register it, and write the index when requested."""
    resolved_registry = registry if registry is not None else SchemaRegistry()
    loaded = load_documents(plan.input_paths)
    _LOGGER.debug("Inputs: %s", [item.source_name for item in loaded])

    outcomes = []
    for item in loaded:
        outcome = resolved_registry.register(item.document)
        if outcome.issue is not None:
            _LOGGER.info("Skipped %s (%s)", item.source_name, outcome.issue.value)
        outcomes.append(outcome)

    output_path = None
    if plan.output_path is not None:
        output_path = write_registry_index(resolved_registry, plan.output_path)

    return RunOutcome(
        registry=resolved_registry,
        outcomes=tuple(outcomes),
        skipped_inputs=len(plan.input_paths) - len(loaded),
        output_path=output_path,
    )


def execute_bundle_run(request: RunRequest) -> RunOutcome:
    """Execute one full bundling run and return run outcome."""
    return execute_bundle_plan(plan_bundle_run(request))


def build_registry_index(registry: SchemaRegistry) -> dict[str, str]:
    """Return relative identifier to canonical `$id` for every stored schema."""
    index: dict[str, str] = {}
    for relative_id in registry.relative_ids():
        entry = registry.entry(relative_id)
        if entry is not None:
            index[relative_id] = entry.identity.canonical
    return index


def write_registry_index(registry: SchemaRegistry, output_path: Path | str) -> Path:
    """Write the registry index as JSON and return the resolved destination."""
    destination = Path(output_path)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(
            json.dumps(build_registry_index(registry), indent=2) + "\n", encoding="utf-8"
        )
    except OSError as exc:
        raise RunExecutionError(f"Failed to write registry index {destination}: {exc}") from exc
    return destination.resolve()
