"""Bundle run use-case tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from bundle_schema.registry import SchemaRegistry
from bundle_schema.run_execution import (
    RunExecutionError,
    RunPlan,
    RunRequest,
    build_registry_index,
    execute_bundle_plan,
    execute_bundle_run,
    plan_bundle_run,
)


def _write_json(path: Path, payload: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_plan_requires_at_least_one_input() -> None:
    with pytest.raises(RunExecutionError, match="At least one input"):
        plan_bundle_run(RunRequest())


def test_plan_merges_configuration_and_command_line(tmp_path: Path) -> None:
    config_path = tmp_path / "bundle.yaml"
    config_path.write_text(
        "inputs:\n  - a.json\noutput: configured.json\nlog_level: warning\n", encoding="utf-8"
    )

    plan = plan_bundle_run(
        RunRequest(
            input_paths=("extra.json",),
            output_path="override.json",
            config_path=str(config_path),
        )
    )

    assert plan.input_paths == ((tmp_path / "a.json").resolve(), Path("extra.json"))
    assert plan.output_path == Path("override.json")
    assert plan.log_level == "warning"


def test_plan_wraps_configuration_errors(tmp_path: Path) -> None:
    with pytest.raises(RunExecutionError, match="not found"):
        plan_bundle_run(RunRequest(config_path=str(tmp_path / "missing.yaml")))


def test_execute_registers_loaded_documents(tmp_path: Path) -> None:
    schema_a = _write_json(tmp_path / "a.json", {"$id": "https://foo.com/s/a.json"})
    fragment = _write_json(tmp_path / "fragment.json", {"type": "string"})
    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")

    outcome = execute_bundle_run(
        RunRequest(input_paths=(str(schema_a), str(fragment), str(broken), str(tmp_path / "x")))
    )

    assert outcome.registered == 1
    assert outcome.dropped == 1
    assert outcome.skipped_inputs == 2
    assert outcome.output_path is None
    assert outcome.registry.lookup("s/a.json") == {"$id": "https://foo.com/s/a.json"}


def test_execute_writes_sorted_registry_index(tmp_path: Path) -> None:
    schema_b = _write_json(tmp_path / "b.json", {"$id": "https://foo.com/z/b.json"})
    schema_a = _write_json(tmp_path / "a.json", {"$id": "urn:example:a"})
    output_path = tmp_path / "out" / "index.json"

    outcome = execute_bundle_plan(
        RunPlan(input_paths=(schema_b, schema_a), output_path=output_path, log_level="info")
    )

    assert outcome.output_path == output_path.resolve()
    written = output_path.read_text(encoding="utf-8")
    assert json.loads(written) == {
        "example:a": "urn:example:a",
        "z/b.json": "https://foo.com/z/b.json",
    }
    assert list(json.loads(written)) == ["example:a", "z/b.json"]


def test_execute_uses_supplied_registry(tmp_path: Path) -> None:
    registry = SchemaRegistry()
    registry.register({"$id": "https://foo.com/existing.json"})
    schema = _write_json(tmp_path / "new.json", {"$id": "https://foo.com/new.json"})

    outcome = execute_bundle_plan(
        RunPlan(input_paths=(schema,), output_path=None, log_level="info"), registry=registry
    )

    assert outcome.registry is registry
    assert build_registry_index(registry) == {
        "existing.json": "https://foo.com/existing.json",
        "new.json": "https://foo.com/new.json",
    }
