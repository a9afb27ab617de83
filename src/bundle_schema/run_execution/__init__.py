"""Run execution domain exports."""

from .bundle_run_use_case import (
    RunExecutionError,
    build_registry_index,
    execute_bundle_plan,
    execute_bundle_run,
    plan_bundle_run,
    write_registry_index,
)
from .run_contracts import RunOutcome, RunPlan, RunRequest

__all__ = [
    "RunRequest",
    "RunPlan",
    "RunOutcome",
    "RunExecutionError",
    "build_registry_index",
    "execute_bundle_plan",
    "execute_bundle_run",
    "plan_bundle_run",
    "write_registry_index",
]
