"""Command line interface entry point."""

from __future__ import annotations

import sys

import click

from bundle_schema.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from bundle_schema.diagnostics import configure_logging, resolve_log_level
from bundle_schema.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_bundle_plan,
    plan_bundle_run,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="bundle-schema")
def cli() -> None:
    """Register JSON Schema documents by `$id` for bundling."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML bundle configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML bundle configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="bundle")
@click.option(
    "-i",
    "--input",
    "input_paths",
    multiple=True,
    type=click.Path(path_type=str),
    help="Input schema file. Repeat for multiple files, like `-i foo.json -i bar.json`.",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to write the registry index (relative id -> canonical $id) to",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON bundle configuration file",
)
@click.option("--debug", is_flag=True, default=False, help="Output debug information.")
def bundle(
    input_paths: tuple[str, ...], output_path: str | None, config_path: str | None, debug: bool
) -> None:
    """Register input schemas by their `$id` and report the relative identifiers."""
    request = RunRequest(
        input_paths=tuple(input_paths), output_path=output_path, config_path=config_path
    )
    try:
        plan = plan_bundle_run(request)
        configure_logging(resolve_log_level(plan.log_level, debug=debug))
        outcome = execute_bundle_plan(plan)
    except (RunExecutionError, ValueError) as exc:
        raise CliError(str(exc)) from exc

    for relative_id in outcome.registry.relative_ids():
        click.echo(relative_id)
    click.echo(
        f"registered {outcome.registered}, dropped {outcome.dropped}, "
        f"unreadable {outcome.skipped_inputs}",
        err=True,
    )
    if outcome.output_path is not None:
        click.echo(str(outcome.output_path), err=True)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
