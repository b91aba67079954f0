"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from ecs_fieldgen.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    SettingOverrides,
    resolve_generator_settings,
    write_placeholder_configuration,
)
from ecs_fieldgen.run_execution import (
    GenerationError,
    execute_code_generation_run,
    list_schema_fields,
)

_PACKAGE_LOGGER_NAME = "ecs_fieldgen"
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


def _config_option(function):
    return click.option(
        "--config",
        "config_path",
        required=False,
        type=click.Path(path_type=str),
        help="Path to YAML/JSON generator configuration file",
    )(function)


def _schema_options(function):
    function = click.argument(
        "schema_paths", nargs=-1, type=click.Path(path_type=str), metavar="[SCHEMA_PATHS]..."
    )(function)
    function = click.option(
        "-e",
        "--exclude",
        "exclude",
        multiple=True,
        help="Field path or base field name to exclude (repeatable)",
    )(function)
    function = click.option(
        "--version",
        "schema_version",
        required=False,
        help="Schema version exposed to the template (required)",
    )(function)
    return function


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="ecs-fieldgen")
@click.option("--verbose", is_flag=True, default=False, help="Log progress to stderr.")
def cli(verbose: bool) -> None:
    """Generate code from nested field-definition documents."""
    if verbose:
        _configure_logging()


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generator configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML generator configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@_schema_options
@_config_option
@click.option(
    "--template",
    "template_path",
    required=False,
    type=click.Path(path_type=str),
    help="Template file used to generate the code",
)
@click.option("--pkg", "package_name", required=False, help="Target package name [default: ecs]")
@click.option(
    "--out",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Output file; generated code is printed when omitted",
)
@click.option("--fmt/--no-fmt", "format_code", default=None, help="Format output with gofmt")
def generate(  # pylint: disable=too-many-arguments
    schema_paths: tuple[str, ...],
    exclude: tuple[str, ...],
    schema_version: str | None,
    config_path: str | None,
    template_path: str | None,
    package_name: str | None,
    output_path: str | None,
    format_code: bool | None,
) -> None:
    """Generate code from the schema files or directories in SCHEMA_PATHS."""
    overrides = SettingOverrides(
        version=schema_version,
        template_path=template_path,
        package_name=package_name,
        output_path=output_path,
        format_code=format_code,
        exclude=exclude,
        schema_paths=schema_paths,
    )
    try:
        settings = resolve_generator_settings(overrides, config_path)
        outcome = execute_code_generation_run(settings)
    except (ConfigurationError, GenerationError) as exc:
        raise CliError(str(exc)) from exc

    if outcome.output_path is None:
        click.echo(outcome.contents)
    else:
        click.echo(str(outcome.output_path))


@cli.command(name="list-fields")
@_schema_options
@_config_option
def list_fields(
    schema_paths: tuple[str, ...],
    exclude: tuple[str, ...],
    schema_version: str | None,
    config_path: str | None,
) -> None:
    """Print every assembled field with its generated type."""
    overrides = SettingOverrides(
        version=schema_version,
        exclude=exclude,
        schema_paths=schema_paths,
    )
    try:
        settings = resolve_generator_settings(overrides, config_path, require_template=False)
        listings = list_schema_fields(settings)
    except (ConfigurationError, GenerationError) as exc:
        raise CliError(str(exc)) from exc

    for listing in listings:
        click.echo(f"{listing.flat_name}\t{listing.type_name}")


class _CliLogHandler(logging.StreamHandler):
    """Stderr handler attached by --verbose; at most one per logger."""


def _configure_logging() -> None:
    logger = logging.getLogger(_PACKAGE_LOGGER_NAME)
    for existing in [item for item in logger.handlers if isinstance(item, _CliLogHandler)]:
        logger.removeHandler(existing)
    handler = _CliLogHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


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
