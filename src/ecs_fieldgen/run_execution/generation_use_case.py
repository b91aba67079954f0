"""Code generation use-case service."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from ecs_fieldgen.code_emission import (
    SourceFormattingError,
    TemplateRenderError,
    format_go_source,
    read_template,
    render_schema_template,
)
from ecs_fieldgen.configuration import GeneratorSettings
from ecs_fieldgen.schema_management import Schema, SchemaError, load_schema_from_paths

from .run_contracts import FieldListing, GenerationOutcome

SourceFormatter = Callable[[str], str]

OUTPUT_FILE_MODE = 0o600

_LOGGER = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when a generator run cannot be completed."""


def execute_code_generation_run(
    settings: GeneratorSettings,
    *,
    source_formatter: SourceFormatter | None = None,
) -> GenerationOutcome:
    """Assemble the schema, render the template and write or return the result."""
    if settings.template_path is None:
        raise GenerationError("No template file configured.")
    resolved_formatter = source_formatter or format_go_source

    schema = _load_schema(settings)
    try:
        template_text = read_template(settings.template_path)
        contents = render_schema_template(template_text, settings.package_name, schema)
    except TemplateRenderError as exc:
        raise GenerationError(f"Failed to apply the code template: {exc}") from exc

    if settings.format_code:
        try:
            contents = resolved_formatter(contents)
        except SourceFormattingError as exc:
            raise GenerationError(str(exc)) from exc

    if settings.output_path is not None:
        _write_output(settings.output_path, contents)
        _LOGGER.info("Wrote generated code to %s", settings.output_path)

    return GenerationOutcome(
        contents=contents,
        output_path=settings.output_path.resolve() if settings.output_path else None,
        formatted=settings.format_code,
    )


def list_schema_fields(settings: GeneratorSettings) -> tuple[FieldListing, ...]:
    """Return every assembled value sorted by flat name."""
    schema = _load_schema(settings)
    return tuple(
        FieldListing(
            flat_name=value.flat_name,
            type_name=value.type.name,
            description=value.description,
        )
        for _, value in sorted(schema.values.items())
    )


def _load_schema(settings: GeneratorSettings) -> Schema:
    try:
        return load_schema_from_paths(settings.version, settings.schema_paths, settings.exclude)
    except SchemaError as exc:
        raise GenerationError(f"Failed to load schema: {exc}") from exc


def _write_output(output_path: Path, contents: str) -> None:
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        descriptor = os.open(output_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, OUTPUT_FILE_MODE)
        with os.fdopen(descriptor, "w", encoding="utf-8") as output_file:
            os.fchmod(output_file.fileno(), OUTPUT_FILE_MODE)
            output_file.write(contents)
    except OSError as exc:
        raise GenerationError(f"Failed to write file '{output_path}': {exc}") from exc
