"""Code template rendering service."""

from __future__ import annotations

from pathlib import Path

import jinja2

from ecs_fieldgen.schema_management.schema_models import Schema

from .naming_helpers import go_comment, go_type_name


class TemplateRenderError(Exception):
    """Raised when the code template cannot be read, parsed or rendered."""


def read_template(template_path: Path | str) -> str:
    path = Path(template_path)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TemplateRenderError(f"Failed to read template file '{path}': {exc}") from exc


def render_schema_template(template_text: str, package_name: str, schema: Schema) -> str:
    """Render ``template_text`` against the assembled schema.

    The template receives ``package_name``, ``packages`` (sorted type
    packages to import) and ``schema``, plus the ``go_name`` and
    ``go_comment`` helpers as both filters and globals.
    """
    environment = _build_environment()
    try:
        template = environment.from_string(template_text)
        return template.render(
            package_name=package_name,
            packages=schema.packages(),
            schema=schema,
        )
    except jinja2.TemplateSyntaxError as exc:
        raise TemplateRenderError(
            f"Invalid code template (line {exc.lineno}): {exc.message}"
        ) from exc
    except jinja2.TemplateError as exc:
        raise TemplateRenderError(f"Executing code template failed: {exc}") from exc


def _build_environment() -> jinja2.Environment:
    environment = jinja2.Environment(
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        autoescape=False,
    )
    helpers = {"go_name": go_type_name, "go_comment": go_comment}
    environment.filters.update(helpers)
    environment.globals.update(helpers)
    return environment
