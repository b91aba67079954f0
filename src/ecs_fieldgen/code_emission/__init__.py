"""Code emission exports."""

from .naming_helpers import go_comment, go_type_name
from .source_formatting import SourceFormattingError, format_go_source
from .template_renderer import TemplateRenderError, read_template, render_schema_template

__all__ = [
    "SourceFormattingError",
    "TemplateRenderError",
    "format_go_source",
    "go_comment",
    "go_type_name",
    "read_template",
    "render_schema_template",
]
