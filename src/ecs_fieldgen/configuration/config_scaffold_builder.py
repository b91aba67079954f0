"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "fieldgen.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generator configuration for ecs-fieldgen.
# Replace every <REQUIRED> placeholder before running generate.
# Relative paths are resolved against the directory of this file.
# Command line options take precedence over the values below.

# Schema version exposed to the template as schema.version.
version: "<REQUIRED>"

# Jinja2 code template rendered with package_name, packages and schema.
template: "<REQUIRED>"

# Target package name.
package: "ecs"

# Output file; generated code is printed to stdout when omitted.
# output: "ecs.go"

# Pipe the generated code through gofmt.
format: false

# Field definition files or directories (every *.yml inside is loaded).
schemas:
  - "<REQUIRED>"

# Dotted field paths or base field names to leave out of the schema.
exclude: []
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generator configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
