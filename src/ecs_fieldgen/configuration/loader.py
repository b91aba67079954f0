"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_PACKAGE_NAME,
    ConfigurationFile,
    GeneratorSettings,
    SettingOverrides,
)


class ConfigurationError(Exception):
    """Raised when the generator configuration is invalid or incomplete."""


def load_configuration(config_path: Path | str) -> ConfigurationFile:
    """Load and validate a generator configuration file.

    Relative ``template``, ``output`` and ``schemas`` entries are resolved
    against the directory holding the configuration file.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file {path}: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    template = _optional_string(parsed.get("template"), "template")
    output = _optional_string(parsed.get("output"), "output")
    schemas = parsed.get("schemas")
    return ConfigurationFile(
        path=path,
        version=_optional_string(parsed.get("version"), "version"),
        template_path=_resolve_path(base_path, template) if template else None,
        package_name=_optional_string(parsed.get("package"), "package"),
        output_path=_resolve_path(base_path, output) if output else None,
        format_code=_optional_bool(parsed.get("format"), "format"),
        exclude=_optional_string_sequence(parsed.get("exclude"), "exclude"),
        schema_paths=(
            None
            if schemas is None
            else tuple(
                _resolve_path(base_path, item)
                for item in _optional_string_sequence(schemas, "schemas") or ()
            )
        ),
    )


def resolve_generator_settings(
    overrides: SettingOverrides,
    config_path: Path | str | None = None,
    *,
    require_template: bool = True,
) -> GeneratorSettings:
    """Merge command line overrides over the optional configuration file.

    Raises:
      ConfigurationError: If a required setting is missing or invalid.
    """
    configured = load_configuration(config_path) if config_path else None

    version = overrides.version or (configured.version if configured else None)
    if not version:
        raise ConfigurationError("Error: --version required.")

    template_path = (
        Path(overrides.template_path)
        if overrides.template_path
        else (configured.template_path if configured else None)
    )
    if require_template and template_path is None:
        raise ConfigurationError("No template file configured (--template).")

    schema_paths = (
        tuple(Path(item) for item in overrides.schema_paths)
        if overrides.schema_paths
        else (configured.schema_paths if configured else None)
    )
    if not schema_paths:
        raise ConfigurationError("No schema files given.")

    exclude = (
        overrides.exclude
        if overrides.exclude
        else ((configured.exclude or ()) if configured else ())
    )
    output_path = (
        Path(overrides.output_path)
        if overrides.output_path
        else (configured.output_path if configured else None)
    )
    format_code = overrides.format_code
    if format_code is None:
        format_code = bool(configured.format_code) if configured else False

    return GeneratorSettings(
        version=version,
        template_path=template_path,
        package_name=(
            overrides.package_name
            or (configured.package_name if configured else None)
            or DEFAULT_PACKAGE_NAME
        ),
        output_path=output_path,
        format_code=format_code,
        exclude=frozenset(exclude),
        schema_paths=schema_paths,
    )


def _optional_string_sequence(value: Any, field_name: str) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, str):
        return tuple(item.strip() for item in value.split(",") if item.strip())
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _optional_bool(value: Any, field_name: str) -> bool | None:
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value
