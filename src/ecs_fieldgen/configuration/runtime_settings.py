"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_PACKAGE_NAME = "ecs"


@dataclass(frozen=True)
class ConfigurationFile:
    """Values read from a generator configuration file; unset entries are None."""

    path: Path
    version: str | None
    template_path: Path | None
    package_name: str | None
    output_path: Path | None
    format_code: bool | None
    exclude: tuple[str, ...] | None
    schema_paths: tuple[Path, ...] | None


@dataclass(frozen=True)
class SettingOverrides:
    """Values given on the command line, taking precedence over the file."""

    version: str | None = None
    template_path: str | None = None
    package_name: str | None = None
    output_path: str | None = None
    format_code: bool | None = None
    exclude: tuple[str, ...] = ()
    schema_paths: tuple[str, ...] = ()


@dataclass(frozen=True)
class GeneratorSettings:  # pylint: disable=too-many-instance-attributes
    """Normalized settings for one generator run."""

    version: str
    template_path: Path | None
    package_name: str
    output_path: Path | None
    format_code: bool
    exclude: frozenset[str]
    schema_paths: tuple[Path, ...]
