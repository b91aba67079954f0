"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, resolve_generator_settings
from .runtime_settings import (
    DEFAULT_PACKAGE_NAME,
    ConfigurationFile,
    GeneratorSettings,
    SettingOverrides,
)

__all__ = [
    "ConfigurationFile",
    "GeneratorSettings",
    "SettingOverrides",
    "ConfigurationError",
    "load_configuration",
    "resolve_generator_settings",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_PACKAGE_NAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
