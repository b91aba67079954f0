"""Field-definition document loader."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .schema_errors import DefinitionLoadError
from .schema_models import Definition

SCHEMA_FILE_GLOB = "*.yml"

_LOGGER = logging.getLogger(__name__)


def load_definitions(paths: Sequence[Path | str]) -> dict[str, Definition]:
    """Load and merge the top-level definitions of every schema document.

    Directories contribute every ``*.yml`` file directly inside them, in name
    order. When two documents define the same top-level key the later one
    replaces the earlier entry as a whole.

    Raises:
      DefinitionLoadError: If a path cannot be accessed, read or decoded.
    """
    definitions: dict[str, Definition] = {}
    files = _collect_schema_files(paths)
    for file_path in files:
        document = _load_document(file_path)
        for key, definition in document.items():
            if key in definitions:
                _LOGGER.debug("Definition '%s' replaced by %s", key, file_path)
            definitions[key] = definition
    _LOGGER.debug("Loaded %d top-level definitions from %d files", len(definitions), len(files))
    return definitions


def _collect_schema_files(paths: Sequence[Path | str]) -> list[Path]:
    files: list[Path] = []
    for raw_path in paths:
        path = Path(raw_path)
        if not path.exists():
            raise DefinitionLoadError(f"Schema path not found: {path}")
        if not path.is_dir():
            files.append(path)
            continue
        try:
            files.extend(sorted(path.glob(SCHEMA_FILE_GLOB)))
        except OSError as exc:
            raise DefinitionLoadError(f"Failed to list schema files in {path}: {exc}") from exc
    return files


def _load_document(file_path: Path) -> dict[str, Definition]:
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DefinitionLoadError(f"Failed to read schema file {file_path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DefinitionLoadError(f"Failed to parse schema file {file_path}: {exc}") from exc

    if parsed is None:
        return {}
    if not isinstance(parsed, Mapping):
        raise DefinitionLoadError(f"Schema file {file_path} must contain a mapping.")
    return _parse_definitions(parsed, file_path, location="")


def _parse_definitions(
    entries: Mapping[Any, Any], file_path: Path, *, location: str
) -> dict[str, Definition]:
    definitions: dict[str, Definition] = {}
    for key, record in entries.items():
        key = str(key)
        record_location = key if not location else f"{location}.{key}"
        definitions[key] = _parse_definition(key, record, file_path, record_location)
    return definitions


def _parse_definition(key: str, record: Any, file_path: Path, location: str) -> Definition:
    if record is None:
        record = {}
    if not isinstance(record, Mapping):
        raise DefinitionLoadError(f"{file_path}: definition '{location}' must be a mapping.")

    name = _optional_text(record.get("name"), "name", file_path, location) or key
    type_keyword = _optional_text(record.get("type"), "type", file_path, location)
    description = _optional_text(record.get("description"), "description", file_path, location)

    children = record.get("fields")
    if children is None:
        children = {}
    if not isinstance(children, Mapping):
        raise DefinitionLoadError(f"{file_path}: fields of '{location}' must be a mapping.")

    return Definition(
        name=name,
        type=type_keyword,
        description=description,
        fields=_parse_definitions(children, file_path, location=location),
    )


def _optional_text(value: Any, attribute: str, file_path: Path, location: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DefinitionLoadError(f"{file_path}: {attribute} of '{location}' must be a string.")
    return value
