"""Definition tree flattening service."""

from __future__ import annotations

from collections.abc import Mapping

from .schema_models import Definition, TypeDescriptor
from .type_resolver import DEFAULT_RESOLVER, GROUP_TYPE, TypeResolver


def flatten_definitions(
    prefix: str,
    definitions: Mapping[str, Definition],
    resolver: TypeResolver = DEFAULT_RESOLVER,
) -> dict[str, TypeDescriptor]:
    """Return the resolved type of every non-group field keyed by its dotted path.

    Group definitions only contribute their key as a path prefix for their
    children.
    """
    flattened: dict[str, TypeDescriptor] = {}
    for key, definition in definitions.items():
        path = join_path(prefix, key)
        if definition.type != GROUP_TYPE:
            flattened[path] = resolver.resolve(definition.type, path)
        flattened.update(flatten_definitions(path, definition.fields, resolver))
    return flattened


def join_path(prefix: str, name: str) -> str:
    return name if not prefix else f"{prefix}.{name}"
