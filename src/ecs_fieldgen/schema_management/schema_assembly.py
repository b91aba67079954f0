"""Schema assembly service.

Turns the flat ``path -> type`` mapping produced by
:func:`~ecs_fieldgen.schema_management.schema_projection.flatten_definitions`
into the namespace/value tree consumed by code templates, then copies the
documentation of the nested definitions onto the built nodes.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping, Sequence
from pathlib import Path

from .definition_loader import load_definitions
from .schema_errors import SchemaInconsistencyError
from .schema_models import Definition, Namespace, Schema, TypeDescriptor, Value
from .schema_projection import flatten_definitions, join_path
from .type_resolver import DEFAULT_RESOLVER, GROUP_TYPE, TypeResolver

BASE_PREFIX = "base"

_LOGGER = logging.getLogger(__name__)


def load_schema_from_paths(
    version: str,
    paths: Sequence[Path | str],
    exclude: Collection[str] = (),
    resolver: TypeResolver = DEFAULT_RESOLVER,
) -> Schema:
    """Load, flatten, assemble and document the schema defined by ``paths``."""
    definitions = load_definitions(paths)
    schema = build_schema(version, flatten_definitions("", definitions, resolver), exclude)
    propagate_descriptions(schema, "", definitions)
    _LOGGER.info(
        "Assembled schema %s: %d namespaces, %d values (%d base), %d excluded",
        version,
        len(schema.namespaces),
        len(schema.values),
        len(schema.base),
        len(schema.excluded),
    )
    return schema


def build_schema(
    version: str, flat_types: Mapping[str, TypeDescriptor], exclude: Collection[str] = ()
) -> Schema:
    """Assemble the namespace/value tree from flattened field types."""
    exclude = frozenset(exclude)
    schema = Schema(version=version)
    excluded: set[str] = set()

    for full_name, type_descriptor in flat_types.items():
        flat_name = normalize_path(full_name)
        if full_name in exclude or flat_name in exclude:
            excluded.add(flat_name or full_name)
            continue
        if not flat_name:
            _LOGGER.debug("Dropping bare '%s' field definition", full_name)
            continue

        existing = schema.values.get(flat_name)
        if existing is not None:
            _LOGGER.debug("Field '%s' defined more than once, keeping the later type", flat_name)
            existing.type = type_descriptor
            continue
        if flat_name in schema.namespaces:
            raise SchemaInconsistencyError(
                f"Field '{flat_name}' is defined both as a value and as a group."
            )

        name, parent_path = split_path(flat_name)
        value = Value(name=name, flat_name=flat_name, type=type_descriptor)
        schema.values[flat_name] = value
        if not parent_path:
            schema.base[name] = value
        else:
            _link_ancestors(schema, value, parent_path)

    schema.excluded = frozenset(excluded)
    return schema


def _link_ancestors(schema: Schema, value: Value, parent_path: str) -> None:
    """Attach ``value`` under ``parent_path``, creating missing namespaces.

    Ancestors are visited innermost first. ``orphan`` is the namespace created
    by the previous step; it has no parent yet and gets linked to the current
    one. Reaching a namespace that already existed ends the walk: that
    namespace and all of its ancestors are linked already.
    """
    pending_value: Value | None = value
    orphan: Namespace | None = None
    path = parent_path
    while path:
        name, outer_path = split_path(path)
        namespace = schema.namespaces.get(path)
        created = namespace is None
        if namespace is None:
            if path in schema.values:
                raise SchemaInconsistencyError(
                    f"Field '{path}' is defined both as a value and as a group."
                )
            namespace = Namespace(name=name, flat_name=path)
            schema.namespaces[path] = namespace

        if pending_value is not None:
            pending_value.parent = namespace.flat_name
            namespace.values.append(pending_value.flat_name)
            pending_value = None
        if orphan is not None:
            orphan.parent = namespace.flat_name
            namespace.children.append(orphan.flat_name)

        if not created:
            return
        orphan = namespace
        path = outer_path

    assert orphan is not None
    schema.top[orphan.name] = orphan


def propagate_descriptions(
    schema: Schema, prefix: str, definitions: Mapping[str, Definition]
) -> None:
    """Copy definition descriptions onto the namespaces and values of ``schema``.

    Values missing from the schema (excluded fields) are skipped. A described
    group without a namespace is only tolerated when exclusion removed its
    whole subtree.

    Raises:
      SchemaInconsistencyError: If a described group produced no namespace.
    """
    for key, definition in definitions.items():
        full_path = join_path(prefix, key)
        path = normalize_path(full_path)
        if path and definition.description:
            if definition.type == GROUP_TYPE:
                _describe_namespace(schema, path, definition.description)
            else:
                value = schema.values.get(path)
                if value is not None:
                    value.description = definition.description
        propagate_descriptions(schema, full_path, definition.fields)


def _describe_namespace(schema: Schema, path: str, description: str) -> None:
    namespace = schema.namespaces.get(path)
    if namespace is not None:
        namespace.description = description
        return
    subtree_prefix = f"{path}."
    if any(excluded.startswith(subtree_prefix) for excluded in schema.excluded):
        return
    raise SchemaInconsistencyError(f"No namespace was built for group '{path}'.")


def normalize_path(path: str) -> str:
    """Strip the ``base`` root prefix; a bare ``base`` becomes the empty path."""
    if path == BASE_PREFIX:
        return ""
    if path.startswith(f"{BASE_PREFIX}."):
        return path[len(BASE_PREFIX) + 1 :]
    return path


def split_path(path: str) -> tuple[str, str]:
    """Split ``path`` into its last segment and the parent path."""
    parent, _, name = path.rpartition(".")
    return name, parent
