"""Schema management exports."""

from .definition_loader import load_definitions
from .schema_assembly import (
    build_schema,
    load_schema_from_paths,
    normalize_path,
    propagate_descriptions,
    split_path,
)
from .schema_errors import (
    DefinitionLoadError,
    SchemaError,
    SchemaInconsistencyError,
    UnknownFieldTypeError,
)
from .schema_models import Definition, Namespace, Schema, TypeDescriptor, Value
from .schema_projection import flatten_definitions
from .type_resolver import DEFAULT_RESOLVER, DEFAULT_TYPE_TABLE, GROUP_TYPE, TypeResolver

__all__ = [
    "DEFAULT_RESOLVER",
    "DEFAULT_TYPE_TABLE",
    "GROUP_TYPE",
    "Definition",
    "DefinitionLoadError",
    "Namespace",
    "Schema",
    "SchemaError",
    "SchemaInconsistencyError",
    "TypeDescriptor",
    "TypeResolver",
    "UnknownFieldTypeError",
    "Value",
    "build_schema",
    "flatten_definitions",
    "load_definitions",
    "load_schema_from_paths",
    "normalize_path",
    "propagate_descriptions",
    "split_path",
]
