"""Field type keyword resolution."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .schema_errors import UnknownFieldTypeError
from .schema_models import TypeDescriptor

GROUP_TYPE = "group"

_STRING = TypeDescriptor(package=None, name="string", constructor="String")
_BOOL = TypeDescriptor(package=None, name="bool", constructor="Bool")

DEFAULT_TYPE_TABLE: Mapping[str, TypeDescriptor] = MappingProxyType(
    {
        "keyword": _STRING,
        "text": _STRING,
        "bool": _BOOL,
        "boolean": _BOOL,
        "integer": TypeDescriptor(package=None, name="int", constructor="Int"),
        "long": TypeDescriptor(package=None, name="int64", constructor="Int64"),
        "float": TypeDescriptor(package=None, name="float64", constructor="Float64"),
        "date": TypeDescriptor(package="time", name="time.Time", constructor="Time"),
        "duration": TypeDescriptor(package="time", name="time.Duration", constructor="Dur"),
        "object": TypeDescriptor(package=None, name="map[string]interface{}", constructor="Any"),
        "ip": _STRING,
        "geo_point": _STRING,
    }
)


class TypeResolver:
    """Map declared type keywords to target type descriptors."""

    def __init__(self, table: Mapping[str, TypeDescriptor] = DEFAULT_TYPE_TABLE) -> None:
        self._table = MappingProxyType(dict(table))

    @property
    def keywords(self) -> tuple[str, ...]:
        return tuple(self._table)

    def resolve(self, type_keyword: str, field_path: str) -> TypeDescriptor:
        """Return the descriptor for ``type_keyword``.

        Raises:
          UnknownFieldTypeError: If the keyword is not in the table.
        """
        try:
            return self._table[type_keyword]
        except KeyError:
            raise UnknownFieldTypeError(
                f"Unknown type '{type_keyword}' in field '{field_path}'."
            ) from None


DEFAULT_RESOLVER = TypeResolver()
