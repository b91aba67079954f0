"""Type resolver tests."""

from __future__ import annotations

import pytest
from ecs_fieldgen.schema_management.schema_errors import SchemaError, UnknownFieldTypeError
from ecs_fieldgen.schema_management.schema_models import TypeDescriptor
from ecs_fieldgen.schema_management.type_resolver import DEFAULT_TYPE_TABLE, TypeResolver


@pytest.mark.parametrize(
    ("keyword", "expected_name", "expected_constructor", "expected_package"),
    [
        ("keyword", "string", "String", None),
        ("text", "string", "String", None),
        ("boolean", "bool", "Bool", None),
        ("integer", "int", "Int", None),
        ("long", "int64", "Int64", None),
        ("float", "float64", "Float64", None),
        ("date", "time.Time", "Time", "time"),
        ("duration", "time.Duration", "Dur", "time"),
        ("object", "map[string]interface{}", "Any", None),
        ("ip", "string", "String", None),
        ("geo_point", "string", "String", None),
    ],
)
def test_resolves_known_keywords(
    keyword: str, expected_name: str, expected_constructor: str, expected_package: str | None
) -> None:
    descriptor = TypeResolver().resolve(keyword, "some.field")

    assert descriptor.name == expected_name
    assert descriptor.constructor == expected_constructor
    assert descriptor.package == expected_package


def test_same_keyword_family_shares_one_descriptor() -> None:
    resolver = TypeResolver()

    assert resolver.resolve("keyword", "a") is resolver.resolve("text", "b")
    assert resolver.resolve("bool", "a") is resolver.resolve("boolean", "b")


def test_unknown_keyword_reports_field_path() -> None:
    with pytest.raises(UnknownFieldTypeError) as exc_info:
        TypeResolver().resolve("half_float", "host.cpu.pct")

    assert isinstance(exc_info.value, SchemaError)
    assert "half_float" in str(exc_info.value)
    assert "host.cpu.pct" in str(exc_info.value)


def test_custom_table_is_copied_and_immutable() -> None:
    table = {"keyword": TypeDescriptor(package=None, name="str", constructor="Str")}
    resolver = TypeResolver(table)
    table["long"] = TypeDescriptor(package=None, name="int", constructor="Int")

    assert resolver.keywords == ("keyword",)
    with pytest.raises(UnknownFieldTypeError):
        resolver.resolve("long", "x")
    with pytest.raises(TypeError):
        DEFAULT_TYPE_TABLE["keyword"] = table["keyword"]  # type: ignore[index]
