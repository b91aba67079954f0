"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class TypeDescriptor:
    """Target-language type a field value is generated with."""

    package: str | None
    name: str
    constructor: str


@dataclass(frozen=True)
class Definition:
    """One decoded field-definition record, possibly nesting child definitions."""

    name: str
    type: str
    description: str = ""
    fields: Mapping[str, Definition] = field(default_factory=dict)


@dataclass
class Value:
    """Leaf field of the assembled schema.

    ``parent`` holds the flat name of the owning namespace, or ``None`` for
    base fields living at the schema root.
    """

    name: str
    flat_name: str
    type: TypeDescriptor
    description: str = ""
    parent: str | None = None


@dataclass
class Namespace:
    """Inner node of the assembled schema.

    ``children`` and ``values`` reference other nodes by flat name; they are
    resolved through the owning :class:`Schema`.
    """

    name: str
    flat_name: str
    description: str = ""
    parent: str | None = None
    children: list[str] = field(default_factory=list)
    values: list[str] = field(default_factory=list)


@dataclass
class Schema:
    """Assembled namespace/value tree handed to the code template."""

    version: str
    base: dict[str, Value] = field(default_factory=dict)
    top: dict[str, Namespace] = field(default_factory=dict)
    namespaces: dict[str, Namespace] = field(default_factory=dict)
    values: dict[str, Value] = field(default_factory=dict)
    excluded: frozenset[str] = frozenset()

    def namespace_children(self, namespace: Namespace) -> list[Namespace]:
        """Return the direct child namespaces in first-definition order."""
        return [self.namespaces[path] for path in namespace.children]

    def namespace_values(self, namespace: Namespace) -> list[Value]:
        """Return the values owned by ``namespace`` in first-definition order."""
        return [self.values[path] for path in namespace.values]

    def parent_of(self, node: Namespace | Value) -> Namespace | None:
        if node.parent is None:
            return None
        return self.namespaces[node.parent]

    def sorted_top(self) -> list[Namespace]:
        return [self.top[name] for name in sorted(self.top)]

    def sorted_base(self) -> list[Value]:
        return [self.base[name] for name in sorted(self.base)]

    def packages(self) -> list[str]:
        """Return the distinct type packages referenced by any value, sorted."""
        return sorted({value.type.package for value in self.values.values() if value.type.package})
