"""
Schema tree node definitions.

One SchemaNode per schema or subschema. A node reached through $ref holds
the target's keywords in place; there is no separate reference node.
"""

from __future__ import annotations

import builtins
from collections.abc import Iterator
from dataclasses import dataclass, field

from .reference import JsonReference

ROOT_SCHEMA_PROPERTY = "(root)"
ITEMS_LABEL = "[items]"

# Primitive type names accepted by the type keyword
SCHEMA_TYPES = frozenset({"array", "boolean", "integer", "null", "number", "object", "string"})


@dataclass(eq=False)
class SchemaNode:
    """A parsed schema or subschema."""

    # Owning property name, "(root)", or "" for an items subschema
    property: str = ""

    # $schema dialect, root only
    schema_dialect: JsonReference | None = None

    # Reference in scope for this node's relative $refs and its children's
    ref: JsonReference | None = None

    id: str | None = None
    title: str | None = None
    description: str | None = None
    schema_type: str | None = None

    # Back-reference for diagnostics
    parent: SchemaNode | None = field(default=None, repr=False)

    properties: dict[str, SchemaNode] = field(default_factory=dict, repr=False)
    items_child: SchemaNode | None = field(default=None, repr=False)

    @builtins.property
    def is_root(self) -> bool:
        return self.parent is None and self.property == ROOT_SCHEMA_PROPERTY

    @builtins.property
    def label(self) -> str:
        return self.property or ITEMS_LABEL

    @builtins.property
    def path(self) -> str:
        """Dotted path from the root, e.g. "(root).points.[items].x"."""
        labels = []
        node: SchemaNode | None = self
        while node is not None:
            labels.append(node.label)
            node = node.parent
        return ".".join(reversed(labels))

    def add_property_child(self, child: SchemaNode) -> None:
        child.parent = self
        self.properties[child.property] = child

    def set_items_child(self, child: SchemaNode) -> None:
        child.parent = self
        self.items_child = child

    def iter_children(self) -> Iterator[SchemaNode]:
        yield from self.properties.values()
        if self.items_child is not None:
            yield self.items_child

    def walk(self) -> Iterator[SchemaNode]:
        """Depth-first, pre-order traversal of this node and its descendants."""
        yield self
        for child in self.iter_children():
            yield from child.walk()
