"""GraphNode - Node representation for linked-data graphs.

This module provides the core node data structures:
- NodeKind: Enum of node origins (entity, reference, value)
- GraphNode: A node with type, display name, and property snapshot
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NodeKind(Enum):
    """Origin of a node in the linked-data graph.

    - ENTITY: Built from a real document object
    - REFERENCE: Leaf materialized from an absolute-URL string value
    - VALUE: Leaf materialized from a scalar (string/number/boolean)
    """

    ENTITY = "entity"
    REFERENCE = "reference"
    VALUE = "value"

    @property
    def is_leaf(self) -> bool:
        """True for kinds that never have children of their own."""
        return self is not NodeKind.ENTITY


@dataclass
class GraphNode:
    """A node in the linked-data graph.

    Entity nodes carry a snapshot of the document fields they were built
    from. Leaf nodes (REFERENCE/VALUE) carry no properties; instead they
    record the literal ``value`` and the ``source_property`` it came from.

    Attributes:
        id: Unique identifier within the graph.
        kind: Where the node came from.
        type: Type label, "Unknown" when the document gave none.
        name: Human-readable display label.
        properties: Snapshot of the originating fields (entities only).
        value: Literal value (leaf nodes only).
        source_property: Property name the literal was found under.
    """

    id: str
    kind: NodeKind
    type: str = "Unknown"
    name: str = ""
    properties: dict[str, Any] = field(default_factory=dict)
    value: Any = None
    source_property: str | None = None

    @property
    def is_leaf(self) -> bool:
        """True if this node is a materialized literal or URL."""
        return self.kind.is_leaf

    @property
    def is_entity(self) -> bool:
        """True if this node was built from a document object."""
        return self.kind == NodeKind.ENTITY

    def get_property(self, key: str, default: Any = None) -> Any:
        """Get an originating field from the property snapshot."""
        return self.properties.get(key, default)

    def property_keys(self, include_keywords: bool = False) -> list[str]:
        """List snapshot keys, excluding ``@`` keywords unless asked."""
        if include_keywords:
            return list(self.properties)
        return [key for key in self.properties if not key.startswith("@")]

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.id} ({self.type}) {self.name!r}"
