"""Graph Builder - Constructs a Graph from a JSON-LD-like document.

This module provides the builder that walks a loosely-structured
document and turns it into nodes and weighted links:

    graph = build(document)

or, with options:

    builder = GraphBuilder(id_prefix="_:n")
    graph = builder.build(document)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Iterator

from ldgraph.document import flatten_document
from ldgraph.graph.GraphNode import GraphNode, NodeKind
from ldgraph.graph.naming import humanize, leaf_name, resolve_name, url_tail
from ldgraph.graph.relations import CONTAINS, GraphLink, LinkWeight
from ldgraph.graph.values import (
    BooleanLeaf,
    Empty,
    EntityRef,
    Nested,
    NumericLeaf,
    RelationshipValue,
    StringLeaf,
    UrlRef,
    descriptor_keys,
    entity_id,
    entity_type,
    iter_values,
)
from ldgraph.logger import get_logger
from ldgraph.utilities.hasher import literal_key, synthetic_id

logger = get_logger(__name__)

UNKNOWN_TYPE = "Unknown"
URL_TYPE = "URL"
TEXT_TYPE = "Text"
NUMBER_TYPE = "Number"
BOOLEAN_TYPE = "Boolean"


@dataclass
class Graph:
    """Container for a built linked-data graph.

    Nodes are indexed by id in insertion order; links are kept in the
    order they were created. The graph is a multigraph. It is populated
    once by GraphBuilder and only read afterwards, so the public API is
    iterator and lookup only.
    """

    # Internal storage (prefixed) - excluded from constructor
    _index: dict[str, GraphNode] = field(default_factory=dict, init=False, repr=False)
    _links: list[GraphLink] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def from_parts(cls, nodes: Iterable[GraphNode], links: Iterable[GraphLink]) -> Graph:
        """Assemble a graph from existing nodes and links.

        Later nodes with an id already present are ignored, so the first
        occurrence wins.
        """
        graph = cls()
        for node in nodes:
            graph._index.setdefault(node.id, node)
        graph._links = list(links)
        return graph

    def find_by_id(self, node_id: str) -> GraphNode | None:
        """Find node by ID.

        Args:
            node_id: The node ID to find.

        Returns:
            The matching GraphNode, or None if not found.
        """
        return self._index.get(node_id)

    def has_node(self, node_id: str) -> bool:
        """Check if a node ID is present."""
        return node_id in self._index

    def all_nodes(self) -> Iterator[GraphNode]:
        """Iterate all nodes in insertion order."""
        yield from self._index.values()

    def node_ids(self) -> list[str]:
        """Return all node ids in insertion order."""
        return list(self._index)

    def iter_links(self) -> Iterator[GraphLink]:
        """Iterate all links in creation order."""
        yield from self._links

    def links_from(self, node_id: str) -> Iterator[GraphLink]:
        """Iterate links whose source is ``node_id``."""
        for link in self._links:
            if link.source == node_id:
                yield link

    def links_to(self, node_id: str) -> Iterator[GraphLink]:
        """Iterate links whose target is ``node_id``."""
        for link in self._links:
            if link.target == node_id:
                yield link

    def nodes_by_kind(self, kind: NodeKind) -> Iterator[GraphNode]:
        """Get all nodes of a specific kind.

        Args:
            kind: The NodeKind to filter by.

        Yields:
            GraphNode instances of the specified kind.
        """
        for node in self._index.values():
            if node.kind == kind:
                yield node

    def node_count(self) -> int:
        """Return total number of nodes in the graph."""
        return len(self._index)

    def link_count(self) -> int:
        """Return total number of links (multi-links counted separately)."""
        return len(self._links)

    def is_empty(self) -> bool:
        """True if the graph has no nodes."""
        return not self._index


def property_snapshot(entity: dict[str, Any]) -> dict[str, Any]:
    """Copy an object's fields for storage on its node.

    The mapping and its array values are copied one level deep. Nested
    objects are shared with the document, so taking a snapshot costs the
    same at any depth.
    """
    return {key: list(value) if isinstance(value, list) else value for key, value in entity.items()}


class BuildState(Enum):
    """Progress of an entity id during one build."""

    UNSEEN = "unseen"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class GraphBuilder:
    """Builder for constructing a Graph from a document.

    Usage:
        builder = GraphBuilder()
        graph = builder.build(document)

    A builder instance can be reused; every ``build`` call starts from a
    clean state. Synthesized ids are derived from content and traversal
    position, so building the same document twice yields identical graphs.

    Note on cycle safety:
        Entity ids move through UNSEEN -> IN_PROGRESS -> DONE. A reference
        to an id that is IN_PROGRESS (an ancestor still being built) or
        DONE only produces a link; only UNSEEN ids get a new build frame.
        The state map is separate from the node index because leaf nodes
        (URL references) may share an id with an entity defined later.
    """

    def __init__(self, id_prefix: str = "_:b") -> None:
        """Initialize the graph builder.

        Args:
            id_prefix: Prefix for synthesized ids of objects without one.
        """
        self.id_prefix = id_prefix
        self._reset()

    def _reset(self) -> None:
        self._nodes: dict[str, GraphNode] = {}
        self._links: list[GraphLink] = []
        self._state: dict[str, BuildState] = {}
        self._position = 0

    def build(self, document: Any) -> Graph:
        """Build a graph from any JSON value.

        Never raises for JSON input: primitives, ``null``, and empty
        containers produce an empty graph.

        Args:
            document: Object, array of objects, or ``@graph`` wrapper.

        Returns:
            The completed Graph.
        """
        self._reset()
        entities = flatten_document(document)
        logger.debug("Building graph from %d top-level entities", len(entities))

        for entity in entities:
            self._process_entity(entity)

        graph = Graph.from_parts(self._nodes.values(), self._links)
        logger.debug("Built graph with %d nodes and %d links", graph.node_count(), graph.link_count())
        self._reset()
        return graph

    # ─────────────────────────────────────────────────────────────────────────
    # Entities
    # ─────────────────────────────────────────────────────────────────────────

    def _process_entity(self, entity: dict[str, Any], parent_id: str | None = None) -> str:
        """Build one entity and every not-yet-built entity reachable from it.

        Traversal is depth-first over an explicit stack of frames, one per
        entity being built, so document depth is not limited by the
        interpreter's recursion limit. Each frame walks its entity's
        relationships in document order; a relationship that leads to an
        entity still to be built pushes a new frame.

        Returns:
            The id of the entity node.
        """
        root_id, relationships = self._open_entity(entity, parent_id)
        stack: list[tuple[str, Iterator[tuple[str, RelationshipValue]]]] = [(root_id, relationships)]

        while stack:
            node_id, pending = stack[-1]
            step = next(pending, None)
            if step is None:
                self._state[node_id] = BuildState.DONE
                stack.pop()
                continue

            relation, value = step
            descend = self._process_relationship(node_id, relation, value)
            if descend is not None:
                child, child_parent = descend
                stack.append(self._open_entity(child, child_parent))

        return root_id

    def _open_entity(
        self, entity: dict[str, Any], parent_id: str | None
    ) -> tuple[str, Iterator[tuple[str, RelationshipValue]]]:
        """Register an entity node, link it to its parent, and mark it in progress."""
        position = self._position
        self._position += 1

        node_id = entity_id(entity) or self._synthesize_id(entity, position)
        self._register_entity(node_id, entity, entity_type(entity))

        if parent_id is not None:
            self._add_link(parent_id, node_id, CONTAINS, LinkWeight.REFERENCE)

        self._state[node_id] = BuildState.IN_PROGRESS
        return node_id, self._relationships(entity)

    @staticmethod
    def _relationships(entity: dict[str, Any]) -> Iterator[tuple[str, RelationshipValue]]:
        """Yield ``(relation, value)`` for every relationship-bearing key.

        Keywords and the plain ``id``/``type`` keys that named the entity
        describe the entity itself and are skipped.
        """
        skipped = descriptor_keys(entity)
        for key, value in entity.items():
            if key in skipped:
                continue
            for classified in iter_values(value):
                yield key, classified

    def _synthesize_id(self, entity: dict[str, Any], position: int) -> str:
        node_id = synthetic_id(entity, position, prefix=self.id_prefix)
        # Identical digests are astronomically unlikely but must not merge nodes.
        suffix = 1
        candidate = node_id
        while candidate in self._nodes:
            candidate = f"{node_id}-{suffix}"
            suffix += 1
        return candidate

    def _register_entity(self, node_id: str, entity: dict[str, Any], explicit_type: str | None) -> GraphNode:
        """Create the entity node, or merge into the node already holding ``node_id``."""
        existing = self._nodes.get(node_id)
        if existing is None:
            node = GraphNode(
                id=node_id,
                kind=NodeKind.ENTITY,
                type=explicit_type or UNKNOWN_TYPE,
                name=resolve_name(entity, node_id, explicit_type),
                properties=property_snapshot(entity),
            )
            self._nodes[node_id] = node
            return node

        if existing.kind != NodeKind.ENTITY:
            logger.debug("Promoting %s leaf %s to entity", existing.kind.value, node_id)
            existing.kind = NodeKind.ENTITY
            existing.value = None
            existing.source_property = None
            existing.properties = {}

        merged = dict(existing.properties)
        for key, value in property_snapshot(entity).items():
            merged.setdefault(key, value)
        existing.properties = merged

        merged_type = entity_type(merged)
        existing.type = merged_type or UNKNOWN_TYPE
        existing.name = resolve_name(merged, node_id, merged_type)
        return existing

    # ─────────────────────────────────────────────────────────────────────────
    # Relationships
    # ─────────────────────────────────────────────────────────────────────────

    def _process_relationship(
        self, source_id: str, relation: str, value: RelationshipValue
    ) -> tuple[dict[str, Any], str | None] | None:
        """Turn one classified property value into nodes and links.

        Returns:
            ``(entity, parent_id)`` when the value leads to an entity that
            still has to be built, otherwise None.
        """
        if isinstance(value, EntityRef):
            self._add_link(source_id, value.id, relation, LinkWeight.REFERENCE)
            state = self._state.get(value.id, BuildState.UNSEEN)
            if state == BuildState.UNSEEN:
                return value.entity, None
            if state == BuildState.IN_PROGRESS:
                logger.debug("Cycle: %s -> %s via %r, not descending", source_id, value.id, relation)
        elif isinstance(value, Nested):
            return value.entity, source_id
        elif isinstance(value, UrlRef):
            self._ensure_reference(value.url)
            self._add_link(source_id, value.url, relation, LinkWeight.URL)
        elif isinstance(value, StringLeaf):
            leaf_id = self._ensure_value(source_id, relation, value.text, TEXT_TYPE)
            self._add_link(source_id, leaf_id, relation, LinkWeight.TEXT)
        elif isinstance(value, NumericLeaf):
            leaf_id = self._ensure_value(source_id, relation, value.number, NUMBER_TYPE)
            self._add_link(source_id, leaf_id, relation, LinkWeight.SCALAR)
        elif isinstance(value, BooleanLeaf):
            leaf_id = self._ensure_value(source_id, relation, value.flag, BOOLEAN_TYPE)
            self._add_link(source_id, leaf_id, relation, LinkWeight.SCALAR)
        elif not isinstance(value, Empty):
            raise TypeError(f"Unhandled relationship value: {value!r}")
        return None

    def _ensure_reference(self, url: str) -> None:
        """Create a REFERENCE leaf for ``url`` unless a node already holds that id."""
        if url in self._nodes:
            return
        self._nodes[url] = GraphNode(
            id=url,
            kind=NodeKind.REFERENCE,
            type=URL_TYPE,
            name=humanize(url_tail(url)) or url,
            value=url,
        )

    def _ensure_value(self, source_id: str, relation: str, value: Any, type_label: str) -> str:
        """Create (or reuse) the VALUE leaf for a (source, relation, value) triple."""
        leaf_id = f"{source_id}::{relation}::{literal_key(source_id, relation, value)}"
        if leaf_id not in self._nodes:
            self._nodes[leaf_id] = GraphNode(
                id=leaf_id,
                kind=NodeKind.VALUE,
                type=type_label,
                name=leaf_name(value),
                value=value,
                source_property=relation,
            )
        return leaf_id

    def _add_link(self, source_id: str, target_id: str, relation: str, weight: LinkWeight) -> None:
        link = GraphLink(source=source_id, target=target_id, relation=relation, weight=weight.value)
        self._links.append(link)


def build(document: Any, id_prefix: str = "_:b") -> Graph:
    """Build a Graph from a JSON value with a fresh GraphBuilder."""
    return GraphBuilder(id_prefix=id_prefix).build(document)
