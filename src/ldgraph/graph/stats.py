"""Document statistics.

This module summarizes a document:
- DataStats: Type and property frequencies, complexity, schema compliance
- compute_data_stats: Build DataStats from a document (and optionally its graph)
- DocumentProfile: Depth, context, type and key usage over every nested object
- compute_document_profile: Build a DocumentProfile from a document
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse

from ldgraph.document import flatten_document
from ldgraph.graph.values import entity_type, is_absolute_url

if TYPE_CHECKING:
    from ldgraph.graph.builder import Graph

# An entity is "compliant" when it carries at least one of these
COMPLIANCE_FIELDS = ("@type", "@id", "name")


@dataclass
class DocumentProfile:
    """Structural profile over every object in a document, at any depth.

    Unlike DataStats, which looks only at top-level entities, the profile
    walks into nested objects and arrays.

    Attributes:
        object_count: Number of objects anywhere in the document.
        property_total: Number of keys across all objects (keywords included).
        depth_distribution: Nesting depth -> number of objects at that depth.
            Arrays do not add depth; the top-level object is depth 0.
        type_usage: ``@type`` label -> number of uses.
        context_usage: ``@context`` entry (IRI or term) -> number of uses.
        property_usage: Key -> number of objects using it.
        namespace_usage: Namespace of compact (``schema:name``) or absolute
            IRI keys -> number of uses.
        average_properties: Mean keys per object.
        max_properties: Most keys on one object.
        min_properties: Fewest keys on one object.
    """

    object_count: int = 0
    property_total: int = 0
    depth_distribution: dict[int, int] = field(default_factory=dict)
    type_usage: dict[str, int] = field(default_factory=dict)
    context_usage: dict[str, int] = field(default_factory=dict)
    property_usage: dict[str, int] = field(default_factory=dict)
    namespace_usage: dict[str, int] = field(default_factory=dict)
    average_properties: float = 0.0
    max_properties: int = 0
    min_properties: int = 0

    @property
    def max_depth(self) -> int:
        return max(self.depth_distribution, default=0)

    @property
    def semantic_richness(self) -> float:
        """Distinct types and contexts per object."""
        return (len(self.type_usage) + len(self.context_usage)) / max(self.object_count, 1)

    @property
    def total_complexity(self) -> float:
        """Average plus maximum properties per object, plus distinct types."""
        return self.average_properties + self.max_properties + len(self.type_usage)


def _key_namespace(key: str) -> str | None:
    if is_absolute_url(key):
        return urlparse(key).netloc
    if ":" in key and not key.startswith("@"):
        return key.split(":", 1)[0] or None
    return None


def _context_entries(value: Any) -> list[str]:
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, dict):
        return list(value)
    if isinstance(value, list):
        entries: list[str] = []
        for item in value:
            if isinstance(item, str) and item.strip():
                entries.append(item)
            elif isinstance(item, dict):
                entries.extend(item)
        return entries
    return []


def compute_document_profile(document: Any) -> DocumentProfile:
    """Profile every object in a document.

    The walk uses an explicit stack, so any nesting depth is handled.

    Args:
        document: Any JSON value.

    Returns:
        DocumentProfile; zeroed for documents without objects.
    """
    depths: Counter[int] = Counter()
    types: Counter[str] = Counter()
    contexts: Counter[str] = Counter()
    keys: Counter[str] = Counter()
    namespaces: Counter[str] = Counter()
    sizes: list[int] = []

    pending: list[tuple[Any, int]] = [(document, 0)]
    while pending:
        value, depth = pending.pop()
        if isinstance(value, list):
            pending.extend((item, depth) for item in reversed(value))
            continue
        if not isinstance(value, dict):
            continue

        depths[depth] += 1
        sizes.append(len(value))
        for key, child in value.items():
            keys[key] += 1
            if key == "@type":
                labels = child if isinstance(child, list) else [child]
                types.update(label for label in labels if isinstance(label, str))
            elif key == "@context":
                contexts.update(_context_entries(child))
            namespace = _key_namespace(key)
            if namespace:
                namespaces[namespace] += 1
        pending.extend((child, depth + 1) for child in reversed(list(value.values())))

    profile = DocumentProfile(
        object_count=len(sizes),
        property_total=sum(sizes),
        depth_distribution=dict(sorted(depths.items())),
        type_usage=dict(types),
        context_usage=dict(contexts),
        property_usage=dict(keys),
        namespace_usage=dict(namespaces),
    )
    if sizes:
        profile.average_properties = profile.property_total / len(sizes)
        profile.max_properties = max(sizes)
        profile.min_properties = min(sizes)
    return profile


@dataclass
class DataStats:
    """Summary statistics over a document's top-level entities.

    Attributes:
        total_entities: Number of top-level entity objects.
        entity_types: Type label -> number of entities.
        property_count: Property key (non-``@``) -> number of entities using it.
        relationship_types: Link relation -> number of links (needs a graph).
        data_complexity: Average number of non-``@`` properties per entity.
        schema_compliance: Percentage (0-100) of entities with an id,
            a type, or a name.
        profile: Structural profile over every object in the document.
    """

    total_entities: int = 0
    entity_types: dict[str, int] = field(default_factory=dict)
    property_count: dict[str, int] = field(default_factory=dict)
    relationship_types: dict[str, int] = field(default_factory=dict)
    data_complexity: float = 0.0
    schema_compliance: float = 0.0
    profile: DocumentProfile = field(default_factory=DocumentProfile)

    @property
    def type_diversity(self) -> int:
        """Number of distinct entity types."""
        return len(self.entity_types)

    def top_types(self, limit: int = 3) -> list[tuple[str, int]]:
        """Most frequent types, ties broken by name."""
        return sorted(self.entity_types.items(), key=lambda item: (-item[1], item[0]))[:limit]


def _is_compliant(entity: dict[str, Any]) -> bool:
    for key in COMPLIANCE_FIELDS:
        if entity.get(key) or entity.get(key.lstrip("@")):
            return True
    return False


def compute_data_stats(document: Any, graph: Graph | None = None) -> DataStats:
    """Compute statistics for a document.

    Args:
        document: Any JSON value; it is flattened like the builder does.
        graph: The graph built from the document, used for relation counts.

    Returns:
        DataStats for the document. An empty document yields zeroed stats.
    """
    entities = flatten_document(document)
    stats = DataStats(total_entities=len(entities), profile=compute_document_profile(document))

    types: Counter[str] = Counter()
    properties: Counter[str] = Counter()
    compliant = 0
    for entity in entities:
        types[entity_type(entity) or "Unknown"] += 1
        for key in entity:
            if not key.startswith("@"):
                properties[key] += 1
        if _is_compliant(entity):
            compliant += 1

    stats.entity_types = dict(types)
    stats.property_count = dict(properties)

    if graph is not None:
        stats.relationship_types = dict(Counter(link.relation for link in graph.iter_links()))

    if entities:
        stats.data_complexity = sum(properties.values()) / len(entities)
        stats.schema_compliance = compliant / len(entities) * 100

    return stats


__all__ = [
    "DataStats",
    "DocumentProfile",
    "compute_data_stats",
    "compute_document_profile",
]
