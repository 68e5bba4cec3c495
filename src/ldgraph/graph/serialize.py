"""Graph Serialization - Export graphs and reports as JSON-compatible dicts.

Output keys follow the rendering layer's camelCase contract
(``nodes``/``links``, ``averageDegree``, ``centralityMeasures``...).
``graph_from_dict`` reads a serialized graph back, so saved graphs can
be analyzed without the original document.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from ldgraph.graph.builder import Graph
from ldgraph.graph.GraphNode import GraphNode, NodeKind
from ldgraph.graph.relations import GraphLink

# Nodes listed in a report summary, by degree
TOP_NODE_LIMIT = 10

if TYPE_CHECKING:
    from ldgraph.analytics.report import AnalyticsReport
    from ldgraph.graph.stats import DataStats, DocumentProfile


def serialize_node(node: GraphNode) -> dict[str, Any]:
    """Serialize a GraphNode to a JSON-compatible dict.

    Args:
        node: The node to serialize.

    Returns:
        Dict suitable for JSON serialization.
    """
    result: dict[str, Any] = {
        "id": node.id,
        "type": node.type,
        "name": node.name,
        "kind": node.kind.value,
        "properties": node.properties,
    }

    # Leaf nodes carry their literal and where it came from
    if node.is_leaf:
        result["value"] = node.value
        if node.source_property is not None:
            result["sourceProperty"] = node.source_property

    return result


def serialize_link(link: GraphLink) -> dict[str, Any]:
    return {
        "source": link.source,
        "target": link.target,
        "type": link.relation,
        "weight": link.weight,
    }


def serialize_graph(graph: Graph) -> dict[str, Any]:
    """Serialize a Graph to a JSON-compatible dict.

    Args:
        graph: The graph to serialize.

    Returns:
        Dict with ``nodes``, ``links`` and ``metadata``.
    """
    nodes = []
    kind_counts: dict[str, int] = {}
    for node in graph.all_nodes():
        nodes.append(serialize_node(node))
        kind_counts[node.kind.value] = kind_counts.get(node.kind.value, 0) + 1

    return {
        "nodes": nodes,
        "links": [serialize_link(link) for link in graph.iter_links()],
        "metadata": {
            "nodeCount": graph.node_count(),
            "linkCount": graph.link_count(),
            "byKind": kind_counts,
        },
    }


def graph_from_dict(data: dict[str, Any]) -> Graph:
    """Rebuild a Graph from ``serialize_graph`` output.

    Unknown node kinds fall back to ENTITY and missing fields take their
    defaults. Links whose endpoints are not listed as nodes are dropped so
    the result keeps referential integrity.

    Raises:
        ValueError: If ``data`` is not a dict with a ``nodes`` list.
    """
    if not isinstance(data, dict) or not isinstance(data.get("nodes"), list):
        raise ValueError("Serialized graph must be an object with a 'nodes' array")

    nodes = []
    for raw in data["nodes"]:
        if not isinstance(raw, dict) or "id" not in raw:
            continue
        try:
            kind = NodeKind(raw.get("kind", NodeKind.ENTITY.value))
        except ValueError:
            kind = NodeKind.ENTITY
        nodes.append(
            GraphNode(
                id=str(raw["id"]),
                kind=kind,
                type=raw.get("type") or "Unknown",
                name=raw.get("name") or "",
                properties=dict(raw.get("properties") or {}),
                value=raw.get("value"),
                source_property=raw.get("sourceProperty"),
            )
        )

    known = {node.id for node in nodes}
    links = []
    for raw in data.get("links") or []:
        if not isinstance(raw, dict):
            continue
        source, target = str(raw.get("source")), str(raw.get("target"))
        if source not in known or target not in known:
            continue
        links.append(
            GraphLink(
                source=source,
                target=target,
                relation=raw.get("type") or raw.get("relation") or "",
                weight=float(raw.get("weight", 1.0)),
            )
        )

    return Graph.from_parts(nodes, links)


def serialize_report(report: AnalyticsReport) -> dict[str, Any]:
    """Serialize an AnalyticsReport to a JSON-compatible dict."""
    return {
        "nodeCount": report.node_count,
        "linkCount": report.link_count,
        "density": report.density,
        "averageDegree": report.average_degree,
        "maxDegree": report.max_degree,
        "minDegree": report.min_degree,
        "clustering": report.clustering,
        "localClustering": report.local_clustering,
        "centralityMeasures": {
            "betweenness": report.centrality.betweenness,
            "closeness": report.centrality.closeness,
            "degree": report.centrality.degree,
            "eigenvector": report.centrality.eigenvector,
        },
        "communities": report.communities,
        "communityMembers": {str(label): ids for label, ids in report.community_members().items()},
        "topNodes": [
            {
                "node": node_id,
                "degree": degree,
                "betweenness": report.centrality.betweenness.get(node_id, 0.0),
                "closeness": report.centrality.closeness.get(node_id, 0.0),
            }
            for node_id, degree in report.top_nodes("degree", TOP_NODE_LIMIT)
        ],
        "diameter": report.diameter,
        "averagePathLength": report.average_path_length,
        "convergence": {
            "eigenvectorIterations": report.eigenvector_iterations,
            "eigenvectorConverged": report.eigenvector_converged,
            "communityPasses": report.community_passes,
            "communitiesConverged": report.communities_converged,
        },
    }


def serialize_profile(profile: DocumentProfile) -> dict[str, Any]:
    """Serialize a DocumentProfile to a JSON-compatible dict."""
    return {
        "objectCount": profile.object_count,
        "propertyTotal": profile.property_total,
        "depthAnalysis": [
            {"depth": depth, "objects": objects} for depth, objects in profile.depth_distribution.items()
        ],
        "typeUsage": profile.type_usage,
        "contextUsage": profile.context_usage,
        "propertyUsage": profile.property_usage,
        "namespaceUsage": profile.namespace_usage,
        "complexityMetrics": {
            "averageProperties": profile.average_properties,
            "maxProperties": profile.max_properties,
            "minProperties": profile.min_properties,
            "totalComplexity": profile.total_complexity,
            "semanticRichness": profile.semantic_richness,
        },
    }


def serialize_stats(stats: DataStats) -> dict[str, Any]:
    """Serialize DataStats to a JSON-compatible dict."""
    return {
        "totalEntities": stats.total_entities,
        "entityTypes": stats.entity_types,
        "propertyCount": stats.property_count,
        "relationshipTypes": stats.relationship_types,
        "dataComplexity": stats.data_complexity,
        "schemaCompliance": stats.schema_compliance,
        "profile": serialize_profile(stats.profile),
    }


def to_json(data: dict[str, Any], indent: int | None = 2) -> str:
    """Dump a serialized structure as JSON text."""
    return json.dumps(data, indent=indent, ensure_ascii=False, default=str)


__all__ = [
    "serialize_node",
    "serialize_link",
    "serialize_graph",
    "graph_from_dict",
    "serialize_report",
    "serialize_stats",
    "serialize_profile",
    "to_json",
]
