"""
ldgraph.insights - Rule-based observations about a graph.

Combines the graph, its document statistics, and its analytics report
into a short list of findings grouped by category:
- Connectivity Patterns: hub nodes, sparse connectivity
- Schema & Content Structure: dominant types, type diversity
- Data Quality Checks: isolated, minimal, and unlabeled entities
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ldgraph.graph.GraphNode import NodeKind
from ldgraph.graph.naming import ALIAS_NAME_KEYS, PRIMARY_NAME_KEYS, text_of

if TYPE_CHECKING:
    from ldgraph.analytics.report import AnalyticsReport
    from ldgraph.graph.builder import Graph
    from ldgraph.graph.stats import DataStats

CONNECTIVITY = "Connectivity Patterns"
SCHEMA = "Schema & Content Structure"
DATA_QUALITY = "Data Quality Checks"

MAX_EXAMPLES = 5


@dataclass
class Insight:
    """A single finding."""

    id: str
    title: str
    description: str
    severity: str  # info, warning, suggestion, error
    category: str
    details: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "severity": self.severity,
            "category": self.category,
            "details": list(self.details),
        }


def _examples(labels: list[str]) -> list[str]:
    shown = labels[:MAX_EXAMPLES]
    if len(labels) > MAX_EXAMPLES:
        shown.append(f"...and {len(labels) - MAX_EXAMPLES} more.")
    return shown


def _display(graph: Graph, node_id: str) -> str:
    node = graph.find_by_id(node_id)
    return node.name if node and node.name else node_id


def connectivity_insights(graph: Graph, report: AnalyticsReport) -> list[Insight]:
    """Hub nodes and sparse connectivity."""
    insights = []

    threshold = report.average_degree * 1.5 + 3 if report.average_degree > 0 else 5
    ranked = report.top_nodes("degree", limit=len(report.centrality.degree))
    hubs = [(node_id, d) for node_id, d in ranked if d > threshold][:MAX_EXAMPLES]
    if hubs:
        insights.append(
            Insight(
                id="hub-nodes",
                title="Key Connectors (Hub Nodes)",
                description=(
                    f"Found {len(hubs)} node(s) with notably high connectivity. "
                    "These may act as central points in your data."
                ),
                severity="info",
                category=CONNECTIVITY,
                details=[f"{_display(graph, node_id)} (Connections: {d})" for node_id, d in hubs],
            )
        )

    if report.density < 0.01 and report.node_count > 10:
        insights.append(
            Insight(
                id="sparse-graph",
                title="Sparse Connectivity",
                description=(
                    f"The graph density is very low ({report.density * 100:.2f}%), "
                    "suggesting entities are not highly interconnected."
                ),
                severity="suggestion",
                category=CONNECTIVITY,
            )
        )
    return insights


def schema_insights(graph: Graph, stats: DataStats) -> list[Insight]:
    """Dominant types and type diversity."""
    insights = []
    top = stats.top_types(3)
    if top:
        listing = ", ".join(f"{type_label} ({count} instances)" for type_label, count in top)
        insights.append(
            Insight(
                id="dominant-types",
                title="Dominant Entity Types",
                description=f"The most frequently occurring entity types are: {listing}.",
                severity="info",
                category=SCHEMA,
            )
        )

    diversity = stats.type_diversity
    if diversity <= 2 and graph.node_count() > 10:
        insights.append(
            Insight(
                id="low-type-diversity",
                title="Low Entity Type Diversity",
                description=(
                    f"The dataset primarily consists of only {diversity} type(s) of entities. "
                    "This might be normal for specialized datasets."
                ),
                severity="info",
                category=SCHEMA,
            )
        )
    elif diversity > 10:
        insights.append(
            Insight(
                id="high-type-diversity",
                title="High Entity Type Diversity",
                description=(
                    f"The dataset contains a wide variety of entity types ({diversity} distinct types), "
                    "indicating a complex or heterogeneous data model."
                ),
                severity="info",
                category=SCHEMA,
            )
        )
    return insights


def _has_label(properties: dict[str, Any]) -> bool:
    return any(text_of(properties.get(key)) for key in PRIMARY_NAME_KEYS + ALIAS_NAME_KEYS)


def data_quality_insights(graph: Graph, report: AnalyticsReport) -> list[Insight]:
    """Isolated, minimal, and unlabeled entities."""
    insights = []
    degree = report.centrality.degree

    isolated = [node for node in graph.all_nodes() if degree.get(node.id, 0) == 0]
    if isolated and len(isolated) < graph.node_count():
        insights.append(
            Insight(
                id="isolated-nodes",
                title="Potentially Isolated Entities",
                description=(
                    f"{len(isolated)} entity/entities appear to have no connections within this dataset. "
                    "This might be expected or could indicate missing links."
                ),
                severity="warning",
                category=DATA_QUALITY,
                details=_examples([node.name or node.id for node in isolated]),
            )
        )

    entities = list(graph.nodes_by_kind(NodeKind.ENTITY))
    minimal = [node for node in entities if len(node.property_keys()) == 1]
    if minimal and len(minimal) < len(entities) / 3:
        insights.append(
            Insight(
                id="sparse-nodes-properties",
                title="Entities with Minimal Properties",
                description=(
                    f"{len(minimal)} entity/entities have only one descriptive property "
                    "(excluding ID/type). This could be normal for link-heavy entities "
                    "or indicate sparse data."
                ),
                severity="suggestion",
                category=DATA_QUALITY,
                details=_examples([node.name or node.id for node in minimal]),
            )
        )

    unlabeled = [node for node in entities if not _has_label(node.properties)]
    if unlabeled and len(unlabeled) < len(entities) / 2:
        insights.append(
            Insight(
                id="unlabeled-nodes",
                title="Entities Lacking Clear Labels",
                description=(
                    f"{len(unlabeled)} entity/entities do not have a common labeling property "
                    "(e.g., name, title, rdfs:label). This can make exploration harder."
                ),
                severity="suggestion",
                category=DATA_QUALITY,
                details=_examples([node.id for node in unlabeled]),
            )
        )
    return insights


def generate_insights(graph: Graph, stats: DataStats, report: AnalyticsReport) -> list[Insight]:
    """Run every insight rule, connectivity first, then schema, then data quality."""
    return [
        *connectivity_insights(graph, report),
        *schema_insights(graph, stats),
        *data_quality_insights(graph, report),
    ]


__all__ = [
    "Insight",
    "connectivity_insights",
    "schema_insights",
    "data_quality_insights",
    "generate_insights",
]
