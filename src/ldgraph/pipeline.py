"""
ldgraph.pipeline - Document to report in one call.

Used by the CLI and by callers that expose analysis as a service. Unlike
``analyze`` itself, the pipeline enforces a node ceiling before running
the quadratic shortest-path sweeps.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ldgraph.analytics import AnalysisOptions, AnalyticsReport, analyze
from ldgraph.config import ConfigLoader, load_config
from ldgraph.graph.builder import Graph, GraphBuilder
from ldgraph.graph.stats import DataStats, compute_data_stats
from ldgraph.logger import get_logger

logger = get_logger(__name__)


class GraphTooLargeError(ValueError):
    """Raised when a graph exceeds the configured node ceiling."""

    def __init__(self, node_count: int, max_nodes: int) -> None:
        self.node_count = node_count
        self.max_nodes = max_nodes
        super().__init__(
            f"Graph has {node_count} nodes, above the analysis limit of {max_nodes} "
            "(set analysis.max_nodes = 0 to disable)"
        )


@dataclass
class PipelineResult:
    """Everything produced for one document."""

    graph: Graph
    stats: DataStats
    report: AnalyticsReport | None = None


def check_node_limit(graph: Graph, max_nodes: int) -> None:
    """Raise GraphTooLargeError when ``graph`` exceeds ``max_nodes`` (0 disables)."""
    if max_nodes and graph.node_count() > max_nodes:
        raise GraphTooLargeError(graph.node_count(), max_nodes)


def analyze_graph(graph: Graph, config: ConfigLoader | None = None) -> AnalyticsReport:
    """Analyze a graph with options and node ceiling taken from config."""
    config = config or load_config()
    check_node_limit(graph, int(config.get("analysis.max_nodes", 0) or 0))
    options = AnalysisOptions.from_dict(config.section("analysis"))
    return analyze(graph, options)


def run_pipeline(
    document: Any,
    config: ConfigLoader | None = None,
    with_report: bool = True,
) -> PipelineResult:
    """Build, summarize, and (optionally) analyze a document.

    Args:
        document: Any JSON value.
        config: Configuration; discovered from the working directory when omitted.
        with_report: Skip analysis when False.

    Returns:
        PipelineResult with graph, stats, and report (None when skipped).

    Raises:
        GraphTooLargeError: If analysis is requested and the graph is
            above ``analysis.max_nodes``.
    """
    config = config or load_config()
    builder = GraphBuilder(id_prefix=config.get("builder.synthetic_id_prefix", "_:b"))
    graph = builder.build(document)
    stats = compute_data_stats(document, graph)
    logger.info(
        "Built graph: %d nodes, %d links from %d entities",
        graph.node_count(),
        graph.link_count(),
        stats.total_entities,
    )

    report = analyze_graph(graph, config) if with_report else None
    return PipelineResult(graph=graph, stats=stats, report=report)
