"""Analytics Engine - Computes the AnalyticsReport for a Graph.

``analyze`` owns every intermediate structure it creates (adjacency,
path summary) for the duration of one call, so concurrent analyses of
different graphs share nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ldgraph.analytics.adjacency import build_adjacency, summarize_paths
from ldgraph.analytics.centrality import (
    betweenness_centrality,
    closeness_centrality,
    eigenvector_centrality,
)
from ldgraph.analytics.communities import label_propagation
from ldgraph.analytics.report import AnalysisOptions, AnalyticsReport, CentralityMeasures
from ldgraph.analytics.structure import (
    average_path_length,
    degree_summary,
    density,
    diameter,
    global_clustering,
    local_clustering,
)
from ldgraph.logger import get_logger

if TYPE_CHECKING:
    from ldgraph.graph.builder import Graph

logger = get_logger(__name__)


def analyze(graph: Graph, options: AnalysisOptions | None = None) -> AnalyticsReport:
    """Compute all structural metrics for a graph.

    Total over every Graph: empty and single-node graphs produce zeroed
    metrics and empty (or single-entry) maps.

    Args:
        graph: The graph to analyze.
        options: Analysis tunables (defaults when omitted).

    Returns:
        The AnalyticsReport.
    """
    options = options or AnalysisOptions()
    adjacency = build_adjacency(graph)
    logger.debug(
        "Analyzing %d nodes, %d links (%d distinct edges)",
        graph.node_count(),
        graph.link_count(),
        adjacency.edge_count,
    )

    degrees = degree_summary(adjacency)
    local = local_clustering(adjacency)
    paths = summarize_paths(adjacency, workers=options.workers)

    eigen = eigenvector_centrality(
        adjacency,
        tolerance=options.eigenvector_tolerance,
        max_iterations=options.eigenvector_max_iterations,
    )
    if not eigen.converged:
        logger.info("Eigenvector centrality did not converge after %d iterations", eigen.iterations)

    communities = label_propagation(adjacency, max_passes=options.max_community_passes)
    if not communities.converged:
        logger.info("Label propagation still changing after %d passes", communities.passes)

    return AnalyticsReport(
        node_count=graph.node_count(),
        link_count=graph.link_count(),
        density=density(graph.node_count(), graph.link_count()),
        average_degree=degrees.average,
        max_degree=degrees.maximum,
        min_degree=degrees.minimum,
        clustering=global_clustering(adjacency, local),
        local_clustering=local,
        centrality=CentralityMeasures(
            betweenness=betweenness_centrality(adjacency, paths),
            closeness=closeness_centrality(adjacency, paths),
            degree=degrees.degree,
            eigenvector=eigen.scores,
        ),
        communities=communities.labels,
        diameter=diameter(adjacency, paths),
        average_path_length=average_path_length(adjacency, paths),
        eigenvector_iterations=eigen.iterations,
        eigenvector_converged=eigen.converged,
        community_passes=communities.passes,
        communities_converged=communities.converged,
    )
