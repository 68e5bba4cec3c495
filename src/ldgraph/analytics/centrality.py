"""Centrality measures: betweenness, closeness, eigenvector.

All three operate on an Adjacency (undirected, simple). Betweenness and
closeness can reuse a PathSummary computed once for the whole analysis.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ldgraph.analytics.adjacency import Adjacency, PathSummary, summarize_paths

DEFAULT_TOLERANCE = 1e-6
DEFAULT_MAX_ITERATIONS = 100


def betweenness_centrality(adjacency: Adjacency, paths: PathSummary | None = None) -> dict[str, float]:
    """Brandes betweenness, normalized by 2/((n-1)(n-2)) when n > 2.

    Every ordered (source, target) pair contributes, so for n <= 2 the
    raw values (all zero) are returned unnormalized.
    """
    paths = paths or summarize_paths(adjacency)
    n = len(adjacency)
    scale = 2.0 / ((n - 1) * (n - 2)) if n > 2 else 1.0
    return {node_id: paths.raw_betweenness.get(node_id, 0.0) * scale for node_id in adjacency.order}


def closeness_centrality(adjacency: Adjacency, paths: PathSummary | None = None) -> dict[str, float]:
    """Component-local closeness: reachable / sum(distances to reachable).

    Normalizing by the node's own reachable set rather than N-1 keeps
    values meaningful inside each component of a disconnected graph, at
    the cost of comparability across components. Isolated nodes get 0.
    """
    paths = paths or summarize_paths(adjacency)
    return {node_id: paths.closeness.get(node_id, 0.0) for node_id in adjacency.order}


@dataclass
class EigenvectorResult:
    scores: dict[str, float] = field(default_factory=dict)
    iterations: int = 0
    converged: bool = True


def eigenvector_centrality(
    adjacency: Adjacency,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> EigenvectorResult:
    """Eigenvector centrality by power iteration.

    Starts from all ones; each step sets a node's score to the sum of its
    neighbors' scores and L2-normalizes the vector. Stops once the largest
    per-node change is below ``tolerance`` or after ``max_iterations``
    steps, returning the last iterate either way. A graph without edges
    has a zero vector after the first step and stops there.
    """
    order = adjacency.order
    if not order:
        return EigenvectorResult()

    neighbors = adjacency.neighbors
    scores = dict.fromkeys(order, 1.0)
    iterations = 0
    converged = False

    while iterations < max_iterations:
        iterations += 1
        updated = {node_id: math.fsum(scores[n] for n in neighbors[node_id]) for node_id in order}
        norm = math.sqrt(math.fsum(value * value for value in updated.values()))
        if norm == 0:
            scores = updated
            converged = True
            break

        max_change = 0.0
        for node_id in order:
            updated[node_id] /= norm
            max_change = max(max_change, abs(updated[node_id] - scores[node_id]))
        scores = updated

        if max_change < tolerance:
            converged = True
            break

    return EigenvectorResult(scores=scores, iterations=iterations, converged=converged)
