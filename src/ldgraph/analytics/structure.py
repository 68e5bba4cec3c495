"""Whole-graph structural metrics: density, degree, clustering, path lengths."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import combinations

from ldgraph.analytics.adjacency import Adjacency, PathSummary, summarize_paths


@dataclass
class DegreeSummary:
    degree: dict[str, int] = field(default_factory=dict)
    average: float = 0.0
    maximum: int = 0
    minimum: int = 0


def density(node_count: int, link_count: int) -> float:
    """2*E / (N*(N-1)) for N > 1, else 0."""
    if node_count <= 1:
        return 0.0
    return (2 * link_count) / (node_count * (node_count - 1))


def degree_summary(adjacency: Adjacency) -> DegreeSummary:
    """Per-node neighbor counts and their mean/max/min (all 0 when empty)."""
    degree = {node_id: adjacency.degree(node_id) for node_id in adjacency.order}
    if not degree:
        return DegreeSummary()
    values = list(degree.values())
    return DegreeSummary(
        degree=degree,
        average=sum(values) / len(values),
        maximum=max(values),
        minimum=min(values),
    )


def triangles(adjacency: Adjacency, node_id: str) -> int:
    """Number of neighbor pairs of ``node_id`` that are adjacent to each other."""
    return sum(1 for a, b in combinations(adjacency.neighbors[node_id], 2) if adjacency.are_adjacent(a, b))


def local_clustering(adjacency: Adjacency) -> dict[str, float]:
    """Local clustering coefficient per node.

    ``triangles(v) / C(deg(v), 2)`` for nodes of degree >= 2; nodes below
    degree 2 get 0.0 here but are left out of the global average.
    """
    result: dict[str, float] = {}
    for node_id in adjacency.order:
        k = adjacency.degree(node_id)
        if k < 2:
            result[node_id] = 0.0
            continue
        result[node_id] = triangles(adjacency, node_id) / (k * (k - 1) / 2)
    return result


def global_clustering(adjacency: Adjacency, local: dict[str, float] | None = None) -> float:
    """Average local clustering over nodes with degree >= 2 (0 if none qualify)."""
    local = local if local is not None else local_clustering(adjacency)
    qualifying = [local[node_id] for node_id in adjacency.order if adjacency.degree(node_id) >= 2]
    if not qualifying:
        return 0.0
    return sum(qualifying) / len(qualifying)


def diameter(adjacency: Adjacency, paths: PathSummary | None = None) -> int:
    """Longest finite shortest path; 0 for graphs without edges."""
    paths = paths or summarize_paths(adjacency)
    return paths.diameter


def average_path_length(adjacency: Adjacency, paths: PathSummary | None = None) -> float:
    """Mean finite shortest-path length over ordered pairs (u, v), u != v."""
    paths = paths or summarize_paths(adjacency)
    if paths.pair_count == 0:
        return 0.0
    return paths.total_distance / paths.pair_count
