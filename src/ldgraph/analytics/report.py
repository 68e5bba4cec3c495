"""Analytics report data structures.

This module defines the plain data produced by the analytics engine:
- AnalysisOptions: Tunables for one analysis run
- CentralityMeasures: Per-node centrality maps
- AnalyticsReport: All structural metrics for a graph
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class AnalysisOptions:
    """Tunables for ``analyze``.

    Attributes:
        eigenvector_tolerance: Power iteration stops when the largest
            per-node change falls below this.
        eigenvector_max_iterations: Hard cap on power iterations.
        max_community_passes: Label propagation pass ceiling. ``None`` or
            0 derives the ceiling from the node count.
        workers: Threads used for per-source shortest-path sweeps.
    """

    eigenvector_tolerance: float = 1e-6
    eigenvector_max_iterations: int = 100
    max_community_passes: int | None = None
    workers: int = 1

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnalysisOptions:
        """
        Create AnalysisOptions from the ``[analysis]`` config section.

        Args:
            data: Dictionary from [analysis] config section

        Returns:
            AnalysisOptions with values from data or defaults
        """
        passes = data.get("max_community_passes")
        return cls(
            eigenvector_tolerance=float(data.get("eigenvector_tolerance", 1e-6)),
            eigenvector_max_iterations=int(data.get("eigenvector_max_iterations", 100)),
            max_community_passes=int(passes) if passes else None,
            workers=max(1, int(data.get("workers", 1))),
        )


@dataclass
class CentralityMeasures:
    """Per-node centrality maps, keyed by node id."""

    betweenness: dict[str, float] = field(default_factory=dict)
    closeness: dict[str, float] = field(default_factory=dict)
    degree: dict[str, int] = field(default_factory=dict)
    eigenvector: dict[str, float] = field(default_factory=dict)


@dataclass
class AnalyticsReport:
    """Structural metrics for one graph.

    Traversal metrics treat the graph as undirected and simple. Density
    uses the raw link count, so multigraphs can exceed 1.0.

    Attributes:
        node_count: Number of nodes.
        link_count: Number of links (multi-links counted separately).
        density: 2*links / (n*(n-1)), 0 for n <= 1.
        average_degree: Mean neighbor count.
        max_degree: Largest neighbor count (0 for empty graphs).
        min_degree: Smallest neighbor count (0 for empty graphs).
        clustering: Mean local clustering over nodes with degree >= 2.
        local_clustering: Per-node clustering (0.0 below degree 2).
        centrality: Betweenness, closeness, degree, eigenvector maps.
        communities: Node id -> community label.
        diameter: Longest finite shortest path (0 without edges).
        average_path_length: Mean finite shortest-path length over
            ordered pairs.
        eigenvector_iterations: Power iterations performed.
        eigenvector_converged: False if the iteration cap was hit.
        community_passes: Label propagation passes performed.
        communities_converged: False if the pass ceiling was hit while
            labels were still changing.
    """

    node_count: int = 0
    link_count: int = 0
    density: float = 0.0
    average_degree: float = 0.0
    max_degree: int = 0
    min_degree: int = 0
    clustering: float = 0.0
    local_clustering: dict[str, float] = field(default_factory=dict)
    centrality: CentralityMeasures = field(default_factory=CentralityMeasures)
    communities: dict[str, int] = field(default_factory=dict)
    diameter: int = 0
    average_path_length: float = 0.0
    eigenvector_iterations: int = 0
    eigenvector_converged: bool = True
    community_passes: int = 0
    communities_converged: bool = True

    @property
    def community_count(self) -> int:
        """Number of distinct community labels."""
        return len(set(self.communities.values()))

    def community_members(self) -> dict[int, list[str]]:
        """Group node ids by community label, preserving node order."""
        members: dict[int, list[str]] = {}
        for node_id, label in self.communities.items():
            members.setdefault(label, []).append(node_id)
        return members

    def top_nodes(self, measure: str, limit: int = 5) -> list[tuple[str, float]]:
        """Highest-scoring nodes for one centrality measure.

        Args:
            measure: "betweenness", "closeness", "degree" or "eigenvector".
            limit: Maximum number of entries.

        Returns:
            (node_id, score) pairs, best first, ties broken by id.
        """
        scores = getattr(self.centrality, measure, None)
        if not isinstance(scores, dict):
            raise ValueError(f"Unknown centrality measure: {measure}")
        return sorted(scores.items(), key=lambda item: (-item[1], item[0]))[:limit]


__all__ = [
    "AnalysisOptions",
    "CentralityMeasures",
    "AnalyticsReport",
]
