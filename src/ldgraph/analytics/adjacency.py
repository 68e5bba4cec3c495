"""Adjacency and shortest-path sweeps shared by the analytics routines.

The analytics engine never walks the Graph's links directly. It builds
one Adjacency per ``analyze`` call, an undirected simple view of the
multigraph, and hands it to each metric routine. Shortest-path metrics
(betweenness, closeness, diameter, average path length) all need a BFS
from every node; ``summarize_paths`` runs those sweeps once and
accumulates everything the four metrics need.
"""

from __future__ import annotations

from collections import deque
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from functools import partial
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from ldgraph.graph.builder import Graph


@dataclass(frozen=True)
class Adjacency:
    """Undirected simple adjacency over a graph's nodes.

    Attributes:
        order: Node ids in graph insertion order.
        neighbors: Node id -> neighbor ids (graph order, no duplicates,
            no self-loops).
        edge_count: Number of distinct undirected edges.
    """

    order: tuple[str, ...]
    neighbors: dict[str, tuple[str, ...]]
    edge_count: int
    _sets: dict[str, frozenset[str]] = field(repr=False, compare=False)

    def __len__(self) -> int:
        return len(self.order)

    def degree(self, node_id: str) -> int:
        """Number of distinct neighbors of ``node_id``."""
        return len(self.neighbors.get(node_id, ()))

    def are_adjacent(self, a: str, b: str) -> bool:
        """True if an edge joins ``a`` and ``b`` in either direction."""
        return b in self._sets.get(a, frozenset())


def build_adjacency(graph: Graph) -> Adjacency:
    """Collapse a graph's links into an undirected simple adjacency.

    Direction and parallel links collapse into one neighbor relation;
    self-loops and links to ids missing from the graph are dropped.
    """
    order = tuple(node.id for node in graph.all_nodes())
    return adjacency_from_edges(order, ((link.source, link.target) for link in graph.iter_links()))


def adjacency_from_edges(order: Iterable[str], edges: Iterable[tuple[str, str]]) -> Adjacency:
    """Build an Adjacency from node ids and (source, target) pairs."""
    order = tuple(dict.fromkeys(order))
    position = {node_id: index for index, node_id in enumerate(order)}
    sets: dict[str, set[str]] = {node_id: set() for node_id in order}

    for source, target in edges:
        if source == target or source not in sets or target not in sets:
            continue
        sets[source].add(target)
        sets[target].add(source)

    neighbors = {
        node_id: tuple(sorted(adjacent, key=position.__getitem__)) for node_id, adjacent in sets.items()
    }
    edge_count = sum(len(adjacent) for adjacent in sets.values()) // 2
    frozen = {node_id: frozenset(adjacent) for node_id, adjacent in sets.items()}
    return Adjacency(order=order, neighbors=neighbors, edge_count=edge_count, _sets=frozen)


def bfs_distances(adjacency: Adjacency, source: str) -> dict[str, int]:
    """Hop distances from ``source`` to every node reachable from it (itself included)."""
    distances = {source: 0}
    queue = deque([source])
    while queue:
        current = queue.popleft()
        next_distance = distances[current] + 1
        for neighbor in adjacency.neighbors[current]:
            if neighbor not in distances:
                distances[neighbor] = next_distance
                queue.append(neighbor)
    return distances


@dataclass
class SourceSweep:
    """Result of one single-source shortest-path sweep.

    Attributes:
        source: The source node id.
        reachable: Nodes reachable from the source, excluding itself.
        distance_sum: Sum of distances to reachable nodes.
        eccentricity: Largest finite distance (0 when nothing is reachable).
        dependency: Brandes dependency of the source on each other node
            (only non-zero entries).
    """

    source: str
    reachable: int = 0
    distance_sum: int = 0
    eccentricity: int = 0
    dependency: dict[str, float] = field(default_factory=dict)


def sweep(adjacency: Adjacency, source: str) -> SourceSweep:
    """Run Brandes' BFS and dependency back-propagation from one source.

    The forward phase counts shortest paths (sigma) and records
    predecessors; the backward phase pops nodes in order of decreasing
    distance and pushes ``sigma[v]/sigma[w] * (1 + delta[w])`` to each
    predecessor ``v`` of ``w``.
    """
    neighbors = adjacency.neighbors
    stack: list[str] = []
    predecessors: dict[str, list[str]] = {source: []}
    sigma: dict[str, int] = {source: 1}
    distance: dict[str, int] = {source: 0}
    queue = deque([source])

    while queue:
        current = queue.popleft()
        stack.append(current)
        next_distance = distance[current] + 1
        for neighbor in neighbors[current]:
            if neighbor not in distance:
                distance[neighbor] = next_distance
                sigma[neighbor] = 0
                predecessors[neighbor] = []
                queue.append(neighbor)
            if distance[neighbor] == next_distance:
                sigma[neighbor] += sigma[current]
                predecessors[neighbor].append(current)

    delta = dict.fromkeys(stack, 0.0)
    dependency: dict[str, float] = {}
    while stack:
        node = stack.pop()
        coefficient = (1.0 + delta[node]) / sigma[node]
        for predecessor in predecessors[node]:
            delta[predecessor] += sigma[predecessor] * coefficient
        if node != source and delta[node]:
            dependency[node] = delta[node]

    return SourceSweep(
        source=source,
        reachable=len(distance) - 1,
        distance_sum=sum(distance.values()),
        eccentricity=max(distance.values()),
        dependency=dependency,
    )


@dataclass
class PathSummary:
    """Accumulated results of sweeping from every node.

    Attributes:
        raw_betweenness: Unnormalized betweenness (both directions of
            each pair counted).
        closeness: Component-local closeness per node.
        diameter: Largest finite distance seen.
        total_distance: Sum of all finite distances over ordered pairs.
        pair_count: Number of ordered pairs at finite positive distance.
    """

    raw_betweenness: dict[str, float] = field(default_factory=dict)
    closeness: dict[str, float] = field(default_factory=dict)
    diameter: int = 0
    total_distance: int = 0
    pair_count: int = 0

    def add(self, result: SourceSweep) -> None:
        """Merge one sweep. Merging in source order keeps sums reproducible."""
        for node_id, value in result.dependency.items():
            self.raw_betweenness[node_id] += value
        self.closeness[result.source] = (
            result.reachable / result.distance_sum if result.reachable > 0 else 0.0
        )
        self.diameter = max(self.diameter, result.eccentricity)
        self.total_distance += result.distance_sum
        self.pair_count += result.reachable


def summarize_paths(adjacency: Adjacency, workers: int = 1) -> PathSummary:
    """Sweep from every node and accumulate shortest-path metrics.

    Args:
        adjacency: The adjacency to traverse (read-only).
        workers: When greater than 1, sweeps run on a thread pool. Results
            are still merged in node order.

    Returns:
        PathSummary covering every source.
    """
    summary = PathSummary(raw_betweenness=dict.fromkeys(adjacency.order, 0.0))
    if workers > 1 and len(adjacency) > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            for result in executor.map(partial(sweep, adjacency), adjacency.order):
                summary.add(result)
    else:
        for source in adjacency.order:
            summary.add(sweep(adjacency, source))
    return summary
