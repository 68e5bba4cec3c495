"""Tests for adjacency construction and shortest-path sweeps."""

import pytest

from ldgraph.analytics.adjacency import bfs_distances, build_adjacency, summarize_paths, sweep
from ldgraph.graph.builder import Graph
from ldgraph.graph.GraphNode import GraphNode, NodeKind
from ldgraph.graph.relations import GraphLink
from tests.core.graph_test_helpers import make_adjacency, make_graph


class TestBuildAdjacency:
    def test_undirected_simple(self):
        graph = make_graph(["A", "B", "C"], [("A", "B"), ("B", "A"), ("C", "B"), ("C", "C")])
        adjacency = build_adjacency(graph)

        assert adjacency.order == ("A", "B", "C")
        assert adjacency.neighbors == {"A": ("B",), "B": ("A", "C"), "C": ("B",)}
        assert adjacency.edge_count == 2
        assert len(adjacency) == 3

    def test_neighbors_in_graph_order(self):
        adjacency = make_adjacency(["A", "B", "C", "D"], [("A", "D"), ("A", "B"), ("C", "A")])
        assert adjacency.neighbors["A"] == ("B", "C", "D")

    def test_links_to_missing_nodes_dropped(self):
        graph = Graph.from_parts(
            [GraphNode(id="A", kind=NodeKind.ENTITY)],
            [GraphLink("A", "ghost", "r")],
        )
        adjacency = build_adjacency(graph)
        assert adjacency.neighbors == {"A": ()}
        assert adjacency.edge_count == 0

    def test_degree_and_are_adjacent(self):
        adjacency = make_adjacency(["A", "B", "C"], [("A", "B")])
        assert adjacency.degree("A") == 1
        assert adjacency.degree("C") == 0
        assert adjacency.degree("missing") == 0
        assert adjacency.are_adjacent("B", "A")
        assert not adjacency.are_adjacent("A", "C")


class TestBfs:
    def test_distances(self):
        adjacency = make_adjacency(["A", "B", "C", "D"], [("A", "B"), ("B", "C")])
        assert bfs_distances(adjacency, "A") == {"A": 0, "B": 1, "C": 2}


class TestSweep:
    def test_path_from_end(self):
        adjacency = make_adjacency(["A", "B", "C"], [("A", "B"), ("B", "C")])
        result = sweep(adjacency, "A")
        assert result.reachable == 2
        assert result.distance_sum == 3
        assert result.eccentricity == 2
        assert result.dependency == {"B": pytest.approx(1.0)}

    def test_split_paths(self):
        # A reaches D through B or C: each carries half the dependency
        adjacency = make_adjacency(["A", "B", "C", "D"], [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")])
        result = sweep(adjacency, "A")
        assert result.dependency["B"] == pytest.approx(0.5)
        assert result.dependency["C"] == pytest.approx(0.5)
        assert "D" not in result.dependency

    def test_isolated_source(self):
        result = sweep(make_adjacency(["A"], []), "A")
        assert (result.reachable, result.distance_sum, result.eccentricity) == (0, 0, 0)
        assert result.dependency == {}


class TestSummarizePaths:
    def test_totals(self):
        adjacency = make_adjacency(["A", "B", "C"], [("A", "B"), ("B", "C")])
        summary = summarize_paths(adjacency)
        assert summary.raw_betweenness == {"A": 0.0, "B": pytest.approx(2.0), "C": 0.0}
        assert summary.diameter == 2
        assert summary.total_distance == 8
        assert summary.pair_count == 6

    def test_empty(self):
        summary = summarize_paths(make_adjacency([], []))
        assert summary.raw_betweenness == {}
        assert summary.pair_count == 0
