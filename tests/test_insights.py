"""Tests for rule-based insights."""

from ldgraph.analytics import analyze
from ldgraph.graph.builder import build
from ldgraph.graph.stats import DataStats, compute_data_stats
from ldgraph.insights import (
    CONNECTIVITY,
    DATA_QUALITY,
    SCHEMA,
    Insight,
    connectivity_insights,
    data_quality_insights,
    generate_insights,
    schema_insights,
)
from tests.core.graph_test_helpers import make_graph


def _ids(insights):
    return [insight.id for insight in insights]


class TestConnectivity:
    def test_hub(self):
        spokes = [f"s{i}" for i in range(10)]
        graph = make_graph(["hub"] + spokes, [("hub", s) for s in spokes])
        insights = connectivity_insights(graph, analyze(graph))
        assert _ids(insights) == ["hub-nodes"]
        assert insights[0].details == ["hub (Connections: 10)"]
        assert insights[0].category == CONNECTIVITY

    def test_sparse(self):
        ids = [f"n{i}" for i in range(30)]
        graph = make_graph(ids, [("n0", "n1")])
        assert "sparse-graph" in _ids(connectivity_insights(graph, analyze(graph)))

    def test_small_graph_not_sparse(self):
        graph = make_graph(["A", "B"], [])
        assert connectivity_insights(graph, analyze(graph)) == []


class TestSchema:
    def test_dominant_types(self):
        stats = DataStats(entity_types={"Person": 3, "Place": 1})
        graph = make_graph(["A"], [])
        insights = schema_insights(graph, stats)
        assert _ids(insights) == ["dominant-types"]
        assert "Person (3 instances), Place (1 instances)" in insights[0].description
        assert insights[0].category == SCHEMA

    def test_low_diversity_needs_size(self):
        stats = DataStats(entity_types={"Person": 12})
        big = make_graph([f"n{i}" for i in range(12)], [])
        assert "low-type-diversity" in _ids(schema_insights(big, stats))
        assert "low-type-diversity" not in _ids(schema_insights(make_graph(["A"], []), stats))

    def test_high_diversity(self):
        stats = DataStats(entity_types={f"T{i}": 1 for i in range(11)})
        assert "high-type-diversity" in _ids(schema_insights(make_graph(["A"], []), stats))

    def test_no_types(self):
        assert schema_insights(make_graph([], []), DataStats()) == []


class TestDataQuality:
    def test_isolated(self):
        graph = make_graph(["A", "B", "C"], [("A", "B")])
        insights = data_quality_insights(graph, analyze(graph))
        assert _ids(insights) == ["isolated-nodes"]
        assert insights[0].details == ["C"]
        assert insights[0].severity == "warning"
        assert insights[0].category == DATA_QUALITY

    def test_isolated_examples_capped(self):
        graph = make_graph([f"n{i}" for i in range(10)], [("n0", "n1")])
        insight = data_quality_insights(graph, analyze(graph))[0]
        assert len(insight.details) == 6
        assert insight.details[-1] == "...and 3 more."

    def test_all_isolated_not_reported(self):
        graph = make_graph(["A", "B"], [])
        assert "isolated-nodes" not in _ids(data_quality_insights(graph, analyze(graph)))

    def test_minimal_and_unlabeled(self):
        document = [{"@id": f"e{i}", "name": f"E{i}", "rank": i} for i in range(6)]
        document.append({"@id": "lonely", "code": "Z"})
        graph = build(document)
        insights = {insight.id: insight for insight in data_quality_insights(graph, analyze(graph))}

        assert set(insights) == {"sparse-nodes-properties", "unlabeled-nodes"}
        assert insights["sparse-nodes-properties"].details == ["Unnamed Entity"]
        assert insights["unlabeled-nodes"].details == ["lonely"]


class TestGenerateInsights:
    def test_order_by_category(self):
        document = [{"@id": f"e{i}", "name": f"E{i}", "rank": i} for i in range(6)]
        document.append({"@id": "lonely", "code": "Z"})
        graph = build(document)
        insights = generate_insights(graph, compute_data_stats(document, graph), analyze(graph))

        categories = [insight.category for insight in insights]
        assert categories == sorted(categories, key=[CONNECTIVITY, SCHEMA, DATA_QUALITY].index)
        assert "dominant-types" in _ids(insights)

    def test_to_dict(self):
        insight = Insight(id="x", title="T", description="D", severity="info", category="C", details=["a"])
        assert insight.to_dict() == {
            "id": "x",
            "title": "T",
            "description": "D",
            "severity": "info",
            "category": "C",
            "details": ["a"],
        }
