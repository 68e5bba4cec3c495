"""Tests for document statistics."""

import pytest

from ldgraph.graph.builder import build
from ldgraph.graph.stats import DataStats, DocumentProfile, compute_data_stats, compute_document_profile


class TestComputeDataStats:
    def test_person_document(self, person_document):
        stats = compute_data_stats(person_document)

        assert stats.total_entities == 2
        assert stats.entity_types == {"Person": 2}
        assert stats.property_count == {
            "name": 2,
            "age": 1,
            "knows": 1,
            "homepage": 1,
            "address": 1,
            "active": 1,
        }
        assert stats.data_complexity == pytest.approx(3.5)
        assert stats.schema_compliance == pytest.approx(100.0)
        assert stats.relationship_types == {}

    def test_relationship_types_from_graph(self, person_document):
        stats = compute_data_stats(person_document, build(person_document))
        assert stats.relationship_types["name"] == 2
        assert stats.relationship_types["contains"] == 1
        assert sum(stats.relationship_types.values()) == 9

    @pytest.mark.parametrize("document", [None, [], {}, "x"])
    def test_empty(self, document):
        stats = compute_data_stats(document)
        assert stats.total_entities == 0
        assert stats.data_complexity == 0.0
        assert stats.schema_compliance == 0.0

    def test_unknown_type_counted(self):
        stats = compute_data_stats([{"@id": "a"}, {"@type": "T"}])
        assert stats.entity_types == {"Unknown": 1, "T": 1}

    def test_compliance_partial(self):
        stats = compute_data_stats([{"type": "T"}, {"foo": 1}, {"name": ""}, {"id": "x"}])
        assert stats.schema_compliance == pytest.approx(50.0)


class TestDataStats:
    def test_type_diversity(self):
        assert DataStats(entity_types={"A": 1, "B": 2}).type_diversity == 2

    def test_top_types(self):
        stats = DataStats(entity_types={"B": 2, "A": 2, "C": 5, "D": 1})
        assert stats.top_types() == [("C", 5), ("A", 2), ("B", 2)]
        assert stats.top_types(1) == [("C", 5)]


class TestComputeDocumentProfile:
    def test_person_document(self, person_document):
        profile = compute_document_profile(person_document)

        assert profile.object_count == 5
        assert profile.property_total == 15
        assert profile.depth_distribution == {0: 1, 1: 2, 2: 2}
        assert profile.max_depth == 2
        assert profile.type_usage == {"Person": 2}
        assert profile.context_usage == {}
        assert profile.property_usage["@id"] == 3
        assert profile.property_usage["streetAddress"] == 1
        assert profile.average_properties == pytest.approx(3.0)
        assert profile.max_properties == 7
        assert profile.min_properties == 1
        assert profile.semantic_richness == pytest.approx(0.2)
        assert profile.total_complexity == pytest.approx(11.0)

    def test_contexts(self):
        document = [
            {"@context": "https://schema.org", "@id": "a"},
            {"@context": {"schema": "https://schema.org/", "foaf": "http://xmlns.com/foaf/0.1/"}},
            {"@context": ["https://schema.org", {"ex": "http://example.org/"}]},
        ]
        profile = compute_document_profile(document)
        assert profile.context_usage == {"https://schema.org": 2, "schema": 1, "foaf": 1, "ex": 1}

    def test_type_lists_counted_per_label(self):
        profile = compute_document_profile({"@type": ["Person", "Agent", 3], "knows": {"@type": "Person"}})
        assert profile.type_usage == {"Person": 2, "Agent": 1}

    def test_namespaces(self):
        document = {"schema:name": "x", "schema:url": "y", "http://xmlns.com/foaf/0.1/name": "z", "@id": "a"}
        profile = compute_document_profile(document)
        assert profile.namespace_usage == {"schema": 2, "xmlns.com": 1}

    def test_arrays_do_not_add_depth(self):
        profile = compute_document_profile([[{"a": [{"b": 1}]}]])
        assert profile.depth_distribution == {0: 1, 1: 1}

    @pytest.mark.parametrize("document", [None, [], "x", 3])
    def test_no_objects(self, document):
        profile = compute_document_profile(document)
        assert profile == DocumentProfile()
        assert profile.semantic_richness == 0.0
        assert profile.max_depth == 0

    def test_deep_document(self):
        document = {"name": "leaf"}
        for _ in range(3000):
            document = {"child": document}
        profile = compute_document_profile(document)
        assert profile.object_count == 3001
        assert profile.max_depth == 3000

    def test_attached_to_data_stats(self, person_document):
        assert compute_data_stats(person_document).profile.object_count == 5
