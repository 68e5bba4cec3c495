"""Pytest fixtures for core tests."""

import pytest


@pytest.fixture
def person_document():
    """Small document with a reference, a nested child, and literals."""
    return {
        "@graph": [
            {
                "@id": "http://example.org/people/alice",
                "@type": "Person",
                "name": "Alice",
                "age": 34,
                "knows": {"@id": "http://example.org/people/bob"},
                "homepage": "https://alice.example.com/",
                "address": {"streetAddress": "1 Main St", "addressLocality": "Springfield"},
            },
            {
                "@id": "http://example.org/people/bob",
                "@type": "Person",
                "name": "Bob",
                "active": True,
            },
        ]
    }


@pytest.fixture
def builder():
    """Fresh GraphBuilder."""
    from ldgraph.graph.builder import GraphBuilder

    return GraphBuilder()


@pytest.fixture
def triangle_graph():
    """A - B - C - A."""
    from tests.core.graph_test_helpers import make_graph

    return make_graph(["A", "B", "C"], [("A", "B"), ("B", "C"), ("C", "A")])
