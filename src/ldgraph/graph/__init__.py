"""Graph module - Core graph data structures and construction.

Exports:
- NodeKind: Enum of node origins
- GraphNode: Node representation
- GraphLink: Weighted, named link between node ids
- LinkWeight: Link weight classes
- Graph: Container of nodes and links
- GraphBuilder / build: Construct a Graph from a document
- DataStats / compute_data_stats: Document statistics
- DocumentProfile / compute_document_profile: Nested-object profile
"""

from ldgraph.graph.builder import Graph, GraphBuilder, build
from ldgraph.graph.GraphNode import GraphNode, NodeKind
from ldgraph.graph.relations import CONTAINS, GraphLink, LinkWeight
from ldgraph.graph.stats import DataStats, DocumentProfile, compute_data_stats, compute_document_profile

__all__ = [
    "NodeKind",
    "GraphNode",
    "GraphLink",
    "LinkWeight",
    "CONTAINS",
    "Graph",
    "GraphBuilder",
    "build",
    "DataStats",
    "compute_data_stats",
    "DocumentProfile",
    "compute_document_profile",
]
