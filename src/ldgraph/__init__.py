"""
ldgraph - Linked-data graph construction and structural analytics

Turns loosely-structured JSON-LD documents into well-formed node/link
graphs and computes centrality, clustering, community, and path metrics
over them.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ldgraph")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__author__ = "Anspar"
__license__ = "MIT"

from ldgraph.analytics import AnalysisOptions, AnalyticsReport, CentralityMeasures, analyze
from ldgraph.document import ParseError, load_document, parse_document, validate_document
from ldgraph.graph import (
    DataStats,
    DocumentProfile,
    Graph,
    GraphBuilder,
    GraphLink,
    GraphNode,
    LinkWeight,
    NodeKind,
    build,
    compute_data_stats,
    compute_document_profile,
)
from ldgraph.graph.serialize import graph_from_dict, serialize_graph, serialize_report, serialize_stats
from ldgraph.insights import Insight, generate_insights

__all__ = [
    "__version__",
    "AnalysisOptions",
    "AnalyticsReport",
    "CentralityMeasures",
    "DataStats",
    "DocumentProfile",
    "Graph",
    "GraphBuilder",
    "GraphLink",
    "GraphNode",
    "Insight",
    "LinkWeight",
    "NodeKind",
    "ParseError",
    "analyze",
    "build",
    "compute_data_stats",
    "compute_document_profile",
    "generate_insights",
    "graph_from_dict",
    "load_document",
    "parse_document",
    "serialize_graph",
    "serialize_report",
    "serialize_stats",
    "validate_document",
]
