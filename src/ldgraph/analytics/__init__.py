"""Analytics module - Structural metrics over built graphs.

Exports:
- analyze: Compute an AnalyticsReport for a Graph
- AnalysisOptions: Tunables for one analysis run
- AnalyticsReport: All computed metrics
- CentralityMeasures: Per-node centrality maps
"""

from ldgraph.analytics.engine import analyze
from ldgraph.analytics.report import AnalysisOptions, AnalyticsReport, CentralityMeasures

__all__ = [
    "analyze",
    "AnalysisOptions",
    "AnalyticsReport",
    "CentralityMeasures",
]
