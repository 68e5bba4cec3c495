"""
ldgraph.commands.analyze - Compute structural metrics for a document or saved graph.
"""

from __future__ import annotations

import argparse

from ldgraph.commands.common import emit_json, load_configuration, load_input
from ldgraph.document import load_document
from ldgraph.graph.serialize import graph_from_dict, serialize_graph, serialize_report
from ldgraph.pipeline import analyze_graph, run_pipeline


def run(args: argparse.Namespace) -> int:
    """Run the analyze command.

    With ``--graph`` the input is a graph previously written by
    ``ldgraph build``; otherwise it is a JSON-LD document.
    """
    config = load_configuration(args)

    if args.graph:
        graph = graph_from_dict(load_document(args.input))
        report = analyze_graph(graph, config)
    else:
        result = run_pipeline(load_input(args), config)
        graph, report = result.graph, result.report

    data = serialize_report(report)
    if args.include_graph:
        data["graph"] = serialize_graph(graph)
    emit_json(args, data)
    return 0
