"""
ldgraph.commands.build - Build a graph from a JSON-LD document.
"""

from __future__ import annotations

import argparse

from ldgraph.commands.common import emit_json, load_configuration, load_input
from ldgraph.graph.builder import GraphBuilder
from ldgraph.graph.serialize import serialize_graph


def run(args: argparse.Namespace) -> int:
    """Run the build command."""
    config = load_configuration(args)
    document = load_input(args)

    builder = GraphBuilder(id_prefix=config.get("builder.synthetic_id_prefix", "_:b"))
    graph = builder.build(document)

    emit_json(args, serialize_graph(graph))
    return 0
