"""
ldgraph.commands.stats - Summarize the entities of a JSON-LD document.
"""

from __future__ import annotations

import argparse

from ldgraph.commands.common import emit_json, load_configuration, load_input
from ldgraph.graph.serialize import serialize_stats
from ldgraph.pipeline import run_pipeline


def run(args: argparse.Namespace) -> int:
    """Run the stats command."""
    result = run_pipeline(load_input(args), load_configuration(args), with_report=False)
    emit_json(args, serialize_stats(result.stats))
    return 0
