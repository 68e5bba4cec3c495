"""
ldgraph.commands.insights - Report observations about a document's graph.
"""

from __future__ import annotations

import argparse

from ldgraph.commands.common import emit_json, load_configuration, load_input, write_output
from ldgraph.insights import Insight, generate_insights
from ldgraph.pipeline import run_pipeline

SEVERITY_ICONS = {
    "info": "ℹ",
    "warning": "⚠",
    "suggestion": "→",
    "error": "✗",
}


def format_insights(insights: list[Insight]) -> str:
    """Render insights as plain text grouped by category."""
    if not insights:
        return "✓ No notable findings"

    lines: list[str] = []
    category = None
    for insight in insights:
        if insight.category != category:
            if lines:
                lines.append("")
            category = insight.category
            lines.append(category)
            lines.append("-" * len(category))
        icon = SEVERITY_ICONS.get(insight.severity, "•")
        lines.append(f"{icon} {insight.title}")
        lines.append(f"  {insight.description}")
        for detail in insight.details:
            lines.append(f"    - {detail}")
    return "\n".join(lines)


def run(args: argparse.Namespace) -> int:
    """Run the insights command."""
    result = run_pipeline(load_input(args), load_configuration(args))
    insights = generate_insights(result.graph, result.stats, result.report)

    if args.json:
        emit_json(args, {"insights": [insight.to_dict() for insight in insights]})
    else:
        write_output(args, format_insights(insights))
    return 0
