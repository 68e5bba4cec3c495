"""
ldgraph.cli - Command-line interface.

Main entry point for the ldgraph CLI tool.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from ldgraph import __version__
from ldgraph.commands import analyze, build, config_cmd, insights, stats
from ldgraph.logger import configure_logging


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "input",
        help="JSON-LD document path, or - for stdin",
        metavar="FILE",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write output to a file instead of stdout",
        metavar="PATH",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Emit single-line JSON",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ldgraph",
        description="Linked-data graph construction and structural analytics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ldgraph build people.jsonld             # Print the node/link graph as JSON
  ldgraph analyze people.jsonld           # Centrality, clustering, communities
  ldgraph analyze --graph graph.json      # Analyze a previously built graph
  ldgraph stats people.jsonld             # Entity type and property counts
  ldgraph insights people.jsonld          # Hubs, isolated nodes, label gaps
  cat doc.json | ldgraph build -          # Read from stdin

Configuration:
  ldgraph config path                     # Show config file location
  ldgraph config show                     # View all settings

For detailed command help: ldgraph <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"ldgraph {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # build command
    build_parser = subparsers.add_parser(
        "build",
        help="Build the node/link graph of a document",
    )
    _add_input_arguments(build_parser)

    # analyze command
    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Compute structural metrics",
    )
    _add_input_arguments(analyze_parser)
    analyze_parser.add_argument(
        "--graph",
        action="store_true",
        help="Input is a graph written by 'ldgraph build', not a document",
    )
    analyze_parser.add_argument(
        "--include-graph",
        action="store_true",
        help="Embed the serialized graph in the report",
    )

    # stats command
    stats_parser = subparsers.add_parser(
        "stats",
        help="Summarize entity types and properties",
    )
    _add_input_arguments(stats_parser)

    # insights command
    insights_parser = subparsers.add_parser(
        "insights",
        help="Report hubs, isolated entities, and data quality findings",
    )
    _add_input_arguments(insights_parser)
    insights_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output insights as JSON",
    )

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="Show effective configuration",
    )
    config_parser.add_argument(
        "config_action",
        nargs="?",
        choices=["show", "path"],
        default="show",
        help="show: print merged settings; path: print config file location",
    )

    return parser


def _log_level(args: argparse.Namespace) -> Optional[str]:
    if args.verbose:
        return "DEBUG"
    if args.quiet:
        return "ERROR"
    return None


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install ldgraph[completion]
    # Then activate: eval "$(register-python-argcomplete ldgraph)"
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)
    configure_logging(_log_level(args))

    # Handle no command
    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "build":
            return build.run(args)
        elif args.command == "analyze":
            return analyze.run(args)
        elif args.command == "stats":
            return stats.run(args)
        elif args.command == "insights":
            return insights.run(args)
        elif args.command == "config":
            return config_cmd.run(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
