"""
ldgraph.commands.common - Helpers shared by the CLI commands.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from ldgraph.config import ConfigLoader, load_config
from ldgraph.document import load_document, validate_document
from ldgraph.graph.serialize import to_json
from ldgraph.logger import configure_logging, get_logger

logger = get_logger(__name__)


def load_configuration(args: argparse.Namespace) -> ConfigLoader:
    """Load config from ``--config`` or by discovery from the working directory.

    Unless ``-v``/``-q`` picked a level, ``logging.level`` from the loaded
    config becomes the log level.
    """
    config_path = getattr(args, "config", None)
    config = load_config(Path(config_path) if config_path else None)
    if not (getattr(args, "verbose", False) or getattr(args, "quiet", False)):
        configure_logging(default=config.get("logging.level"))
    return config


def load_input(args: argparse.Namespace) -> Any:
    """Load the document named by ``args.input`` and warn about shape problems."""
    document = load_document(args.input)
    for problem in validate_document(document):
        logger.warning("%s: %s", args.input, problem)
    return document


def write_output(args: argparse.Namespace, text: str) -> None:
    """Write command output to ``--output`` or stdout."""
    output = getattr(args, "output", None)
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        if not getattr(args, "quiet", False):
            print(f"Wrote {output}", file=sys.stderr)
    else:
        print(text)


def emit_json(args: argparse.Namespace, data: dict[str, Any]) -> None:
    """Write a serialized structure as JSON, compact when ``--compact`` is set."""
    write_output(args, to_json(data, indent=None if getattr(args, "compact", False) else 2))
