"""
ldgraph.commands.config_cmd - Show effective configuration.
"""

from __future__ import annotations

import argparse

import tomlkit

from ldgraph.commands.common import load_configuration
from ldgraph.config import CONFIG_FILENAME


def run(args: argparse.Namespace) -> int:
    """Run the config command."""
    config = load_configuration(args)

    if args.config_action == "path":
        if config.path is None:
            print(f"No {CONFIG_FILENAME} found (using defaults)")
            return 1
        print(config.path)
        return 0

    if args.config_action == "show":
        print(tomlkit.dumps(config.get_raw()).rstrip())
        return 0

    print("Usage: ldgraph config {show|path}")
    return 1
