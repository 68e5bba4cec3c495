"""
ldgraph.commands - CLI command implementations
"""

__all__ = [
    "analyze",
    "build",
    "config_cmd",
    "insights",
    "stats",
]
