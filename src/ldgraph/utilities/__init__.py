"""ldgraph.utilities - Shared helpers."""
