"""Logging setup for ldgraph.

Library modules obtain loggers with ``get_logger(__name__)`` and never
configure handlers themselves. The CLI calls ``configure_logging`` once
with the level chosen from flags, configuration, or the
``LDGRAPH_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations

import logging
import os
import sys

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


class ANSIColors:
    """Terminal colors per level."""

    DEBUG = "\033[36m"  # Cyan
    INFO = "\033[32m"  # Green
    WARNING = "\033[33m"  # Yellow
    ERROR = "\033[31m"  # Red
    CRITICAL = "\033[1;31m"  # Bold Red
    RESET = "\033[0m"


class ColorFormatter(logging.Formatter):
    """Formatter that colors messages when writing to a terminal."""

    def __init__(self, fmt: str = DEFAULT_FORMAT, use_color: bool = True) -> None:
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        log_message = super().format(record)
        if not self.use_color:
            return log_message

        log_color = {
            logging.DEBUG: ANSIColors.DEBUG,
            logging.INFO: ANSIColors.INFO,
            logging.WARNING: ANSIColors.WARNING,
            logging.ERROR: ANSIColors.ERROR,
            logging.CRITICAL: ANSIColors.CRITICAL,
        }.get(record.levelno, ANSIColors.RESET)

        return f"{log_color}{log_message}{ANSIColors.RESET}"


def resolve_level(level: str | None = None, default: str | None = None) -> int:
    """Resolve a level name to a logging constant.

    Precedence: explicit ``level`` argument, then ``LDGRAPH_LOG_LEVEL``,
    then ``default`` (the configured level), then WARNING. Unknown names
    fall back to WARNING.
    """
    name = (level or os.getenv("LDGRAPH_LOG_LEVEL") or default or "WARNING").upper()
    if name not in VALID_LOG_LEVELS:
        name = "WARNING"
    return getattr(logging, name)


def configure_logging(level: str | None = None, stream=None, default: str | None = None) -> logging.Logger:
    """Install a single stderr handler on the ``ldgraph`` logger.

    Safe to call repeatedly; the previous handler is replaced.

    Args:
        level: Level name (DEBUG, INFO, ...). See ``resolve_level``.
        stream: Output stream (defaults to stderr).
        default: Level used when neither ``level`` nor the environment
            names one, usually ``logging.level`` from config.

    Returns:
        The configured package logger.
    """
    stream = stream or sys.stderr
    root = logging.getLogger("ldgraph")
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColorFormatter(use_color=hasattr(stream, "isatty") and stream.isatty()))
    root.addHandler(handler)
    root.setLevel(resolve_level(level, default))
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``ldgraph`` namespace."""
    if not name.startswith("ldgraph"):
        name = f"ldgraph.{name}"
    return logging.getLogger(name)
