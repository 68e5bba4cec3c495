"""Document - Loading, validation, and flattening of JSON-LD input.

This is the boundary where raw text becomes a JSON value. Everything
downstream (builder, statistics) accepts any JSON value and never fails;
only text that is not JSON at all is rejected here with ``ParseError``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Iterator

from ldgraph.logger import get_logger

logger = get_logger(__name__)

GRAPH_KEY = "@graph"

_EXHAUSTED = object()


class ParseError(ValueError):
    """Raised when input text is not valid JSON.

    Attributes:
        source: Where the text came from (file path or ``<stdin>``).
        line: 1-based line of the decode error, if known.
        column: 1-based column of the decode error, if known.
    """

    def __init__(
        self,
        message: str,
        source: str = "<string>",
        line: int | None = None,
        column: int | None = None,
    ):
        self.source = source
        self.line = line
        self.column = column
        location = f"{source}:{line}:{column}" if line is not None else source
        super().__init__(f"{location}: {message}")


def parse_document(text: str, source: str = "<string>") -> Any:
    """Parse JSON text into a document value.

    Args:
        text: Raw JSON text.
        source: Label used in error messages.

    Returns:
        The decoded JSON value (object, array, or primitive).

    Raises:
        ParseError: If the text is not valid JSON.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(e.msg, source=source, line=e.lineno, column=e.colno) from e


def load_document(path: str | Path) -> Any:
    """Load a document from a file path, or from stdin when path is ``-``."""
    if str(path) == "-":
        return parse_document(sys.stdin.read(), source="<stdin>")

    file_path = Path(path)
    logger.debug("Loading document from %s", file_path)
    return parse_document(file_path.read_text(encoding="utf-8"), source=str(file_path))


def iter_entities(document: Any) -> Iterator[Any]:
    """Yield the top-level items of a document, expanding containers.

    Arrays and ``@graph`` containers are expanded to any depth. Items that
    are not containers are yielded as-is (objects and primitives alike),
    which lets validation report on them. A wrapper object that carries
    its own non-``@`` properties is yielded in addition to its members.
    """
    pending = [iter((document,))]
    while pending:
        item = next(pending[-1], _EXHAUSTED)
        if item is _EXHAUSTED:
            pending.pop()
        elif isinstance(item, list):
            pending.append(iter(item))
        elif isinstance(item, dict) and GRAPH_KEY in item:
            if any(not key.startswith("@") for key in item):
                yield item
            pending.append(iter((item[GRAPH_KEY],)))
        elif item is not None:
            yield item


def flatten_document(document: Any) -> list[dict[str, Any]]:
    """Flatten a document into the list of entity objects it contains.

    Top-level arrays, nested arrays, and ``@graph`` wrappers are treated
    uniformly; primitives, ``null`` and empty objects contribute nothing.
    """
    return [item for item in iter_entities(document) if isinstance(item, dict) and item]


def validate_document(document: Any) -> list[str]:
    """Check that a document has the shape of a JSON-LD entity collection.

    A document is valid when it is not empty and every top-level item is
    a non-empty object. Invalid documents can still be built (the builder
    is total); validation exists to warn users about likely mistakes.

    Returns:
        List of problem descriptions. Empty list means the document is valid.
    """
    if document is None:
        return ["Document is null"]

    items = list(iter_entities(document))
    if not items:
        return ["Document contains no entities"]

    problems = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            problems.append(f"Item {index} is {type(item).__name__}, expected object")
        elif not item:
            problems.append(f"Item {index} is an empty object")
    return problems
