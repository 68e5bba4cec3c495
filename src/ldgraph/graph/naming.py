"""Naming - Display-name resolution for entities.

Linked-data documents label things in many different ways. The
``resolve_name`` chain tries the common conventions in a fixed order and
always produces some label.
"""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import unquote

from ldgraph.graph.values import VALUE_KEY, is_absolute_url

UNNAMED = "Unnamed Entity"

PRIMARY_NAME_KEYS = ("name", "title", "label")
ALIAS_NAME_KEYS = ("rdfs:label", "schema:name", "foaf:name", "dc:title")
PERSON_NAME_PAIRS = (("givenName", "familyName"), ("firstName", "lastName"))
NAME_HINTS = ("name", "title", "label")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def text_of(value: Any) -> str:
    """Extract display text from a property value.

    Strings are stripped; numbers are stringified; value objects use
    their ``@value``; lists use their first element with text. Anything
    else yields an empty string.
    """
    pending = [value]
    while pending:
        current = pending.pop()
        if isinstance(current, bool):
            continue
        if isinstance(current, str):
            text = current.strip()
            if text:
                return text
        elif isinstance(current, (int, float)):
            return str(current)
        elif isinstance(current, dict) and VALUE_KEY in current:
            pending.append(current[VALUE_KEY])
        elif isinstance(current, list):
            pending.extend(reversed(current))
    return ""


def humanize(text: str) -> str:
    """Turn an identifier fragment into a readable label.

    Percent-escapes are decoded, ``-`` and ``_`` become spaces, a space is
    inserted before camel-case capitals, and each word is title-cased.
    Words written entirely in capitals are kept as acronyms.

    >>> humanize("john_doe-smith")
    'John Doe Smith'
    >>> humanize("CreativeWork")
    'Creative Work'
    """
    cleaned = unquote(text).replace("-", " ").replace("_", " ")
    cleaned = _CAMEL_BOUNDARY.sub(" ", cleaned)
    return " ".join(_title_word(word) for word in cleaned.split())


def _title_word(word: str) -> str:
    if len(word) > 1 and word.isupper():
        return word
    return word[:1].upper() + word[1:].lower()


def url_tail(url: str) -> str:
    """Return the last meaningful path segment or fragment of a URL."""
    stripped = url.rstrip("/#")
    cut = max(stripped.rfind("/"), stripped.rfind("#"))
    tail = stripped[cut + 1 :] if cut >= 0 else stripped
    if "?" in tail:
        tail = tail.split("?", 1)[0]
    # Only the host is left
    if stripped[: cut + 1].endswith("//"):
        return ""
    return tail


def readable_type(type_label: str) -> str:
    """Readable form of a type label (``schema:CreativeWork`` -> ``Creative Work``)."""
    if is_absolute_url(type_label):
        local = url_tail(type_label)
    else:
        local = type_label.rsplit(":", 1)[-1]
    return humanize(local)


def resolve_name(entity: dict[str, Any], node_id: str, type_label: str | None) -> str:
    """Resolve the display name of an entity.

    Order (first non-empty wins): name, title, label; labeling aliases
    (rdfs:label, schema:name, foaf:name, dc:title); given+family or
    first+last name; any other key mentioning name/title/label; the
    cleaned-up tail of a URL id; the readable type; "Unnamed Entity".

    Args:
        entity: The document object.
        node_id: The resolved id (explicit or synthesized).
        type_label: The explicit type, or None when the object has none.
    """
    for key in PRIMARY_NAME_KEYS + ALIAS_NAME_KEYS:
        text = text_of(entity.get(key))
        if text:
            return text

    for first_key, last_key in PERSON_NAME_PAIRS:
        parts = [text_of(entity.get(first_key)), text_of(entity.get(last_key))]
        combined = " ".join(part for part in parts if part)
        if combined:
            return combined

    for key, value in entity.items():
        if key.startswith("@"):
            continue
        lowered = key.lower()
        if any(hint in lowered for hint in NAME_HINTS):
            text = text_of(value)
            if text:
                return text

    if is_absolute_url(node_id):
        tail = humanize(url_tail(node_id))
        if tail:
            return tail

    if type_label:
        readable = readable_type(type_label)
        if readable:
            return readable

    return UNNAMED


def leaf_name(value: Any, limit: int = 50) -> str:
    """Display label for a literal leaf, truncated for long text."""
    text = str(value).lower() if isinstance(value, bool) else str(value)
    return text[:limit] + "..." if len(text) > limit else text
