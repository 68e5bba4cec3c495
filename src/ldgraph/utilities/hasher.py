"""Hasher - Content hashing for deterministic node identifiers.

Provides SHA-256 based digests over canonical JSON so that documents
lacking explicit identifiers still produce the same graph on every build.
"""

import hashlib
import json
from typing import Any


def canonical_json(value: Any) -> str:
    """Serialize a JSON value in canonical form for hashing.

    Keys are sorted and separators are fixed so that two structurally
    equal values always produce the same text. Values that are not
    JSON-native are rendered with ``str()``.

    Args:
        value: Any JSON-compatible value.

    Returns:
        Canonical JSON text.
    """
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=str)


def calculate_hash(content: str, length: int = 12) -> str:
    """Calculate a SHA-256 content hash.

    Args:
        content: Text content to hash
        length: Number of characters in the hash (default 12)

    Returns:
        Hexadecimal hash string of specified length
    """
    return hashlib.sha256(content.encode("utf-8")).hexdigest()[:length]


def _shallow(value: Any) -> Any:
    # Containers are reduced to their kind and size
    if isinstance(value, (dict, list)):
        return f"<{type(value).__name__}:{len(value)}>"
    return value


def shallow_fingerprint(entity: Any) -> str:
    """Canonical JSON of an object's own fields, with containers summarized.

    Nested objects and arrays are reduced to their kind and size, so the
    cost depends only on the object's own keys, not on how deep the
    document below it goes.
    """
    if isinstance(entity, dict):
        return canonical_json({key: _shallow(value) for key, value in entity.items()})
    return canonical_json(_shallow(entity))


def synthetic_id(entity: Any, position: int, prefix: str = "_:b", length: int = 12) -> str:
    """Derive an identifier for an entity that has none.

    The digest covers the entity's shallow fingerprint plus its position
    in the traversal, so identical objects at different places in the same
    document still get distinct ids while repeated builds of the same
    document agree.

    Args:
        entity: The entity object (its own fields are hashed).
        position: Traversal position of the entity within the build.
        prefix: Prefix for the generated id (blank-node style by default).
        length: Number of hex characters to keep.

    Returns:
        Generated identifier such as ``_:b3f2a9c01d4e7``.
    """
    return prefix + calculate_hash(f"{position}:{shallow_fingerprint(entity)}", length=length)


def literal_key(source_id: str, relation: str, value: Any, length: int = 12) -> str:
    """Digest identifying a literal value attached to one source property."""
    return calculate_hash(canonical_json([source_id, relation, value]), length=length)
