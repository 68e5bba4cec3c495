"""Values - Classification of property values for relationship building.

Every property value the builder meets is turned into exactly one
RelationshipValue variant by ``classify_value``. The builder then
dispatches on the variant, so the set of cases it handles is closed:

- EntityRef: object carrying an identifier
- Nested: object without identifier (a child entity)
- UrlRef: absolute URL string
- StringLeaf: other non-empty string
- NumericLeaf: int or float
- BooleanLeaf: true/false
- Empty: null, blank string, empty object or array
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Union
from urllib.parse import urlparse

ID_KEYS = ("@id", "id")
TYPE_KEYS = ("@type", "type")
VALUE_KEY = "@value"
CONTAINER_KEYS = ("@list", "@set")

_EXHAUSTED = object()


@dataclass(frozen=True)
class EntityRef:
    """Object that names itself with an identifier."""

    id: str
    entity: dict[str, Any] = field(compare=False, hash=False)


@dataclass(frozen=True)
class Nested:
    """Object without identifier, built as a contained child."""

    entity: dict[str, Any] = field(compare=False, hash=False)


@dataclass(frozen=True)
class UrlRef:
    url: str


@dataclass(frozen=True)
class StringLeaf:
    text: str


@dataclass(frozen=True)
class NumericLeaf:
    number: int | float


@dataclass(frozen=True)
class BooleanLeaf:
    flag: bool


@dataclass(frozen=True)
class Empty:
    pass


RelationshipValue = Union[EntityRef, Nested, UrlRef, StringLeaf, NumericLeaf, BooleanLeaf, Empty]


def is_absolute_url(text: str) -> bool:
    """True for strings like ``https://host/path`` (scheme plus authority)."""
    if not text or any(ch.isspace() for ch in text):
        return False
    try:
        parsed = urlparse(text)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc)


def id_key(entity: dict[str, Any]) -> str | None:
    """Return the key that supplies an object's identifier, if any.

    ``@id`` wins over ``id``. Empty, null, and structured values do not
    count as identifiers.
    """
    for key in ID_KEYS:
        value = entity.get(key)
        if value is None or isinstance(value, (dict, list, bool)):
            continue
        if str(value).strip():
            return key
    return None


def type_key(entity: dict[str, Any]) -> str | None:
    """Return the key that supplies an object's type label, if any."""
    for key in TYPE_KEYS:
        if _type_label(entity.get(key)):
            return key
    return None


def _type_label(value: Any) -> str | None:
    if isinstance(value, list):
        value = next((v for v in value if isinstance(v, str) and v.strip()), None)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def entity_id(entity: dict[str, Any]) -> str | None:
    """Return the explicit identifier of an object, if it has one.

    Non-string identifiers (numbers) are stringified.
    """
    key = id_key(entity)
    return str(entity[key]).strip() if key is not None else None


def entity_type(entity: dict[str, Any]) -> str | None:
    """Return the explicit type label of an object, if it has one.

    JSON-LD allows ``@type`` to be a list; the first non-empty string
    element is used.
    """
    key = type_key(entity)
    return _type_label(entity[key]) if key is not None else None


def descriptor_keys(entity: dict[str, Any]) -> frozenset[str]:
    """Keys that describe the object itself rather than a relationship.

    These are the ``@`` keywords plus whichever plain ``id``/``type`` key
    supplied the identifier or type.
    """
    keys = {key for key in entity if key.startswith("@")}
    keys.update(key for key in (id_key(entity), type_key(entity)) if key is not None)
    return frozenset(keys)


def classify_value(value: Any) -> RelationshipValue:
    """Classify a single (non-array) property value.

    JSON-LD value objects (``{"@value": ...}``) are classified by their
    inner value. Arrays should be expanded with ``iter_values`` first; an
    array passed here is Empty when it has no elements and is otherwise
    classified by its first element.
    """
    while True:
        if isinstance(value, dict) and VALUE_KEY in value:
            value = value[VALUE_KEY]
        elif isinstance(value, list) and value:
            value = value[0]
        else:
            break

    if value is None:
        return Empty()
    if isinstance(value, bool):
        return BooleanLeaf(value)
    if isinstance(value, (int, float)):
        return NumericLeaf(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return Empty()
        if is_absolute_url(text):
            return UrlRef(text)
        return StringLeaf(value)
    if isinstance(value, dict):
        if not value:
            return Empty()
        identifier = entity_id(value)
        if identifier is not None:
            return EntityRef(identifier, value)
        return Nested(value)
    if isinstance(value, list):
        return Empty()
    return StringLeaf(str(value))


def iter_values(value: Any) -> Iterator[RelationshipValue]:
    """Fan a property value out into classified values.

    Arrays (including nested arrays and ``@list``/``@set`` containers)
    yield one classified value per element, in order; Empty values are
    skipped. Nesting depth is unbounded.
    """
    pending = [iter((value,))]
    while pending:
        item = next(pending[-1], _EXHAUSTED)
        if item is _EXHAUSTED:
            pending.pop()
            continue
        if isinstance(item, list):
            pending.append(iter(item))
            continue
        if isinstance(item, dict):
            container = next((key for key in CONTAINER_KEYS if key in item), None)
            if container is not None:
                pending.append(iter((item[container],)))
                continue

        classified = classify_value(item)
        if not isinstance(classified, Empty):
            yield classified
