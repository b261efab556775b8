"""JSON value kinds and the not-found marker."""
from enum import Enum
from typing import Any, Dict

Document = Dict[str, Any]


class ValueKind(Enum):
    """Enum for JSON value kinds."""
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    DOCUMENT = "document"
    SEQUENCE = "sequence"

    @property
    def is_primitive(self) -> bool:
        return self not in (ValueKind.DOCUMENT, ValueKind.SEQUENCE)


class _NotFound:
    """Marker for a reference that matched nothing in the source."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = _NotFound()


def kind_of(value: Any) -> ValueKind:
    """Classify a decoded JSON value.

    Args:
        value: Any value produced by ``json.loads`` or built from the same types

    Returns:
        ValueKind of the value

    Raises:
        TypeError: if the value is not a JSON value
    """
    if value is None:
        return ValueKind.NULL
    # bool is an int subclass, check it first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, dict):
        return ValueKind.DOCUMENT
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def has_field(document: Document, name: str) -> bool:
    """Check whether a document has a field matching name case-insensitively."""
    wanted = name.casefold()
    return any(key.casefold() == wanted for key in document)
