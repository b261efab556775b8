"""Built-in value transformations.

Each transform accepts a JSON value and returns a new one. Unsupported
input kinds raise TypeError, unparseable text raises ValueError.
"""
from types import MappingProxyType
from typing import Any, Callable, Dict, List

from json_field_mapper.models.values import ValueKind, kind_of

TRUE_STRINGS = {"true", "yes", "y", "1"}
FALSE_STRINGS = {"false", "no", "n", "0"}
LIST_SEPARATOR = ","


def _reject(name: str, value: Any, expected: str) -> TypeError:
    return TypeError(f"{name} expects {expected}, got {kind_of(value).value}")


def _string_transform(name: str, func: Callable[[str], str]) -> Callable[[Any], Any]:
    def transform(value: Any) -> Any:
        if kind_of(value) is not ValueKind.STRING:
            raise _reject(name, value, "a string")
        return func(value)

    transform.__name__ = name
    return transform


def _capitalize(text: str) -> str:
    """Uppercase the first character only, leaving the rest as is."""
    return text[:1].upper() + text[1:]


def to_string(value: Any) -> str:
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return ""
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.NUMBER:
        # 3.0 -> "3"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
    if kind is ValueKind.STRING:
        return value
    raise _reject("to_string", value, "a primitive value")


def to_int(value: Any) -> int:
    kind = kind_of(value)
    if kind is ValueKind.NUMBER:
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"to_int cannot convert non-integral number {value}")
        return int(value)
    if kind is ValueKind.STRING:
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            number = float(text)
            if not number.is_integer():
                raise ValueError(f"to_int cannot convert {value!r}")
            return int(number)
    raise _reject("to_int", value, "a number or numeric string")


def to_float(value: Any) -> float:
    kind = kind_of(value)
    if kind is ValueKind.NUMBER:
        return float(value)
    if kind is ValueKind.STRING:
        return float(value.strip())
    raise _reject("to_float", value, "a number or numeric string")


def to_bool(value: Any) -> bool:
    kind = kind_of(value)
    if kind is ValueKind.BOOLEAN:
        return value
    if kind is ValueKind.NUMBER:
        return value != 0
    if kind is ValueKind.STRING:
        text = value.strip().lower()
        if text in TRUE_STRINGS:
            return True
        if text in FALSE_STRINGS:
            return False
        raise ValueError(f"to_bool cannot interpret {value!r}")
    raise _reject("to_bool", value, "a boolean, number or string")


def to_array(value: Any) -> List[Any]:
    if kind_of(value) is ValueKind.SEQUENCE:
        return list(value)
    return [value]


def first(value: Any) -> Any:
    if kind_of(value) is not ValueKind.SEQUENCE:
        raise _reject("first", value, "a sequence")
    if not value:
        raise ValueError("first expects a non-empty sequence")
    return value[0]


def last(value: Any) -> Any:
    if kind_of(value) is not ValueKind.SEQUENCE:
        raise _reject("last", value, "a sequence")
    if not value:
        raise ValueError("last expects a non-empty sequence")
    return value[-1]


def join(value: Any) -> str:
    if kind_of(value) is not ValueKind.SEQUENCE:
        raise _reject("join", value, "a sequence")
    parts = []
    for item in value:
        if not kind_of(item).is_primitive:
            raise _reject("join", item, "primitive sequence items")
        parts.append(to_string(item))
    return LIST_SEPARATOR.join(parts)


def split(value: Any) -> List[str]:
    if kind_of(value) is not ValueKind.STRING:
        raise _reject("split", value, "a string")
    return [part.strip() for part in value.split(LIST_SEPARATOR) if part.strip()]


def null_if_empty(value: Any) -> Any:
    if kind_of(value) in (ValueKind.STRING, ValueKind.DOCUMENT, ValueKind.SEQUENCE) and not value:
        return None
    return value


_BUILTINS: Dict[str, Callable[[Any], Any]] = {
    "upper": _string_transform("upper", str.upper),
    "lower": _string_transform("lower", str.lower),
    "trim": _string_transform("trim", str.strip),
    "trim_start": _string_transform("trim_start", str.lstrip),
    "trim_end": _string_transform("trim_end", str.rstrip),
    "capitalize": _string_transform("capitalize", _capitalize),
    "title": _string_transform("title", str.title),
    "to_string": to_string,
    "to_int": to_int,
    "to_float": to_float,
    "to_bool": to_bool,
    "to_array": to_array,
    "first": first,
    "last": last,
    "join": join,
    "split": split,
    "null_if_empty": null_if_empty,
}

BUILTIN_TRANSFORMATIONS = MappingProxyType(_BUILTINS)
