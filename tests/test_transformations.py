"""Unit tests for the transformation registry and built-in transforms."""
from __future__ import annotations

import pytest

from json_field_mapper.models.errors import TransformationFailed, UnknownTransformation
from json_field_mapper.transformers.builtins import BUILTIN_TRANSFORMATIONS
from json_field_mapper.transformers.registry import TransformationRegistry


def test_default_registry_has_builtins(registry):
    assert set(registry.names()) == set(BUILTIN_TRANSFORMATIONS)
    assert "upper" in registry


def test_register_builtins_is_idempotent(registry):
    count = len(registry)
    registry.register_builtins()
    registry.register_builtins()
    assert len(registry) == count
    assert registry.apply("upper", "a") == "A"


def test_register_builtins_keeps_the_table_immutable():
    with pytest.raises(TypeError):
        BUILTIN_TRANSFORMATIONS["upper"] = str.lower


def test_register_adds_transform(registry):
    registry.register("reverse", lambda v: v[::-1])
    assert registry.apply("reverse", "abc") == "cba"


def test_later_registration_overrides(registry):
    registry.register("upper", lambda v: "overridden")
    assert registry.apply("upper", "a") == "overridden"


def test_with_overrides_leaves_base_untouched(registry):
    layered = registry.with_overrides({"upper": lambda v: "custom"})
    assert layered.apply("upper", "a") == "custom"
    assert registry.apply("upper", "a") == "A"


def test_fresh_registries_are_independent():
    first = TransformationRegistry.default()
    first.register("upper", lambda v: "changed")
    assert TransformationRegistry.default().apply("upper", "a") == "A"


@pytest.mark.parametrize("name,func", [("", str.upper), ("x", "not callable")])
def test_register_rejects_invalid_entries(registry, name, func):
    with pytest.raises(ValueError):
        registry.register(name, func)


def test_unknown_transformation(registry):
    with pytest.raises(UnknownTransformation) as exc_info:
        registry.apply("nope", "a")
    assert exc_info.value.name == "nope"


def test_failure_is_wrapped_with_cause(registry):
    with pytest.raises(TransformationFailed) as exc_info:
        registry.apply("upper", 5)
    assert exc_info.value.name == "upper"
    assert isinstance(exc_info.value.cause, TypeError)
    assert exc_info.value.__cause__ is exc_info.value.cause


def test_chain_applies_left_to_right(registry):
    registry.register("exclaim", lambda v: v + "!")
    registry.register("wrap", lambda v: f"[{v}]")
    assert registry.apply_chain(["exclaim", "wrap"], "a") == "[a!]"
    assert registry.apply_chain(["wrap", "exclaim"], "a") == "[a]!"


def test_upper_then_trim(registry):
    assert registry.apply_chain(["upper", "trim"], " ab ") == "AB"


@pytest.mark.parametrize(
    "name,value,expected",
    [
        ("upper", "abc", "ABC"),
        ("lower", "ABC", "abc"),
        ("trim", "  a b  ", "a b"),
        ("trim_start", "  a ", "a "),
        ("trim_end", "  a ", "  a"),
        ("capitalize", "hello World", "Hello World"),
        ("capitalize", "", ""),
        ("title", "hello world", "Hello World"),
        ("to_string", None, ""),
        ("to_string", True, "true"),
        ("to_string", 3.0, "3"),
        ("to_string", 2.5, "2.5"),
        ("to_string", 7, "7"),
        ("to_int", "42", 42),
        ("to_int", " 4.0 ", 4),
        ("to_int", 9.0, 9),
        ("to_float", "2.5", 2.5),
        ("to_float", 3, 3.0),
        ("to_bool", "Yes", True),
        ("to_bool", "0", False),
        ("to_bool", 0, False),
        ("to_bool", False, False),
        ("to_array", "a", ["a"]),
        ("to_array", ["a"], ["a"]),
        ("to_array", None, [None]),
        ("first", [1, 2], 1),
        ("last", [1, 2], 2),
        ("join", ["a", 1, True], "a,1,true"),
        ("split", "a, b,,c", ["a", "b", "c"]),
        ("null_if_empty", "", None),
        ("null_if_empty", [], None),
        ("null_if_empty", {}, None),
        ("null_if_empty", 0, 0),
        ("null_if_empty", "x", "x"),
    ],
)
def test_builtin_results(registry, name, value, expected):
    assert registry.apply(name, value) == expected


@pytest.mark.parametrize(
    "name,value",
    [
        ("upper", 1),
        ("trim", None),
        ("lower", ["a"]),
        ("to_string", {"a": 1}),
        ("to_string", [1]),
        ("to_int", "abc"),
        ("to_int", 2.5),
        ("to_int", True),
        ("to_float", None),
        ("to_bool", "maybe"),
        ("to_bool", []),
        ("first", []),
        ("first", "abc"),
        ("last", {"a": 1}),
        ("join", "abc"),
        ("join", [{"a": 1}]),
        ("split", 5),
    ],
)
def test_builtins_reject_unsupported_input(registry, name, value):
    with pytest.raises(TransformationFailed) as exc_info:
        registry.apply(name, value)
    assert isinstance(exc_info.value.cause, (TypeError, ValueError))
