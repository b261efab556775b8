"""Unit tests for source reference resolution."""
from __future__ import annotations

import copy

import pytest

from json_field_mapper.models.values import NOT_FOUND
from json_field_mapper.resolvers.path_resolver import resolve, resolve_first, resolve_rule
from json_field_mapper.rules.parser import parse_rule


def test_direct_lookup(source_document):
    assert resolve(source_document, "Name") == "Ada Lovelace"


def test_direct_lookup_is_case_sensitive(source_document):
    assert resolve(source_document, "name") is NOT_FOUND


def test_direct_lookup_does_not_interpret_paths(source_document):
    assert resolve(source_document, "Address.City") is NOT_FOUND
    assert resolve({"Address.City": "x"}, "Address.City") == "x"


def test_direct_lookup_finds_null():
    assert resolve({"a": None}, "a") is None


def test_query_lookup(source_document):
    assert resolve(source_document, "$.Address.City", use_query_path=True) == "London"


def test_first_candidate_wins(source_document):
    assert resolve_first(source_document, ["Missing", "Email", "Name"]) == "ada@example.org"


def test_fallback_skips_to_later_candidate():
    assert resolve_first({"b": 2, "c": 3}, ["a", "b", "c"]) == 2


def test_null_candidate_counts_as_resolved():
    assert resolve_first({"a": None, "b": 2}, ["a", "b"]) is None


def test_no_candidate_resolves(source_document):
    assert resolve_first(source_document, ["x", "y"]) is NOT_FOUND
    assert resolve_first(source_document, []) is NOT_FOUND


@pytest.mark.parametrize(
    "rule,expected",
    [
        ({"From": "Name"}, "Ada Lovelace"),
        ({"From": "Nickname, Name"}, "Ada Lovelace"),
        ({"From": "?$.items[0].id"}, "A-1"),
        ({"From": "?$.missing, $.Address.City"}, "London"),
    ],
)
def test_resolve_rule(source_document, rule, expected):
    assert resolve_rule(source_document, parse_rule(rule)) == expected


def test_resolution_does_not_mutate_source(source_document):
    before = copy.deepcopy(source_document)
    resolve_rule(source_document, parse_rule({"From": "?$..id"}))
    assert source_document == before
