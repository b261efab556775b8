"""Source reference resolution."""
from .path_resolver import resolve, resolve_first, resolve_rule
from .query_path import QueryPath, compile_query, select

__all__ = [
    "QueryPath",
    "compile_query",
    "resolve",
    "resolve_first",
    "resolve_rule",
    "select",
]
