"""Resolve rule source references against a source document."""
from typing import Any, Iterable

from json_field_mapper.models.schemas import MappingRule
from json_field_mapper.models.values import NOT_FOUND, Document
from json_field_mapper.resolvers.query_path import select


def resolve(document: Document, reference: str, use_query_path: bool = False) -> Any:
    """Resolve a single reference.

    Args:
        document: Source document
        reference: Field name, or query path when use_query_path is set
        use_query_path: Interpret reference as a query path

    Returns:
        The stored value (possibly None for a JSON null) or NOT_FOUND
    """
    if use_query_path:
        return select(document, reference)
    if isinstance(document, dict) and reference in document:
        return document[reference]
    return NOT_FOUND


def resolve_first(document: Document, references: Iterable[str], use_query_path: bool = False) -> Any:
    """Return the value of the first reference that resolves, or NOT_FOUND."""
    for reference in references:
        value = resolve(document, reference, use_query_path)
        if value is not NOT_FOUND:
            return value
    return NOT_FOUND


def resolve_rule(document: Document, rule: MappingRule) -> Any:
    return resolve_first(document, rule.sources, rule.use_query_path)
