"""Rule list parsing and modifier decoding."""
import json
from typing import Any, Dict, List

import structlog
from pydantic import ValidationError

from json_field_mapper.models.errors import InvalidRule, MalformedInput
from json_field_mapper.models.schemas import MappingRule, RuleSpec
from json_field_mapper.resolvers.query_path import compile_query

logger = structlog.get_logger()

QUERY_PATH_PREFIX = "?"
KEEP_EXISTING_SUFFIX = "!"
CANDIDATE_SEPARATOR = ","

# Rule keys are matched case-insensitively and normalized to these aliases
RULE_KEYS = {
    "from": "From",
    "to": "To",
    "default": "Default",
    "transformations": "Transformations",
}


def parse_rules(text: str) -> List[MappingRule]:
    """Parse a JSON array of rule objects.

    Args:
        text: JSON text of the rule list

    Returns:
        Parsed rules in array order

    Raises:
        MalformedInput: if the text is not an array of rule objects
        InvalidRule: if any rule lacks a From reference
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise MalformedInput(f"Rule list is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise MalformedInput(
            f"Rule list must be a JSON array, got {type(data).__name__}"
        )

    rules = [parse_rule(item, index) for index, item in enumerate(data)]
    logger.debug("Parsed mapping rules", count=len(rules))
    return rules


def parse_rule(obj: Any, index: int = 0) -> MappingRule:
    """Parse one decoded rule object into a MappingRule."""
    if not isinstance(obj, dict):
        raise MalformedInput(
            f"Rule {index} must be a JSON object, got {type(obj).__name__}"
        )

    try:
        spec = RuleSpec.model_validate(_normalize_keys(obj))
    except ValidationError as e:
        raise MalformedInput(f"Rule {index} is malformed: {e}") from e

    if not spec.source:
        raise InvalidRule("From cannot be missing or empty", index=index)

    source_text = spec.source
    destination = spec.destination or source_text

    keep_existing_value = destination.endswith(KEEP_EXISTING_SUFFIX)
    if keep_existing_value:
        destination = destination[: -len(KEEP_EXISTING_SUFFIX)]

    reference = source_text
    use_query_path = reference.startswith(QUERY_PATH_PREFIX)
    if use_query_path:
        reference = reference[len(QUERY_PATH_PREFIX):]

    sources = split_candidates(reference)
    if use_query_path:
        # syntax errors surface before any rule writes
        for candidate in sources:
            compile_query(candidate)

    return MappingRule(
        source_text=source_text,
        sources=sources,
        destination=destination,
        use_query_path=use_query_path,
        keep_existing_value=keep_existing_value,
        default=spec.default,
        default_present=spec.default_present,
        transformations=tuple(spec.transformations or ()),
    )


def split_candidates(reference: str) -> tuple:
    """Split a From reference into fallback candidates.

    A reference without a separator is kept verbatim. Otherwise each
    candidate is trimmed and empty candidates are dropped.
    """
    if CANDIDATE_SEPARATOR not in reference:
        return (reference,)
    return tuple(
        part.strip()
        for part in reference.split(CANDIDATE_SEPARATOR)
        if part.strip()
    )


def _normalize_keys(obj: Dict[str, Any]) -> Dict[str, Any]:
    normalized: Dict[str, Any] = {}
    for key, value in obj.items():
        alias = RULE_KEYS.get(str(key).lower())
        if alias is not None:
            normalized[alias] = value
    return normalized
