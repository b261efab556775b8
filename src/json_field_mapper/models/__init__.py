"""Value, schema and error models."""
from .errors import (
    InvalidQueryPath,
    InvalidRule,
    MalformedInput,
    MappingError,
    MissingRules,
    MissingSource,
    TransformationFailed,
    UnknownTransformation,
)
from .schemas import CustomTransformation, MapInput, MapOptions, MappingRule, RuleSpec
from .values import NOT_FOUND, ValueKind, kind_of

__all__ = [
    "MappingError",
    "MissingSource",
    "MissingRules",
    "InvalidRule",
    "MalformedInput",
    "InvalidQueryPath",
    "UnknownTransformation",
    "TransformationFailed",
    "CustomTransformation",
    "MapInput",
    "MapOptions",
    "MappingRule",
    "RuleSpec",
    "NOT_FOUND",
    "ValueKind",
    "kind_of",
]
