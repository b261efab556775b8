"""Declarative JSON-to-JSON field mapping."""
from .models.errors import (
    InvalidQueryPath,
    InvalidRule,
    MalformedInput,
    MappingError,
    MissingRules,
    MissingSource,
    TransformationFailed,
    UnknownTransformation,
)
from .models.schemas import CustomTransformation, MapInput, MapOptions, MappingRule
from .pipeline.engine import FieldMapper, map_document, run
from .pipeline.settings import options_from_env
from .rules.parser import parse_rules
from .transformers.registry import TransformationRegistry

__version__ = "0.1.0"

__all__ = [
    "CustomTransformation",
    "FieldMapper",
    "InvalidQueryPath",
    "InvalidRule",
    "MalformedInput",
    "MapInput",
    "MapOptions",
    "MappingError",
    "MappingRule",
    "MissingRules",
    "MissingSource",
    "TransformationFailed",
    "TransformationRegistry",
    "UnknownTransformation",
    "map_document",
    "options_from_env",
    "parse_rules",
    "run",
]
