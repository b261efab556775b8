"""Mapping engine and run options."""
from .engine import FieldMapper, map_document, run
from .settings import options_from_env

__all__ = ["FieldMapper", "map_document", "options_from_env", "run"]
