"""Transformers package for named value transformations."""

from .builtins import BUILTIN_TRANSFORMATIONS
from .registry import TransformationRegistry

__all__ = ["BUILTIN_TRANSFORMATIONS", "TransformationRegistry"]
