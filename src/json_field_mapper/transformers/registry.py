"""Named transformation registry.

Registries are plain objects, one per mapping run:
- seeded from the immutable BUILTIN_TRANSFORMATIONS table
- caller transforms registered afterwards replace built-ins by name
- no module-level mutable state
"""
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

import structlog

from json_field_mapper.models.errors import TransformationFailed, UnknownTransformation
from json_field_mapper.transformers.builtins import BUILTIN_TRANSFORMATIONS

logger = structlog.get_logger()

Transform = Callable[[Any], Any]


class TransformationRegistry:
    """Registry of named value transformations."""

    def __init__(self, transformations: Optional[Mapping[str, Transform]] = None):
        self._transforms: Dict[str, Transform] = {}
        for name, func in (transformations or {}).items():
            self.register(name, func)

    @classmethod
    def default(cls) -> "TransformationRegistry":
        """Create a registry holding the built-in transforms."""
        registry = cls()
        registry.register_builtins()
        return registry

    def register_builtins(self) -> None:
        """Register built-in transforms; safe to call more than once."""
        self._transforms.update(BUILTIN_TRANSFORMATIONS)

    def register(self, name: str, func: Transform) -> None:
        """Insert or replace the transform stored under name."""
        if not name:
            raise ValueError("Transformation name cannot be empty")
        if not callable(func):
            raise ValueError(f"Transformation '{name}' must be callable")
        if name in self._transforms:
            logger.debug("Overriding transformation", name=name)
        self._transforms[name] = func

    def with_overrides(self, overrides: Mapping[str, Transform]) -> "TransformationRegistry":
        """Return a new registry with overrides layered over this one."""
        registry = TransformationRegistry(self._transforms)
        for name, func in overrides.items():
            registry.register(name, func)
        return registry

    def get(self, name: str) -> Transform:
        try:
            return self._transforms[name]
        except KeyError:
            raise UnknownTransformation(name) from None

    def names(self) -> List[str]:
        return sorted(self._transforms)

    def __contains__(self, name: object) -> bool:
        return name in self._transforms

    def __len__(self) -> int:
        return len(self._transforms)

    def apply(self, name: str, value: Any) -> Any:
        """Apply a named transform to value.

        Raises:
            UnknownTransformation: if name is not registered
            TransformationFailed: if the transform raised
        """
        func = self.get(name)
        try:
            return func(value)
        except Exception as e:
            raise TransformationFailed(name, e) from e

    def apply_chain(self, names: Iterable[str], value: Any) -> Any:
        """Thread value through each named transform, left to right."""
        for name in names:
            value = self.apply(name, value)
        return value
