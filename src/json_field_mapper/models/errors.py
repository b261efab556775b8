"""Exception types raised while mapping documents."""
from typing import Optional


class MappingError(Exception):
    """Base exception for all mapping failures."""


class MissingSource(MappingError, ValueError):
    """Source document was not supplied."""

    def __init__(self, message: str = "Source object cannot be None."):
        super().__init__(message)


class MissingRules(MappingError, ValueError):
    """Rule list text was absent or empty."""

    def __init__(self, message: str = "Map cannot be None or an empty string."):
        super().__init__(message)


class MalformedInput(MappingError):
    """Rule list text could not be read as an array of rule objects."""


class InvalidRule(MappingError):
    """A rule object is missing its required From reference."""

    def __init__(self, message: str, index: Optional[int] = None):
        self.index = index
        if index is not None:
            message = f"Rule {index}: {message}"
        super().__init__(message)


class InvalidQueryPath(MalformedInput):
    """A query path reference has invalid syntax."""

    def __init__(self, path: str, position: int, reason: str):
        self.path = path
        self.position = position
        self.reason = reason
        super().__init__(f"Invalid query path {path!r} at position {position}: {reason}")


class UnknownTransformation(MappingError, LookupError):
    """Requested transformation is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown transformation: {name}")


class TransformationFailed(MappingError):
    """A registered transformation rejected its input."""

    def __init__(self, name: str, cause: BaseException):
        self.name = name
        self.cause = cause
        super().__init__(f"Transformation '{name}' failed: {cause}")
