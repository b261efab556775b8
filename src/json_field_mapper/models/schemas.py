"""Pydantic models for mapping rules and options."""
import importlib
from typing import Any, Callable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TEXT_CONTENT_FIELD = "#cdata-section"


class RuleSpec(BaseModel):
    """One raw rule object as written in the rule list."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    source: Optional[str] = Field(None, alias="From")
    destination: Optional[str] = Field(None, alias="To")
    default: Any = Field(None, alias="Default")
    transformations: Optional[List[str]] = Field(None, alias="Transformations")

    @property
    def default_present(self) -> bool:
        """True when the rule object carried a Default key, even a null one."""
        return "default" in self.model_fields_set


class MappingRule(BaseModel):
    """A parsed rule with its modifiers already decoded."""

    model_config = ConfigDict(frozen=True)

    source_text: str
    sources: Tuple[str, ...]
    destination: str
    use_query_path: bool = False
    keep_existing_value: bool = False
    default: Any = None
    default_present: bool = False
    transformations: Tuple[str, ...] = ()


class CustomTransformation(BaseModel):
    """Caller-supplied named transform.

    ``function`` may be a callable or an import reference of the form
    ``"package.module:attribute"``.
    """

    name: str = Field(..., min_length=1)
    function: Callable[[Any], Any]

    @field_validator("function", mode="before")
    @classmethod
    def resolve_reference(cls, v):
        """Import the callable when given as a ``module:attribute`` string."""
        if not isinstance(v, str):
            return v
        module_name, sep, attribute = v.partition(":")
        if not sep or not module_name or not attribute:
            raise ValueError(f"Expected 'module:attribute' reference, got {v!r}")
        module = importlib.import_module(module_name)
        target = module
        for part in attribute.split("."):
            target = getattr(target, part)
        return target


class MapOptions(BaseModel):
    """Optional parameters for a mapping run."""

    transformations: List[CustomTransformation] = Field(default_factory=list)
    unpack_text_content: bool = False
    text_content_field: str = Field(DEFAULT_TEXT_CONTENT_FIELD, min_length=1)


class MapInput(BaseModel):
    """Required parameters for a mapping run.

    Documents are typed as ``Any`` so they pass through validation by
    identity and the destination can be mutated in place.
    """

    source_object: Any = None
    destination_object: Any = None
    map: Optional[str] = None
