"""Environment-driven mapping options."""
import os
from typing import Iterable, Optional

from dotenv import load_dotenv

from json_field_mapper.models.schemas import DEFAULT_TEXT_CONTENT_FIELD, CustomTransformation, MapOptions

TRUTHY = {"1", "true", "yes", "y"}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY


def options_from_env(
    unpack_text_content: Optional[bool] = None,
    text_content_field: Optional[str] = None,
    transformations: Optional[Iterable[CustomTransformation]] = None,
) -> MapOptions:
    """Build MapOptions from FIELD_MAPPER_* variables.

    Explicit arguments win over the environment.
    """
    load_dotenv()

    env_unpack = _env_flag("FIELD_MAPPER_UNPACK_TEXT_CONTENT")
    env_field = os.getenv("FIELD_MAPPER_TEXT_CONTENT_FIELD", "").strip()

    return MapOptions(
        transformations=list(transformations or []),
        unpack_text_content=env_unpack if unpack_text_content is None else unpack_text_content,
        text_content_field=text_content_field or env_field or DEFAULT_TEXT_CONTENT_FIELD,
    )
