"""Shared utilities and types."""

from contact_model.shared.types import (
    ResId,
    ColorInt,
    ContentValues,
    RowLike,
    NO_RESOURCE,
    UNBOUNDED,
)
from contact_model.shared.exceptions import (
    ContactModelError,
    ParseError,
    DefinitionError,
    ResourceNotFoundError,
    ConfigError,
    CollationError,
)

__all__ = [
    "ResId",
    "ColorInt",
    "ContentValues",
    "RowLike",
    "NO_RESOURCE",
    "UNBOUNDED",
    "ContactModelError",
    "ParseError",
    "DefinitionError",
    "ResourceNotFoundError",
    "ConfigError",
    "CollationError",
]
