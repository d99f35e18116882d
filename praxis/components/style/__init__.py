"""
Style component - design-token aware style resolution.
"""

from .component import is_token_reference, resolve, with_props, wrap_token
from .models import (
    STYLE_KEY,
    TOKEN_MARKER,
    PropertyMap,
    PropertyValue,
    ResolvedStyle,
)

__all__ = [
    # Entry points
    "resolve",
    "with_props",
    # Helpers
    "is_token_reference",
    "wrap_token",
    # Types
    "PropertyMap",
    "PropertyValue",
    "ResolvedStyle",
    "STYLE_KEY",
    "TOKEN_MARKER",
]
