"""
Style component - property map to style object resolution.

Converts a semantic property map into the ``{"style": ...}`` object handed to
the render host. Values written as design tokens (``"--gray-5"``) are wrapped
as ``var(--gray-5)`` so Open Props style custom properties apply directly.

Key behaviors:
- Only direct string values are inspected; nested maps pass through untouched
- Omitted input resolves to ``{"style": {}}``
- Pure function: same inputs always produce same outputs, input never mutated
"""

from __future__ import annotations

from typing import Any

from .models import STYLE_KEY, TOKEN_MARKER, PropertyMap, PropertyValue, ResolvedStyle


def is_token_reference(value: Any) -> bool:
    """Check if a value is a design-token reference (``--name``)."""
    return isinstance(value, str) and value.startswith(TOKEN_MARKER)


def wrap_token(value: PropertyValue) -> PropertyValue:
    """Wrap a token reference in ``var()``; return any other value unchanged."""
    if is_token_reference(value):
        return f"var({value})"
    return value


def with_props(props: PropertyMap) -> ResolvedStyle:
    """
    Transform a property map into a style object.

    Args:
        props: CSS property/value pairs, e.g.
            ``{"background": "--primary", "color": "red", "margin": "10px"}``

    Returns:
        ``{"style": {...}}`` with token references wrapped, e.g.
        ``{"style": {"background": "var(--primary)", "color": "red", "margin": "10px"}}``
    """
    return {STYLE_KEY: {key: wrap_token(value) for key, value in props.items()}}


def resolve(props: PropertyMap | None = None) -> ResolvedStyle:
    """Shorthand for ``with_props`` where the property map is optional."""
    return with_props(props or {})
