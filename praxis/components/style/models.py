"""
Style component types.

Property maps are plain mappings so view code can write them as literals.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias

TOKEN_MARKER = "--"
"""Prefix that marks a value as a design-token reference (CSS custom property)."""

STYLE_KEY = "style"

# Literal CSS value, or a nested map for state variants such as ``hover``.
PropertyValue: TypeAlias = str | int | float | Mapping[str, Any]

PropertyMap: TypeAlias = Mapping[str, PropertyValue]

# Always exactly ``{"style": {...}}``.
ResolvedStyle: TypeAlias = dict[str, dict[str, PropertyValue]]
