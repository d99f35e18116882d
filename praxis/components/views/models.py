"""
Views component data models.

Frozen dataclasses describing the render tree.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any


def _freeze(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    """Read-only copy of a mapping, nested maps included."""
    return MappingProxyType(
        {k: _freeze(v) if isinstance(v, Mapping) else v for k, v in mapping.items()}
    )


@dataclass(frozen=True)
class ViewNode:
    """
    Immutable description of one renderable element.

    ``props`` holds the resolved style object (``{"style": {...}}``) or None,
    stored read-only. ``children`` are nested nodes or text runs, in render
    order. ``key`` is the positional identity a parent container assigns so
    the render host can tell same-shaped siblings apart.
    """

    tag: str
    props: Mapping[str, Mapping[str, Any]] | None = field(default=None, hash=False)
    children: tuple[ViewNode | str, ...] = ()
    element_id: str | None = None
    class_name: str | None = None
    key: int | None = None

    def __post_init__(self) -> None:
        if self.props is not None:
            object.__setattr__(self, "props", _freeze(self.props))

    @property
    def style(self) -> dict[str, Any]:
        """Resolved style mapping, empty when the node has no props."""
        if self.props is None:
            return {}
        return dict(self.props.get("style", {}))

    def with_key(self, key: int) -> ViewNode:
        """Return a copy of this node carrying the given identity key."""
        return replace(self, key=key)
