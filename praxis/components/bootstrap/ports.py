"""Bootstrap component port definitions.

Protocol interfaces for the render host and its document.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from praxis.components.views import ViewNode

    from .models import MountTarget


class RenderHostPort(Protocol):
    """Turns a view tree into output at a mount target."""

    def render(self, root: ViewNode, target: MountTarget) -> None:
        """Render the tree into the target."""
        ...


class DocumentPort(Protocol):
    """Host document that owns mount targets."""

    def get_element_by_id(self, element_id: str) -> MountTarget | None:
        """Look up an element handle by id."""
        ...
