"""Bootstrap component data models.

Mount target handle and the startup failure raised when it is missing.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MOUNT_ID = "app"


@dataclass(frozen=True)
class MountTarget:
    """Handle to the host element the page root is rendered into."""

    element_id: str


class MountTargetNotFoundError(LookupError):
    """The host document has no element with the mount id."""

    def __init__(self, element_id: str) -> None:
        super().__init__(f"Mount target #{element_id} not found in host document")
        self.element_id = element_id
