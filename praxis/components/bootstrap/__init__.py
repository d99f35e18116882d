"""Bootstrap component for mounting the landing page.

Looks up the mount target once at startup and hands the composed page root
to the render host.
"""

from .component import init, mount_root
from .models import DEFAULT_MOUNT_ID, MountTarget, MountTargetNotFoundError
from .ports import DocumentPort, RenderHostPort

__all__ = [
    # Entry points
    "init",
    "mount_root",
    # Models
    "DEFAULT_MOUNT_ID",
    "MountTarget",
    "MountTargetNotFoundError",
    # Ports
    "DocumentPort",
    "RenderHostPort",
]
