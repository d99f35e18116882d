"""Bootstrap component implementation.

Mounts the page root into the render host. The host and the mount handle are
passed in, so the view code never touches a global document.
"""

from __future__ import annotations

import logging

from praxis.components.views import ViewNode, app

from .models import DEFAULT_MOUNT_ID, MountTarget, MountTargetNotFoundError
from .ports import DocumentPort, RenderHostPort

logger = logging.getLogger(__name__)


def mount_root(
    host: RenderHostPort,
    target: MountTarget,
    root: ViewNode | None = None,
) -> ViewNode:
    """Render the page root into the target exactly once.

    Args:
        host: Render host that receives the tree.
        target: Mount handle, already looked up.
        root: Tree to render. Defaults to a freshly composed ``app()``.

    Returns:
        The tree that was handed to the host.
    """
    tree = root if root is not None else app()
    host.render(tree, target)
    return tree


def init(
    host: RenderHostPort,
    document: DocumentPort,
    mount_id: str = DEFAULT_MOUNT_ID,
) -> ViewNode:
    """Startup entry point: find the mount element and mount the page.

    Raises:
        MountTargetNotFoundError: If the document has no element ``mount_id``.
    """
    target = document.get_element_by_id(mount_id)
    if target is None:
        raise MountTargetNotFoundError(mount_id)

    tree = mount_root(host, target)
    logger.info("Mounted page root at #%s", target.element_id)
    return tree
