"""
HTML render host - server-side rendering of the view tree.

Implements the bootstrap component's RenderHostPort and DocumentPort over a
plain HTML document shell with an empty ``<div id="...">`` mount element.

Key behaviors:
- Text children are HTML-escaped
- Scalar style values become an inline ``style`` attribute
- State-variant maps (``hover`` etc.) have no inline form and are dropped
- Container keys are emitted as ``data-key`` attributes
"""

from __future__ import annotations

import html
import logging
import re
from collections.abc import Mapping
from typing import Any

from praxis.components.bootstrap import MountTarget, MountTargetNotFoundError
from praxis.components.views import ViewNode
from praxis.site.models import SiteConfig

logger = logging.getLogger(__name__)

VOID_TAGS = frozenset(["area", "base", "br", "col", "hr", "img", "input", "link", "meta"])

# --- Serialization ---


def render_style(style: Mapping[str, Any]) -> str:
    """Render a resolved style mapping as an inline CSS declaration list."""
    parts: list[str] = []
    for prop, value in style.items():
        if isinstance(value, Mapping):
            logger.debug("Skipping state variant %r: no inline CSS form", prop)
            continue
        parts.append(f"{prop}: {value}")
    return "; ".join(parts)


def _render_attrs(node: ViewNode) -> str:
    attrs: list[tuple[str, str]] = []
    if node.element_id:
        attrs.append(("id", node.element_id))
    if node.class_name:
        attrs.append(("class", node.class_name))
    if node.key is not None:
        attrs.append(("data-key", str(node.key)))

    style = render_style(node.style)
    if style:
        attrs.append(("style", style))

    return "".join(f' {name}="{html.escape(value)}"' for name, value in attrs)


def render_node(node: ViewNode | str) -> str:
    """Serialize a view tree (or a text run) to HTML."""
    if isinstance(node, str):
        return html.escape(node, quote=False)

    attrs = _render_attrs(node)
    if node.tag in VOID_TAGS:
        return f"<{node.tag}{attrs} />"

    inner = "".join(render_node(child) for child in node.children)
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"


# --- Document ---


def _placeholder_pattern(element_id: str) -> re.Pattern[str]:
    return re.compile(rf'<div id="{re.escape(html.escape(element_id))}">\s*</div>')


class HtmlDocument:
    """
    HTML shell holding mount placeholders.

    ``mounted_html`` is None until a tree has been rendered into it.
    """

    def __init__(self, shell: str) -> None:
        self._shell = shell
        self.mounted_html: str | None = None

    def get_element_by_id(self, element_id: str) -> MountTarget | None:
        if _placeholder_pattern(element_id).search(self._shell):
            return MountTarget(element_id)
        return None

    def mount(self, target: MountTarget, markup: str) -> str:
        """Place markup inside the target element and return the full page."""
        pattern = _placeholder_pattern(target.element_id)
        if not pattern.search(self._shell):
            raise MountTargetNotFoundError(target.element_id)

        replacement = f'<div id="{html.escape(target.element_id)}">{markup}</div>'
        self.mounted_html = pattern.sub(lambda _: replacement, self._shell, count=1)
        return self.mounted_html


class HtmlRenderHost:
    """Render host that writes serialized HTML into an HtmlDocument."""

    def __init__(self, document: HtmlDocument) -> None:
        self.document = document

    def render(self, root: ViewNode, target: MountTarget) -> None:
        self.document.mount(target, render_node(root))


# --- Page Shell ---


def build_document_shell(config: SiteConfig) -> str:
    """
    Build the page shell with head metadata and an empty mount element.
    """
    site = config.site
    links = "\n    ".join(
        f'<link rel="stylesheet" href="{html.escape(href)}" />' for href in config.stylesheets
    )

    return f"""<!DOCTYPE html>
<html lang="{html.escape(site.lang)}">
<head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{html.escape(site.title)}</title>
    <meta name="description" content="{html.escape(site.description)}" />
    {links}
</head>
<body>
    <div id="{html.escape(config.mount.element_id)}"></div>
</body>
</html>"""
