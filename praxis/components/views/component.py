"""
Views component - landing page composition.

Stateless view functions. Each builds its default property map, resolves it
through the style component and returns a ``ViewNode``.

Key behaviors:
- ``container`` keys its children by position (0..N-1) on every call
- ``divider`` and ``about`` take the caller's map as their whole style
- ``app`` composes nav bar, container and footer in that order
"""

from __future__ import annotations

from collections.abc import Sequence

from praxis.components.style import PropertyMap, resolve

from .models import ViewNode

# --- Primitives ---


def element(
    tag: str,
    *children: ViewNode | str,
    props: PropertyMap | None = None,
    element_id: str | None = None,
    class_name: str | None = None,
) -> ViewNode:
    """Build a node for literal markup. Unstyled unless ``props`` is given."""
    return ViewNode(
        tag=tag,
        props=resolve(props) if props is not None else None,
        children=children,
        element_id=element_id,
        class_name=class_name,
    )


def divider(props: PropertyMap | None = None) -> ViewNode:
    """Horizontal rule. Caller props are the entire style."""
    return ViewNode(tag="hr", props=resolve(props))


# --- Page Chrome ---


def nav_bar() -> ViewNode:
    """Sticky top navigation bar."""
    return ViewNode(
        tag="nav",
        props=resolve(
            {
                "background": "--gray-5",
                "padding": "--size-3",
                "box-shadow": "--shadow-1",
                "position": "sticky",
                "top": "0",
                "z-index": "1000",
            }
        ),
        children=("Nav",),
    )


def footer() -> ViewNode:
    """Page footer."""
    return ViewNode(
        tag="footer",
        props=resolve(
            {
                "background": "--gray-9",
                "color": "--gray-1",
                "padding": "--size-3",
                "text-align": "center",
            }
        ),
    )


def button(*children: ViewNode | str) -> ViewNode:
    """Primary call-to-action button. ``hover`` is a state variant map."""
    return ViewNode(
        tag="button",
        props=resolve(
            {
                "background": "--primary",
                "color": "--gray-1",
                "padding": "--size-3",
                "border-radius": "--radius-2",
                "cursor": "pointer",
                "transition": "background 0.3s ease",
                "hover": {"background": "--primary-dark"},
            }
        ),
        children=children,
    )


def container(children: Sequence[ViewNode]) -> ViewNode:
    """
    Main content region.

    Every child is re-keyed with its zero-based position in ``children``.
    Keys come from the index alone, so the same sequence always gets the
    same keys.
    """
    return ViewNode(
        tag="main",
        props=resolve(
            {
                "max-width": "800px",
                "margin": "0 auto",
                "padding": "--size-3",
            }
        ),
        children=tuple(child.with_key(idx) for idx, child in enumerate(children)),
    )


# --- Sections ---


def about(props: PropertyMap | None = None) -> ViewNode:
    """About the project, hardcoded."""
    return ViewNode(
        tag="section",
        element_id="about",
        props=resolve(props),
        children=(
            element("h1", "About Praxis"),
            divider(),
            element("del", "Honestly... I dont really know myself, but:"),
            element(
                "p",
                "It's a prayer app for",
                element("b", " Orthodox Christians"),
                "! Helps you with fasting days and keeps you updated ",
                "on the Church's calendar.",
            ),
        ),
    )


# --- Page Root ---


def app() -> ViewNode:
    """Landing page root."""
    return element(
        "div",
        nav_bar(),
        container(
            [
                about({"color": "--red-12"}),
                element("h1", "Funny"),
                element("p", "Content"),
            ]
        ),
        footer(),
        class_name="main-container",
    )
