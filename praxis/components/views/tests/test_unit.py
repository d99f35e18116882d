"""
Views component unit tests.

Tests for the landing page view functions and container keying.
"""

from __future__ import annotations

import dataclasses

import pytest

from praxis.components.style import resolve
from praxis.components.views import (
    ViewNode,
    about,
    app,
    button,
    container,
    divider,
    element,
    footer,
    nav_bar,
)

# --- ViewNode ---


class TestViewNode:
    """Test the render tree model."""

    def test_frozen(self) -> None:
        """Nodes cannot be modified in place."""
        node = element("p", "text")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.tag = "div"  # type: ignore[misc]

    def test_with_key_copies(self) -> None:
        """with_key leaves the original node unkeyed."""
        node = element("p", "text")
        keyed = node.with_key(3)

        assert keyed.key == 3
        assert node.key is None
        assert keyed.children == node.children

    def test_style_without_props(self) -> None:
        """Unstyled nodes report an empty style."""
        assert element("p").style == {}

    def test_props_read_only(self) -> None:
        """A built node's style cannot be changed through its props."""
        node = about({"color": "--red-12"})

        with pytest.raises(TypeError):
            node.props["style"]["color"] = "x"  # type: ignore[index]
        with pytest.raises(TypeError):
            node.props["extra"] = {}  # type: ignore[index]
        assert node.style == {"color": "var(--red-12)"}

    def test_nested_variant_read_only(self) -> None:
        """State-variant maps inside the style are frozen too."""
        node = button("Go")

        with pytest.raises(TypeError):
            node.props["style"]["hover"]["background"] = "x"  # type: ignore[index]

    def test_caller_map_copied(self) -> None:
        """Mutating the resolved dict afterwards does not reach the node."""
        resolved = resolve({"color": "red"})
        node = ViewNode(tag="p", props=resolved)
        resolved["style"]["color"] = "blue"

        assert node.style == {"color": "red"}

    def test_hashable(self) -> None:
        """Nodes with props can be hashed, equal trees hash alike."""
        assert hash(about()) == hash(about())
        assert hash(app()) == hash(app())
        assert len({container([element("p")]), container([element("p")])}) == 1


# --- Divider ---


class TestDivider:
    """Test the divider leaf."""

    def test_default_empty_style(self) -> None:
        """No props gives an empty style."""
        node = divider()
        assert node.tag == "hr"
        assert node.props == {"style": {}}
        assert node.children == ()

    def test_caller_props_are_whole_style(self) -> None:
        """Caller props replace the style entirely."""
        props = {"border-color": "--gray-3", "margin": "2rem 0"}
        assert divider(props).props == resolve(props)


# --- Chrome ---


class TestNavBar:
    """Test the navigation bar."""

    def test_fixed_style(self) -> None:
        """Nav bar resolves its tokens."""
        node = nav_bar()

        assert node.tag == "nav"
        assert node.style == {
            "background": "var(--gray-5)",
            "padding": "var(--size-3)",
            "box-shadow": "var(--shadow-1)",
            "position": "sticky",
            "top": "0",
            "z-index": "1000",
        }
        assert node.children == ("Nav",)


class TestFooter:
    """Test the footer."""

    def test_fixed_style(self) -> None:
        """Footer resolves its tokens and has no children."""
        node = footer()

        assert node.tag == "footer"
        assert node.style == {
            "background": "var(--gray-9)",
            "color": "var(--gray-1)",
            "padding": "var(--size-3)",
            "text-align": "center",
        }
        assert node.children == ()


class TestButton:
    """Test the call-to-action button."""

    def test_hover_variant_passed_through(self) -> None:
        """Hover map keeps its raw token."""
        node = button("Download")

        assert node.style["background"] == "var(--primary)"
        assert node.style["hover"] == {"background": "--primary-dark"}
        assert node.children == ("Download",)


# --- Container ---


class TestContainer:
    """Test positional keying of the main content region."""

    def test_keys_follow_input_order(self) -> None:
        """Children get keys 0..N-1 in order."""
        children = [element("h1", "a"), element("p", "b"), element("p", "c")]
        node = container(children)

        assert node.tag == "main"
        assert [child.key for child in node.children] == [0, 1, 2]  # type: ignore[union-attr]
        assert [child.children for child in node.children] == [  # type: ignore[union-attr]
            ("a",),
            ("b",),
            ("c",),
        ]

    def test_same_shape_siblings_distinguished(self) -> None:
        """Identical siblings differ only by key."""
        node = container([element("p", "x"), element("p", "x")])
        first, second = node.children

        assert isinstance(first, ViewNode) and isinstance(second, ViewNode)
        assert first.key == 0
        assert second.key == 1
        assert first != second

    def test_deterministic_across_calls(self) -> None:
        """Same input yields identical keys every time."""
        children = [element("p", "one"), element("p", "two")]
        container([element("div"), element("div"), element("div")])

        assert container(children) == container(children)
        assert [c.key for c in container(children).children] == [0, 1]  # type: ignore[union-attr]

    def test_existing_keys_replaced(self) -> None:
        """Incoming keys are overwritten by position."""
        node = container([element("p").with_key(7), element("p").with_key(7)])
        assert [c.key for c in node.children] == [0, 1]  # type: ignore[union-attr]

    def test_empty(self) -> None:
        """No children, no keys."""
        assert container([]).children == ()

    def test_input_untouched(self) -> None:
        """Caller's nodes keep their own (absent) keys."""
        children = [element("p")]
        container(children)
        assert children[0].key is None

    def test_style(self) -> None:
        """Container has its fixed layout style."""
        assert container([]).style == {
            "max-width": "800px",
            "margin": "0 auto",
            "padding": "var(--size-3)",
        }


# --- About ---


class TestAbout:
    """Test the about section."""

    def test_style_equals_resolved_caller_props(self) -> None:
        """Caller props are the whole style, no defaults merged."""
        props = {"color": "--red-12", "padding": "1rem"}
        assert about(props).props == resolve(props)

    def test_no_props(self) -> None:
        """Omitted props give an empty style."""
        assert about().props == {"style": {}}

    def test_content(self) -> None:
        """Section has its heading, divider and copy."""
        node = about()

        assert node.tag == "section"
        assert node.element_id == "about"
        tags = [c.tag for c in node.children]  # type: ignore[union-attr]
        assert tags == ["h1", "hr", "del", "p"]
        assert node.children[0].children == ("About Praxis",)  # type: ignore[union-attr]


# --- App ---


class TestApp:
    """Test the page root."""

    def test_composition_order(self) -> None:
        """Nav, main, footer in that order."""
        root = app()

        assert root.tag == "div"
        assert root.class_name == "main-container"
        assert [c.tag for c in root.children] == ["nav", "main", "footer"]  # type: ignore[union-attr]

    def test_main_content_keyed(self) -> None:
        """Content sections are keyed by position."""
        main = app().children[1]
        assert isinstance(main, ViewNode)

        assert [(c.tag, c.key) for c in main.children] == [  # type: ignore[union-attr]
            ("section", 0),
            ("h1", 1),
            ("p", 2),
        ]

    def test_about_colour_token(self) -> None:
        """About section carries the red token."""
        main = app().children[1]
        section = main.children[0]  # type: ignore[union-attr]
        assert section.style == {"color": "var(--red-12)"}  # type: ignore[union-attr]

    def test_rebuild_is_equal(self) -> None:
        """Building the tree twice gives equal trees."""
        assert app() == app()
