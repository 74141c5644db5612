"""Tests for the default output-node host."""

from typing import Any, Dict, List

import pytest

from token_tree_renderer.tree import (
    FRAGMENT,
    Element,
    HtmlNodeFactory,
    Keyed,
    count_nodes,
    node_to_dict,
    unwrap,
)


class TestElement:
    """Test Element construction and navigation."""

    def test_empty_tag_rejected(self) -> None:
        """Test that an empty tag raises ValueError."""
        with pytest.raises(ValueError, match="Element tag cannot be empty"):
            Element("")

    def test_value_equality(self) -> None:
        """Test that structurally equal elements compare equal."""
        assert Element("p", {"id": "a"}, ["x"]) == Element("p", {"id": "a"}, ["x"])
        assert Element("p") != Element("div")

    def test_fragment_flag(self) -> None:
        """Test fragment detection."""
        assert Element(FRAGMENT).is_fragment
        assert not Element("p").is_fragment
        assert repr(FRAGMENT) == "Fragment"

    def test_find_and_find_all_descend_through_wrappers(self) -> None:
        """Test searching below positional wrappers and fragments."""
        first = Element("em", children=[Keyed(0, "a")])
        second = Element("em", children=[Keyed(0, "b")])
        tree = Element("p", children=[
            Keyed(0, first),
            Keyed(1, Element(FRAGMENT, children=[Keyed(0, second)])),
        ])

        assert tree.find("em") is first
        assert tree.find_all("em") == [first, second]
        assert tree.find("strong") is None

    def test_to_dict(self) -> None:
        """Test dictionary conversion drops wrappers."""
        tree = Element("p", {"id": "x"}, [Keyed(0, Element(FRAGMENT, {}, [Keyed(0, "hi")]))])

        assert tree.to_dict() == {
            "tag": "p",
            "attributes": {"id": "x"},
            "children": [{"tag": "#fragment", "children": ["hi"]}],
        }

    def test_unwrap_and_count(self) -> None:
        """Test wrapper removal and element counting."""
        inner = Element("em")
        tree = [Keyed(0, Element("p", children=[Keyed(0, Keyed(1, inner)), Keyed(1, "t")]))]

        assert unwrap(Keyed(0, Keyed(1, inner))) is inner
        assert count_nodes(tree) == 2
        assert node_to_dict(tree) == [{"tag": "p", "children": [{"tag": "em"}, "t"]}]


class TestHtmlNodeFactory:
    """Test the host capabilities."""

    def test_construct_string_tag(self) -> None:
        """Test building an element from a tag name."""
        factory = HtmlNodeFactory()

        node = factory.construct_node("p", {"id": "a"}, ["x"])

        assert node == Element("p", {"id": "a"}, ["x"])

    def test_construct_without_attrs_or_children(self) -> None:
        """Test that None attributes and zero children are accepted."""
        node = HtmlNodeFactory().construct_node("hr", None, [])

        assert node == Element("hr", {}, [])

    def test_construct_fragment(self) -> None:
        """Test building a transparent element."""
        node = HtmlNodeFactory().construct_node(FRAGMENT, None, ["x"])

        assert node.is_fragment

    def test_construct_component(self) -> None:
        """Test that callables are invoked as components."""
        def link(attrs: Dict[str, Any], children: List[Any]) -> Any:
            return ("Link", attrs["href"], children)

        node = HtmlNodeFactory().construct_node(link, {"href": "/a"}, ["x"])

        assert node == ("Link", "/a", ["x"])

    def test_construct_rejects_unknown_type(self) -> None:
        """Test that unusable element types raise TypeError."""
        with pytest.raises(TypeError, match="Unsupported element type"):
            HtmlNodeFactory().construct_node(42, None, [])

    def test_wrap_ordered_keeps_equal_siblings(self) -> None:
        """Test that equal siblings get distinct positional keys."""
        wrapped = HtmlNodeFactory().wrap_ordered(["a", "a"])

        assert wrapped == [Keyed(0, "a"), Keyed(1, "a")]

    def test_serialize(self) -> None:
        """Test that serialize delegates to the HTML serializer."""
        html = HtmlNodeFactory().serialize([Keyed(0, Element("p", {}, ["x"]))])

        assert html == "<p>x</p>"
