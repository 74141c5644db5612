"""Tests for HTML serialization."""

import pytest

from token_tree_renderer.tree import FRAGMENT, Element, Keyed, serialize_html, style_to_css


class TestSerializeHtml:
    """Test serialization of rendered trees."""

    def test_text_is_escaped(self) -> None:
        """Test escaping of text content."""
        assert serialize_html(Element("p", children=["a < b & c"])) == "<p>a &lt; b &amp; c</p>"

    def test_attribute_values_are_escaped(self) -> None:
        """Test quoting of attribute values."""
        node = Element("a", {"title": 'say "hi"'}, ["x"])

        assert serialize_html(node) == '<a title="say &quot;hi&quot;">x</a>'

    def test_void_elements(self) -> None:
        """Test that void elements have no closing tag."""
        assert serialize_html(Element("br", {"data-softbreak": ""})) == '<br data-softbreak="">'
        assert serialize_html(Element("img", {"src": "a.png", "alt": "x"}, ["ignored"])) == (
            '<img src="a.png" alt="x">'
        )

    def test_empty_non_void_element(self) -> None:
        """Test that other empty elements are closed explicitly."""
        assert serialize_html(Element("p")) == "<p></p>"

    def test_fragments_and_wrappers_are_transparent(self) -> None:
        """Test that fragments and keyed wrappers add no markup."""
        tree = [Keyed(0, Element(FRAGMENT, children=[Keyed(0, "a"), Keyed(1, Element("b", children=["c"]))]))]

        assert serialize_html(tree) == "a<b>c</b>"

    def test_reserved_and_structured_attributes(self) -> None:
        """Test class_ renaming and style mappings."""
        node = Element("div", {"class_": "note", "style": {"backgroundColor": "#fff"}})

        assert serialize_html(node) == '<div class="note" style="background-color: #fff"></div>'

    def test_boolean_and_missing_attributes(self) -> None:
        """Test True, False and None attribute values."""
        node = Element("input", {"checked": True, "disabled": False, "name": None})

        assert serialize_html(node) == "<input checked>"

    def test_unknown_node_type(self) -> None:
        """Test that unsupported nodes raise TypeError."""
        with pytest.raises(TypeError, match="Cannot serialize"):
            serialize_html(object())


class TestStyleToCss:
    """Test style mapping serialization."""

    def test_camel_case_to_kebab_case(self) -> None:
        """Test property name conversion."""
        assert style_to_css({"backgroundColor": "#fff", "color": "red"}) == (
            "background-color: #fff; color: red"
        )

    def test_custom_properties_and_empty_values(self) -> None:
        """Test custom properties are kept and empty values skipped."""
        assert style_to_css({"--gap": "4px", "margin": ""}) == "--gap: 4px"
