"""Tests for the lxml and BeautifulSoup adapters."""

from token_tree_renderer import LxmlAdapter, SoupAdapter, render_markdown
from token_tree_renderer.tree import FRAGMENT, Element, Keyed


class TestLxmlAdapter:
    """Test conversion of rendered trees to lxml elements."""

    def test_text_and_tail(self) -> None:
        """Test that text nodes become text and tail."""
        root = LxmlAdapter().to_target(render_markdown("*x* y"))

        p = root[0]
        assert p.tag == "p"
        em = p[0]
        assert em.tag == "em"
        assert em.text == "x"
        assert em.tail == " y"
        assert em.get("data-markup") == "*"

    def test_to_html(self) -> None:
        """Test HTML serialization through lxml."""
        html = LxmlAdapter().to_html(render_markdown("*x* y"))

        assert html == '<div><p><em data-markup="*">x</em> y</p></div>'

    def test_root_tag(self) -> None:
        """Test a custom root element."""
        root = LxmlAdapter().to_target(render_markdown("a"), root_tag="article")

        assert root.tag == "article"
        assert root[0].text == "a"

    def test_attribute_conversion(self) -> None:
        """Test renamed and structured attributes."""
        tree = [
            Keyed(0, Element("span", {"class_": "x", "style": {"fontSize": "2em"}, "hidden": True, "skip": None})),
        ]

        span = LxmlAdapter().to_target(tree)[0]

        assert span.get("class") == "x"
        assert span.get("style") == "font-size: 2em"
        assert span.get("hidden") == ""
        assert span.get("skip") is None

    def test_fragments_are_flattened(self) -> None:
        """Test that fragments add no elements."""
        tree = [Element(FRAGMENT, {}, ["a", Element("b", {}, ["c"]), "d"])]

        root = LxmlAdapter().to_target(tree)

        assert root.text == "a"
        assert len(root) == 1
        assert root[0].text == "c"
        assert root[0].tail == "d"


class TestSoupAdapter:
    """Test conversion of rendered trees to BeautifulSoup."""

    def test_to_target(self) -> None:
        """Test that the soup mirrors the rendered HTML."""
        soup = SoupAdapter().to_target(render_markdown("*x* [y](/z)"))

        em = soup.find("em")
        assert em.get_text() == "x"
        assert em["data-markup"] == "*"
        assert soup.find("a")["href"] == "/z"
        assert soup.get_text() == "x y"

    def test_attributes_are_renamed(self) -> None:
        """Test that renamed attributes come back under their HTML names."""
        tree = [Element("p", {"class_": "lead", "style": {"marginTop": "0"}}, ["t"])]

        p = SoupAdapter().to_target(tree).find("p")

        assert p["class"] == ["lead"]
        assert p["style"] == "margin-top: 0"
