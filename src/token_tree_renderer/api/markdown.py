"""Markdown convenience API on top of markdown-it-py.

Level 1 entry points for the common case: parse markdown text with a
``MarkdownIt`` instance and render the resulting token stream with a
:class:`~token_tree_renderer.rendering.Renderer`.

Examples:
    >>> from token_tree_renderer import render_markdown_html
    >>> render_markdown_html("*hi*")
    '<p><em data-markup="*">hi</em></p>'
"""

from typing import Any, Dict, List, Optional

from markdown_it import MarkdownIt

from ..rendering import Renderer, RenderResult
from ..tokens.model import Token, as_tokens

DEFAULT_PRESET = "commonmark"
# Raw HTML would produce html_block/html_inline tokens, which have no tag
DEFAULT_OPTIONS: Dict[str, Any] = {"html": False}


def create_markdown_parser(
    preset: str = DEFAULT_PRESET, options: Optional[Dict[str, Any]] = None
) -> MarkdownIt:
    """Create a ``MarkdownIt`` instance with renderer-friendly defaults."""
    merged = dict(DEFAULT_OPTIONS)
    if options:
        merged.update(options)
    return MarkdownIt(preset, merged)


def parse_markdown(text: str, md: Optional[MarkdownIt] = None) -> List[Token]:
    """Tokenize ``text`` into renderer tokens."""
    markdown_it = md if md is not None else create_markdown_parser()
    return as_tokens(markdown_it.parse(text))


def _renderer(renderer: Optional[Renderer], options: Dict[str, Any]) -> Renderer:
    if renderer is not None:
        if options:
            raise TypeError("Pass either a renderer or renderer options, not both")
        return renderer
    return Renderer(**options)


def render_markdown(
    text: str,
    md: Optional[MarkdownIt] = None,
    renderer: Optional[Renderer] = None,
    **renderer_options: Any,
) -> List[Any]:
    """Render markdown text into a list of top-level nodes.

    Args:
        text: Markdown source
        md: MarkdownIt instance to use, e.g. with custom plugins
        renderer: Renderer to use; built from ``renderer_options`` if omitted
        **renderer_options: Keyword arguments for :class:`Renderer`
    """
    return _renderer(renderer, renderer_options).render(parse_markdown(text, md))


def render_markdown_html(
    text: str,
    md: Optional[MarkdownIt] = None,
    renderer: Optional[Renderer] = None,
    **renderer_options: Any,
) -> str:
    """Render markdown text and serialize it to HTML."""
    return _renderer(renderer, renderer_options).render_html(parse_markdown(text, md))


def render_markdown_result(
    text: str,
    md: Optional[MarkdownIt] = None,
    renderer: Optional[Renderer] = None,
    **renderer_options: Any,
) -> RenderResult:
    """Render markdown text without raising on rendering errors."""
    return _renderer(renderer, renderer_options).render_result(parse_markdown(text, md))
