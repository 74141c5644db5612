"""Public convenience API: markdown rendering and host adapters."""

from .adapters import LxmlAdapter, SoupAdapter
from .markdown import (
    create_markdown_parser,
    parse_markdown,
    render_markdown,
    render_markdown_html,
    render_markdown_result,
)

__all__ = [
    "LxmlAdapter",
    "SoupAdapter",
    "create_markdown_parser",
    "parse_markdown",
    "render_markdown",
    "render_markdown_html",
    "render_markdown_result",
]
