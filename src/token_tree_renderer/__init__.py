"""Token Tree Renderer.

A stack-based renderer turning a flat stream of markup tokens (as produced by
markdown-it-py) into a nested tree of output nodes, with developer control
over element types, render rules per tag and token handler rules per token
type.

Progressive API Disclosure:
- Level 1: Markdown helpers - render_markdown(), render_markdown_html()
- Level 2: Configured renderer - Renderer class with rule tables
- Level 3: Token handler rules with direct access to the RenderingContext
"""

__version__ = "0.1.0"
__author__ = "Token Tree Renderer Team"

from .api import (
    LxmlAdapter,
    SoupAdapter,
    render_markdown,
    render_markdown_html,
    render_markdown_result,
)
from .rendering import (
    ImbalancedTagsError,
    Renderer,
    RendererError,
    RenderingContext,
    RenderResult,
    UnknownElementTypeError,
)
from .shared.config import RendererConfig
from .tokens import NOTHING, Nesting, Token
from .tree import FRAGMENT, Element, HtmlNodeFactory, Keyed, get_text_content

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Markdown helpers
    "render_markdown",
    "render_markdown_html",
    "render_markdown_result",

    # Level 2/3: Renderer and its context
    "Renderer",
    "RenderingContext",
    "RenderResult",
    "RendererConfig",

    # Errors
    "RendererError",
    "ImbalancedTagsError",
    "UnknownElementTypeError",

    # Tokens and output nodes
    "NOTHING",
    "Nesting",
    "Token",
    "FRAGMENT",
    "Element",
    "HtmlNodeFactory",
    "Keyed",
    "get_text_content",
    "LxmlAdapter",
    "SoupAdapter",
]
