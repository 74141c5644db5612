"""Rendering engine: token stream to output tree.

Key Components:
    Renderer: Drives the single pass over the token stream
    RenderingContext: Stack of open frames for one render call
    ElementTypeResolver: Token to element type mapping
    AttributeProjector: Token attributes to attribute mapping
    RuleRegistry: Validated rule tables
    RenderResult: Never-raising render outcome
"""

from .attributes import AttributeProjector, camel_case, parse_style
from .context import RenderingContext, StackFrame
from .errors import ImbalancedTagsError, RendererError, UnknownElementTypeError
from .renderer import Renderer
from .resolver import ElementTypeResolver
from .result import RenderResult
from .rules import (
    RenderRule,
    RuleRegistry,
    TokenHandlerRule,
    annotate_markup,
    annotate_softbreak,
    render_image,
    render_softbreak_as_space,
)

__all__ = [
    "AttributeProjector",
    "camel_case",
    "parse_style",
    "RenderingContext",
    "StackFrame",
    "ImbalancedTagsError",
    "RendererError",
    "UnknownElementTypeError",
    "Renderer",
    "ElementTypeResolver",
    "RenderResult",
    "RenderRule",
    "RuleRegistry",
    "TokenHandlerRule",
    "annotate_markup",
    "annotate_softbreak",
    "render_image",
    "render_softbreak_as_space",
]
