"""Output-node host for the token tree renderer.

Key Components:
    Element: Rendered element with attributes and ordered children
    Keyed: Positional wrapper applied to children
    FRAGMENT: Transparent element type
    HtmlNodeFactory: Default host (construct, wrap, serialize)
    get_text_content: Flattened text of a rendered tree
"""

from .nodes import (
    FRAGMENT,
    Element,
    ElementType,
    HtmlNodeFactory,
    Keyed,
    NodeFactory,
    count_nodes,
    node_to_dict,
    unwrap,
)
from .serializer import serialize_html, style_to_css
from .text import get_text_content

__all__ = [
    "FRAGMENT",
    "Element",
    "ElementType",
    "HtmlNodeFactory",
    "Keyed",
    "NodeFactory",
    "count_nodes",
    "node_to_dict",
    "unwrap",
    "serialize_html",
    "style_to_css",
    "get_text_content",
]
