"""HTML serialization for :class:`~token_tree_renderer.tree.nodes.Element` trees."""

import re
from html import escape
from typing import Any, Dict, List, Mapping

from ..tokens.model import NOTHING
from .nodes import Element, Keyed

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})

_UPPER = re.compile(r"[A-Z]")


def style_to_css(style: Mapping[str, Any]) -> str:
    """Turn a camel-cased style mapping back into a CSS declaration list."""
    declarations = []
    for key, value in style.items():
        if value is None or value == "":
            continue
        name = key if key.startswith("--") else _UPPER.sub(
            lambda m: "-" + m.group(0).lower(), key
        )
        declarations.append(f"{name}: {value}")
    return "; ".join(declarations)


def attribute_name(key: str) -> str:
    """Map a host attribute key to its HTML name (``class_`` -> ``class``)."""
    return key[:-1] if key.endswith("_") and len(key) > 1 else key


def render_attributes(attributes: Dict[str, Any]) -> str:
    parts = []
    for key, value in attributes.items():
        if value is None or value is False:
            continue
        name = attribute_name(key)
        if value is True:
            parts.append(f" {name}")
            continue
        if isinstance(value, Mapping):
            value = style_to_css(value)
        elif isinstance(value, (list, tuple)):
            value = " ".join(str(item) for item in value)
        parts.append(f' {name}="{escape(str(value), quote=True)}"')
    return "".join(parts)


def _write(node: Any, out: List[str]) -> None:
    if node is None or node is NOTHING or isinstance(node, bool):
        return
    if isinstance(node, str):
        out.append(escape(node, quote=False))
    elif isinstance(node, (int, float)):
        out.append(str(node))
    elif isinstance(node, Keyed):
        _write(node.value, out)
    elif isinstance(node, (list, tuple)):
        for child in node:
            _write(child, out)
    elif isinstance(node, Element):
        if node.is_fragment:
            _write(node.children, out)
            return
        out.append(f"<{node.tag}{render_attributes(node.attributes)}>")
        if node.tag in VOID_ELEMENTS:
            return
        _write(node.children, out)
        out.append(f"</{node.tag}>")
    else:
        raise TypeError(f"Cannot serialize node of type {type(node).__name__}")


def serialize_html(node: Any) -> str:
    """Serialize a rendered tree (or list of trees) to an HTML string.

    Void elements are written without a closing tag and their children are
    dropped. Text is escaped, attribute values are quoted and escaped.
    """
    out: List[str] = []
    _write(node, out)
    return "".join(out)
