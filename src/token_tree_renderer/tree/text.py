"""Text extraction from rendered trees."""

from typing import Any

from .nodes import Keyed


def get_text_content(node: Any) -> str:
    """Concatenate the text of ``node`` depth first.

    Lists are joined, positional wrappers and elements are descended into
    (anything exposing ``children`` counts as an element), strings are
    returned as-is and every other value contributes nothing.
    """
    if isinstance(node, str):
        return node
    if isinstance(node, (list, tuple)):
        return "".join(get_text_content(child) for child in node)
    if isinstance(node, Keyed):
        return get_text_content(node.value)
    children = getattr(node, "children", None)
    if children is not None:
        return get_text_content(children)
    return ""
