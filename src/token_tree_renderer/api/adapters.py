"""Adapters exporting rendered trees to lxml and BeautifulSoup."""

import time
from typing import Any, Optional

import lxml.etree as ET
from bs4 import BeautifulSoup

from ..shared import get_logger
from ..tree.nodes import Element, Keyed
from ..tree.serializer import attribute_name, serialize_html, style_to_css


class LxmlAdapter:
    """Convert :class:`Element` trees into ``lxml.etree`` elements.

    Text nodes become ``text``/``tail`` of the surrounding elements and
    fragments and positional wrappers are flattened into their parent.
    The top-level nodes are collected under one ``root_tag`` element.
    """

    def __init__(self, correlation_id: Optional[str] = None) -> None:
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "lxml_adapter")

    def to_target(self, tree: Any, root_tag: str = "div") -> Any:
        """Convert a rendered tree to an lxml element rooted at ``root_tag``."""
        start_time = time.time()
        root = ET.Element(root_tag)
        self._append(root, tree)
        self.logger.debug(
            "Converted tree to lxml",
            extra={
                "element_count": sum(1 for _ in root.iter()) - 1,
                "processing_time_ms": (time.time() - start_time) * 1000,
            },
        )
        return root

    def to_html(self, tree: Any, root_tag: str = "div") -> str:
        """Serialize a rendered tree through lxml's HTML writer."""
        return ET.tostring(self.to_target(tree, root_tag), method="html", encoding="unicode")

    def _append(self, parent: Any, node: Any) -> None:
        if node is None or isinstance(node, bool):
            return
        if isinstance(node, Keyed):
            self._append(parent, node.value)
        elif isinstance(node, (list, tuple)):
            for child in node:
                self._append(parent, child)
        elif isinstance(node, (str, int, float)):
            self._append_text(parent, str(node))
        elif isinstance(node, Element):
            if node.is_fragment:
                self._append(parent, node.children)
                return
            child = ET.SubElement(parent, node.tag)
            for key, value in node.attributes.items():
                if value is None or value is False:
                    continue
                if value is True:
                    value = ""
                elif isinstance(value, dict):
                    value = style_to_css(value)
                child.set(attribute_name(key), str(value))
            self._append(child, node.children)
        else:
            raise TypeError(f"Cannot convert node of type {type(node).__name__} to lxml")

    @staticmethod
    def _append_text(parent: Any, text: str) -> None:
        if len(parent):
            last = parent[-1]
            last.tail = (last.tail or "") + text
        else:
            parent.text = (parent.text or "") + text


class SoupAdapter:
    """Convert rendered trees into BeautifulSoup documents.

    The tree is serialized to HTML and parsed back with the ``html.parser``
    backend, so the soup mirrors what :func:`serialize_html` produces.
    """

    def __init__(self, correlation_id: Optional[str] = None) -> None:
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "soup_adapter")

    def to_target(self, tree: Any) -> Any:
        """Convert a rendered tree to a ``BeautifulSoup`` document."""
        start_time = time.time()
        html = serialize_html(tree)
        soup = BeautifulSoup(html, "html.parser")
        self.logger.debug(
            "Converted tree to BeautifulSoup",
            extra={
                "html_length": len(html),
                "processing_time_ms": (time.time() - start_time) * 1000,
            },
        )
        return soup
