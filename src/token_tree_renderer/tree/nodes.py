"""Default output-node representation.

The renderer treats nodes as opaque values and only needs a host that can
construct a node, wrap an ordered list of children and optionally serialize a
finished tree. :class:`HtmlNodeFactory` is that host for the small
:class:`Element` tree defined here; other hosts implement :class:`NodeFactory`.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence, Union


class _FragmentType:
    """Element type that renders its children without a wrapping tag."""

    _instance: Optional["_FragmentType"] = None

    def __new__(cls) -> "_FragmentType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Fragment"

    def __reduce__(self) -> str:
        return "FRAGMENT"


FRAGMENT = _FragmentType()

# A string tag, FRAGMENT, or a component callable (attrs, children) -> node
ElementType = Union[str, _FragmentType, Callable[[Dict[str, Any], List[Any]], Any]]


@dataclass
class Keyed:
    """Positional wrapper keeping equal siblings apart."""

    key: int
    value: Any


@dataclass
class Element:
    """A rendered element: tag, attributes and ordered children."""

    tag: Union[str, _FragmentType]
    attributes: Dict[str, Any] = field(default_factory=dict)
    children: List[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.tag:
            raise ValueError("Element tag cannot be empty")

    @property
    def is_fragment(self) -> bool:
        return self.tag is FRAGMENT

    def iter_children(self) -> List[Any]:
        """Children with positional wrappers removed."""
        return [unwrap(child) for child in self.children]

    def find(self, tag: str) -> Optional["Element"]:
        """Find the first descendant element with matching tag, depth first."""
        for child in self.iter_children():
            if isinstance(child, Element):
                if child.tag == tag:
                    return child
                found = child.find(tag)
                if found is not None:
                    return found
        return None

    def find_all(self, tag: str) -> List["Element"]:
        """Find all descendant elements with matching tag, in document order."""
        results: List[Element] = []
        for child in self.iter_children():
            if isinstance(child, Element):
                if child.tag == tag:
                    results.append(child)
                results.extend(child.find_all(tag))
        return results

    def to_dict(self) -> Dict[str, Any]:
        """Convert element to dictionary representation."""
        result: Dict[str, Any] = {
            "tag": "#fragment" if self.is_fragment else self.tag,
        }
        if self.attributes:
            result["attributes"] = dict(self.attributes)
        if self.children:
            result["children"] = [node_to_dict(child) for child in self.children]
        return result


def unwrap(node: Any) -> Any:
    """Strip any number of :class:`Keyed` wrappers."""
    while isinstance(node, Keyed):
        node = node.value
    return node


def node_to_dict(node: Any) -> Any:
    """JSON-friendly view of a rendered tree (wrappers are dropped)."""
    node = unwrap(node)
    if isinstance(node, Element):
        return node.to_dict()
    if isinstance(node, (list, tuple)):
        return [node_to_dict(child) for child in node]
    if node is None or isinstance(node, (str, int, float, bool)):
        return node
    to_dict = getattr(node, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return repr(node)


class NodeFactory(Protocol):
    """Capabilities the renderer needs from an output-tree host."""

    def construct_node(
        self,
        element_type: Any,
        attrs: Optional[Dict[str, Any]],
        children: Sequence[Any],
    ) -> Any:
        """Build a node; must accept zero children."""

    def wrap_ordered(self, values: Sequence[Any]) -> List[Any]:
        """Tag each value with its position."""

    def serialize(self, node: Any) -> str:
        """Turn a finished tree into text."""


class HtmlNodeFactory:
    """Host producing :class:`Element` trees and serializing them to HTML."""

    def construct_node(
        self,
        element_type: Any,
        attrs: Optional[Dict[str, Any]],
        children: Sequence[Any],
    ) -> Any:
        attributes = dict(attrs) if attrs else {}
        if isinstance(element_type, str) or element_type is FRAGMENT:
            return Element(element_type, attributes, list(children))
        if callable(element_type):
            return element_type(attributes, list(children))
        raise TypeError(f"Unsupported element type: {element_type!r}")

    def wrap_ordered(self, values: Sequence[Any]) -> List[Any]:
        return [Keyed(index, value) for index, value in enumerate(values)]

    def serialize(self, node: Any) -> str:
        from .serializer import serialize_html

        return serialize_html(node)


def count_nodes(node: Any) -> int:
    """Number of :class:`Element` instances in a rendered tree."""
    node = unwrap(node)
    if isinstance(node, Element):
        return 1 + sum(count_nodes(child) for child in node.children)
    if isinstance(node, (list, tuple)):
        return sum(count_nodes(child) for child in node)
    return 0
