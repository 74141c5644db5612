"""Token model consumed by the renderer.

Tokens are produced by an external tokenizer (markdown-it-py in practice) and
form a flat stream. Block tokens open and close scopes through ``nesting``;
the inline container token carries its own nested stream in ``children``.
"""

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple


class Nesting(IntEnum):
    """Relation of a token to the tree structure."""

    CLOSE = -1  # Ends the most recently opened matching scope
    SELF = 0    # Produces a node immediately, no scope
    OPEN = 1    # Begins a new scope


class _Nothing:
    """Marker for "no node produced" (distinct from None and empty nodes)."""

    _instance: Optional["_Nothing"] = None

    def __new__(cls) -> "_Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOTHING"

    def __reduce__(self) -> str:
        return "NOTHING"


NOTHING = _Nothing()

AttrPairs = List[Tuple[str, Any]]


def _attr_pairs(raw: Any) -> AttrPairs:
    if not raw:
        return []
    if isinstance(raw, Mapping):
        return [(str(key), value) for key, value in raw.items()]
    return [(str(key), value) for key, value in raw]


@dataclass
class Token:
    """A single markup token.

    Attributes:
        type: Semantic kind, e.g. ``paragraph_open`` or ``softbreak``
        tag: Nominal output tag (``"p"``, ``"em"``), may be empty
        nesting: Open, close or self-closing
        content: Payload of leaf tokens
        attrs: Ordered (key, value) pairs, duplicates allowed
        markup: Literal source syntax that produced the token
        info: Additional info string (fence language)
        children: Nested inline tokens of the inline container
    """

    type: str
    tag: str = ""
    nesting: Nesting = Nesting.SELF
    content: str = ""
    attrs: AttrPairs = field(default_factory=list)
    markup: str = ""
    info: str = ""
    children: Optional[List["Token"]] = None

    def __post_init__(self) -> None:
        if not self.type:
            raise ValueError("Token type cannot be empty")
        self.nesting = Nesting(self.nesting)
        self.attrs = _attr_pairs(self.attrs)

    def attr_get(self, name: str, default: Any = None) -> Any:
        """Return the last value stored for ``name``."""
        for key, value in reversed(self.attrs):
            if key == name:
                return value
        return default

    def attr_set(self, name: str, value: Any) -> None:
        """Set ``name``, replacing every existing pair with that key."""
        self.attrs = [(key, val) for key, val in self.attrs if key != name]
        self.attrs.append((name, value))

    def attr_join(self, name: str, value: str) -> None:
        """Append ``value`` to a space separated attribute (e.g. class)."""
        current = self.attr_get(name)
        self.attr_set(name, f"{current} {value}" if current else value)

    def copy(self, **changes: Any) -> "Token":
        """Shallow copy with its own attribute list."""
        changes.setdefault("attrs", list(self.attrs))
        return replace(self, **changes)

    @classmethod
    def from_markdown_it(cls, token: Any) -> "Token":
        """Build a token from a markdown-it-py token (or any look-alike)."""
        children = getattr(token, "children", None)
        return cls(
            type=token.type,
            tag=getattr(token, "tag", "") or "",
            nesting=getattr(token, "nesting", 0),
            content=getattr(token, "content", "") or "",
            attrs=_attr_pairs(getattr(token, "attrs", None)),
            markup=getattr(token, "markup", "") or "",
            info=getattr(token, "info", "") or "",
            children=as_tokens(children) if children is not None else None,
        )


def as_token(obj: Any) -> Token:
    """Return ``obj`` unchanged if it is a Token, otherwise convert it."""
    if isinstance(obj, Token):
        return obj
    return Token.from_markdown_it(obj)


def as_tokens(tokens: Iterable[Any]) -> List[Token]:
    """Convert a token stream, leaving existing Token instances untouched."""
    return [as_token(token) for token in tokens]


def open_token(type_: str, tag: str, **kwargs: Any) -> Token:
    """Shortcut for an opening token."""
    return Token(type=type_, tag=tag, nesting=Nesting.OPEN, **kwargs)


def close_token(type_: str, tag: str, **kwargs: Any) -> Token:
    """Shortcut for a closing token."""
    return Token(type=type_, tag=tag, nesting=Nesting.CLOSE, **kwargs)


def self_token(type_: str, tag: str = "", content: str = "", **kwargs: Any) -> Token:
    """Shortcut for a self-closing token."""
    return Token(type=type_, tag=tag, nesting=Nesting.SELF, content=content, **kwargs)


def inline_token(children: Sequence[Token], type_: str = "inline") -> Token:
    """Shortcut for an inline container token."""
    return Token(type=type_, nesting=Nesting.SELF, children=list(children))
