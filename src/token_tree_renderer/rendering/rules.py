"""Rule registries and the default rule set.

Two kinds of user-supplied callbacks customize rendering:

* token-handler rules, keyed by ``token.type``, take over dispatch of a
  single token and see the raw token stream and the rendering context;
* render rules, keyed by ``token.tag``, turn a closed (or self-closing) tag
  and its finished children into a node.

Rules receive the renderer as their first argument, the way markdown-it-py
render rules receive ``self``, so a rule can delegate to
``renderer.render_token`` or build nodes with ``renderer.render_node``.
"""

from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Iterator,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Protocol,
    Sequence,
)

from ..tokens.model import Token
from ..tree.nodes import FRAGMENT
from ..tree.text import get_text_content
from .context import RenderingContext

if TYPE_CHECKING:
    from ..shared.config import RendererConfig
    from .renderer import Renderer


class TokenHandlerRule(Protocol):
    """Handle ``tokens[idx]``; return a node or ``NOTHING``."""

    def __call__(
        self,
        renderer: "Renderer",
        tokens: Sequence[Token],
        idx: int,
        context: RenderingContext,
    ) -> Any: ...


class RenderRule(Protocol):
    """Build the node for a closed or self-closing tag."""

    def __call__(
        self,
        renderer: "Renderer",
        element_type: Any,
        attrs: Optional[Dict[str, Any]],
        children: List[Any],
    ) -> Any: ...


class RuleRegistry(MutableMapping[str, Callable[..., Any]]):
    """String-keyed mapping of rules that only accepts callables."""

    def __init__(
        self,
        rules: Optional[Mapping[str, Callable[..., Any]]] = None,
        kind: str = "rule",
    ) -> None:
        self.kind = kind
        self._rules: Dict[str, Callable[..., Any]] = {}
        if rules:
            self.update(rules)

    @classmethod
    def merged(
        cls,
        defaults: Mapping[str, Callable[..., Any]],
        overrides: Optional[Mapping[str, Optional[Callable[..., Any]]]] = None,
        kind: str = "rule",
    ) -> "RuleRegistry":
        """Layer ``overrides`` over ``defaults``; a None override drops a default."""
        registry = cls(defaults, kind)
        for key, rule in (overrides or {}).items():
            if rule is None:
                registry.pop(key, None)
            else:
                registry[key] = rule
        return registry

    def __getitem__(self, key: str) -> Callable[..., Any]:
        return self._rules[key]

    def __setitem__(self, key: str, rule: Callable[..., Any]) -> None:
        if not isinstance(key, str) or not key:
            raise TypeError(f"{self.kind} key must be a non-empty string, got {key!r}")
        if not callable(rule):
            raise TypeError(
                f"{self.kind} for {key!r} must be callable, got {type(rule).__name__}"
            )
        self._rules[key] = rule

    def __delitem__(self, key: str) -> None:
        del self._rules[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleRegistry({self.kind}, {sorted(self._rules)})"


# Default token-handler rules


def annotate_softbreak(
    renderer: "Renderer", tokens: Sequence[Token], idx: int, context: RenderingContext
) -> Any:
    """Mark softbreaks with the configured marker attribute, then render."""
    token = tokens[idx].copy()
    token.attr_set(renderer.config.softbreak_marker, "")
    return renderer.render_token(token, context)


def annotate_markup(
    renderer: "Renderer", tokens: Sequence[Token], idx: int, context: RenderingContext
) -> Any:
    """Preserve the literal emphasis markup (``*`` vs ``_``) as an attribute."""
    token = tokens[idx].copy()
    token.attr_set(renderer.config.markup_attribute, token.markup)
    return renderer.render_token(token, context)


def render_softbreak_as_space(
    renderer: "Renderer", tokens: Sequence[Token], idx: int, context: RenderingContext
) -> Any:
    """Alternative softbreak handler emitting a plain space."""
    return context.emit(" ")


# Default render rules


def render_image(
    renderer: "Renderer",
    element_type: Any,
    attrs: Optional[Dict[str, Any]],
    children: List[Any],
) -> Any:
    """Render an image, deriving missing alt text from its children.

    The children of a self-closing image come from ``token.content``, which
    markdown-it-py fills with the raw label. Inline markup in the label is
    therefore kept literally (``![a *b*](x.png)`` gives ``alt="a *b*"``).
    Register a token handler for ``image`` that renders ``token.children``
    to get the plain text instead.
    """
    attrs = dict(attrs or {})
    if not attrs.get("alt"):
        attrs["alt"] = get_text_content(children)
    return renderer.render_node(element_type, attrs, [])


def default_token_handler_rules(
    config: "RendererConfig",
) -> Dict[str, TokenHandlerRule]:
    rules: Dict[str, TokenHandlerRule] = {}
    if config.annotate_softbreaks:
        rules["softbreak"] = annotate_softbreak
    if config.annotate_emphasis_markup:
        rules["em_open"] = annotate_markup
        rules["strong_open"] = annotate_markup
    return rules


def default_render_rules() -> Dict[str, RenderRule]:
    return {"img": render_image}


def default_tags() -> Dict[str, Any]:
    return {"text": FRAGMENT}
