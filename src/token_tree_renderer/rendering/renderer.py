"""Token stream to tree renderer.

Rather than rendering opening and closing tokens separately, the renderer
buffers the children of each open tag on a stack and builds the node once the
closing token is reached (or immediately, for self-closing tokens).
"""

import logging
import time
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..shared import DiagnosticSeverity, RendererConfig, get_logger
from ..tokens.model import NOTHING, Nesting, Token, as_tokens
from ..tree.nodes import HtmlNodeFactory, NodeFactory, count_nodes
from .attributes import AttributeProjector
from .context import RenderingContext
from .errors import ImbalancedTagsError, RendererError, UnknownElementTypeError
from .resolver import ElementTypeResolver
from .result import RenderResult
from .rules import (
    RenderRule,
    RuleRegistry,
    TokenHandlerRule,
    default_render_rules,
    default_tags,
    default_token_handler_rules,
)


class Renderer:
    """Render a markup token stream into a tree of host nodes.

    Customization happens at three levels:

    * ``tags`` maps a token type to an element type, instead of using
      ``token.tag``. Open and close tokens must resolve to the same type::

          Renderer(tags={"link_open": Link, "link_close": Link})

    * ``render_rules`` (keyed by ``token.tag``) build the node for a closed or
      self-closing tag from its attributes and finished children::

          Renderer(render_rules={
              "a": lambda r, tag, attrs, children: Link(attrs["href"], children),
          })

    * ``token_handler_rules`` (keyed by ``token.type``) take over a single
      token, with access to the token stream and the rendering context::

          def link_open(renderer, tokens, idx, context):
              return context.push_frame(Link, renderer.render_attrs(tokens[idx]))

    Defaults are merged under the user tables; mapping a key to None removes
    the default rule for it.
    """

    def __init__(
        self,
        render_rules: Optional[Mapping[str, Optional[RenderRule]]] = None,
        token_handler_rules: Optional[Mapping[str, Optional[TokenHandlerRule]]] = None,
        tags: Optional[Mapping[str, Any]] = None,
        *,
        config: Optional[RendererConfig] = None,
        node_factory: Optional[NodeFactory] = None,
        attribute_projector: Optional[AttributeProjector] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        self.config = config or RendererConfig()
        self.correlation_id = correlation_id or self.config.correlation_id
        self.logger = get_logger(__name__, self.correlation_id, "renderer")

        self.render_rules = RuleRegistry.merged(
            default_render_rules(), render_rules, kind="render rule"
        )
        self.token_handler_rules = RuleRegistry.merged(
            default_token_handler_rules(self.config),
            token_handler_rules,
            kind="token handler rule",
        )
        self.tags: Dict[str, Any] = {**default_tags(), **(tags or {})}
        self.resolver = ElementTypeResolver(self.tags)
        self.node_factory: NodeFactory = node_factory or HtmlNodeFactory()
        self.attribute_projector = (
            attribute_projector or AttributeProjector.from_config(self.config)
        )

    def add_render_rule(self, tag: str, rule: RenderRule) -> None:
        """Register a render rule for ``tag`` after construction."""
        self.render_rules[tag] = rule

    def add_token_handler_rule(self, token_type: str, rule: TokenHandlerRule) -> None:
        """Register a token handler rule for ``token_type`` after construction."""
        self.token_handler_rules[token_type] = rule

    def resolve_element_type(self, token: Token) -> Any:
        """Determine the element type based on ``tags``, falling back to ``token.tag``."""
        return self.resolver.resolve(token)

    def render_attrs(self, token: Token) -> Dict[str, Any]:
        """Project token attributes to a mapping."""
        return self.attribute_projector.project(token)

    def render_node(
        self,
        element_type: Any,
        attrs: Optional[Dict[str, Any]],
        children: Sequence[Any],
    ) -> Any:
        """Default constructor for popped frames and self-closing tags."""
        if children:
            return self.node_factory.construct_node(element_type, attrs, children)
        return self.node_factory.construct_node(element_type, attrs, [])

    def wrap_children(self, children: Sequence[Any]) -> List[Any]:
        """Drop empty results and key the rest by position."""
        kept = [
            child
            for child in children
            if child is not NOTHING
            and child is not None
            and not (isinstance(child, (list, tuple)) and not child)
        ]
        return self.node_factory.wrap_ordered(kept)

    def handle_token(
        self, tokens: Sequence[Token], idx: int, context: RenderingContext
    ) -> Any:
        """The default token handler, used when no token handler rule matches."""
        return self.render_token(tokens[idx], context)

    def render_token(self, token: Token, context: RenderingContext) -> Any:
        """Render one token against ``context`` without consulting token rules.

        Open tokens push a frame. Close tokens pop the matching frame and
        self-closing tokens use their content as the only child; in both
        cases the render rule for ``token.tag`` (or ``render_node``) builds
        the node, which is then emitted into the enclosing frame.

        Raises:
            UnknownElementTypeError: If no element type can be resolved
            ImbalancedTagsError: If a close token does not match the open frame
        """
        element_type = self.resolve_element_type(token)
        if token.nesting == Nesting.OPEN:
            return context.push_frame(element_type, self.render_attrs(token))

        if token.nesting == Nesting.CLOSE:
            frame = context.pop_frame(element_type)
            attrs, children = frame.attrs, frame.children
        else:
            attrs = self.render_attrs(token)
            children = [token.content] if token.content else []
        children = self.wrap_children(children)

        rule = self.render_rules.get(token.tag)
        if rule is not None:
            node = rule(self, element_type, attrs, children)
        else:
            node = self.render_node(element_type, attrs, children)
        return context.emit(node)

    def dispatch(
        self, tokens: Sequence[Token], idx: int, context: RenderingContext
    ) -> Any:
        """Run the token handler rule for ``tokens[idx]`` or the default handler."""
        rule = self.token_handler_rules.get(tokens[idx].type)
        if rule is not None:
            return rule(self, tokens, idx, context)
        return self.handle_token(tokens, idx, context)

    def render_inline(
        self, tokens: Sequence[Any], context: RenderingContext
    ) -> List[Any]:
        """Render inline tokens into the shared ``context``."""
        tokens = as_tokens(tokens)
        return self.wrap_children(
            [self.dispatch(tokens, idx, context) for idx in range(len(tokens))]
        )

    def render(self, tokens: Sequence[Any]) -> List[Any]:
        """Render block tokens into a list of top-level nodes.

        Raises:
            UnknownElementTypeError: If a token cannot be mapped to an element
            ImbalancedTagsError: If the token stream closes tags out of order
        """
        return self._render(tokens)

    def render_html(self, tokens: Sequence[Any]) -> str:
        """Render block tokens and serialize the result through the host."""
        return self.node_factory.serialize(self.render(tokens))

    def render_result(self, tokens: Sequence[Any]) -> RenderResult:
        """Render without raising; failures are reported in the result.

        Only rendering errors are captured. Exceptions raised by user rules
        or the host propagate unchanged. The ERROR diagnostic of a failed
        render carries the index of the top-level token being rendered.
        """
        start_time = time.time()
        result = RenderResult(correlation_id=self.correlation_id)
        context = RenderingContext()
        try:
            tree = self._render(tokens, context)
        except RendererError as e:
            result.success = False
            result.error = e
            result.add_diagnostic(
                DiagnosticSeverity.ERROR,
                str(e),
                "renderer",
                token_index=context.token_index,
                details=_error_details(e),
            )
            self.logger.warning(
                "Render failed",
                extra={
                    "error_type": type(e).__name__,
                    "error": str(e),
                    "token_index": context.token_index,
                },
            )
        else:
            result.tree = tree
            result.performance.max_depth = context.max_depth
            result.performance.nodes_rendered = count_nodes(tree)
            if not context.is_empty:
                result.add_diagnostic(
                    DiagnosticSeverity.WARNING,
                    f"{context.depth} tag(s) left open at end of input",
                    "renderer",
                    details={"open_frames": [repr(f.element_type) for f in context.frames]},
                )
        result.performance.tokens_processed = len(tokens)
        result.performance.processing_time_ms = (time.time() - start_time) * 1000
        return result

    def _render(
        self, tokens: Sequence[Any], context: Optional[RenderingContext] = None
    ) -> List[Any]:
        start_time = time.time()
        tokens = as_tokens(tokens)
        if context is None:
            context = RenderingContext()
        self.logger.debug("Starting render", extra={"token_count": len(tokens)})

        inline_type = self.config.inline_container_type
        children = []
        for idx, token in enumerate(tokens):
            context.token_index = idx
            if token.type == inline_type:
                children.append(self.render_inline(token.children or [], context))
            else:
                children.append(self.dispatch(tokens, idx, context))
        tree = self.wrap_children(children)

        if not self.logger.is_enabled_for(logging.DEBUG):
            return tree
        if not context.is_empty:
            self.logger.debug(
                "Render finished with open frames",
                extra={"open_depth": context.depth},
            )
        self.logger.debug(
            "Render completed",
            extra={
                "token_count": len(tokens),
                "top_level_nodes": len(tree),
                "node_count": count_nodes(tree),
                "max_depth": context.max_depth,
                "processing_time_ms": (time.time() - start_time) * 1000,
            },
        )
        return tree


def _error_details(error: RendererError) -> Dict[str, Any]:
    if isinstance(error, ImbalancedTagsError):
        return {"expected": repr(error.expected), "received": repr(error.received)}
    if isinstance(error, UnknownElementTypeError):
        return {"token_type": error.token.type}
    return {}
