"""Rendering context: the stack machine behind the renderer.

Pushing a frame starts a new ``children`` buffer. Popping returns the frame
for rendering. A rendered node is appended to the buffer of the frame below,
or handed back to the caller when no frame is open.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..tokens.model import NOTHING
from .errors import ImbalancedTagsError


@dataclass
class StackFrame:
    """State accumulated for one open tag."""

    element_type: Any
    attrs: Optional[Dict[str, Any]] = None
    children: List[Any] = field(default_factory=list)


class RenderingContext:
    """Stack of open frames; the last frame is the innermost open tag.

    A context belongs to exactly one render call and is never shared.
    """

    def __init__(self) -> None:
        self._stack: List[StackFrame] = []
        self.max_depth = 0
        # Index of the top-level token being rendered
        self.token_index: Optional[int] = None

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def is_empty(self) -> bool:
        return not self._stack

    @property
    def top(self) -> Optional[StackFrame]:
        return self._stack[-1] if self._stack else None

    @property
    def frames(self) -> Tuple[StackFrame, ...]:
        """Snapshot of the open frames, outermost first."""
        return tuple(self._stack)

    def push_frame(
        self, element_type: Any, attrs: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Open a new frame. Returns NOTHING since no node is finished yet."""
        self._stack.append(StackFrame(element_type, attrs))
        self.max_depth = max(self.max_depth, len(self._stack))
        return NOTHING

    def pop_frame(self, element_type: Any) -> StackFrame:
        """Close the innermost frame, which must be of ``element_type``.

        Raises:
            ImbalancedTagsError: If no frame is open or the innermost frame
                has a different element type
        """
        top = self._stack.pop() if self._stack else None
        if top is None or top.element_type != element_type:
            raise ImbalancedTagsError(
                top.element_type if top is not None else None, element_type
            )
        return top

    def emit(self, node: Any) -> Any:
        """Append ``node`` to the innermost frame, or return it at top level."""
        if self._stack:
            self._stack[-1].children.append(node)
            return NOTHING
        return node
