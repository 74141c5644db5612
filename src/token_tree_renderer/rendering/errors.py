"""Fatal rendering errors.

Both errors abort the current render call. They signal either malformed
token input or a renderer configuration that does not cover the input.
"""

from typing import Any, Optional


def _describe(element_type: Any) -> str:
    if isinstance(element_type, str):
        return element_type
    return getattr(element_type, "__name__", None) or repr(element_type)


class RendererError(Exception):
    """Base exception for rendering errors."""


class ImbalancedTagsError(RendererError):
    """A closing token does not match the innermost open frame.

    Attributes:
        expected: Element type actually open on top of the stack, or None
            when nothing was open
        received: Element type the closing token asked to close
    """

    def __init__(self, expected: Optional[Any], received: Any) -> None:
        if expected is not None:
            message = (
                f'imbalanced tags; expected "{_describe(expected)}", '
                f'received "{_describe(received)}"'
            )
        else:
            message = f'imbalanced tags; unexpected "{_describe(received)}"'
        super().__init__(message)
        self.expected = expected
        self.received = received


class UnknownElementTypeError(RendererError):
    """No element type could be resolved for a token."""

    def __init__(self, token: Any) -> None:
        super().__init__(
            f'unable to determine tag for token type "{token.type}"; '
            "add to renderer.tags"
        )
        self.token = token
