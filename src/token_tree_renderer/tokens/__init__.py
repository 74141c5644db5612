"""Token model for the token tree renderer.

Key Components:
    Token: One unit of the flat input stream
    Nesting: Open / close / self-closing relation of a token
    NOTHING: Marker returned when a dispatch produced no node
"""

from .model import (
    NOTHING,
    Nesting,
    Token,
    as_token,
    as_tokens,
    close_token,
    inline_token,
    open_token,
    self_token,
)

__all__ = [
    "NOTHING",
    "Nesting",
    "Token",
    "as_token",
    "as_tokens",
    "close_token",
    "inline_token",
    "open_token",
    "self_token",
]
