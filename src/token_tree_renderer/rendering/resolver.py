"""Element-type resolution for tokens."""

from typing import Any, Mapping, Optional

from .errors import UnknownElementTypeError


class ElementTypeResolver:
    """Map a token to the element type it renders as.

    An explicit entry for ``token.type`` wins; otherwise ``token.tag`` is used
    directly. Open and close tokens of one tag must resolve to the same
    element type, or closing fails with ``ImbalancedTagsError``.
    """

    def __init__(self, tags: Optional[Mapping[str, Any]] = None) -> None:
        self.tags = tags if tags is not None else {}

    def lookup(self, token: Any) -> Optional[Any]:
        """Return the element type for ``token`` or None if unknown."""
        return self.tags.get(token.type) or token.tag or None

    def resolve(self, token: Any) -> Any:
        """Return the element type for ``token``.

        Raises:
            UnknownElementTypeError: If the token has no mapping and no tag
        """
        element_type = self.lookup(token)
        if element_type is None:
            raise UnknownElementTypeError(token)
        return element_type
