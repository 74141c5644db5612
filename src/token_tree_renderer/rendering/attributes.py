"""Attribute projection: token attribute pairs to an attribute mapping."""

import re
from typing import Any, Callable, Dict, Mapping, Optional

from ..shared.config import DEFAULT_ATTRIBUTE_RENAMES

Transcoder = Callable[[Any], Any]
Rewrite = Callable[[Dict[str, Any]], Dict[str, Any]]

_HYPHENATED = re.compile(r"-([a-zA-Z0-9])")


def camel_case(name: str) -> str:
    """``background-color`` -> ``backgroundColor``; ``--custom`` is kept."""
    if name.startswith("--"):
        return name
    return _HYPHENATED.sub(lambda m: m.group(1).upper(), name)


def parse_style(css: str) -> Dict[str, str]:
    """Parse an inline style string into a mapping.

    Declarations are split on ``;`` and ``:``; whitespace around names and
    values is trimmed and property names are camel-cased. Declarations
    without a name or value are skipped.

    >>> parse_style("color: red; background-color : #fff;")
    {'color': 'red', 'backgroundColor': '#fff'}
    """
    style: Dict[str, str] = {}
    if not isinstance(css, str):
        return style
    for declaration in css.split(";"):
        name, sep, value = declaration.partition(":")
        name, value = name.strip(), value.strip()
        if not sep or not name or not value:
            continue
        style[camel_case(name)] = value
    return style


class AttributeProjector:
    """Turn a token's attribute pairs into a key/value mapping.

    Without remapping the pairs are copied verbatim (last duplicate wins).
    With remapping, keys found in ``renames`` are renamed and values of keys
    found in ``transcoders`` are converted. ``rewrite`` runs last on the
    resulting mapping either way.
    """

    def __init__(
        self,
        remap: bool = True,
        renames: Optional[Mapping[str, str]] = None,
        transcoders: Optional[Mapping[str, Transcoder]] = None,
        rewrite: Optional[Rewrite] = None,
    ) -> None:
        self.remap = remap
        self.renames: Dict[str, str] = dict(
            renames if renames is not None else DEFAULT_ATTRIBUTE_RENAMES
        )
        self.transcoders: Dict[str, Transcoder] = (
            dict(transcoders) if transcoders is not None else {"style": parse_style}
        )
        self.rewrite = rewrite

    @classmethod
    def from_config(
        cls, config: Any, rewrite: Optional[Rewrite] = None
    ) -> "AttributeProjector":
        """Build a projector from a ``RendererConfig``."""
        transcoders = {config.style_attribute: parse_style} if config.style_attribute else {}
        return cls(
            remap=config.remap_attributes,
            renames=config.attribute_renames,
            transcoders=transcoders,
            rewrite=rewrite,
        )

    def project(self, token: Any) -> Dict[str, Any]:
        """Project ``token.attrs`` (pairs or a mapping) into a dict."""
        raw = token.attrs or []
        pairs = raw.items() if isinstance(raw, Mapping) else raw
        attrs = {key: value for key, value in pairs}
        return self.apply(attrs)

    def apply(self, attrs: Dict[str, Any]) -> Dict[str, Any]:
        if self.remap:
            attrs = self.remap_attrs(attrs)
        if self.rewrite is not None:
            attrs = self.rewrite(attrs)
        return attrs

    def remap_attrs(self, attrs: Mapping[str, Any]) -> Dict[str, Any]:
        """Rename reserved keys and transcode structured values."""
        result: Dict[str, Any] = {}
        for key, value in attrs.items():
            transcoder = self.transcoders.get(key)
            if transcoder is not None:
                value = transcoder(value)
            result[self.renames.get(key, key)] = value
        return result
