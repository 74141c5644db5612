"""Configuration for the token tree renderer.

:class:`RendererConfig` is an immutable description of the renderer's
toggles: whether attribute remapping is active, which keys it renames, and
which attributes the default token handlers inject. Being frozen, one
instance can be shared between renderers used from several threads.
"""

import json
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Optional

DEFAULT_ATTRIBUTE_RENAMES = {"class": "class_"}


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class RendererConfig:
    """Immutable renderer configuration.

    Attributes:
        remap_attributes: Rename reserved attribute keys and transcode
            structured values (see ``AttributeProjector``)
        attribute_renames: Reserved key to host key mapping used when
            remapping
        style_attribute: Attribute whose inline CSS string is parsed into a
            mapping when remapping
        inline_container_type: Token type whose ``children`` hold inline
            tokens
        annotate_softbreaks: Register the softbreak marker token handler
        softbreak_marker: Attribute injected on softbreak tokens
        annotate_emphasis_markup: Register the emphasis markup token handlers
        markup_attribute: Attribute carrying the literal emphasis markup
    """

    remap_attributes: bool = True
    attribute_renames: Dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_ATTRIBUTE_RENAMES)
    )
    style_attribute: Optional[str] = "style"
    inline_container_type: str = "inline"
    annotate_softbreaks: bool = True
    softbreak_marker: str = "data-softbreak"
    annotate_emphasis_markup: bool = True
    markup_attribute: str = "data-markup"

    # Metadata
    correlation_id: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the configuration."""
        if not self.inline_container_type:
            raise ConfigValidationError(
                "inline_container_type cannot be empty",
                field_name="inline_container_type",
            )
        if self.annotate_softbreaks and not self.softbreak_marker:
            raise ConfigValidationError(
                "softbreak_marker cannot be empty while annotate_softbreaks is on",
                field_name="softbreak_marker",
                suggestions=["Set annotate_softbreaks=False", "Provide a marker name"],
            )
        if self.annotate_emphasis_markup and not self.markup_attribute:
            raise ConfigValidationError(
                "markup_attribute cannot be empty while annotate_emphasis_markup is on",
                field_name="markup_attribute",
                suggestions=[
                    "Set annotate_emphasis_markup=False",
                    "Provide an attribute name",
                ],
            )
        if not isinstance(self.attribute_renames, dict):
            raise ConfigValidationError(
                "attribute_renames must be a dict",
                field_name="attribute_renames",
            )
        for source, target in self.attribute_renames.items():
            if not source or not target:
                raise ConfigValidationError(
                    f"Invalid attribute rename {source!r} -> {target!r}",
                    field_name="attribute_renames",
                )

    def override(self, **kwargs: Any) -> "RendererConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = RendererConfig()
            >>> config.override(remap_attributes=False).remap_attributes
            False
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration field(s): {', '.join(unknown)}",
                field_name=unknown[0],
                suggestions=sorted(known),
            )
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        result: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            result[f.name] = dict(value) if isinstance(value, dict) else value
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], base: Optional["RendererConfig"] = None
    ) -> "RendererConfig":
        """Create configuration from dictionary.

        Values in ``data`` are applied on top of ``base`` (the defaults when
        omitted). Unknown keys are rejected so that typos do not silently fall
        back to defaults.
        """
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration data must be a mapping")
        return (base if base is not None else cls()).override(**data)

    @classmethod
    def from_json(
        cls, json_str: str, base: Optional["RendererConfig"] = None
    ) -> "RendererConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        return cls.from_dict(data, base)

    # Preset factory methods
    @classmethod
    def default(cls) -> "RendererConfig":
        """Attribute remapping and all default annotations enabled."""
        return cls(name="default")

    @classmethod
    def plain(cls) -> "RendererConfig":
        """Attributes copied verbatim and no injected annotations."""
        return cls(
            remap_attributes=False,
            annotate_softbreaks=False,
            annotate_emphasis_markup=False,
            name="plain",
        )
