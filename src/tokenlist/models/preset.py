"""
Attribute preset models.

A preset describes a token-list attribute: which elements carry it and,
optionally, which tokens it supports. Presets are loaded from YAML.
"""

from __future__ import annotations

import string

from pydantic import BaseModel, Field

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_lower(value: str) -> str:
    """Lowercase A-Z only, leaving every other character untouched."""
    return value.translate(_ASCII_LOWER)


class AttributePreset(BaseModel):
    """
    Description of a token-list attribute.

    ``supported_tokens`` mirrors DOMTokenList.supports(): when it is None
    the attribute does not define supported tokens at all.
    """

    name: str = Field(..., description="Attribute name")
    description: str = Field("", description="Human-readable description")
    elements: list[str] = Field(
        default_factory=list,
        description="Tag names the attribute applies to (empty = any element)",
    )
    supported_tokens: list[str] | None = Field(
        None,
        description="Tokens the attribute supports, if it defines any",
    )

    model_config = {"frozen": True}

    @property
    def has_supported_tokens(self) -> bool:
        """True if the attribute defines supported tokens."""
        return self.supported_tokens is not None

    def supports(self, token: str) -> bool:
        """Check a token against the supported tokens (ASCII case-insensitive)."""
        if self.supported_tokens is None:
            return False
        lowered = _ascii_lower(token)
        return any(lowered == _ascii_lower(supported) for supported in self.supported_tokens)

    def applies_to(self, tag_name: str) -> bool:
        """Check whether the attribute is expected on the element (ASCII case-insensitive)."""
        if not self.elements:
            return True
        return _ascii_lower(tag_name) in (_ascii_lower(element) for element in self.elements)


class PresetMetadata(BaseModel):
    """Lightweight metadata for listing presets."""

    name: str
    description: str
    elements: tuple[str, ...]
    has_supported_tokens: bool

    model_config = {"frozen": True}

    @classmethod
    def from_preset(cls, preset: AttributePreset) -> PresetMetadata:
        """Create metadata from a preset."""
        return cls(
            name=preset.name,
            description=preset.description,
            elements=tuple(preset.elements),
            has_supported_tokens=preset.has_supported_tokens,
        )
