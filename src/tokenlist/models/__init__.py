"""
Pydantic models for attribute presets.

This module provides:
- AttributePreset: Description of a token-list attribute
- PresetMetadata: Summary used when listing presets
"""

from tokenlist.models.preset import AttributePreset, PresetMetadata

__all__ = [
    "AttributePreset",
    "PresetMetadata",
]
