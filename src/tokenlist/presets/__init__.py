"""
Attribute presets - YAML descriptions of token-list attributes.

Presets tell a bound token list which elements its attribute belongs on and
which tokens it supports.
"""

from tokenlist.presets.loader import PresetLoader, get_default_loader

__all__ = [
    "PresetLoader",
    "get_default_loader",
]
