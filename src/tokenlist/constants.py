"""
Constants and enums for token lists.

No magic strings - use enums for the attribute names the package knows about.
"""

from enum import Enum

# Canonical token separator (U+0020 SPACE)
TOKEN_SEPARATOR = chr(0x20)

# Environment variable naming a directory of project attribute presets
PRESETS_DIR_ENV = "TOKENLIST_PRESETS_DIR"


class AttributeName(str, Enum):
    """Token-list attributes with a dedicated list class."""

    CLASS = "class"
    REL = "rel"
