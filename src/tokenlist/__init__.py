"""
tokenlist - ordered sets of space-separated tokens.

A Python take on the DOM DOMTokenList interface:
- TokenSet: ordered, duplicate-free, validated tokens
- AttributeTokenSet: a TokenSet that writes through to an element attribute
- ClassList / RelList: bound to the ``class`` and ``rel`` attributes
- Element / Attribute: minimal live handles to bind to
- PresetLoader: YAML descriptions of token-list attributes
"""

from tokenlist.binding import AttributeTokenSet, BindingTarget, ClassList, RelList
from tokenlist.constants import TOKEN_SEPARATOR, AttributeName
from tokenlist.core import TokenSet, validate_token
from tokenlist.dom import Attribute, AttributeSink, Element, MemorySink, Sink
from tokenlist.errors import (
    AttributeNotFoundError,
    BindingError,
    InvalidBindingTargetError,
    InvalidTokenError,
    NoSupportedTokensError,
    OwnershipMismatchError,
    TokenListError,
)
from tokenlist.models import AttributePreset, PresetMetadata
from tokenlist.presets import PresetLoader, get_default_loader

__all__ = [
    # Core
    "TOKEN_SEPARATOR",
    "TokenSet",
    "validate_token",
    # Binding
    "AttributeName",
    "AttributeTokenSet",
    "BindingTarget",
    "ClassList",
    "RelList",
    # Element model
    "Attribute",
    "AttributeSink",
    "Element",
    "MemorySink",
    "Sink",
    # Presets
    "AttributePreset",
    "PresetLoader",
    "PresetMetadata",
    "get_default_loader",
    # Errors
    "AttributeNotFoundError",
    "BindingError",
    "InvalidBindingTargetError",
    "InvalidTokenError",
    "NoSupportedTokensError",
    "OwnershipMismatchError",
    "TokenListError",
]
