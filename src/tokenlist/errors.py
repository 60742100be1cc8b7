"""
Exception hierarchy for token lists.

Every error raised by the package derives from TokenListError. Where a
builtin exception describes the same failure, the error also derives from it
so callers can catch either.
"""

from __future__ import annotations


class TokenListError(Exception):
    """Base class for all token list errors."""


class InvalidTokenError(TokenListError, ValueError):
    """A token is empty or contains whitespace."""

    def __init__(self, token: str, message: str) -> None:
        super().__init__(message)
        self.token = token


class BindingError(TokenListError):
    """A token list could not be bound to its attribute."""


class AttributeNotFoundError(BindingError, LookupError):
    """The named attribute does not exist on the element."""

    def __init__(self, attribute_name: str, tag_name: str) -> None:
        super().__init__(f"Attribute {attribute_name!r} does not exist on <{tag_name}>")
        self.attribute_name = attribute_name
        self.tag_name = tag_name


class OwnershipMismatchError(BindingError):
    """The attribute node does not belong to the element."""


class InvalidBindingTargetError(BindingError, TypeError):
    """The element or attribute argument has an unsupported type."""


class NoSupportedTokensError(TokenListError, TypeError):
    """The attribute does not define a set of supported tokens."""

    def __init__(self, attribute_name: str | None) -> None:
        super().__init__(f"Attribute {attribute_name!r} has no supported tokens")
        self.attribute_name = attribute_name
