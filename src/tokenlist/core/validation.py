"""
Token validation and input normalization.

A token is a non-empty string without whitespace. Mutating operations accept
three input shapes, normalized here into a flat list of validated tokens:

- a single token: ``"foo"``
- a space-delimited string: ``"foo bar baz"``
- an iterable of tokens: ``["foo", "bar"]``
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from tokenlist.constants import TOKEN_SEPARATOR
from tokenlist.errors import InvalidTokenError

_WHITESPACE = re.compile(r"\s")

TokenInput = str | Iterable[str]


def validate_token(token: Any) -> str:
    """
    Check a single token.

    Args:
        token: Candidate token

    Returns:
        The token, unchanged

    Raises:
        TypeError: If the token is not a string
        InvalidTokenError: If the token is empty or contains whitespace
    """
    if not isinstance(token, str):
        raise TypeError(f"Token must be a string, got {type(token).__name__}")
    if not token:
        raise InvalidTokenError(token, "The token is empty")
    if _WHITESPACE.search(token):
        raise InvalidTokenError(token, f"Invalid token, must not contain whitespace: {token!r}")
    return token


def split_tokens(value: str) -> list[str]:
    """Split on U+0020, discarding empty fragments."""
    return [part for part in value.split(TOKEN_SEPARATOR) if part]


def split_whitespace(value: str) -> list[str]:
    """Split on runs of any whitespace (used for existing attribute values)."""
    return value.split()


def normalize_tokens(args: tuple[Any, ...]) -> list[str]:
    """
    Flatten the positional arguments of add/remove into validated tokens.

    A single string argument is split on U+0020; if it yields no fragments
    the raw string is validated as-is, so ``""`` and ``"   "`` are rejected.
    A single non-string iterable is taken element by element. Several
    arguments are each one candidate and are not split.

    The whole batch is validated before anything is returned.
    """
    if len(args) == 1:
        (arg,) = args
        if isinstance(arg, str):
            candidates: list[Any] = split_tokens(arg) or [arg]
        elif isinstance(arg, Iterable):
            candidates = list(arg)
        else:
            candidates = [arg]
    else:
        candidates = list(args)

    return [validate_token(candidate) for candidate in candidates]
