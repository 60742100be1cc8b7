"""
Core token set engine.

- TokenSet: ordered, duplicate-free collection of tokens
- validate_token / normalize_tokens: the token rules shared by every operation
"""

from tokenlist.core.token_set import TokenSet
from tokenlist.core.validation import (
    TokenInput,
    normalize_tokens,
    split_tokens,
    split_whitespace,
    validate_token,
)

__all__ = [
    "TokenInput",
    "TokenSet",
    "normalize_tokens",
    "split_tokens",
    "split_whitespace",
    "validate_token",
]
