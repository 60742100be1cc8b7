"""
TokenSet - an ordered set of distinct, space-separated tokens.

The engine behind every token list in the package. It behaves like the DOM
DOMTokenList interface:

- tokens keep insertion order,
- tokens are always case-sensitive,
- duplicates are never stored.

Subclasses hook into mutations by overriding ``_on_change``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from tokenlist.constants import TOKEN_SEPARATOR
from tokenlist.core.validation import (
    TokenInput,
    normalize_tokens,
    split_tokens,
    validate_token,
)


class TokenSet:
    """
    An ordered, duplicate-free collection of whitespace-free tokens.

    Example:
        >>> tokens = TokenSet("foo baz qux")
        >>> tokens.add("foo not qux xor").remove(["foo", "qux"])
        TokenSet(['baz', 'not', 'xor'])
        >>> str(tokens)
        'baz not xor'
    """

    def __init__(self, tokens: TokenInput = ()) -> None:
        """
        Create a token set.

        Args:
            tokens: A token, a space-delimited string, or an iterable of
                tokens to start off the set.
        """
        self._tokens: list[str] = []
        if tokens:
            self.add(tokens)

    # --- Queries ---

    @property
    def tokens(self) -> tuple[str, ...]:
        """Snapshot of the current tokens."""
        return tuple(self._tokens)

    @property
    def value(self) -> str:
        """Canonical serialization: tokens joined by a single space."""
        return TOKEN_SEPARATOR.join(self._tokens)

    @value.setter
    def value(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Token set value must be a string, got {type(value).__name__}")
        candidates: list[str] = []
        for token in split_tokens(value):
            if validate_token(token) not in candidates:
                candidates.append(token)
        if candidates != self._tokens:
            self._tokens = candidates
            self._on_change()

    def item(self, index: int) -> str | None:
        """Return the token at ``index``, or None when out of range."""
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        return None

    def contains(self, token: str) -> bool:
        """Check whether the set holds ``token`` (validated first)."""
        return validate_token(token) in self._tokens

    def count(self) -> int:
        """Number of tokens in the set."""
        return len(self._tokens)

    # --- Mutations ---

    def add(self, *tokens: TokenInput) -> TokenSet:
        """
        Add tokens, skipping those already present.

        Args:
            *tokens: One token, one space-delimited string, one iterable of
                tokens, or several tokens as separate arguments.

        Returns:
            The set itself, for chaining
        """
        self._append(normalize_tokens(tokens))
        return self

    def remove(self, *tokens: TokenInput) -> TokenSet:
        """
        Remove tokens. Tokens that are not present are ignored.

        Accepts the same input shapes as ``add``.

        Returns:
            The set itself, for chaining
        """
        self._discard(normalize_tokens(tokens))
        return self

    def replace(self, old_token: str, new_token: str) -> TokenSet:
        """
        Rename ``old_token`` to ``new_token`` in place.

        If ``old_token`` is not present nothing happens; ``new_token`` is
        not added. If ``new_token`` is already present elsewhere, the earlier
        of the two positions keeps ``new_token`` and the other is dropped.

        Returns:
            The set itself, for chaining
        """
        validate_token(old_token)
        validate_token(new_token)

        if old_token not in self._tokens or old_token == new_token:
            return self

        index = self._tokens.index(old_token)
        if new_token in self._tokens:
            existing = self._tokens.index(new_token)
            if existing < index:
                del self._tokens[index]
            else:
                self._tokens[index] = new_token
                del self._tokens[existing]
        else:
            self._tokens[index] = new_token

        self._on_change()
        return self

    def toggle(self, token: str, force: bool | None = None) -> bool:
        """
        Remove ``token`` if present, add it otherwise.

        Args:
            token: The token to toggle
            force: When True the token is only ever added; when False it is
                only ever removed. None gives the plain toggle.

        Returns:
            True if the token is now present, False otherwise
        """
        if self.contains(token):
            if force is True:
                return True
            self._discard([token])
            return False

        if force is False:
            return False
        self._append([token])
        return True

    def clear(self) -> TokenSet:
        """Remove every token."""
        if self._tokens:
            self._tokens = []
            self._on_change()
        return self

    # --- Internals ---

    def _append(self, tokens: list[str]) -> None:
        """Append already-validated tokens that are not yet present."""
        changed = False
        for token in tokens:
            if token not in self._tokens:
                self._tokens.append(token)
                changed = True
        if changed:
            self._on_change()

    def _discard(self, tokens: list[str]) -> None:
        """Remove already-validated tokens that are present."""
        changed = False
        for token in tokens:
            if token in self._tokens:
                self._tokens.remove(token)
                changed = True
        if changed:
            self._on_change()

    def _on_change(self) -> None:
        """Called after every mutation that changed the tokens."""

    # --- Python protocols ---

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        # Walks the live list by position: shrinking the set mid-iteration
        # ends the walk early, and a removal can make it skip a token.
        index = 0
        while index < len(self._tokens):
            yield self._tokens[index]
            index += 1

    def __contains__(self, token: object) -> bool:
        if not isinstance(token, str):
            return False
        return self.contains(token)

    def __getitem__(self, key: int | str) -> str | bool | None:
        """``ts[0]`` is ``item(0)``; ``ts["foo"]`` is ``contains("foo")``."""
        if isinstance(key, int) and not isinstance(key, bool):
            return self.item(key)
        if isinstance(key, str):
            return self.contains(key)
        raise TypeError(f"Token set indices must be int or str, not {type(key).__name__}")

    def __setitem__(self, key: str | None, value: Any) -> None:
        """
        Bracket-style mutation.

        ``ts[None] = "foo"`` adds, ``ts["foo"] = True`` adds,
        ``ts["foo"] = False`` removes, ``ts["foo"] = "bar"`` replaces.
        """
        if key is None and isinstance(value, str):
            self.add(value)
        elif isinstance(key, str) and isinstance(value, bool):
            if value:
                self.add(key)
            else:
                self.remove(key)
        elif isinstance(key, str) and isinstance(value, str):
            self.replace(key, value)
        else:
            raise TypeError(
                f"Unsupported assignment: [{type(key).__name__}] = {type(value).__name__}"
            )

    def __delitem__(self, key: int | str) -> None:
        """
        ``del ts["foo"]`` removes by value; ``del ts[0]`` removes by position.

        Deleting by position compacts the set and fires the change hook, the
        same as removing that token by value. Out-of-range positions are
        ignored.
        """
        if isinstance(key, int) and not isinstance(key, bool):
            token = self.item(key)
            if token is not None:
                self._discard([token])
        elif isinstance(key, str):
            self.remove(key)
        else:
            raise TypeError(f"Token set indices must be int or str, not {type(key).__name__}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenSet):
            return NotImplemented
        return self._tokens == other._tokens

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._tokens!r})"
