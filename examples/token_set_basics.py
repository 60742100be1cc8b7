#!/usr/bin/env python3
"""
Example: TokenSet basics.

Walks through the core operations of an ordered set of tokens, the same
way DOMTokenList behaves in a browser.

Usage:
    python examples/token_set_basics.py
"""

from tokenlist import InvalidTokenError, TokenSet


def main() -> None:
    """Demonstrate the token set operations."""
    print("tokenlist TokenSet Demo")
    print("=" * 40)
    print()

    tokens = TokenSet(["foo", "baz", "qux"])
    print(f"Start:            {tokens.tokens}")

    tokens.add("foo not qux xor")
    print(f"add:              {tokens.tokens}")

    tokens.remove(["foo", "qux"])
    print(f"remove:           {tokens.tokens}")

    tokens.replace("not", "and")
    print(f"replace:          {tokens.tokens}")

    present = tokens.toggle("foo")
    print(f"toggle -> {present!s:<6}  {tokens.tokens}")

    present = tokens.toggle("foo")
    print(f"toggle -> {present!s:<6}  {tokens.tokens}")
    print()

    print(f"contains('and'):  {tokens.contains('and')}")
    print(f"item(1):          {tokens.item(1)!r}")
    print(f"str():            {str(tokens)!r}")
    print(f"count():          {tokens.count()}")
    print()

    # Bracket-style access
    tokens["extra"] = True
    tokens["extra"] = "renamed"
    print(f"sugar:            {tokens.tokens}")
    print()

    # Validation
    for bad in ["", "has space"]:
        try:
            tokens.add([bad])
        except InvalidTokenError as e:
            print(f"Rejected {bad!r}: {e}")


if __name__ == "__main__":
    main()
