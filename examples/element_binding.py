#!/usr/bin/env python3
"""
Example: Binding token lists to element attributes.

Shows write-through to a live attribute, attribute rendering, the
empty-set quirk, and preset-backed supports().

Usage:
    python examples/element_binding.py
"""

import logging

from tokenlist import AttributeTokenSet, ClassList, Element, MemorySink, RelList

logging.basicConfig(level=logging.INFO)


def main() -> None:
    """Demonstrate attribute binding."""
    print("tokenlist Binding Demo")
    print("=" * 40)
    print()

    # Name-only binding: rendering without a live element
    tags = AttributeTokenSet("body", "data-tags", ["foo", "baz", "qux"])
    print(f"to_attribute():       {tags.to_attribute()!r}")
    print(f"with_leading_space(): {tags.with_leading_space()!r}")
    print()

    # Live binding: the attribute follows the token list
    body = Element("body", {"class": "a b"})
    classes = ClassList(body, "c")
    print(f"Seeded classes:       {classes.tokens}")
    print(f"Attribute value:      {body.get_attribute('class')!r}")

    classes.toggle("dark")
    print(f"After toggle('dark'): {body.get_attribute('class')!r}")

    classes.clear()
    print(f"After clear():        {body.get_attribute('class')!r} (empty sets never write)")
    print()

    # Any sink works
    sink = MemorySink("x y")
    custom = AttributeTokenSet.from_sink("data-flags", sink, "z")
    custom.remove("x")
    print(f"MemorySink value:     {sink.read()!r} ({custom.length} tokens)")
    print()

    # Supported tokens come from the preset library
    link = Element("link", {"rel": "stylesheet"})
    rels = RelList(link)
    for token in ["preload", "made-up"]:
        print(f"rel supports {token!r}: {rels.supports(token)}")


if __name__ == "__main__":
    main()
