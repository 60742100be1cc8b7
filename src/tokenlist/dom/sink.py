"""
Sinks - the external string values a bound token list writes through to.

Any object with ``read()`` and ``write(value)`` is a sink.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from tokenlist.dom.element import Attribute


@runtime_checkable
class Sink(Protocol):
    """A mutable string value that can be read and replaced."""

    def read(self) -> str | None:
        """Return the current value, if any."""
        ...

    def write(self, value: str) -> None:
        """Replace the current value."""
        ...


class MemorySink:
    """In-memory sink for callers without a live backing store."""

    def __init__(self, value: str | None = None) -> None:
        self.value = value

    def read(self) -> str | None:
        return self.value

    def write(self, value: str) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"MemorySink({self.value!r})"


class AttributeSink:
    """Sink backed by an Attribute node."""

    def __init__(self, attribute: Attribute) -> None:
        self.attribute = attribute

    def read(self) -> str | None:
        return self.attribute.value

    def write(self, value: str) -> None:
        self.attribute.value = value

    def __repr__(self) -> str:
        return f"AttributeSink({self.attribute!r})"
