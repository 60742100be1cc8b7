"""
Element model and sinks.

- Element / Attribute: live handles a token list can be bound to
- Sink: protocol for external string values
- MemorySink / AttributeSink: the two shipped sink implementations
"""

from tokenlist.dom.element import Attribute, Element
from tokenlist.dom.sink import AttributeSink, MemorySink, Sink

__all__ = [
    "Attribute",
    "AttributeSink",
    "Element",
    "MemorySink",
    "Sink",
]
