"""
Element model - the live handles a token list can be bound to.

A deliberately small stand-in for a document model: an Element owns named
Attribute nodes, and each node knows its owner. Nothing here parses or
serializes markup.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

_WHITESPACE = re.compile(r"\s")


class Attribute:
    """
    A named, mutable string value owned by at most one element.

    The name is fixed at creation; the value can be reassigned freely.
    """

    def __init__(
        self,
        name: str,
        value: str = "",
        owner_element: Element | None = None,
    ) -> None:
        if not name or _WHITESPACE.search(name):
            raise ValueError(f"Invalid attribute name: {name!r}")
        self._name = name
        self._value = str(value)
        self._owner_element = owner_element

    @property
    def name(self) -> str:
        """Attribute name."""
        return self._name

    @property
    def value(self) -> str:
        """Current attribute value."""
        return self._value

    @value.setter
    def value(self, value: str) -> None:
        self._value = str(value)

    @property
    def owner_element(self) -> Element | None:
        """The element this attribute belongs to, if any."""
        return self._owner_element

    def __repr__(self) -> str:
        return f"Attribute({self._name!r}, {self._value!r})"


class Element:
    """An element with a tag name and a set of attribute nodes."""

    def __init__(self, tag_name: str, attributes: Mapping[str, str] | None = None) -> None:
        """
        Create an element.

        Args:
            tag_name: Element tag name (e.g., 'div', 'link')
            attributes: Initial attribute values by name
        """
        self.tag_name = tag_name
        self._attributes: dict[str, Attribute] = {}
        for name, value in (attributes or {}).items():
            self.set_attribute(name, value)

    @property
    def attributes(self) -> dict[str, str]:
        """Snapshot of attribute values by name."""
        return {name: node.value for name, node in self._attributes.items()}

    def get_attribute_node(self, name: str) -> Attribute | None:
        """Get the attribute node with the given name, or None."""
        return self._attributes.get(name)

    def get_attribute(self, name: str) -> str | None:
        """Get an attribute value, or None if the attribute does not exist."""
        node = self._attributes.get(name)
        return node.value if node is not None else None

    def has_attribute(self, name: str) -> bool:
        """Check whether the attribute exists."""
        return name in self._attributes

    def set_attribute(self, name: str, value: str = "") -> Attribute:
        """
        Set an attribute value, creating the node if needed.

        Existing nodes are updated in place so bound token lists keep
        seeing the same node.

        Returns:
            The attribute node
        """
        node = self._attributes.get(name)
        if node is None:
            node = Attribute(name, value, owner_element=self)
            self._attributes[name] = node
        else:
            node.value = value
        return node

    def remove_attribute(self, name: str) -> Attribute | None:
        """
        Detach an attribute node.

        Returns:
            The detached node (now ownerless), or None if absent
        """
        node = self._attributes.pop(name, None)
        if node is not None:
            node._owner_element = None
        return node

    def __repr__(self) -> str:
        return f"Element({self.tag_name!r}, {self.attributes!r})"
