"""
Binding targets - where an attribute token list writes through to.

The element and attribute arguments of a bound token list are each either a
plain name or a live handle. They are resolved once, at construction, into a
BindingTarget.
"""

from __future__ import annotations

from dataclasses import dataclass

from tokenlist.dom.element import Attribute, Element
from tokenlist.dom.sink import AttributeSink, Sink
from tokenlist.errors import (
    AttributeNotFoundError,
    InvalidBindingTargetError,
    OwnershipMismatchError,
)


@dataclass(frozen=True)
class BindingTarget:
    """
    A resolved binding.

    ``sink`` is None for a name-only binding, in which case writes are inert.
    """

    attribute_name: str | None
    element: Element | str | None = None
    sink: Sink | None = None

    @property
    def is_live(self) -> bool:
        """True if writes reach an external value."""
        return self.sink is not None

    def read(self) -> str | None:
        """Current external value, if any."""
        return self.sink.read() if self.sink is not None else None

    def write(self, value: str) -> None:
        """Push a value to the sink (no-op when not live)."""
        if self.sink is not None:
            self.sink.write(value)


def resolve_binding(element: Element | str, attribute: Attribute | str) -> BindingTarget:
    """
    Resolve element and attribute arguments into a binding target.

    Args:
        element: Element name or live Element
        attribute: Attribute name or live Attribute node

    Returns:
        The resolved BindingTarget

    Raises:
        InvalidBindingTargetError: If either argument has an unsupported type
        AttributeNotFoundError: If a live element lacks the named attribute
        OwnershipMismatchError: If an attribute node is not owned by the element
    """
    if not isinstance(element, (str, Element)):
        raise InvalidBindingTargetError(
            f"Invalid element: must be a name or an Element, got {type(element).__name__}"
        )
    if not isinstance(attribute, (str, Attribute)):
        raise InvalidBindingTargetError(
            f"Invalid attribute: must be a name or an Attribute, got {type(attribute).__name__}"
        )

    if isinstance(element, Element):
        if isinstance(attribute, Attribute):
            if attribute.owner_element is not element:
                raise OwnershipMismatchError(
                    f"Attribute {attribute.name!r} does not belong to <{element.tag_name}>"
                )
            node = attribute
        else:
            found = element.get_attribute_node(attribute)
            if found is None:
                raise AttributeNotFoundError(attribute, element.tag_name)
            node = found
        return BindingTarget(node.name, element, AttributeSink(node))

    if isinstance(attribute, Attribute):
        return BindingTarget(attribute.name, element, AttributeSink(attribute))

    return BindingTarget(attribute, element)
