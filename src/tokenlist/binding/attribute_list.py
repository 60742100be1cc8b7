"""
AttributeTokenSet - a TokenSet representing an attribute of an element.

On top of the token set engine it:
- seeds itself from the attribute's existing value,
- writes the serialized tokens back to the attribute after each change,
- renders itself as a ``name="value"`` attribute fragment.
"""

from __future__ import annotations

import html
import logging

from tokenlist.binding.target import BindingTarget, resolve_binding
from tokenlist.core.token_set import TokenSet
from tokenlist.core.validation import (
    TokenInput,
    normalize_tokens,
    split_whitespace,
    validate_token,
)
from tokenlist.dom.element import Attribute, Element
from tokenlist.dom.sink import Sink
from tokenlist.errors import NoSupportedTokensError
from tokenlist.models.preset import AttributePreset
from tokenlist.presets.loader import get_default_loader

logger = logging.getLogger(__name__)


class AttributeTokenSet(TokenSet):
    """
    A token set bound to a named attribute.

    When bound to a live attribute, the attribute's value is kept equal to
    the serialized tokens. An empty set never writes, so clearing the set
    leaves the attribute holding its last non-empty value.

    Example:
        >>> tags = AttributeTokenSet("body", "data-tags", ["foo", "baz", "qux"])
        >>> tags.to_attribute()
        'data-tags="foo baz qux"'
        >>> tags.with_leading_space()
        ' data-tags="foo baz qux"'
    """

    def __init__(
        self,
        element: Element | str,
        attribute: Attribute | str,
        tokens: TokenInput = (),
    ) -> None:
        """
        Create a bound token set.

        Args:
            element: Element name or live Element
            attribute: Attribute name or live Attribute node
            tokens: Extra tokens, appended after those already in the attribute

        Raises:
            InvalidBindingTargetError: If element or attribute has an unsupported type
            AttributeNotFoundError: If a live element lacks the named attribute
            OwnershipMismatchError: If the attribute node belongs to another element
        """
        self._setup(resolve_binding(element, attribute), tokens)

    @classmethod
    def from_sink(
        cls,
        attribute_name: str,
        sink: Sink,
        tokens: TokenInput = (),
    ) -> AttributeTokenSet:
        """
        Bind a token set to any sink.

        Args:
            attribute_name: Name used when rendering the attribute
            sink: Object with ``read()`` and ``write(value)``
            tokens: Extra tokens, appended after those already in the sink
        """
        token_set = cls.__new__(cls)
        token_set._setup(BindingTarget(attribute_name, sink=sink), tokens)
        return token_set

    def _setup(self, binding: BindingTarget, tokens: TokenInput) -> None:
        self._binding = binding
        super().__init__()

        seeds = split_whitespace(binding.read() or "")
        if tokens:
            seeds.extend(normalize_tokens((tokens,)))
        self._append(seeds)

        element = binding.element
        if isinstance(element, Element):
            preset = self.preset
            if preset and not preset.applies_to(element.tag_name):
                logger.warning(
                    "Attribute %r is not expected on <%s>",
                    binding.attribute_name,
                    element.tag_name,
                )

    # --- Binding ---

    @property
    def attribute_name(self) -> str | None:
        """Name of the represented attribute."""
        return self._binding.attribute_name

    @property
    def element(self) -> Element | str | None:
        """The represented element, or its name."""
        return self._binding.element

    @property
    def is_live(self) -> bool:
        """True if changes are written through to an external value."""
        return self._binding.is_live

    @property
    def length(self) -> int:
        """Number of tokens (DOM-style alias for count())."""
        return self.count()

    def _on_change(self) -> None:
        super()._on_change()
        if self._tokens and self._binding.is_live:
            value = self.value
            self._binding.write(value)
            logger.debug("Wrote %s=%r", self._binding.attribute_name, value)

    # --- Presets ---

    @property
    def preset(self) -> AttributePreset | None:
        """Preset describing the attribute, if one is known."""
        if not self.attribute_name:
            return None
        return get_default_loader().get_preset(self.attribute_name)

    def supports(self, token: str) -> bool:
        """
        Check whether ``token`` is one of the attribute's supported tokens.

        Raises:
            NoSupportedTokensError: If the attribute defines no supported tokens
        """
        validate_token(token)
        preset = self.preset
        if preset is None or not preset.has_supported_tokens:
            raise NoSupportedTokensError(self.attribute_name)
        return preset.supports(token)

    # --- Serialization ---

    def to_attribute(self) -> str:
        """
        Render as an attribute fragment.

        Returns:
            ``name="value"`` with the value HTML-escaped, or an empty string
            when the set is empty or the attribute has no name
        """
        if not self._tokens or not self.attribute_name:
            return ""
        return f'{self.attribute_name}="{html.escape(self.value, quote=True)}"'

    def with_leading_space(self) -> str:
        """Same as to_attribute(), prefixed with a space when non-empty."""
        fragment = self.to_attribute()
        return f" {fragment}" if fragment else ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.attribute_name!r}, {self._tokens!r})"
