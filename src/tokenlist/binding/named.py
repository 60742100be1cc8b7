"""
Named attribute lists.

Equivalent to AttributeTokenSet(element, "<name>", tokens) for the
attributes that DOM elements expose directly (``classList``, ``relList``).
"""

from __future__ import annotations

from tokenlist.binding.attribute_list import AttributeTokenSet
from tokenlist.constants import AttributeName
from tokenlist.core.validation import TokenInput
from tokenlist.dom.element import Element


class ClassList(AttributeTokenSet):
    """Token list for the ``class`` attribute of an element."""

    def __init__(self, element: Element | str, tokens: TokenInput = ()) -> None:
        super().__init__(element, AttributeName.CLASS.value, tokens)


class RelList(AttributeTokenSet):
    """Token list for the ``rel`` attribute of a link, anchor, area or form."""

    def __init__(self, element: Element | str, tokens: TokenInput = ()) -> None:
        super().__init__(element, AttributeName.REL.value, tokens)
