"""
Attribute binding - token sets that back an element attribute.

- AttributeTokenSet: TokenSet with write-through to an attribute
- ClassList / RelList: bound to the ``class`` and ``rel`` attributes
- BindingTarget / resolve_binding: construction-time resolution of
  element and attribute arguments
"""

from tokenlist.binding.attribute_list import AttributeTokenSet
from tokenlist.binding.named import ClassList, RelList
from tokenlist.binding.target import BindingTarget, resolve_binding

__all__ = [
    "AttributeTokenSet",
    "BindingTarget",
    "ClassList",
    "RelList",
    "resolve_binding",
]
