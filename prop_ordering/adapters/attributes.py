"""
JSX attribute lists.

Only plain ``name=value`` and shorthand ``name`` attributes are ordered;
spread attributes (``{...rest}``) are not part of the list and keep
their position.
"""

from __future__ import annotations

from typing import Optional

from ..ordering.descriptor import FieldDescriptor
from ..ordering.patch import FixStyle
from .base import FieldListMatch, ShapeAdapter, named_children
from .tree_sitter_support import Node, TreeSitterDocument


def _attribute_name(attribute: Node, doc: TreeSitterDocument) -> Optional[str]:
    children = named_children(attribute)
    if not children:
        return None
    # property_identifier, or jsx_namespace_name for xlink:href
    return doc.get_node_text(children[0])


def _describe_attribute(attribute: Node, doc: TreeSitterDocument) -> FieldDescriptor:
    start_line, end_line = doc.get_line_range(attribute)
    return FieldDescriptor(
        name=_attribute_name(attribute, doc),
        source_range=doc.get_node_range(attribute),
        is_multiline=start_line != end_line,
        has_explicit_value=any(c.type == "=" for c in attribute.children),
    )


class AttributeShape(ShapeAdapter):
    """Attributes of an opening or self-closing JSX tag."""

    name = "attributes"
    node_types = frozenset({"jsx_opening_element", "jsx_self_closing_element"})
    fix_style = FixStyle.POSITIONAL

    def extract(self, node: Node, doc: TreeSitterDocument) -> Optional[FieldListMatch]:
        attributes = [c for c in node.named_children if c.type == "jsx_attribute"]
        if len(attributes) < 2:
            return None

        return FieldListMatch(
            fields=tuple(_describe_attribute(a, doc) for a in attributes),
            report_node=node,
            container="element",
        )


__all__ = ["AttributeShape"]
