"""
Member lists of structural types: interface bodies and type aliases of
object-literal types.

Only property signatures take part in ordering. Method, call, construct
and index signatures are left where they are.
"""

from __future__ import annotations

from typing import Optional

from ..ordering.descriptor import FieldDescriptor
from ..ordering.patch import FixStyle
from .base import FieldListMatch, ShapeAdapter, key_name
from .tree_sitter_support import Node, TreeSitterDocument


def _object_type_of(node: Node) -> Optional[Node]:
    if node.type == "interface_declaration":
        body = node.child_by_field_name("body")
        if body is not None and body.type in ("interface_body", "object_type"):
            return body
        return None
    if node.type == "type_alias_declaration":
        value = node.child_by_field_name("value")
        if value is not None and value.type == "object_type":
            return value
    return None


def _describe_property(signature: Node, doc: TreeSitterDocument) -> FieldDescriptor:
    return FieldDescriptor(
        name=key_name(signature.child_by_field_name("name"), doc),
        source_range=doc.get_node_range(signature),
        has_default_or_optional=any(c.type == "?" for c in signature.children),
    )


class MemberShape(ShapeAdapter):
    """Property signatures of an interface or object type alias."""

    name = "members"
    node_types = frozenset({"interface_declaration", "type_alias_declaration"})
    fix_style = FixStyle.POSITIONAL

    def extract(self, node: Node, doc: TreeSitterDocument) -> Optional[FieldListMatch]:
        body = _object_type_of(node)
        if body is None:
            return None

        signatures = [c for c in body.named_children if c.type == "property_signature"]
        if len(signatures) < 2:
            return None

        return FieldListMatch(
            fields=tuple(_describe_property(s, doc) for s in signatures),
            report_node=node,
            container="interface" if node.type == "interface_declaration" else "type",
        )


__all__ = ["MemberShape"]
