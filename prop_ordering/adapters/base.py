"""
Shape adapters: extraction of orderable field lists from syntax nodes.

Each adapter handles one syntactic shape and is selected by the node
types the linter host presents to it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, FrozenSet, Optional, Tuple

from ..ordering.descriptor import FieldDescriptor
from ..ordering.patch import FixStyle
from .tree_sitter_support import Node, TreeSitterDocument

COMMENT_TYPES = frozenset({"comment", "html_comment"})


@dataclass(frozen=True)
class FieldListMatch:
    """Field list found on a node, ready for ordering."""

    fields: Tuple[FieldDescriptor, ...]
    report_node: Node
    container: str
    """Kind of the owning construct: "component", "element", "interface", "type"."""
    is_component: bool = False
    """Advisory component heuristic (parameter shape only)."""
    fixable: bool = True
    """False when rewriting the list would drop text between its entries."""


class ShapeAdapter(ABC):
    """Base class of field-list shape adapters."""

    #: Shape name used in logs
    name: ClassVar[str] = "base"
    #: Node types whose visits this adapter handles
    node_types: ClassVar[FrozenSet[str]] = frozenset()
    #: How a reordering of this shape is written back
    fix_style: ClassVar[FixStyle] = FixStyle.POSITIONAL

    @abstractmethod
    def extract(self, node: Node, doc: TreeSitterDocument) -> Optional[FieldListMatch]:
        """
        Extract the orderable field list of ``node``.

        Returns:
            The match, or None when the node carries fewer than two
            orderable entries or is not of this shape
        """
        pass


# ---- helpers shared by the shapes ----

def named_children(node: Node):
    """Named children without comments."""
    return [c for c in node.named_children if c.type not in COMMENT_TYPES]


def key_name(node: Optional[Node], doc: TreeSitterDocument) -> Optional[str]:
    """
    Static name of a property key.
    Identifiers and literal keys have one; computed keys do not.
    """
    if node is None:
        return None
    if node.type in (
        "property_identifier",
        "shorthand_property_identifier_pattern",
        "private_property_identifier",
        "identifier",
        "number",
    ):
        return doc.get_node_text(node)
    if node.type == "string":
        text = doc.get_node_text(node)
        return text[1:-1] if len(text) >= 2 else None
    return None


__all__ = [
    "COMMENT_TYPES",
    "FieldListMatch",
    "ShapeAdapter",
    "named_children",
    "key_name",
]
