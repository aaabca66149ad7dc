from __future__ import annotations

# Public API of adapters package:
#  • create_document — parse source text with the grammar matching its extension
#  • shape adapters — field-list extraction for each syntactic shape
from .attributes import AttributeShape
from .base import FieldListMatch, ShapeAdapter
from .members import MemberShape
from .parameters import ParameterShape
from .tree_sitter_support import TreeSitterDocument, create_document

__all__ = [
    "AttributeShape",
    "FieldListMatch",
    "MemberShape",
    "ParameterShape",
    "ShapeAdapter",
    "TreeSitterDocument",
    "create_document",
]
