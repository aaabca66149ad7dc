"""
Field descriptors: the orderable units extracted from a field list.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple


class FieldKind(Enum):
    """Kind of an entry in a field list."""
    NAMED = "named"
    REST = "rest"


@dataclass(frozen=True)
class FieldDescriptor:
    """
    One orderable entry of a field list.

    Descriptors are created fresh per node visit and are never rebuilt
    from their semantic fields: the patch synthesizer only relocates
    the original text covered by ``source_range``.
    """

    name: Optional[str]
    """Field name; None for rest collectors and computed keys."""

    source_range: Tuple[int, int]
    """Character offsets (start, end) of the entry in the original text."""

    kind: FieldKind = FieldKind.NAMED

    has_default_or_optional: bool = False
    """Destructured default value or declared-optional member."""

    is_multiline: bool = False
    """Entry spans more than one source line (tag attributes only)."""

    has_explicit_value: bool = True
    """False for a tag attribute written without ``=value``."""

    @property
    def is_rest(self) -> bool:
        return self.kind is FieldKind.REST

    @property
    def start(self) -> int:
        return self.source_range[0]

    @property
    def end(self) -> int:
        return self.source_range[1]


FieldList = Sequence[FieldDescriptor]


__all__ = ["FieldKind", "FieldDescriptor", "FieldList"]
