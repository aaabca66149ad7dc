"""
Order checking: cheap adjacent-pair scan first, full sort only when a
violation is suspected.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import List, Sequence, Tuple

from .comparator import CompareFn
from .descriptor import FieldDescriptor

Permutation = Tuple[int, ...]


def is_ordered(fields: Sequence[FieldDescriptor], compare: CompareFn) -> bool:
    """True if no adjacent pair compares out of order."""
    for i in range(1, len(fields)):
        if compare(fields[i - 1], fields[i]) > 0:
            return False
    return True


def sort_order(fields: Sequence[FieldDescriptor], compare: CompareFn) -> Permutation:
    """
    Stable sort of ``fields`` expressed as a permutation.

    ``order[k]`` is the index in ``fields`` of the entry that belongs at
    position ``k``. The descriptor sequence itself is never reordered.
    """
    key = cmp_to_key(lambda i, j: compare(fields[i], fields[j]))
    return tuple(sorted(range(len(fields)), key=key))


def moved_positions(order: Permutation) -> List[int]:
    """Positions whose occupant changes; compares indices, never values."""
    return [position for position, source in enumerate(order) if position != source]


def is_identity(order: Permutation) -> bool:
    return not moved_positions(order)


__all__ = ["Permutation", "is_ordered", "sort_order", "moved_positions", "is_identity"]
