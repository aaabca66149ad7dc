"""
Patch synthesis: turn a target order into text edits.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, List, Sequence

from ..adapters.range_edits import Edit
from .checker import Permutation, moved_positions
from .descriptor import FieldDescriptor

RenderFn = Callable[[FieldDescriptor], str]


class FixStyle(Enum):
    """How a reordering is written back to the text."""
    JOINED = "joined"
    """One replacement from the first to the last entry, entries joined by a separator."""
    POSITIONAL = "positional"
    """One replacement per moved entry; untouched entries get no edit."""


def synthesize(
    fields: Sequence[FieldDescriptor],
    order: Permutation,
    render: RenderFn,
    style: FixStyle,
    separator: str = ", ",
) -> List[Edit]:
    """
    Build the edits that rewrite ``fields`` into ``order``.

    Args:
        fields: Entries in their original order
        order: Target permutation, see ``checker.sort_order``
        render: Returns the exact original text of an entry
        style: Joined or positional rewrite
        separator: Joiner for the joined style

    Returns:
        Edits against the original text; empty if nothing moves
    """
    moved = moved_positions(order)
    if not moved:
        return []

    if style is FixStyle.JOINED:
        text = separator.join(render(fields[source]) for source in order)
        return [Edit.replace(fields[0].start, fields[-1].end, text)]

    return [
        Edit.replace(fields[position].start, fields[position].end, render(fields[order[position]]))
        for position in moved
    ]


__all__ = ["FixStyle", "RenderFn", "synthesize"]
