"""
Generic ordering engine shared by every field-list shape.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..adapters.range_edits import Edit
from .checker import is_identity, is_ordered, sort_order
from .comparator import Comparator, OrderingPolicy
from .descriptor import FieldDescriptor
from .patch import FixStyle, RenderFn, synthesize

logger = logging.getLogger(__name__)


class OrderingEngine:
    """Checks a field list against a policy and, if needed, builds its fix."""

    def __init__(self, policy: OrderingPolicy, fix_style: FixStyle, separator: str = ", "):
        self.policy = policy
        self.comparator = Comparator(policy)
        self.fix_style = fix_style
        self.separator = separator

    def analyze(
        self,
        fields: Sequence[FieldDescriptor],
        render: RenderFn,
        fixable: bool = True,
    ) -> Optional[List[Edit]]:
        """
        Returns None when ``fields`` is already in canonical order,
        otherwise the edits that reorder it (empty when ``fixable`` is False).
        """
        self.comparator.prime(fields)
        if is_ordered(fields, self.comparator):
            return None

        order = sort_order(fields, self.comparator)
        if is_identity(order):
            # Unnamed entries can make an adjacent pair look unordered
            # while the stable sort keeps everything in place.
            logger.debug("Adjacent check failed but sort is identity; nothing to fix")
            return None

        logger.debug("Out of order: %s -> %s", [f.name for f in fields], [fields[i].name for i in order])
        if not fixable:
            return []
        return synthesize(fields, order, render, self.fix_style, self.separator)


__all__ = ["OrderingEngine"]
