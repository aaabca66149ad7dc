from __future__ import annotations

# Public API of the ordering core:
#  • descriptors and classification predicates
#  • the comparator chain and its policy
#  • order checking, patch synthesis and the engine tying them together
from .checker import is_ordered, moved_positions, sort_order
from .classifier import CallbackMode, NameClassifier
from .comparator import Collator, Comparator, OrderingPolicy, Placement, Stage
from .descriptor import FieldDescriptor, FieldKind
from .engine import OrderingEngine
from .patch import FixStyle, synthesize

__all__ = [
    "CallbackMode",
    "Collator",
    "Comparator",
    "FieldDescriptor",
    "FieldKind",
    "FixStyle",
    "NameClassifier",
    "OrderingEngine",
    "OrderingPolicy",
    "Placement",
    "Stage",
    "is_ordered",
    "moved_positions",
    "sort_order",
    "synthesize",
]
