"""
Name-based field classification.

These are heuristics over the field name string, not type facts: a
"callback" is whatever looks like one by naming convention. Nothing here
ever tries to resolve what an identifier actually refers to.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Pattern, Tuple

from .descriptor import FieldDescriptor

# Always active in prefix mode; pattern mode must encode suffixes itself.
CALLBACK_SUFFIXES: Tuple[str, ...] = ("Callback", "Handler")


class CallbackMode(Enum):
    """How callback-like names are recognised."""
    PREFIXES = "prefixes"
    PATTERNS = "patterns"


@dataclass(frozen=True)
class NameClassifier:
    """Pure predicates over field names."""

    reserved_names: FrozenSet[str] = frozenset()
    mode: CallbackMode = CallbackMode.PREFIXES
    callback_prefixes: Tuple[str, ...] = ()
    callback_patterns: Tuple[Pattern[str], ...] = ()

    def __post_init__(self):
        if self.mode is CallbackMode.PREFIXES and self.callback_patterns:
            raise ValueError("callback patterns given to a prefix-mode classifier")
        if self.mode is CallbackMode.PATTERNS and self.callback_prefixes:
            raise ValueError("callback prefixes given to a pattern-mode classifier")

    @classmethod
    def with_prefixes(cls, reserved: Iterable[str], prefixes: Iterable[str]) -> NameClassifier:
        return cls(
            reserved_names=frozenset(reserved),
            mode=CallbackMode.PREFIXES,
            callback_prefixes=tuple(prefixes),
        )

    @classmethod
    def with_patterns(cls, reserved: Iterable[str], patterns: Iterable[str]) -> NameClassifier:
        """
        Build a pattern-mode classifier.

        Raises:
            re.error: If one of the patterns does not compile
        """
        return cls(
            reserved_names=frozenset(reserved),
            mode=CallbackMode.PATTERNS,
            callback_patterns=tuple(re.compile(p) for p in patterns),
        )

    def is_reserved(self, name: str) -> bool:
        return name in self.reserved_names

    def is_callback(self, name: str) -> bool:
        """
        Guess whether a field holds a callback.

        Prefix mode: ``onClick``, ``setPage``, ``renderRow`` match (prefix
        followed by an uppercase character), ``settings`` and ``one`` do not.
        Names ending in ``Callback`` or ``Handler`` always match.
        Pattern mode: any configured expression found in the name.
        """
        if self.mode is CallbackMode.PATTERNS:
            return any(p.search(name) for p in self.callback_patterns)

        for prefix in self.callback_prefixes:
            if (
                len(name) > len(prefix)
                and name.startswith(prefix)
                and name[len(prefix)].isupper()
            ):
                return True

        return name.endswith(CALLBACK_SUFFIXES)

    @staticmethod
    def is_shorthand_like(descriptor: FieldDescriptor) -> bool:
        """
        Defaulted destructuring entry, optional member, or attribute
        written without a value.
        """
        return descriptor.has_default_or_optional or not descriptor.has_explicit_value


__all__ = ["CALLBACK_SUFFIXES", "CallbackMode", "NameClassifier"]
