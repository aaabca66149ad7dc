"""
Multi-criterion field comparator.

The comparator is a chain of tie-break stages. Each enabled stage either
decides (-1 / +1) or falls through to the next one; disabled stages are
not part of the chain at all. The chain is shared by every field-list
shape, only the policy differs.
"""

from __future__ import annotations

import locale as _locale
import logging
import threading
import unicodedata
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from functools import cmp_to_key
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from .classifier import NameClassifier
from .descriptor import FieldDescriptor

logger = logging.getLogger(__name__)

CompareFn = Callable[[FieldDescriptor, FieldDescriptor], int]


class Placement(Enum):
    """Where entries flagged by a boolean stage go."""
    FIRST = "first"
    LAST = "last"
    IGNORE = "ignore"


class Stage(Enum):
    """Classifier stages whose relative order is configurable."""
    RESERVED = "reserved"
    SHORTHAND = "shorthand"
    CALLBACKS = "callbacks"


DEFAULT_PRECEDENCE: Tuple[Stage, ...] = (Stage.RESERVED, Stage.CALLBACKS, Stage.SHORTHAND)


def complete_precedence(stages: Tuple[Stage, ...], fallback: Tuple[Stage, ...] = DEFAULT_PRECEDENCE) -> Tuple[Stage, ...]:
    """
    Append the stages missing from ``stages`` in their ``fallback`` order.

    Raises:
        ValueError: If a stage is listed twice
    """
    if len(set(stages)) != len(stages):
        raise ValueError(f"duplicate stage in precedence: {[s.value for s in stages]}")
    return tuple(stages) + tuple(s for s in fallback if s not in stages)


# ============= Collation =============

# LC_COLLATE is process-wide: one switch at a time
_LOCALE_LOCK = threading.Lock()


def _posix_locale_candidates(name: str) -> List[str]:
    base = name.replace("-", "_")
    if "." in base:
        return [base]
    return [f"{base}.UTF-8", f"{base}.utf8", base]


@contextmanager
def _collate_locale(name: str) -> Iterator[None]:
    """Temporarily switch LC_COLLATE; restores the previous value on exit."""
    with _LOCALE_LOCK:
        previous = _locale.setlocale(_locale.LC_COLLATE)
        last_error: Optional[Exception] = None
        for candidate in _posix_locale_candidates(name):
            try:
                _locale.setlocale(_locale.LC_COLLATE, candidate)
                break
            except _locale.Error as e:
                last_error = e
        else:
            raise ValueError(f"unsupported locale {name!r}: {last_error}")
        try:
            yield
        finally:
            _locale.setlocale(_locale.LC_COLLATE, previous)


def _root_collation_key(text: str) -> Tuple[str, str, str]:
    # Primary: letters without accents or case; secondary: accents;
    # tertiary: lowercase before uppercase.
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), decomposed.casefold(), text.swapcase()


@dataclass(frozen=True)
class Collator:
    """
    Locale-aware string comparison for the alphabetical stage.

    Without a locale the comparison follows root-collation rules
    (case and accents only break ties). With a locale the platform
    collation tables are used through ``locale.strxfrm``; keys are
    computed once per name and cached, so the locale is switched once
    per ``prime`` call instead of on every comparison.
    """

    ignore_case: bool = False
    locale: Optional[str] = None
    _keys: Dict[str, tuple] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.locale:
            # Fail at activation time rather than on the first comparison.
            with _collate_locale(self.locale):
                pass

    def prime(self, texts: Iterable[str]) -> None:
        """Compute the keys of ``texts`` under a single locale switch."""
        if not self.locale:
            return
        missing = {t for t in texts if t not in self._keys}
        if not missing:
            return
        with _collate_locale(self.locale):
            for text in missing:
                self._keys[text] = self._locale_key(text)

    def _locale_key(self, text: str) -> tuple:
        folded = text.lower() if self.ignore_case else text
        return _locale.strxfrm(folded), _root_collation_key(folded)

    def _key(self, text: str):
        if self.locale:
            key = self._keys.get(text)
            if key is None:
                self.prime((text,))
                key = self._keys[text]
            return key
        if self.ignore_case:
            text = text.lower()
        return _root_collation_key(text)

    def compare(self, a: str, b: str) -> int:
        ka, kb = self._key(a), self._key(b)
        if ka < kb:
            return -1
        if ka > kb:
            return 1
        return 0


# ============= Policy and comparator =============

@dataclass(frozen=True)
class OrderingPolicy:
    """Complete, immutable description of one canonical order."""

    classifier: NameClassifier = field(default_factory=NameClassifier)
    reserved_first: bool = True
    callbacks_last: bool = True
    sort_alphabetically: bool = True
    shorthand: Placement = Placement.IGNORE
    multiline: Placement = Placement.IGNORE
    precedence: Tuple[Stage, ...] = DEFAULT_PRECEDENCE
    collator: Collator = field(default_factory=Collator)


def _split(a_flag: bool, b_flag: bool, flagged_first: bool) -> int:
    if a_flag and not b_flag:
        return -1 if flagged_first else 1
    if not a_flag and b_flag:
        return 1 if flagged_first else -1
    return 0


class Comparator:
    """
    Total preorder over field descriptors built from an ``OrderingPolicy``.

    Stage order: rest pin, multiline, the configurable classifier stages
    (reserved / shorthand / callbacks in ``policy.precedence`` order),
    alphabetical fallback. A field without a name yields no decision.
    """

    def __init__(self, policy: OrderingPolicy):
        self.policy = policy
        self._stages: List[CompareFn] = self._build_stages()

    def _build_stages(self) -> List[CompareFn]:
        policy = self.policy
        stages: List[CompareFn] = []

        if policy.multiline is not Placement.IGNORE:
            stages.append(self._compare_multiline)

        for stage in policy.precedence:
            if stage is Stage.RESERVED and policy.reserved_first:
                stages.append(self._compare_reserved)
            elif stage is Stage.SHORTHAND and policy.shorthand is not Placement.IGNORE:
                stages.append(self._compare_shorthand)
            elif stage is Stage.CALLBACKS and policy.callbacks_last:
                stages.append(self._compare_callbacks)

        if policy.sort_alphabetically:
            stages.append(self._compare_names)

        logger.debug("Comparator stages: %s", [s.__name__ for s in stages])
        return stages

    # --- stages ---

    def _compare_multiline(self, a: FieldDescriptor, b: FieldDescriptor) -> int:
        return _split(a.is_multiline, b.is_multiline, self.policy.multiline is Placement.FIRST)

    def _compare_reserved(self, a: FieldDescriptor, b: FieldDescriptor) -> int:
        is_reserved = self.policy.classifier.is_reserved
        return _split(is_reserved(a.name), is_reserved(b.name), True)

    def _compare_shorthand(self, a: FieldDescriptor, b: FieldDescriptor) -> int:
        is_shorthand = self.policy.classifier.is_shorthand_like
        return _split(is_shorthand(a), is_shorthand(b), self.policy.shorthand is Placement.FIRST)

    def _compare_callbacks(self, a: FieldDescriptor, b: FieldDescriptor) -> int:
        is_callback = self.policy.classifier.is_callback
        return _split(is_callback(a.name), is_callback(b.name), False)

    def _compare_names(self, a: FieldDescriptor, b: FieldDescriptor) -> int:
        return self.policy.collator.compare(a.name, b.name)

    # --- entry points ---

    def prime(self, fields: Iterable[FieldDescriptor]) -> None:
        """Precompute collation keys for the names of one field list."""
        if self.policy.sort_alphabetically:
            self.policy.collator.prime(f.name for f in fields if f.name is not None)

    def compare(self, a: FieldDescriptor, b: FieldDescriptor) -> int:
        # Rest collectors are pinned after every named entry.
        if a.is_rest or b.is_rest:
            return _split(a.is_rest, b.is_rest, False)

        if a.name is None or b.name is None:
            return 0

        for stage in self._stages:
            result = stage(a, b)
            if result:
                return result
        return 0

    __call__ = compare

    @property
    def sort_key(self):
        """Key function for ``sorted``."""
        return cmp_to_key(self.compare)


__all__ = [
    "Placement",
    "Stage",
    "DEFAULT_PRECEDENCE",
    "complete_precedence",
    "Collator",
    "OrderingPolicy",
    "Comparator",
]
