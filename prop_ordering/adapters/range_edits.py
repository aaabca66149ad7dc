"""
Range-based text editing for fixes.
Edits address character positions of the original text and are applied
from the end of the text to the beginning, so earlier offsets never drift.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextRange:
    """Represents a range in text by character positions."""
    start_char: int
    end_char: int

    def __post_init__(self):
        if self.start_char > self.end_char:
            raise ValueError(f"Invalid range: start_char ({self.start_char}) > end_char ({self.end_char})")

    @property
    def length(self) -> int:
        return self.end_char - self.start_char

    def overlaps(self, other: TextRange) -> bool:
        """Check if this range overlaps with another."""
        return not (self.end_char <= other.start_char or other.end_char <= self.start_char)


@dataclass(frozen=True)
class Edit:
    """Single replacement of a character range."""
    range: TextRange
    replacement: str

    @classmethod
    def replace(cls, start_char: int, end_char: int, replacement: str) -> Edit:
        return cls(TextRange(start_char, end_char), replacement)


def merge_edits(original_text: str, edits: Sequence[Edit]) -> Edit:
    """
    Merge the edits of one fix into a single replacement covering all of them.
    Text between the edits is carried over unchanged.

    Raises:
        ValueError: If the edits overlap each other or the list is empty
    """
    if not edits:
        raise ValueError("Cannot merge an empty list of edits")

    ordered = sorted(edits, key=lambda e: e.range.start_char)
    parts: List[str] = []
    cursor = ordered[0].range.start_char
    for edit in ordered:
        if edit.range.start_char < cursor:
            raise ValueError(f"Overlapping edits in one fix at {edit.range.start_char}")
        parts.append(original_text[cursor:edit.range.start_char])
        parts.append(edit.replacement)
        cursor = edit.range.end_char

    return Edit.replace(ordered[0].range.start_char, cursor, "".join(parts))


class RangeEditor:
    """
    Collects fixes against one original text and applies them together.

    A fix is accepted atomically: all of its edits or none. When a fix
    overlaps an already accepted one, the first accepted fix wins and the
    newcomer is rejected (the caller re-lints and retries it later).
    """

    def __init__(self, original_text: str):
        self.original_text = original_text
        self.edits: List[Edit] = []

    def add_fix(self, edits: Sequence[Edit]) -> bool:
        """Add a fix; returns False if it conflicts with an accepted one."""
        merged = merge_edits(self.original_text, edits)
        for existing in self.edits:
            if merged.range.overlaps(existing.range):
                logger.debug(
                    "Fix at %d..%d deferred: overlaps accepted fix at %d..%d",
                    merged.range.start_char, merged.range.end_char,
                    existing.range.start_char, existing.range.end_char,
                )
                return False
        self.edits.append(merged)
        return True

    def validate_edits(self) -> List[str]:
        """Validate that all edits are within bounds."""
        errors = []
        for i, edit in enumerate(self.edits):
            if edit.range.start_char < 0:
                errors.append(f"Edit {i}: start_char ({edit.range.start_char}) is negative")
            if edit.range.end_char > len(self.original_text):
                errors.append(f"Edit {i}: end_char ({edit.range.end_char}) exceeds text length ({len(self.original_text)})")
        return errors

    def apply_edits(self) -> Tuple[str, Dict[str, Any]]:
        """
        Apply all edits and return the modified text and statistics.

        Returns:
            Tuple of (modified_text, statistics)
        """
        validation_errors = self.validate_edits()
        if validation_errors:
            raise ValueError(f"Edit validation failed: {'; '.join(validation_errors)}")

        stats = {"edits_applied": len(self.edits), "chars_removed": 0, "chars_added": 0}
        if not self.edits:
            return self.original_text, stats

        result_text = self.original_text
        for edit in sorted(self.edits, key=lambda e: e.range.start_char, reverse=True):
            stats["chars_removed"] += edit.range.length
            stats["chars_added"] += len(edit.replacement)
            result_text = result_text[:edit.range.start_char] + edit.replacement + result_text[edit.range.end_char:]

        return result_text, stats


__all__ = ["TextRange", "Edit", "merge_edits", "RangeEditor"]
