"""
Linter host: dispatches syntax nodes to the active rules and applies
their fixes.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from .adapters.range_edits import RangeEditor
from .adapters.tree_sitter_support import TreeSitterDocument, create_document
from .rules.base import OrderingRule
from .types import FixResult, Violation

logger = logging.getLogger(__name__)

MAX_FIX_PASSES = 10


class Linter:
    """Runs a set of bound rules over source texts."""

    def __init__(self, rules: Sequence[OrderingRule]):
        self.rules = list(rules)
        self._dispatch: Dict[str, List[OrderingRule]] = {}
        for rule in self.rules:
            for node_type in sorted(rule.node_types):
                self._dispatch.setdefault(node_type, []).append(rule)

    def lint_document(self, doc: TreeSitterDocument) -> List[Violation]:
        violations: List[Violation] = []
        if not self._dispatch:
            return violations

        for node in doc.walk_tree():
            if not node.is_named:
                continue
            rules = self._dispatch.get(node.type)
            if not rules:
                continue
            # A fix must never rewrite text the parser did not understand.
            if node.has_error:
                logger.debug("Skipping %s at line %d: contains syntax errors", node.type, node.start_point[0] + 1)
                continue
            for rule in rules:
                violation = rule.visit(node, doc)
                if violation is not None:
                    violations.append(violation)

        violations.sort(key=lambda v: v.sort_key)
        return violations

    def lint_text(self, text: str, ext: str, path: Optional[str] = None) -> List[Violation]:
        """
        Parse ``text`` with the grammar of ``ext`` and return its violations
        ordered by position.
        """
        doc = create_document(text, ext)
        if doc.has_error():
            logger.debug("%s: parsed with syntax errors", path or "<text>")
        return self.lint_document(doc)

    def fix_text(self, text: str, ext: str, path: Optional[str] = None) -> FixResult:
        """
        Apply fixes until the text is stable.

        Every pass lints the current text and applies each fix that does
        not overlap a fix already taken in that pass; overlapping fixes are
        picked up by the next pass on the re-parsed text.
        """
        result = FixResult(text=text)
        for _ in range(MAX_FIX_PASSES):
            violations = self.lint_text(result.text, ext, path)
            fixable = [v for v in violations if v.edits]
            if not fixable:
                result.remaining = violations
                return result

            editor = RangeEditor(result.text)
            accepted = sum(1 for v in fixable if editor.add_fix(v.edits))
            new_text, stats = editor.apply_edits()
            result.passes += 1
            logger.debug(
                "%s: pass %d applied %d fix(es), %d edit(s)",
                path or "<text>", result.passes, accepted, stats["edits_applied"],
            )
            if new_text == result.text:
                result.remaining = violations
                return result
            result.text = new_text
            result.fixed_count += accepted

        result.remaining = self.lint_text(result.text, ext, path)
        logger.debug("%s: stopped after %d passes", path or "<text>", result.passes)
        return result


__all__ = ["MAX_FIX_PASSES", "Linter"]
