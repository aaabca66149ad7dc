"""
Table-driven rule tests: valid sources must produce no violations,
invalid sources must produce the expected messages and fixed output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from prop_ordering.linter import Linter
from prop_ordering.rules import get_rule_class
from prop_ordering.types import FixResult, Violation


@dataclass
class Invalid:
    code: str
    output: str
    messages: List[str]
    options: Dict[str, Any] = field(default_factory=dict)
    ext: Optional[str] = None


def _linter(rule: str, options: Optional[Dict[str, Any]]) -> Linter:
    return Linter([get_rule_class(rule).bind(options or {})])


def lint(rule: str, code: str, options: Optional[Dict[str, Any]] = None, ext: str = "tsx") -> List[Violation]:
    return _linter(rule, options).lint_text(code, ext)


def fix(rule: str, code: str, options: Optional[Dict[str, Any]] = None, ext: str = "tsx") -> FixResult:
    return _linter(rule, options).fix_text(code, ext)


class RuleTester:
    def __init__(self, rule: str, ext: str = "tsx"):
        self.rule = rule
        self.ext = ext

    def assert_valid(self, code: str, options: Optional[Dict[str, Any]] = None, ext: Optional[str] = None) -> None:
        violations = lint(self.rule, code, options, ext or self.ext)
        assert violations == [], [v.message for v in violations]

    def assert_invalid(self, case: Invalid) -> None:
        ext = case.ext or self.ext
        violations = lint(self.rule, case.code, case.options, ext)
        assert [v.message for v in violations] == case.messages
        assert all(v.rule == self.rule for v in violations)

        result = fix(self.rule, case.code, case.options, ext)
        assert result.text == case.output
        # fixed output is stable
        assert lint(self.rule, result.text, case.options, ext) == []

    def run(self, valid: Sequence[str], invalid: Sequence[Invalid], options: Optional[Dict[str, Any]] = None) -> None:
        for code in valid:
            self.assert_valid(code, options)
        for case in invalid:
            self.assert_invalid(case)
