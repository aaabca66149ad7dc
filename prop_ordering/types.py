from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, NewType, Tuple

from .adapters.range_edits import Edit

# ---- Aliases for clarity ----
Severity = Literal["off", "warn", "error"]
RuleName = NewType("RuleName", str)  # "sort-jsx-props", ...


@dataclass(frozen=True)
class Violation:
    """One out-of-order field list, with the edits that fix it."""
    rule: RuleName
    severity: Severity
    message: str
    # Character range of the reported node
    start_char: int
    end_char: int
    # 1-based positions
    line: int
    column: int
    end_line: int
    end_column: int
    edits: Tuple[Edit, ...] = field(default_factory=tuple)

    @property
    def is_error(self) -> bool:
        return self.severity == "error"

    @property
    def sort_key(self) -> Tuple[int, int, str]:
        return self.line, self.column, self.rule


@dataclass
class FixResult:
    """Outcome of multi-pass fixing of one text."""
    text: str
    fixed_count: int = 0
    passes: int = 0
    # Violations left after the last pass
    remaining: List[Violation] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.fixed_count > 0


__all__ = ["Severity", "RuleName", "Violation", "FixResult"]
