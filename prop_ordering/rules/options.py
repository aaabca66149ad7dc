"""
Rule option schemas.

Options left at None take the defaults of the rule they are given to
(see ``RuleDefaults``), so a single schema serves every rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..ordering.comparator import Placement, Stage
from ..types import Severity

DEFAULT_RESERVED_NAMES: Tuple[str, ...] = ("id", "key", "ref", "name", "type")
DEFAULT_CALLBACK_PREFIXES: Tuple[str, ...] = ("on", "set", "update", "handle", "render")
DEFAULT_CALLBACK_PATTERNS: Tuple[str, ...] = (
    "^on[A-Z]",
    "^set[A-Z]",
    "Callback$",
    "Handler$",
    "^handle[A-Z]",
)


@dataclass
class RuleOptions:
    """Options shared by all ordering rules."""
    severity: Severity = "warn"
    callbacks_last: bool = True
    sort_alphabetically: Optional[bool] = None
    no_sort_alphabetically: Optional[bool] = None  # inverse spelling of sort_alphabetically
    reserved_first: bool = True
    reserved_names: Optional[List[str]] = None
    # At most one of the two callback modes
    callback_prefixes: Optional[List[str]] = None
    callback_patterns: Optional[List[str]] = None
    shorthand: Optional[Placement] = None
    precedence: Optional[List[Stage]] = None


@dataclass
class JsxPropsOptions(RuleOptions):
    """Options of the JSX attribute rule."""
    ignore_case: bool = False
    locale: Optional[str] = None
    multiline: Placement = Placement.IGNORE


@dataclass(frozen=True)
class RuleDefaults:
    """Per-rule values for options the user did not set."""
    reserved_names: Tuple[str, ...] = DEFAULT_RESERVED_NAMES
    callback_prefixes: Optional[Tuple[str, ...]] = DEFAULT_CALLBACK_PREFIXES
    callback_patterns: Optional[Tuple[str, ...]] = None
    shorthand: Placement = Placement.LAST
    precedence: Tuple[Stage, ...] = (Stage.RESERVED, Stage.CALLBACKS, Stage.SHORTHAND)


__all__ = [
    "DEFAULT_RESERVED_NAMES",
    "DEFAULT_CALLBACK_PREFIXES",
    "DEFAULT_CALLBACK_PATTERNS",
    "RuleOptions",
    "JsxPropsOptions",
    "RuleDefaults",
]
