"""
sort-jsx-props: attributes of JSX tags.
"""

from __future__ import annotations

from typing import Any, Dict

from ..adapters.attributes import AttributeShape
from ..errors import ConfigError
from ..ordering.comparator import Collator, Placement, Stage
from .base import OrderingRule
from .options import (
    DEFAULT_CALLBACK_PATTERNS,
    DEFAULT_RESERVED_NAMES,
    JsxPropsOptions,
    RuleDefaults,
)


class SortJsxProps(OrderingRule[JsxPropsOptions]):
    name = "sort-jsx-props"
    description = "Sort JSX props with enhanced callback detection"
    shape = AttributeShape()
    defaults = RuleDefaults(
        reserved_names=DEFAULT_RESERVED_NAMES + ("className", "style"),
        callback_prefixes=None,
        callback_patterns=DEFAULT_CALLBACK_PATTERNS,
        shorthand=Placement.FIRST,
        precedence=(Stage.RESERVED, Stage.SHORTHAND, Stage.CALLBACKS),
    )
    messages = {
        "element": "JSX props should be sorted according to the defined order.",
    }

    def policy_overrides(self) -> Dict[str, Any]:
        opts = self.options
        try:
            collator = Collator(ignore_case=opts.ignore_case, locale=opts.locale)
        except ValueError as e:
            raise ConfigError(f"$.rules.{self.name}.locale: {e}") from e
        return {"multiline": opts.multiline, "collator": collator}


__all__ = ["SortJsxProps"]
