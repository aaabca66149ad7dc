"""
sort-component-props: destructured props of function components.
"""

from __future__ import annotations

from ..adapters.parameters import ParameterShape
from .base import OrderingRule
from .options import RuleOptions


class SortComponentProps(OrderingRule[RuleOptions]):
    name = "sort-component-props"
    description = "Sort destructured props in React components matching interface property ordering"
    shape = ParameterShape()
    messages = {
        "component": "React component props should be sorted according to the defined order.",
    }


__all__ = ["SortComponentProps"]
