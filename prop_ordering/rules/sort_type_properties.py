"""
sort-type-properties: property signatures of interfaces and object type aliases.
"""

from __future__ import annotations

from ..adapters.members import MemberShape
from .base import OrderingRule
from .options import RuleOptions


class SortTypeProperties(OrderingRule[RuleOptions]):
    name = "sort-type-properties"
    description = "Sort types and interfaces properties matching react/jsx-sort-props logic"
    shape = MemberShape()
    messages = {
        "interface": "Interface properties should be sorted according to the defined order.",
        "type": "Type properties should be sorted according to the defined order.",
    }


__all__ = ["SortTypeProperties"]
