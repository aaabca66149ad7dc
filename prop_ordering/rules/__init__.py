from __future__ import annotations

# Public API of rules package:
#  • get_rule_class: lazy retrieval of a rule class by name
#  • list_rules: names of the built-in rules
from .registry import get_rule_class, list_rules, register_lazy

__all__ = ["get_rule_class", "list_rules", "register_lazy"]

# ---- Lightweight (lazy) registration of built-in rules --------------------
# No heavy module imports here: only module:class strings.
register_lazy(name="sort-component-props", module=".sort_component_props", class_name="SortComponentProps")
register_lazy(name="sort-jsx-props", module=".sort_jsx_props", class_name="SortJsxProps")
register_lazy(name="sort-type-properties", module=".sort_type_properties", class_name="SortTypeProperties")
