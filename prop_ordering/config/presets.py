"""
Built-in rule presets.
"""

from __future__ import annotations

from typing import Any, Dict

from ..rules import list_rules
from .model import PresetName

_RECOMMENDED_OPTIONS: Dict[str, Any] = {
    "severity": "warn",
    "callbacks_last": True,
    "no_sort_alphabetically": False,
    "reserved_first": True,
    "reserved_names": ["id", "key", "ref", "name", "type"],
    "callback_prefixes": ["on", "set", "update", "handle", "render"],
}

RECOMMENDED: Dict[str, Dict[str, Any]] = {
    "sort-type-properties": dict(_RECOMMENDED_OPTIONS),
    "sort-component-props": dict(_RECOMMENDED_OPTIONS),
}


def preset_rules(name: PresetName) -> Dict[str, Dict[str, Any]]:
    """Rule name → raw options of a preset (fresh copies)."""
    if name == "recommended":
        return {rule: dict(opts) for rule, opts in RECOMMENDED.items()}
    if name == "all":
        return {rule: {"severity": "warn"} for rule in list_rules()}
    return {}


__all__ = ["RECOMMENDED", "preset_rules"]
