from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Union

from ..types import Severity

DEFAULT_EXTENSIONS = [".ts", ".tsx", ".js", ".jsx", ".mts", ".cts", ".mjs", ".cjs"]

PresetName = Literal["recommended", "all", "none"]
# `sort-jsx-props: error`, `sort-jsx-props: {…options}` or an empty entry
RuleSetting = Union[Severity, Dict[str, Any], None]


@dataclass
class Config:
    extends: PresetName = "recommended"
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    # gitwildmatch patterns, on top of .gitignore
    exclude: List[str] = field(default_factory=list)
    rules: Dict[str, RuleSetting] = field(default_factory=dict)

    def normalized_extensions(self) -> set[str]:
        return {e.lower() if e.startswith(".") else f".{e.lower()}" for e in self.extensions}


def rule_options(setting: RuleSetting) -> Dict[str, Any]:
    """Raw option mapping of one `rules:` entry."""
    if setting is None:
        return {}
    if isinstance(setting, str):
        return {"severity": setting}
    return dict(setting)


__all__ = ["DEFAULT_EXTENSIONS", "PresetName", "RuleSetting", "Config", "rule_options"]
