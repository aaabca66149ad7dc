from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Dict, List, Type

from ..errors import ConfigError
from .base import OrderingRule

__all__ = [
    "register_lazy",
    "get_rule_class",
    "list_rules",
]


@dataclass(frozen=True)
class _LazySpec:
    module: str
    class_name: str


# Lazy specifications: rule name → where its class lives
_LAZY_BY_NAME: Dict[str, _LazySpec] = {}

# Resolved classes
_CLASS_BY_NAME: Dict[str, Type[OrderingRule]] = {}


def register_lazy(*, name: str, module: str, class_name: str) -> None:
    """
    Register a rule by strings, without importing its module.
    """
    _LAZY_BY_NAME[name] = _LazySpec(module=module, class_name=class_name)


def _load_rule_from_spec(name: str, spec: _LazySpec) -> Type[OrderingRule]:
    # Both relative (".sort_jsx_props") and absolute module names are supported.
    mod = importlib.import_module(spec.module, package=__package__)
    cls = getattr(mod, spec.class_name, None)
    if cls is None:
        raise RuntimeError(f"Rule class '{spec.class_name}' not found in {spec.module}")
    if not issubclass(cls, OrderingRule):
        raise TypeError(f"{spec.module}.{spec.class_name} is not a subclass of OrderingRule")
    if cls.name != name:
        raise RuntimeError(f"Rule registered as '{name}' declares name '{cls.name}'")

    _CLASS_BY_NAME[name] = cls
    return cls


def get_rule_class(name: str) -> Type[OrderingRule]:
    """
    Return the rule CLASS registered under ``name``. Nothing is instantiated.

    Raises:
        ConfigError: If no rule has that name
    """
    cls = _CLASS_BY_NAME.get(name)
    if cls:
        return cls
    spec = _LAZY_BY_NAME.get(name)
    if spec is None:
        raise ConfigError(f"Unknown rule '{name}'. Available rules: {', '.join(list_rules())}")
    return _load_rule_from_spec(name, spec)


def list_rules() -> List[str]:
    """Names of all registered rules, sorted."""
    return sorted(_LAZY_BY_NAME)
