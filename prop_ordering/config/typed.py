"""
Typed loading of raw YAML data into annotated dataclasses.

Every dataclass level rejects unknown keys, and every error names the
dotted path of the offending value (``$.rules.sort-jsx-props.multiline``).
"""

from __future__ import annotations

import dataclasses
import logging
import os
import sys
import typing as t
from dataclasses import fields, is_dataclass
from enum import Enum
from types import UnionType
from typing import Any, get_args, get_origin

from ..errors import ConfigError

# -------------------- Logging setup --------------------

_LOG = logging.getLogger("prop_ordering.config.typed")

def _setup_logging_once() -> None:
    if getattr(_setup_logging_once, "_inited", False):
        return
    _setup_logging_once._inited = True  # type: ignore[attr-defined]
    if os.environ.get("PROP_ORDERING_TYPED_DEBUG"):
        _LOG.setLevel(logging.DEBUG)

_setup_logging_once()

# -------------------- Helpers --------------------

def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", str(tp))

def _err(path: str, msg: str) -> ConfigError:
    _LOG.debug("RAISE at %s: %s", path, msg)
    return ConfigError(f"{path}: {msg}")

def _strip_annotated(tp: Any) -> Any:
    if get_origin(tp) is t.Annotated:
        args = get_args(tp)
        return args[0] if args else Any
    return tp

def _coerce_literal(val: Any, tp: Any, path: str) -> Any:
    allowed = get_args(tp)
    if val in allowed:
        return val
    raise _err(path, f"expected one of {list(allowed)}, got {val!r}")

def _coerce_enum(val: Any, tp: Any, path: str) -> Any:
    if isinstance(val, tp):
        return val
    # by value first ("first"), then by member name ("FIRST")
    try:
        return tp(val)
    except ValueError:
        pass
    if isinstance(val, str) and val in tp.__members__:
        return tp[val]
    allowed = [m.value for m in tp]
    raise _err(path, f"expected one of {allowed}, got {val!r}")

def _coerce_union(val: Any, tp: Any, path: str) -> Any:
    variants = get_args(tp)
    errs: list[str] = []
    for sub in variants:
        # NoneType matches ONLY when val is None.
        if sub is type(None):
            if val is None:
                return None
            continue
        try:
            res = load_typed(sub, val, path=path)
            _LOG.debug("Union branch %s matched at %s", _type_name(sub), path)
            return res
        except ConfigError as e:
            errs.append(str(e))
    raise ConfigError(" | ".join(errs) or f"{path}: no variant of {_type_name(tp)} matched")

def _coerce_mapping(val: Any, tp: Any, path: str) -> Any:
    if not isinstance(val, dict):
        raise _err(path, f"expected mapping, got {type(val).__name__}")
    kt, vt = get_args(tp) or (Any, Any)
    out: dict[Any, Any] = {}
    for k, v in val.items():
        k2 = load_typed(kt, k, path=f"{path}.<key>")
        out[k2] = load_typed(vt, v, path=f"{path}.{k2}")
    return out

def _coerce_sequence(val: Any, tp: Any, path: str) -> Any:
    origin = get_origin(tp)
    if not isinstance(val, (list, tuple)):
        raise _err(path, f"expected list, got {type(val).__name__}")
    args = get_args(tp)
    if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
        args = args[:1]
    (et,) = args or (Any,)
    items = [load_typed(et, v, path=f"{path}[{i}]") for i, v in enumerate(val)]
    if origin is tuple:
        return tuple(items)
    if origin is set:
        return set(items)
    return items

def _resolve_type_hints_for_class(tp: Any) -> dict[str, Any]:
    mod = sys.modules.get(tp.__module__)
    gns = dict(vars(mod)) if mod is not None else {}
    return t.get_type_hints(tp, globalns=gns, localns=None, include_extras=True)

def _coerce_dataclass(val: Any, tp: Any, path: str) -> Any:
    if val is None:
        val = {}
    if not isinstance(val, dict):
        raise _err(path, f"expected mapping for {_type_name(tp)}, got {type(val).__name__}")
    type_hints = _resolve_type_hints_for_class(tp)
    fld_map = {f.name: f for f in fields(tp) if f.init}
    extras = set(val.keys()) - set(fld_map.keys())
    if extras:
        raise _err(path, f"unknown key(s): {sorted(extras)}; allowed: {sorted(fld_map)}")
    kwargs: dict[str, Any] = {}
    for name, f in fld_map.items():
        sub_path = f"{path}.{name}"
        if name in val:
            kwargs[name] = load_typed(type_hints.get(name, f.type), val[name], path=sub_path)
        elif f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
            raise _err(sub_path, "required field missing")
    inst = tp(**kwargs)
    _LOG.debug("Dataclass built at %s: %r", path, inst)
    return inst

# -------------------- Entry point --------------------

def load_typed(tp: Any, val: Any, *, path: str = "$") -> Any:
    """
    Recursively coerce raw YAML data ``val`` into the annotated type ``tp``.

    Raises:
        ConfigError: With the dotted path of the first offending value
    """
    tp = _strip_annotated(tp)
    origin = get_origin(tp)

    if tp is Any or tp is object:
        return val

    if isinstance(tp, type) and is_dataclass(tp):
        return _coerce_dataclass(val, tp, path)

    if origin is t.Literal:
        return _coerce_literal(val, tp, path)

    if origin in (t.Union, UnionType):
        return _coerce_union(val, tp, path)

    if origin is dict:
        return _coerce_mapping(val, tp, path)
    if origin in (list, tuple, set):
        return _coerce_sequence(val, tp, path)

    if isinstance(tp, type) and issubclass(tp, Enum):
        return _coerce_enum(val, tp, path)

    if tp is type(None):
        if val is None:
            return None
        raise _err(path, f"expected null, got {type(val).__name__}")

    if tp in (str, int, float, bool):
        # bool is an int subclass; never accept it where a number is expected
        if not isinstance(val, tp) or (tp is not bool and isinstance(val, bool)):
            raise _err(path, f"expected {_type_name(tp)}, got {type(val).__name__}")
        return val

    raise _err(path, f"unsupported annotation {tp!r}")


__all__ = ["load_typed"]
