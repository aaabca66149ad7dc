from __future__ import annotations

import dataclasses
import logging
import re
from enum import Enum
from typing import Any, ClassVar, Dict, Generic, Mapping, Optional, Type, TypeVar, get_args

from ..adapters.base import ShapeAdapter
from ..adapters.tree_sitter_support import Node, TreeSitterDocument
from ..config.typed import load_typed
from ..errors import ConfigError
from ..ordering.classifier import NameClassifier
from ..ordering.comparator import OrderingPolicy, complete_precedence
from ..ordering.engine import OrderingEngine
from ..types import RuleName, Severity, Violation
from .options import RuleDefaults, RuleOptions

__all__ = ["OrderingRule"]

logger = logging.getLogger(__name__)

O = TypeVar("O", bound=RuleOptions)  # option schema of a concrete rule
R = TypeVar("R", bound="OrderingRule[Any]")


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


class OrderingRule(Generic[O]):
    """
    Base class of ordering rules.

    A rule binds one shape adapter to an ordering policy built from its
    options, and turns out-of-order field lists into violations.
    """
    #: Rule name as used in configuration
    name: ClassVar[str] = "base"
    description: ClassVar[str] = ""
    #: Shape adapter instance (stateless)
    shape: ClassVar[ShapeAdapter]
    #: Values for options the user left unset
    defaults: ClassVar[RuleDefaults] = RuleDefaults()
    #: Fixed message per container kind of the shape
    messages: ClassVar[Dict[str, str]] = {}
    fixable: ClassVar[bool] = True

    _options: O
    engine: OrderingEngine

    # --- Generic introspection of parameter O -----
    @classmethod
    def _resolve_options_type(cls) -> Type[RuleOptions]:
        """Concrete O from the ``OrderingRule[O]`` declaration of a subclass."""
        for kls in cls.__mro__:
            for base in getattr(kls, "__orig_bases__", ()) or ():
                args = get_args(base) or ()
                if args and not isinstance(args[0], TypeVar):
                    return args[0]
        return RuleOptions

    # --- Activation -------------
    @classmethod
    def bind(cls: Type[R], raw_options: Optional[Mapping[str, Any]] = None) -> R:
        """
        Create an activated rule from raw (YAML) options.

        Raises:
            ConfigError: Unknown keys, wrong value types or inconsistent options
        """
        inst = cls()
        inst._options = load_typed(cls._resolve_options_type(), dict(raw_options or {}), path=f"$.rules.{cls.name}")
        inst.engine = OrderingEngine(inst.build_policy(), cls.shape.fix_style)
        return inst

    @property
    def options(self) -> O:
        if getattr(self, "_options", None) is None:
            raise AttributeError(f"{self.__class__.__name__} is not bound")
        return self._options

    @property
    def severity(self) -> Severity:
        return self.options.severity

    @property
    def node_types(self):
        return self.shape.node_types

    @classmethod
    def default_options(cls) -> Dict[str, Any]:
        """Effective options of the rule when nothing is configured (JSON-ready)."""
        opts = dataclasses.asdict(cls._resolve_options_type()())
        d = cls.defaults
        opts.update(
            sort_alphabetically=True,
            reserved_names=list(d.reserved_names),
            callback_prefixes=list(d.callback_prefixes) if d.callback_prefixes is not None else None,
            callback_patterns=list(d.callback_patterns) if d.callback_patterns is not None else None,
            shorthand=d.shorthand,
            precedence=list(d.precedence),
        )
        opts.pop("no_sort_alphabetically", None)
        return {k: _jsonable(v) for k, v in opts.items()}

    # --- Policy -------------
    def build_policy(self) -> OrderingPolicy:
        opts = self.options
        defaults = self.defaults
        where = f"$.rules.{self.name}"

        if opts.sort_alphabetically is not None and opts.no_sort_alphabetically is not None:
            raise ConfigError(f"{where}: use either sort_alphabetically or no_sort_alphabetically, not both")
        if opts.sort_alphabetically is not None:
            sort_alphabetically = opts.sort_alphabetically
        elif opts.no_sort_alphabetically is not None:
            sort_alphabetically = not opts.no_sort_alphabetically
        else:
            sort_alphabetically = True

        try:
            precedence = complete_precedence(tuple(opts.precedence), defaults.precedence) \
                if opts.precedence is not None else defaults.precedence
        except ValueError as e:
            raise ConfigError(f"{where}.precedence: {e}") from e

        return OrderingPolicy(
            classifier=self._build_classifier(),
            reserved_first=opts.reserved_first,
            callbacks_last=opts.callbacks_last,
            sort_alphabetically=sort_alphabetically,
            shorthand=opts.shorthand if opts.shorthand is not None else defaults.shorthand,
            precedence=precedence,
            **self.policy_overrides(),
        )

    def _build_classifier(self) -> NameClassifier:
        opts = self.options
        defaults = self.defaults
        where = f"$.rules.{self.name}"

        if opts.callback_prefixes is not None and opts.callback_patterns is not None:
            raise ConfigError(f"{where}: use either callback_prefixes or callback_patterns, not both")

        reserved = opts.reserved_names if opts.reserved_names is not None else defaults.reserved_names

        if opts.callback_prefixes is not None:
            return NameClassifier.with_prefixes(reserved, opts.callback_prefixes)

        patterns = opts.callback_patterns
        if patterns is None and defaults.callback_patterns is not None:
            patterns = list(defaults.callback_patterns)
        if patterns is None:
            return NameClassifier.with_prefixes(reserved, defaults.callback_prefixes or ())

        try:
            return NameClassifier.with_patterns(reserved, patterns)
        except re.error as e:
            raise ConfigError(f"{where}.callback_patterns: invalid regular expression {e.pattern!r}: {e}") from e

    def policy_overrides(self) -> Dict[str, Any]:
        """Extra ``OrderingPolicy`` fields of a concrete rule."""
        return {}

    # --- Visiting -------------
    def message_for(self, container: str) -> str:
        return self.messages[container]

    def visit(self, node: Node, doc: TreeSitterDocument) -> Optional[Violation]:
        """
        Check one node. Returns a violation with its fix, or None when the
        node has no field list or the list is already in order.
        """
        match = self.shape.extract(node, doc)
        if match is None:
            return None

        text = doc.text
        edits = self.engine.analyze(match.fields, lambda d: text[d.start:d.end], match.fixable)
        if edits is None:
            return None

        start, end = doc.get_node_range(match.report_node)
        line, column = doc.char_to_line_col(start)
        end_line, end_column = doc.char_to_line_col(end)
        logger.debug("%s: violation at %d:%d", self.name, line, column)

        return Violation(
            rule=RuleName(self.name),
            severity=self.severity,
            message=self.message_for(match.container),
            start_char=start,
            end_char=end,
            line=line,
            column=column,
            end_line=end_line,
            end_column=end_column,
            edits=tuple(edits),
        )
