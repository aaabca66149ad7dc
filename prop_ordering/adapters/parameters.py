"""
Destructured props of function components.

Handles ``function Button({ id, onClick }) {}``, ``const Button = ({ id }) => …``,
function expressions, generators and class or object methods: the first
parameter, when it is an object destructuring pattern with at least two
entries, is the field list. A comment between entries leaves the list
reported but unfixed.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..ordering.descriptor import FieldDescriptor, FieldKind
from ..ordering.patch import FixStyle
from .base import COMMENT_TYPES, FieldListMatch, ShapeAdapter, key_name, named_children
from .tree_sitter_support import Node, TreeSitterDocument

logger = logging.getLogger(__name__)

FUNCTION_TYPES = frozenset({
    "function_declaration",
    "function_expression",
    "function",
    "arrow_function",
    "generator_function_declaration",
    "generator_function",
    "method_definition",
})

JSX_TYPES = frozenset({"jsx_element", "jsx_self_closing_element", "jsx_fragment"})


def _unwrap_parens(node: Optional[Node]) -> Optional[Node]:
    while node is not None and node.type == "parenthesized_expression":
        inner = named_children(node)
        node = inner[0] if inner else None
    return node


def _returns_jsx(func: Node) -> bool:
    body = func.child_by_field_name("body")
    if body is None:
        return False
    if body.type == "statement_block":
        for stmt in named_children(body):
            if stmt.type != "return_statement":
                continue
            values = named_children(stmt)
            value = _unwrap_parens(values[0]) if values else None
            if value is not None and value.type in JSX_TYPES:
                return True
        return False
    # Arrow function with an expression body
    body = _unwrap_parens(body)
    return body is not None and body.type in JSX_TYPES


def _declared_name(func: Node, doc: TreeSitterDocument) -> Optional[str]:
    name = func.child_by_field_name("name")
    if name is not None:
        return doc.get_node_text(name)
    parent = func.parent
    if parent is not None and parent.type == "variable_declarator":
        target = parent.child_by_field_name("name")
        if target is not None and target.type == "identifier":
            return doc.get_node_text(target)
    return None


def is_component(func: Node, doc: TreeSitterDocument) -> bool:
    """
    Heuristic: the function looks like a component when its declared or
    bound name is capitalized, or when it returns markup.
    """
    name = _declared_name(func, doc)
    if name and name[:1].isupper():
        return True
    return _returns_jsx(func)


def _first_parameter_pattern(func: Node) -> Optional[Node]:
    params = func.child_by_field_name("parameters")
    if params is None:
        # Single bare parameter of an arrow function: never a pattern.
        return None
    entries = named_children(params)
    if not entries:
        return None
    param = entries[0]
    # TypeScript wraps parameters: required_parameter(pattern: …, value: …)
    if param.type in ("required_parameter", "optional_parameter"):
        param = param.child_by_field_name("pattern")
    # JavaScript spells a defaulted parameter as assignment_pattern
    elif param.type == "assignment_pattern":
        param = param.child_by_field_name("left")
    if param is None or param.type != "object_pattern":
        return None
    return param


def _has_inner_comment(pattern: Node, entries) -> bool:
    # The joined rewrite replaces everything from the first entry to the last.
    first, last = entries[0], entries[-1]
    return any(
        c.type in COMMENT_TYPES and first.start_byte < c.start_byte < last.end_byte
        for c in pattern.named_children
    )


def _describe_entry(entry: Node, doc: TreeSitterDocument) -> FieldDescriptor:
    source_range = doc.get_node_range(entry)

    if entry.type == "rest_pattern":
        return FieldDescriptor(name=None, source_range=source_range, kind=FieldKind.REST)

    if entry.type == "object_assignment_pattern":
        return FieldDescriptor(
            name=key_name(entry.child_by_field_name("left"), doc),
            source_range=source_range,
            has_default_or_optional=True,
        )

    if entry.type == "pair_pattern":
        value = entry.child_by_field_name("value")
        return FieldDescriptor(
            name=key_name(entry.child_by_field_name("key"), doc),
            source_range=source_range,
            has_default_or_optional=value is not None and value.type == "assignment_pattern",
        )

    # shorthand_property_identifier_pattern
    return FieldDescriptor(name=key_name(entry, doc), source_range=source_range)


class ParameterShape(ShapeAdapter):
    """Destructuring pattern in the first parameter of a function."""

    name = "parameters"
    node_types = FUNCTION_TYPES
    fix_style = FixStyle.JOINED

    def extract(self, node: Node, doc: TreeSitterDocument) -> Optional[FieldListMatch]:
        pattern = _first_parameter_pattern(node)
        if pattern is None:
            return None

        entries = named_children(pattern)
        if len(entries) < 2:
            return None

        # The component heuristic is advisory: a destructured first
        # parameter is analysed either way.
        component = is_component(node, doc)
        if not component:
            logger.debug("Function at line %d does not look like a component", node.start_point[0] + 1)

        return FieldListMatch(
            fields=tuple(_describe_entry(e, doc) for e in entries),
            report_node=node,
            container="component",
            is_component=component,
            fixable=not _has_inner_comment(pattern, entries),
        )


__all__ = ["ParameterShape", "is_component", "FUNCTION_TYPES"]
