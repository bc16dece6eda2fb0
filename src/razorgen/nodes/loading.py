"""Build syntax-tree nodes from parser output.

The parser is a separate component and hands over its tree as plain
JSON-shaped data: nested dicts with a ``type`` key (``"VashMarkup"`` or just
``"Markup"``) and camelCase field names. ``node_from_dict`` converts that
structure into immutable node instances.

Example:
    >>> node_from_dict({
    ...     "type": "VashProgram",
    ...     "body": [{"type": "VashText", "value": "Hello"}],
    ... })
    Program(lineno=0, col_offset=0, body=(Text(lineno=0, col_offset=0, value='Hello'),))

"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from razorgen.exceptions import NodeLoadError, UnknownNodeError
from razorgen.nodes.base import Node, NodeKind
from razorgen.nodes.expressions import ExplicitExpression, Expression, IndexExpression
from razorgen.nodes.markup import Markup, MarkupAttribute
from razorgen.nodes.structure import Block, Program, Text

_TYPE_PREFIX = "Vash"


def _kind_of(data: Mapping[str, Any]) -> NodeKind:
    type_name = data.get("type")
    if not isinstance(type_name, str):
        raise NodeLoadError(f"Node has no 'type' string: {data!r}")

    name = type_name[len(_TYPE_PREFIX) :] if type_name.startswith(_TYPE_PREFIX) else type_name
    try:
        return NodeKind(name)
    except ValueError:
        raise UnknownNodeError(type_name) from None


def _position(data: Mapping[str, Any]) -> dict[str, int]:
    loc = data.get("startloc")
    if not isinstance(loc, Mapping):
        return {}
    try:
        return {"lineno": int(loc.get("line", 0)), "col_offset": int(loc.get("column", 0))}
    except (TypeError, ValueError):
        raise NodeLoadError(f"Invalid source position {dict(loc)!r}", data.get("type")) from None


def _children(data: Mapping[str, Any], key: str) -> tuple[Node, ...]:
    value = data.get(key)
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise NodeLoadError(f"Field '{key}' must be a list of nodes", data.get("type"))
    return tuple(node_from_dict(child) for child in value)


def _load_program(data: Mapping[str, Any]) -> Program:
    return Program(body=_children(data, "body"), **_position(data))


def _load_explicit_expression(data: Mapping[str, Any]) -> ExplicitExpression:
    return ExplicitExpression(values=_children(data, "values"), **_position(data))


def _load_expression(data: Mapping[str, Any]) -> Expression:
    return Expression(values=_children(data, "values"), **_position(data))


def _load_index_expression(data: Mapping[str, Any]) -> IndexExpression:
    return IndexExpression(values=_children(data, "values"), **_position(data))


def _load_markup(data: Mapping[str, Any]) -> Markup:
    # Computed tag names arrive as an expression node next to the literal name
    expression = data.get("expression")
    name: str | tuple[Node, ...]
    if expression:
        if not isinstance(expression, Mapping):
            raise NodeLoadError("Markup 'expression' must be a node", data["type"])
        name = _children(expression, "values")
        if not name:
            raise NodeLoadError("Markup 'expression' has no values", data["type"])
    else:
        name = data.get("name")
        if not isinstance(name, str):
            raise NodeLoadError("Markup requires a string 'name' or an 'expression'", data["type"])

    attributes = _children(data, "attributes")
    for attr in attributes:
        if not isinstance(attr, MarkupAttribute):
            raise NodeLoadError(
                f"Markup attributes must be MarkupAttribute nodes, got {attr.kind.label}",
                data["type"],
            )

    return Markup(
        name=name,
        attributes=attributes,  # type: ignore[arg-type]
        values=_children(data, "values"),
        is_void=bool(data.get("isVoid", False)),
        void_closed=bool(data.get("voidClosed", False)),
        **_position(data),
    )


def _load_markup_attribute(data: Mapping[str, Any]) -> MarkupAttribute:
    quote = data.get("rightIsQuoted") or None
    if quote is not None and quote not in ("'", '"'):
        raise NodeLoadError(f"Invalid attribute quote character {quote!r}", data["type"])
    return MarkupAttribute(
        left=_children(data, "left"),
        right=_children(data, "right"),
        right_is_quoted=quote,
        **_position(data),
    )


def _load_block(data: Mapping[str, Any]) -> Block:
    return Block(
        head=_children(data, "head"),
        values=_children(data, "values"),
        tail=_children(data, "tail"),
        **_position(data),
    )


def _load_text(data: Mapping[str, Any]) -> Text:
    value = data.get("value", "")
    if not isinstance(value, str):
        raise NodeLoadError("Text 'value' must be a string", data["type"])
    return Text(value=value, **_position(data))


_LOADERS: dict[NodeKind, Callable[[Mapping[str, Any]], Node]] = {
    NodeKind.PROGRAM: _load_program,
    NodeKind.EXPLICIT_EXPRESSION: _load_explicit_expression,
    NodeKind.EXPRESSION: _load_expression,
    NodeKind.MARKUP: _load_markup,
    NodeKind.MARKUP_ATTRIBUTE: _load_markup_attribute,
    NodeKind.BLOCK: _load_block,
    NodeKind.INDEX_EXPRESSION: _load_index_expression,
    NodeKind.TEXT: _load_text,
}


def node_from_dict(data: Mapping[str, Any]) -> Node:
    """Convert one parser node (and its descendants) into a Node.

    Raises:
        UnknownNodeError: The ``type`` names a kind this generator lacks
        NodeLoadError: The data is structurally malformed
    """
    if not isinstance(data, Mapping):
        raise NodeLoadError(f"Expected a node mapping, got {type(data).__name__}")
    return _LOADERS[_kind_of(data)](data)
