"""Syntax-tree nodes consumed by the razorgen compiler.

Node hierarchy:
- Node (base)
  - Program: template root
  - Markup / MarkupAttribute: elements and attributes
  - ExplicitExpression / Expression / IndexExpression: embedded code
  - Block: control construct (``if (...) { ... }``)
  - Text: literal text

All nodes are frozen dataclasses.
"""

from razorgen.nodes.base import Node, NodeKind
from razorgen.nodes.expressions import ExplicitExpression, Expression, IndexExpression
from razorgen.nodes.loading import node_from_dict
from razorgen.nodes.markup import Markup, MarkupAttribute
from razorgen.nodes.structure import Block, Program, Text

__all__ = [
    "Block",
    "ExplicitExpression",
    "Expression",
    "IndexExpression",
    "Markup",
    "MarkupAttribute",
    "Node",
    "NodeKind",
    "Program",
    "Text",
    "node_from_dict",
]
