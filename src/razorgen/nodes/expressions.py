"""Embedded expression nodes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from razorgen.nodes.base import Node, NodeKind


@dataclass(frozen=True, slots=True)
class ExplicitExpression(Node):
    """Parenthesized expression: ``@(a + b)``"""

    kind: ClassVar[NodeKind] = NodeKind.EXPLICIT_EXPRESSION

    values: Sequence[Node] = ()


@dataclass(frozen=True, slots=True)
class Expression(Node):
    """Implicit expression: ``@model.title``"""

    kind: ClassVar[NodeKind] = NodeKind.EXPRESSION

    values: Sequence[Node] = ()


@dataclass(frozen=True, slots=True)
class IndexExpression(Node):
    """Subscript inside an expression: ``@items[i]``"""

    kind: ClassVar[NodeKind] = NodeKind.INDEX_EXPRESSION

    values: Sequence[Node] = ()
