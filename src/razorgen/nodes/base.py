"""Base node class and node kinds for the razorgen syntax tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


class NodeKind(Enum):
    """Closed set of syntax-tree node kinds.

    Values are the type names the parser uses, without its ``Vash`` prefix.
    """

    PROGRAM = "Program"
    EXPLICIT_EXPRESSION = "ExplicitExpression"
    EXPRESSION = "Expression"
    MARKUP = "Markup"
    MARKUP_ATTRIBUTE = "MarkupAttribute"
    BLOCK = "Block"
    INDEX_EXPRESSION = "IndexExpression"
    TEXT = "Text"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all syntax-tree nodes.

    Nodes are immutable. They carry no parent link; the compiler passes
    each child its parent's kind while walking the tree.

    """

    kind: ClassVar[NodeKind]

    lineno: int = field(default=0, kw_only=True)
    col_offset: int = field(default=0, kw_only=True)
