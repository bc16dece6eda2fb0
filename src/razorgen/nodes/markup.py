"""Markup nodes: elements and their attributes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from razorgen.nodes.base import Node, NodeKind


@dataclass(frozen=True, slots=True)
class MarkupAttribute(Node):
    """Element attribute: ``class="item @cls"``

    ``left`` holds the name parts and ``right`` the value parts.
    ``right_is_quoted`` is the quote character used around the value, or
    None for an unquoted or missing value.
    """

    kind: ClassVar[NodeKind] = NodeKind.MARKUP_ATTRIBUTE

    left: Sequence[Node] = ()
    right: Sequence[Node] = ()
    right_is_quoted: str | None = None


@dataclass(frozen=True, slots=True)
class Markup(Node):
    """Markup element: ``<li class="x">...</li>`` or ``<br />``

    ``name`` is the literal tag name, or a sequence of nodes when the tag
    name is computed (``<@tag>``).
    """

    kind: ClassVar[NodeKind] = NodeKind.MARKUP

    name: str | Sequence[Node] = ""
    attributes: Sequence[MarkupAttribute] = ()
    values: Sequence[Node] = ()
    is_void: bool = False
    void_closed: bool = False

    @property
    def has_dynamic_name(self) -> bool:
        return not isinstance(self.name, str)
