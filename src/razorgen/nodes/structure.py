"""Structural nodes: the program root, control blocks, and raw text."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from razorgen.nodes.base import Node, NodeKind


@dataclass(frozen=True, slots=True)
class Program(Node):
    """Root node representing a complete template."""

    kind: ClassVar[NodeKind] = NodeKind.PROGRAM

    body: Sequence[Node] = ()


@dataclass(frozen=True, slots=True)
class Block(Node):
    """Control construct: ``@if (ok) { ... } else { ... }``

    ``head`` is the opener (``if (ok) ``), ``values`` the body between the
    braces, ``tail`` whatever follows the closing brace (an ``else`` branch,
    for instance).
    """

    kind: ClassVar[NodeKind] = NodeKind.BLOCK

    head: Sequence[Node] = ()
    values: Sequence[Node] = ()
    tail: Sequence[Node] = ()


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Raw text between template constructs."""

    kind: ClassVar[NodeKind] = NodeKind.TEXT

    value: str = ""
