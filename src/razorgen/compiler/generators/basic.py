"""Generation rules for Program and Text nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from razorgen.compiler.buffer import content_append, is_content_bearing
from razorgen.utils.escaping import escape_markup_content

if TYPE_CHECKING:
    from collections.abc import Sequence

    from razorgen.nodes import Node, NodeKind, Program, Text


class BasicGeneratorMixin:
    """Mixin for the template root and literal text."""

    # ─────────────────────────────────────────────────────────────────────────
    # Cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:

        def _generate_all(self, nodes: Sequence[Node], parent: NodeKind) -> str: ...

    def _gen_program(self, node: Program, parent: NodeKind | None) -> str:
        """Concatenate the generated body; the root adds no wrapping."""
        return self._generate_all(node.body, node.kind)

    def _gen_text(self, node: Text, parent: NodeKind | None) -> str:
        """Literal push for rendered text, raw source text anywhere else.

        Text inside an expression or block head (``items.length``) is part of
        the generated code and passes through untouched.
        """
        if is_content_bearing(parent):
            return content_append(escape_markup_content(node.value))
        return node.value
