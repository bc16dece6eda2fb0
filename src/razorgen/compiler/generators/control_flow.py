"""Generation rule for Block nodes (``@if``, ``@for``, ``@{ }`` ...)."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from razorgen.nodes import Block, Node, NodeKind


class ControlFlowGeneratorMixin:
    """Mixin for control constructs.

    A Block is code in the generated function, not output, so its braces are
    emitted as raw source and its head/tail children are generated in a
    non-content context. Markup nested in the body always pushes, whatever
    its parent.
    """

    if TYPE_CHECKING:

        def _generate_all(self, nodes: Sequence[Node], parent: NodeKind) -> str: ...

    def _gen_block(self, node: Block, parent: NodeKind | None) -> str:
        return (
            self._generate_all(node.head, node.kind)
            + "{"
            + self._generate_all(node.values, node.kind)
            + "}"
            + self._generate_all(node.tail, node.kind)
        )
