"""Generation rules for embedded expressions.

Explicit and implicit expressions differ only in the parentheses around
the generated code::

    @(a + b)      → __vbuffer.push((html.escape(a + b).toHtmlString()));
    @model.name   → __vbuffer.push(html.escape(model.name).toHtmlString());

Both are only pushed when their parent is content bearing; nested inside
another expression or a block head they are plain code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from razorgen.compiler.buffer import expression_append, is_content_bearing, maybe_html_escape

if TYPE_CHECKING:
    from collections.abc import Sequence

    from razorgen.config import GenerationConfig
    from razorgen.nodes import ExplicitExpression, Expression, IndexExpression, Node, NodeKind


class ExpressionGeneratorMixin:
    """Mixin for ExplicitExpression, Expression and IndexExpression."""

    if TYPE_CHECKING:
        _config: GenerationConfig

        def _generate_all(self, nodes: Sequence[Node], parent: NodeKind) -> str: ...

    def _gen_explicit_expression(self, node: ExplicitExpression, parent: NodeKind | None) -> str:
        code = self._generate_all(node.values, node.kind)
        code = "(" + maybe_html_escape(code, parent, self._config) + ")"
        if is_content_bearing(parent):
            return expression_append(code)
        return code

    def _gen_expression(self, node: Expression, parent: NodeKind | None) -> str:
        code = self._generate_all(node.values, node.kind)
        if is_content_bearing(parent):
            return expression_append(maybe_html_escape(code, parent, self._config))
        return code

    def _gen_index_expression(self, node: IndexExpression, parent: NodeKind | None) -> str:
        """Subscript in generated code: ``[`` children ``]``."""
        return "[" + self._generate_all(node.values, node.kind) + "]"
