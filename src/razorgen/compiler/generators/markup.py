"""Generation rules for markup elements and attributes.

Markup is always output, so every structural token becomes a literal push:

    <li class="x">@item</li>

    __vbuffer.push('<');
    __vbuffer.push('li');
    __vbuffer.push(' ');
    __vbuffer.push('class');
    __vbuffer.push('="');
    __vbuffer.push('x');
    __vbuffer.push('"');
    __vbuffer.push('>');
    __vbuffer.push(html.escape(item).toHtmlString());
    __vbuffer.push('</');
    __vbuffer.push('li');
    __vbuffer.push('>');

The condenser folds the literal runs together afterwards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from razorgen.compiler.buffer import content_append
from razorgen.utils.escaping import escape_markup_content

if TYPE_CHECKING:
    from collections.abc import Sequence

    from razorgen.nodes import Markup, MarkupAttribute, Node, NodeKind


class MarkupGeneratorMixin:
    """Mixin for Markup and MarkupAttribute."""

    if TYPE_CHECKING:

        def _generate_all(
            self, nodes: Sequence[Node], parent: NodeKind, separator: str = ""
        ) -> str: ...

    def _gen_markup(self, node: Markup, parent: NodeKind | None) -> str:
        # Computed names are spliced as generated: the grammar only allows
        # expression nodes there, which push (and escape) on their own.
        if node.has_dynamic_name:
            name = self._generate_all(node.name, node.kind)  # type: ignore[arg-type]
        else:
            name = content_append(escape_markup_content(node.name))  # type: ignore[arg-type]

        parts = [content_append("<"), name]
        if node.attributes:
            parts.append(content_append(" "))
            parts.append(self._generate_all(node.attributes, node.kind, content_append(" ")))

        if node.is_void:
            parts.append(content_append(" />" if node.void_closed else ">"))
        else:
            parts.append(content_append(">"))
            parts.append(self._generate_all(node.values, node.kind))
            parts.append(content_append("</"))
            parts.append(name)
            parts.append(content_append(">"))

        return "".join(parts)

    def _gen_markup_attribute(self, node: MarkupAttribute, parent: NodeKind | None) -> str:
        """Attribute name, then ``=``, quote, value, quote when a value exists.

        A bare attribute (``<input disabled>``) has no right-hand side and
        emits only its name.
        """
        left = self._generate_all(node.left, node.kind)
        if not node.right and not node.right_is_quoted:
            return left

        quote = escape_markup_content(node.right_is_quoted or "")
        return (
            left
            + content_append("=" + quote)
            + self._generate_all(node.right, node.kind)
            + content_append(quote)
        )
