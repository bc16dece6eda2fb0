"""Output-buffer statements and the content-bearing rule.

Every piece of rendered output becomes one ``__vbuffer.push(...)`` statement
in the generated code. Each statement starts on a fresh line and ends with
``);`` and a newline; the condenser later merges neighbouring literal
pushes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from razorgen.nodes.base import NodeKind

if TYPE_CHECKING:
    from razorgen.config import GenerationConfig

BUFFER_NAME = "__vbuffer"
BUFFER_HEAD = f"\n{BUFFER_NAME}.push("
BUFFER_TAIL = ");\n"

# Parents whose children are rendered output rather than generated code
CONTENT_KINDS: frozenset[NodeKind] = frozenset(
    {
        NodeKind.PROGRAM,
        NodeKind.MARKUP,
        NodeKind.MARKUP_ATTRIBUTE,
    }
)


def content_append(text: str) -> str:
    """Push a literal string. ``text`` must already be escaped."""
    return f"{BUFFER_HEAD}'{text}'{BUFFER_TAIL}"


def expression_append(expr: str) -> str:
    """Push the value of a JavaScript expression."""
    return f"{BUFFER_HEAD}{expr}{BUFFER_TAIL}"


def is_content_bearing(parent: NodeKind | None) -> bool:
    return parent in CONTENT_KINDS


def maybe_html_escape(expr: str, parent: NodeKind | None, config: GenerationConfig) -> str:
    """Route ``expr`` through the runtime escaper when it is rendered output.

    Only applies when the parent is content bearing and ``html_escape`` is
    enabled; otherwise ``expr`` is returned unchanged.
    """
    if config.html_escape and is_content_bearing(parent):
        return f"{config.helpers_name}.escape({expr}).toHtmlString()"
    return expr
