"""Post-generation condensing of the emitted source.

Markup produces long runs of literal pushes, one per token:

    __vbuffer.push('<');
    __vbuffer.push('li');
    __vbuffer.push('>');

``condense`` folds each run into a single ``__vbuffer.push('<li>');`` and
collapses blank lines. It is a textual pass over finished source, so it
only matches complete single-quoted literal pushes that start a line. A
push of an expression (``__vbuffer.push(a ? 'x' : 'y');``) never matches,
even when it ends in a string literal.

The result is a fixed point: ``condense(condense(s)) == condense(s)``.
"""

from __future__ import annotations

import re

from razorgen.compiler.buffer import BUFFER_NAME

_PUSH_OPEN = re.escape(f"{BUFFER_NAME}.push(")
_LITERAL_BODY = r"(?:[^'\\\n]|\\.)*"

# One push whose whole argument is a single-quoted string literal
_LITERAL_PUSH = re.compile(rf"{_PUSH_OPEN}'({_LITERAL_BODY})'\);")

# Two or more literal pushes at line starts, separated only by newlines
_LITERAL_RUN = re.compile(
    rf"(?<![^\n]){_PUSH_OPEN}'{_LITERAL_BODY}'\);(?:\n+{_PUSH_OPEN}'{_LITERAL_BODY}'\);)+"
)

_NEWLINES = re.compile(r"\n{2,}")


def _merge_run(match: re.Match[str]) -> str:
    literal = "".join(_LITERAL_PUSH.findall(match.group(0)))
    return f"{BUFFER_NAME}.push('{literal}');"


def merge_literal_pushes(source: str) -> str:
    """Fold adjacent literal pushes into one push each."""
    return _LITERAL_RUN.sub(_merge_run, source)


def collapse_newlines(source: str) -> str:
    return _NEWLINES.sub("\n", source)


def condense(source: str) -> str:
    """Merge adjacent literal pushes, then collapse runs of newlines."""
    return collapse_newlines(merge_literal_pushes(source))
