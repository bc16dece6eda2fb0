"""String escaping for text embedded in generated JavaScript.

Two contexts need escaping:

- Template text pushed to the output buffer lives inside a single-quoted
  string literal (``__vbuffer.push('...')``).
- The original template source embedded for debug error reports lives
  inside a double-quoted literal, with line breaks replaced by a marker the
  runtime turns back into newlines.

"""

from __future__ import annotations

import re

from razorgen.utils.constants import JS_RESERVED_WORDS, LINE_BREAK_MARKER

_MARKUP_CONTENT_ESCAPES = str.maketrans(
    {
        "\\": "\\\\",
        "'": "\\'",
        "\n": "\\n",
        "\r": "\\r",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)

_DEBUG_ESCAPES = str.maketrans(
    {
        "\\": "\\\\",
        '"': '\\"',
        "'": "\\'",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")

_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


def escape_markup_content(text: str) -> str:
    """Escape text for a single-quoted JavaScript string literal.

    Backslashes, single quotes and line terminators are escaped; everything
    else passes through unchanged.
    """
    return text.translate(_MARKUP_CONTENT_ESCAPES)


def escape_for_debug(source: str) -> str:
    """Escape template source for a double-quoted JavaScript string literal.

    Line breaks become LINE_BREAK_MARKER, so the result is always a single
    line with every quote character escaped.
    """
    return _LINE_BREAK.sub(LINE_BREAK_MARKER, source.translate(_DEBUG_ESCAPES))


def is_identifier(name: str) -> bool:
    """True when ``name`` can be used as a JavaScript variable name."""
    return bool(_IDENTIFIER.fullmatch(name)) and name not in JS_RESERVED_WORDS
