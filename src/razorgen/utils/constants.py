"""Shared constants for razorgen.

Kept separate from escaping.py so config validation and the skeleton
builder can share them without importing each other.
"""

from __future__ import annotations

# Placeholder for line breaks in the debug copy of the template source.
# The runtime's reportError() splits on it to rebuild source lines.
LINE_BREAK_MARKER = "!LB!"

# Names that cannot be used as helpers/model identifiers
# Source: ECMAScript 2023 reserved words + strict-mode literals
JS_RESERVED_WORDS: frozenset[str] = frozenset(
    {
        # Keywords
        "break",
        "case",
        "catch",
        "class",
        "const",
        "continue",
        "debugger",
        "default",
        "delete",
        "do",
        "else",
        "export",
        "extends",
        "finally",
        "for",
        "function",
        "if",
        "import",
        "in",
        "instanceof",
        "new",
        "return",
        "super",
        "switch",
        "this",
        "throw",
        "try",
        "typeof",
        "var",
        "void",
        "while",
        "with",
        "yield",
        # Future reserved
        "enum",
        "await",
        # Literals
        "null",
        "true",
        "false",
        # Strict mode
        "let",
        "static",
        "implements",
        "interface",
        "package",
        "private",
        "protected",
        "public",
        # Generated-code locals
        "__vbuffer",
        "__vopts",
    }
)
