"""Assertion and construction helpers shared by razorgen tests."""

from __future__ import annotations

from razorgen import Compiler, GenerationConfig
from razorgen.compiler.buffer import content_append, expression_append


def gen(node, parent=None, **options) -> str:
    """Generate a single node as if it had a parent of kind ``parent``."""
    return Compiler(GenerationConfig(**options))._generate(node, parent)


def push(text: str) -> str:
    """Expected literal push for already-escaped ``text``."""
    return content_append(text)


def push_expr(expr: str) -> str:
    """Expected push of a JavaScript expression."""
    return expression_append(expr)


def escaped(expr: str, helpers: str = "html") -> str:
    """Expected escape call around ``expr``."""
    return f"{helpers}.escape({expr}).toHtmlString()"


def assert_in_order(source: str, *parts: str) -> None:
    """Assert every part occurs in ``source``, each after the previous one.

    Args:
        source: Generated source to search.
        parts: Fragments in the order they must appear.
    """
    position = -1
    for part in parts:
        found = source.find(part, position + 1)
        assert found > position, (
            f"Generated source missing or out of order:\n"
            f"  Expected after offset {position}: {part!r}\n"
            f"  Source: {source!r}"
        )
        position = found
