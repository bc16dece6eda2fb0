"""Tests for the literal-push condensing pass."""

import pytest

from razorgen.compiler.condense import collapse_newlines, condense, merge_literal_pushes


class TestMergeLiteralPushes:
    def test_adjacent_literals_merge(self):
        source = "\n__vbuffer.push('<');\n\n__vbuffer.push('br');\n\n__vbuffer.push(' />');\n"
        assert merge_literal_pushes(source) == "\n__vbuffer.push('<br />');\n"

    def test_single_literal_untouched(self):
        source = "\n__vbuffer.push('a');\n"
        assert merge_literal_pushes(source) == source

    def test_expression_push_breaks_run(self):
        source = (
            "\n__vbuffer.push('a');\n"
            "\n__vbuffer.push(x);\n"
            "\n__vbuffer.push('b');\n"
        )
        assert merge_literal_pushes(source) == source

    def test_expression_ending_in_literal_is_not_merged(self):
        source = "\n__vbuffer.push(ok ? 'x' : 'y');\n\n__vbuffer.push('z');\n"
        assert merge_literal_pushes(source) == source

    def test_escaped_quotes_stay_inside_literal(self):
        source = "\n__vbuffer.push('it\\'s');\n\n__vbuffer.push('!');\n"
        assert merge_literal_pushes(source) == "\n__vbuffer.push('it\\'s!');\n"

    def test_escaped_backslash_before_closing_quote(self):
        source = "\n__vbuffer.push('a\\\\');\n\n__vbuffer.push('b');\n"
        assert merge_literal_pushes(source) == "\n__vbuffer.push('a\\\\b');\n"

    def test_raw_code_between_literals_blocks_merge(self):
        source = "\n__vbuffer.push('a');\n}\n__vbuffer.push('b');\n"
        assert merge_literal_pushes(source) == source

    def test_push_not_at_line_start_is_left_alone(self):
        source = "x;__vbuffer.push('a');\n__vbuffer.push('b');\n"
        assert merge_literal_pushes(source) == source

    def test_empty_literal_merges(self):
        source = "\n__vbuffer.push('');\n__vbuffer.push('=');\n"
        assert merge_literal_pushes(source) == "\n__vbuffer.push('=');\n"


class TestCollapseNewlines:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("a\n\nb", "a\nb"),
            ("a\n\n\n\nb", "a\nb"),
            ("a\nb", "a\nb"),
            ("\n\n", "\n"),
            ("", ""),
        ],
    )
    def test_collapse(self, source, expected):
        assert collapse_newlines(source) == expected


class TestCondense:
    def test_merges_then_collapses(self):
        source = "x; \n\n__vbuffer.push('a');\n\n__vbuffer.push('b');\n\n\ny;"
        assert condense(source) == "x; \n__vbuffer.push('ab');\ny;"

    def test_fixed_point(self):
        source = (
            "if(a){\n__vbuffer.push('<');\n\n__vbuffer.push('p');\n\n"
            "__vbuffer.push(v);\n\n__vbuffer.push('>');\n\n__vbuffer.push('!');\n}\n\n"
        )
        once = condense(source)
        assert condense(once) == once
        assert once == "if(a){\n__vbuffer.push('<p');\n__vbuffer.push(v);\n__vbuffer.push('>!');\n}\n"
