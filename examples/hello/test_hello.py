"""Tests for the hello example."""


class TestHelloApp:
    """Verify the hello example generates the expected source."""

    def test_output(self, example_app) -> None:
        assert example_app.output == (
            "var __vbuffer = html.buffer; \n"
            "html.options = __vopts; \n"
            "model = model || {}; \n"
            "__vbuffer.push('<p>Hello, ');\n"
            "__vbuffer.push(html.escape(model.name).toHtmlString());\n"
            "__vbuffer.push('!</p>');\n"
            'return html.buffer.join(""); \n'
        )

    def test_regenerate_as_helper(self, example_app) -> None:
        from razorgen import generate

        result = generate(example_app.tree, html_escape=False, as_helper=True)
        assert result.startswith("var __vbuffer = this.buffer; \n")
        assert "__vbuffer.push(model.name);" in result
