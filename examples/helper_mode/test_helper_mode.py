"""Tests for the helper_mode example."""


class TestHelperModeApp:
    def test_helper_head(self, example_app) -> None:
        assert example_app.output.startswith(
            "try { \nvar __vbuffer = this.buffer; \nvar model = this.model; \nvar html = this; \n"
        )

    def test_attribute_value(self, example_app) -> None:
        output = example_app.output
        assert "__vbuffer.push('<a href=\"');" in output
        assert "__vbuffer.push((html.escape(model.url).toHtmlString()));" in output
        assert "__vbuffer.push('\">\\n  link\\n</a>');" in output

    def test_source_reported_on_error(self, example_app) -> None:
        assert (
            'html.reportError( e, html.vl, html.vc, "<a href=\\"@(model.url)\\">!LB!  link!LB!</a>" );'
            in example_app.output
        )
