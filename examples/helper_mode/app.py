"""Helper mode -- debug-wrapped fragments for reusable helpers.

A helper body runs with ``this`` bound to the calling render's helpers
object, so it shares that render's buffer and model. With ``debug`` on,
runtime errors are reported together with the original template source.

Run:
    python app.py
"""

import logging

from razorgen import (
    Compiler,
    ExplicitExpression,
    GenerationConfig,
    LoggingTracer,
    Markup,
    MarkupAttribute,
    Program,
    Text,
)

SOURCE = '<a href="@(model.url)">\n  link\n</a>'

tree = Program(
    body=(
        Markup(
            name="a",
            attributes=(
                MarkupAttribute(
                    left=(Text(value="href"),),
                    right=(ExplicitExpression(values=(Text(value="model.url"),)),),
                    right_is_quoted='"',
                ),
            ),
            values=(Text(value="\n  link\n"),),
        ),
    )
)

config = GenerationConfig(as_helper=True, debug=True, source=SOURCE)
output = Compiler(config).generate(tree)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    # Trace the walk while generating
    print(Compiler(config, tracer=LoggingTracer()).generate(tree))


if __name__ == "__main__":
    main()
