"""Hello World -- the simplest razorgen example.

Build the syntax tree for ``<p>Hello, @model.name!</p>`` by hand and
generate the render function body for it. No parser needed.

Run:
    python app.py
"""

from razorgen import Expression, Markup, Program, Text, generate

tree = Program(
    body=(
        Markup(
            name="p",
            values=(
                Text(value="Hello, "),
                Expression(values=(Text(value="model.name"),)),
                Text(value="!"),
            ),
        ),
    )
)

# Generate a standalone render function that returns the joined buffer
output = generate(tree, simple=True)


def main() -> None:
    print(output)

    # Same tree, without escaping and as a helper fragment
    print(generate(tree, html_escape=False, as_helper=True))


if __name__ == "__main__":
    main()
