"""Shared hypothesis strategies for razorgen property-based testing.

Provides syntax trees at three levels:

- **Leaves**: template text, implicit and explicit expressions
- **Content trees**: markup and control blocks nesting the leaves
- **Programs**: complete roots with a body of content trees

Template text never contains ``_`` so it cannot spell the generated
buffer variable; anything else, quotes and line breaks included, is fair
game.
"""

from __future__ import annotations

from hypothesis import strategies as st

from razorgen.nodes import (
    Block,
    ExplicitExpression,
    Expression,
    IndexExpression,
    Markup,
    MarkupAttribute,
    Program,
    Text,
)

# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------

template_text = st.text(
    alphabet=st.characters(
        blacklist_categories=("Cs",),  # no surrogates
        blacklist_characters="_\x00",
    ),
    max_size=40,
)

identifier = st.from_regex(r"[a-z][a-z0-9]{0,8}", fullmatch=True)

tag_name = st.sampled_from(["div", "p", "span", "li", "ul", "a", "br", "img", "input"])

quote_char = st.sampled_from([None, '"', "'"])

text_nodes = template_text.map(lambda value: Text(value=value))

explicit_expression_nodes = st.lists(identifier, min_size=1, max_size=3).map(
    lambda names: ExplicitExpression(values=(Text(value=" + ".join(names)),))
)

# @model.name, @model.items[i], @model.format(a + b)
expression_nodes = st.builds(
    lambda name, suffix: Expression(values=(Text(value=f"model.{name}"),) + suffix),
    identifier,
    st.one_of(
        st.just(()),
        identifier.map(lambda index: (IndexExpression(values=(Text(value=index),)),)),
        explicit_expression_nodes.map(lambda call: (call,)),
    ),
)

leaf_nodes = st.one_of(text_nodes, expression_nodes, explicit_expression_nodes)

# ---------------------------------------------------------------------------
# Content trees
# ---------------------------------------------------------------------------

attribute_nodes = st.builds(
    lambda name, value, quote: MarkupAttribute(
        left=(Text(value=name),),
        right=tuple(value),
        right_is_quoted=quote,
    ),
    identifier,
    st.lists(st.one_of(text_nodes, expression_nodes), max_size=2),
    quote_char,
)


# Literal tag names, or a computed one (@model.tag)
markup_names = st.one_of(
    tag_name,
    identifier.map(lambda name: (Expression(values=(Text(value=f"model.{name}"),)),)),
)


def _markup(children: st.SearchStrategy) -> st.SearchStrategy:
    return st.builds(
        lambda name, attrs, values, is_void, closed: Markup(
            name=name,
            attributes=tuple(attrs),
            values=() if is_void else tuple(values),
            is_void=is_void,
            void_closed=closed,
        ),
        markup_names,
        st.lists(attribute_nodes, max_size=2),
        st.lists(children, max_size=3),
        st.booleans(),
        st.booleans(),
    )


def _block(children: st.SearchStrategy) -> st.SearchStrategy:
    """``@if(model.x){ ... }``, optionally followed by ``else{ ... }``."""
    else_branch = st.lists(children, max_size=2).map(
        lambda values: (Text(value="else"), Block(values=tuple(values)))
    )
    return st.builds(
        lambda cond, values, tail: Block(
            head=(Text(value=f"if(model.{cond})"),), values=tuple(values), tail=tail
        ),
        identifier,
        st.lists(children, max_size=3),
        st.one_of(st.just(()), else_branch),
    )


content_nodes = st.recursive(
    leaf_nodes,
    lambda children: st.one_of(_markup(children), _block(children)),
    max_leaves=15,
)

# ---------------------------------------------------------------------------
# Programs
# ---------------------------------------------------------------------------

programs = st.lists(content_nodes, max_size=6).map(lambda body: Program(body=tuple(body)))
