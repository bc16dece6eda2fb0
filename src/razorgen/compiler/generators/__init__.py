"""Node generation rules for the razorgen compiler.

One ``_gen_<kind>(node, parent)`` method per node kind, grouped by family:
- basic: Program, Text
- expressions: ExplicitExpression, Expression, IndexExpression
- markup: Markup, MarkupAttribute
- control_flow: Block

Each rule returns the source fragment for its node. ``parent`` is the kind
of the node's immediate ancestor (None for the root), which decides
whether the node is rendered output or generated code.

"""

from __future__ import annotations

from razorgen.compiler.generators.basic import BasicGeneratorMixin
from razorgen.compiler.generators.control_flow import ControlFlowGeneratorMixin
from razorgen.compiler.generators.expressions import ExpressionGeneratorMixin
from razorgen.compiler.generators.markup import MarkupGeneratorMixin


class NodeGenerationMixin(
    BasicGeneratorMixin,
    ExpressionGeneratorMixin,
    MarkupGeneratorMixin,
    ControlFlowGeneratorMixin,
):
    """Combined mixin providing a generation rule for every node kind.

    Host attributes and cross-mixin dependencies are declared via inline
    TYPE_CHECKING blocks in each individual mixin.

    """
