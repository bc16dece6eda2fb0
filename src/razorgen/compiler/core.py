"""razorgen Compiler Core — tree walker and generation entry point.

The Compiler turns a template syntax tree into JavaScript source for a
render function. It never runs the template; the output is text for a host
to compile.

Design Principles:
1. **Type-directed dispatch**: Dict-based NodeKind → rule lookup, no fallback
2. **Parent kind threading**: each child is generated with its parent's kind
   as an argument; nodes are never mutated
3. **Source order**: depth first, left to right, so buffer pushes appear in
   template order
4. **Text post-pass**: literal pushes are merged after the skeleton is added

Pipeline:
    root ─► _generate() ─► body ─► skeleton.wrap() ─► condense() ─► source

Example:
    >>> from razorgen import Compiler, GenerationConfig
    >>> from razorgen.nodes import Program, Text
    >>> compiler = Compiler(GenerationConfig(simple=True))
    >>> print(compiler.generate(Program(body=(Text(value="Hi"),))))
    var __vbuffer = html.buffer;
    html.options = __vopts;
    model = model || {};
    __vbuffer.push('Hi');
    return html.buffer.join("");

(Trailing spaces after each skeleton line are omitted above.)

"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from razorgen.compiler import skeleton
from razorgen.compiler.condense import condense
from razorgen.compiler.generators import NodeGenerationMixin
from razorgen.config import GenerationConfig
from razorgen.exceptions import UnknownNodeError
from razorgen.nodes.base import Node, NodeKind
from razorgen.tracing import NullTracer

if TYPE_CHECKING:
    from razorgen.tracing import TraceSink

logger = logging.getLogger(__name__)


class Compiler(NodeGenerationMixin):
    """Generate render-function source from a syntax tree.

    A Compiler is bound to one immutable GenerationConfig and may be reused
    for any number of trees. It keeps no state between calls apart from the
    walk depth reported to the trace sink, so use one instance per thread.

    Attributes:
        _config: Options for every pass run by this compiler
        _tracer: Receives enter/leave events for each visited node
        _depth: Current nesting depth during a walk

    Node Dispatch:
        Uses O(1) dict lookup for node kind → rule:
            ```python
            dispatch = {
                NodeKind.TEXT: self._gen_text,
                NodeKind.MARKUP: self._gen_markup,
                ...
            }
            handler = dispatch[node.kind]
            ```
        A node whose kind is not in the table raises UnknownNodeError.

    """

    __slots__ = (
        "_config",
        "_depth",
        "_node_dispatch",
        "_tracer",
    )

    def __init__(self, config: GenerationConfig | None = None, tracer: TraceSink | None = None):
        self._config = config or GenerationConfig()
        self._tracer: TraceSink = tracer or NullTracer()
        self._depth = 0

    @property
    def config(self) -> GenerationConfig:
        return self._config

    def generate(self, root: Node) -> str:
        """Generate the complete render-function source for ``root``.

        Validates the config, walks the tree, wraps the body in the
        standalone or helper skeleton, then condenses the result.

        Raises:
            ConfigurationError: The config cannot produce valid source
            UnknownNodeError: The tree contains a node without a rule
        """
        self._config.validate()
        body = self.generate_body(root)
        source = condense(skeleton.wrap(body, self._config))
        logger.debug(
            "Generated %s skeleton: %d chars of body, %d chars total",
            "helper" if self._config.as_helper else "standalone",
            len(body),
            len(source),
        )
        return source

    def generate_body(self, root: Node) -> str:
        """Walk ``root`` and return the raw generated body.

        No skeleton and no condensing; mainly useful for inspecting what a
        single construct generates.
        """
        self._depth = 0
        return self._generate(root, None)

    def _generate(self, node: Node, parent: NodeKind | None) -> str:
        """Generate one node, given the kind of its parent."""
        kind = getattr(type(node), "kind", None) if isinstance(node, Node) else None
        handler = self._get_node_dispatch().get(kind) if kind is not None else None
        if handler is None:
            raise UnknownNodeError(kind.label if kind is not None else type(node).__name__)

        self._tracer.enter(kind, self._depth)
        self._depth += 1
        code = handler(node, parent)
        self._depth -= 1
        self._tracer.leave(kind, self._depth)
        return code

    def _generate_all(self, nodes: Sequence[Node], parent: NodeKind, separator: str = "") -> str:
        """Generate children in order, all with the same parent kind."""
        return separator.join(self._generate(child, parent) for child in nodes)

    def _get_node_dispatch(self) -> dict[NodeKind, Callable[[Any, NodeKind | None], str]]:
        """Get node kind dispatch table (cached on first call)."""
        if not hasattr(self, "_node_dispatch"):
            self._node_dispatch = {
                NodeKind.PROGRAM: self._gen_program,
                NodeKind.EXPLICIT_EXPRESSION: self._gen_explicit_expression,
                NodeKind.EXPRESSION: self._gen_expression,
                NodeKind.MARKUP: self._gen_markup,
                NodeKind.MARKUP_ATTRIBUTE: self._gen_markup_attribute,
                NodeKind.BLOCK: self._gen_block,
                NodeKind.INDEX_EXPRESSION: self._gen_index_expression,
                NodeKind.TEXT: self._gen_text,
            }
        return self._node_dispatch


def generate(
    root: Node,
    config: GenerationConfig | None = None,
    *,
    tracer: TraceSink | None = None,
    **options: Any,
) -> str:
    """Generate render-function source for ``root`` in one call.

    ``options`` override fields of ``config`` (or of the defaults) and accept
    the same names as GenerationConfig.from_options:

        >>> generate(tree, simple=True, htmlEscape=False)  # doctest: +SKIP

    """
    if options:
        base = config or GenerationConfig()
        config = GenerationConfig.from_options(_as_options(base), **options)
    return Compiler(config, tracer=tracer).generate(root)


def _as_options(config: GenerationConfig) -> dict[str, Any]:
    return dataclasses.asdict(config)
