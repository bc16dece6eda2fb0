"""razorgen — code generation backend for Razor-style templates.

Turns a parsed template syntax tree (markup, embedded expressions, control
blocks, text) into JavaScript source for a render function. The generated
code pushes each piece of output onto the runtime's buffer, escapes
interpolated values, and is wrapped either as a standalone render function
or as a helper fragment that runs inside another render.

Quickstart:
    >>> from razorgen import generate
    >>> from razorgen.nodes import Expression, Markup, Program, Text
    >>> tree = Program(body=(
    ...     Markup(name="p", values=(Text(value="Hi "), Expression(values=(Text(value="model.name"),)))),
    ... ))
    >>> source = generate(tree, simple=True)
    >>> "__vbuffer.push('<p>Hi ');" in source
    True

From parser output:
    >>> from razorgen import node_from_dict
    >>> tree = node_from_dict(parsed_json)  # doctest: +SKIP

Architecture:
Template Source → Lexer → Parser → syntax tree → Compiler → JS source → host

Only the last two arrows belong to razorgen. The generator never evaluates
the template, so it has no runtime dependencies beyond the standard library.

Thread-Safety:
Generation reads its tree and config and writes nothing shared. Nodes and
configs are frozen dataclasses; one Compiler per thread, or the generate()
function, is safe for concurrent use.

"""

from razorgen.compiler import Compiler, generate
from razorgen.config import GenerationConfig
from razorgen.exceptions import (
    CodegenError,
    ConfigurationError,
    ErrorCode,
    NodeLoadError,
    UnknownNodeError,
)
from razorgen.nodes import (
    Block,
    ExplicitExpression,
    Expression,
    IndexExpression,
    Markup,
    MarkupAttribute,
    Node,
    NodeKind,
    Program,
    Text,
    node_from_dict,
)
from razorgen.tracing import LoggingTracer, NullTracer, RecordingTracer, TraceSink

__version__ = "0.3.0"

__all__ = [
    "Block",
    "CodegenError",
    "Compiler",
    "ConfigurationError",
    "ErrorCode",
    "ExplicitExpression",
    "Expression",
    "GenerationConfig",
    "IndexExpression",
    "LoggingTracer",
    "Markup",
    "MarkupAttribute",
    "Node",
    "NodeKind",
    "NodeLoadError",
    "NullTracer",
    "Program",
    "RecordingTracer",
    "Text",
    "TraceSink",
    "UnknownNodeError",
    "generate",
    "node_from_dict",
]
