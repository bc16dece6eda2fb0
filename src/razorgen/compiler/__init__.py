"""razorgen compiler: syntax tree → render-function source.

Modules:
- core: Compiler (tree walker / dispatcher) and generate()
- generators: one generation rule per node kind
- buffer: output-buffer statements and the content-bearing rule
- skeleton: standalone and helper head/tail text
- condense: literal-push merging post-pass
"""

from razorgen.compiler.core import Compiler, generate

__all__ = ["Compiler", "generate"]
