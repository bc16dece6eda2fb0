"""Exceptions for the razorgen code generator.

Exception Hierarchy:
CodegenError (base)
├── UnknownNodeError       # Node kind with no generation rule (internal)
├── ConfigurationError     # Malformed GenerationConfig
└── NodeLoadError          # Malformed parser output handed to node_from_dict

None of these are recovered inside the generator. A failed pass produces
no output at all; the exception propagates to the caller.

Errors raised while the *generated* program runs are not represented here.
With ``debug`` enabled the generated code forwards them to the host's
``reportError`` operation instead.

Example:
    ```
    R-GEN-001: No generation rule for node kind 'Comment'
      Docs: https://razorgen.readthedocs.io/en/latest/errors.html#r-gen-001
    ```

"""

from __future__ import annotations

from enum import Enum

# ---------------------------------------------------------------------------
# Error codes
# ---------------------------------------------------------------------------

_DOCS_BASE = "https://razorgen.readthedocs.io/en/latest/errors.html"


class ErrorCode(Enum):
    """Searchable error codes for razorgen errors.

    Format: R-{CATEGORY}-{NUMBER}
    Categories: GEN (generation), CFG (configuration), LOD (node loading)
    """

    # Generation errors (R-GEN-xxx)
    UNKNOWN_NODE = "R-GEN-001"

    # Configuration errors (R-CFG-xxx)
    INVALID_CONFIG = "R-CFG-001"

    # Node loading errors (R-LOD-xxx)
    MALFORMED_NODE = "R-LOD-001"

    @property
    def docs_url(self) -> str:
        """Documentation URL for this error code."""
        return f"{_DOCS_BASE}#{self.value.lower()}"

    @property
    def category(self) -> str:
        """Error category (e.g., 'generation', 'configuration', 'loading')."""
        prefix = self.value.split("-")[1]
        return {
            "GEN": "generation",
            "CFG": "configuration",
            "LOD": "loading",
        }.get(prefix, "unknown")


class CodegenError(Exception):
    """Base exception for all razorgen errors.

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format error as a short terminal diagnostic.

        Format::

            R-CFG-001: Invalid helpers_name '1html': not a JavaScript identifier
              Docs: https://razorgen.readthedocs.io/en/latest/errors.html#r-cfg-001
        """
        parts: list[str] = []

        header = str(self)
        if self.code:
            code_str = self.code.value
            if code_str not in header:
                header = f"{code_str}: {header}"
        parts.append(header)

        if self.code:
            parts.append(f"  Docs: {self.code.docs_url}")

        return "\n".join(parts)


class UnknownNodeError(CodegenError):
    """A node reached the generator that has no generation rule.

    This signals a mismatch between the tree producer and the generator,
    not a user error, and aborts the whole generation pass.
    """

    code: ErrorCode | None = ErrorCode.UNKNOWN_NODE

    def __init__(self, kind: object, message: str | None = None):
        self.kind = kind
        super().__init__(message or f"No generation rule for node kind {kind!r}")


class ConfigurationError(CodegenError):
    """The generation configuration cannot produce valid source.

    Attributes:
        field: Name of the offending GenerationConfig field, if known.
    """

    code: ErrorCode | None = ErrorCode.INVALID_CONFIG

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class NodeLoadError(CodegenError):
    """Parser output could not be converted into syntax-tree nodes."""

    code: ErrorCode | None = ErrorCode.MALFORMED_NODE

    def __init__(self, message: str, node_type: str | None = None):
        self.node_type = node_type
        if node_type:
            message = f"{message} (in {node_type})"
        super().__init__(message)
