"""Trace sinks for observing the generator's tree walk.

The compiler reports every node it enters and leaves to a trace sink. The
default sink does nothing; ``LoggingTracer`` forwards events to the standard
``logging`` module and ``RecordingTracer`` keeps them in memory.

Example:
    >>> import logging
    >>> from razorgen import generate
    >>> from razorgen.tracing import LoggingTracer
    >>> logging.basicConfig(level=logging.DEBUG)
    >>> generate(tree, tracer=LoggingTracer())  # doctest: +SKIP
    DEBUG:razorgen.compiler:Entering Program
    DEBUG:razorgen.compiler:  Entering Text
    DEBUG:razorgen.compiler:  Leaving Text
    DEBUG:razorgen.compiler:Leaving Program

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from razorgen.nodes import NodeKind


class TraceSink(Protocol):
    """Receives node enter/leave events from the compiler."""

    def enter(self, kind: NodeKind, depth: int) -> None: ...

    def leave(self, kind: NodeKind, depth: int) -> None: ...


class NullTracer:
    """Trace sink that discards every event."""

    __slots__ = ()

    def enter(self, kind: NodeKind, depth: int) -> None:
        pass

    def leave(self, kind: NodeKind, depth: int) -> None:
        pass


class LoggingTracer:
    """Trace sink that writes ``Entering X`` / ``Leaving X`` log records.

    Args:
        logger: Logger to write to (default: ``razorgen.compiler``)
        level: Log level for trace records
    """

    __slots__ = ("_level", "_logger")

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.DEBUG):
        self._logger = logger or logging.getLogger("razorgen.compiler")
        self._level = level

    def enter(self, kind: NodeKind, depth: int) -> None:
        if self._logger.isEnabledFor(self._level):
            self._logger.log(self._level, "%sEntering %s", "  " * depth, kind.label)

    def leave(self, kind: NodeKind, depth: int) -> None:
        if self._logger.isEnabledFor(self._level):
            self._logger.log(self._level, "%sLeaving %s", "  " * depth, kind.label)


class RecordingTracer:
    """Trace sink that records ``(event, kind, depth)`` tuples in order."""

    __slots__ = ("events",)

    def __init__(self) -> None:
        self.events: list[tuple[str, NodeKind, int]] = []

    def enter(self, kind: NodeKind, depth: int) -> None:
        self.events.append(("enter", kind, depth))

    def leave(self, kind: NodeKind, depth: int) -> None:
        self.events.append(("leave", kind, depth))

    def visited(self) -> list[NodeKind]:
        """Node kinds in the order they were entered."""
        return [kind for event, kind, _ in self.events if event == "enter"]
