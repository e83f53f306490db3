"""Error types raised by the frame graph, path resolver and composer.

Each error carries the offending frame name(s) as attributes so callers
can inspect the failure without parsing the message.
"""

from __future__ import annotations


class FrameConversionError(Exception):
    """Base class for all frame conversion failures."""


class FrameNotFoundError(FrameConversionError, KeyError):
    """A frame name is not registered in the graph.

    Args:
        name: The name that was looked up.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Frame not found: '{name}'")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class UnknownFrameError(FrameNotFoundError):
    """An edge endpoint refers to a frame that was never registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.args = (f"Cannot add edge: unknown frame '{name}'",)


class DuplicateFrameError(FrameConversionError, ValueError):
    """A frame with the same name is already registered.

    Args:
        name: The colliding name.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Frame already registered: '{name}'")


class UnreachablePathError(FrameConversionError):
    """Breadth-first search finished without reaching the destination.

    Args:
        source: Name of the start frame.
        destination: Name of the frame that was never discovered.
    """

    def __init__(self, source: str, destination: str) -> None:
        self.source = source
        self.destination = destination
        super().__init__(f"No path from '{source}' to '{destination}'")


class EdgeMissingError(FrameConversionError, RuntimeError):
    """An edge on a resolved path is absent from the graph.

    Indicates that a path was not produced by :func:`resolve_path` on the
    same graph; it is a programming error, not a user input error.

    Args:
        source: Name of the edge's start frame.
        target: Name of the edge's end frame.
    """

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Missing edge '{source}' -> '{target}' on resolved path")
