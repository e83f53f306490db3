"""Frame conversion graph.

Provides the routing core of skyframes:

- :class:`FrameGraph`: named frames and directed conversion edges.
- :func:`resolve_path`: breadth-first search for the fewest-hop path.
- :func:`apply_path` / :func:`iter_path_transforms`: apply the edge
  matrices along a path in order.

Plus the error types raised by each stage.
"""

from ._composer import apply_path, iter_path_transforms
from ._errors import (
    DuplicateFrameError,
    EdgeMissingError,
    FrameConversionError,
    FrameNotFoundError,
    UnknownFrameError,
    UnreachablePathError,
)
from ._graph import FrameGraph
from ._resolver import resolve_path
from ._types import Edge, Frame, FramePath

__all__ = [
    # Types
    "Frame",
    "Edge",
    "FramePath",
    "FrameGraph",
    # Routing
    "resolve_path",
    "apply_path",
    "iter_path_transforms",
    # Errors
    "FrameConversionError",
    "FrameNotFoundError",
    "UnknownFrameError",
    "DuplicateFrameError",
    "UnreachablePathError",
    "EdgeMissingError",
]
