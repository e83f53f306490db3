"""Directed graph of reference frames and their conversion matrices.

A :class:`FrameGraph` holds the frames (nodes) and transformation edges
for a single conversion call.  Edge matrices depend on per-call angles,
so a graph is built, queried, and discarded; it is not meant to be shared
between calls.

Outgoing edges are kept in registration order, which fixes the
traversal order of :func:`~skyframes.graph.resolve_path` and hence the
tie-break between equal-length paths.
"""

from __future__ import annotations

import logging

import jax.numpy as jnp
from jax.typing import ArrayLike

from skyframes.config import get_dtype
from skyframes.graph._errors import DuplicateFrameError, FrameNotFoundError, UnknownFrameError
from skyframes.graph._types import Edge, Frame

logger = logging.getLogger(__name__)

MATRIX_SHAPE = (3, 3)


class FrameGraph:
    """Registry of named frames and directed conversion edges.

    Examples:
        ```python
        import jax.numpy as jnp
        from skyframes.graph import FrameGraph
        g = FrameGraph()
        g.register_frame("A")
        g.register_frame("B")
        g.add_edge("A", "B", "A to B", jnp.eye(3))
        ```
    """

    def __init__(self) -> None:
        self._frames: dict[str, Frame] = {}
        self._adjacency: dict[Frame, dict[Frame, Edge]] = {}

    # Frames

    def register_frame(self, name: str) -> Frame:
        """Register a new frame.

        Args:
            name: Unique frame name.

        Returns:
            Frame: Handle for the new frame.

        Raises:
            DuplicateFrameError: If *name* is already registered.
        """
        name = str(name)
        if name in self._frames:
            raise DuplicateFrameError(name)
        frame = Frame(name, len(self._frames))
        self._frames[name] = frame
        self._adjacency[frame] = {}
        return frame

    def find_frame(self, name: str) -> Frame:
        """Look up a frame by name.

        Args:
            name: Frame name.

        Returns:
            Frame: The registered frame.

        Raises:
            FrameNotFoundError: If *name* is not registered.
        """
        try:
            return self._frames[str(name)]
        except KeyError:
            raise FrameNotFoundError(str(name)) from None

    @property
    def frames(self) -> tuple[Frame, ...]:
        """Registered frames, in registration order."""
        return tuple(self._frames.values())

    def __contains__(self, name: object) -> bool:
        return str(name) in self._frames

    def __len__(self) -> int:
        return len(self._frames)

    # Edges

    def add_edge(self, source: str, target: str, label: str, matrix: ArrayLike) -> Edge:
        """Insert a directed edge from *source* to *target*.

        Edges are not mirrored; the inverse direction must be added
        separately.  Adding an edge for an ordered pair that already has
        one replaces the old edge but keeps its position in traversal
        order.

        Args:
            source: Name of the frame the matrix maps from.
            target: Name of the frame the matrix maps to.
            label: Human-readable description.
            matrix: 3x3 conversion matrix.

        Returns:
            Edge: The stored edge.

        Raises:
            UnknownFrameError: If either endpoint is not registered.
            ValueError: If *source* equals *target* or *matrix* is not 3x3.
        """
        if str(source) not in self._frames:
            raise UnknownFrameError(str(source))
        if str(target) not in self._frames:
            raise UnknownFrameError(str(target))
        frm = self._frames[str(source)]
        to = self._frames[str(target)]
        if frm == to:
            raise ValueError(f"Edge endpoints must differ, got '{frm.name}' twice")

        matrix = jnp.asarray(matrix, dtype=get_dtype())
        if matrix.shape != MATRIX_SHAPE:
            raise ValueError(
                f"Conversion matrix for '{label}' must have shape {MATRIX_SHAPE}, "
                f"got {matrix.shape}"
            )

        out = self._adjacency[frm]
        if to in out:
            logger.warning(
                "Replacing edge %s -> %s ('%s' overwritten by '%s')",
                frm.name,
                to.name,
                out[to].label,
                label,
            )
        edge = Edge(frm, to, label, matrix)
        out[to] = edge
        return edge

    def get_edge(self, source: Frame | str, target: Frame | str) -> Edge | None:
        """Return the edge from *source* to *target*, or ``None`` if absent.

        Args:
            source: Frame handle or name.
            target: Frame handle or name.

        Returns:
            Edge | None: The edge, if one is registered.
        """
        frm = self._frames.get(_name(source))
        to = self._frames.get(_name(target))
        if frm is None or to is None:
            return None
        return self._adjacency[frm].get(to)

    def out_edges(self, frame: Frame | str) -> tuple[Edge, ...]:
        """Return the outgoing edges of *frame* in registration order.

        Raises:
            FrameNotFoundError: If *frame* is not registered.
        """
        return tuple(self._adjacency[self.find_frame(_name(frame))].values())

    @property
    def edges(self) -> tuple[Edge, ...]:
        """All edges, grouped by source frame."""
        return tuple(edge for out in self._adjacency.values() for edge in out.values())

    # Export

    def to_dot(self, name: str = "frames") -> str:
        """Render the graph topology in Graphviz DOT format.

        Args:
            name: Graph identifier.

        Returns:
            str: DOT source with one node per frame and one labelled arc
            per edge.
        """
        lines = [f'digraph "{name}" {{']
        for frame in self._frames.values():
            lines.append(f'  {frame.index} [label="{frame.name}"];')
        for edge in self.edges:
            lines.append(
                f'  {edge.source.index} -> {edge.target.index} [label="{edge.label}"];'
            )
        lines.append("}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"FrameGraph(frames={len(self._frames)}, edges={len(self.edges)})"


def _name(frame: Frame | str) -> str:
    return frame.name if isinstance(frame, Frame) else str(frame)
