"""Type definitions for the frame graph.

- :class:`Frame`: immutable handle for a registered reference frame.
- :class:`Edge`: directed transformation between two frames.
- :class:`FramePath`: ordered frames from a source to a destination.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import NamedTuple

from jax import Array


@dataclass(frozen=True)
class Frame:
    """A registered reference frame.

    Frames are compared and hashed by value, so a handle from
    :meth:`FrameGraph.find_frame` can be used as a mapping key.

    Attributes:
        name: Unique frame name.
        index: Registration position within its graph.
    """

    name: str
    index: int

    def __str__(self) -> str:
        return self.name


class Edge(NamedTuple):
    """Directed transformation from one frame to another.

    Attributes:
        source: Frame the matrix maps from.
        target: Frame the matrix maps to.
        label: Human-readable description.
        matrix: 3x3 conversion matrix applied as ``matrix @ vector``.
    """

    source: Frame
    target: Frame
    label: str
    matrix: Array


class FramePath(NamedTuple):
    """Ordered sequence of frames from source to destination.

    Attributes:
        frames: Frames visited, starting with the source and ending with
            the destination.
    """

    frames: tuple[Frame, ...]

    @property
    def source(self) -> Frame:
        return self.frames[0]

    @property
    def destination(self) -> Frame:
        return self.frames[-1]

    @property
    def hops(self) -> int:
        """Number of edges traversed (``len(frames) - 1``)."""
        return len(self.frames) - 1

    def names(self) -> tuple[str, ...]:
        """Return the frame names along the path."""
        return tuple(frame.name for frame in self.frames)

    def pairs(self) -> Iterator[tuple[Frame, Frame]]:
        """Yield consecutive ``(from, to)`` frame pairs."""
        return zip(self.frames[:-1], self.frames[1:])
