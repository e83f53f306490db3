"""Breadth-first path resolution over a :class:`FrameGraph`.

Edges are followed in their stored direction only.  Each frame's
outgoing edges are visited in registration order, so among several
shortest paths the one using earlier-registered edges wins.
"""

from __future__ import annotations

import logging
from collections import deque

from skyframes.graph._errors import UnreachablePathError
from skyframes.graph._graph import FrameGraph
from skyframes.graph._types import Frame, FramePath

logger = logging.getLogger(__name__)


def _predecessor_tree(graph: FrameGraph, source: Frame) -> dict[Frame, Frame | None]:
    """Map every frame reachable from *source* to the frame it was discovered from.

    The source maps to ``None``; frames absent from the mapping were never
    discovered.
    """
    predecessors: dict[Frame, Frame | None] = {source: None}
    queue = deque([source])

    while queue:
        frame = queue.popleft()
        for edge in graph.out_edges(frame):
            if edge.target not in predecessors:
                predecessors[edge.target] = frame
                queue.append(edge.target)

    return predecessors


def resolve_path(graph: FrameGraph, source: str, destination: str) -> FramePath:
    """Find the fewest-hop path from *source* to *destination*.

    Args:
        graph: Graph to search.
        source: Name of the start frame.
        destination: Name of the end frame.

    Returns:
        FramePath: Frames from *source* to *destination*.  When the two are
        the same frame the path holds that single frame and has zero hops.

    Raises:
        FrameNotFoundError: If either name is not registered.
        UnreachablePathError: If *destination* cannot be reached from
            *source* along directed edges.

    Examples:
        ```python
        from skyframes.conversion import build_reference_graph
        from skyframes.graph import resolve_path
        g = build_reference_graph(0.9, 0.0, 0.409)
        resolve_path(g, "Horizon", "Galactic").hops
        ```
    """
    src = graph.find_frame(source)
    dest = graph.find_frame(destination)

    predecessors = _predecessor_tree(graph, src)
    if dest not in predecessors:
        raise UnreachablePathError(src.name, dest.name)

    chain = [dest]
    while chain[-1] != src:
        chain.append(predecessors[chain[-1]])
    chain.reverse()

    path = FramePath(tuple(chain))
    logger.debug(
        "Resolved %s -> %s in %d hop(s): %s",
        src.name,
        dest.name,
        path.hops,
        " -> ".join(path.names()),
    )
    return path
