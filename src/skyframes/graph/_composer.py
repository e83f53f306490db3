"""Apply the conversion matrices along a resolved path.

Matrices are applied one at a time in path order rather than folded into
a single product, so each step can be checked and logged.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from skyframes.config import get_dtype
from skyframes.graph._errors import EdgeMissingError
from skyframes.graph._graph import FrameGraph
from skyframes.graph._types import Edge, FramePath

logger = logging.getLogger(__name__)


def iter_path_transforms(
    graph: FrameGraph,
    path: FramePath,
    vector: ArrayLike,
) -> Iterator[tuple[Edge, Array]]:
    """Apply each edge of *path* to *vector*, yielding after every step.

    Args:
        graph: Graph holding the edges.
        path: Path returned by :func:`~skyframes.graph.resolve_path`.
        vector: Shape ``(3,)`` vector expressed in ``path.source``.

    Yields:
        tuple[Edge, Array]: The edge just applied and the vector expressed
        in that edge's target frame.

    Raises:
        EdgeMissingError: If a consecutive pair on *path* has no edge.
    """
    current = jnp.asarray(vector, dtype=get_dtype())

    for step, (frm, to) in enumerate(path.pairs(), start=1):
        edge = graph.get_edge(frm, to)
        if edge is None:
            raise EdgeMissingError(frm.name, to.name)
        current = edge.matrix @ current
        logger.debug("Step %d/%d: %s -> %s", step, path.hops, edge.label, current)
        yield edge, current


def apply_path(graph: FrameGraph, path: FramePath, vector: ArrayLike) -> Array:
    """Transform *vector* from the first to the last frame of *path*.

    Exactly ``path.hops`` matrix-vector products are performed.  A
    single-frame path returns the vector unchanged.

    Args:
        graph: Graph holding the edges.
        path: Path returned by :func:`~skyframes.graph.resolve_path`.
        vector: Shape ``(3,)`` vector expressed in ``path.source``.

    Returns:
        Shape ``(3,)`` vector expressed in ``path.destination``.

    Raises:
        EdgeMissingError: If a consecutive pair on *path* has no edge.
    """
    result = jnp.asarray(vector, dtype=get_dtype())
    for _, result in iter_path_transforms(graph, path, result):
        pass
    return result
