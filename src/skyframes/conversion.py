"""Conversion between the catalog of celestial reference frames.

The catalog connects five frames through eight directed edges::

    Horizon <-> Equatorial_HA_Dec <-> Equatorial_RA_Dec <-> Ecliptic
                                                        <-> Galactic

The topology (frame names, edge endpoints, labels, and which matrix
builder supplies each edge) is a module-level constant.  Only the edge
matrices depend on the observer latitude, sidereal time and obliquity,
so :func:`build_reference_graph` evaluates the builders against the
catalog afresh for every call.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import NamedTuple

from jax import Array

from skyframes.frames import (
    rotation_ecliptic_to_radec,
    rotation_galactic_to_radec,
    rotation_hadec_to_horizon,
    rotation_hadec_to_radec,
    rotation_horizon_to_hadec,
    rotation_radec_to_ecliptic,
    rotation_radec_to_galactic,
    rotation_radec_to_hadec,
)
from skyframes.graph import FrameGraph, apply_path, resolve_path
from skyframes.representation import SphericalRepresentation, column_vector, spherical_from_vector
from skyframes.units import Angle, as_angle

logger = logging.getLogger(__name__)


class FrameName(enum.StrEnum):
    """Names of the frames in the reference catalog."""

    HORIZON = "Horizon"
    EQUATORIAL_HA_DEC = "Equatorial_HA_Dec"
    EQUATORIAL_RA_DEC = "Equatorial_RA_Dec"
    ECLIPTIC = "Ecliptic"
    GALACTIC = "Galactic"


class FrameParameters(NamedTuple):
    """Per-call angles the edge matrices depend on.

    Attributes:
        phi: Observer latitude.
        sidereal_time: Local sidereal time.
        obliquity: Obliquity of the ecliptic.
    """

    phi: Angle
    sidereal_time: Angle
    obliquity: Angle


class CatalogEdge(NamedTuple):
    """Static description of one catalog edge.

    Attributes:
        source: Frame the matrix maps from.
        target: Frame the matrix maps to.
        label: Human-readable description.
        builder: Computes the matrix from the call's parameters.
    """

    source: FrameName
    target: FrameName
    label: str
    builder: Callable[[FrameParameters], Array]


CATALOG_FRAMES: tuple[FrameName, ...] = tuple(FrameName)

CATALOG_EDGES: tuple[CatalogEdge, ...] = (
    CatalogEdge(
        FrameName.EQUATORIAL_HA_DEC,
        FrameName.HORIZON,
        "Equatorial HA Dec to Horizon",
        lambda p: rotation_hadec_to_horizon(p.phi),
    ),
    CatalogEdge(
        FrameName.HORIZON,
        FrameName.EQUATORIAL_HA_DEC,
        "Horizon to Equatorial HA Dec",
        lambda p: rotation_horizon_to_hadec(p.phi),
    ),
    CatalogEdge(
        FrameName.EQUATORIAL_HA_DEC,
        FrameName.EQUATORIAL_RA_DEC,
        "Equatorial HA Dec to Equatorial RA Dec",
        lambda p: rotation_hadec_to_radec(p.sidereal_time),
    ),
    CatalogEdge(
        FrameName.EQUATORIAL_RA_DEC,
        FrameName.EQUATORIAL_HA_DEC,
        "Equatorial RA Dec to Equatorial HA Dec",
        lambda p: rotation_radec_to_hadec(p.sidereal_time),
    ),
    CatalogEdge(
        FrameName.EQUATORIAL_RA_DEC,
        FrameName.ECLIPTIC,
        "Equatorial RA Dec to Ecliptic",
        lambda p: rotation_radec_to_ecliptic(p.obliquity),
    ),
    CatalogEdge(
        FrameName.ECLIPTIC,
        FrameName.EQUATORIAL_RA_DEC,
        "Ecliptic to Equatorial RA Dec",
        lambda p: rotation_ecliptic_to_radec(p.obliquity),
    ),
    CatalogEdge(
        FrameName.EQUATORIAL_RA_DEC,
        FrameName.GALACTIC,
        "Equatorial RA Dec to Galactic",
        lambda p: rotation_radec_to_galactic(),
    ),
    CatalogEdge(
        FrameName.GALACTIC,
        FrameName.EQUATORIAL_RA_DEC,
        "Galactic to Equatorial RA Dec",
        lambda p: rotation_galactic_to_radec(),
    ),
)


def build_reference_graph(
    phi: Angle | float,
    sidereal_time: Angle | float,
    obliquity: Angle | float,
) -> FrameGraph:
    """Build the catalog graph with matrices for the given parameters.

    Args:
        phi: Observer latitude.  Bare numbers are radians.
        sidereal_time: Local sidereal time as an angle.  Bare numbers are
            radians.
        obliquity: Obliquity of the ecliptic.  Bare numbers are radians.

    Returns:
        FrameGraph: A new graph with the 5 catalog frames and 8 edges.
    """
    params = FrameParameters(as_angle(phi), as_angle(sidereal_time), as_angle(obliquity))

    graph = FrameGraph()
    for name in CATALOG_FRAMES:
        graph.register_frame(name)
    for entry in CATALOG_EDGES:
        graph.add_edge(entry.source, entry.target, entry.label, entry.builder(params))

    logger.info(
        "Built frame graph (%d frames, %d edges) for phi=%s, sidereal_time=%s, obliquity=%s",
        len(graph),
        len(graph.edges),
        params.phi,
        params.sidereal_time,
        params.obliquity,
    )
    return graph


def convert(
    src: str,
    dest: str,
    phi: Angle | float,
    sidereal_time: Angle | float,
    obliquity: Angle | float,
    source: SphericalRepresentation,
) -> Array:
    """Convert a point from frame *src* to frame *dest*.

    Arithmetic runs in the configured dtype (:func:`~skyframes.config.get_dtype`,
    float64 by default), where a round trip through any catalog edge pair
    recovers the input angles to within 1e-9 rad.

    Args:
        src: Name of the frame *source* is expressed in.
        dest: Name of the frame to convert to.
        phi: Observer latitude.  Bare numbers are radians.
        sidereal_time: Local sidereal time as an angle.  Bare numbers are
            radians.
        obliquity: Obliquity of the ecliptic.  Bare numbers are radians.
        source: Point to convert.

    Returns:
        Shape ``(3,)`` column vector expressed in *dest*.  Use
        :func:`~skyframes.representation.spherical_from_vector` to recover
        latitude, longitude and distance.

    Raises:
        FrameNotFoundError: If *src* or *dest* is not a catalog frame.
        UnreachablePathError: If no directed path connects them.

    Examples:
        ```python
        from skyframes import Angle, SphericalRepresentation, convert
        rep = SphericalRepresentation.from_degrees(30.0, 45.0)
        v = convert("Horizon", "Equatorial_HA_Dec",
                    Angle.degrees(51.5), 0.0, 0.0, rep)
        ```
    """
    vector = column_vector(source)
    graph = build_reference_graph(phi, sidereal_time, obliquity)
    path = resolve_path(graph, src, dest)
    return apply_path(graph, path, vector)


def convert_representation(
    src: str,
    dest: str,
    phi: Angle | float,
    sidereal_time: Angle | float,
    obliquity: Angle | float,
    source: SphericalRepresentation,
) -> SphericalRepresentation:
    """Convert a point and return it as a :class:`SphericalRepresentation`.

    Wraps :func:`convert` followed by
    :func:`~skyframes.representation.spherical_from_vector`.  Angles are
    returned in the unit of the source latitude.

    Args:
        src: Name of the frame *source* is expressed in.
        dest: Name of the frame to convert to.
        phi: Observer latitude.  Bare numbers are radians.
        sidereal_time: Local sidereal time as an angle.  Bare numbers are
            radians.
        obliquity: Obliquity of the ecliptic.  Bare numbers are radians.
        source: Point to convert.

    Returns:
        SphericalRepresentation: The point in *dest*.
    """
    vector = convert(src, dest, phi, sidereal_time, obliquity, source)
    return spherical_from_vector(vector, source.lat.unit)
