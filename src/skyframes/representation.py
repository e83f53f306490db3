"""Spherical (latitude, longitude, distance) point representation.

Provides :class:`SphericalRepresentation`, the source type accepted by
:func:`skyframes.convert`, together with the two adapters between it and
the numeric column vectors the conversion matrices operate on:

- :func:`column_vector` converts latitude and longitude to radians once
  and builds ``dist * [cos(lat) cos(lon), cos(lat) sin(lon), sin(lat)]``.
- :func:`spherical_from_vector` inverts it, recovering latitude in
  ``[-π/2, π/2]``, longitude in ``[0, 2π)`` and the distance.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from skyframes.config import get_dtype
from skyframes.units import Angle, AngleUnit, as_angle

VECTOR_DIM = 3


class SphericalRepresentation:
    """A point given by latitude, longitude and distance.

    Latitude is measured up from the fundamental plane (declination,
    altitude, ecliptic or galactic latitude); longitude is measured
    within it (hour angle, azimuth, right ascension, ecliptic or galactic
    longitude).

    Args:
        lat (Angle | float): Latitude.  Bare numbers are radians.
        lon (Angle | float): Longitude.  Bare numbers are radians.
        dist (float): Distance, in any length unit. Default: ``1.0``.

    Examples:
        ```python
        from skyframes import Angle, SphericalRepresentation
        rep = SphericalRepresentation(Angle.degrees(30.0), Angle.degrees(45.0))
        rep.get_lat_lon_dist()
        ```
    """

    __slots__ = ("_lat", "_lon", "_dist")

    def __init__(self, lat: Angle | float, lon: Angle | float, dist: float = 1.0) -> None:
        self._lat = as_angle(lat)
        self._lon = as_angle(lon)
        self._dist = jnp.asarray(dist, dtype=get_dtype())

    @classmethod
    def from_degrees(cls, lat: float, lon: float, dist: float = 1.0) -> SphericalRepresentation:
        """Create a representation from latitude and longitude in degrees."""
        return cls(Angle.degrees(lat), Angle.degrees(lon), dist)

    @property
    def lat(self) -> Angle:
        """Latitude."""
        return self._lat

    @property
    def lon(self) -> Angle:
        """Longitude."""
        return self._lon

    @property
    def dist(self) -> Array:
        """Distance."""
        return self._dist

    def get_lat_lon_dist(self) -> tuple[Angle, Angle, Array]:
        """Return ``(lat, lon, dist)``."""
        return self._lat, self._lon, self._dist

    def to(self, unit: AngleUnit) -> SphericalRepresentation:
        """Cast latitude and longitude to *unit*.

        The distance is carried over unchanged.

        Args:
            unit (AngleUnit): Target angle unit.

        Returns:
            SphericalRepresentation: New representation in *unit*.
        """
        return SphericalRepresentation(self._lat.to(unit), self._lon.to(unit), self._dist)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SphericalRepresentation):
            return NotImplemented
        return (
            self._lat == other._lat
            and self._lon == other._lon
            and bool(jnp.allclose(self._dist, other._dist))
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"SphericalRepresentation(lat={self._lat!r}, lon={self._lon!r}, "
            f"dist={float(self._dist)!r})"
        )


def column_vector(representation: SphericalRepresentation) -> Array:
    """Build the column vector of a spherical representation.

    Latitude and longitude are each converted to radians exactly once;
    values already in radians are used as stored.

    Args:
        representation: Source point.

    Returns:
        Shape ``(3,)`` vector
        ``dist * [cos(lat) cos(lon), cos(lat) sin(lon), sin(lat)]``.

    Examples:
        ```python
        from skyframes import SphericalRepresentation
        from skyframes.representation import column_vector
        v = column_vector(SphericalRepresentation.from_degrees(0.0, 90.0))
        ```
    """
    lat = representation.lat.to_radians()
    lon = representation.lon.to_radians()
    dist = representation.dist

    cos_lat = jnp.cos(lat)

    return dist * jnp.array(
        [cos_lat * jnp.cos(lon), cos_lat * jnp.sin(lon), jnp.sin(lat)],
        dtype=get_dtype(),
    )


def spherical_from_vector(
    vector: ArrayLike,
    unit: AngleUnit = AngleUnit.RADIANS,
) -> SphericalRepresentation:
    """Recover latitude, longitude and distance from a column vector.

    Args:
        vector: Shape ``(3,)`` column vector.
        unit: Unit of the returned latitude and longitude.
            Default: ``AngleUnit.RADIANS``.

    Returns:
        SphericalRepresentation: Latitude in ``[-π/2, π/2]`` and longitude
        in ``[0, 2π)`` (expressed in *unit*).

    Raises:
        ValueError: If *vector* does not have shape ``(3,)`` or is the zero
            vector.
    """
    vector = jnp.asarray(vector, dtype=get_dtype())
    if vector.shape != (VECTOR_DIM,):
        raise ValueError(f"Column vector must have shape ({VECTOR_DIM},), got {vector.shape}")

    dist = jnp.linalg.norm(vector)
    if float(dist) == 0.0:
        raise ValueError("Cannot recover latitude and longitude from a zero vector")

    lat = jnp.arcsin(jnp.clip(vector[2] / dist, -1.0, 1.0))
    lon = jnp.mod(jnp.arctan2(vector[1], vector[0]), 2.0 * jnp.pi)

    return SphericalRepresentation(Angle.radians(lat), Angle.radians(lon), dist).to(unit)
