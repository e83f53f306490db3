"""Hour angle/declination to right ascension/declination transformations.

The hour angle H and right ascension α are related through the local
sidereal time θ by ``H = θ - α``.  Since this flips the sense of the
longitude, the transformation is a reflection rather than a rotation:

    [[cos θ,  sin θ, 0],
     [sin θ, -cos θ, 0],
     [0,      0,     1]]

The matrix is its own inverse, so both directions share it.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array

from skyframes.config import get_dtype
from skyframes.units import Angle, as_angle


def rotation_hadec_to_radec(sidereal_time: Angle | float) -> Array:
    """Compute the 3x3 matrix from Equatorial HA/Dec to Equatorial RA/Dec.

    Args:
        sidereal_time: Local sidereal time as an angle.  Bare numbers are
            radians.

    Returns:
        3x3 matrix (HA/Dec -> RA/Dec).

    Examples:
        ```python
        from skyframes.frames import rotation_hadec_to_radec
        from skyframes.units import Angle
        M = rotation_hadec_to_radec(Angle.degrees(120.0))
        ```
    """
    theta = as_angle(sidereal_time).to_radians()

    c = jnp.cos(theta)
    s = jnp.sin(theta)

    return jnp.array([[  c,    s, 0.0],
                      [  s,   -c, 0.0],
                      [0.0,  0.0, 1.0]], dtype=get_dtype())


def rotation_radec_to_hadec(sidereal_time: Angle | float) -> Array:
    """Compute the 3x3 matrix from Equatorial RA/Dec to Equatorial HA/Dec.

    Args:
        sidereal_time: Local sidereal time as an angle.  Bare numbers are
            radians.

    Returns:
        3x3 matrix (RA/Dec -> HA/Dec).
    """
    return rotation_hadec_to_radec(sidereal_time)
