"""Equatorial (hour angle/declination) to Horizon frame transformations.

The Horizon frame is the observer's local altitude/azimuth system, with
azimuth measured from north through east.  Its column vector is
``[cos(a) cos(A), cos(a) sin(A), sin(a)]`` for altitude ``a`` and azimuth
``A``; the HA/Dec vector is ``[cos(δ) cos(H), cos(δ) sin(H), sin(δ)]``.

The transformation depends only on the observer latitude φ.  The matrix
is symmetric and orthogonal, hence its own inverse: the same matrix maps
HA/Dec to Horizon and Horizon to HA/Dec.

References:

1. P. Duffett-Smith and J. Zwart, *Practical Astronomy with your
   Calculator or Spreadsheet (4th Ed.)*, 2011, Sec. 25.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array

from skyframes.config import get_dtype
from skyframes.units import Angle, as_angle


def rotation_hadec_to_horizon(phi: Angle | float) -> Array:
    """Compute the 3x3 matrix from Equatorial HA/Dec to Horizon.

    Args:
        phi: Observer latitude.  Bare numbers are radians.

    Returns:
        3x3 matrix (HA/Dec -> Horizon).

    Examples:
        ```python
        from skyframes.frames import rotation_hadec_to_horizon
        from skyframes.units import Angle
        M = rotation_hadec_to_horizon(Angle.degrees(51.5))
        ```
    """
    phi = as_angle(phi).to_radians()

    s = jnp.sin(phi)
    c = jnp.cos(phi)

    return jnp.array([[ -s,  0.0,   c],
                      [0.0, -1.0, 0.0],
                      [  c,  0.0,   s]], dtype=get_dtype())


def rotation_horizon_to_hadec(phi: Angle | float) -> Array:
    """Compute the 3x3 matrix from Horizon to Equatorial HA/Dec.

    Identical to :func:`rotation_hadec_to_horizon` since that matrix is an
    involution.

    Args:
        phi: Observer latitude.  Bare numbers are radians.

    Returns:
        3x3 matrix (Horizon -> HA/Dec).
    """
    return rotation_hadec_to_horizon(phi)
