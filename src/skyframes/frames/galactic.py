"""Equatorial (RA/Dec) to Galactic frame transformations.

The galactic frame is tied to the ICRS by a fixed rotation defined by the
north galactic pole (α = 192.85948°, δ = 27.12825°) and the galactic
longitude of the north celestial pole (l = 122.93192°).  No parameters
are needed.

References:

1. ESA, *The Hipparcos and Tycho Catalogues*, Vol. 1, Sec. 1.5.3, 1997
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array

from skyframes.config import get_dtype

# Rows are the galactic x, y, z axes expressed in ICRS
_ICRS_TO_GALACTIC = (
    (-0.0548755604162154, -0.8734370902348850, -0.4838350155487132),
    (+0.4941094278755837, -0.4448296299600112, +0.7469822444972189),
    (-0.8676661490190047, -0.1980763734312015, +0.4559837761750669),
)


def rotation_radec_to_galactic() -> Array:
    """Compute the 3x3 rotation matrix from Equatorial RA/Dec to Galactic.

    Returns:
        3x3 rotation matrix (RA/Dec -> Galactic).

    Examples:
        ```python
        from skyframes.frames import rotation_radec_to_galactic
        R = rotation_radec_to_galactic()
        R.shape
        ```
    """
    return jnp.array(_ICRS_TO_GALACTIC, dtype=get_dtype())


def rotation_galactic_to_radec() -> Array:
    """Compute the 3x3 rotation matrix from Galactic to Equatorial RA/Dec.

    This is the transpose of :func:`rotation_radec_to_galactic`.

    Returns:
        3x3 rotation matrix (Galactic -> RA/Dec).
    """
    return rotation_radec_to_galactic().T
