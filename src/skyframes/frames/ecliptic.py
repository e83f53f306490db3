"""Equatorial (RA/Dec) to Ecliptic frame transformations.

Both frames share the x-axis (the direction of the equinox), so the
transformation is a rotation about x by the obliquity of the ecliptic ε.
Unlike a fixed-epoch frame tie, the obliquity is a per-call parameter so
that callers can supply a mean or true obliquity for any date;
:data:`OBLIQUITY_J2000_RAD` is the mean J2000 value, given for reference.
"""

from __future__ import annotations

from jax import Array

from skyframes.constants import AS2RAD, OBLIQUITY_J2000
from skyframes.frames._rotations import Rx
from skyframes.units import Angle, as_angle

# Mean obliquity of the ecliptic at J2000 in radians
OBLIQUITY_J2000_RAD = OBLIQUITY_J2000 * AS2RAD


def rotation_radec_to_ecliptic(obliquity: Angle | float) -> Array:
    """Compute the 3x3 rotation matrix from Equatorial RA/Dec to Ecliptic.

    Returns the matrix ``Rx(ε)``.

    Args:
        obliquity: Obliquity of the ecliptic ε.  Bare numbers are radians.

    Returns:
        3x3 rotation matrix (RA/Dec -> Ecliptic).

    Examples:
        ```python
        from skyframes.frames import rotation_radec_to_ecliptic
        from skyframes.units import Angle
        R = rotation_radec_to_ecliptic(Angle.degrees(23.44))
        R.shape
        ```
    """
    return Rx(as_angle(obliquity).to_radians())


def rotation_ecliptic_to_radec(obliquity: Angle | float) -> Array:
    """Compute the 3x3 rotation matrix from Ecliptic to Equatorial RA/Dec.

    Returns the matrix ``Rx(-ε)``, the transpose of
    :func:`rotation_radec_to_ecliptic`.

    Args:
        obliquity: Obliquity of the ecliptic ε.  Bare numbers are radians.

    Returns:
        3x3 rotation matrix (Ecliptic -> RA/Dec).
    """
    return Rx(-as_angle(obliquity).to_radians())
