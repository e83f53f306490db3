"""Conversion matrix builders.

This sub-module provides the 3x3 matrices that connect adjacent celestial
reference frames:

- **Horizon**: Equatorial HA/Dec <-> Horizon, parametrized by the observer
  latitude.
- **Equatorial**: HA/Dec <-> RA/Dec, parametrized by the local sidereal time.
- **Ecliptic**: RA/Dec <-> Ecliptic, parametrized by the obliquity.
- **Galactic**: RA/Dec <-> Galactic, a fixed rotation.
"""

from ._rotations import Rx
from .ecliptic import (
    OBLIQUITY_J2000_RAD,
    rotation_ecliptic_to_radec,
    rotation_radec_to_ecliptic,
)
from .equatorial import (
    rotation_hadec_to_radec,
    rotation_radec_to_hadec,
)
from .galactic import (
    rotation_galactic_to_radec,
    rotation_radec_to_galactic,
)
from .horizon import (
    rotation_hadec_to_horizon,
    rotation_horizon_to_hadec,
)

__all__ = [
    # Elementary rotation
    "Rx",
    # Horizon
    "rotation_hadec_to_horizon",
    "rotation_horizon_to_hadec",
    # Equatorial
    "rotation_hadec_to_radec",
    "rotation_radec_to_hadec",
    # Ecliptic
    "OBLIQUITY_J2000_RAD",
    "rotation_radec_to_ecliptic",
    "rotation_ecliptic_to_radec",
    # Galactic
    "rotation_radec_to_galactic",
    "rotation_galactic_to_radec",
]
