"""Unit-tagged plane angles.

Provides :class:`Angle`, a scalar plane-angle quantity carrying an
explicit :class:`AngleUnit`, and :func:`as_angle` for normalising bare
numbers (radians).

Conversions between units are exact up to floating-point rounding:
each conversion is a single multiplication by a constant factor, and
converting an angle to the unit it is already expressed in returns the
stored value untouched.
"""

from __future__ import annotations

import enum

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from skyframes.config import get_angle_tolerance, get_dtype
from skyframes.constants import AS2RAD, DEG2RAD, RAD2AS, RAD2DEG


class AngleUnit(enum.Enum):
    """Unit of a plane angle.

    Attributes:
        RADIANS: SI radians (the canonical unit).
        DEGREES: Degrees of arc.
        ARCSECONDS: Seconds of arc.
    """

    RADIANS = "rad"
    DEGREES = "deg"
    ARCSECONDS = "arcsec"


_TO_RAD = {
    AngleUnit.RADIANS: 1.0,
    AngleUnit.DEGREES: DEG2RAD,
    AngleUnit.ARCSECONDS: AS2RAD,
}

_FROM_RAD = {
    AngleUnit.RADIANS: 1.0,
    AngleUnit.DEGREES: RAD2DEG,
    AngleUnit.ARCSECONDS: RAD2AS,
}


class Angle:
    """Plane angle tagged with its unit.

    Args:
        value (ArrayLike): Scalar magnitude expressed in *unit*.
        unit (AngleUnit): Unit of *value*. Default: ``AngleUnit.RADIANS``.

    Examples:
        ```python
        from skyframes.units import Angle
        phi = Angle.degrees(51.5)
        phi.to_radians()
        ```
    """

    __slots__ = ("_value", "_unit")

    def __init__(self, value: ArrayLike, unit: AngleUnit = AngleUnit.RADIANS) -> None:
        if not isinstance(unit, AngleUnit):
            raise ValueError(f"unit must be an AngleUnit, got {unit!r}")
        self._value = jnp.asarray(value, dtype=get_dtype())
        if self._value.ndim != 0:
            raise ValueError(f"Angle value must be a scalar, got shape {self._value.shape}")
        self._unit = unit

    @classmethod
    def degrees(cls, value: ArrayLike) -> Angle:
        """Create an angle expressed in degrees."""
        return cls(value, AngleUnit.DEGREES)

    @classmethod
    def radians(cls, value: ArrayLike) -> Angle:
        """Create an angle expressed in radians."""
        return cls(value, AngleUnit.RADIANS)

    @property
    def value(self) -> Array:
        """Magnitude in :attr:`unit`."""
        return self._value

    @property
    def unit(self) -> AngleUnit:
        """Unit the magnitude is expressed in."""
        return self._unit

    def to_radians(self) -> Array:
        """Return the magnitude in radians.

        An angle already in radians is returned without any arithmetic.
        """
        if self._unit is AngleUnit.RADIANS:
            return self._value
        return self._value * _TO_RAD[self._unit]

    def to_degrees(self) -> Array:
        """Return the magnitude in degrees."""
        return self._magnitude_in(AngleUnit.DEGREES)

    def to(self, unit: AngleUnit) -> Angle:
        """Cast to *unit*.

        Args:
            unit (AngleUnit): Target unit.

        Returns:
            Angle: ``self`` if already in *unit*, otherwise a new angle.
        """
        if unit is self._unit:
            return self
        return Angle(self._magnitude_in(unit), unit)

    def _magnitude_in(self, unit: AngleUnit) -> Array:
        if unit is self._unit:
            return self._value
        if unit is AngleUnit.RADIANS:
            return self.to_radians()
        if self._unit is AngleUnit.RADIANS:
            return self._value * _FROM_RAD[unit]
        # Direct factor between two non-SI units avoids a radian round trip
        return self._value * (_TO_RAD[self._unit] * _FROM_RAD[unit])

    def __float__(self) -> float:
        return float(self._value)

    def __neg__(self) -> Angle:
        return Angle(-self._value, self._unit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        diff = jnp.abs(self.to_radians() - other.to_radians())
        return bool(diff <= get_angle_tolerance())

    def __hash__(self) -> int:
        # Rounded to 1e-9 rad, so angles equal within the comparison tolerance
        # but straddling a rounding boundary can still hash differently
        return hash(round(float(self.to_radians()), 9))

    def __str__(self) -> str:
        return f"{float(self._value)} {self._unit.value}"

    def __repr__(self) -> str:
        return f"Angle({float(self._value)!r}, AngleUnit.{self._unit.name})"


def as_angle(angle: Angle | ArrayLike) -> Angle:
    """Normalise *angle* to an :class:`Angle`.

    Bare numbers are interpreted as radians, following the SI convention
    used throughout skyframes.

    Args:
        angle: An :class:`Angle` (returned unchanged) or a scalar in radians.

    Returns:
        Angle: The tagged angle.
    """
    if isinstance(angle, Angle):
        return angle
    return Angle(angle, AngleUnit.RADIANS)
