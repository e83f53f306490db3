"""Tests for the conversion matrix builders."""

import inspect
import math

import jax.numpy as jnp
import pytest

from skyframes.constants import GALACTIC_NCP_LON, GALACTIC_POLE_DEC, GALACTIC_POLE_RA
from skyframes.frames import (
    OBLIQUITY_J2000_RAD,
    Rx,
    rotation_ecliptic_to_radec,
    rotation_galactic_to_radec,
    rotation_hadec_to_horizon,
    rotation_hadec_to_radec,
    rotation_horizon_to_hadec,
    rotation_radec_to_ecliptic,
    rotation_radec_to_galactic,
    rotation_radec_to_hadec,
)
from skyframes.representation import SphericalRepresentation, column_vector, spherical_from_vector
from skyframes.units import Angle

_TOL = 1e-12

# Angles are built inside each test so they pick up the float64 dtype
_PHI_DEG = 51.5
_ST_DEG = 100.0
_EPS_DEG = 23.44


def _phi():
    return Angle.degrees(_PHI_DEG)


def _st():
    return Angle.degrees(_ST_DEG)


def _eps():
    return Angle.degrees(_EPS_DEG)


_PAIRS = [
    (lambda: rotation_hadec_to_horizon(_phi()), lambda: rotation_horizon_to_hadec(_phi())),
    (lambda: rotation_hadec_to_radec(_st()), lambda: rotation_radec_to_hadec(_st())),
    (lambda: rotation_radec_to_ecliptic(_eps()), lambda: rotation_ecliptic_to_radec(_eps())),
    (rotation_radec_to_galactic, rotation_galactic_to_radec),
]
_PAIR_IDS = ["horizon", "equatorial", "ecliptic", "galactic"]


# ──────────────────────────────────────────────
# Matrix properties
# ──────────────────────────────────────────────


class TestMatrixProperties:
    @pytest.mark.parametrize(("forward", "inverse"), _PAIRS, ids=_PAIR_IDS)
    def test_shape(self, forward, inverse):
        assert forward().shape == (3, 3)
        assert inverse().shape == (3, 3)

    @pytest.mark.parametrize(("forward", "inverse"), _PAIRS, ids=_PAIR_IDS)
    def test_orthogonality(self, forward, inverse):
        M = forward()
        assert jnp.allclose(M @ M.T, jnp.eye(3), atol=1e-10)

    @pytest.mark.parametrize(("forward", "inverse"), _PAIRS, ids=_PAIR_IDS)
    def test_inverse_composition_is_identity(self, forward, inverse):
        assert jnp.allclose(inverse() @ forward(), jnp.eye(3), atol=1e-10)
        assert jnp.allclose(forward() @ inverse(), jnp.eye(3), atol=1e-10)

    def test_horizon_is_involution(self):
        M = rotation_hadec_to_horizon(_phi())
        assert jnp.allclose(M, rotation_horizon_to_hadec(_phi()), atol=_TOL)

    def test_equatorial_is_reflection(self):
        """HA -> RA flips the sense of the longitude, so det = -1."""
        M = rotation_hadec_to_radec(_st())
        assert float(jnp.linalg.det(M)) == pytest.approx(-1.0, abs=1e-12)

    def test_ecliptic_matrices_are_transposes(self):
        assert jnp.allclose(
            rotation_radec_to_ecliptic(_eps()), rotation_ecliptic_to_radec(_eps()).T, atol=_TOL
        )

    def test_galactic_determinant(self):
        assert float(jnp.linalg.det(rotation_radec_to_galactic())) == pytest.approx(1.0, abs=1e-10)


# ──────────────────────────────────────────────
# Known values
# ──────────────────────────────────────────────


class TestHorizon:
    def test_meridian_transit(self):
        """A star on the meridian culminates at altitude 90 - phi + dec, due south."""
        dec = 20.0
        v = column_vector(SphericalRepresentation.from_degrees(dec, 0.0))
        horizon = spherical_from_vector(rotation_hadec_to_horizon(_phi()) @ v)
        assert float(horizon.lat.to_degrees()) == pytest.approx(90.0 - 51.5 + dec, abs=1e-9)
        assert float(horizon.lon.to_degrees()) == pytest.approx(180.0, abs=1e-9)

    def test_celestial_pole_altitude_equals_latitude(self):
        v = column_vector(SphericalRepresentation.from_degrees(90.0, 0.0))
        horizon = spherical_from_vector(rotation_hadec_to_horizon(_phi()) @ v)
        assert float(horizon.lat.to_degrees()) == pytest.approx(51.5, abs=1e-9)

    def test_bare_radians_match_angle(self):
        assert jnp.allclose(
            rotation_hadec_to_horizon(math.radians(51.5)), rotation_hadec_to_horizon(_phi()), atol=_TOL
        )


class TestEquatorial:
    def test_hour_angle_from_right_ascension(self):
        """H = LST - RA."""
        v = column_vector(SphericalRepresentation.from_degrees(10.0, 30.0))
        hadec = spherical_from_vector(rotation_radec_to_hadec(_st()) @ v)
        assert float(hadec.lon.to_degrees()) == pytest.approx(70.0, abs=1e-9)
        assert float(hadec.lat.to_degrees()) == pytest.approx(10.0, abs=1e-9)


class TestEcliptic:
    def test_rx_convention(self):
        c = math.cos(0.3)
        s = math.sin(0.3)
        expected = jnp.array([[1.0, 0.0, 0.0], [0.0, c, s], [0.0, -s, c]])
        assert jnp.allclose(Rx(0.3), expected, atol=_TOL)

    def test_rx_takes_radians_only(self):
        assert list(inspect.signature(Rx).parameters) == ["angle"]
        assert jnp.allclose(Rx(Angle.degrees(30.0).to_radians()), Rx(math.radians(30.0)), atol=_TOL)

    def test_equinox_fixed(self):
        v = jnp.array([1.0, 0.0, 0.0])
        assert jnp.allclose(rotation_radec_to_ecliptic(_eps()) @ v, v, atol=_TOL)

    def test_summer_solstice(self):
        """RA 90 deg, Dec = obliquity lies on the ecliptic at longitude 90 deg."""
        v = column_vector(SphericalRepresentation.from_degrees(23.44, 90.0))
        ecl = spherical_from_vector(rotation_radec_to_ecliptic(_eps()) @ v)
        assert float(ecl.lat.to_degrees()) == pytest.approx(0.0, abs=1e-9)
        assert float(ecl.lon.to_degrees()) == pytest.approx(90.0, abs=1e-9)

    def test_j2000_obliquity_value(self):
        assert math.degrees(OBLIQUITY_J2000_RAD) == pytest.approx(23.4392794, abs=1e-6)


class TestGalactic:
    def test_north_galactic_pole(self):
        v = column_vector(SphericalRepresentation.from_degrees(GALACTIC_POLE_DEC, GALACTIC_POLE_RA))
        gal = rotation_radec_to_galactic() @ v
        assert float(gal[2]) == pytest.approx(1.0, abs=1e-8)

    def test_north_celestial_pole_longitude(self):
        v = jnp.array([0.0, 0.0, 1.0])
        gal = spherical_from_vector(rotation_radec_to_galactic() @ v)
        assert float(gal.lon.to_degrees()) == pytest.approx(GALACTIC_NCP_LON, abs=1e-4)

    def test_galactic_center(self):
        """l = 0, b = 0 lies at RA 266.405 deg, Dec -28.936 deg."""
        v = column_vector(SphericalRepresentation.from_degrees(0.0, 0.0))
        radec = spherical_from_vector(rotation_galactic_to_radec() @ v)
        assert float(radec.lon.to_degrees()) == pytest.approx(266.40499, abs=1e-4)
        assert float(radec.lat.to_degrees()) == pytest.approx(-28.93617, abs=1e-4)
