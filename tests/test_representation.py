"""Tests for spherical representations and the column-vector adapters."""

import math

import jax.numpy as jnp
import pytest

from skyframes.representation import SphericalRepresentation, column_vector, spherical_from_vector
from skyframes.units import Angle, AngleUnit

_TOL = 1e-12


class TestSphericalRepresentation:
    def test_defaults(self):
        rep = SphericalRepresentation(0.1, 0.2)
        assert float(rep.dist) == 1.0
        assert rep.lat.unit is AngleUnit.RADIANS
        assert rep.lon.unit is AngleUnit.RADIANS

    def test_from_degrees(self):
        rep = SphericalRepresentation.from_degrees(30.0, 45.0, 2.0)
        lat, lon, dist = rep.get_lat_lon_dist()
        assert lat.unit is AngleUnit.DEGREES
        assert float(lat.value) == 30.0
        assert float(lon.value) == 45.0
        assert float(dist) == 2.0

    def test_to_radians_cast(self):
        rep = SphericalRepresentation.from_degrees(30.0, 45.0).to(AngleUnit.RADIANS)
        assert rep.lat.unit is AngleUnit.RADIANS
        assert float(rep.lat.value) == pytest.approx(math.pi / 6, abs=_TOL)
        assert float(rep.lon.value) == pytest.approx(math.pi / 4, abs=_TOL)

    def test_equality_across_units(self):
        a = SphericalRepresentation.from_degrees(30.0, 45.0)
        b = SphericalRepresentation(math.pi / 6, math.pi / 4)
        assert a == b

    def test_inequality(self):
        a = SphericalRepresentation.from_degrees(30.0, 45.0)
        b = SphericalRepresentation.from_degrees(30.0, 46.0)
        assert a != b

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(SphericalRepresentation(0.0, 0.0))


class TestColumnVector:
    def test_shape(self):
        v = column_vector(SphericalRepresentation(0.3, 1.2))
        assert v.shape == (3,)

    def test_origin_direction(self):
        v = column_vector(SphericalRepresentation(0.0, 0.0))
        assert jnp.allclose(v, jnp.array([1.0, 0.0, 0.0]), atol=_TOL)

    def test_longitude_90(self):
        v = column_vector(SphericalRepresentation.from_degrees(0.0, 90.0))
        assert jnp.allclose(v, jnp.array([0.0, 1.0, 0.0]), atol=_TOL)

    def test_pole(self):
        v = column_vector(SphericalRepresentation.from_degrees(90.0, 123.0))
        assert jnp.allclose(v, jnp.array([0.0, 0.0, 1.0]), atol=_TOL)

    def test_scaled_by_distance(self):
        v = column_vector(SphericalRepresentation.from_degrees(10.0, 20.0, 5.0))
        assert float(jnp.linalg.norm(v)) == pytest.approx(5.0, abs=1e-12)

    def test_degrees_and_radians_agree(self):
        v_deg = column_vector(SphericalRepresentation.from_degrees(30.0, 45.0))
        v_rad = column_vector(SphericalRepresentation(math.pi / 6, math.pi / 4))
        assert jnp.allclose(v_deg, v_rad, atol=_TOL)

    def test_mixed_units(self):
        rep = SphericalRepresentation(Angle.degrees(30.0), Angle.radians(math.pi / 4))
        expected = column_vector(SphericalRepresentation(math.pi / 6, math.pi / 4))
        assert jnp.allclose(column_vector(rep), expected, atol=_TOL)

    def test_components(self):
        lat, lon = 0.4, 2.1
        v = column_vector(SphericalRepresentation(lat, lon))
        expected = jnp.array([
            math.cos(lat) * math.cos(lon),
            math.cos(lat) * math.sin(lon),
            math.sin(lat),
        ])
        assert jnp.allclose(v, expected, atol=_TOL)


class TestSphericalFromVector:
    def test_inverts_column_vector(self):
        rep = SphericalRepresentation(0.4, 2.1, 3.0)
        back = spherical_from_vector(column_vector(rep))
        assert float(back.lat.value) == pytest.approx(0.4, abs=1e-12)
        assert float(back.lon.value) == pytest.approx(2.1, abs=1e-12)
        assert float(back.dist) == pytest.approx(3.0, abs=1e-12)

    def test_negative_longitude_wrapped(self):
        v = jnp.array([0.0, -1.0, 0.0])
        back = spherical_from_vector(v)
        assert float(back.lon.value) == pytest.approx(1.5 * math.pi, abs=1e-12)

    def test_degrees_output(self):
        back = spherical_from_vector(jnp.array([0.0, 1.0, 1.0]), AngleUnit.DEGREES)
        assert back.lat.unit is AngleUnit.DEGREES
        assert float(back.lat.value) == pytest.approx(45.0, abs=1e-10)
        assert float(back.lon.value) == pytest.approx(90.0, abs=1e-10)
        assert float(back.dist) == pytest.approx(math.sqrt(2.0), abs=1e-12)

    def test_wrong_shape_raises(self):
        with pytest.raises(ValueError, match="shape"):
            spherical_from_vector(jnp.zeros(4))

    def test_zero_vector_raises(self):
        with pytest.raises(ValueError, match="zero vector"):
            spherical_from_vector(jnp.zeros(3))
