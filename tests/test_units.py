"""Tests for the skyframes.units module."""

import math

import jax.numpy as jnp
import pytest

from skyframes.units import Angle, AngleUnit, as_angle


class TestAngleConstruction:
    def test_default_unit_is_radians(self):
        assert Angle(1.0).unit is AngleUnit.RADIANS

    def test_degrees_constructor(self):
        a = Angle.degrees(45.0)
        assert a.unit is AngleUnit.DEGREES
        assert float(a.value) == 45.0

    def test_radians_constructor(self):
        a = Angle.radians(0.5)
        assert a.unit is AngleUnit.RADIANS
        assert float(a.value) == 0.5

    def test_invalid_unit_raises(self):
        with pytest.raises(ValueError, match="AngleUnit"):
            Angle(1.0, "deg")

    def test_non_scalar_raises(self):
        with pytest.raises(ValueError, match="scalar"):
            Angle(jnp.array([1.0, 2.0]))


class TestAngleConversion:
    def test_degrees_to_radians(self):
        assert float(Angle.degrees(180.0).to_radians()) == pytest.approx(math.pi, abs=1e-15)

    def test_arcseconds_to_radians(self):
        rad = Angle(3600.0, AngleUnit.ARCSECONDS).to_radians()
        assert float(rad) == pytest.approx(math.radians(1.0), abs=1e-15)

    def test_radians_not_reconverted(self):
        """An angle already in radians hands back its stored value."""
        a = Angle.radians(0.123456789012345)
        assert a.to_radians() is a.value

    def test_to_same_unit_returns_self(self):
        a = Angle.degrees(12.0)
        assert a.to(AngleUnit.DEGREES) is a

    def test_to_degrees(self):
        assert float(Angle.radians(math.pi / 2).to_degrees()) == pytest.approx(90.0, abs=1e-12)

    def test_arcseconds_to_degrees(self):
        a = Angle(7200.0, AngleUnit.ARCSECONDS).to(AngleUnit.DEGREES)
        assert a.unit is AngleUnit.DEGREES
        assert float(a.value) == pytest.approx(2.0, abs=1e-12)

    def test_cast_roundtrip_is_lossless(self):
        a = Angle.degrees(51.5)
        back = a.to(AngleUnit.RADIANS).to(AngleUnit.DEGREES)
        assert float(back.value) == pytest.approx(51.5, abs=1e-12)

    def test_negation_keeps_unit(self):
        a = -Angle.degrees(23.44)
        assert a.unit is AngleUnit.DEGREES
        assert float(a.value) == -23.44


class TestAngleEquality:
    def test_equal_across_units(self):
        assert Angle.degrees(90.0) == Angle.radians(math.pi / 2)

    def test_not_equal(self):
        assert Angle.degrees(90.0) != Angle.degrees(90.001)

    def test_equal_angles_hash_equal(self):
        assert hash(Angle.degrees(30.0)) == hash(Angle.radians(math.pi / 6))

    def test_compare_other_type(self):
        assert Angle.radians(1.0) != 1.0


class TestAsAngle:
    def test_passthrough(self):
        a = Angle.degrees(10.0)
        assert as_angle(a) is a

    def test_bare_number_is_radians(self):
        a = as_angle(0.25)
        assert a.unit is AngleUnit.RADIANS
        assert float(a.to_radians()) == 0.25
