"""Tests for the geodetic <-> geocentric conversions.

Reference values from the IAU SOFA test suite.
"""

import logging
import math

import jax
import jax.numpy as jnp
import pytest

from eorjax.constants import WGS84_a
from eorjax.coordinates import (
    gc2gd,
    gc2gde,
    gd2gc,
    gd2gce,
    position_ecef_to_geodetic,
    position_geodetic_to_ecef,
)
from eorjax.ellipsoid import Ellipsoid
from eorjax.errors import InvalidValueError, UnrealisticError

XYZ = jnp.array([2e6, 3e6, 5.244e6])


# ──────────────────────────────────────────────
# Geocentric to geodetic
# ──────────────────────────────────────────────


class TestGc2gd:
    @pytest.mark.parametrize(
        "ellipsoid, phi, height",
        [
            (Ellipsoid.WGS84, 0.97160184819075459, 331.4172461426059892),
            (Ellipsoid.GRS80, 0.97160184820607853, 331.41731754844348),
            (Ellipsoid.WGS72, 0.97160181811015119, 333.2770726130318123),
        ],
    )
    def test_reference(self, ellipsoid, phi, height):
        e, p, h = gc2gd(ellipsoid, XYZ)
        assert float(e) == pytest.approx(0.98279372324732907, abs=1e-14)
        assert float(p) == pytest.approx(phi, abs=1e-14)
        assert float(h) == pytest.approx(height, abs=1e-8)

    def test_gc2gde_reference(self):
        e, p, h = gc2gde(6378136.0, 0.0033528, XYZ)
        assert float(e) == pytest.approx(0.9827937232473290680, abs=1e-14)
        assert float(p) == pytest.approx(0.9716018377570411532, abs=1e-14)
        assert float(h) == pytest.approx(332.36862495764397, abs=1e-8)

    def test_southern_hemisphere(self):
        _, p_north, h_north = gc2gd(Ellipsoid.WGS84, XYZ)
        _, p_south, h_south = gc2gd(Ellipsoid.WGS84, XYZ * jnp.array([1.0, 1.0, -1.0]))
        assert float(p_south) == -float(p_north)
        assert float(h_south) == float(h_north)

    def test_north_pole(self):
        a, f = Ellipsoid.WGS84.params
        b = a * (1.0 - f)
        e, p, h = gc2gd(Ellipsoid.WGS84, jnp.array([0.0, 0.0, b + 100.0]))
        assert float(e) == 0.0
        assert float(p) == pytest.approx(math.pi / 2.0, abs=1e-15)
        assert float(h) == pytest.approx(100.0, abs=1e-6)

    def test_south_pole(self):
        a, f = Ellipsoid.WGS84.params
        b = a * (1.0 - f)
        _, p, h = gc2gd(Ellipsoid.WGS84, jnp.array([0.0, 0.0, -b]))
        assert float(p) == pytest.approx(-math.pi / 2.0, abs=1e-15)
        assert float(h) == pytest.approx(0.0, abs=1e-6)

    def test_polar_branch_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="eorjax.coordinates.geodetic"):
            gc2gd(Ellipsoid.WGS84, jnp.array([0.0, 0.0, 6.4e6]))
        assert "polar" in caplog.text

    def test_center_of_earth(self):
        e, p, h = gc2gd(Ellipsoid.WGS84, jnp.zeros(3))
        assert float(e) == 0.0
        assert float(p) == pytest.approx(math.pi / 2.0, abs=1e-15)
        assert math.isfinite(float(h))


class TestGc2gdeErrors:
    @pytest.mark.parametrize(
        "a, f, value",
        [
            (6378137.0, 1.0, "f"),
            (6378137.0, -0.1, "f"),
            (6378137.0, math.nan, "f"),
            (0.0, 0.0033528, "a"),
            (-1.0, 0.0033528, "a"),
        ],
    )
    def test_invalid_value(self, a, f, value):
        with pytest.raises(InvalidValueError) as excinfo:
            gc2gde(a, f, XYZ)
        assert excinfo.value.function == "gc2gde"
        assert excinfo.value.value == value
        assert "is invalid" in str(excinfo.value)

    def test_flattening_checked_before_radius(self):
        with pytest.raises(InvalidValueError) as excinfo:
            gc2gde(0.0, 1.0, XYZ)
        assert excinfo.value.value == "f"

    def test_warning_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="eorjax.coordinates.geodetic"):
            with pytest.raises(InvalidValueError):
                gc2gde(6378137.0, 1.0, XYZ)
        assert any(r.levelno == logging.WARNING for r in caplog.records)

    def test_traced_invalid_is_nan(self):
        e, p, h = jax.jit(lambda f: gc2gde(6378137.0, f, XYZ))(1.5)
        assert bool(jnp.isnan(e)) and bool(jnp.isnan(p)) and bool(jnp.isnan(h))

    def test_traced_nan_flattening_is_nan(self):
        _, p, h = jax.jit(lambda f: gc2gde(6378137.0, f, XYZ))(math.nan)
        assert bool(jnp.isnan(p)) and bool(jnp.isnan(h))

    def test_sphere_is_valid(self):
        e, p, h = gc2gde(6378137.0, 0.0, jnp.array([6378137.0 + 10.0, 0.0, 0.0]))
        assert float(p) == pytest.approx(0.0, abs=1e-15)
        assert float(h) == pytest.approx(10.0, abs=1e-8)


# ──────────────────────────────────────────────
# Geodetic to geocentric
# ──────────────────────────────────────────────


class TestGd2gc:
    @pytest.mark.parametrize(
        "ellipsoid, expected",
        [
            (Ellipsoid.WGS84, (-5599000.5577049947, 233011.67223479203, -3040909.4706983363)),
            (Ellipsoid.GRS80, (-5599000.5577260984, 233011.6722356702949, -3040909.4706095479)),
            (Ellipsoid.WGS72, (-5598998.7626301490, 233011.5975297822211, -3040908.6861467111)),
        ],
    )
    def test_reference(self, ellipsoid, expected):
        xyz = gd2gc(ellipsoid, 3.1, -0.5, 2500.0)
        for i in range(3):
            assert float(xyz[i]) == pytest.approx(expected[i], abs=1e-7)

    def test_gd2gce_reference(self):
        xyz = gd2gce(6378136.0, 0.0033528, 3.1, -0.5, 2500.0)
        assert float(xyz[0]) == pytest.approx(-5598999.6665116345, abs=1e-7)
        assert float(xyz[1]) == pytest.approx(233011.6351463057189, abs=1e-7)
        assert float(xyz[2]) == pytest.approx(-3040909.0517314132, abs=1e-7)

    def test_unrealistic(self):
        with pytest.raises(UnrealisticError) as excinfo:
            gd2gce(6378137.0, math.inf, 0.0, 0.0, 0.0)
        assert excinfo.value.function == "gd2gce"
        assert "unrealistic inputs" in str(excinfo.value)

    def test_traced_unrealistic_is_nan(self):
        xyz = jax.jit(lambda f: gd2gce(6378137.0, f, 0.0, 0.0, 0.0))(jnp.inf)
        assert bool(jnp.all(jnp.isnan(xyz)))

    def test_ordinary_latitudes_succeed(self):
        for phi in (-1.5, -0.3, 0.0, 0.7, 1.5):
            xyz = gd2gc(Ellipsoid.GRS80, 0.4, phi, 100.0)
            assert bool(jnp.all(jnp.isfinite(xyz)))


# ──────────────────────────────────────────────
# Round trips and array forms
# ──────────────────────────────────────────────


class TestRoundTrip:
    @pytest.mark.parametrize("ellipsoid", list(Ellipsoid))
    def test_geodetic_roundtrip(self, ellipsoid):
        xyz = gd2gc(ellipsoid, 0.1, 0.2, 0.3)
        e, p, h = gc2gd(ellipsoid, xyz)
        assert float(e) == pytest.approx(0.1, rel=1e-6)
        assert float(p) == pytest.approx(0.2, rel=1e-6)
        assert float(h) == pytest.approx(0.3, rel=1e-6)
        back = gd2gc(ellipsoid, e, p, h)
        assert jnp.allclose(back, xyz, rtol=1e-12, atol=1e-6)

    def test_geocentric_roundtrip(self):
        e, p, h = gc2gd(Ellipsoid.WGS84, XYZ)
        assert jnp.allclose(gd2gc(Ellipsoid.WGS84, e, p, h), XYZ, atol=1e-6)

    def test_vmap_roundtrip(self):
        points = jnp.array(
            [[1e6, 2e6, 6e6], [-4e6, 3e6, -3e6], [6.4e6, 0.0, 1.0], [7e6, -1e5, 2e5]]
        )
        e, p, h = jax.vmap(lambda x: gc2gd(Ellipsoid.WGS84, x))(points)
        back = jax.vmap(lambda e, p, h: gd2gc(Ellipsoid.WGS84, e, p, h))(e, p, h)
        assert jnp.allclose(back, points, atol=1e-6)


class TestPositionForms:
    def test_origin_equator(self):
        x_ecef = position_geodetic_to_ecef(jnp.array([0.0, 0.0, 0.0]))
        assert float(x_ecef[0]) == pytest.approx(WGS84_a, abs=1e-9)
        assert float(x_ecef[1]) == pytest.approx(0.0, abs=1e-9)
        assert float(x_ecef[2]) == pytest.approx(0.0, abs=1e-9)

    def test_degrees_roundtrip(self):
        x_geod = jnp.array([-122.4, 37.8, 52.0])
        x_ecef = position_geodetic_to_ecef(x_geod, use_degrees=True)
        back = position_ecef_to_geodetic(x_ecef, use_degrees=True)
        assert jnp.allclose(back, x_geod, atol=1e-8)

    def test_matches_named_form(self):
        x_ecef = position_geodetic_to_ecef(jnp.array([3.1, -0.5, 2500.0]))
        assert jnp.allclose(x_ecef, gd2gc(Ellipsoid.WGS84, 3.1, -0.5, 2500.0), atol=0.0)

    def test_other_ellipsoid(self):
        geod = position_ecef_to_geodetic(XYZ, ellipsoid=Ellipsoid.WGS72)
        assert float(geod[1]) == pytest.approx(0.97160181811015119, abs=1e-14)

    def test_jit(self):
        geod = jax.jit(position_ecef_to_geodetic)(XYZ)
        assert geod.shape == (3,)
        assert float(geod[2]) == pytest.approx(331.4172461426059892, abs=1e-8)
