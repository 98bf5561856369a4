"""Tests for spherical coordinates and angular separation.

Reference values from the IAU SOFA test suite.
"""

import math

import jax
import jax.numpy as jnp
import pytest

from eorjax.coordinates import c2s, s2c, sepp, seps


class TestC2s:
    def test_reference(self):
        theta, phi = c2s(jnp.array([100.0, -50.0, 25.0]))
        assert float(theta) == pytest.approx(-0.4636476090008061162, abs=1e-14)
        assert float(phi) == pytest.approx(0.2199879773954594463, abs=1e-14)

    def test_pole_has_zero_longitude(self):
        theta, phi = c2s(jnp.array([0.0, 0.0, -3.0]))
        assert float(theta) == 0.0
        assert float(phi) == pytest.approx(-math.pi / 2.0, abs=1e-15)

    def test_equatorial_plane_has_zero_latitude(self):
        _, phi = c2s(jnp.array([1.0, 1.0, 0.0]))
        assert float(phi) == 0.0

    def test_null_vector(self):
        theta, phi = c2s(jnp.zeros(3))
        assert float(theta) == 0.0
        assert float(phi) == 0.0


class TestS2c:
    def test_reference(self):
        c = s2c(3.0123, -0.999)
        assert float(c[0]) == pytest.approx(-0.5366267667260523906, abs=1e-12)
        assert float(c[1]) == pytest.approx(0.0697711109765145365, abs=1e-12)
        assert float(c[2]) == pytest.approx(-0.8409302618566214041, abs=1e-12)

    def test_unit_length(self):
        c = s2c(1.2, 0.4)
        assert float(jnp.linalg.norm(c)) == pytest.approx(1.0, abs=1e-15)

    def test_roundtrip(self):
        theta, phi = c2s(s2c(-2.5, 0.75))
        assert float(theta) == pytest.approx(-2.5, abs=1e-14)
        assert float(phi) == pytest.approx(0.75, abs=1e-14)


class TestSeparation:
    def test_sepp_reference(self):
        s = sepp(jnp.array([1.0, 0.1, 0.2]), jnp.array([-3.0, 1e-3, 0.2]))
        assert float(s) == pytest.approx(2.860391919024660768, abs=1e-12)

    def test_seps_reference(self):
        assert float(seps(1.0, 0.1, 0.2, -3.0)) == pytest.approx(2.346722016996998842, abs=1e-14)

    def test_sepp_null_vectors(self):
        assert float(sepp(jnp.zeros(3), jnp.zeros(3))) == 0.0

    def test_sepp_antiparallel(self):
        s = sepp(jnp.array([0.0, 0.0, 2.0]), jnp.array([0.0, 0.0, -5.0]))
        assert float(s) == pytest.approx(math.pi, abs=1e-15)

    def test_seps_symmetric(self):
        assert float(seps(0.3, -0.2, 2.0, 0.9)) == pytest.approx(
            float(seps(2.0, 0.9, 0.3, -0.2)), abs=1e-15
        )

    def test_vmap(self):
        lons = jnp.linspace(0.0, 3.0, 4)
        s = jax.vmap(seps, in_axes=(0, None, None, None))(lons, 0.0, 0.0, 0.0)
        assert jnp.allclose(s, lons, atol=1e-14)
