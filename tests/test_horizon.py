"""Tests for horizon and equatorial coordinates and the parallactic angle.

Reference values from the IAU SOFA test suite.
"""

import math

import jax
import jax.numpy as jnp
import pytest

from eorjax.coordinates import ae2hd, hd2ae, hd2pa


class TestAe2hd:
    def test_reference(self):
        ha, dec = ae2hd(5.5, 1.1, 0.7)
        assert float(ha) == pytest.approx(0.5933291115507309663, abs=1e-14)
        assert float(dec) == pytest.approx(0.9613934761647817620, abs=1e-14)

    def test_zenith_on_pole(self):
        """An observer at the pole looking at the zenith sees the celestial pole."""
        ha, dec = ae2hd(0.3, math.pi / 2.0, math.pi / 2.0)
        assert float(dec) == pytest.approx(math.pi / 2.0, abs=1e-7)


class TestHd2ae:
    def test_reference(self):
        az, el = hd2ae(1.1, 1.2, 0.3)
        assert float(az) == pytest.approx(5.916889243730066194, abs=1e-13)
        assert float(el) == pytest.approx(0.4472186304990486228, abs=1e-14)

    def test_azimuth_range(self):
        has = jnp.linspace(-math.pi, math.pi, 37)
        az, _ = jax.vmap(hd2ae, in_axes=(0, None, None))(has, 0.2, 0.6)
        assert bool(jnp.all(az >= 0.0))
        assert bool(jnp.all(az < 2.0 * math.pi))

    @pytest.mark.parametrize("ha", [math.pi, -math.pi])
    def test_half_turn_hour_angle_is_north(self, ha):
        az, _ = hd2ae(ha, 0.2, 0.6)
        assert 0.0 <= float(az) < 1e-15

    def test_roundtrip(self):
        az, el = hd2ae(-0.4, 0.3, 0.9)
        ha, dec = ae2hd(az, el, 0.9)
        assert float(ha) == pytest.approx(-0.4, abs=1e-13)
        assert float(dec) == pytest.approx(0.3, abs=1e-13)


class TestHd2pa:
    def test_reference(self):
        assert float(hd2pa(1.1, 1.2, 0.3)) == pytest.approx(1.906227428001995580, abs=1e-13)

    def test_degenerate_is_zero(self):
        assert float(hd2pa(0.0, 0.0, 0.0)) == 0.0

    def test_meridian(self):
        """On the meridian south of the zenith the parallactic angle is zero."""
        assert float(hd2pa(0.0, 0.1, 0.8)) == pytest.approx(0.0, abs=1e-15)

    def test_jit(self):
        pa = jax.jit(hd2pa)(1.1, 1.2, 0.3)
        assert float(pa) == pytest.approx(1.906227428001995580, abs=1e-13)
