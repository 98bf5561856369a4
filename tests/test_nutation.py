"""Tests for the IAU 2000A nutation series.

Reference values from the IAU SOFA test suite.
"""

import jax
import jax.numpy as jnp
import pytest

from eorjax._nutation_data import LUNI_SOLAR_COEFFS, PLANETARY_COEFFS
from eorjax.nutation import nut00a, nut06a


class TestSeriesTables:
    def test_luni_solar_shape(self):
        assert len(LUNI_SOLAR_COEFFS) == 678
        assert all(len(row) == 11 for row in LUNI_SOLAR_COEFFS)

    def test_planetary_shape(self):
        assert len(PLANETARY_COEFFS) == 687
        assert all(len(row) == 17 for row in PLANETARY_COEFFS)

    def test_leading_luni_solar_term(self):
        # 18.6-year term in Omega
        assert LUNI_SOLAR_COEFFS[0][:5] == (0, 0, 0, 0, 1)


class TestNut00a:
    def test_reference(self):
        dpsi, deps = nut00a(2400000.5, 53736.0)
        assert float(dpsi) == pytest.approx(-0.9630909107115518431e-5, abs=1e-13)
        assert float(deps) == pytest.approx(0.4063239174001678710e-4, abs=1e-13)

    def test_split_invariance(self):
        dpsi1, deps1 = nut00a(2400000.5, 53736.0)
        dpsi2, deps2 = nut00a(2451545.0, 53736.0 - 51544.5)
        assert float(dpsi1) == pytest.approx(float(dpsi2), abs=1e-15)
        assert float(deps1) == pytest.approx(float(deps2), abs=1e-15)


class TestNut06a:
    def test_reference(self):
        dpsi, deps = nut06a(2400000.5, 53736.0)
        assert float(dpsi) == pytest.approx(-0.9630912025820308797e-5, abs=1e-13)
        assert float(deps) == pytest.approx(0.4063238496887249798e-4, abs=1e-13)

    def test_zero_adjustment_at_j2000(self):
        """At J2000.0 only the fixed obliquity factor on dpsi remains."""
        dp, de = nut00a(2451545.0, 0.0)
        dpsi, deps = nut06a(2451545.0, 0.0)
        assert float(deps) == float(de)
        assert float(dpsi) == pytest.approx(float(dp) * (1.0 + 0.4697e-6), rel=1e-15)

    def test_jit(self):
        dpsi, deps = jax.jit(nut06a)(2400000.5, 53736.0)
        assert float(dpsi) == pytest.approx(-0.9630912025820308797e-5, abs=1e-13)

    def test_vmap(self):
        dates = jnp.array([53736.0, 53736.0, 60000.0])
        dpsi, deps = jax.vmap(nut06a, in_axes=(None, 0))(2400000.5, dates)
        assert dpsi.shape == (3,)
        assert float(dpsi[0]) == pytest.approx(float(dpsi[1]), abs=0.0)
        assert float(deps[1]) == pytest.approx(0.4063238496887249798e-4, abs=1e-13)
