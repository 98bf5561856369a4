"""Tests for the CIO locator.

Reference values from the IAU SOFA test suite.
"""

import jax
import jax.numpy as jnp
import pytest

from eorjax.cio import _S0, _S1, _S2, _S3, _S4, s06, xys06a

X = 0.5791308486706011000e-3
Y = 0.4020579816732961219e-4


class TestSeries:
    def test_band_sizes(self):
        assert [len(b) for b in (_S0, _S1, _S2, _S3, _S4)] == [33, 3, 25, 4, 1]

    def test_row_width(self):
        for band in (_S0, _S1, _S2, _S3, _S4):
            assert all(len(row) == 10 for row in band)


class TestS06:
    def test_reference(self):
        s = s06(2400000.5, 53736.0, X, Y)
        assert float(s) == pytest.approx(-0.1220032213076463117e-7, abs=1e-17)

    def test_xy_term(self):
        """Only the -XY/2 term depends on the CIP coordinates."""
        s0 = s06(2400000.5, 53736.0, 0.0, 0.0)
        s = s06(2400000.5, 53736.0, X, Y)
        assert float(s0 - s) == pytest.approx(X * Y / 2.0, rel=1e-9)

    def test_split_invariance(self):
        s1 = s06(2400000.5, 53736.0, X, Y)
        s2 = s06(2451545.0, 53736.0 - 51544.5, X, Y)
        assert float(s1) == pytest.approx(float(s2), abs=1e-18)

    def test_jit(self):
        s = jax.jit(s06)(2400000.5, 53736.0, X, Y)
        assert float(s) == pytest.approx(-0.1220032213076463117e-7, abs=1e-17)


class TestXys06a:
    def test_reference(self):
        x, y, s = xys06a(2400000.5, 53736.0)
        assert float(x) == pytest.approx(0.5791308482835292617e-3, abs=1e-13)
        assert float(y) == pytest.approx(0.4020580099454020310e-4, abs=1e-13)
        assert float(s) == pytest.approx(-0.1220032294164579896e-7, abs=1e-17)

    def test_vmap(self):
        dates = jnp.array([53736.0, 58000.0])
        x, y, s = jax.vmap(xys06a, in_axes=(None, 0))(2400000.5, dates)
        assert x.shape == y.shape == s.shape == (2,)
        assert float(s[0]) == pytest.approx(-0.1220032294164579896e-7, abs=1e-17)
