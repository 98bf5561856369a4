"""Tests for the two-part Julian Date helpers."""

import jax.numpy as jnp
import pytest

from eorjax.constants import DJM0
from eorjax.time import epj, epj2jd, julian_centuries


class TestJulianCenturies:
    def test_j2000_is_zero(self):
        assert float(julian_centuries(2451545.0, 0.0)) == 0.0

    def test_one_century(self):
        assert float(julian_centuries(2451545.0, 36525.0)) == pytest.approx(1.0, abs=1e-15)

    @pytest.mark.parametrize(
        "date1, date2",
        [
            (2450123.7, 0.0),
            (2451545.0, -1421.3),
            (2400000.5, 50123.2),
            (2450123.5, 0.2),
        ],
    )
    def test_split_invariance(self, date1, date2):
        t = julian_centuries(date1, date2)
        assert float(t) == pytest.approx(-1421.3 / 36525.0, abs=1e-13)

    def test_dtype(self):
        assert julian_centuries(2400000.5, 54388.0).dtype == jnp.float64


class TestEpochs:
    def test_epj(self):
        assert float(epj(2451545.0, -7392.5)) == pytest.approx(1979.760438056125941, abs=1e-12)

    def test_epj_j2000(self):
        assert float(epj(2451545.0, 0.0)) == 2000.0

    def test_epj2jd(self):
        djm0, djm = epj2jd(1996.8)
        assert djm0 == DJM0
        assert float(djm) == pytest.approx(50375.7, abs=1e-9)

    def test_roundtrip(self):
        djm0, djm = epj2jd(2024.25)
        assert float(epj(djm0, djm)) == pytest.approx(2024.25, abs=1e-12)
