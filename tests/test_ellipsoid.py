"""Tests for the named reference ellipsoids."""

import pytest

from eorjax.constants import WGS84_a, WGS84_f
from eorjax.ellipsoid import Ellipsoid
from eorjax.errors import EarthOrientationError, InvalidValueError


class TestParams:
    def test_wgs84(self):
        assert Ellipsoid.WGS84.params == (6378137.0, 1.0 / 298.257223563)
        assert Ellipsoid.WGS84.params == (WGS84_a, WGS84_f)

    def test_grs80(self):
        assert Ellipsoid.GRS80.params == (6378137.0, 1.0 / 298.257222101)

    def test_wgs72(self):
        assert Ellipsoid.WGS72.params == (6378135.0, 1.0 / 298.26)

    @pytest.mark.parametrize("ellipsoid", list(Ellipsoid))
    def test_params_valid(self, ellipsoid):
        a, f = ellipsoid.params
        assert a > 0.0
        assert 0.0 <= f < 1.0


class TestFromName:
    @pytest.mark.parametrize("name", ["WGS84", "wgs84", "Wgs84"])
    def test_case_insensitive(self, name):
        assert Ellipsoid.from_name(name) is Ellipsoid.WGS84

    def test_all_members(self):
        for ellipsoid in Ellipsoid:
            assert Ellipsoid.from_name(ellipsoid.value) is ellipsoid

    def test_unknown_raises(self):
        with pytest.raises(InvalidValueError) as excinfo:
            Ellipsoid.from_name("airy1830")
        assert excinfo.value.value == "name"
        assert isinstance(excinfo.value, EarthOrientationError)
        assert isinstance(excinfo.value, ValueError)
