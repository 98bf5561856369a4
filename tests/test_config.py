"""Tests for the eorjax.config module."""

import logging

import jax
import jax.numpy as jnp
import pytest

from eorjax.config import get_dtype, set_dtype
from eorjax.coordinates import position_ecef_to_geodetic
from eorjax.nutation import nut06a
from eorjax.precession import obl06, pmat06
from eorjax.time import julian_centuries

pytestmark = pytest.mark.order("first")


@pytest.fixture(autouse=True)
def reset_dtype():
    """Use float32 during each test and restore the float64 default after."""
    set_dtype(jnp.float32)
    yield
    set_dtype(jnp.float64)


class TestGetSetDtype:
    def test_fixture_dtype(self):
        assert get_dtype() == jnp.float32

    def test_set_float64(self):
        set_dtype(jnp.float64)
        assert get_dtype() == jnp.float64

    def test_set_float16(self):
        set_dtype(jnp.float16)
        assert get_dtype() == jnp.float16

    def test_set_bfloat16(self):
        set_dtype(jnp.bfloat16)
        assert get_dtype() == jnp.bfloat16

    def test_roundtrip(self):
        for dtype in (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64):
            set_dtype(dtype)
            assert get_dtype() == dtype

    def test_invalid_dtype_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype(jnp.int32)

    def test_invalid_dtype_string_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype("float64")

    def test_float64_enables_x64(self):
        set_dtype(jnp.float64)
        assert jax.config.jax_enable_x64 is True


class TestDtypeLogging:
    def test_change_is_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="eorjax.config"):
            set_dtype(jnp.float64)
        assert "float64" in caplog.text

    def test_same_dtype_not_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="eorjax.config"):
            set_dtype(jnp.float32)
        assert caplog.records == []


class TestDtypeSwitchingOutputs:
    """Verify that output dtypes match the configured dtype."""

    def test_julian_centuries_float32(self):
        t = julian_centuries(2400000.5, 54388.0)
        assert t.dtype == jnp.float32

    def test_julian_centuries_float64(self):
        set_dtype(jnp.float64)
        t = julian_centuries(2400000.5, 54388.0)
        assert t.dtype == jnp.float64

    def test_obliquity_float32(self):
        eps = obl06(2400000.5, 54388.0)
        assert eps.dtype == jnp.float32
        assert float(eps) == pytest.approx(0.4090749229387258204, abs=1e-6)

    def test_nutation_float32(self):
        dpsi, deps = nut06a(2400000.5, 53736.0)
        assert dpsi.dtype == jnp.float32
        assert deps.dtype == jnp.float32

    def test_precession_matrix_float64(self):
        set_dtype(jnp.float64)
        r = pmat06(2400000.5, 50123.9999)
        assert r.dtype == jnp.float64


class TestFloat64Precision:
    def test_geodetic_equator_float64(self):
        set_dtype(jnp.float64)
        x_ecef = jnp.array([6378137.0 + 500e3, 0.0, 0.0])
        geod = position_ecef_to_geodetic(x_ecef)
        assert float(geod[2]) == pytest.approx(500e3, abs=1e-6)
