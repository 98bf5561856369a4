import jax.numpy as jnp
import pytest

from eorjax.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Tests that change the precision (e.g. test_config.py, which has its own
    autouse fixture that sets float32) must not leak it into the reference
    value tests, which need double precision.
    """
    set_dtype(jnp.float64)
