"""Angle normalization and unit conversion helpers.

The ``use_degrees`` helpers provide JAX-traceable degree/radian conversion
via ``jnp.where``.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from eorjax.constants import D2PI


def anp(a: ArrayLike) -> Array:
    """Normalize an angle into the range ``0 <= a < 2pi``.

    The angle is first reduced with a truncating remainder (``fmod``), then
    shifted by one turn if the remainder is negative.

    Args:
        a (ArrayLike): Angle in radians.

    Returns:
        Angle in radians in ``[0, 2pi)``.
    """
    w = jnp.fmod(a, D2PI)
    return jnp.where(w < 0.0, w + D2PI, w)


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians.
    """
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle from radians to degrees if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle in radians.
        use_degrees (bool): If ``True``, convert to degrees.

    Returns:
        Angle in radians or degrees.
    """
    return jnp.where(use_degrees, jnp.rad2deg(angle), angle)
