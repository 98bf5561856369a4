"""Spherical <-> Cartesian direction conversions and angular separation.

Degenerate geometry is resolved by convention rather than error: a
direction along the polar axis has longitude zero, a vector in the
equatorial plane has latitude zero, and the separation of two null
vectors is zero.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from eorjax.matrices import pdp, pm, pxp


def c2s(p: ArrayLike) -> tuple[Array, Array]:
    """P-vector to spherical coordinates.

    The vector need not be of unit length.

    Args:
        p: p-vector ``[x, y, z]``.

    Returns:
        Tuple of (theta, phi): longitude angle and latitude angle [rad].
    """
    p = jnp.asarray(p)
    x = p[0]
    y = p[1]
    z = p[2]
    d2 = x * x + y * y

    theta = jnp.where(d2 == 0.0, 0.0, jnp.arctan2(y, x))
    phi = jnp.where(z == 0.0, 0.0, jnp.arctan2(z, jnp.sqrt(d2)))

    return theta, phi


def s2c(theta: ArrayLike, phi: ArrayLike) -> Array:
    """Spherical coordinates to unit vector.

    Args:
        theta: Longitude angle [rad].
        phi: Latitude angle [rad].

    Returns:
        jax.Array: Direction cosines ``[x, y, z]``.
    """
    cp = jnp.cos(phi)
    return jnp.stack([jnp.cos(theta) * cp, jnp.sin(theta) * cp, jnp.sin(phi)])


def sepp(a: ArrayLike, b: ArrayLike) -> Array:
    """Angular separation between two p-vectors.

    Uses ``atan2(|a x b|, a . b)``, which is accurate at all separations.
    The vectors need not be of unit length.

    Args:
        a: First p-vector.
        b: Second p-vector.

    Returns:
        Angular separation [rad], in ``[0, pi]``.
    """
    a = jnp.asarray(a)
    b = jnp.asarray(b)

    # Sine and cosine of the angle, each multiplied by the two moduli
    ss = pm(pxp(a, b))
    cs = pdp(a, b)

    return jnp.where((ss != 0.0) | (cs != 0.0), jnp.arctan2(ss, cs), 0.0)


def seps(al: ArrayLike, ap: ArrayLike, bl: ArrayLike, bp: ArrayLike) -> Array:
    """Angular separation between two sets of spherical coordinates.

    Args:
        al: First longitude [rad].
        ap: First latitude [rad].
        bl: Second longitude [rad].
        bp: Second latitude [rad].

    Returns:
        Angular separation [rad].
    """
    return sepp(s2c(al, ap), s2c(bl, bp))
