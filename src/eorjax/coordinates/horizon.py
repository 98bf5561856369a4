"""Horizon <-> equatorial coordinates and the parallactic angle.

Azimuth is measured from north towards east.  Hour angle and declination
are with respect to the CIP; the latitude ``phi`` is the observer's
astronomical latitude.  No range checking of the arguments is carried out.

References:
    1. Green, R.M., *Spherical Astronomy*, Cambridge University Press, 1985.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from eorjax.constants import D2PI


def ae2hd(az: ArrayLike, el: ArrayLike, phi: ArrayLike) -> tuple[Array, Array]:
    """Horizon to equatorial coordinates.

    Args:
        az: Azimuth [rad], north zero, east ``+pi/2``.
        el: Altitude (elevation) [rad].
        phi: Site latitude [rad].

    Returns:
        Tuple of (ha, dec): hour angle, local [rad] and declination [rad].
        The hour angle is in ``(-pi, pi]``.
    """
    sa = jnp.sin(az)
    ca = jnp.cos(az)
    se = jnp.sin(el)
    ce = jnp.cos(el)
    sp = jnp.sin(phi)
    cp = jnp.cos(phi)

    # HA,Dec unit vector
    x = -ca * ce * sp + se * cp
    y = -sa * ce
    z = ca * ce * cp + se * sp

    r = jnp.sqrt(x * x + y * y)
    ha = jnp.where(r != 0.0, jnp.arctan2(y, x), 0.0)
    dec = jnp.arctan2(z, r)

    return ha, dec


def hd2ae(ha: ArrayLike, dec: ArrayLike, phi: ArrayLike) -> tuple[Array, Array]:
    """Equatorial to horizon coordinates.

    Args:
        ha: Hour angle, local [rad].
        dec: Declination [rad].
        phi: Site latitude [rad].

    Returns:
        Tuple of (az, el): azimuth in ``[0, 2pi)`` and altitude [rad].
    """
    sh = jnp.sin(ha)
    ch = jnp.cos(ha)
    sd = jnp.sin(dec)
    cd = jnp.cos(dec)
    sp = jnp.sin(phi)
    cp = jnp.cos(phi)

    # Az,Alt unit vector
    x = -ch * cd * sp + sd * cp
    y = -sh * cd
    z = ch * cd * cp + sd * sp

    r = jnp.sqrt(x * x + y * y)
    a = jnp.where(r != 0.0, jnp.arctan2(y, x), 0.0)
    az = jnp.where(a < 0.0, a + D2PI, a)

    # A tiny negative azimuth rounds up to exactly 2pi
    az = jnp.where(az >= D2PI, 0.0, az)
    el = jnp.arctan2(z, r)

    return az, el


def hd2pa(ha: ArrayLike, dec: ArrayLike, phi: ArrayLike) -> Array:
    """Parallactic angle for a given hour angle and declination.

    The parallactic angle is the angle between the direction to the north
    celestial pole and the direction to the zenith, measured at the object.
    At the pole itself it is undefined and zero is returned.

    Args:
        ha: Hour angle [rad].
        dec: Declination [rad].
        phi: Site latitude [rad].

    Returns:
        Parallactic angle [rad], in ``[-pi, pi]``.

    References:
        1. Smart, W.M., *Spherical Astronomy*, Cambridge University Press,
           6th edition (Green, 1977), p49.
    """
    sp = jnp.sin(phi)
    cp = jnp.cos(phi)
    sqsz = cp * jnp.sin(ha)
    cqsz = sp * jnp.cos(dec) - cp * jnp.sin(dec) * jnp.cos(ha)

    return jnp.where((sqsz != 0.0) | (cqsz != 0.0), jnp.arctan2(sqsz, cqsz), 0.0)
