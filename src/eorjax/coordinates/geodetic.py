"""Geodetic <-> geocentric transformations for a reference ellipsoid.

Converts between geodetic coordinates (longitude, latitude, height) and
geocentric Cartesian coordinates ``[x, y, z]``.

The inverse transformation is Fukushima's closed-form method: a single
Halley correction applied to a good starting approximation, so no loop is
needed and the function traces cleanly under ``jax.jit``.

The ellipsoid-agnostic routines :func:`gc2gde` and :func:`gd2gce` take the
equatorial radius ``a`` and the flattening ``f`` directly.  The equatorial
radius and positions must share units, which also fix the units of the
height; metres are conventional.

Domain checks run when the inputs are concrete.  Under tracing the checks
cannot raise, and the affected results are NaN instead.

References:
    1. Fukushima, T., "Transformation from Cartesian to geodetic coordinates
       accelerated by Halley's method", J.Geodesy (2006) 79: 689-693.
    2. Green, R.M., *Spherical Astronomy*, Cambridge University Press, 1985,
       Section 4.5, p96.
"""

from __future__ import annotations

import logging

import jax
import jax.numpy as jnp
import numpy as np
from jax import Array
from jax.typing import ArrayLike

from eorjax.constants import DPI
from eorjax.ellipsoid import Ellipsoid
from eorjax.errors import InvalidValueError, UnrealisticError
from eorjax.utils import from_radians, to_radians

logger = logging.getLogger(__name__)


def _is_concrete(*values) -> bool:
    return not any(isinstance(v, jax.core.Tracer) for v in values)


def gc2gde(a: ArrayLike, f: ArrayLike, xyz: ArrayLike) -> tuple[Array, Array, Array]:
    """Transform geocentric coordinates to geodetic for an ellipsoid of specified form.

    Args:
        a: Equatorial radius, ``a > 0``.
        f: Flattening, ``0 <= f < 1``.
        xyz: Geocentric vector ``[x, y, z]``, same units as ``a``.

    Returns:
        Tuple of (elong, phi, height): east longitude [rad], geodetic
        latitude [rad] and height above the ellipsoid.

    Raises:
        InvalidValueError: If ``f`` is not in ``[0, 1)`` (NaN included) or
            ``a <= 0``.
    """
    if _is_concrete(a, f):
        f_arr = np.asarray(f)
        if np.any(~((f_arr >= 0.0) & (f_arr < 1.0))):
            logger.warning("gc2gde rejected flattening f=%s", f)
            raise InvalidValueError("gc2gde", "f")
        if np.any(np.asarray(a) <= 0.0):
            logger.warning("gc2gde rejected equatorial radius a=%s", a)
            raise InvalidValueError("gc2gde", "a")

    xyz = jnp.asarray(xyz)
    x = xyz[0]
    y = xyz[1]
    z = xyz[2]

    # Functions of ellipsoid parameters
    aeps2 = a * a * 1e-32
    e2 = (2.0 - f) * f
    e4t = e2 * e2 * 1.5
    ec2 = 1.0 - e2
    ec = jnp.sqrt(ec2)
    b = a * ec

    # Distance from polar axis squared
    p2 = x * x + y * y

    # Longitude
    elong = jnp.where(p2 > 0.0, jnp.arctan2(y, x), 0.0)

    # Unsigned z-coordinate
    absz = jnp.abs(z)

    polar = ~(p2 > aeps2)
    if _is_concrete(polar) and np.any(np.asarray(polar)):
        logger.debug("gc2gde: position within polar tolerance, using polar solution")

    # Evaluate the general case on a safe distance so the unused branch stays finite.
    p = jnp.sqrt(jnp.where(polar, a * a, p2))

    # Normalization
    s0 = absz / a
    pn = p / a
    zc = ec * s0

    # Prepare Newton correction factors
    c0 = ec * pn
    c02 = c0 * c0
    c03 = c02 * c0
    s02 = s0 * s0
    s03 = s02 * s0
    a02 = c02 + s02
    a0 = jnp.sqrt(a02)
    a03 = a02 * a0
    d0 = zc * a03 + e2 * s03
    f0 = pn * a03 - e2 * c03

    # Prepare Halley correction factor
    b0 = e4t * s02 * c02 * pn * (a0 - ec)
    s1 = d0 * f0 - b0 * s0
    cc = ec * (f0 * f0 - b0 * c0)

    # Evaluate latitude and height
    phi_general = jnp.arctan(s1 / cc)
    s12 = s1 * s1
    cc2 = cc * cc
    height_general = (p * cc + absz * s1 - a * jnp.sqrt(ec2 * s12 + cc2)) / jnp.sqrt(s12 + cc2)

    phi = jnp.where(polar, DPI / 2.0, phi_general)
    height = jnp.where(polar, absz - b, height_general)

    # Restore sign of latitude
    phi = jnp.where(z < 0.0, -phi, phi)

    invalid = ~((jnp.asarray(f) >= 0.0) & (jnp.asarray(f) < 1.0)) | (jnp.asarray(a) <= 0.0)
    nan = jnp.nan
    return (
        jnp.where(invalid, nan, elong),
        jnp.where(invalid, nan, phi),
        jnp.where(invalid, nan, height),
    )


def gd2gce(
    a: ArrayLike, f: ArrayLike, elong: ArrayLike, phi: ArrayLike, height: ArrayLike
) -> Array:
    """Transform geodetic coordinates to geocentric for an ellipsoid of specified form.

    No validation is performed on the individual arguments.

    Args:
        a: Equatorial radius.
        f: Flattening.
        elong: East longitude [rad].
        phi: Geodetic latitude [rad].
        height: Height above the ellipsoid, same units as ``a``.

    Returns:
        jax.Array: Geocentric vector ``[x, y, z]``.

    Raises:
        UnrealisticError: If ``cos(phi)^2 + (1 - f)^2 sin(phi)^2`` is not
            positive, i.e. the inputs would lead to arithmetic exceptions.
    """
    # Functions of geodetic latitude
    sp = jnp.sin(phi)
    cp = jnp.cos(phi)
    w = (1.0 - f) * (1.0 - f)
    d = cp * cp + w * sp * sp

    unrealistic = ~(d > 0.0)
    if _is_concrete(unrealistic) and np.any(np.asarray(unrealistic)):
        logger.warning("gd2gce received unrealistic inputs: f=%s phi=%s", f, phi)
        raise UnrealisticError("gd2gce")

    ac = a / jnp.sqrt(jnp.where(unrealistic, jnp.nan, d))
    as_ = w * ac

    # Geocentric vector
    r = (ac + height) * cp
    return jnp.stack([r * jnp.cos(elong), r * jnp.sin(elong), (as_ + height) * sp])


def gc2gd(ellipsoid: Ellipsoid, xyz: ArrayLike) -> tuple[Array, Array, Array]:
    """Transform geocentric coordinates to geodetic using a named ellipsoid.

    Args:
        ellipsoid: Reference ellipsoid.
        xyz: Geocentric vector ``[x, y, z]`` [m].

    Returns:
        Tuple of (elong, phi, height): east longitude [rad], geodetic
        latitude [rad] and height above the ellipsoid [m].
    """
    a, f = ellipsoid.params
    return gc2gde(a, f, xyz)


def gd2gc(ellipsoid: Ellipsoid, elong: ArrayLike, phi: ArrayLike, height: ArrayLike) -> Array:
    """Transform geodetic coordinates to geocentric using a named ellipsoid.

    Args:
        ellipsoid: Reference ellipsoid.
        elong: East longitude [rad].
        phi: Geodetic latitude [rad].
        height: Height above the ellipsoid [m].

    Returns:
        jax.Array: Geocentric vector ``[x, y, z]`` [m].
    """
    a, f = ellipsoid.params
    return gd2gce(a, f, elong, phi, height)


def position_geodetic_to_ecef(
    x_geod: ArrayLike,
    use_degrees: bool = False,
    ellipsoid: Ellipsoid = Ellipsoid.WGS84,
) -> Array:
    """Convert geodetic position to ECEF Cartesian coordinates.

    Args:
        x_geod: Geodetic coordinates ``[lon, lat, alt]``.
            Longitude and latitude in *rad* (or *deg* if ``use_degrees=True``),
            altitude in *m* above the ellipsoid.
        use_degrees: If ``True``, interpret longitude and latitude as degrees.
        ellipsoid: Reference ellipsoid. Default: WGS84.

    Returns:
        jax.Array: ECEF position ``[x, y, z]`` in *m*.

    Example:
        >>> import jax.numpy as jnp
        >>> from eorjax.coordinates import position_geodetic_to_ecef
        >>> x_ecef = position_geodetic_to_ecef(jnp.array([0.0, 0.0, 0.0]))
        >>> float(x_ecef[0])  # equatorial radius on the equator
        6378137.0
    """
    x_geod = jnp.asarray(x_geod)

    lon = to_radians(x_geod[0], use_degrees)
    lat = to_radians(x_geod[1], use_degrees)

    return gd2gc(ellipsoid, lon, lat, x_geod[2])


def position_ecef_to_geodetic(
    x_ecef: ArrayLike,
    use_degrees: bool = False,
    ellipsoid: Ellipsoid = Ellipsoid.WGS84,
) -> Array:
    """Convert ECEF Cartesian coordinates to geodetic position.

    Args:
        x_ecef: ECEF position ``[x, y, z]`` in *m*.
        use_degrees: If ``True``, return longitude and latitude in degrees.
        ellipsoid: Reference ellipsoid. Default: WGS84.

    Returns:
        jax.Array: Geodetic coordinates ``[lon, lat, alt]``.
            Longitude and latitude in *rad* (or *deg*), altitude in *m*
            above the ellipsoid.
    """
    lon, lat, alt = gc2gd(ellipsoid, x_ecef)

    return jnp.stack(
        [from_radians(lon, use_degrees), from_radians(lat, use_degrees), alt]
    )
