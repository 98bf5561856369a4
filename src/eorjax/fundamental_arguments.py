"""Fundamental arguments of the luni-solar and planetary theories.

Implements the IERS Conventions (2003) expressions for the Delaunay
arguments, the mean longitudes of the planets and the general accumulated
precession in longitude.

The Delaunay arguments are polynomials in arcseconds.  They are reduced
modulo one turn (``TURNAS``) *before* conversion to radians so that the
large linear term does not swamp the precision at high ``t``.  The
reduction uses a truncating remainder, so arguments for dates before
J2000.0 may be negative; every consumer feeds them to ``sin``/``cos`` or
normalizes them explicitly.

All functions take ``t``, TDB Julian centuries since J2000.0 (TT may be used
without significant loss of accuracy).

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from eorjax.constants import D2PI, DAS2R, TURNAS

# ---------------------------------------------------------------------------
# Delaunay arguments
# ---------------------------------------------------------------------------


def fal03(t: ArrayLike) -> Array:
    """Mean anomaly of the Moon (IERS 2003).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        l in radians.
    """
    return (
        jnp.fmod(
            485868.249036
            + t * (1717915923.2178 + t * (31.8792 + t * (0.051635 + t * (-0.00024470)))),
            TURNAS,
        )
        * DAS2R
    )


def falp03(t: ArrayLike) -> Array:
    """Mean anomaly of the Sun (IERS 2003).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        l' in radians.
    """
    return (
        jnp.fmod(
            1287104.793048
            + t * (129596581.0481 + t * (-0.5532 + t * (0.000136 + t * (-0.00001149)))),
            TURNAS,
        )
        * DAS2R
    )


def faf03(t: ArrayLike) -> Array:
    """Mean longitude of the Moon minus that of the ascending node (IERS 2003).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        F in radians.
    """
    return (
        jnp.fmod(
            335779.526232
            + t * (1739527262.8478 + t * (-12.7512 + t * (-0.001037 + t * (0.00000417)))),
            TURNAS,
        )
        * DAS2R
    )


def fad03(t: ArrayLike) -> Array:
    """Mean elongation of the Moon from the Sun (IERS 2003).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        D in radians.
    """
    return (
        jnp.fmod(
            1072260.703692
            + t * (1602961601.2090 + t * (-6.3706 + t * (0.006593 + t * (-0.00003169)))),
            TURNAS,
        )
        * DAS2R
    )


def faom03(t: ArrayLike) -> Array:
    """Mean longitude of the Moon's ascending node (IERS 2003).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        Omega in radians.
    """
    return (
        jnp.fmod(
            450160.398036 + t * (-6962890.5431 + t * (7.4722 + t * (0.007702 + t * (-0.00005939)))),
            TURNAS,
        )
        * DAS2R
    )


# ---------------------------------------------------------------------------
# Planetary longitudes
# ---------------------------------------------------------------------------


def fame03(t: ArrayLike) -> Array:
    """Mean longitude of Mercury (IERS 2003).

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        Mean longitude in radians.
    """
    return jnp.fmod(4.402608842 + 2608.7903141574 * t, D2PI)


def fave03(t: ArrayLike) -> Array:
    """Mean longitude of Venus (IERS 2003)."""
    return jnp.fmod(3.176146697 + 1021.3285546211 * t, D2PI)


def fae03(t: ArrayLike) -> Array:
    """Mean longitude of Earth (IERS 2003)."""
    return jnp.fmod(1.753470314 + 628.3075849991 * t, D2PI)


def fama03(t: ArrayLike) -> Array:
    """Mean longitude of Mars (IERS 2003)."""
    return jnp.fmod(6.203480913 + 334.0612426700 * t, D2PI)


def faju03(t: ArrayLike) -> Array:
    """Mean longitude of Jupiter (IERS 2003)."""
    return jnp.fmod(0.599546497 + 52.9690962641 * t, D2PI)


def fasa03(t: ArrayLike) -> Array:
    """Mean longitude of Saturn (IERS 2003)."""
    return jnp.fmod(0.874016757 + 21.3299104960 * t, D2PI)


def faur03(t: ArrayLike) -> Array:
    """Mean longitude of Uranus (IERS 2003)."""
    return jnp.fmod(5.481293872 + 7.4781598567 * t, D2PI)


def fane03(t: ArrayLike) -> Array:
    """Mean longitude of Neptune (IERS 2003)."""
    return jnp.fmod(5.311886287 + 3.8133035638 * t, D2PI)


def fapa03(t: ArrayLike) -> Array:
    """General accumulated precession in longitude (IERS 2003).

    Unlike the other arguments this one is not reduced: it stays small over
    any realistic time span.

    Args:
        t: TDB Julian centuries since J2000.0.

    Returns:
        General precession in radians.
    """
    return (0.024381750 + 0.00000538691 * t) * t
