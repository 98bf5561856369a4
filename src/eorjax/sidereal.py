"""Earth rotation angle, equation of the origins and Greenwich sidereal time.

Greenwich apparent sidereal time is obtained in the CIO-based way, as the
Earth rotation angle minus the equation of the origins.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from eorjax.cio import s06
from eorjax.constants import D2PI, DAS2R, DJ00
from eorjax.precession import bpn2xy, pnm06a
from eorjax.time import julian_centuries
from eorjax.utils import anp

# ---------------------------------------------------------------------------
# Earth Rotation Angle
# ---------------------------------------------------------------------------


def era00(dj1: ArrayLike, dj2: ArrayLike) -> Array:
    """Earth Rotation Angle (IAU 2000 model).

    The two date parts are ordered so that the larger one acts as the day
    reference; the fractional days of both parts are added separately so
    that the full resolution of the split is kept.

    Args:
        dj1: UT1 as 2-part Julian Date (part 1).
        dj2: UT1 as 2-part Julian Date (part 2).

    Returns:
        Earth Rotation Angle in radians, in ``[0, 2pi)``.

    References:
        1. IAU Resolution B1.8, 2000.
        2. McCarthy, D.D., Petit, G. (eds.), IERS Conventions (2003), Chap. 5, Eq. 14.
    """
    dj1 = jnp.asarray(dj1)
    dj2 = jnp.asarray(dj2)
    d1 = jnp.where(dj1 < dj2, dj1, dj2)
    d2 = jnp.where(dj1 < dj2, dj2, dj1)

    # Days since J2000.0
    t = d1 + (d2 - DJ00)

    # Fractional part of T (days)
    f = jnp.fmod(d1, 1.0) + jnp.fmod(d2, 1.0)

    return anp(D2PI * (f + 0.7790572732640 + 0.00273781191135448 * t))


# ---------------------------------------------------------------------------
# Equation of the origins
# ---------------------------------------------------------------------------


def eors(rnpb: ArrayLike, s: ArrayLike) -> Array:
    """Equation of the origins, given the NPB matrix and the CIO locator s.

    The equation of the origins is the distance between the true equinox
    and the celestial intermediate origin and, equivalently, the difference
    between Earth rotation angle and Greenwich apparent sidereal time
    (ERA - GST).

    Args:
        rnpb: 3x3 bias-precession-nutation matrix.
        s: CIO locator (radians).

    Returns:
        Equation of the origins in radians.

    References:
        1. Capitaine, N. & Wallace, P.T., 2006, Astron.Astrophys. 450, 855.
        2. Wallace, P.T. & Capitaine, N., 2006, Astron.Astrophys. 459, 981.
    """
    r = jnp.asarray(rnpb)

    # Evaluate Wallace & Capitaine (2006) expression (16)
    x = r[2, 0]
    ax = x / (1.0 + r[2, 2])
    xs = 1.0 - ax * x
    ys = -ax * r[2, 1]
    zs = -x
    p = r[0, 0] * xs + r[0, 1] * ys + r[0, 2] * zs
    q = r[1, 0] * xs + r[1, 1] * ys + r[1, 2] * zs

    degenerate = (p == 0.0) & (q == 0.0)
    return jnp.where(degenerate, s, s - jnp.arctan2(q, p))


# ---------------------------------------------------------------------------
# Greenwich sidereal time
# ---------------------------------------------------------------------------


def gmst06(uta: ArrayLike, utb: ArrayLike, tta: ArrayLike, ttb: ArrayLike) -> Array:
    """Greenwich mean sidereal time, consistent with IAU 2006 precession.

    Both UT1 and TT are required: UT1 to predict the Earth rotation and TT
    to predict the effects of precession.

    Args:
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).

    Returns:
        Greenwich mean sidereal time in radians, in ``[0, 2pi)``.

    References:
        1. Capitaine, N., Wallace, P.T. & Chapront, J., 2005, Astron.Astrophys. 432, 355.
    """
    t = julian_centuries(tta, ttb)

    return anp(
        era00(uta, utb)
        + (
            0.014506
            + (
                4612.156534
                + (1.3915817 + (-0.00000044 + (-0.000029956 + (-0.0000000368) * t) * t) * t) * t
            )
            * t
        )
        * DAS2R
    )


def gst06(
    uta: ArrayLike, utb: ArrayLike, tta: ArrayLike, ttb: ArrayLike, rnpb: ArrayLike
) -> Array:
    """Greenwich apparent sidereal time, given the NPB matrix.

    Args:
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).
        rnpb: 3x3 bias-precession-nutation matrix for the TT date.

    Returns:
        Greenwich apparent sidereal time in radians, in ``[0, 2pi)``.
    """
    x, y = bpn2xy(rnpb)
    s = s06(tta, ttb, x, y)
    return anp(era00(uta, utb) - eors(rnpb, s))


def gst06a(uta: ArrayLike, utb: ArrayLike, tta: ArrayLike, ttb: ArrayLike) -> Array:
    """Greenwich apparent sidereal time, IAU 2006/2000A.

    Args:
        uta: UT1 as 2-part Julian Date (part 1).
        utb: UT1 as 2-part Julian Date (part 2).
        tta: TT as 2-part Julian Date (part 1).
        ttb: TT as 2-part Julian Date (part 2).

    Returns:
        Greenwich apparent sidereal time in radians, in ``[0, 2pi)``.
    """
    return gst06(uta, utb, tta, ttb, pnm06a(tta, ttb))
