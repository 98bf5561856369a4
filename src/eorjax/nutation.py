"""Nutation, IAU 2000A model and its IAU 2006 adjusted form.

The IAU 2000A model (MHB2000) is a trigonometric series over the
fundamental arguments: 678 luni-solar terms over the Delaunay arguments and
687 planetary terms over the Delaunay arguments, the planetary longitudes
and the general precession.  Each series is accumulated with
``jax.lax.scan(..., reverse=True)``, i.e. from the smallest term to the
largest, so the rounding matches the reference implementation.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from eorjax._nutation_data import LUNI_SOLAR_COEFFS, PLANETARY_COEFFS
from eorjax.config import get_dtype
from eorjax.constants import D2PI, DAS2R, TURNAS, U2R
from eorjax.fundamental_arguments import (
    fae03,
    faf03,
    faju03,
    fal03,
    fama03,
    fame03,
    faom03,
    fapa03,
    fasa03,
    faur03,
    fave03,
)
from eorjax.time import julian_centuries


def _luni_solar(t: Array) -> tuple[Array, Array]:
    """Sum the luni-solar series, in units of 0.1 microarcsecond."""
    dtype = get_dtype()

    # Delaunay arguments.  l' and D use the MHB2000 constants rather than
    # the IERS 2003 ones.
    el = fal03(t)
    elp = (
        jnp.fmod(
            1287104.79305
            + t * (129596581.0481 + t * (-0.5532 + t * (0.000136 + t * (-0.00001149)))),
            TURNAS,
        )
        * DAS2R
    )
    f = faf03(t)
    d = (
        jnp.fmod(
            1072260.70369
            + t * (1602961601.2090 + t * (-6.3706 + t * (0.006593 + t * (-0.00003169)))),
            TURNAS,
        )
        * DAS2R
    )
    om = faom03(t)

    def term(carry, row):
        dp, de = carry
        arg = jnp.fmod(row[0] * el + row[1] * elp + row[2] * f + row[3] * d + row[4] * om, D2PI)
        sarg = jnp.sin(arg)
        carg = jnp.cos(arg)
        dp = dp + ((row[5] + row[6] * t) * sarg + row[7] * carg)
        de = de + ((row[8] + row[9] * t) * carg + row[10] * sarg)
        return (dp, de), None

    zero = jnp.zeros((), dtype=dtype)
    ls = jnp.array(LUNI_SOLAR_COEFFS, dtype=dtype)
    (dp, de), _ = jax.lax.scan(term, (zero, zero), ls, reverse=True)
    return dp, de


def _planetary(t: Array) -> tuple[Array, Array]:
    """Sum the planetary series, in units of 0.1 microarcsecond."""
    dtype = get_dtype()

    # Lunar arguments, simplified linear MHB2000 forms.
    al = jnp.fmod(2.35555598 + 8328.6914269554 * t, D2PI)
    af = jnp.fmod(1.627905234 + 8433.466158131 * t, D2PI)
    ad = jnp.fmod(5.198466741 + 7771.3771468121 * t, D2PI)
    aom = jnp.fmod(2.18243920 - 33.757045 * t, D2PI)

    apa = fapa03(t)

    # Mercury through Uranus from IERS 2003, Neptune from MHB2000.
    alme = fame03(t)
    alve = fave03(t)
    alea = fae03(t)
    alma = fama03(t)
    alju = faju03(t)
    alsa = fasa03(t)
    alur = faur03(t)
    alne = jnp.fmod(5.321159000 + 3.8127774000 * t, D2PI)

    def term(carry, row):
        dp, de = carry
        arg = jnp.fmod(
            row[0] * al
            + row[1] * af
            + row[2] * ad
            + row[3] * aom
            + row[4] * alme
            + row[5] * alve
            + row[6] * alea
            + row[7] * alma
            + row[8] * alju
            + row[9] * alsa
            + row[10] * alur
            + row[11] * alne
            + row[12] * apa,
            D2PI,
        )
        sarg = jnp.sin(arg)
        carg = jnp.cos(arg)
        dp = dp + (row[13] * sarg + row[14] * carg)
        de = de + (row[15] * sarg + row[16] * carg)
        return (dp, de), None

    zero = jnp.zeros((), dtype=dtype)
    pl = jnp.array(PLANETARY_COEFFS, dtype=dtype)
    (dp, de), _ = jax.lax.scan(term, (zero, zero), pl, reverse=True)
    return dp, de


def nut00a(date1: ArrayLike, date2: ArrayLike) -> tuple[Array, Array]:
    """Nutation, IAU 2000A model (MHB2000 luni-solar and planetary).

    The nutation components are with respect to the ecliptic and equator
    of date.  The free core nutation is not included.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of (dpsi, deps) nutation in longitude and obliquity [radians].

    References:
        1. Mathews, P.M., Herring, T.A., Buffet, B.A. 2002, J.Geophys.Res. 107, B4.
        2. Simon, J.-L. et al. 1994, Astron.Astrophys. 282, 663-683.
        3. Souchay, J. et al. 1999, Astron.Astrophys.Supp.Ser. 135, 111.
    """
    t = julian_centuries(date1, date2)

    dp_ls, de_ls = _luni_solar(t)
    dp_pl, de_pl = _planetary(t)

    dpsi = dp_pl * U2R + dp_ls * U2R
    deps = de_pl * U2R + de_ls * U2R

    return dpsi, deps


def nut06a(date1: ArrayLike, date2: ArrayLike) -> tuple[Array, Array]:
    """Nutation, IAU 2000A with adjustments to match the IAU 2006 precession.

    Applies two corrections to the IAU 2000A nutation: the change in
    obliquity from the IAU 1980 ecliptic to the IAU 2006 ecliptic (a fixed
    factor on the longitude term), and the secular variation of the Earth's
    dynamical form factor J2 (a factor proportional to ``t`` on both terms).

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of (dpsi, deps) nutation in longitude and obliquity [radians].

    References:
        1. Wallace, P.T. & Capitaine, N., 2006, Astron.Astrophys. 459, 981, Eqs. 5.
    """
    t = julian_centuries(date1, date2)

    # Secular variation of J2
    fj2 = -2.7774e-6 * t

    dp, de = nut00a(date1, date2)

    dpsi = dp + dp * (0.4697e-6 + fj2)
    deps = de + de * fj2

    return dpsi, deps
