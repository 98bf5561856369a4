"""CIO locator s, compatible with IAU 2006/2000A precession-nutation.

The CIO locator positions the Celestial Intermediate Origin on the equator
of the Celestial Intermediate Pole.  The series evaluated here is for
``s + XY/2``, which is more compact than a direct series for ``s``; the
``XY/2`` product is subtracted at the end.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from eorjax.config import get_dtype
from eorjax.constants import DAS2R
from eorjax.fundamental_arguments import (
    fad03,
    fae03,
    faf03,
    fal03,
    faom03,
    fapa03,
    falp03,
    fave03,
)
from eorjax.precession import bpn2xy, pnm06a
from eorjax.time import julian_centuries

# Polynomial coefficients for s + XY/2, arcseconds, t^0 through t^5
_SP = (94.00e-6, 3808.65e-6, -122.68e-6, -72574.11e-6, 27.98e-6, 15.62e-6)

# Series terms, one band per power of t.  Each row holds the integer
# multipliers of (l, l', F, D, Om, LVe, LE, pA) followed by the sine and
# cosine coefficients in arcseconds.  Stored as tuples so that no array is
# created at import time, before the dtype is configured.

# fmt: off
_S0 = (
    ( 0,  0,  0,  0,  1,  0,   0,  0,  -2640.73e-6,   0.39e-6),
    ( 0,  0,  0,  0,  2,  0,   0,  0,    -63.53e-6,   0.02e-6),
    ( 0,  0,  2, -2,  3,  0,   0,  0,    -11.75e-6,  -0.01e-6),
    ( 0,  0,  2, -2,  1,  0,   0,  0,    -11.21e-6,  -0.01e-6),
    ( 0,  0,  2, -2,  2,  0,   0,  0,      4.57e-6,   0.00e-6),
    ( 0,  0,  2,  0,  3,  0,   0,  0,     -2.02e-6,   0.00e-6),
    ( 0,  0,  2,  0,  1,  0,   0,  0,     -1.98e-6,   0.00e-6),
    ( 0,  0,  0,  0,  3,  0,   0,  0,      1.72e-6,   0.00e-6),
    ( 0,  1,  0,  0,  1,  0,   0,  0,      1.41e-6,   0.01e-6),
    ( 0,  1,  0,  0, -1,  0,   0,  0,      1.26e-6,   0.01e-6),
    ( 1,  0,  0,  0, -1,  0,   0,  0,      0.63e-6,   0.00e-6),
    ( 1,  0,  0,  0,  1,  0,   0,  0,      0.63e-6,   0.00e-6),
    ( 0,  1,  2, -2,  3,  0,   0,  0,     -0.46e-6,   0.00e-6),
    ( 0,  1,  2, -2,  1,  0,   0,  0,     -0.45e-6,   0.00e-6),
    ( 0,  0,  4, -4,  4,  0,   0,  0,     -0.36e-6,   0.00e-6),
    ( 0,  0,  1, -1,  1, -8,  12,  0,      0.24e-6,   0.12e-6),
    ( 0,  0,  2,  0,  0,  0,   0,  0,     -0.32e-6,   0.00e-6),
    ( 0,  0,  2,  0,  2,  0,   0,  0,     -0.28e-6,   0.00e-6),
    ( 1,  0,  2,  0,  3,  0,   0,  0,     -0.27e-6,   0.00e-6),
    ( 1,  0,  2,  0,  1,  0,   0,  0,     -0.26e-6,   0.00e-6),
    ( 0,  0,  2, -2,  0,  0,   0,  0,      0.21e-6,   0.00e-6),
    ( 0,  1, -2,  2, -3,  0,   0,  0,     -0.19e-6,   0.00e-6),
    ( 0,  1, -2,  2, -1,  0,   0,  0,     -0.18e-6,   0.00e-6),
    ( 0,  0,  0,  0,  0,  8, -13, -1,      0.10e-6,  -0.05e-6),
    ( 0,  0,  0,  2,  0,  0,   0,  0,     -0.15e-6,   0.00e-6),
    ( 2,  0, -2,  0, -1,  0,   0,  0,      0.14e-6,   0.00e-6),
    ( 0,  1,  2, -2,  2,  0,   0,  0,      0.14e-6,   0.00e-6),
    ( 1,  0,  0, -2,  1,  0,   0,  0,     -0.14e-6,   0.00e-6),
    ( 1,  0,  0, -2, -1,  0,   0,  0,     -0.14e-6,   0.00e-6),
    ( 0,  0,  4, -2,  4,  0,   0,  0,     -0.13e-6,   0.00e-6),
    ( 0,  0,  2, -2,  4,  0,   0,  0,      0.11e-6,   0.00e-6),
    ( 1,  0, -2,  0, -3,  0,   0,  0,     -0.11e-6,   0.00e-6),
    ( 1,  0, -2,  0, -1,  0,   0,  0,     -0.11e-6,   0.00e-6),
)

_S1 = (
    ( 0,  0,  0,  0,  2,  0,   0,  0,     -0.07e-6,   3.57e-6),
    ( 0,  0,  0,  0,  1,  0,   0,  0,      1.73e-6,  -0.03e-6),
    ( 0,  0,  2, -2,  3,  0,   0,  0,      0.00e-6,   0.48e-6),
)

_S2 = (
    ( 0,  0,  0,  0,  1,  0,   0,  0,    743.52e-6,  -0.17e-6),
    ( 0,  0,  2, -2,  2,  0,   0,  0,     56.91e-6,   0.06e-6),
    ( 0,  0,  2,  0,  2,  0,   0,  0,      9.84e-6,  -0.01e-6),
    ( 0,  0,  0,  0,  2,  0,   0,  0,     -8.85e-6,   0.01e-6),
    ( 0,  1,  0,  0,  0,  0,   0,  0,     -6.38e-6,  -0.05e-6),
    ( 1,  0,  0,  0,  0,  0,   0,  0,     -3.07e-6,   0.00e-6),
    ( 0,  1,  2, -2,  2,  0,   0,  0,      2.23e-6,   0.00e-6),
    ( 0,  0,  2,  0,  1,  0,   0,  0,      1.67e-6,   0.00e-6),
    ( 1,  0,  2,  0,  2,  0,   0,  0,      1.30e-6,   0.00e-6),
    ( 0,  1, -2,  2, -2,  0,   0,  0,      0.93e-6,   0.00e-6),
    ( 1,  0,  0, -2,  0,  0,   0,  0,      0.68e-6,   0.00e-6),
    ( 0,  0,  2, -2,  1,  0,   0,  0,     -0.55e-6,   0.00e-6),
    ( 1,  0, -2,  0, -2,  0,   0,  0,      0.53e-6,   0.00e-6),
    ( 0,  0,  0,  2,  0,  0,   0,  0,     -0.27e-6,   0.00e-6),
    ( 1,  0,  0,  0,  1,  0,   0,  0,     -0.27e-6,   0.00e-6),
    ( 1,  0, -2, -2, -2,  0,   0,  0,     -0.26e-6,   0.00e-6),
    ( 1,  0,  0,  0, -1,  0,   0,  0,     -0.25e-6,   0.00e-6),
    ( 1,  0,  2,  0,  1,  0,   0,  0,      0.22e-6,   0.00e-6),
    ( 2,  0,  0, -2,  0,  0,   0,  0,     -0.21e-6,   0.00e-6),
    ( 2,  0, -2,  0, -1,  0,   0,  0,      0.20e-6,   0.00e-6),
    ( 0,  0,  2,  2,  2,  0,   0,  0,      0.17e-6,   0.00e-6),
    ( 2,  0,  2,  0,  2,  0,   0,  0,      0.13e-6,   0.00e-6),
    ( 2,  0,  0,  0,  0,  0,   0,  0,     -0.13e-6,   0.00e-6),
    ( 1,  0,  2, -2,  2,  0,   0,  0,     -0.12e-6,   0.00e-6),
    ( 0,  0,  2,  0,  0,  0,   0,  0,     -0.11e-6,   0.00e-6),
)

_S3 = (
    ( 0,  0,  0,  0,  1,  0,   0,  0,      0.30e-6, -23.42e-6),
    ( 0,  0,  2, -2,  2,  0,   0,  0,     -0.03e-6,  -1.46e-6),
    ( 0,  0,  2,  0,  2,  0,   0,  0,     -0.01e-6,  -0.25e-6),
    ( 0,  0,  0,  0,  2,  0,   0,  0,      0.00e-6,   0.23e-6),
)

_S4 = (
    ( 0,  0,  0,  0,  1,  0,   0,  0,     -0.26e-6,  -0.01e-6),
)
# fmt: on


def _band(table: tuple, fa: tuple[Array, ...], w0: Array) -> Array:
    """Accumulate one band of the series onto its polynomial coefficient.

    Terms are added from the last row to the first.

    Args:
        table: Band rows, see the module tables.
        fa: The eight fundamental arguments, radians.
        w0: Polynomial coefficient the band is added to.

    Returns:
        Band total, arcseconds.
    """
    rows = jnp.array(table, dtype=get_dtype())

    def term(w, row):
        a = 0.0
        for j in range(8):
            a = a + row[j] * fa[j]
        return w + (row[8] * jnp.sin(a) + row[9] * jnp.cos(a)), None

    w, _ = jax.lax.scan(term, w0, rows, reverse=True)
    return w


def s06(date1: ArrayLike, date2: ArrayLike, x: ArrayLike, y: ArrayLike) -> Array:
    """CIO locator s, given the CIP X, Y coordinates.

    The caller is responsible for supplying X, Y consistent with the date,
    e.g. from :func:`~eorjax.precession.bpn2xy` of
    :func:`~eorjax.precession.pnm06a`.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        x: CIP x coordinate.
        y: CIP y coordinate.

    Returns:
        CIO locator s in radians.

    References:
        1. Capitaine, N., Wallace, P.T. & Chapront, J., 2003, Astron.Astrophys. 432, 355.
        2. McCarthy, D.D., Petit, G. (eds.) 2004, IERS Conventions (2003), IERS Technical Note No. 32.
    """
    dtype = get_dtype()
    t = julian_centuries(date1, date2)

    fa = (
        fal03(t),   # l
        falp03(t),  # l'
        faf03(t),   # F
        fad03(t),   # D
        faom03(t),  # Om
        fave03(t),  # LVe
        fae03(t),   # LE
        fapa03(t),  # pA
    )

    w0 = _band(_S0, fa, jnp.asarray(_SP[0], dtype=dtype))
    w1 = _band(_S1, fa, jnp.asarray(_SP[1], dtype=dtype))
    w2 = _band(_S2, fa, jnp.asarray(_SP[2], dtype=dtype))
    w3 = _band(_S3, fa, jnp.asarray(_SP[3], dtype=dtype))
    w4 = _band(_S4, fa, jnp.asarray(_SP[4], dtype=dtype))
    w5 = _SP[5]

    return (w0 + (w1 + (w2 + (w3 + (w4 + w5 * t) * t) * t) * t) * t) * DAS2R - x * y / 2.0


def xys06a(date1: ArrayLike, date2: ArrayLike) -> tuple[Array, Array, Array]:
    """CIP X, Y coordinates and CIO locator s, IAU 2006/2000A.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of (x, y, s), all in radians.
    """
    x, y = bpn2xy(pnm06a(date1, date2))
    return x, y, s06(date1, date2, x, y)
