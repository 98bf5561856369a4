"""Two-part Julian Date helpers.

Every model in eorjax takes dates as a pair ``(date1, date2)`` whose sum is
the Julian Date in the stated time scale.  The split is arbitrary; for
example ``JD(TT) = 2450123.7`` may be passed as any of

==========  =========  ===================
``date1``   ``date2``
==========  =========  ===================
2450123.7        0.0   JD method
2451545.0    -1421.3   J2000 method
2400000.5    50123.2   MJD method
2450123.5        0.2   date & time method
==========  =========  ===================

The J2000 method matches the way dates are handled internally and gives the
best resolution.  Time arguments are always formed from the *sum* of the two
parts, never from either part alone.
"""

from __future__ import annotations

from jax import Array
from jax.typing import ArrayLike

from eorjax.config import get_dtype
from eorjax.constants import DJ00, DJC, DJM0, DJM00, DJY


def julian_centuries(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Interval between J2000.0 and a two-part Julian Date, in Julian centuries.

    The reference epoch is subtracted from the first part before the second
    part is added, which preserves resolution for the J2000 and MJD splits.

    Args:
        date1: Julian Date (part 1).
        date2: Julian Date (part 2).

    Returns:
        Julian centuries since J2000.0, in the configured float dtype.
    """
    return get_dtype()(((date1 - DJ00) + date2) / DJC)


def epj(dj1: ArrayLike, dj2: ArrayLike) -> Array:
    """Julian Date to Julian Epoch.

    Args:
        dj1: Julian Date (part 1).
        dj2: Julian Date (part 2).

    Returns:
        Julian Epoch, e.g. ``2000.0`` for J2000.0.
    """
    return get_dtype()(2000.0 + ((dj1 - DJ00) + dj2) / DJY)


def epj2jd(epj: ArrayLike) -> tuple[float, Array]:
    """Julian Epoch to two-part Julian Date.

    The result is split as ``(DJM0, MJD)`` so that the second part carries
    the full resolution.

    Args:
        epj: Julian Epoch, e.g. ``1996.8``.

    Returns:
        Tuple of (``2400000.5``, Modified Julian Date).
    """
    return DJM0, get_dtype()(DJM00 + (epj - 2000.0) * 365.25)
