"""IAU 2006 precession, and bias-precession-nutation matrices.

The frame bias and precession are expressed with the Fukushima-Williams
four-angle formulation: the matrix is built by :func:`fw2m` from the angles
``gamma_bar``, ``phi_bar``, ``psi`` and ``epsilon``.  Adding the nutation
components to ``psi`` and ``epsilon`` gives the full bias-precession-nutation
(NPB) matrix, whose bottom row holds the CIP X, Y coordinates.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from eorjax.constants import DAS2R
from eorjax.matrices import ir, rx, rz
from eorjax.nutation import nut06a
from eorjax.time import julian_centuries

# ---------------------------------------------------------------------------
# Mean obliquity
# ---------------------------------------------------------------------------


def obl06(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Mean obliquity of the ecliptic, IAU 2006 precession.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Obliquity of the ecliptic in radians.

    References:
        1. Hilton, J. et al., 2006, Celest.Mech.Dyn.Astron. 94, 351.
    """
    t = julian_centuries(date1, date2)

    return (
        84381.406
        + (
            -46.836769
            + (-0.0001831 + (0.00200340 + (-0.000000576 + (-0.0000000434) * t) * t) * t) * t
        )
        * t
    ) * DAS2R


# ---------------------------------------------------------------------------
# Precession angles
# ---------------------------------------------------------------------------


def p06e(date1: ArrayLike, date2: ArrayLike) -> tuple[Array, ...]:
    """Precession angles, IAU 2006, equinox based.

    Returns, in order:

    ====== ===============================================================
    eps0   obliquity of the ecliptic at J2000.0
    psia   luni-solar precession
    oma    inclination of equator wrt J2000.0 ecliptic
    bpa    ecliptic pole x, J2000.0 ecliptic triad
    bqa    ecliptic pole -y, J2000.0 ecliptic triad
    pia    angle between moving and J2000.0 ecliptics
    bpia   longitude of ascending node of the ecliptic of date
    epsa   obliquity of the ecliptic of date
    chia   planetary precession
    za     equatorial precession: -3rd 323 Euler angle
    zetaa  equatorial precession: -1st 323 Euler angle
    thetaa equatorial precession: 2nd 323 Euler angle
    pa     general precession
    gam    Fukushima-Williams angle gamma_J2000 (ICRS frame)
    phi    Fukushima-Williams angle phi_J2000
    psi    Fukushima-Williams angle psi_J2000
    ====== ===============================================================

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of the 16 angles above, all in radians.

    References:
        1. Capitaine, N., Wallace, P.T. & Chapront, J., 2003,
           Astron.Astrophys., 412, 567.
        2. Wallace, P.T. & Capitaine, N., 2006, Astron.Astrophys. 459, 981.
    """
    t = julian_centuries(date1, date2)

    # Obliquity at J2000.0
    eps0 = 84381.406 * DAS2R

    # Luni-solar precession
    psia = (
        (5038.481507 + (-1.0790069 + (-0.00114045 + (0.000132851 + (-0.0000000951) * t) * t) * t) * t)
        * t
        * DAS2R
    )

    # Inclination of mean equator with respect to the J2000.0 ecliptic
    oma = eps0 + (
        (-0.025754 + (0.0512623 + (-0.00772503 + (-0.000000467 + (0.0000003337) * t) * t) * t) * t)
        * t
        * DAS2R
    )

    # Ecliptic pole x, J2000.0 ecliptic triad
    bpa = (
        (4.199094 + (0.1939873 + (-0.00022466 + (-0.000000912 + (0.0000000120) * t) * t) * t) * t)
        * t
        * DAS2R
    )

    # Ecliptic pole -y, J2000.0 ecliptic triad
    bqa = (
        (-46.811015 + (0.0510283 + (0.00052413 + (-0.000000646 + (-0.0000000172) * t) * t) * t) * t)
        * t
        * DAS2R
    )

    # Angle between moving and J2000.0 ecliptics
    pia = (
        (46.998973 + (-0.0334926 + (-0.00012559 + (0.000000113 + (-0.0000000022) * t) * t) * t) * t)
        * t
        * DAS2R
    )

    # Longitude of ascending node of the moving ecliptic
    bpia = (
        629546.7936
        + (-867.95758 + (0.157992 + (-0.0005371 + (-0.00004797 + (0.000000072) * t) * t) * t) * t)
        * t
    ) * DAS2R

    # Mean obliquity of the ecliptic
    epsa = obl06(date1, date2)

    # Planetary precession
    chia = (
        (10.556403 + (-2.3814292 + (-0.00121197 + (0.000170663 + (-0.0000000560) * t) * t) * t) * t)
        * t
        * DAS2R
    )

    # Equatorial precession: minus the third of the 323 Euler angles
    za = (
        -2.650545
        + (
            2306.077181
            + (1.0927348 + (0.01826837 + (-0.000028596 + (-0.0000002904) * t) * t) * t) * t
        )
        * t
    ) * DAS2R

    # Equatorial precession: minus the first of the 323 Euler angles
    zetaa = (
        2.650545
        + (
            2306.083227
            + (0.2988499 + (0.01801828 + (-0.000005971 + (-0.0000003173) * t) * t) * t) * t
        )
        * t
    ) * DAS2R

    # Equatorial precession: second of the 323 Euler angles
    thetaa = (
        (2004.191903 + (-0.4294934 + (-0.04182264 + (-0.000007089 + (-0.0000001274) * t) * t) * t) * t)
        * t
        * DAS2R
    )

    # General precession
    pa = (
        (5028.796195 + (1.1054348 + (0.00007964 + (-0.000023857 + (-0.0000000383) * t) * t) * t) * t)
        * t
        * DAS2R
    )

    # Fukushima-Williams angles for precession
    gam = (
        (10.556403 + (0.4932044 + (-0.00031238 + (-0.000002788 + (0.0000000260) * t) * t) * t) * t)
        * t
        * DAS2R
    )

    phi = eps0 + (
        (-46.811015 + (0.0511269 + (0.00053289 + (-0.000000440 + (-0.0000000176) * t) * t) * t) * t)
        * t
        * DAS2R
    )

    psi = (
        (5038.481507 + (1.5584176 + (-0.00018522 + (-0.000026452 + (-0.0000000148) * t) * t) * t) * t)
        * t
        * DAS2R
    )

    return (
        eps0, psia, oma, bpa, bqa, pia, bpia, epsa,
        chia, za, zetaa, thetaa, pa, gam, phi, psi,
    )  # fmt: skip


def pfw06(date1: ArrayLike, date2: ArrayLike) -> tuple[Array, Array, Array, Array]:
    """Precession angles, IAU 2006, Fukushima-Williams 4-angle formulation.

    The angles include the frame bias: ``gamb`` and ``psib`` are not zero at
    J2000.0, and ``phib`` differs from the J2000.0 obliquity.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of (gamb, phib, psib, epsa) in radians.

    References:
        1. Hilton, J. et al., 2006, Celest.Mech.Dyn.Astron. 94, 351.
    """
    t = julian_centuries(date1, date2)

    gamb = (
        -0.052928
        + (10.556378 + (0.4932044 + (-0.00031238 + (-0.000002788 + (0.0000000260) * t) * t) * t) * t)
        * t
    ) * DAS2R

    phib = (
        84381.412819
        + (-46.811016 + (0.0511268 + (0.00053289 + (-0.000000440 + (-0.0000000176) * t) * t) * t) * t)
        * t
    ) * DAS2R

    psib = (
        -0.041775
        + (5038.481484 + (1.5584175 + (-0.00018522 + (-0.000026452 + (-0.0000000148) * t) * t) * t) * t)
        * t
    ) * DAS2R

    epsa = obl06(date1, date2)

    return gamb, phib, psib, epsa


# ---------------------------------------------------------------------------
# Matrices
# ---------------------------------------------------------------------------


def fw2m(gamb: ArrayLike, phib: ArrayLike, psi: ArrayLike, eps: ArrayLike) -> Array:
    """Form a rotation matrix from Fukushima-Williams angles.

    ``NxPxB = R_1(-eps) . R_3(-psi) . R_1(phib) . R_3(gamb)``

    The rotations are applied to the identity one at a time, each as a
    left-multiplication, starting with ``R_3(gamb)``.

    Args:
        gamb: F-W angle gamma_bar (radians).
        phib: F-W angle phi_bar (radians).
        psi: F-W angle psi (radians).
        eps: F-W angle epsilon (radians).

    Returns:
        3x3 rotation matrix.
    """
    r = ir()
    r = rz(gamb, r)
    r = rx(phib, r)
    r = rz(-psi, r)
    r = rx(-eps, r)
    return r


def pmat06(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Precession matrix (including frame bias) from GCRS to mean of date.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 bias-precession matrix.
    """
    gamb, phib, psib, epsa = pfw06(date1, date2)
    return fw2m(gamb, phib, psib, epsa)


def pnm06a(date1: ArrayLike, date2: ArrayLike) -> Array:
    """Form the bias-precession-nutation matrix, IAU 2006/2000A.

    Combines Fukushima-Williams precession angles with IAU 2006/2000A
    nutation to form the complete GCRS-to-true rotation matrix.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        3x3 bias-precession-nutation matrix.
    """
    gamb, phib, psib, epsa = pfw06(date1, date2)

    dp, de = nut06a(date1, date2)

    return fw2m(gamb, phib, psib + dp, epsa + de)


def bpn2xy(rbpn: ArrayLike) -> tuple[Array, Array]:
    """Extract CIP X, Y coordinates from a bias-precession-nutation matrix.

    Args:
        rbpn: 3x3 bias-precession-nutation matrix.

    Returns:
        Tuple of (x, y) CIP coordinates.
    """
    rbpn = jnp.asarray(rbpn)
    return rbpn[2, 0], rbpn[2, 1]
