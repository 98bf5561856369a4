"""Cross-validation tests comparing eorjax against pyerfa.

pyerfa wraps the ERFA C library, a re-licensed copy of IAU SOFA, and
evaluates in double precision like eorjax under its default dtype.
Tolerances are a few units in the last place of each quantity.
"""

import numpy as np
import pytest

erfa = pytest.importorskip("erfa")

import jax.numpy as jnp  # noqa: E402

from eorjax.cio import s06, xys06a  # noqa: E402
from eorjax.coordinates import (  # noqa: E402
    ae2hd,
    c2s,
    gc2gd,
    gc2gde,
    gd2gc,
    gd2gce,
    hd2ae,
    hd2pa,
    s2c,
    sepp,
    seps,
)
from eorjax.ellipsoid import Ellipsoid  # noqa: E402
from eorjax.fundamental_arguments import (  # noqa: E402
    fad03,
    fae03,
    faf03,
    faju03,
    fal03,
    falp03,
    fama03,
    fame03,
    fane03,
    faom03,
    fapa03,
    fasa03,
    faur03,
    fave03,
)
from eorjax.nutation import nut00a, nut06a  # noqa: E402
from eorjax.precession import (  # noqa: E402
    bpn2xy,
    fw2m,
    obl06,
    p06e,
    pfw06,
    pmat06,
    pnm06a,
)
from eorjax.sidereal import eors, era00, gmst06, gst06, gst06a  # noqa: E402
from eorjax.time import epj, epj2jd  # noqa: E402
from eorjax.utils import anp  # noqa: E402

# Two-part dates spread over 1900-2100, in several splits
DATES = [
    (2400000.5, 15020.0),
    (2451545.0, -1421.3),
    (2450123.7, 0.0),
    (2400000.5, 53736.0),
    (2459000.5, 0.25),
    (2488069.5, 0.75),
]

# Integer codes pyerfa uses for the named ellipsoids
ERFA_ELLIPSOID = {Ellipsoid.WGS84: 1, Ellipsoid.GRS80: 2, Ellipsoid.WGS72: 3}

_ANGLE_ATOL = 1e-13  # radians, for angles of order unity
_SMALL_ATOL = 1e-17  # radians, for nutation-sized quantities
_POS_ATOL = 1e-7  # metres


# ──────────────────────────────────────────────
# Fundamental arguments
# ──────────────────────────────────────────────


@pytest.mark.parametrize("t", [-1.0, -0.25, 0.0, 0.37, 0.8, 1.0])
@pytest.mark.parametrize(
    "ours, theirs",
    [
        (fal03, "fal03"),
        (falp03, "falp03"),
        (faf03, "faf03"),
        (fad03, "fad03"),
        (faom03, "faom03"),
        (fame03, "fame03"),
        (fave03, "fave03"),
        (fae03, "fae03"),
        (fama03, "fama03"),
        (faju03, "faju03"),
        (fasa03, "fasa03"),
        (faur03, "faur03"),
        (fane03, "fane03"),
        (fapa03, "fapa03"),
    ],
)
def test_fundamental_arguments(t, ours, theirs):
    assert float(ours(t)) == pytest.approx(float(getattr(erfa, theirs)(t)), abs=1e-14)


@pytest.mark.parametrize("a", [-7.0, -0.1, 0.0, 3.0, 6.283185307179586, 100.0])
def test_anp(a):
    assert float(anp(a)) == pytest.approx(float(erfa.anp(a)), abs=1e-15)


# ──────────────────────────────────────────────
# Precession-nutation
# ──────────────────────────────────────────────


@pytest.mark.parametrize("date1, date2", DATES)
class TestPrecessionNutation:
    def test_nut00a(self, date1, date2):
        dpsi, deps = nut00a(date1, date2)
        e_dpsi, e_deps = erfa.nut00a(date1, date2)
        assert float(dpsi) == pytest.approx(float(e_dpsi), abs=_SMALL_ATOL * 100)
        assert float(deps) == pytest.approx(float(e_deps), abs=_SMALL_ATOL * 100)

    def test_nut06a(self, date1, date2):
        dpsi, deps = nut06a(date1, date2)
        e_dpsi, e_deps = erfa.nut06a(date1, date2)
        assert float(dpsi) == pytest.approx(float(e_dpsi), abs=_SMALL_ATOL * 100)
        assert float(deps) == pytest.approx(float(e_deps), abs=_SMALL_ATOL * 100)

    def test_obl06(self, date1, date2):
        assert float(obl06(date1, date2)) == pytest.approx(
            float(erfa.obl06(date1, date2)), abs=_ANGLE_ATOL
        )

    def test_p06e(self, date1, date2):
        ours = p06e(date1, date2)
        theirs = erfa.p06e(date1, date2)
        for o, e in zip(ours, theirs):
            assert float(o) == pytest.approx(float(e), abs=_ANGLE_ATOL)

    def test_pfw06(self, date1, date2):
        ours = pfw06(date1, date2)
        theirs = erfa.pfw06(date1, date2)
        for o, e in zip(ours, theirs):
            assert float(o) == pytest.approx(float(e), abs=_ANGLE_ATOL)

    def test_pmat06(self, date1, date2):
        np.testing.assert_allclose(
            np.asarray(pmat06(date1, date2)), erfa.pmat06(date1, date2), rtol=0.0, atol=1e-14
        )

    def test_pnm06a(self, date1, date2):
        np.testing.assert_allclose(
            np.asarray(pnm06a(date1, date2)), erfa.pnm06a(date1, date2), rtol=0.0, atol=1e-14
        )

    def test_xys06a(self, date1, date2):
        x, y, s = xys06a(date1, date2)
        e_x, e_y, e_s = erfa.xys06a(date1, date2)
        assert float(x) == pytest.approx(float(e_x), abs=1e-14)
        assert float(y) == pytest.approx(float(e_y), abs=1e-14)
        assert float(s) == pytest.approx(float(e_s), abs=1e-16)

    def test_s06_given_xy(self, date1, date2):
        x, y = 0.5791308486706011000e-3, 0.4020579816732961219e-4
        assert float(s06(date1, date2, x, y)) == pytest.approx(
            float(erfa.s06(date1, date2, x, y)), abs=1e-16
        )


def test_fw2m():
    angles = (-0.2243387670997992368e-5, 0.4091014602391312982, -0.9501954178013015092e-3, 0.4091014316587367472)
    np.testing.assert_allclose(np.asarray(fw2m(*angles)), erfa.fw2m(*angles), rtol=0.0, atol=1e-15)


def test_bpn2xy():
    r = erfa.pnm06a(2400000.5, 53736.0)
    x, y = bpn2xy(r)
    e_x, e_y = erfa.bpn2xy(r)
    assert float(x) == float(e_x)
    assert float(y) == float(e_y)


# ──────────────────────────────────────────────
# Earth rotation and sidereal time
# ──────────────────────────────────────────────


@pytest.mark.parametrize("date1, date2", DATES)
class TestSiderealTime:
    def test_era00(self, date1, date2):
        assert float(era00(date1, date2)) == pytest.approx(
            float(erfa.era00(date1, date2)), abs=_ANGLE_ATOL
        )

    def test_gmst06(self, date1, date2):
        assert float(gmst06(date1, date2, date1, date2)) == pytest.approx(
            float(erfa.gmst06(date1, date2, date1, date2)), abs=_ANGLE_ATOL
        )

    def test_gst06a(self, date1, date2):
        assert float(gst06a(date1, date2, date1, date2)) == pytest.approx(
            float(erfa.gst06a(date1, date2, date1, date2)), abs=_ANGLE_ATOL
        )

    def test_gst06(self, date1, date2):
        r = erfa.pnm06a(date1, date2)
        assert float(gst06(date1, date2, date1, date2, r)) == pytest.approx(
            float(erfa.gst06(date1, date2, date1, date2, r)), abs=_ANGLE_ATOL
        )

    def test_eors(self, date1, date2):
        r = erfa.pnm06a(date1, date2)
        x, y = erfa.bpn2xy(r)
        s = erfa.s06(date1, date2, x, y)
        assert float(eors(r, s)) == pytest.approx(float(erfa.eors(r, s)), abs=1e-15)


@pytest.mark.parametrize("date1, date2", DATES)
def test_epj(date1, date2):
    assert float(epj(date1, date2)) == pytest.approx(float(erfa.epj(date1, date2)), abs=1e-11)


@pytest.mark.parametrize("year", [1900.0, 1996.8, 2000.0, 2024.5])
def test_epj2jd(year):
    djm0, djm = epj2jd(year)
    e_djm0, e_djm = erfa.epj2jd(year)
    assert djm0 == float(e_djm0)
    assert float(djm) == pytest.approx(float(e_djm), abs=1e-9)


# ──────────────────────────────────────────────
# Geodetic conversions
# ──────────────────────────────────────────────

POSITIONS = [
    (2e6, 3e6, 5.244e6),
    (-4.1e6, 1.2e6, -4.6e6),
    (6.378e6, 0.0, 1.0),
    (1e3, -2e3, 6.35e6),
    (4.2e7, 1.0e6, 3.0e5),
]


@pytest.mark.parametrize("ellipsoid", list(Ellipsoid))
@pytest.mark.parametrize("xyz", POSITIONS)
def test_gc2gd(ellipsoid, xyz):
    e, p, h = gc2gd(ellipsoid, jnp.array(xyz))
    e_e, e_p, e_h = erfa.gc2gd(ERFA_ELLIPSOID[ellipsoid], np.array(xyz))
    assert float(e) == pytest.approx(float(e_e), abs=_ANGLE_ATOL)
    assert float(p) == pytest.approx(float(e_p), abs=_ANGLE_ATOL)
    assert float(h) == pytest.approx(float(e_h), abs=1e-6)


@pytest.mark.parametrize("ellipsoid", list(Ellipsoid))
@pytest.mark.parametrize("elong, phi, height", [(3.1, -0.5, 2500.0), (0.1, 0.2, 0.3), (-2.0, 1.4, -40.0)])
def test_gd2gc(ellipsoid, elong, phi, height):
    xyz = gd2gc(ellipsoid, elong, phi, height)
    e_xyz = erfa.gd2gc(ERFA_ELLIPSOID[ellipsoid], elong, phi, height)
    np.testing.assert_allclose(np.asarray(xyz), e_xyz, rtol=0.0, atol=_POS_ATOL)


def test_gc2gde_gd2gce():
    a, f = 6378136.0, 0.0033528
    xyz = np.array([2e6, 3e6, 5.244e6])
    e, p, h = gc2gde(a, f, xyz)
    e_e, e_p, e_h = erfa.gc2gde(a, f, xyz)
    assert float(p) == pytest.approx(float(e_p), abs=_ANGLE_ATOL)
    assert float(h) == pytest.approx(float(e_h), abs=1e-6)
    np.testing.assert_allclose(
        np.asarray(gd2gce(a, f, e, p, h)), erfa.gd2gce(a, f, e_e, e_p, e_h), rtol=0.0, atol=1e-6
    )


# ──────────────────────────────────────────────
# Spherical and horizon coordinates
# ──────────────────────────────────────────────


@pytest.mark.parametrize("p", [(100.0, -50.0, 25.0), (0.0, 0.0, 1.0), (-1.0, 2.0, 0.0)])
def test_c2s(p):
    theta, phi = c2s(jnp.array(p))
    e_theta, e_phi = erfa.c2s(np.array(p))
    assert float(theta) == pytest.approx(float(e_theta), abs=1e-15)
    assert float(phi) == pytest.approx(float(e_phi), abs=1e-15)


def test_s2c():
    np.testing.assert_allclose(np.asarray(s2c(3.0123, -0.999)), erfa.s2c(3.0123, -0.999), atol=1e-15)


def test_separation():
    a = np.array([1.0, 0.1, 0.2])
    b = np.array([-3.0, 1e-3, 0.2])
    assert float(sepp(a, b)) == pytest.approx(float(erfa.sepp(a, b)), abs=1e-15)
    assert float(seps(1.0, 0.1, 0.2, -3.0)) == pytest.approx(
        float(erfa.seps(1.0, 0.1, 0.2, -3.0)), abs=1e-15
    )


@pytest.mark.parametrize("x, y, phi", [(5.5, 1.1, 0.7), (1.1, 1.2, 0.3), (-0.7, -0.2, -0.9)])
def test_horizon(x, y, phi):
    ha, dec = ae2hd(x, y, phi)
    e_ha, e_dec = erfa.ae2hd(x, y, phi)
    assert float(ha) == pytest.approx(float(e_ha), abs=1e-14)
    assert float(dec) == pytest.approx(float(e_dec), abs=1e-14)

    az, el = hd2ae(x, y, phi)
    e_az, e_el = erfa.hd2ae(x, y, phi)
    assert float(az) == pytest.approx(float(e_az), abs=1e-13)
    assert float(el) == pytest.approx(float(e_el), abs=1e-14)

    assert float(hd2pa(x, y, phi)) == pytest.approx(float(erfa.hd2pa(x, y, phi)), abs=1e-13)
