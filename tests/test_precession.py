"""Tests for the IAU 2006 precession and the NPB matrices.

Reference values from the IAU SOFA test suite.
"""

import jax
import jax.numpy as jnp
import pytest

from eorjax.precession import bpn2xy, fw2m, obl06, p06e, pfw06, pmat06, pnm06a


class TestObliquity:
    def test_reference(self):
        assert float(obl06(2400000.5, 54388.0)) == pytest.approx(0.4090749229387258204, abs=1e-14)

    def test_j2000(self):
        assert float(obl06(2451545.0, 0.0)) == pytest.approx(84381.406 / 206264.80624709636, abs=1e-15)


class TestP06e:
    def test_reference(self):
        (
            eps0, psia, oma, bpa, bqa, pia, bpia, epsa,
            chia, za, zetaa, thetaa, pa, gam, phi, psi,
        ) = p06e(2400000.5, 52541.0)  # fmt: skip

        assert float(eps0) == pytest.approx(0.4090926006005828715, abs=1e-14)
        assert float(psia) == pytest.approx(0.6664369630191613431e-3, abs=1e-14)
        assert float(oma) == pytest.approx(0.4090925973783255982, abs=1e-14)
        assert float(bpa) == pytest.approx(0.5561149371265209445e-6, abs=1e-14)
        assert float(bqa) == pytest.approx(-0.6191517193290621270e-5, abs=1e-14)
        assert float(pia) == pytest.approx(0.6216441751884382923e-5, abs=1e-14)
        assert float(bpia) == pytest.approx(3.052014180023779882, abs=1e-14)
        assert float(epsa) == pytest.approx(0.4090864054922431688, abs=1e-14)
        assert float(chia) == pytest.approx(0.1387703379530915364e-5, abs=1e-14)
        assert float(za) == pytest.approx(0.2921789846651790546e-3, abs=1e-14)
        assert float(zetaa) == pytest.approx(0.3178773290332009310e-3, abs=1e-14)
        assert float(thetaa) == pytest.approx(0.2650932701657497181e-3, abs=1e-14)
        assert float(pa) == pytest.approx(0.6651637681381016288e-3, abs=1e-14)
        assert float(gam) == pytest.approx(0.1398077115963754987e-5, abs=1e-14)
        assert float(phi) == pytest.approx(0.4090864090837462602, abs=1e-14)
        assert float(psi) == pytest.approx(0.6664464807480920325e-3, abs=1e-14)

    def test_sixteen_angles(self):
        assert len(p06e(2451545.0, 0.0)) == 16

    def test_epsa_matches_obl06(self):
        assert float(p06e(2400000.5, 52541.0)[7]) == float(obl06(2400000.5, 52541.0))


class TestFukushimaWilliams:
    def test_pfw06_reference(self):
        gamb, phib, psib, epsa = pfw06(2400000.5, 50123.9999)
        assert float(gamb) == pytest.approx(-0.2243387670997995690e-5, abs=1e-16)
        assert float(phib) == pytest.approx(0.4091014602391312808, abs=1e-12)
        assert float(psib) == pytest.approx(-0.9501954178013031895e-3, abs=1e-14)
        assert float(epsa) == pytest.approx(0.4091014316587367491, abs=1e-12)

    def test_fw2m_identity(self):
        assert jnp.allclose(fw2m(0.0, 0.0, 0.0, 0.0), jnp.eye(3), atol=0.0)

    def test_fw2m_orthonormal(self):
        r = fw2m(
            -0.2243387670997992368e-5,
            0.4091014602391312982,
            -0.9501954178013015092e-3,
            0.4091014316587367472,
        )
        assert jnp.allclose(r @ r.T, jnp.eye(3), atol=1e-14)


class TestMatrices:
    def test_pmat06_reference(self):
        r = pmat06(2400000.5, 50123.9999)
        expected = [
            [0.9999995505176007047, 0.8695404617348208406e-3, 0.3779735201865589104e-3],
            [-0.8695404723772031414e-3, 0.9999996219496027161, -0.1361752497080270143e-6],
            [-0.3779734957034089490e-3, -0.1924880847894457113e-6, 0.9999999285679971958],
        ]
        for i in range(3):
            for j in range(3):
                assert float(r[i, j]) == pytest.approx(expected[i][j], abs=1e-14)

    def test_pnm06a_reference(self):
        r = pnm06a(2400000.5, 50123.9999)
        expected = [
            [0.9999995832794205484, 0.8372382772630962111e-3, 0.3639684771140623099e-3],
            [-0.8372533744743683605e-3, 0.9999996486492861646, 0.4132905944611019498e-4],
            [-0.3639337469629464969e-3, -0.4163377605910663999e-4, 0.9999999329094260057],
        ]
        for i in range(3):
            for j in range(3):
                assert float(r[i, j]) == pytest.approx(expected[i][j], abs=1e-12)

    def test_pnm06a_orthonormal(self):
        r = pnm06a(2400000.5, 50123.9999)
        assert jnp.allclose(r @ r.T, jnp.eye(3), atol=1e-14)

    def test_bpn2xy(self):
        r = pnm06a(2400000.5, 53736.0)
        x, y = bpn2xy(r)
        assert float(x) == pytest.approx(0.5791308482835292617e-3, abs=1e-12)
        assert float(y) == pytest.approx(0.4020580099454020310e-4, abs=1e-12)

    def test_bpn2xy_nested_list(self):
        x, y = bpn2xy([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.25, -0.5, 1.0]])
        assert float(x) == 0.25
        assert float(y) == -0.5

    def test_pmat06_vmap(self):
        dates = jnp.array([50123.9999, 55000.0])
        rs = jax.vmap(pmat06, in_axes=(None, 0))(2400000.5, dates)
        assert rs.shape == (2, 3, 3)
        assert float(rs[0, 0, 0]) == pytest.approx(0.9999995505176007047, abs=1e-14)
