"""Tests for the vector and rotation-matrix primitives."""

import jax
import jax.numpy as jnp
import pytest

from eorjax.matrices import (
    Rx,
    Rz,
    ir,
    pdp,
    pm,
    pn,
    pxp,
    rx,
    rxp,
    rxpv,
    rxr,
    rz,
    sxp,
)

R = jnp.array([[2.0, 3.0, 2.0], [3.0, 2.0, 3.0], [3.0, 4.0, 5.0]])


class TestElementaryRotations:
    def test_rx_90deg(self):
        r = Rx(90.0, use_degrees=True)
        expected = jnp.array([[1.0, 0.0, 0.0], [0.0, 0.0, 1.0], [0.0, -1.0, 0.0]])
        assert jnp.allclose(r, expected, atol=1e-12)

    def test_rz_90deg(self):
        r = Rz(90.0, use_degrees=True)
        expected = jnp.array([[0.0, 1.0, 0.0], [-1.0, 0.0, 0.0], [0.0, 0.0, 1.0]])
        assert jnp.allclose(r, expected, atol=1e-12)

    @pytest.mark.parametrize("rot", [Rx, Rz])
    def test_orthonormal(self, rot):
        r = rot(0.7)
        assert jnp.allclose(r @ r.T, jnp.eye(3), atol=1e-14)
        assert float(jnp.linalg.det(r)) == pytest.approx(1.0, abs=1e-14)


class TestApplyRotations:
    def test_ir(self):
        assert jnp.array_equal(ir(), jnp.eye(3))
        assert ir().dtype == jnp.float64

    def test_rx_reference(self):
        r = rx(0.3456789, R)
        assert float(r[0, 0]) == 2.0
        assert float(r[0, 1]) == 3.0
        assert float(r[0, 2]) == 2.0
        assert float(r[1, 0]) == pytest.approx(3.839043388235612460, abs=1e-12)
        assert float(r[1, 1]) == pytest.approx(3.237033249594111899, abs=1e-12)
        assert float(r[1, 2]) == pytest.approx(4.516714379005982719, abs=1e-12)
        assert float(r[2, 0]) == pytest.approx(1.806030415924501684, abs=1e-12)
        assert float(r[2, 1]) == pytest.approx(3.085711545336372503, abs=1e-12)
        assert float(r[2, 2]) == pytest.approx(3.687721683977873065, abs=1e-12)

    def test_rz_reference(self):
        r = rz(0.3456789, R)
        assert float(r[0, 0]) == pytest.approx(2.898197754208926769, abs=1e-12)
        assert float(r[0, 1]) == pytest.approx(3.500207892850427330, abs=1e-12)
        assert float(r[0, 2]) == pytest.approx(2.898197754208926769, abs=1e-12)
        assert float(r[1, 0]) == pytest.approx(2.144865911309686813, abs=1e-12)
        assert float(r[1, 1]) == pytest.approx(0.865184781897815993, abs=1e-12)
        assert float(r[1, 2]) == pytest.approx(2.144865911309686813, abs=1e-12)
        assert jnp.array_equal(r[2], R[2])

    def test_rx_matches_matrix_product(self):
        assert jnp.allclose(rx(-1.1, R), Rx(-1.1) @ R, atol=1e-14)

    def test_rz_matches_matrix_product(self):
        assert jnp.allclose(rz(2.3, R), Rz(2.3) @ R, atol=1e-14)

    def test_accepts_nested_lists(self):
        r = rz(0.0, [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]])
        assert r.shape == (3, 3)


class TestVectorProducts:
    def test_pdp(self):
        assert float(pdp(jnp.array([2.0, 2.0, 3.0]), jnp.array([1.0, 3.0, 4.0]))) == 20.0

    def test_pxp(self):
        axb = pxp(jnp.array([2.0, 2.0, 3.0]), jnp.array([1.0, 3.0, 4.0]))
        assert jnp.array_equal(axb, jnp.array([-1.0, -5.0, 4.0]))

    def test_pm(self):
        assert float(pm(jnp.array([0.3, 1.2, -2.5]))) == pytest.approx(
            2.789265136196270604, abs=1e-12
        )

    def test_sxp(self):
        assert jnp.allclose(sxp(2.0, jnp.array([1.0, -2.0, 0.5])), jnp.array([2.0, -4.0, 1.0]))

    def test_pn(self):
        w, u = pn(jnp.array([0.3, 1.2, -2.5]))
        assert float(w) == pytest.approx(2.789265136196270604, abs=1e-12)
        assert float(u[0]) == pytest.approx(0.1075552109073112058, abs=1e-12)
        assert float(u[1]) == pytest.approx(0.4302208436292448232, abs=1e-12)
        assert float(u[2]) == pytest.approx(-0.8962934242275933816, abs=1e-12)

    def test_pn_null_vector(self):
        w, u = pn(jnp.zeros(3))
        assert float(w) == 0.0
        assert jnp.array_equal(u, jnp.zeros(3))
        assert jnp.all(jnp.isfinite(u))


class TestMatrixProducts:
    def test_rxp(self):
        p = rxp(R, jnp.array([0.2, 1.5, 0.1]))
        assert jnp.allclose(p, jnp.array([5.1, 3.9, 7.1]), atol=1e-12)

    def test_rxpv(self):
        pv = jnp.array([[0.2, 1.5, 0.1], [1.5, 0.2, 0.1]])
        out = rxpv(R, pv)
        assert out.shape == (2, 3)
        assert jnp.allclose(out[0], jnp.array([5.1, 3.9, 7.1]), atol=1e-12)
        assert jnp.allclose(out[1], jnp.array([3.8, 5.2, 5.8]), atol=1e-12)

    def test_rxr(self):
        b = jnp.array([[1.0, 2.0, 2.0], [4.0, 1.0, 1.0], [3.0, 0.0, 1.0]])
        expected = jnp.array([[20.0, 7.0, 9.0], [20.0, 8.0, 11.0], [34.0, 10.0, 15.0]])
        assert jnp.allclose(rxr(R, b), expected, atol=1e-12)

    def test_rxr_jit(self):
        out = jax.jit(rxr)(R, R.T)
        assert jnp.allclose(out, R @ R.T, atol=1e-12)
