"""Fixed-size vector and rotation-matrix primitives.

Vectors ("p-vectors") are arrays of shape ``(3,)``, position-velocity
vectors ("pv-vectors") are arrays of shape ``(2, 3)`` and rotation matrices
("r-matrices") are row-major arrays of shape ``(3, 3)``.

Two flavours of rotation are provided:

- :func:`Rx`, :func:`Rz` build an elementary rotation matrix.
- :func:`rx`, :func:`rz` apply an elementary rotation to an existing matrix,
  returning ``R(angle) @ r``.  The products are written out element by
  element, in the same order as the reference C library, so that chains of
  rotations round identically.

All rotations are passive ("frame") rotations: a positive angle rotates the
coordinate axes anticlockwise as seen looking towards the origin from the
positive end of the rotation axis.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from eorjax.config import get_dtype
from eorjax.utils import to_radians


def Rx(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the x-axis.

    Args:
        angle (ArrayLike): Counter-clockwise angle of rotation as viewed
            looking back along the postive direction of the rotation axis.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jax.Array: Rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    angle = to_radians(angle, use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[1.0,  0.0,  0.0],
                      [0.0,   +c,   +s],
                      [0.0,   -s,   +c]])


def Rz(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the z-axis.

    Args:
        angle (ArrayLike): Counter-clockwise angle of rotation as viewed
            looking back along the postive direction of the rotation axis.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jax.Array: Rotation matrix.
    """
    angle = to_radians(angle, use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[ +c,   +s,  0.0],
                      [ -s,   +c,  0.0],
                      [0.0,  0.0,  1.0]])


def ir() -> Array:
    """Identity r-matrix in the configured float dtype."""
    return jnp.eye(3, dtype=get_dtype())


def rx(phi: ArrayLike, r: ArrayLike) -> Array:
    """Rotate an r-matrix about the x-axis.

    Equivalent to ``Rx(phi) @ r``.  Only rows 1 and 2 change.

    Args:
        phi: Rotation angle (radians).
        r: Matrix to be rotated, shape ``(3, 3)``.

    Returns:
        jax.Array: Rotated matrix.
    """
    r = jnp.asarray(r)
    s = jnp.sin(phi)
    c = jnp.cos(phi)

    row1 = c * r[1] + s * r[2]
    row2 = -s * r[1] + c * r[2]

    return jnp.stack([r[0], row1, row2])


def rz(psi: ArrayLike, r: ArrayLike) -> Array:
    """Rotate an r-matrix about the z-axis.

    Equivalent to ``Rz(psi) @ r``.  Only rows 0 and 1 change.

    Args:
        psi: Rotation angle (radians).
        r: Matrix to be rotated, shape ``(3, 3)``.

    Returns:
        jax.Array: Rotated matrix.
    """
    r = jnp.asarray(r)
    s = jnp.sin(psi)
    c = jnp.cos(psi)

    row0 = c * r[0] + s * r[1]
    row1 = -s * r[0] + c * r[1]

    return jnp.stack([row0, row1, r[2]])


def pdp(a: ArrayLike, b: ArrayLike) -> Array:
    """Inner (dot) product of two p-vectors."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def pxp(a: ArrayLike, b: ArrayLike) -> Array:
    """Outer (cross) product of two p-vectors."""
    return jnp.stack(
        [
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        ]
    )


def pm(p: ArrayLike) -> Array:
    """Modulus of a p-vector."""
    return jnp.sqrt(p[0] * p[0] + p[1] * p[1] + p[2] * p[2])


def sxp(s: ArrayLike, p: ArrayLike) -> Array:
    """Multiply a p-vector by a scalar."""
    return jnp.stack([s * p[0], s * p[1], s * p[2]])


def pn(p: ArrayLike) -> tuple[Array, Array]:
    """Convert a p-vector into modulus and unit vector.

    A null vector yields modulus zero and a null unit vector.

    Args:
        p: p-vector, shape ``(3,)``.

    Returns:
        Tuple of (modulus, unit vector).
    """
    p = jnp.asarray(p)
    w = pm(p)
    null = w == 0.0
    # Divide by one instead of zero so the unused branch stays finite.
    u = sxp(1.0 / jnp.where(null, 1.0, w), p)
    return w, jnp.where(null, jnp.zeros_like(u), u)


def rxp(r: ArrayLike, p: ArrayLike) -> Array:
    """Multiply a p-vector by an r-matrix.

    Args:
        r: r-matrix, shape ``(3, 3)``.
        p: p-vector, shape ``(3,)``.

    Returns:
        jax.Array: ``r @ p``.
    """
    r = jnp.asarray(r)
    return jnp.stack([pdp(r[i], p) for i in range(3)])


def rxpv(r: ArrayLike, pv: ArrayLike) -> Array:
    """Multiply a pv-vector by an r-matrix.

    Args:
        r: r-matrix, shape ``(3, 3)``.
        pv: pv-vector, shape ``(2, 3)``.

    Returns:
        jax.Array: Rotated pv-vector, shape ``(2, 3)``.
    """
    pv = jnp.asarray(pv)
    return jnp.stack([rxp(r, pv[0]), rxp(r, pv[1])])


def rxr(a: ArrayLike, b: ArrayLike) -> Array:
    """Multiply two r-matrices.

    Args:
        a: First r-matrix, shape ``(3, 3)``.
        b: Second r-matrix, shape ``(3, 3)``.

    Returns:
        jax.Array: ``a @ b``.
    """
    a = jnp.asarray(a)
    b = jnp.asarray(b)
    return jnp.stack([jnp.stack([pdp(a[i], b[:, j]) for j in range(3)]) for i in range(3)])
