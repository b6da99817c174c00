"""Three-dimensional vector kernel.

Provides the :class:`Vector3` container and pure functions operating on it.
Vectors are :class:`~typing.NamedTuple` instances, which JAX treats as
pytrees, so every function here works unchanged under ``jax.jit`` and on
batches of vectors under ``jax.vmap``.

Each vector carries a cached Euclidean norm in its ``abs`` field.  Only the
functions documented as setting it (``vec3_with_norm``, ``vec3_scale``,
``vec3_scale_to``) store a meaningful value there; all other operations
return ``abs = 0`` and callers must not rely on it.
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from coojax.config import get_dtype


class Vector3(NamedTuple):
    """Cartesian 3-vector with a cached norm.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
        abs: Cached Euclidean norm.  Valid only right after an operation
            that documents setting it.
    """

    x: ArrayLike = 0.0
    y: ArrayLike = 0.0
    z: ArrayLike = 0.0
    abs: ArrayLike = 0.0

    @classmethod
    def zero(cls) -> Vector3:
        """Return the zero vector (with a zero cached norm)."""
        z = jnp.zeros((), dtype=get_dtype())
        return cls(z, z, z, z)


def _vec3(x, y, z, norm=None) -> Vector3:
    """Build a vector from computed components, defaulting the norm to zero."""
    if norm is None:
        norm = jnp.zeros_like(x)
    return Vector3(x, y, z, norm)


def vec3_from_array(a: ArrayLike) -> Vector3:
    """Create a vector from a length-3 array (or a batch of shape ``(..., 3)``).

    Args:
        a: Array-like whose last axis holds ``[x, y, z]``.

    Returns:
        Vector3 with ``abs = 0``.
    """
    a = jnp.asarray(a, dtype=get_dtype())
    return _vec3(a[..., 0], a[..., 1], a[..., 2])


def vec3_to_array(v: Vector3) -> Array:
    """Return the components as an array of shape ``(..., 3)``."""
    return jnp.stack([jnp.asarray(v.x), jnp.asarray(v.y), jnp.asarray(v.z)], axis=-1)


def vec3_inner(a: Vector3, b: Vector3) -> Array:
    """Inner (dot) product ``<a|b>``."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def vec3_norm(v: Vector3) -> Array:
    """Euclidean length ``|v|``.  Does not read the cached ``abs`` field."""
    return jnp.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def vec3_with_norm(v: Vector3) -> Vector3:
    """Return ``v`` with its cached norm recomputed."""
    return Vector3(v.x, v.y, v.z, vec3_norm(v))


def vec3_add(a: Vector3, b: Vector3) -> Vector3:
    """Vector sum ``a + b``."""
    return _vec3(a.x + b.x, a.y + b.y, a.z + b.z)


def vec3_sub(a: Vector3, b: Vector3) -> Vector3:
    """Vector difference ``a - b``."""
    return _vec3(a.x - b.x, a.y - b.y, a.z - b.z)


def vec3_smul(v: Vector3, scalar: ArrayLike) -> Vector3:
    """Scalar multiple ``scalar * v``."""
    return _vec3(scalar * v.x, scalar * v.y, scalar * v.z)


def vec3_madd(v: Vector3, w: Vector3, scalar: ArrayLike) -> Vector3:
    """Multiply-add ``v + w * scalar``."""
    return _vec3(v.x + w.x * scalar, v.y + w.y * scalar, v.z + w.z * scalar)


def vec3_madd2(a: ArrayLike, v: Vector3, b: ArrayLike, w: Vector3) -> Vector3:
    """Linear combination ``a * v + b * w``."""
    return _vec3(a * v.x + b * w.x, a * v.y + b * w.y, a * v.z + b * w.z)


def vec3_matvec(mat: tuple[Vector3, Vector3, Vector3], v: Vector3) -> Vector3:
    """Matrix-vector product with the matrix given as three row vectors.

    Args:
        mat: Rows of the 3x3 matrix.
        v: Vector to transform.

    Returns:
        ``M v``.
    """
    return _vec3(vec3_inner(mat[0], v), vec3_inner(mat[1], v), vec3_inner(mat[2], v))


def vec3_cross(a: Vector3, b: Vector3) -> Vector3:
    """Cross (outer) product ``a x b``."""
    return _vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def vec3_scale_to(v: Vector3, length: ArrayLike) -> Vector3:
    """Rescale ``v`` to the given length.

    A zero-length input is returned unchanged with ``abs = 0``: there is no
    direction to scale along, which is a legitimate geometric edge case and
    not an error.

    Args:
        v: Vector to rescale.
        length: Target length.

    Returns:
        Vector3 of length ``length`` with ``abs = length``, or ``v`` with
        ``abs = 0`` if ``|v| == 0``.
    """
    norm = vec3_norm(v)
    nonzero = norm > 0.0
    factor = jnp.where(nonzero, length / jnp.where(nonzero, norm, 1.0), 1.0)
    return Vector3(
        factor * v.x,
        factor * v.y,
        factor * v.z,
        jnp.where(nonzero, length, 0.0),
    )


def vec3_scale(v: Vector3) -> Vector3:
    """Normalize ``v`` to unit length (``abs = 1``).

    See :func:`vec3_scale_to` for the zero-length policy.
    """
    return vec3_scale_to(v, 1.0)


def vec3_angle(a: Vector3, b: Vector3) -> Array:
    """Angle between two vectors, ``acos(<a|b> / (|a| |b|))``.

    Defined as 0 when either operand has zero length.

    Returns:
        Angle in ``[0, pi]``. Units: *rad*
    """
    den = vec3_norm(a) * vec3_norm(b)
    nonzero = den > 0.0
    cosine = vec3_inner(a, b) / jnp.where(nonzero, den, 1.0)
    return jnp.where(nonzero, jnp.arccos(jnp.clip(cosine, -1.0, 1.0)), 0.0)


def vec3_ipow3(v: Vector3) -> Array:
    """Inverse cube of the length, ``1 / |v|^3``, or 0 for the zero vector."""
    norm = vec3_norm(v)
    nonzero = norm > 0.0
    safe = jnp.where(nonzero, norm, 1.0)
    return jnp.where(nonzero, 1.0 / (safe * safe * safe), 0.0)
