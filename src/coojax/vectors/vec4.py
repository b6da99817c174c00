"""Four-dimensional vector kernel.

Vectors of the Kustaanheimo-Stiefel parameter space.  Mirrors
:mod:`coojax.vectors.vec3` (same cached-norm convention) and adds the
bilinear alternating form used by the KS algebra.
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from coojax.config import get_dtype


class Vector4(NamedTuple):
    """4-vector ``(u1, u2, u3, u4)`` with a cached norm.

    Attributes:
        u1: First component.
        u2: Second component.
        u3: Third component.
        u4: Fourth component.
        abs: Cached Euclidean norm.  Valid only right after
            ``vec4_with_norm``, ``vec4_scale`` or ``vec4_scale_to``.
    """

    u1: ArrayLike = 0.0
    u2: ArrayLike = 0.0
    u3: ArrayLike = 0.0
    u4: ArrayLike = 0.0
    abs: ArrayLike = 0.0

    @classmethod
    def zero(cls) -> Vector4:
        """Return the zero vector (with a zero cached norm)."""
        z = jnp.zeros((), dtype=get_dtype())
        return cls(z, z, z, z, z)


def _vec4(u1, u2, u3, u4) -> Vector4:
    return Vector4(u1, u2, u3, u4, jnp.zeros_like(u1))


def vec4_from_array(a: ArrayLike) -> Vector4:
    """Create a vector from an array whose last axis holds ``[u1, u2, u3, u4]``."""
    a = jnp.asarray(a, dtype=get_dtype())
    return _vec4(a[..., 0], a[..., 1], a[..., 2], a[..., 3])


def vec4_to_array(v: Vector4) -> Array:
    """Return the components as an array of shape ``(..., 4)``."""
    return jnp.stack(
        [jnp.asarray(v.u1), jnp.asarray(v.u2), jnp.asarray(v.u3), jnp.asarray(v.u4)],
        axis=-1,
    )


def vec4_inner(a: Vector4, b: Vector4) -> Array:
    """Inner (dot) product ``<a|b>``."""
    return a.u1 * b.u1 + a.u2 * b.u2 + a.u3 * b.u3 + a.u4 * b.u4


def vec4_norm(v: Vector4) -> Array:
    """Euclidean length ``|v|``."""
    return jnp.sqrt(v.u1 * v.u1 + v.u2 * v.u2 + v.u3 * v.u3 + v.u4 * v.u4)


def vec4_with_norm(v: Vector4) -> Vector4:
    """Return ``v`` with its cached norm recomputed."""
    return Vector4(v.u1, v.u2, v.u3, v.u4, vec4_norm(v))


def vec4_bilinear(a: Vector4, b: Vector4) -> Array:
    """Bilinear alternating form of the KS transformation.

    ``(a, b) = a.u4 b.u1 - a.u3 b.u2 + a.u2 b.u3 - a.u1 b.u4``

    The form is antisymmetric, so ``vec4_bilinear(a, a) == 0``.

    References:
        E. Stiefel and G. Scheifele, *Linear and Regular Celestial
        Mechanics*, Springer, 1971, Sec. 9.
    """
    return a.u4 * b.u1 - a.u3 * b.u2 + a.u2 * b.u3 - a.u1 * b.u4


def vec4_add(a: Vector4, b: Vector4) -> Vector4:
    """Vector sum ``a + b``."""
    return _vec4(a.u1 + b.u1, a.u2 + b.u2, a.u3 + b.u3, a.u4 + b.u4)


def vec4_sub(a: Vector4, b: Vector4) -> Vector4:
    """Vector difference ``a - b``."""
    return _vec4(a.u1 - b.u1, a.u2 - b.u2, a.u3 - b.u3, a.u4 - b.u4)


def vec4_smul(v: Vector4, scalar: ArrayLike) -> Vector4:
    """Scalar multiple ``scalar * v``."""
    return _vec4(scalar * v.u1, scalar * v.u2, scalar * v.u3, scalar * v.u4)


def vec4_madd(v: Vector4, w: Vector4, scalar: ArrayLike) -> Vector4:
    """Multiply-add ``v + w * scalar``."""
    return _vec4(
        v.u1 + w.u1 * scalar,
        v.u2 + w.u2 * scalar,
        v.u3 + w.u3 * scalar,
        v.u4 + w.u4 * scalar,
    )


def vec4_madd2(a: ArrayLike, v: Vector4, b: ArrayLike, w: Vector4) -> Vector4:
    """Linear combination ``a * v + b * w``."""
    return _vec4(
        a * v.u1 + b * w.u1,
        a * v.u2 + b * w.u2,
        a * v.u3 + b * w.u3,
        a * v.u4 + b * w.u4,
    )


def vec4_scale_to(v: Vector4, length: ArrayLike) -> Vector4:
    """Rescale ``v`` to the given length; the zero vector is left unscaled (``abs = 0``)."""
    norm = vec4_norm(v)
    nonzero = norm > 0.0
    factor = jnp.where(nonzero, length / jnp.where(nonzero, norm, 1.0), 1.0)
    return Vector4(
        factor * v.u1,
        factor * v.u2,
        factor * v.u3,
        factor * v.u4,
        jnp.where(nonzero, length, 0.0),
    )


def vec4_scale(v: Vector4) -> Vector4:
    """Normalize ``v`` to unit length (``abs = 1``)."""
    return vec4_scale_to(v, 1.0)


def vec4_angle(a: Vector4, b: Vector4) -> Array:
    """Angle between two vectors; 0 when either operand has zero length."""
    den = vec4_norm(a) * vec4_norm(b)
    nonzero = den > 0.0
    cosine = vec4_inner(a, b) / jnp.where(nonzero, den, 1.0)
    return jnp.where(nonzero, jnp.arccos(jnp.clip(cosine, -1.0, 1.0)), 0.0)
