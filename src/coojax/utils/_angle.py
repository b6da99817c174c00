"""Angle conversion helpers.

These helpers wrap the ``use_degrees`` convention used throughout
coojax, providing JAX-traceable degree/radian conversion via
``jnp.where``.  Angles are always radians inside the library; conversion
happens only at the I/O boundary and in the public anomaly helpers.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians.
    """
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle from radians to degrees if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle in radians.
        use_degrees (bool): If ``True``, convert to degrees.

    Returns:
        Angle in radians or degrees.
    """
    return jnp.where(use_degrees, jnp.rad2deg(angle), angle)


def wrap_to_2pi(angle: ArrayLike) -> Array:
    """Shift a negative angle by one full turn.

    Angles produced by ``atan2`` lie in ``(-pi, pi]``; adding ``2 pi`` to the
    negative ones maps them onto ``[0, 2 pi)`` without touching the others.

    Args:
        angle (ArrayLike): Angle in radians, expected in ``(-2 pi, 2 pi)``.

    Returns:
        Angle in radians.
    """
    return jnp.where(angle < 0.0, angle + 2.0 * jnp.pi, angle)
