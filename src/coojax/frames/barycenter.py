"""Barycenter computation and frame re-centering.

Provides the mass-weighted center of a set of bodies in any of the
Cartesian frames, and the pure translation that re-expresses a state
relative to another origin.

The total mass is accumulated with Kahan compensated summation.  The
barycenter is divided by this total, so a rounding bias in the sum of many
small masses would otherwise propagate into every barycentric coordinate.
The reduction is a ``jax.lax.scan`` over the bodies in their stored order,
which makes the rounding deterministic and reproducible.
"""

from __future__ import annotations

from collections.abc import Sequence

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from coojax.bodies import CARTESIAN_FRAMES, Body, CartesianState, CoordinateType, stack
from coojax.config import get_dtype
from coojax.vectors import vec3_madd, vec3_smul, vec3_sub


def _kahan_step(carry, mass):
    """One step of compensated summation: ``(total, error) += mass``."""
    total, err = carry
    inc = err + mass
    new = total + inc
    err = (total - new) + inc
    return (new, err), None


def total_mass(masses: ArrayLike) -> Array:
    """Sum masses with Kahan compensated summation.

    Args:
        masses: Masses, shape ``(N,)``. Units: *solar masses*

    Returns:
        Total mass. Units: *solar masses*

    Examples:
        ```python
        import jax.numpy as jnp
        from coojax.frames import total_mass
        total_mass(jnp.full(1000, 1e-10))
        ```
    """
    masses = jnp.asarray(masses, dtype=get_dtype())
    zero = jnp.zeros((), dtype=masses.dtype)
    (total, _), _ = jax.lax.scan(_kahan_step, (zero, zero), masses)
    return total


def barycenter_of(
    masses: ArrayLike,
    states: CartesianState,
) -> tuple[CartesianState, Array]:
    """Mass-weighted center of a batch of Cartesian states.

    Args:
        masses: Masses, shape ``(N,)``. Units: *solar masses*
        states: Batched states whose leaves have shape ``(N,)``.

    Returns:
        Tuple ``(center, valid)``.  ``valid`` is ``False`` and ``center`` is
        the zero state when ``N == 0`` or the total mass is not positive.
    """
    masses = jnp.asarray(masses, dtype=get_dtype())
    if masses.shape[0] == 0:
        return CartesianState.zero(), jnp.asarray(False)

    def step(carry, item):
        bc, kahan = carry
        mass, state = item
        bc = CartesianState(
            vec3_madd(bc.pos, state.pos, mass),
            vec3_madd(bc.vel, state.vel, mass),
        )
        kahan, _ = _kahan_step(kahan, mass)
        return (bc, kahan), None

    zero = jnp.zeros((), dtype=masses.dtype)
    init = (CartesianState.zero(), (zero, zero))
    (bc, (mtot, _)), _ = jax.lax.scan(step, init, (masses, states))

    valid = mtot > 0.0
    inv = jnp.where(valid, 1.0 / jnp.where(valid, mtot, 1.0), 0.0)
    center = CartesianState(vec3_smul(bc.pos, inv), vec3_smul(bc.vel, inv))
    return center, valid


def barycenter(
    bodies: Sequence[Body],
    frame: CoordinateType = CoordinateType.HELIOCENTRIC,
    start: int = 0,
    stop: int | None = None,
) -> tuple[CartesianState, Array]:
    """Barycenter of ``bodies[start:stop]`` in the selected Cartesian frame.

    Args:
        bodies: Body records.
        frame: Which Cartesian field to average: ``BARYCENTRIC``,
            ``HELIOCENTRIC``, ``JACOBI`` or ``POINCARE``.
        start: First index of the half-open range.
        stop: End of the half-open range (default: all remaining bodies).

    Returns:
        Tuple ``(center, valid)`` as for :func:`barycenter_of`.  An empty
        range is reported as invalid.

    Raises:
        ValueError: If *frame* is not a Cartesian frame.  The regularized
            frame has no barycenter.
    """
    if frame not in CARTESIAN_FRAMES:
        raise ValueError(f"No barycenter defined for coordinate type {frame!r}")

    selected = list(bodies[start:stop])
    if not selected:
        return CartesianState.zero(), jnp.asarray(False)

    masses = stack([b.mass for b in selected])
    states = stack([b.get(frame) for b in selected])
    return barycenter_of(masses, states)


def recenter(state: CartesianState, center: CartesianState) -> CartesianState:
    """Express ``state`` relative to ``center`` (``state - center``).

    Pure translation of position and velocity; no rotation or scaling.

    Args:
        state: State in some frame.
        center: Origin of the new frame, in the same frame as ``state``.

    Returns:
        Re-centered state.
    """
    return CartesianState(vec3_sub(state.pos, center.pos), vec3_sub(state.vel, center.vel))
