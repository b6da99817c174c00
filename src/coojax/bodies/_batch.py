"""Stacking helpers between per-body records and batched pytrees.

Converters gather one field from every body into a single pytree whose
leaves have a leading body axis, run the single-body kernel under
``jax.vmap``, and scatter the result back onto the bodies.
"""

from __future__ import annotations

from collections.abc import Sequence

import jax
import jax.numpy as jnp

from coojax.config import get_dtype


def stack(items: Sequence):
    """Stack a sequence of identically-structured pytrees along a new axis 0.

    Args:
        items: Non-empty sequence of pytrees (states, element sets, floats).

    Returns:
        A pytree of the same structure whose leaves have shape ``(N, ...)``.
    """
    dtype = get_dtype()
    return jax.tree_util.tree_map(
        lambda *leaves: jnp.stack([jnp.asarray(x, dtype=dtype) for x in leaves]),
        *items,
    )


def unstack(batched, n: int) -> list:
    """Split a batched pytree into ``n`` per-body pytrees.

    Args:
        batched: Pytree whose leaves have a leading axis of length ``n``.
        n: Number of bodies.

    Returns:
        List of ``n`` pytrees.
    """
    return [jax.tree_util.tree_map(lambda leaf, i=i: leaf[i], batched) for i in range(n)]
