"""Helpers shared by the population converters."""

from __future__ import annotations

import logging

import jax
from jax import Array

from coojax.bodies import Body, CoordinateType, Population, stack, unstack
from coojax.constants import GAUSS_K2

from ._types import ConversionResult

logger = logging.getLogger(__name__)


def check_population(population: Population | None) -> None:
    """Reject a missing population, an empty one, or a bad central index.

    Raises:
        ValueError: On any invalid argument.
    """
    if population is None:
        raise ValueError("Population is None")
    population.validate()


def mass_parameters(bodies: list[Body], center: int) -> Array:
    """Return ``mu_i = k^2 (m_center + m_i)`` for every body, shape ``(N,)``."""
    masses = stack([b.mass for b in bodies])
    return GAUSS_K2 * (masses[center] + masses)


def write_back(
    bodies: list[Body],
    kind: CoordinateType,
    batched,
    valid: Array | None = None,
    center: int | None = None,
    zero=None,
) -> ConversionResult:
    """Scatter a batched kernel result onto the bodies.

    Args:
        bodies: Bodies to write into, in batch order.
        kind: Target representation.
        batched: Kernel output with a leading body axis.
        valid: Per-body validity flags, or ``None`` if the kernel cannot
            fail.
        center: Index of the central body, which receives ``zero``
            instead of its kernel output.  ``None`` writes every body.
        zero: Value written to the central body.

    Returns:
        The aggregate :class:`ConversionResult`.
    """
    n = len(bodies)
    values = unstack(batched, n)
    flags = jax.device_get(valid) if valid is not None else None

    failed = []
    for i, body in enumerate(bodies):
        if i == center:
            body.set(kind, zero)
            continue
        body.set(kind, values[i])
        if flags is not None and not bool(flags[i]):
            failed.append(i)

    if failed:
        logger.warning(
            "%d of %d bodies failed conversion to %s: %s",
            len(failed), n, kind.name.lower(), failed,
        )
    return ConversionResult(success=not failed, failed=tuple(failed))
