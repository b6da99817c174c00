"""Barycentric ↔ heliocentric conversions of a whole population.

Both directions are pure translations.  Heliocentric coordinates are taken
relative to the central body; barycentric coordinates relative to the
mass-weighted center of every body in the population, the central body
included.
"""

from __future__ import annotations

import logging

import jax
from jax.tree_util import tree_map

from coojax.bodies import CartesianState, CoordinateType, Population, stack
from coojax.frames import barycenter_of, recenter

from ._common import check_population, write_back
from ._types import ConversionResult

logger = logging.getLogger(__name__)

_recenter_batch = jax.jit(jax.vmap(recenter, in_axes=(0, None)))


def barycentric_to_heliocentric(population: Population) -> ConversionResult:
    """Rewrite every body's heliocentric state from its barycentric state.

    ``hco_i = bco_i - bco_center``.  The central body receives the explicit
    zero state.  This direction cannot fail for a valid population.

    Args:
        population: Bodies with barycentric states set.

    Returns:
        :class:`ConversionResult` with ``success=True``.

    Raises:
        ValueError: If the population is missing or empty, or its center
            index is out of range.

    Examples:
        ```python
        from coojax.conversions import barycentric_to_heliocentric
        result = barycentric_to_heliocentric(population)
        ```
    """
    check_population(population)
    bodies = population.bodies
    center = population.center
    logger.debug("Barycentric to heliocentric: %d bodies, center %d", len(bodies), center)

    states = stack([b.barycentric for b in bodies])
    origin = tree_map(lambda leaf: leaf[center], states)
    hco = _recenter_batch(states, origin)

    return write_back(
        bodies,
        CoordinateType.HELIOCENTRIC,
        hco,
        center=center,
        zero=CartesianState.zero(),
    )


def heliocentric_to_barycentric(population: Population) -> ConversionResult:
    """Rewrite every body's barycentric state from its heliocentric state.

    Computes the heliocentric barycenter ``B`` of all bodies and sets
    ``bco_i = hco_i - B`` for every body, the central body included.

    If the total mass is not positive the barycenter is undefined: nothing
    is written and the result has ``success=False`` with no failed indices.

    Args:
        population: Bodies with masses and heliocentric states set.

    Returns:
        :class:`ConversionResult`.

    Raises:
        ValueError: If the population is missing or empty, or its center
            index is out of range.
    """
    check_population(population)
    bodies = population.bodies
    logger.debug("Heliocentric to barycentric: %d bodies", len(bodies))

    masses = stack([b.mass for b in bodies])
    states = stack([b.heliocentric for b in bodies])
    origin, valid = barycenter_of(masses, states)
    if not bool(valid):
        logger.warning(
            "Barycenter undefined for %d bodies (total mass not positive); "
            "barycentric states left unchanged",
            len(bodies),
        )
        return ConversionResult(success=False)

    bco = _recenter_batch(states, origin)
    return write_back(bodies, CoordinateType.BARYCENTRIC, bco)
