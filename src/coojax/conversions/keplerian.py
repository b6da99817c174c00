"""Heliocentric ↔ Keplerian conversions of a whole population.

Each non-central body is converted independently with the mass parameter
``mu_i = k^2 (m_center + m_i)``.  The single-body kernels from
:mod:`coojax.coordinates.keplerian` run batched under ``jax.vmap``; bodies
whose result fails validation are reported but still written.
"""

from __future__ import annotations

import logging

import jax

from coojax.bodies import (
    CartesianState,
    CoordinateType,
    KeplerianElements,
    Population,
    stack,
)
from coojax.coordinates import (
    state_heliocentric_to_keplerian,
    state_keplerian_to_heliocentric,
)

from ._common import check_population, mass_parameters, write_back
from ._types import ConversionResult

logger = logging.getLogger(__name__)

_to_keplerian_batch = jax.jit(jax.vmap(state_heliocentric_to_keplerian))
_to_heliocentric_batch = jax.jit(jax.vmap(state_keplerian_to_heliocentric))


def heliocentric_to_keplerian(population: Population) -> ConversionResult:
    """Compute Keplerian elements for every body from its heliocentric state.

    The central body gets the zero element set.  Bodies on parabolic or
    hyperbolic orbits are listed in ``failed``.

    Args:
        population: Bodies with masses and heliocentric states set.

    Returns:
        :class:`ConversionResult`.

    Raises:
        ValueError: If the population is missing or empty, or its center
            index is out of range.

    Examples:
        ```python
        from coojax.conversions import heliocentric_to_keplerian
        result = heliocentric_to_keplerian(population)
        if not result.success:
            print("unbound bodies:", result.failed)
        ```
    """
    check_population(population)
    bodies = population.bodies
    center = population.center
    logger.debug("Heliocentric to Keplerian: %d bodies, center %d", len(bodies), center)

    mu = mass_parameters(bodies, center)
    states = stack([b.heliocentric for b in bodies])
    elements, valid = _to_keplerian_batch(states, mu)

    return write_back(
        bodies,
        CoordinateType.KEPLERIAN,
        elements,
        valid,
        center=center,
        zero=KeplerianElements.zero(),
    )


def keplerian_to_heliocentric(population: Population) -> ConversionResult:
    """Compute heliocentric states for every body from its Keplerian elements.

    The central body gets the zero state.  Bodies with ``sma <= 0`` or
    ``ecc`` outside ``[0, 1)`` are listed in ``failed``.

    Args:
        population: Bodies with masses and Keplerian elements set.

    Returns:
        :class:`ConversionResult`.

    Raises:
        ValueError: If the population is missing or empty, or its center
            index is out of range.
    """
    check_population(population)
    bodies = population.bodies
    center = population.center
    logger.debug("Keplerian to heliocentric: %d bodies, center %d", len(bodies), center)

    mu = mass_parameters(bodies, center)
    elements = stack([b.keplerian for b in bodies])
    states, valid = _to_heliocentric_batch(elements, mu)

    return write_back(
        bodies,
        CoordinateType.HELIOCENTRIC,
        states,
        valid,
        center=center,
        zero=CartesianState.zero(),
    )
