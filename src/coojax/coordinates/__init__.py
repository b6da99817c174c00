"""Single-body coordinate transformations.

This sub-module provides the per-body kernels behind the population
converters in :mod:`coojax.conversions`:

- **Keplerian**: orbital elements ``(a, e, i, ω, Ω, M)`` ↔ heliocentric
  Cartesian position and velocity, for a given mass parameter.
"""

from .keplerian import (
    elements_valid,
    state_heliocentric_to_keplerian,
    state_keplerian_to_heliocentric,
)

__all__ = [
    "elements_valid",
    "state_heliocentric_to_keplerian",
    "state_keplerian_to_heliocentric",
]
