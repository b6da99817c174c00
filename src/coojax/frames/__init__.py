"""Reference-frame utilities.

This sub-module provides:

- **Barycenter**: mass-weighted center of a range of bodies in any
  Cartesian frame, with compensated summation of the total mass.
- **Re-centering**: translation of a state to a new origin.
"""

from .barycenter import (
    barycenter,
    barycenter_of,
    recenter,
    total_mass,
)

__all__ = [
    "barycenter",
    "barycenter_of",
    "recenter",
    "total_mass",
]
