"""Kepler equation and anomaly conversions.

This sub-module provides:

- **Kepler solver**: a loop-free, branch-free solver for the elliptic
  Kepler equation (Markley starter plus fifth-order correction).
- **Anomaly conversions**: mean ↔ eccentric anomaly in the ``use_degrees``
  convention.
- **Trigonometric helper**: simultaneous sine/cosine from one tangent
  evaluation, shared with the element conversions.
"""

from .kepler import (
    anomaly_eccentric_to_mean,
    anomaly_mean_to_eccentric,
    kepler_solve,
    sincos_half_angle,
)

__all__ = [
    "anomaly_eccentric_to_mean",
    "anomaly_mean_to_eccentric",
    "kepler_solve",
    "sincos_half_angle",
]
