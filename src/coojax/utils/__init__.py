"""Shared utility functions for coojax.

Provides angle conversion helpers.
"""

from coojax.utils._angle import from_radians, to_radians, wrap_to_2pi

__all__ = [
    "from_radians",
    "to_radians",
    "wrap_to_2pi",
]
