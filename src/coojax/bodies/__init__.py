"""Body records and their coordinate representations.

Provides the state and element containers, the :class:`Body` aggregate that
holds one of each, and the :class:`Population` of bodies around a central
index.  The Jacobi, Poincaré, regularized and Delaunay representations are
stored and read/written by :mod:`coojax.io` but have no conversions.
"""

from ._batch import stack, unstack
from ._types import (
    CARTESIAN_FRAMES,
    Body,
    CartesianState,
    CoordinateType,
    DelaunayElements,
    KeplerianElements,
    Population,
    RegularizedState,
    field_name,
)

__all__ = [
    "CARTESIAN_FRAMES",
    "Body",
    "CartesianState",
    "CoordinateType",
    "DelaunayElements",
    "KeplerianElements",
    "Population",
    "RegularizedState",
    "field_name",
    "stack",
    "unstack",
]
