"""Column layout of body tables.

Maps each representation to the ordered tuple of numbers that appears on a
table line, and back.  Cartesian frames and element sets use six columns;
the regularized frame uses eight.
"""

from __future__ import annotations

import jax.numpy as jnp

from coojax.bodies import (
    CARTESIAN_FRAMES,
    CartesianState,
    CoordinateType,
    DelaunayElements,
    KeplerianElements,
    RegularizedState,
    field_name,
)
from coojax.config import get_dtype
from coojax.utils import from_radians, to_radians
from coojax.vectors import Vector3, Vector4

# Column positions holding angles, per element set
_ANGLE_COLUMNS: dict[CoordinateType, tuple[int, ...]] = {
    CoordinateType.KEPLERIAN: (2, 3, 4, 5),
    CoordinateType.DELAUNAY: (3, 4, 5),
}


def record_width(kind: CoordinateType) -> int:
    """Number of value columns for *kind* (mass excluded).

    Raises:
        ValueError: If *kind* is not a single representation.
    """
    field_name(kind)
    return 8 if kind == CoordinateType.REGULARIZED else 6


def values_to_record(kind: CoordinateType, values, use_degrees: bool = False):
    """Build the representation named by *kind* from its column values."""
    dtype = get_dtype()
    angles = _ANGLE_COLUMNS.get(kind, ())
    vals = [
        to_radians(jnp.asarray(v, dtype=dtype), use_degrees) if i in angles
        else jnp.asarray(v, dtype=dtype)
        for i, v in enumerate(values)
    ]

    if kind in CARTESIAN_FRAMES:
        return CartesianState(Vector3(*vals[0:3]), Vector3(*vals[3:6]))
    if kind == CoordinateType.REGULARIZED:
        return RegularizedState(Vector4(*vals[0:4]), Vector4(*vals[4:8]))
    if kind == CoordinateType.KEPLERIAN:
        return KeplerianElements(*vals)
    if kind == CoordinateType.DELAUNAY:
        return DelaunayElements(*vals)
    raise ValueError(f"Not a single coordinate type: {kind!r}")


def record_to_values(kind: CoordinateType, record, use_degrees: bool = False) -> list[float]:
    """Flatten a representation into its column values as Python floats."""
    if kind in CARTESIAN_FRAMES or kind == CoordinateType.REGULARIZED:
        vec = Vector3 if kind in CARTESIAN_FRAMES else Vector4
        n = len(vec._fields) - 1  # drop the cached norm
        values = list(record.pos[:n]) + list(record.vel[:n])
    elif kind in _ANGLE_COLUMNS:
        values = list(record)
    else:
        raise ValueError(f"Not a single coordinate type: {kind!r}")

    angles = _ANGLE_COLUMNS.get(kind, ())
    return [
        float(from_radians(v, use_degrees)) if i in angles else float(v)
        for i, v in enumerate(values)
    ]
