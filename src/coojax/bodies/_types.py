"""Type definitions for body states and populations.

Provides the data model shared by every conversion:

- :class:`CartesianState`: position and velocity in one Cartesian frame
  (barycentric, heliocentric, Jacobi or Poincaré, which are structurally
  identical).
- :class:`RegularizedState`: Kustaanheimo-Stiefel parametric position and
  velocity in 4-D.
- :class:`KeplerianElements` and :class:`DelaunayElements`: the two
  orbital-element sets.
- :class:`CoordinateType`: flag naming each representation.
- :class:`Body`: a mass plus one instance of every representation.
- :class:`Population`: an ordered list of bodies with a central index.

States and element sets are :class:`~typing.NamedTuple` instances, which JAX
treats as pytrees, so they can be stacked and passed through ``jax.vmap``.
``Body`` and ``Population`` are mutable dataclasses owned by the caller;
converters write into them in place.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import NamedTuple

import jax.numpy as jnp
from jax.typing import ArrayLike

from coojax.config import get_dtype
from coojax.vectors import Vector3, Vector4


def _zero():
    return jnp.zeros((), dtype=get_dtype())


class CoordinateType(enum.IntFlag):
    """Coordinate and element representations of a body.

    Values are bit flags so that sets of representations (for instance the
    fields written on a :class:`Body`) combine with ``|``.
    """

    NONE = 0
    BARYCENTRIC = 1
    HELIOCENTRIC = 2
    JACOBI = 4
    POINCARE = 8
    REGULARIZED = 16
    DELAUNAY = 32
    KEPLERIAN = 64


CARTESIAN_FRAMES = (
    CoordinateType.BARYCENTRIC,
    CoordinateType.HELIOCENTRIC,
    CoordinateType.JACOBI,
    CoordinateType.POINCARE,
)


class CartesianState(NamedTuple):
    """Position and velocity of one body in a Cartesian frame.

    Attributes:
        pos: Position. Units: *AU*
        vel: Velocity. Units: *AU/day*
    """

    pos: Vector3 = Vector3()
    vel: Vector3 = Vector3()

    @classmethod
    def zero(cls) -> CartesianState:
        """State of a body relative to itself."""
        return cls(Vector3.zero(), Vector3.zero())


class RegularizedState(NamedTuple):
    """Kustaanheimo-Stiefel regularized position and velocity.

    Attributes:
        pos: Parametric position ``u``.
        vel: Parametric velocity ``u'``.
    """

    pos: Vector4 = Vector4()
    vel: Vector4 = Vector4()

    @classmethod
    def zero(cls) -> RegularizedState:
        return cls(Vector4.zero(), Vector4.zero())


class KeplerianElements(NamedTuple):
    """Heliocentric osculating Keplerian elements (elliptic motion only).

    Attributes:
        sma: Semi-major axis, ``> 0``. Units: *AU*
        ecc: Eccentricity, ``0 <= ecc < 1``. Dimensionless.
        inc: Inclination. Units: *rad*
        aph: Argument of perihelion. Units: *rad*
        lan: Longitude of the ascending node. Units: *rad*
        man: Mean anomaly. Units: *rad*
    """

    sma: ArrayLike = 0.0
    ecc: ArrayLike = 0.0
    inc: ArrayLike = 0.0
    aph: ArrayLike = 0.0
    lan: ArrayLike = 0.0
    man: ArrayLike = 0.0

    @classmethod
    def zero(cls) -> KeplerianElements:
        z = _zero()
        return cls(z, z, z, z, z, z)


class DelaunayElements(NamedTuple):
    """Delaunay canonical action-angle elements.

    Attributes:
        L: ``sqrt(G (M + m) a)``.
        G: ``L sqrt(1 - e^2)``.
        H: ``G cos(i)``.
        l: Mean anomaly. Units: *rad*
        g: Argument of perihelion. Units: *rad*
        h: Longitude of the ascending node. Units: *rad*
    """

    L: ArrayLike = 0.0
    G: ArrayLike = 0.0
    H: ArrayLike = 0.0
    l: ArrayLike = 0.0  # noqa: E741
    g: ArrayLike = 0.0
    h: ArrayLike = 0.0

    @classmethod
    def zero(cls) -> DelaunayElements:
        z = _zero()
        return cls(z, z, z, z, z, z)


_FIELDS = {
    CoordinateType.BARYCENTRIC: "barycentric",
    CoordinateType.HELIOCENTRIC: "heliocentric",
    CoordinateType.JACOBI: "jacobi",
    CoordinateType.POINCARE: "poincare",
    CoordinateType.REGULARIZED: "regularized",
    CoordinateType.DELAUNAY: "delaunay",
    CoordinateType.KEPLERIAN: "keplerian",
}


def field_name(kind: CoordinateType) -> str:
    """Return the :class:`Body` attribute holding a representation.

    Args:
        kind: A single representation (not a combination of flags).

    Raises:
        ValueError: If *kind* is ``NONE`` or a combination of flags.
    """
    try:
        return _FIELDS[CoordinateType(kind)]
    except (KeyError, ValueError):
        raise ValueError(f"Not a single coordinate type: {kind!r}") from None


@dataclass
class Body:
    """A body with every coordinate representation stored side by side.

    Only the representation most recently produced by a conversion is
    guaranteed consistent with the source it was produced from; writing one
    field never invalidates the others.  ``written`` records which fields a
    converter or reader has written, as a bitmask the caller may inspect or
    reset.

    Args:
        mass: Mass. Units: *solar masses*
    """

    mass: float = 0.0
    barycentric: CartesianState = field(default_factory=CartesianState.zero)
    heliocentric: CartesianState = field(default_factory=CartesianState.zero)
    jacobi: CartesianState = field(default_factory=CartesianState.zero)
    poincare: CartesianState = field(default_factory=CartesianState.zero)
    regularized: RegularizedState = field(default_factory=RegularizedState.zero)
    delaunay: DelaunayElements = field(default_factory=DelaunayElements.zero)
    keplerian: KeplerianElements = field(default_factory=KeplerianElements.zero)
    written: CoordinateType = CoordinateType.NONE

    def get(self, kind: CoordinateType):
        """Return the representation named by *kind*."""
        return getattr(self, field_name(kind))

    def set(self, kind: CoordinateType, value) -> None:
        """Store a representation and mark it as written."""
        setattr(self, field_name(kind), value)
        self.written |= kind


@dataclass
class Population:
    """Ordered bodies plus the index of the central body.

    The central body anchors the heliocentric frame and contributes its mass
    to every mass parameter ``mu = k^2 (m_center + m_i)``.

    Args:
        bodies: Body records, in a fixed order.
        center: Index of the central body.
    """

    bodies: list[Body] = field(default_factory=list)
    center: int = 0

    def __len__(self) -> int:
        return len(self.bodies)

    def __getitem__(self, index: int) -> Body:
        return self.bodies[index]

    def __iter__(self):
        return iter(self.bodies)

    @property
    def masses(self) -> list[float]:
        return [b.mass for b in self.bodies]

    def validate(self) -> None:
        """Check that the population is non-empty and the center is in bounds.

        Raises:
            ValueError: If there are no bodies or the center index is out of
                range.
        """
        n = len(self.bodies)
        if n == 0:
            raise ValueError("Population has no bodies")
        if not 0 <= self.center < n:
            raise ValueError(
                f"Central body index {self.center} outside population of size {n}"
            )
