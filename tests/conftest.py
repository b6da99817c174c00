import jax.numpy as jnp
import pytest

from coojax.bodies import Body, CartesianState, CoordinateType, KeplerianElements, Population
from coojax.config import set_dtype
from coojax.vectors import Vector3


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    test_config.py switches the global dtype; this fixture restores the
    default for every other test.
    """
    set_dtype(jnp.float64)


@pytest.fixture
def planets() -> Population:
    """Sun plus three planets on moderately eccentric, inclined orbits.

    Keplerian elements are set (radians); every other field is zero.
    """
    elements = [
        KeplerianElements(1.0, 0.0167, 0.02, 1.7967, 0.1, 0.5),
        KeplerianElements(5.2026, 0.0484, 0.0228, 4.7799, 1.7536, 2.1),
        KeplerianElements(9.5549, 0.0555, 0.0434, 5.9236, 1.9838, 4.3),
    ]
    masses = [3.0034896149157645e-06, 9.547919384243266e-04, 2.858859806661308e-04]

    sun = Body(mass=1.0)
    bodies = [sun]
    for oe, m in zip(elements, masses):
        body = Body(mass=m)
        body.set(CoordinateType.KEPLERIAN, oe)
        bodies.append(body)
    return Population(bodies, center=0)


@pytest.fixture
def circular_pair() -> Population:
    """Unit-mass central body and a massless body on a circular orbit at 1 AU."""
    sun = Body(mass=1.0)
    body = Body(mass=0.0)
    v = float(jnp.sqrt(2.9591220828559115e-04))
    body.set(
        CoordinateType.HELIOCENTRIC,
        CartesianState(Vector3(1.0, 0.0, 0.0), Vector3(0.0, v, 0.0)),
    )
    return Population([sun, body], center=0)
