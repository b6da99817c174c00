"""Keplerian orbital element ↔ heliocentric Cartesian state conversions.

Converts between osculating Keplerian elements
``(sma, ecc, inc, aph, lan, man)`` and the heliocentric position and
velocity of a single body, for a given mass parameter
``mu = k^2 (m_center + m_body)``.

| Field | Element                           | Units         |
|-------|-----------------------------------|---------------|
| sma   | *a* — semi-major axis             | AU            |
| ecc   | *e* — eccentricity                | dimensionless |
| inc   | *i* — inclination                 | rad           |
| aph   | *ω* — argument of perihelion      | rad           |
| lan   | *Ω* — longitude of ascending node | rad           |
| man   | *M* — mean anomaly                | rad           |

Only elliptic motion is supported.  Both kernels return a ``valid`` flag
instead of raising so that they stay traceable under ``jax.jit`` and
``jax.vmap``; invalid inputs produce whatever the formulas yield (NaN,
negative axis) and are never replaced by a default.

References:
    1. O. Montenbruck and E. Gill, *Satellite Orbits: Models, Methods
       and Applications*, Springer, 2012, Sec. 2.2.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from coojax.bodies import CartesianState, KeplerianElements
from coojax.config import get_dtype
from coojax.orbits import kepler_solve, sincos_half_angle
from coojax.utils import wrap_to_2pi
from coojax.vectors import (
    Vector3,
    vec3_cross,
    vec3_inner,
    vec3_matvec,
    vec3_norm,
    vec3_smul,
    vec3_with_norm,
)


def _as_dtype(x: ArrayLike) -> Array:
    return jnp.asarray(x, dtype=get_dtype())


def elements_valid(elements: KeplerianElements) -> Array:
    """Return whether an element set describes an ellipse (``a > 0``, ``0 <= e < 1``)."""
    sma = _as_dtype(elements.sma)
    ecc = _as_dtype(elements.ecc)
    return (sma > 0.0) & (ecc >= 0.0) & (ecc < 1.0)


def state_keplerian_to_heliocentric(
    elements: KeplerianElements,
    mu: ArrayLike,
) -> tuple[CartesianState, Array]:
    """Convert Keplerian elements to a heliocentric Cartesian state.

    Solves Kepler's equation for the eccentric anomaly, builds the position
    and velocity in the orbital plane and rotates both into the reference
    frame.  The sines and cosines of the three orientation angles come from
    :func:`~coojax.orbits.sincos_half_angle`.

    Args:
        elements: Keplerian elements, angles in *rad*.
        mu: Mass parameter ``k^2 (m_center + m_body)``.
            Units: *AU^3/day^2*

    Returns:
        Tuple ``(state, valid)``: position in *AU* and velocity in
        *AU/day*, and ``False`` when ``a <= 0`` or ``e`` is outside
        ``[0, 1)``.

    Examples:
        ```python
        from coojax.bodies import KeplerianElements
        from coojax.constants import GAUSS_K2
        from coojax.coordinates import state_keplerian_to_heliocentric
        oe = KeplerianElements(1.0, 0.0167, 0.0, 1.8, 0.0, 0.5)
        state, valid = state_keplerian_to_heliocentric(oe, GAUSS_K2)
        ```

    References:
        O. Montenbruck and E. Gill, *Satellite Orbits*, 2012, Eq. 2.43–2.44.
    """
    sma = _as_dtype(elements.sma)
    ecc = _as_dtype(elements.ecc)
    mu = _as_dtype(mu)
    valid = elements_valid(elements)

    sininc, cosinc = sincos_half_angle(_as_dtype(elements.inc))
    sinaph, cosaph = sincos_half_angle(_as_dtype(elements.aph))
    sinlan, coslan = sincos_half_angle(_as_dtype(elements.lan))

    # Rows of the orbital-plane -> reference-frame rotation (third column unused)
    zero = jnp.zeros_like(sma)
    rot = (
        Vector3(coslan * cosaph - sinlan * sinaph * cosinc,
                -coslan * sinaph - sinlan * cosaph * cosinc, zero, zero),
        Vector3(sinlan * cosaph + coslan * sinaph * cosinc,
                -sinlan * sinaph + coslan * cosaph * cosinc, zero, zero),
        Vector3(sinaph * sininc, cosaph * sininc, zero, zero),
    )

    E = kepler_solve(ecc, _as_dtype(elements.man))
    sinE, cosE = sincos_half_angle(E)
    sqrt_1me2 = jnp.sqrt(1.0 - ecc * ecc)

    q_pos = Vector3(sma * (cosE - ecc), sma * sqrt_1me2 * sinE, zero, zero)

    vfac = jnp.sqrt(mu) / ((1.0 - ecc * cosE) * jnp.sqrt(sma))
    q_vel = Vector3(-vfac * sinE, vfac * sqrt_1me2 * cosE, zero, zero)

    state = CartesianState(vec3_matvec(rot, q_pos), vec3_matvec(rot, q_vel))
    return state, valid


def state_heliocentric_to_keplerian(
    state: CartesianState,
    mu: ArrayLike,
) -> tuple[KeplerianElements, Array]:
    """Convert a heliocentric Cartesian state to Keplerian elements.

    The velocity is normalized by ``sqrt(mu)``, which turns the vis-viva
    relation into ``1/a = 2/|r| - |v|^2`` and the eccentric anomaly
    components into ``e cos E = 1 - |r|/a`` and
    ``e sin E = <r|v> sqrt(1/a)``.

    The four angles are mapped to ``[0, 2 pi)``.  For an exactly circular
    orbit the perihelion is undefined: the true and eccentric anomalies
    both evaluate to ``atan2(0, 0) = 0``, so ``aph`` carries the argument of
    latitude.  For a nearly circular orbit ``aph`` and ``man`` are
    individually ill-conditioned but their sum is not.  An exactly
    equatorial orbit has no ascending node; ``lan`` is then 0 and the
    argument of latitude is measured from the x axis.

    Args:
        state: Heliocentric position in *AU* and velocity in *AU/day*.
        mu: Mass parameter ``k^2 (m_center + m_body)``.
            Units: *AU^3/day^2*

    Returns:
        Tuple ``(elements, valid)``; ``valid`` is ``False`` when
        ``1/a <= 0`` (parabolic or hyperbolic motion) or the eccentricity
        is outside ``[0, 1)``.

    Examples:
        ```python
        from coojax.bodies import CartesianState
        from coojax.constants import GAUSS_K, GAUSS_K2
        from coojax.coordinates import state_heliocentric_to_keplerian
        from coojax.vectors import Vector3
        state = CartesianState(Vector3(1.0, 0.0, 0.0), Vector3(0.0, GAUSS_K, 0.0))
        oe, valid = state_heliocentric_to_keplerian(state, GAUSS_K2)
        ```

    References:
        O. Montenbruck and E. Gill, *Satellite Orbits*, 2012, Eq. 2.56–2.68.
    """
    mu = _as_dtype(mu)
    pos = Vector3(*(_as_dtype(c) for c in state.pos))
    vel = Vector3(*(_as_dtype(c) for c in state.vel))

    pabs = vec3_norm(pos)

    nvel = vec3_with_norm(vec3_smul(vel, 1.0 / jnp.sqrt(mu)))

    # Specific angular momentum
    angm = vec3_with_norm(vec3_cross(pos, nvel))

    node = jnp.hypot(angm.x, angm.y)
    inc = jnp.arctan2(node, angm.z)

    # Equatorial orbits have no node line: lan = 0 and u is measured from +x
    equatorial = node == 0.0
    lan = jnp.where(equatorial, 0.0, jnp.arctan2(angm.x, -angm.y))

    # Argument of latitude u = true anomaly + argument of perihelion
    u = jnp.where(
        equatorial,
        jnp.arctan2(jnp.where(angm.z < 0.0, -pos.y, pos.y), pos.x),
        jnp.arctan2(pos.z * angm.abs, pos.y * angm.x - pos.x * angm.y),
    )

    # Vis-viva
    inva = 2.0 / pabs - nvel.abs * nvel.abs
    sma = 1.0 / inva

    ecosE = 1.0 - pabs * inva
    esinE = vec3_inner(pos, nvel) * jnp.sqrt(inva)
    E = jnp.arctan2(esinE, ecosE)

    ecc = jnp.hypot(esinE, ecosE)
    man = E - esinE

    e2 = ecc * ecc
    ta = jnp.arctan2(jnp.sqrt(1.0 - e2) * esinE, ecosE - e2)
    aph = u - ta

    valid = (inva > 0.0) & (ecc >= 0.0) & (ecc < 1.0)

    elements = KeplerianElements(
        sma=sma,
        ecc=ecc,
        inc=wrap_to_2pi(inc),
        aph=wrap_to_2pi(aph),
        lan=wrap_to_2pi(lan),
        man=wrap_to_2pi(man),
    )
    return elements, valid
