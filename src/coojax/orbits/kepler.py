"""Kepler equation solver and anomaly conversions for elliptic orbits.

Solves ``M = E - e sin(E)`` for the eccentric anomaly ``E`` without an
iteration loop: a quasi-analytic starter (Markley 1995) is followed by a
single fifth-order correction (Danby & Burkardt 1983).  The combination is
accurate to machine precision for ``0 <= e < 1`` and every mean anomaly, and
its cost is fixed, which keeps it branch-free under ``jax.jit`` and
``jax.vmap``.

All functions use JAX operations. Inputs are coerced to the configured
float dtype (see :func:`coojax.config.set_dtype`).

References:
    1. F. L. Markley, "Kepler Equation Solver", *Celestial Mechanics and
       Dynamical Astronomy* 63, 101-111, 1995.
    2. J. M. A. Danby and T. M. Burkardt, "The solution of Kepler's
       equation, I", *Celestial Mechanics* 31, 95-107, 1983.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from coojax.config import get_dtype
from coojax.constants import PI, PI2, PI_SQ
from coojax.utils import from_radians, to_radians

# Keeps the first derivative non-zero at (E, e) = (0, 1).
_ADDZERO = 1.0e-19

# Markley's Pade coefficients, eq. (20)
_MARKLEY_AD = 3.0 * PI_SQ / (PI_SQ - 6.0)
_MARKLEY_AK = 1.6 * PI / (PI_SQ - 6.0)


# ──────────────────────────────────────────────
# Trigonometric helpers
# ──────────────────────────────────────────────


def sincos_half_angle(x: ArrayLike) -> tuple[Array, Array]:
    """Evaluate ``sin(x)`` and ``cos(x)`` from a single tangent.

    With ``t = tan(x / 2)``::

        cos(x) = (1 - t^2) / (1 + t^2)
        sin(x) = 2 t / (1 + t^2)

    Args:
        x: Angle. Units: *rad*

    Returns:
        Tuple ``(sin(x), cos(x))``.
    """
    tx = jnp.tan(0.5 * x)
    den = 1.0 / (1.0 + tx * tx)
    return 2.0 * tx * den, (1.0 - tx * tx) * den


def _reduce(x: Array) -> Array:
    """Reduce an angle to ``[-pi, pi]``."""
    x = x - jnp.floor(x / PI2) * PI2
    x = jnp.where(x > PI, x - PI2, x)
    return jnp.where(x < -PI, x + PI2, x)


# ──────────────────────────────────────────────
# Kepler equation
# ──────────────────────────────────────────────


def _quintic_correction(ecc: Array, ma: Array, x: Array) -> Array:
    """Apply one Danby-Burkardt correction of fifth order to the estimate ``x``.

    Newton, Halley and the quartic step are chained so that each stage
    feeds its increment into the next denominator.
    """
    sinx, cosx = sincos_half_angle(x)
    esinx = ecc * sinx
    ecosx = ecc * cosx

    f0 = ma - x + esinx
    f1 = 1.0 - ecosx + _ADDZERO
    f2 = esinx / 2.0
    f3 = ecosx / 6.0
    f4 = -esinx / 24.0

    dx = f0 / f1
    dx = f0 / (f1 + f2 * dx)
    dx = f0 / (f1 + f2 * dx + f3 * dx * dx)
    dx = f0 / (f1 + f2 * dx + f3 * dx * dx + f4 * dx * dx * dx)

    return x + dx


def _markley(ecc: Array, ma: Array) -> Array:
    """Solve Kepler's equation for ``0 <= ma <= pi``."""
    a = _MARKLEY_AD + _MARKLEY_AK * (PI - ma) / (1.0 + ecc)          # eq. (20)
    d = 3.0 * (1.0 - ecc) + a * ecc                                  # eq. (5)
    q = 2.0 * a * d * (1.0 - ecc) - ma * ma                          # eq. (9)
    r = 3.0 * a * d * (d - 1.0 + ecc) * ma + ma * ma * ma            # eq. (10)
    w = jnp.cbrt(jnp.abs(r) + jnp.sqrt(q * q * q + r * r))           # eq. (14)
    w = w * w

    positive = w > 0.0
    den = jnp.where(positive, w * w + q * w + q * q, 1.0)
    x0 = jnp.where(positive, (2.0 * r * w / den + ma) / d, 0.0)     # eq. (15)

    return _quintic_correction(ecc, ma, x0)                          # eq. (24)


def kepler_solve(ecc: ArrayLike, man: ArrayLike) -> Array:
    """Solve Kepler's equation ``M = E - e sin(E)`` for the eccentric anomaly.

    The mean anomaly is reduced to ``[-pi, pi]``; negative values are solved
    through the odd symmetry of the equation, ``E(-M) = 2 pi - E(M)``.

    The eccentricity is not validated: the caller must guarantee
    ``0 <= e < 1``.  The routine never fails and always returns a number.

    Args:
        ecc: Eccentricity. Dimensionless.
        man: Mean anomaly, any real value. Units: *rad*

    Returns:
        Eccentric anomaly in ``[0, 2 pi)``. Units: *rad*

    Examples:
        ```python
        from coojax.orbits import kepler_solve
        E = kepler_solve(0.1, 1.4707963)
        ```
    """
    ecc = jnp.asarray(ecc, dtype=get_dtype())
    man = jnp.asarray(man, dtype=get_dtype())

    mr = _reduce(man)
    E = _markley(ecc, jnp.abs(mr))
    return jnp.where(mr < 0.0, PI2 - E, E)


# ──────────────────────────────────────────────
# Anomaly conversions
# ──────────────────────────────────────────────


def anomaly_eccentric_to_mean(anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert eccentric anomaly to mean anomaly.

    Args:
        anm_ecc: Eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Mean anomaly. Units: *rad* or *deg*

    Examples:
        ```python
        from coojax.orbits import anomaly_eccentric_to_mean
        M = anomaly_eccentric_to_mean(90.0, 0.1, use_degrees=True)
        ```
    """
    anm_ecc = jnp.asarray(anm_ecc, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())

    E = to_radians(anm_ecc, use_degrees)
    M = E - e * jnp.sin(E)
    return from_radians(M, use_degrees)


def anomaly_mean_to_eccentric(anm_mean: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert mean anomaly to eccentric anomaly.

    Thin wrapper around :func:`kepler_solve` following the ``use_degrees``
    convention.

    Args:
        anm_mean: Mean anomaly. Units: *rad* or *deg*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Eccentric anomaly in ``[0, 360)`` deg or ``[0, 2 pi)`` rad.

    Examples:
        ```python
        from coojax.orbits import anomaly_mean_to_eccentric
        E = anomaly_mean_to_eccentric(84.27, 0.1, use_degrees=True)
        ```
    """
    anm_mean = jnp.asarray(anm_mean, dtype=get_dtype())

    M = to_radians(anm_mean, use_degrees)
    E = kepler_solve(e, M)
    return from_radians(E, use_degrees)
