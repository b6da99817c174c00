"""Tests for the coojax.frames module.

Covers compensated total-mass summation, the barycenter of a population in
each Cartesian frame, re-centering identities and argument validation.
"""

import jax
import jax.numpy as jnp
import pytest

from coojax.bodies import Body, CartesianState, CoordinateType, stack
from coojax.frames import barycenter, barycenter_of, recenter, total_mass
from coojax.vectors import Vector3, vec3_to_array

_TOL = 1e-15


def _state(x, y, z, vx, vy, vz):
    return CartesianState(Vector3(x, y, z), Vector3(vx, vy, vz))


def _array(state):
    return jnp.concatenate([vec3_to_array(state.pos), vec3_to_array(state.vel)])


def _bodies(frame=CoordinateType.HELIOCENTRIC):
    rows = [
        (1.0, _state(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)),
        (1e-3, _state(5.0, 0.0, 0.1, 0.0, 0.007, 0.0)),
        (3e-4, _state(-2.0, 9.0, 0.0, -0.005, -0.001, 0.0002)),
        (5e-5, _state(0.0, -19.0, 0.4, 0.004, 0.0, 0.0)),
    ]
    bodies = []
    for mass, state in rows:
        body = Body(mass=mass)
        body.set(frame, state)
        bodies.append(body)
    return bodies


# ──────────────────────────────────────────────
# Total mass
# ──────────────────────────────────────────────


class TestTotalMass:
    def test_simple_sum(self):
        assert float(total_mass([1.0, 2.0, 3.5])) == 6.5

    def test_compensated_many_small_masses(self):
        """A large mass plus many tiny ones keeps the tiny contributions."""
        masses = jnp.concatenate([jnp.array([1.0]), jnp.full(10000, 1e-17)])
        total = float(total_mass(masses))
        assert total == pytest.approx(1.0 + 1e-13, rel=0.0, abs=5e-16)

    def test_empty(self):
        assert float(total_mass(jnp.zeros((0,)))) == 0.0

    def test_jit(self):
        assert float(jax.jit(total_mass)(jnp.array([0.25, 0.5]))) == 0.75


# ──────────────────────────────────────────────
# Barycenter
# ──────────────────────────────────────────────


class TestBarycenter:
    def test_two_equal_masses(self):
        bodies = _bodies()[:1]
        other = Body(mass=1.0)
        other.set(CoordinateType.HELIOCENTRIC, _state(2.0, 0.0, 0.0, 0.0, 0.02, 0.0))
        bc, valid = barycenter(bodies + [other])
        assert bool(valid)
        assert jnp.allclose(_array(bc), jnp.array([1.0, 0.0, 0.0, 0.0, 0.01, 0.0]), atol=_TOL)

    def test_matches_weighted_mean(self):
        bodies = _bodies()
        masses = jnp.array([b.mass for b in bodies])
        states = jnp.stack([_array(b.heliocentric) for b in bodies])
        expected = (masses[:, None] * states).sum(axis=0) / masses.sum()

        bc, valid = barycenter(bodies)
        assert bool(valid)
        assert jnp.allclose(_array(bc), expected, rtol=1e-14, atol=1e-18)

    def test_barycentric_frame_selector(self):
        bodies = _bodies(CoordinateType.BARYCENTRIC)
        bc_b, _ = barycenter(bodies, CoordinateType.BARYCENTRIC)
        bc_h, _ = barycenter(bodies, CoordinateType.HELIOCENTRIC)
        assert float(jnp.max(jnp.abs(_array(bc_b)))) > 0.0
        assert jnp.allclose(_array(bc_h), 0.0)

    @pytest.mark.parametrize("frame", [CoordinateType.JACOBI, CoordinateType.POINCARE])
    def test_other_cartesian_frames(self, frame):
        bc, valid = barycenter(_bodies(frame), frame)
        assert bool(valid)

    def test_subrange(self):
        bodies = _bodies()
        bc, valid = barycenter(bodies, start=1, stop=2)
        assert bool(valid)
        assert jnp.allclose(_array(bc), _array(bodies[1].heliocentric), atol=_TOL)

    def test_empty_range_invalid(self):
        bc, valid = barycenter(_bodies(), start=2, stop=2)
        assert not bool(valid)
        assert jnp.allclose(_array(bc), 0.0)

    def test_zero_total_mass_invalid(self):
        bodies = _bodies()
        for b in bodies:
            b.mass = 0.0
        bc, valid = barycenter(bodies)
        assert not bool(valid)
        assert bool(jnp.all(jnp.isfinite(_array(bc))))

    @pytest.mark.parametrize(
        "frame",
        [CoordinateType.REGULARIZED, CoordinateType.KEPLERIAN, CoordinateType.NONE],
    )
    def test_non_cartesian_frame_raises(self, frame):
        with pytest.raises(ValueError, match="No barycenter"):
            barycenter(_bodies(), frame)

    def test_barycenter_of_batch_jit(self):
        bodies = _bodies()
        masses = stack([b.mass for b in bodies])
        states = stack([b.heliocentric for b in bodies])
        bc_jit, valid = jax.jit(barycenter_of)(masses, states)
        bc, _ = barycenter_of(masses, states)
        assert bool(valid)
        assert jnp.allclose(_array(bc_jit), _array(bc), rtol=1e-15, atol=1e-18)


# ──────────────────────────────────────────────
# Recenter
# ──────────────────────────────────────────────


class TestRecenter:
    _X = _state(1.0, -2.0, 3.0, 0.01, 0.02, -0.03)

    def test_zero_center_is_identity(self):
        out = recenter(self._X, CartesianState.zero())
        assert jnp.array_equal(_array(out), _array(self._X))

    def test_self_is_zero(self):
        out = recenter(self._X, self._X)
        assert jnp.array_equal(_array(out), jnp.zeros(6))

    def test_translation(self):
        out = recenter(self._X, _state(1.0, 1.0, 1.0, 0.01, 0.01, 0.01))
        assert jnp.allclose(_array(out), jnp.array([0.0, -3.0, 2.0, 0.0, 0.01, -0.04]), atol=_TOL)

    def test_barycentric_states_have_zero_barycenter(self):
        bodies = _bodies()
        bc, _ = barycenter(bodies)
        for b in bodies:
            b.set(CoordinateType.BARYCENTRIC, recenter(b.heliocentric, bc))
        bc_bary, valid = barycenter(bodies, CoordinateType.BARYCENTRIC)
        assert bool(valid)
        assert jnp.allclose(_array(bc_bary), 0.0, atol=1e-15)
