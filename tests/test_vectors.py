"""Tests for the coojax.vectors module."""

import jax
import jax.numpy as jnp
import pytest

from coojax.vectors import (
    Vector3,
    Vector4,
    vec3_add,
    vec3_angle,
    vec3_cross,
    vec3_from_array,
    vec3_inner,
    vec3_ipow3,
    vec3_madd,
    vec3_madd2,
    vec3_matvec,
    vec3_norm,
    vec3_scale,
    vec3_scale_to,
    vec3_smul,
    vec3_sub,
    vec3_to_array,
    vec3_with_norm,
    vec4_angle,
    vec4_bilinear,
    vec4_from_array,
    vec4_inner,
    vec4_madd2,
    vec4_norm,
    vec4_scale,
    vec4_scale_to,
    vec4_sub,
    vec4_to_array,
)

_TOL = 1e-14

_A = Vector3(1.0, 2.0, 3.0)
_B = Vector3(-4.0, 0.5, 2.0)


def _close(v, expected, tol=_TOL):
    return jnp.allclose(vec3_to_array(v), jnp.asarray(expected), atol=tol, rtol=0.0)


# ──────────────────────────────────────────────
# 3-D arithmetic
# ──────────────────────────────────────────────


class TestVector3Arithmetic:
    def test_inner(self):
        assert float(vec3_inner(_A, _B)) == pytest.approx(-4.0 + 1.0 + 6.0)

    def test_norm(self):
        assert float(vec3_norm(Vector3(3.0, 4.0, 12.0))) == pytest.approx(13.0)

    def test_add_sub(self):
        assert _close(vec3_add(_A, _B), [-3.0, 2.5, 5.0])
        assert _close(vec3_sub(_A, _B), [5.0, 1.5, 1.0])

    def test_smul(self):
        assert _close(vec3_smul(_A, -2.0), [-2.0, -4.0, -6.0])

    def test_madd(self):
        assert _close(vec3_madd(_A, _B, 2.0), [-7.0, 3.0, 7.0])

    def test_madd2(self):
        assert _close(vec3_madd2(2.0, _A, -1.0, _B), [6.0, 3.5, 4.0])

    def test_matvec_identity(self):
        eye = (Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), Vector3(0.0, 0.0, 1.0))
        assert _close(vec3_matvec(eye, _A), [1.0, 2.0, 3.0])

    def test_matvec_rotation(self):
        """Rotation by 90 degrees about z maps x onto y."""
        rot = (Vector3(0.0, -1.0, 0.0), Vector3(1.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0))
        assert _close(vec3_matvec(rot, Vector3(1.0, 0.0, 0.0)), [0.0, 1.0, 0.0])

    def test_cross_right_handed(self):
        ex, ey = Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0)
        assert _close(vec3_cross(ex, ey), [0.0, 0.0, 1.0])

    def test_cross_orthogonal_to_operands(self):
        c = vec3_cross(_A, _B)
        assert jnp.abs(vec3_inner(c, _A)) < 1e-12
        assert jnp.abs(vec3_inner(c, _B)) < 1e-12

    def test_array_roundtrip(self):
        v = vec3_from_array([1.5, -2.5, 3.5])
        assert _close(v, [1.5, -2.5, 3.5])
        assert v.abs == 0.0

    def test_from_array_batched(self):
        v = vec3_from_array(jnp.ones((5, 3)))
        assert v.x.shape == (5,)


# ──────────────────────────────────────────────
# Cached norm and scaling
# ──────────────────────────────────────────────


class TestVector3Norm:
    def test_with_norm_sets_abs(self):
        assert float(vec3_with_norm(Vector3(3.0, 4.0, 0.0)).abs) == pytest.approx(5.0)

    def test_plain_operations_clear_abs(self):
        v = vec3_with_norm(_A)
        assert vec3_add(v, v).abs == 0.0
        assert vec3_smul(v, 2.0).abs == 0.0

    def test_scale_unit(self):
        v = vec3_scale(_A)
        assert float(vec3_norm(v)) == pytest.approx(1.0, abs=_TOL)
        assert v.abs == 1.0

    def test_scale_to_length(self):
        v = vec3_scale_to(_A, 7.0)
        assert float(vec3_norm(v)) == pytest.approx(7.0, rel=1e-14)
        assert v.abs == 7.0
        assert vec3_angle(v, _A) < 1e-7

    def test_scale_zero_vector_unchanged(self):
        v = vec3_scale_to(Vector3(0.0, 0.0, 0.0), 3.0)
        assert _close(v, [0.0, 0.0, 0.0])
        assert v.abs == 0.0
        assert jnp.all(jnp.isfinite(vec3_to_array(v)))


class TestVector3Angle:
    def test_right_angle(self):
        a = vec3_angle(Vector3(1.0, 0.0, 0.0), Vector3(0.0, 2.0, 0.0))
        assert float(a) == pytest.approx(jnp.pi / 2)

    def test_antiparallel(self):
        assert float(vec3_angle(_A, vec3_smul(_A, -3.0))) == pytest.approx(jnp.pi)

    def test_parallel_is_zero(self):
        assert float(vec3_angle(_A, vec3_smul(_A, 2.0))) == pytest.approx(0.0, abs=1e-7)

    def test_zero_operand(self):
        assert vec3_angle(Vector3(0.0, 0.0, 0.0), _A) == 0.0
        assert vec3_angle(_A, Vector3(0.0, 0.0, 0.0)) == 0.0


class TestVector3Ipow3:
    def test_value(self):
        assert float(vec3_ipow3(Vector3(0.0, 2.0, 0.0))) == pytest.approx(0.125)

    def test_zero_vector(self):
        assert vec3_ipow3(Vector3(0.0, 0.0, 0.0)) == 0.0


class TestVector3JAX:
    def test_jit(self):
        f = jax.jit(lambda a, b: vec3_cross(a, b))
        assert _close(f(_A, _B), vec3_to_array(vec3_cross(_A, _B)))

    def test_vmap(self):
        batch = vec3_from_array(jnp.array([[1.0, 0.0, 0.0], [0.0, 0.0, 0.0], [0.0, 3.0, 4.0]]))
        norms = jax.vmap(vec3_ipow3)(batch)
        assert norms.shape == (3,)
        assert norms[1] == 0.0
        assert float(norms[2]) == pytest.approx(1.0 / 125.0)


# ──────────────────────────────────────────────
# 4-D vectors
# ──────────────────────────────────────────────

_U = Vector4(1.0, 2.0, 3.0, 4.0)
_W = Vector4(-1.0, 0.5, 0.0, 2.0)


class TestVector4:
    def test_inner_and_norm(self):
        assert float(vec4_inner(_U, _W)) == pytest.approx(-1.0 + 1.0 + 0.0 + 8.0)
        assert float(vec4_norm(_U)) == pytest.approx(30.0 ** 0.5)

    def test_bilinear(self):
        """u4 w1 - u3 w2 + u2 w3 - u1 w4."""
        assert float(vec4_bilinear(_U, _W)) == pytest.approx(-4.0 - 1.5 + 0.0 - 2.0)

    def test_bilinear_self_is_zero(self):
        assert vec4_bilinear(_U, _U) == 0.0

    def test_madd2_sub(self):
        v = vec4_madd2(2.0, _U, 1.0, _W)
        assert jnp.allclose(vec4_to_array(v), jnp.array([1.0, 4.5, 6.0, 10.0]))
        assert jnp.allclose(vec4_to_array(vec4_sub(_U, _U)), 0.0)

    def test_scale(self):
        v = vec4_scale(_U)
        assert float(vec4_norm(v)) == pytest.approx(1.0, abs=_TOL)
        assert v.abs == 1.0

    def test_scale_to_zero_vector(self):
        v = vec4_scale_to(Vector4(0.0, 0.0, 0.0, 0.0), 2.0)
        assert jnp.allclose(vec4_to_array(v), 0.0)
        assert v.abs == 0.0

    def test_angle(self):
        e1 = vec4_from_array([1.0, 0.0, 0.0, 0.0])
        e4 = vec4_from_array([0.0, 0.0, 0.0, 5.0])
        assert float(vec4_angle(e1, e4)) == pytest.approx(jnp.pi / 2)
        assert vec4_angle(e1, Vector4(0.0, 0.0, 0.0, 0.0)) == 0.0
