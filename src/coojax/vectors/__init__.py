"""Fixed-size vector kernels.

- **3-D** (:mod:`~coojax.vectors.vec3`): Cartesian positions and velocities.
- **4-D** (:mod:`~coojax.vectors.vec4`): Kustaanheimo-Stiefel parameter space.
"""

from .vec3 import (
    Vector3,
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
)
from .vec4 import (
    Vector4,
    vec4_add,
    vec4_angle,
    vec4_bilinear,
    vec4_from_array,
    vec4_inner,
    vec4_madd,
    vec4_madd2,
    vec4_norm,
    vec4_scale,
    vec4_scale_to,
    vec4_smul,
    vec4_sub,
    vec4_to_array,
    vec4_with_norm,
)

__all__ = [
    "Vector3",
    "vec3_add",
    "vec3_angle",
    "vec3_cross",
    "vec3_from_array",
    "vec3_inner",
    "vec3_ipow3",
    "vec3_madd",
    "vec3_madd2",
    "vec3_matvec",
    "vec3_norm",
    "vec3_scale",
    "vec3_scale_to",
    "vec3_smul",
    "vec3_sub",
    "vec3_to_array",
    "vec3_with_norm",
    "Vector4",
    "vec4_add",
    "vec4_angle",
    "vec4_bilinear",
    "vec4_from_array",
    "vec4_inner",
    "vec4_madd",
    "vec4_madd2",
    "vec4_norm",
    "vec4_scale",
    "vec4_scale_to",
    "vec4_smul",
    "vec4_sub",
    "vec4_to_array",
    "vec4_with_norm",
]
