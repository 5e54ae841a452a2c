# Copyright Dario Mylonopoulos
# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from typing import Tuple

from pyglm.glm import (
    inverse,
    mat3,
    mat3_cast,
    mat4,
    mat4_cast,
    quat,
    quat_cast,
    row,
    transpose,
    vec3,
    vec4,
)


@dataclass
class RigidTransform3D:
    """Rotation followed by translation, applied as rotation * p + translation."""

    translation: vec3
    rotation: quat

    @classmethod
    def from_axes(cls, x_axis: vec3, y_axis: vec3, z_axis: vec3, origin: vec3) -> "RigidTransform3D":
        """
        Transform from world space to the frame at origin with the given orthonormal axes.

        The axes become the rows of the rotation, so they map to +X, +Y and +Z.
        """
        rotation = quat_cast(transpose(mat3(x_axis, y_axis, z_axis)))
        return cls(
            translation=rotation * -origin,  # type: ignore
            rotation=rotation,
        )

    def as_mat4(self) -> mat4:
        m = mat4_cast(self.rotation)
        m[3] = vec4(self.translation, 1.0)
        return m

    def inverse(self) -> "RigidTransform3D":
        r = inverse(self.rotation)
        return RigidTransform3D(translation=r * -self.translation, rotation=r)  # type: ignore

    def transform_point(self, p: vec3) -> vec3:
        return self.rotation * p + self.translation  # type: ignore

    def right_up_front(self) -> Tuple[vec3, vec3, vec3]:
        """World space directions of the x, y and z axes of the transformed space."""
        r = mat3_cast(self.rotation)
        return vec3(row(r, 0)), vec3(row(r, 1)), vec3(row(r, 2))
