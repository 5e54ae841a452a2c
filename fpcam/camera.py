# Copyright Dario Mylonopoulos
# SPDX-License-Identifier: MIT

import logging
import math
from typing import Optional, Tuple, Union

import numpy as np
from numpy.typing import NDArray
from pyglm.glm import (
    clamp,
    cos,
    cross,
    lookAtLH,
    lookAtRH,
    mat4,
    normalize,
    perspectiveLH_NO,
    perspectiveLH_ZO,
    perspectiveRH_NO,
    perspectiveRH_ZO,
    sin,
    vec3,
)

from .config import CameraConfig, DepthRange, Handedness, PitchInitialization
from .controls import Controls
from .transform3d import RigidTransform3D

logger = logging.getLogger(__name__)

# Keeps the look direction away from world up, where look_at degenerates.
PITCH_EPSILON = 0.005
PITCH_LIMIT = math.pi / 2 - PITCH_EPSILON

WORLD_UP = vec3(0, 1, 0)

Vec3Like = Union[vec3, tuple]


def look_at(eye: vec3, target: vec3, up: vec3, handedness: Handedness = Handedness.RIGHT_HANDED) -> mat4:
    if handedness == Handedness.RIGHT_HANDED:
        return lookAtRH(eye, target, up)
    else:
        return lookAtLH(eye, target, up)


def perspective(
    fov: float,
    ar: float,
    z_near: float,
    z_far: float,
    handedness: Handedness = Handedness.RIGHT_HANDED,
    depth_range: DepthRange = DepthRange.NEGATIVE_ONE_TO_ONE,
) -> mat4:
    """Perspective projection with vertical field of view fov in radians and ar horizontal over vertical."""
    if handedness == Handedness.RIGHT_HANDED:
        if depth_range == DepthRange.NEGATIVE_ONE_TO_ONE:
            return perspectiveRH_NO(fov, ar, z_near, z_far)
        return perspectiveRH_ZO(fov, ar, z_near, z_far)
    else:
        if depth_range == DepthRange.NEGATIVE_ONE_TO_ONE:
            return perspectiveLH_NO(fov, ar, z_near, z_far)
        return perspectiveLH_ZO(fov, ar, z_near, z_far)


def angles_from_direction(direction: vec3, pitch_initialization: PitchInitialization) -> Tuple[float, float]:
    yaw = math.atan2(direction.x, direction.z)
    flat_length = math.sqrt(direction.x * direction.x + direction.z * direction.z)
    if pitch_initialization == PitchInitialization.REFERENCE:
        pitch = math.atan2(flat_length, yaw)
    else:
        pitch = math.atan2(direction.y, flat_length)
    return yaw, pitch


class FirstPersonCamera:
    """
    Camera controlled by yaw and pitch angles, moving on the horizontal plane.

    Yaw is measured from +Z towards +X around world up (+Y) and is never wrapped.
    Pitch is measured from the horizontal plane towards +Y and is kept within
    +-PITCH_LIMIT by update. The camera does not validate any input, degenerate
    values propagate as NaN or infinity through the state and the matrices.

    Not thread safe, hosts that share a camera between threads must synchronize access.
    """

    def __init__(
        self,
        position: Vec3Like,
        direction: Vec3Like = (0.0, 0.0, 1.0),
        pitch_initialization: PitchInitialization = PitchInitialization.REFERENCE,
        *,
        angles: Optional[Tuple[float, float]] = None,
    ):
        """
        Camera at position facing direction.

        If angles is given as (yaw, pitch) it is used as is and direction is ignored.
        """
        self._position = vec3(position)
        if angles is None:
            self._yaw, self._pitch = angles_from_direction(vec3(direction), pitch_initialization)
            source = pitch_initialization.name
        else:
            self._yaw, self._pitch = float(angles[0]), float(angles[1])
            source = "ANGLES"

        logger.debug(
            "First person camera at %s: yaw %.4f pitch %.4f (%s)",
            self._position,
            self._yaw,
            self._pitch,
            source,
        )

    @classmethod
    def from_yaw_pitch(cls, position: Vec3Like, yaw: float, pitch: float) -> "FirstPersonCamera":
        return cls(position, angles=(yaw, pitch))

    @classmethod
    def from_config(cls, config: CameraConfig) -> "FirstPersonCamera":
        return cls(
            position=config.position,
            direction=config.direction,
            pitch_initialization=config.pitch_initialization,
        )

    @property
    def position(self) -> vec3:
        return vec3(self._position)

    @property
    def yaw(self) -> float:
        return self._yaw

    @property
    def pitch(self) -> float:
        return self._pitch

    def update(self, controls: Controls) -> None:
        self._yaw += controls.look_right_left
        self._pitch += controls.look_up_down

        if self._pitch < -PITCH_LIMIT or self._pitch > PITCH_LIMIT:
            logger.debug("Pitch %.4f clamped to +-%.4f", self._pitch, PITCH_LIMIT)
        self._pitch = clamp(self._pitch, -PITCH_LIMIT, PITCH_LIMIT)

        plane_direction = self.plane_direction()
        right = self.right()

        self._position = self._position + plane_direction * (controls.forwards_backwards * controls.speed)
        self._position = self._position + right * (controls.right_left * controls.speed)
        self._position = self._position + WORLD_UP * (controls.up_down * controls.speed)

    def direction(self) -> vec3:
        cos_pitch = cos(self._pitch)
        return vec3(
            cos_pitch * sin(self._yaw),
            sin(self._pitch),
            cos_pitch * cos(self._yaw),
        )

    def plane_direction(self) -> vec3:
        # Unguarded, NaN if the direction is parallel to world up.
        d = self.direction()
        return normalize(vec3(d.x, 0, d.z))

    def right(self) -> vec3:
        a = self._yaw - math.pi / 2
        return normalize(vec3(sin(a), 0, cos(a)))

    def view(self, handedness: Handedness = Handedness.RIGHT_HANDED) -> mat4:
        return look_at(self._position, self._position + self.direction(), WORLD_UP, handedness)

    def camera_from_world(self, handedness: Handedness = Handedness.RIGHT_HANDED) -> RigidTransform3D:
        """Rigid transform equal to view(handedness), built from the yaw/pitch basis."""
        front = self.direction()
        right = self.right()
        up = cross(right, front)
        if handedness == Handedness.RIGHT_HANDED:
            # View space looks down -Z.
            return RigidTransform3D.from_axes(right, up, -front, self._position)
        else:
            return RigidTransform3D.from_axes(-right, up, front, self._position)

    def view_projection_matrix(
        self,
        aspect: float,
        fov: float,
        near: float,
        far: float,
        handedness: Handedness = Handedness.RIGHT_HANDED,
        depth_range: DepthRange = DepthRange.NEGATIVE_ONE_TO_ONE,
    ) -> mat4:
        """
        Projection times view, maps world space to clip space.

        The caller must ensure aspect > 0, 0 < fov < pi and 0 < near < far.
        """
        return perspective(fov, aspect, near, far, handedness, depth_range) * self.view(handedness)  # type: ignore

    def view_projection_array(
        self,
        aspect: float,
        fov: float,
        near: float,
        far: float,
        handedness: Handedness = Handedness.RIGHT_HANDED,
        depth_range: DepthRange = DepthRange.NEGATIVE_ONE_TO_ONE,
    ) -> NDArray[np.float32]:
        # Row i of the array is column i of the matrix, tobytes() gives the column-major layout shaders expect.
        m = self.view_projection_matrix(aspect, fov, near, far, handedness, depth_range)
        return np.array(m.to_list(), np.float32)

    def view_projection_matrix_from_config(self, aspect: float, config: CameraConfig) -> mat4:
        return self.view_projection_matrix(
            aspect,
            config.vertical_fov,
            config.z_near,
            config.z_far,
            config.handedness,
            config.depth_range,
        )

    def __repr__(self) -> str:
        return f"FirstPersonCamera(position={self._position}, yaw={self._yaw}, pitch={self._pitch})"
