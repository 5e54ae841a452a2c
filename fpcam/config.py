# Copyright Dario Mylonopoulos
# SPDX-License-Identifier: MIT

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Handedness(Enum):
    RIGHT_HANDED = 0
    LEFT_HANDED = 1


class DepthRange(Enum):
    # OpenGL style clip space depth in [-w, w]
    NEGATIVE_ONE_TO_ONE = 0
    # Vulkan / D3D style clip space depth in [0, w]
    ZERO_TO_ONE = 1


class PitchInitialization(Enum):
    # pitch = atan2(flat_length, yaw), kept for parity with existing callers.
    # This depends on the yaw angle instead of direction.y and is most likely a bug.
    REFERENCE = 0
    # pitch = atan2(direction.y, flat_length)
    GEOMETRIC = 1


@dataclass
class CameraConfig:
    # Inital state
    position: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    direction: Tuple[float, float, float] = (0.0, 0.0, 1.0)
    pitch_initialization: PitchInitialization = PitchInitialization.REFERENCE

    # Projection
    vertical_fov: float = math.pi / 4
    """Vertical field of view in radians"""
    z_near: float = 0.1
    z_far: float = 1000.0
    handedness: Handedness = Handedness.RIGHT_HANDED
    depth_range: DepthRange = DepthRange.NEGATIVE_ONE_TO_ONE

    # Controls
    rotation_speed: Tuple[float, float] = (0.005, 0.005)
    movement_speed: float = 1.0
