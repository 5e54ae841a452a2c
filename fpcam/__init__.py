# Copyright Dario Mylonopoulos
# SPDX-License-Identifier: MIT

from .camera import PITCH_LIMIT, WORLD_UP, FirstPersonCamera, look_at, perspective
from .config import CameraConfig, DepthRange, Handedness, PitchInitialization
from .controls import Controls
from .trajectory import Trajectory, simulate
from .transform3d import RigidTransform3D
