# Copyright Dario Mylonopoulos
# SPDX-License-Identifier: MIT

import logging
from dataclasses import dataclass
from typing import Iterable

import numpy as np
from numpy.typing import NDArray

from .camera import FirstPersonCamera
from .controls import Controls

logger = logging.getLogger(__name__)


@dataclass
class Trajectory:
    positions: NDArray[np.float32]
    """(N, 3) camera positions after each update"""
    yaws: NDArray[np.float64]
    pitches: NDArray[np.float64]

    def __len__(self) -> int:
        return self.positions.shape[0]

    def directions(self) -> NDArray[np.float64]:
        cos_pitch = np.cos(self.pitches)
        return np.stack(
            [
                cos_pitch * np.sin(self.yaws),
                np.sin(self.pitches),
                cos_pitch * np.cos(self.yaws),
            ],
            axis=-1,
        )

    def distance_travelled(self, start: NDArray[np.float32]) -> float:
        points = np.concatenate([np.asarray(start, np.float32).reshape(1, 3), self.positions])
        return float(np.linalg.norm(np.diff(points, axis=0), axis=1).sum())


def simulate(camera: FirstPersonCamera, controls: Iterable[Controls]) -> Trajectory:
    """Update the camera with each element of controls in order, recording the state after every step."""
    positions = []
    yaws = []
    pitches = []
    for c in controls:
        camera.update(c)
        p = camera.position
        positions.append((p.x, p.y, p.z))
        yaws.append(camera.yaw)
        pitches.append(camera.pitch)

    logger.debug("Simulated %d camera updates", len(positions))

    return Trajectory(
        positions=np.array(positions, np.float32).reshape(-1, 3),
        yaws=np.array(yaws, np.float64),
        pitches=np.array(pitches, np.float64),
    )
