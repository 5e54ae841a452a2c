# Copyright Dario Mylonopoulos
# SPDX-License-Identifier: MIT

from dataclasses import dataclass, fields
from typing import Tuple

from .config import CameraConfig


@dataclass(frozen=True)
class Controls:
    """
    Input of a single frame.

    Movement deltas are expressed along camera relative axes and scaled by speed,
    look deltas are angles in radians added to yaw and pitch.
    """

    forwards_backwards: float = 0.0
    right_left: float = 0.0
    up_down: float = 0.0
    look_up_down: float = 0.0
    look_right_left: float = 0.0
    speed: float = 0.0

    @classmethod
    def from_look_delta(cls, dx: float, dy: float, rotation_speed: Tuple[float, float]) -> "Controls":
        # Screen y grows downwards and positive yaw turns towards +X, which is
        # to the left of a camera looking down +Z.
        return cls(
            look_right_left=-dx * rotation_speed[0],
            look_up_down=-dy * rotation_speed[1],
        )

    @classmethod
    def from_movement(
        cls,
        forwards_backwards: float,
        right_left: float,
        up_down: float,
        speed: float,
        dt: float,
    ) -> "Controls":
        return cls(
            forwards_backwards=forwards_backwards,
            right_left=right_left,
            up_down=up_down,
            speed=speed * dt,
        )

    @classmethod
    def from_config(
        cls,
        config: CameraConfig,
        forwards_backwards: float,
        right_left: float,
        up_down: float,
        dx: float,
        dy: float,
        dt: float,
    ) -> "Controls":
        """Movement at config.movement_speed for dt seconds plus a look delta in pixels at config.rotation_speed."""
        movement = cls.from_movement(forwards_backwards, right_left, up_down, config.movement_speed, dt)
        return movement + cls.from_look_delta(dx, dy, config.rotation_speed)

    def combine(self, other: "Controls") -> "Controls":
        """Sum movement and look deltas. Keeps the speed of self unless it is zero."""
        return Controls(
            forwards_backwards=self.forwards_backwards + other.forwards_backwards,
            right_left=self.right_left + other.right_left,
            up_down=self.up_down + other.up_down,
            look_up_down=self.look_up_down + other.look_up_down,
            look_right_left=self.look_right_left + other.look_right_left,
            speed=self.speed if self.speed != 0.0 else other.speed,
        )

    def __add__(self, other: "Controls") -> "Controls":
        if not isinstance(other, Controls):
            return NotImplemented
        return self.combine(other)

    def is_zero(self) -> bool:
        return all(getattr(self, f.name) == 0.0 for f in fields(self))
