import dataclasses

import pytest

from fpcam.config import CameraConfig
from fpcam.controls import Controls


def test_default_is_zero():
    c = Controls()
    assert c.is_zero()
    assert not Controls(speed=1.0).is_zero()


def test_frozen():
    c = Controls()
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.speed = 1.0  # type: ignore


def test_from_look_delta():
    c = Controls.from_look_delta(10.0, -4.0, (0.01, 0.02))
    assert c.look_right_left == pytest.approx(-0.1)
    assert c.look_up_down == pytest.approx(0.08)
    assert c.forwards_backwards == 0.0
    assert c.speed == 0.0


def test_from_movement():
    c = Controls.from_movement(1.0, -1.0, 0.5, 3.0, 0.5)
    assert c.forwards_backwards == 1.0
    assert c.right_left == -1.0
    assert c.up_down == 0.5
    assert c.speed == pytest.approx(1.5)


def test_combine():
    move = Controls.from_movement(1.0, 0.0, 0.0, 2.0, 1.0)
    look = Controls(look_right_left=0.1, look_up_down=-0.2)

    c = look + move
    assert c.forwards_backwards == 1.0
    assert c.look_right_left == pytest.approx(0.1)
    assert c.look_up_down == pytest.approx(-0.2)
    # Speed of the left operand is zero, the right one is used.
    assert c.speed == 2.0

    c = move.combine(Controls(forwards_backwards=1.0, speed=5.0))
    assert c.forwards_backwards == 2.0
    assert c.speed == 2.0


def test_add_rejects_other_types():
    with pytest.raises(TypeError):
        Controls() + 1  # type: ignore


def test_from_config():
    config = CameraConfig(movement_speed=4.0, rotation_speed=(0.01, 0.02))
    c = Controls.from_config(config, 1.0, 0.0, -1.0, 5.0, 10.0, 0.25)
    assert c.forwards_backwards == 1.0
    assert c.up_down == -1.0
    assert c.speed == pytest.approx(1.0)
    assert c.look_right_left == pytest.approx(-0.05)
    assert c.look_up_down == pytest.approx(-0.2)
