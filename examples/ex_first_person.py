import logging
import math

from pyglm.glm import vec4

from fpcam.camera import FirstPersonCamera
from fpcam.config import CameraConfig, DepthRange, PitchInitialization
from fpcam.controls import Controls
from fpcam.trajectory import simulate

logging.basicConfig(
    level=logging.NOTSET,
    format="[%(asctime)s.%(msecs)03d] %(levelname)-6s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

config = CameraConfig(
    position=(0.0, 1.7, -5.0),
    direction=(0.0, 0.0, 1.0),
    pitch_initialization=PitchInitialization.GEOMETRIC,
    vertical_fov=math.radians(60),
    depth_range=DepthRange.ZERO_TO_ONE,
    movement_speed=3.0,
)
camera = FirstPersonCamera.from_config(config)

# Fake input: walk forward for one second at 60 fps while dragging the mouse right.
dt = 1.0 / 60.0
frames = [Controls.from_config(config, 1.0, 0.0, 0.0, 2.0, 0.0, dt) for _ in range(60)]
trajectory = simulate(camera, frames)

print(camera)
print("distance travelled:", trajectory.distance_travelled(config.position))

width, height = 1280, 720
vp = camera.view_projection_matrix_from_config(width / height, config)
target = camera.position + camera.direction() * 10.0
clip = vp * vec4(target, 1.0)
print("point 10 units ahead in NDC:", clip.x / clip.w, clip.y / clip.w, clip.z / clip.w)
print(camera.view_projection_array(width / height, config.vertical_fov, config.z_near, config.z_far))
