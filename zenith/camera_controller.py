"""First-person camera movement driven by keys and mouse motion."""

from __future__ import annotations

import math
from collections.abc import Callable, Hashable, Sequence

from zenith.camera import PerspectiveCamera
from zenith.errors import zth_assert

__all__ = ["FpsCameraController"]


class FpsCameraController:
    """Moves a camera with WASD-style keys and turns it with the mouse.

    Keys are any hashable values; ``is_key_pressed`` is asked about them.
    """

    def __init__(self, camera: PerspectiveCamera | None):
        self.movement_speed = 1.5
        self.sensitivity = 0.001

        self.min_pitch = math.radians(-89.0)
        self.max_pitch = math.radians(89.0)

        self.move_forward_key: Hashable = "W"
        self.move_back_key: Hashable = "S"
        self.move_left_key: Hashable = "A"
        self.move_right_key: Hashable = "D"

        self.sprint_enabled = True
        self.sprint_speed_multiplier = 3.0
        self.sprint_key: Hashable = "LeftShift"

        self._camera = camera

    @property
    def camera(self) -> PerspectiveCamera | None:
        return self._camera

    def set_camera(self, camera: PerspectiveCamera) -> None:
        zth_assert(camera is not None, "camera != nullptr")
        self._camera = camera

    def on_update(
        self,
        is_key_pressed: Callable[[Hashable], bool],
        mouse_delta: Sequence[float],
        delta_time: float,
    ) -> None:
        """Advance the camera by one frame of input."""
        camera = self._camera
        zth_assert(camera is not None, "_camera != nullptr")

        speed = self.movement_speed
        if self.sprint_enabled and is_key_pressed(self.sprint_key):
            speed *= self.sprint_speed_multiplier

        step = speed * delta_time
        position = camera.position
        front = camera.front
        right = camera.right

        if is_key_pressed(self.move_forward_key):
            position = position + front * step
        if is_key_pressed(self.move_back_key):
            position = position - front * step
        if is_key_pressed(self.move_left_key):
            position = position - right * step
        if is_key_pressed(self.move_right_key):
            position = position + right * step

        camera.set_position(position)

        dx, dy = mouse_delta
        dx *= self.sensitivity
        dy *= self.sensitivity

        new_yaw = camera.yaw + dx
        new_pitch = min(max(camera.pitch - dy, self.min_pitch), self.max_pitch)
        camera.set_yaw_and_pitch(new_yaw, new_pitch)