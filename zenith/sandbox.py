"""A spinning textured cube under a point light."""

from __future__ import annotations

import math

from zenith.application import Application, KeyPressedEvent, WindowResizedEvent
from zenith.camera import PerspectiveCamera
from zenith.camera_controller import FpsCameraController
from zenith.light import PointLight
from zenith.materials import Material
from zenith.scene import Scene
from zenith.timer import Timer
from zenith.transform import Transformable3D

__all__ = ["APP_SPEC", "SandboxScene", "Sandbox"]

APP_SPEC = {
    "window": {
        "size": (800, 600),
        "title": "Sandbox",
        "gl_version": (4, 6),
        "gl_profile": "core",
        "fullscreen": False,
        "vsync": True,
        "resizable": True,
        "maximized": True,
        "cursor_enabled": False,
        "transparent_framebuffer": False,
        "forced_aspect_ratio": None,
    },
    "logger": {
        "client_logger_label": "SANDBOX",
        "log_file_path": "log/log.txt",
    },
}

_CAMERA_POSITION = (0.0, 0.0, 5.0)
_CAMERA_FRONT = (0.0, 0.0, -1.0)
_ASPECT_RATIO = 16.0 / 9.0
_FOV = math.radians(45.0)

_LIGHT_POSITION = (0.0, 5.0, 5.0)
_LIGHT_COLOR = (1.0, 1.0, 1.0)

_SPIN_RATE = 0.0005
_FIRST_AXIS = (0.0, 1.0, 0.0)
_SECOND_AXIS = (-0.3, 0.1, 0.7)


class SandboxScene(Scene):
    """A cube that keeps rotating faster as time passes.

    The camera follows keys in ``pressed_keys`` and ``mouse_delta`` while the
    cursor is disabled.
    """

    def __init__(self):
        self.cube = Transformable3D()
        self.cube_texture = "assets/wall.jpg"
        self.cube_material = Material(texture=self.cube_texture)
        self.camera = PerspectiveCamera(_CAMERA_POSITION, _CAMERA_FRONT, _ASPECT_RATIO, _FOV)
        self._camera_controller = FpsCameraController(self.camera)
        self.light = PointLight(_LIGHT_POSITION, _LIGHT_COLOR)

        self.active_camera: PerspectiveCamera | None = None
        self.active_light: PointLight | None = None

        self.cursor_enabled = APP_SPEC["window"]["cursor_enabled"]
        self.pressed_keys: set = set()
        self.mouse_delta: tuple[float, float] = (0.0, 0.0)
        self.delta_time = 0.0
        self.draw_list: list = []
        self._timer = Timer()

    def on_load(self) -> None:
        self.active_camera = self.camera
        self.active_light = self.light

    def on_update(self, time: float | None = None) -> None:
        """Advance one frame; ``time`` is seconds since start, measured if not given."""
        if time is None:
            time = self._timer.elapsed_s()

        if not self.cursor_enabled:
            self._camera_controller.on_update(
                lambda key: key in self.pressed_keys, self.mouse_delta, self.delta_time
            )
        self.mouse_delta = (0.0, 0.0)

        self.cube.rotate(_SPIN_RATE * time, _FIRST_AXIS)
        self.cube.rotate(_SPIN_RATE * time, _SECOND_AXIS)

        self.draw_list = [(self.cube, self.cube_material)]

    def on_event(self, event) -> None:
        if isinstance(event, WindowResizedEvent):
            width, height = event.new_size
            self.camera.set_aspect_ratio(width / height)


class Sandbox(Application):
    """Escape closes the sandbox; Left Control toggles the cursor."""

    def __init__(self, systems=()):
        super().__init__(systems)
        self.spec = APP_SPEC
        self.cursor_enabled = APP_SPEC["window"]["cursor_enabled"]
        self.scene = SandboxScene()
        self.scene_manager.load_scene(self.scene)

    def on_event(self, event) -> None:
        if not isinstance(event, KeyPressedEvent):
            return
        if event.key == "Escape":
            self.close()
        elif event.key == "LeftControl":
            self.cursor_enabled = not self.cursor_enabled
            self.scene.cursor_enabled = self.cursor_enabled