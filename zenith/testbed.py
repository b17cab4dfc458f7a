"""An interactive test scene for transforms, lights and material presets."""

from __future__ import annotations

import dataclasses
import logging
import math
from typing import NamedTuple

import numpy as np

from zenith.application import Application, KeyPressedEvent, WindowResizedEvent
from zenith.camera import PerspectiveCamera
from zenith.camera_controller import FpsCameraController
from zenith.errors import zth_assert
from zenith.light import PointLight
from zenith.materials import Material, load_materials, materials
from zenith.scene import Scene
from zenith.transform import Transformable3D

__all__ = [
    "APP_SPEC",
    "MATERIAL_NAMES",
    "TEXTURE_NAMES",
    "TransformTest",
    "Testbed",
    "describe_event",
]

_log = logging.getLogger(__name__)

APP_SPEC = {
    "window": {
        "size": (800, 600),
        "title": "Testbed",
        "fullscreen": False,
        "vsync": True,
        "maximized": True,
        "cursor_enabled": False,
    },
    "logger": {
        "client_logger_label": "TESTBED",
        "log_file_path": "log/log.txt",
    },
}

MATERIAL_NAMES = (
    "plain", "emerald", "jade", "obsidian", "pearl",
    "ruby", "turquoise", "brass", "bronze", "chrome",
    "copper", "gold", "silver", "black_plastic", "cyan_plastic",
    "green_plastic", "red_plastic", "white_plastic", "yellow_plastic", "black_rubber",
    "cyan_rubber", "green_rubber", "red_rubber", "white_rubber", "yellow_rubber",
)

TEXTURE_NAMES = ("Container", "Emoji", "Wall", "Cobble", "None")

_NO_TEXTURE_INDEX = 4

_CAMERA_POSITION = (0.0, 0.0, 5.0)
_CAMERA_FRONT = (0.0, 0.0, -1.0)
_ASPECT_RATIO = 16.0 / 9.0
_FOV = math.radians(45.0)

_LIGHT_POSITION = (-0.7, 1.3, 1.7)
_LIGHT_COLOR = (1.0, 1.0, 1.0)


class _Texture(NamedTuple):
    path: str
    min_filter: str | None = None
    mag_filter: str | None = None


def describe_event(event) -> str | None:
    """Return the log line for an event, or None for events that are not logged."""
    if isinstance(event, WindowResizedEvent):
        return f"Window resized. New size: {tuple(event.new_size)}."
    if isinstance(event, KeyPressedEvent):
        return f"{event.key} key pressed."
    return None


class TransformTest(Scene):
    """A cube whose transform, material and texture are edited live.

    The editable state lives in plain attributes (``translation``,
    ``rotation_angle``, ``rotation_axis``, ``scale``, ``uniform_scale``);
    presets and textures are chosen with :meth:`select_material` and
    :meth:`select_texture` and take effect on the next update.
    """

    def __init__(self):
        self.cube = Transformable3D()
        self.light_marker = Transformable3D()

        self.textures = (
            _Texture("assets/container.jpg"),
            _Texture("assets/emoji.png"),
            _Texture("assets/wall.jpg"),
            _Texture("assets/cobble.png", "nearest_mipmap_linear", "nearest"),
            None,
        )

        self.cube_material = Material()
        self.light_cube_material = Material(shader="flat_color", albedo=_LIGHT_COLOR)

        self.camera = PerspectiveCamera(_CAMERA_POSITION, _CAMERA_FRONT, _ASPECT_RATIO, _FOV)
        self._camera_controller = FpsCameraController(self.camera)
        self.light = PointLight(_LIGHT_POSITION, _LIGHT_COLOR)

        self.translation = np.zeros(3)
        self.rotation_angle = 0.0
        self.rotation_axis = np.array([0.0, 1.0, 0.0])
        self.scale = np.ones(3)
        self.uniform_scale = True

        self.material_selected_index = 0
        self.material_was_changed = True
        self.tex_selected_index = _NO_TEXTURE_INDEX
        self.tex_was_changed = True

        self.active_camera: PerspectiveCamera | None = None
        self.active_light: PointLight | None = None

        self.cursor_enabled = APP_SPEC["window"]["cursor_enabled"]
        self.pressed_keys: set = set()
        self.mouse_delta: tuple[float, float] = (0.0, 0.0)
        self.delta_time = 0.0
        self.draw_list: list = []

        self.light_marker.translate(self.light.translation).scale_by(0.1)

    def select_material(self, index: int) -> None:
        """Choose a material preset by its position in :data:`MATERIAL_NAMES`."""
        zth_assert(0 <= index < len(MATERIAL_NAMES), "index < material_names.size()")
        self.material_selected_index = index
        self.material_was_changed = True

    def select_texture(self, index: int) -> None:
        """Choose a texture by its position in :data:`TEXTURE_NAMES`."""
        zth_assert(0 <= index < len(TEXTURE_NAMES), "index < textures.size()")
        self.tex_selected_index = index
        self.tex_was_changed = True

    def on_load(self) -> None:
        load_materials()
        zth_assert(len(MATERIAL_NAMES) == len(materials()), "material_names.size() == materials().size()")
        self.active_camera = self.camera
        self.active_light = self.light

    def on_update(self) -> None:
        if not self.cursor_enabled:
            self._camera_controller.on_update(
                lambda key: key in self.pressed_keys, self.mouse_delta, self.delta_time
            )
        self.mouse_delta = (0.0, 0.0)

        axis = np.asarray(self.rotation_axis, dtype=float)
        length = float(np.linalg.norm(axis))
        if length == 0.0:
            raise ValueError("rotation axis must not be zero")
        self.rotation_axis = axis / length

        self.scale = np.asarray(self.scale, dtype=float)
        if self.uniform_scale:
            self.scale = np.full(3, self.scale[0])

        self.cube.set_translation(self.translation)
        self.cube.set_rotation(self.rotation_angle, self.rotation_axis)
        self.cube.set_scale(self.scale)

        self.light_cube_material.albedo = tuple(float(c) for c in self.light.color)

        if self.material_was_changed:
            presets = materials()
            zth_assert(self.material_selected_index < len(presets), "_material_selected_index < materials.size()")
            self.cube_material = dataclasses.replace(presets[self.material_selected_index])
            self.material_was_changed = False
            self.tex_selected_index = _NO_TEXTURE_INDEX

        if self.tex_was_changed:
            zth_assert(0 <= self.tex_selected_index < len(self.textures), "false")
            self.cube_material.texture = self.textures[self.tex_selected_index]
            self.tex_was_changed = False

        self.draw_list = [
            (self.cube, self.cube_material),
            (self.light_marker, self.light_cube_material),
        ]

    def on_event(self, event) -> None:
        if isinstance(event, WindowResizedEvent):
            width, height = event.new_size
            self.camera.set_aspect_ratio(width / height)


class Testbed(Application):
    """Logs incoming events; Escape closes it and Left Control toggles the cursor."""

    def __init__(self, systems=()):
        super().__init__(systems)
        self.spec = APP_SPEC
        self.ui_font_scale = 1.5
        self.cursor_enabled = APP_SPEC["window"]["cursor_enabled"]
        self.scene = TransformTest()
        self.scene_manager.load_scene(self.scene)

    def on_event(self, event) -> None:
        text = describe_event(event)
        if text is not None:
            _log.info(text)
        if not isinstance(event, KeyPressedEvent):
            return
        if event.key == "Escape":
            self.close()
        elif event.key == "LeftControl":
            self.cursor_enabled = not self.cursor_enabled
            self.scene.cursor_enabled = self.cursor_enabled