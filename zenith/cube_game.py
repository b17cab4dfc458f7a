"""A voxel scene: a slab of cobblestone blocks explored in first person."""

from __future__ import annotations

import argparse
import itertools
import math
from collections.abc import Callable, Hashable, Iterator, Sequence
from typing import NamedTuple

from zenith.application import (
    Application,
    KeyPressedEvent,
    WindowResizedEvent,
    run_application,
)
from zenith.camera import PerspectiveCamera
from zenith.camera_controller import FpsCameraController
from zenith.colors import Color
from zenith.light import PointLight
from zenith.materials import Material
from zenith.scene import Scene
from zenith.transform import Transformable3D

__all__ = ["APP_SPEC", "Block", "block_positions", "Player", "CubeGameScene", "CubeGame", "main"]

APP_SPEC = {
    "window": {
        "size": (800, 600),
        "title": "Cube Game",
        "fullscreen": False,
        "vsync": True,
        "maximized": True,
        "cursor_enabled": False,
    },
    "logger": {
        "client_logger_label": "CUBE GAME",
        "log_file_path": "log/log.txt",
    },
}

_CAMERA_POSITION = (0.0, 0.0, 5.0)
_CAMERA_FRONT = (0.0, 0.0, -1.0)
_ASPECT_RATIO = 16.0 / 9.0
_FOV = math.radians(45.0)

_LIGHT_POSITION = (0.0, 10.0, 0.0)
_LIGHT_COLOR = (1.0, 1.0, 1.0)
_SKY_COLOR = Color(0.643, 0.816, 0.91, 1.0)


class _Texture(NamedTuple):
    path: str
    min_filter: str | None = None
    mag_filter: str | None = None


class Block(Transformable3D):
    """A unit cube placed at integer coordinates."""

    def __init__(self, translation=(0, 0, 0)):
        super().__init__()
        self.translate(tuple(int(c) for c in translation))


def block_positions() -> Iterator[tuple[int, int, int]]:
    """Yield the grid coordinates of every block in the world, x outermost."""
    return itertools.product(range(-20, 20), range(-20, 0), range(-20, 20))


class Player:
    """The first-person viewer: a perspective camera and its controller."""

    def __init__(self):
        self._camera = PerspectiveCamera(_CAMERA_POSITION, _CAMERA_FRONT, _ASPECT_RATIO, _FOV)
        self._camera_controller = FpsCameraController(self._camera)

    @property
    def camera(self) -> PerspectiveCamera:
        return self._camera

    def on_update(
        self,
        is_key_pressed: Callable[[Hashable], bool],
        mouse_delta: Sequence[float] = (0.0, 0.0),
        delta_time: float = 0.0,
    ) -> None:
        self._camera_controller.on_update(is_key_pressed, mouse_delta, delta_time)

    def on_event(self, event) -> None:
        if isinstance(event, WindowResizedEvent):
            width, height = event.new_size
            self._camera.set_aspect_ratio(width / height)


class CubeGameScene(Scene):
    """The block world with a single point light above it.

    Input for the frame is fed through ``pressed_keys``, ``mouse_delta`` and
    ``delta_time``; ``draw_list`` holds the (shape, material) pairs drawn last frame.
    """

    def __init__(self):
        self.block_texture = _Texture("assets/cobble.png", "nearest_mipmap_linear", "nearest")
        self.block_material = Material(texture=self.block_texture)
        self.light = PointLight(_LIGHT_POSITION, _LIGHT_COLOR)
        self.blocks = [Block(position) for position in block_positions()]
        self.player = Player()

        self.clear_color: Color | None = None
        self.active_camera: PerspectiveCamera | None = None
        self.active_light: PointLight | None = None

        self.pressed_keys: set = set()
        self.mouse_delta: tuple[float, float] = (0.0, 0.0)
        self.delta_time = 0.0
        self.draw_list: list = []

    def on_load(self) -> None:
        self.clear_color = _SKY_COLOR
        self.active_camera = self.player.camera
        self.active_light = self.light

    def on_update(self) -> None:
        self.player.on_update(lambda key: key in self.pressed_keys, self.mouse_delta, self.delta_time)
        self.mouse_delta = (0.0, 0.0)
        self.draw_list = [(block, self.block_material) for block in self.blocks]

    def on_event(self, event) -> None:
        self.player.on_event(event)


class CubeGame(Application):
    """The cube game application; Escape closes it."""

    def __init__(self, systems=()):
        super().__init__(systems)
        self.spec = APP_SPEC
        self.scene_manager.load_scene(CubeGameScene())

    def on_event(self, event) -> None:
        if isinstance(event, KeyPressedEvent) and event.key == "Escape":
            self.close()


def main(argv=None) -> int:
    """Run the cube game; ``--frames`` limits how many frames run."""
    parser = argparse.ArgumentParser(prog="cube-game", description="Walk around a world of blocks.")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)
    return run_application(CubeGame, args.frames)