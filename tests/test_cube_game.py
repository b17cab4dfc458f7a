import numpy as np
import pytest

from zenith.application import KeyPressedEvent, WindowResizedEvent
from zenith.cube_game import (
    Block,
    CubeGame,
    CubeGameScene,
    Player,
    block_positions,
    main,
)


@pytest.fixture(scope="module")
def scene():
    return CubeGameScene()


def test_block_is_placed_at_its_coordinates():
    block = Block((1, 2, 3))
    assert np.allclose(block.translation, [1, 2, 3])
    assert np.allclose(block.transform[:3, 3], [1, 2, 3])


def test_default_block_at_origin():
    assert np.allclose(Block().translation, [0, 0, 0])


def test_block_positions_cover_grid():
    positions = list(block_positions())
    assert len(positions) == len(set(positions))
    assert {p[0] for p in positions} == set(range(-20, 20))
    assert {p[1] for p in positions} == set(range(-20, 0))
    assert {p[2] for p in positions} == set(range(-20, 20))
    assert positions[0] == (-20, -20, -20)


def test_player_camera_start():
    player = Player()
    assert np.allclose(player.camera.position, [0.0, 0.0, 5.0])
    assert player.camera.aspect_ratio == pytest.approx(16.0 / 9.0)


def test_player_resize_sets_aspect_ratio():
    player = Player()
    player.on_event(WindowResizedEvent((800, 400)))
    assert player.camera.aspect_ratio == pytest.approx(800 / 400)


def test_player_moves_forward():
    player = Player()
    player.on_update(lambda key: key == "W", (0.0, 0.0), 1.0)
    position = player.camera.position
    assert position[2] < 5.0
    assert position[0] == pytest.approx(0.0, abs=1e-6)


def test_scene_load_and_update(scene):
    scene.on_load()
    assert scene.active_camera is scene.player.camera
    assert scene.active_light is scene.light
    assert np.allclose(scene.light.translation, [0.0, 10.0, 0.0])
    scene.on_update()
    assert len(scene.draw_list) == len(scene.blocks)
    assert all(material is scene.block_material for _, material in scene.draw_list)
    assert scene.block_material.texture.path == "assets/cobble.png"


def test_scene_forwards_resize(scene):
    scene.on_event(WindowResizedEvent((300, 100)))
    assert scene.player.camera.aspect_ratio == pytest.approx(300 / 100)


def test_escape_closes_game():
    with CubeGame() as app:
        app.on_event(KeyPressedEvent("A"))
        assert app.should_close is False
        app.on_event(KeyPressedEvent("Escape"))
        assert app.should_close is True


def test_main_runs_frames():
    assert main(["--frames", "1"]) == 0