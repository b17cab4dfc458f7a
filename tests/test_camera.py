import math

import numpy as np
import pytest

from zenith.camera import PerspectiveCamera, look_at, perspective


def _assert_orthonormal(camera):
    for v in (camera.front, camera.right, camera.up):
        assert np.linalg.norm(v) == pytest.approx(1.0)
    assert np.dot(camera.front, camera.right) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(camera.front, camera.up) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(camera.right, camera.up) == pytest.approx(0.0, abs=1e-12)


def test_look_at_maps_eye_to_origin():
    eye = np.array([1.0, 2.0, 3.0])
    view = look_at(eye, [4.0, 2.0, -1.0], [0.0, 1.0, 0.0])
    result = view @ np.append(eye, 1.0)
    assert np.allclose(result, [0.0, 0.0, 0.0, 1.0])


def test_look_at_places_center_on_negative_z():
    eye = np.array([1.0, 2.0, 3.0])
    center = np.array([4.0, 2.0, -1.0])
    view = look_at(eye, center, [0.0, 1.0, 0.0])
    result = view @ np.append(center, 1.0)
    assert result[0] == pytest.approx(0.0, abs=1e-12)
    assert result[1] == pytest.approx(0.0, abs=1e-12)
    assert result[2] == pytest.approx(-np.linalg.norm(center - eye))


def test_perspective_maps_near_and_far_planes():
    near, far = 0.5, 20.0
    proj = perspective(math.radians(60.0), 1.5, near, far)
    near_clip = proj @ np.array([0.0, 0.0, -near, 1.0])
    far_clip = proj @ np.array([0.0, 0.0, -far, 1.0])
    assert near_clip[2] / near_clip[3] == pytest.approx(-1.0)
    assert far_clip[2] / far_clip[3] == pytest.approx(1.0)


def test_perspective_rejects_equal_planes():
    with pytest.raises(ValueError):
        perspective(1.0, 1.0, 2.0, 2.0)


def test_constructor_from_front():
    camera = PerspectiveCamera([0.0, 0.0, 5.0], [0.0, 0.0, -1.0], 16.0 / 9.0)
    assert camera.pitch == pytest.approx(0.0)
    assert camera.yaw == pytest.approx(-math.pi / 2)
    assert camera.fov == pytest.approx(math.radians(45.0))
    assert np.allclose(camera.front, [0.0, 0.0, -1.0])
    _assert_orthonormal(camera)


def test_view_projection_composition():
    camera = PerspectiveCamera([0.0, 1.0, 5.0], [0.0, 0.0, -1.0], 2.0, 1.0)
    expected = perspective(1.0, 2.0, 0.1, 100.0) @ look_at(
        camera.position, camera.position + camera.front, camera.up
    )
    assert np.allclose(camera.view_projection, expected)


def test_from_yaw_pitch_front():
    camera = PerspectiveCamera.from_yaw_pitch([0.0, 0.0, 0.0], 0.0, 0.0, 1.0)
    assert np.allclose(camera.front, [1.0, 0.0, 0.0])
    _assert_orthonormal(camera)


def test_set_yaw_and_pitch_keeps_basis_orthonormal():
    camera = PerspectiveCamera([0.0, 0.0, 5.0], [0.0, 0.0, -1.0], 1.0)
    camera.set_yaw_and_pitch(0.7, -0.4)
    assert camera.yaw == pytest.approx(0.7)
    assert camera.pitch == pytest.approx(-0.4)
    assert camera.front[1] == pytest.approx(math.sin(-0.4))
    _assert_orthonormal(camera)


def test_set_yaw_and_set_pitch_match_combined_setter():
    a = PerspectiveCamera.from_yaw_pitch([1.0, 2.0, 3.0], 0.0, 0.0, 1.0)
    b = PerspectiveCamera.from_yaw_pitch([1.0, 2.0, 3.0], 0.0, 0.0, 1.0)
    a.set_yaw(0.3)
    a.set_pitch(0.2)
    b.set_yaw_and_pitch(0.3, 0.2)
    assert np.allclose(a.front, b.front)
    assert np.allclose(a.view_projection, b.view_projection)


def test_setters_update_view_projection():
    camera = PerspectiveCamera([0.0, 0.0, 5.0], [0.0, 0.0, -1.0], 1.0)
    before = camera.view_projection
    camera.set_aspect_ratio(2.0)
    assert camera.aspect_ratio == pytest.approx(2.0)
    assert not np.allclose(before, camera.view_projection)
    camera.set_position([1.0, 0.0, 0.0])
    assert np.allclose(camera.position, [1.0, 0.0, 0.0])
    camera.set_fov(0.5)
    assert camera.fov == pytest.approx(0.5)
    expected = perspective(0.5, 2.0, 0.1, 100.0) @ look_at(
        camera.position, camera.position + camera.front, camera.up
    )
    assert np.allclose(camera.view_projection, expected)


def test_properties_return_copies():
    camera = PerspectiveCamera([0.0, 0.0, 5.0], [0.0, 0.0, -1.0], 1.0)
    pos = camera.position
    pos[0] = 100.0
    assert camera.position[0] == pytest.approx(0.0)