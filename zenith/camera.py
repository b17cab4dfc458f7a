"""Perspective camera and the matrices it is built from."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

import numpy as np

__all__ = ["look_at", "perspective", "Camera", "PerspectiveCamera"]

_WORLD_UP = np.array([0.0, 1.0, 0.0])
_NEAR_PLANE = 0.1
_FAR_PLANE = 100.0


def _vec3(value) -> np.ndarray:
    v = np.asarray(value, dtype=float)
    if v.shape != (3,):
        raise ValueError("expected a vector of three components")
    return v.copy()


def _normalize(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero vector")
    return v / length


def look_at(eye, center, up) -> np.ndarray:
    """Return a right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = _vec3(eye)
    f = _normalize(_vec3(center) - eye)
    s = _normalize(np.cross(f, _vec3(up)))
    u = np.cross(s, f)
    m = np.eye(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye)
    m[1, 3] = -np.dot(u, eye)
    m[2, 3] = np.dot(f, eye)
    return m


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Return a right-handed projection matrix mapping depth to [-1, 1]."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if far == near:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0.0:
        raise ValueError("field of view must not be zero")
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


class Camera(ABC):
    """Anything that provides a combined view-projection matrix."""

    @property
    @abstractmethod
    def view_projection(self) -> np.ndarray:
        """The matrix taking world space to clip space."""


class PerspectiveCamera(Camera):
    """A camera with a position, an orientation from yaw and pitch, and a perspective lens."""

    def __init__(self, position, front, aspect_ratio: float, fov: float = math.radians(45.0)):
        self._position = _vec3(position)
        self._aspect_ratio = float(aspect_ratio)
        self._fov = float(fov)
        self._front = _vec3(front)
        self._update_right()
        self._update_up()
        self._pitch = math.asin(self._front[1])
        self._yaw = math.atan2(self._front[2], self._front[1])
        self.update_view_projection()

    @classmethod
    def from_yaw_pitch(
        cls, position, yaw: float, pitch: float, aspect_ratio: float, fov: float = math.radians(45.0)
    ) -> "PerspectiveCamera":
        """Create a camera oriented by ``yaw`` and ``pitch`` in radians."""
        camera = cls.__new__(cls)
        camera._position = _vec3(position)
        camera._aspect_ratio = float(aspect_ratio)
        camera._fov = float(fov)
        camera._yaw = float(yaw)
        camera._pitch = float(pitch)
        camera._update_direction_vectors()
        camera.update_view_projection()
        return camera

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @property
    def fov(self) -> float:
        return self._fov

    @property
    def front(self) -> np.ndarray:
        return self._front.copy()

    @property
    def right(self) -> np.ndarray:
        return self._right.copy()

    @property
    def up(self) -> np.ndarray:
        return self._up.copy()

    @property
    def yaw(self) -> float:
        return self._yaw

    @property
    def pitch(self) -> float:
        return self._pitch

    @property
    def view_projection(self) -> np.ndarray:
        return self._view_projection.copy()

    def update_view_projection(self) -> None:
        """Recompute the view-projection matrix from the current state."""
        view = look_at(self._position, self._position + self._front, self._up)
        projection = perspective(self._fov, self._aspect_ratio, _NEAR_PLANE, _FAR_PLANE)
        self._view_projection = projection @ view

    def set_position(self, position) -> None:
        self._position = _vec3(position)
        self.update_view_projection()

    def set_aspect_ratio(self, aspect_ratio: float) -> None:
        self._aspect_ratio = float(aspect_ratio)
        self.update_view_projection()

    def set_fov(self, fov: float) -> None:
        self._fov = float(fov)
        self.update_view_projection()

    def set_yaw(self, yaw: float) -> None:
        self._yaw = float(yaw)
        self._update_direction_vectors()
        self.update_view_projection()

    def set_pitch(self, pitch: float) -> None:
        self._pitch = float(pitch)
        self._update_direction_vectors()
        self.update_view_projection()

    def set_yaw_and_pitch(self, yaw: float, pitch: float) -> None:
        self._yaw = float(yaw)
        self._pitch = float(pitch)
        self._update_direction_vectors()
        self.update_view_projection()

    def _update_front(self) -> None:
        cos_pitch = math.cos(self._pitch)
        front = np.array(
            [
                math.cos(self._yaw) * cos_pitch,
                math.sin(self._pitch),
                math.sin(self._yaw) * cos_pitch,
            ]
        )
        self._front = _normalize(front)

    def _update_right(self) -> None:
        self._right = _normalize(np.cross(self._front, _WORLD_UP))

    def _update_up(self) -> None:
        self._up = _normalize(np.cross(self._right, self._front))

    def _update_direction_vectors(self) -> None:
        self._update_front()
        self._update_right()
        self._update_up()