"""Objects placed in 3D space by translation, rotation and scale."""

from __future__ import annotations

import numpy as np

from zenith import quaternion as quat

__all__ = ["Transformable3D"]


def _vec3(value) -> np.ndarray:
    v = np.asarray(value, dtype=float)
    if v.shape != (3,):
        raise ValueError("expected a vector of three components")
    return v.copy()


def _scale_vector(value) -> np.ndarray:
    v = np.asarray(value, dtype=float)
    if v.ndim == 0:
        return np.full(3, float(v))
    return _vec3(v)


class Transformable3D:
    """Holds a translation, rotation and scale and the matrix they compose to."""

    def __init__(self, translation=None, transform=None):
        if translation is not None and transform is not None:
            raise ValueError("give either a translation or a transform, not both")
        self._translation = np.zeros(3)
        self._rotation = quat.identity()
        self._scale = np.ones(3)
        self._transform = np.eye(4)
        if translation is not None:
            self.set_translation(translation)
        elif transform is not None:
            self.set_transform(transform)

    @property
    def translation(self) -> np.ndarray:
        return self._translation.copy()

    @property
    def rotation(self) -> np.ndarray:
        return self._rotation.copy()

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @property
    def transform(self) -> np.ndarray:
        return self._transform.copy()

    def translate(self, translation) -> "Transformable3D":
        """Move by ``translation``."""
        self._translation = self._translation + _vec3(translation)
        self._update_transform()
        return self

    def rotate(self, angle: float, axis) -> "Transformable3D":
        """Rotate further by ``angle`` radians about ``axis`` in local space."""
        self._rotation = quat.normalize(
            quat.multiply(self._rotation, quat.from_axis_angle(angle, axis))
        )
        self._update_transform()
        return self

    def scale_by(self, factor) -> "Transformable3D":
        """Multiply the scale by a number or a per-axis vector."""
        self._scale = self._scale * _scale_vector(factor)
        self._update_transform()
        return self

    def set_translation(self, translation) -> None:
        self._translation = _vec3(translation)
        self._update_transform()

    def set_rotation(self, rotation, axis=None) -> None:
        """Set the rotation from an angle and axis, or from a quaternion when no axis is given."""
        if axis is None:
            q = np.asarray(rotation, dtype=float)
            if q.shape != (4,):
                raise ValueError("a quaternion has four components")
            self._rotation = quat.normalize(q)
        else:
            self._rotation = quat.from_axis_angle(float(rotation), axis)
        self._update_transform()

    def set_scale(self, scale) -> None:
        """Set the scale from a number or a per-axis vector."""
        self._scale = _scale_vector(scale)
        self._update_transform()

    def set_transform(self, transform) -> None:
        """Take over a matrix and decompose it into translation, rotation and scale."""
        m = np.asarray(transform, dtype=float)
        if m.shape != (4, 4):
            raise ValueError("expected a 4x4 matrix")
        if m[3, 3] == 0.0:
            raise ValueError("matrix cannot be decomposed")
        n = m / m[3, 3]

        c0, c1, c2 = (n[:3, i].copy() for i in range(3))
        scale = np.zeros(3)
        scale[0] = np.linalg.norm(c0)
        if scale[0] == 0.0:
            raise ValueError("matrix has a zero scale")
        c0 /= scale[0]
        c1 -= np.dot(c0, c1) * c0
        scale[1] = np.linalg.norm(c1)
        if scale[1] == 0.0:
            raise ValueError("matrix has a zero scale")
        c1 /= scale[1]
        c2 -= np.dot(c0, c2) * c0
        c2 -= np.dot(c1, c2) * c1
        scale[2] = np.linalg.norm(c2)
        if scale[2] == 0.0:
            raise ValueError("matrix has a zero scale")
        c2 /= scale[2]

        if np.dot(c0, np.cross(c1, c2)) < 0:
            scale = -scale
            c0, c1, c2 = -c0, -c1, -c2

        self._translation = n[:3, 3].copy()
        self._scale = scale
        self._rotation = quat.from_matrix(np.column_stack((c0, c1, c2)))
        self._transform = m.copy()

    def _update_transform(self) -> None:
        t = np.eye(4)
        t[:3, 3] = self._translation
        s = np.diag(np.append(self._scale, 1.0))
        self._transform = t @ quat.to_matrix(self._rotation) @ s