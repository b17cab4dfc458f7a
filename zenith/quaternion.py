"""Unit quaternion helpers stored as numpy arrays in (w, x, y, z) order."""

from __future__ import annotations

import math

import numpy as np

__all__ = [
    "identity",
    "from_axis_angle",
    "multiply",
    "normalize",
    "conjugate",
    "to_matrix",
    "from_matrix",
]


def identity() -> np.ndarray:
    """Return the identity rotation."""
    return np.array([1.0, 0.0, 0.0, 0.0])


def from_axis_angle(angle: float, axis) -> np.ndarray:
    """Return the rotation of ``angle`` radians about ``axis``.

    The axis does not need to be of unit length.
    """
    axis = np.asarray(axis, dtype=float)
    if axis.shape != (3,):
        raise ValueError("axis must have three components")
    length = float(np.linalg.norm(axis))
    if length == 0.0:
        raise ValueError("rotation axis must not be zero")
    axis = axis / length
    half = angle * 0.5
    return np.concatenate(([math.cos(half)], axis * math.sin(half)))


def multiply(a, b) -> np.ndarray:
    """Return the Hamilton product ``a * b`` (apply ``b`` first, then ``a``)."""
    aw, ax, ay, az = np.asarray(a, dtype=float)
    bw, bx, by, bz = np.asarray(b, dtype=float)
    return np.array(
        [
            aw * bw - ax * bx - ay * by - az * bz,
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by - ax * bz + ay * bw + az * bx,
            aw * bz + ax * by - ay * bx + az * bw,
        ]
    )


def normalize(q) -> np.ndarray:
    """Return ``q`` scaled to unit length; a zero quaternion becomes the identity."""
    q = np.asarray(q, dtype=float)
    length = float(np.linalg.norm(q))
    if length <= 0.0:
        return identity()
    return q / length


def conjugate(q) -> np.ndarray:
    """Return the conjugate of ``q``."""
    w, x, y, z = np.asarray(q, dtype=float)
    return np.array([w, -x, -y, -z])


def to_matrix(q) -> np.ndarray:
    """Return the 4x4 rotation matrix of a unit quaternion."""
    w, x, y, z = np.asarray(q, dtype=float)
    m = np.eye(4)
    m[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return m


def from_matrix(m) -> np.ndarray:
    """Return the unit quaternion of a 3x3 or 4x4 rotation matrix."""
    r = np.asarray(m, dtype=float)
    if r.shape not in ((3, 3), (4, 4)):
        raise ValueError("expected a 3x3 or 4x4 matrix")
    r = r[:3, :3]
    trace = r[0, 0] + r[1, 1] + r[2, 2]
    if trace > 0:
        s = math.sqrt(trace + 1.0) * 2
        q = [0.25 * s, (r[2, 1] - r[1, 2]) / s, (r[0, 2] - r[2, 0]) / s, (r[1, 0] - r[0, 1]) / s]
    elif r[0, 0] > r[1, 1] and r[0, 0] > r[2, 2]:
        s = math.sqrt(1.0 + r[0, 0] - r[1, 1] - r[2, 2]) * 2
        q = [(r[2, 1] - r[1, 2]) / s, 0.25 * s, (r[0, 1] + r[1, 0]) / s, (r[0, 2] + r[2, 0]) / s]
    elif r[1, 1] > r[2, 2]:
        s = math.sqrt(1.0 + r[1, 1] - r[0, 0] - r[2, 2]) * 2
        q = [(r[0, 2] - r[2, 0]) / s, (r[0, 1] + r[1, 0]) / s, 0.25 * s, (r[1, 2] + r[2, 1]) / s]
    else:
        s = math.sqrt(1.0 + r[2, 2] - r[0, 0] - r[1, 1]) * 2
        q = [(r[1, 0] - r[0, 1]) / s, (r[0, 2] + r[2, 0]) / s, (r[1, 2] + r[2, 1]) / s, 0.25 * s]
    return normalize(q)