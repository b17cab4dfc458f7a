"""Light sources placed in the scene."""

from __future__ import annotations

import numpy as np

from zenith.transform import Transformable3D

__all__ = ["Light", "PointLight"]


class Light(Transformable3D):
    """Base of all lights: a position with colour and Phong intensities."""

    def __init__(self, position, color):
        if type(self) is Light:
            raise TypeError("Light cannot be created directly; use a concrete light")
        super().__init__(translation=position)
        self.color = np.asarray(color, dtype=float).copy()
        self.ambient = np.full(3, 0.2)
        self.diffuse = np.full(3, 0.5)
        self.specular = np.full(3, 1.0)


class PointLight(Light):
    """A light that shines in all directions from its position."""

    def __init__(self, position, color):
        super().__init__(position, color)