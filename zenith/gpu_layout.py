"""Byte layouts of the data the renderer hands to shaders."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Any

import numpy as np

__all__ = [
    "CAMERA_UBO_BINDING_INDEX",
    "LIGHT_UBO_BINDING_INDEX",
    "MATERIAL_UBO_BINDING_INDEX",
    "RenderBatch",
    "CameraUboData",
    "LightUboData",
    "MaterialUboData",
    "InstanceBufferElement",
]

CAMERA_UBO_BINDING_INDEX = 0
LIGHT_UBO_BINDING_INDEX = 1
MATERIAL_UBO_BINDING_INDEX = 2

_CAMERA_FORMAT = struct.Struct("<16f3f")
_LIGHT_FORMAT = struct.Struct("<3f4x3f4x3f4x3f4x3f")
_MATERIAL_FORMAT = struct.Struct("<3fB3x3f4x3f4x3ff")
_INSTANCE_FORMAT = struct.Struct("<12f9f")


def _vec3(value) -> np.ndarray:
    v = np.asarray(value, dtype=float)
    if v.shape != (3,):
        raise ValueError("expected a vector of three components")
    return v.copy()


def _matrix(value, size: int) -> np.ndarray:
    m = np.asarray(value, dtype=float)
    if m.shape != (size, size):
        raise ValueError(f"expected a {size}x{size} matrix")
    return m.copy()


def _column_major(m: np.ndarray) -> list[float]:
    return [float(x) for x in m.T.ravel()]


@dataclass
class RenderBatch:
    """Draws sharing one vertex array and material, one per transform."""

    vertex_array: Any
    material: Any
    transforms: list = field(default_factory=list)


@dataclass
class CameraUboData:
    """Camera uniform block: view-projection matrix and camera position."""

    view_projection: np.ndarray
    camera_position: np.ndarray

    def __post_init__(self):
        self.view_projection = _matrix(self.view_projection, 4)
        self.camera_position = _vec3(self.camera_position)

    def pack(self) -> bytes:
        """Return the block as bytes, matrix in column-major order."""
        return _CAMERA_FORMAT.pack(
            *_column_major(self.view_projection), *self.camera_position
        )


@dataclass
class LightUboData:
    """Light uniform block with each vec3 padded to 16 bytes."""

    light_position: np.ndarray
    light_color: np.ndarray
    light_ambient: np.ndarray
    light_diffuse: np.ndarray
    light_specular: np.ndarray

    def __post_init__(self):
        self.light_position = _vec3(self.light_position)
        self.light_color = _vec3(self.light_color)
        self.light_ambient = _vec3(self.light_ambient)
        self.light_diffuse = _vec3(self.light_diffuse)
        self.light_specular = _vec3(self.light_specular)

    @classmethod
    def from_light(cls, light) -> "LightUboData":
        """Build the block from a light's position, colour and intensities."""
        return cls(
            light_position=light.translation,
            light_color=light.color,
            light_ambient=light.ambient,
            light_diffuse=light.diffuse,
            light_specular=light.specular,
        )

    def pack(self) -> bytes:
        return _LIGHT_FORMAT.pack(
            *self.light_position,
            *self.light_color,
            *self.light_ambient,
            *self.light_diffuse,
            *self.light_specular,
        )


@dataclass
class MaterialUboData:
    """Material uniform block."""

    albedo: np.ndarray
    has_texture: bool
    material_ambient: np.ndarray
    material_diffuse: np.ndarray
    material_specular: np.ndarray
    shininess: float

    def __post_init__(self):
        self.albedo = _vec3(self.albedo)
        self.has_texture = bool(self.has_texture)
        self.material_ambient = _vec3(self.material_ambient)
        self.material_diffuse = _vec3(self.material_diffuse)
        self.material_specular = _vec3(self.material_specular)
        self.shininess = float(self.shininess)

    @classmethod
    def from_material(cls, material) -> "MaterialUboData":
        """Build the block from a material; a texture sets ``has_texture``."""
        return cls(
            albedo=material.albedo,
            has_texture=material.texture is not None,
            material_ambient=material.ambient,
            material_diffuse=material.diffuse,
            material_specular=material.specular,
            shininess=material.shininess,
        )

    def pack(self) -> bytes:
        return _MATERIAL_FORMAT.pack(
            *self.albedo,
            1 if self.has_texture else 0,
            *self.material_ambient,
            *self.material_diffuse,
            *self.material_specular,
            self.shininess,
        )


@dataclass
class InstanceBufferElement:
    """Per-instance data: four transform columns and the normal matrix."""

    transform_col_0: np.ndarray
    transform_col_1: np.ndarray
    transform_col_2: np.ndarray
    transform_col_3: np.ndarray
    normal_mat: np.ndarray

    def __post_init__(self):
        self.transform_col_0 = _vec3(self.transform_col_0)
        self.transform_col_1 = _vec3(self.transform_col_1)
        self.transform_col_2 = _vec3(self.transform_col_2)
        self.transform_col_3 = _vec3(self.transform_col_3)
        self.normal_mat = _matrix(self.normal_mat, 3)

    @classmethod
    def from_transform(cls, transform) -> "InstanceBufferElement":
        """Build an element from a 4x4 affine transform."""
        m = _matrix(transform, 4)
        try:
            normal = np.linalg.inv(m[:3, :3]).T
        except np.linalg.LinAlgError:
            raise ValueError("transform is not invertible") from None
        return cls(m[:3, 0], m[:3, 1], m[:3, 2], m[:3, 3], normal)

    def pack(self) -> bytes:
        return _INSTANCE_FORMAT.pack(
            *self.transform_col_0,
            *self.transform_col_1,
            *self.transform_col_2,
            *self.transform_col_3,
            *_column_major(self.normal_mat),
        )