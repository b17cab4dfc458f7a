"""Surface materials and the built-in list of preset materials."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterator
from typing import Any

from zenith.errors import zth_assert

__all__ = [
    "Material",
    "MaterialList",
    "load_materials",
    "unload_materials",
    "materials",
    "material",
]

_log = logging.getLogger(__name__)

Vec3 = tuple[float, float, float]


@dataclasses.dataclass
class Material:
    """Phong material: shader, base colour, optional texture and lighting terms."""

    shader: str = "standard"
    albedo: Vec3 = (1.0, 1.0, 1.0)
    texture: Any = None
    ambient: Vec3 = (0.1, 0.1, 0.1)
    diffuse: Vec3 = (0.7, 0.7, 0.7)
    specular: Vec3 = (0.4, 0.4, 0.4)
    shininess: float = 32.0


def _preset(ambient: Vec3, diffuse: Vec3, specular: Vec3, shininess: float) -> Material:
    return Material(
        shader="standard",
        ambient=ambient,
        diffuse=diffuse,
        specular=specular,
        shininess=shininess,
    )


def _presets() -> dict[str, Material]:
    return {
        "plain": Material(),
        "emerald": _preset((0.1075, 0.8725, 0.1075), (0.15136, 1.22848, 0.15136), (0.633, 0.727811, 0.633), 76.8),
        "jade": _preset((0.675, 1.1125, 0.7875), (1.08, 1.78, 1.26), (0.316228, 0.316228, 0.316228), 12.8),
        "obsidian": _preset((0.26875, 0.25, 0.33125), (0.3655, 0.34, 0.4505), (0.332741, 0.328634, 0.346435), 38.4),
        "pearl": _preset((1.25, 1.03625, 1.03625), (2.0, 1.658, 1.658), (0.296648, 0.296648, 0.296648), 11.264),
        "ruby": _preset((0.8725, 0.05875, 0.05875), (1.22848, 0.08272, 0.08272), (0.727811, 0.626959, 0.626959), 76.8),
        "turquoise": _preset((0.5, 0.93625, 0.8725), (0.792, 1.48302, 1.38204), (0.297254, 0.30829, 0.306678), 12.8),
        "brass": _preset(
            (1.64706, 1.117645, 0.137255), (1.560784, 1.137254, 0.22745), (0.992157, 0.941176, 0.807843), 27.89743616
        ),
        "bronze": _preset((1.0625, 0.6375, 0.27), (1.428, 0.8568, 0.36288), (0.393548, 0.271906, 0.166721), 25.6),
        "chrome": _preset((1.25, 1.25, 1.25), (0.8, 0.8, 0.8), (0.774597, 0.774597, 0.774597), 76.8),
        "copper": _preset((0.95625, 0.3675, 0.1125), (1.4076, 0.54096, 0.1656), (0.256777, 0.137622, 0.086014), 12.8),
        "gold": _preset((1.23625, 0.9975, 0.3725), (1.50328, 1.21296, 0.45296), (0.628281, 0.555802, 0.366065), 51.2),
        "silver": _preset((0.96125, 0.96125, 0.96125), (1.01508, 1.01508, 1.01508), (0.508273, 0.508273, 0.508273), 51.2),
        "black_plastic": _preset((0.0, 0.0, 0.0), (0.02, 0.02, 0.02), (0.50, 0.50, 0.50), 32.0),
        "cyan_plastic": _preset(
            (0.0, 0.5, 0.3), (0.0, 1.01960784, 1.01960784), (0.50196078, 0.50196078, 0.50196078), 32.0
        ),
        "green_plastic": _preset((0.0, 0.0, 0.0), (0.2, 0.7, 0.2), (0.45, 0.55, 0.45), 32.0),
        "red_plastic": _preset((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.7, 0.6, 0.6), 32.0),
        "white_plastic": _preset((0.0, 0.0, 0.0), (1.1, 1.1, 1.1), (0.70, 0.70, 0.70), 32.0),
        "yellow_plastic": _preset((0.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.60, 0.60, 0.50), 32.0),
        "black_rubber": _preset((0.1, 0.1, 0.1), (0.02, 0.02, 0.02), (0.4, 0.4, 0.4), 10.0),
        "cyan_rubber": _preset((0.0, 0.25, 0.25), (0.8, 1.0, 1.0), (0.04, 0.7, 0.7), 10.0),
        "green_rubber": _preset((0.0, 0.25, 0.0), (0.8, 1.0, 0.8), (0.04, 0.7, 0.04), 10.0),
        "red_rubber": _preset((0.25, 0.0, 0.0), (1.0, 0.8, 0.8), (0.7, 0.04, 0.04), 10.0),
        "white_rubber": _preset((0.25, 0.25, 0.25), (1.0, 1.0, 1.0), (0.7, 0.7, 0.7), 10.0),
        "yellow_rubber": _preset((0.25, 0.25, 0.0), (1.0, 1.0, 0.8), (0.7, 0.7, 0.04), 10.0),
    }


class MaterialList:
    """The ordered set of preset materials, reachable by index or by name."""

    def __init__(self):
        self._by_name = _presets()
        self._ordered = list(self._by_name.values())

    def names(self) -> list[str]:
        """Return the preset names in list order."""
        return list(self._by_name)

    def get(self, name: str) -> Material:
        """Return the preset called ``name``; raise KeyError if there is none."""
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"no material named {name!r}") from None

    def __getitem__(self, index: int) -> Material:
        zth_assert(0 <= index < len(self._ordered), "index < size()")
        return self._ordered[index]

    def __len__(self) -> int:
        return len(self._ordered)

    def __iter__(self) -> Iterator[Material]:
        return iter(self._ordered)


_material_list: MaterialList | None = None


def load_materials() -> None:
    """Create the shared preset list."""
    global _material_list
    _material_list = MaterialList()
    _log.info("Materials loaded.")


def unload_materials() -> None:
    """Drop the shared preset list."""
    global _material_list
    _material_list = None
    _log.info("Materials unloaded.")


def materials() -> MaterialList:
    """Return the shared preset list; it must have been loaded."""
    zth_assert(_material_list is not None, "material_list != nullptr")
    return _material_list


def material(name: str) -> Material:
    """Return a shared preset by name; the list must have been loaded."""
    return materials().get(name)