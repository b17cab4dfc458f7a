"""Draw requests that the renderer sorts into batches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["DrawCommand"]


@dataclass(eq=False)
class DrawCommand:
    """One request to draw a vertex array with a material at a transform.

    Commands compare by the identity of their vertex array first and their
    material second. The transform is ignored, so commands that compare
    equal can be drawn together in one batch.
    """

    vertex_array: Any
    material: Any
    transform: Any

    def _key(self) -> tuple[int, int]:
        return (id(self.vertex_array), id(self.material))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DrawCommand):
            return NotImplemented
        return self.vertex_array is other.vertex_array and self.material is other.material

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: "DrawCommand") -> bool:
        if not isinstance(other, DrawCommand):
            return NotImplemented
        return self._key() < other._key()

    def __gt__(self, other: "DrawCommand") -> bool:
        if not isinstance(other, DrawCommand):
            return NotImplemented
        return self._key() > other._key()

    def __le__(self, other: "DrawCommand") -> bool:
        if not isinstance(other, DrawCommand):
            return NotImplemented
        return self < other or self == other

    def __ge__(self, other: "DrawCommand") -> bool:
        if not isinstance(other, DrawCommand):
            return NotImplemented
        return self > other or self == other