"""Named RGBA colours."""

from __future__ import annotations

from typing import NamedTuple

__all__ = [
    "Color",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    "YELLOW",
    "MAGENTA",
    "CYAN",
    "TRANSPARENT",
]


class Color(NamedTuple):
    """An RGBA colour with components in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @property
    def rgb(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def with_alpha(self, alpha: float) -> "Color":
        """Return the same colour with a different alpha."""
        return self._replace(a=alpha)


BLACK = Color(0.0, 0.0, 0.0, 1.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0, 1.0)
GREEN = Color(0.0, 1.0, 0.0, 1.0)
BLUE = Color(0.0, 0.0, 1.0, 1.0)
YELLOW = Color(1.0, 1.0, 0.0, 1.0)
MAGENTA = Color(1.0, 0.0, 1.0, 1.0)
CYAN = Color(0.0, 1.0, 1.0, 1.0)
TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)