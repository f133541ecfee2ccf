"""RGBA colours in the sRGB space and the shared simulation palette."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Color:
    """An sRGB colour with straight alpha, channels nominally in 0..1."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def with_alpha(self, alpha: float) -> Color:
        """The same colour with a different alpha."""
        return replace(self, alpha=alpha)

    def to_rgb8(self) -> tuple[int, int, int]:
        """The colour channels as saturated 8-bit values."""
        return (
            _to_u8(self.red * 255.0),
            _to_u8(self.green * 255.0),
            _to_u8(self.blue * 255.0),
        )


def _to_u8(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(min(255.0, max(0.0, value)))


def srgb(red: float, green: float, blue: float) -> Color:
    """An opaque sRGB colour."""
    return Color(red, green, blue, 1.0)


def srgba(red: float, green: float, blue: float, alpha: float) -> Color:
    """An sRGB colour with alpha."""
    return Color(red, green, blue, alpha)


WHITE = srgb(1.0, 1.0, 1.0)

PARTICLE_BLUE = srgb(0.2, 0.7, 1.0)
PARTICLE_ORANGE = srgb(1.0, 0.5, 0.2)
PARTICLE_GREEN = srgb(0.2, 1.0, 0.5)
FIELD_RED = srgb(1.0, 0.3, 0.3)
FIELD_BLUE = srgb(0.3, 0.3, 1.0)
GRID_GRAY = srgba(0.5, 0.5, 0.5, 0.3)