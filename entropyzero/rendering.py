"""Grid display settings and surface materials shared by the simulations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .color import GRID_GRAY, WHITE, Color, srgb

BLACK = srgb(0.0, 0.0, 0.0)


@dataclass
class GridConfig:
    """Appearance of the reference grid."""

    size: float = 100.0
    divisions: int = 20
    color: Color = field(default_factory=lambda: GRID_GRAY)
    visible: bool = True


class AlphaMode(Enum):
    OPAQUE = "opaque"
    BLEND = "blend"
    ADD = "add"


@dataclass(frozen=True)
class StandardMaterial:
    """A lit surface material."""

    base_color: Color = WHITE
    emissive: Color = BLACK
    unlit: bool = False
    alpha_mode: AlphaMode = AlphaMode.OPAQUE
    cull_back_faces: bool = True


def emissive_material(base_color: Color, emissive: Color) -> StandardMaterial:
    """A material that glows with the given emissive colour."""
    return StandardMaterial(base_color=base_color, emissive=emissive)


def simple_material(color: Color) -> StandardMaterial:
    """A plain coloured material."""
    return StandardMaterial(base_color=color)