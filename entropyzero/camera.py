"""Orbit camera looking at a focus point."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .vector import Vec3


@dataclass
class OrbitCamera:
    """A camera on a sphere around ``focus``; angles are in radians."""

    focus: Vec3 = field(default_factory=lambda: Vec3.ZERO)
    distance: float = 50.0
    pitch: float = -0.5
    yaw: float = 0.0

    def position(self) -> Vec3:
        """World position of the camera; negative pitch places it above the focus."""
        x = self.distance * math.cos(self.pitch) * math.sin(self.yaw)
        y = self.distance * math.sin(self.pitch)
        z = self.distance * math.cos(self.pitch) * math.cos(self.yaw)
        return self.focus + Vec3(x, -y, z)