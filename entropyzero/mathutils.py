"""Scalar helpers and physical constants shared by the simulations."""

from __future__ import annotations

from .vector import Vec3

SPEED_OF_LIGHT = 299_792_458.0
GRAVITATIONAL_CONSTANT = 6.674e-11
PLANCK_CONSTANT = 6.626e-34
ELEMENTARY_CHARGE = 1.602e-19
BOLTZMANN_CONSTANT = 1.381e-23
VACUUM_PERMITTIVITY = 8.854e-12
VACUUM_PERMEABILITY = 1.257e-6
STANDARD_GRAVITY = 9.80665


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Limit value to the range; a NaN value becomes min_value."""
    result = value if value >= min_value else min_value
    return result if result <= max_value else max_value


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b."""
    return a + (b - a) * t


def lerp_vec3(a: Vec3, b: Vec3, t: float) -> Vec3:
    """Linear interpolation between two vectors."""
    return a + (b - a) * t


def smoothstep(edge0: float, edge1: float, x: float) -> float:
    """Hermite interpolation between 0 and 1 as x goes from edge0 to edge1."""
    span = edge1 - edge0
    if span == 0.0:
        t = 1.0 if x > edge0 else 0.0
    else:
        t = clamp((x - edge0) / span, 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)


def map_range(
    value: float, from_min: float, from_max: float, to_min: float, to_max: float
) -> float:
    """Map value linearly from one range onto another."""
    span = from_max - from_min
    if span == 0.0:
        raise ValueError("source range is empty")
    normalized = (value - from_min) / span
    return to_min + normalized * (to_max - to_min)