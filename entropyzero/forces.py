"""Common forces acting on point masses."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vector import Vec3

_MIN_DISTANCE_SQUARED = 0.01
_MIN_SPRING_LENGTH = 0.001


@dataclass
class UniformGravity:
    """A uniform gravitational field, such as near the Earth's surface."""

    acceleration: Vec3 = field(default_factory=lambda: Vec3(0.0, -9.8, 0.0))


def gravitational_force(
    mass1: float, mass2: float, position1: Vec3, position2: Vec3, g: float
) -> Vec3:
    """Inverse-square attraction on the first mass towards the second.

    The squared distance is floored to keep the force finite for close bodies;
    coincident positions give a NaN direction.
    """
    direction = position2 - position1
    distance_sq = max(direction.length_squared(), _MIN_DISTANCE_SQUARED)
    magnitude = g * mass1 * mass2 / distance_sq
    return direction.normalize() * magnitude


def spring_force(
    position: Vec3, anchor: Vec3, rest_length: float, stiffness: float
) -> Vec3:
    """Hooke's-law force on a point attached to an anchor by a spring."""
    displacement = position - anchor
    current_length = displacement.length()
    if current_length < _MIN_SPRING_LENGTH:
        return Vec3.ZERO
    extension = current_length - rest_length
    return displacement.normalize() * (-stiffness * extension)


def damping_force(velocity: Vec3, coefficient: float) -> Vec3:
    """Linear drag opposing the velocity."""
    return velocity * -coefficient