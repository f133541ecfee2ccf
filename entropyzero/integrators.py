"""Numerical integrators advancing a point's position and velocity.

Each integrator returns the new ``(position, velocity)`` pair.
"""

from __future__ import annotations

from typing import Callable

from .vector import Vec3

AccelerationFn = Callable[[Vec3, Vec3], Vec3]


def euler_integrate(
    position: Vec3, velocity: Vec3, acceleration: Vec3, dt: float
) -> tuple[Vec3, Vec3]:
    """First-order Euler step."""
    velocity = velocity + acceleration * dt
    position = position + velocity * dt
    return position, velocity


def semi_implicit_euler(
    position: Vec3, velocity: Vec3, acceleration: Vec3, dt: float
) -> tuple[Vec3, Vec3]:
    """Symplectic Euler step: velocity first, then position with the new velocity."""
    velocity = velocity + acceleration * dt
    position = position + velocity * dt
    return position, velocity


def verlet_integrate(
    position: Vec3,
    velocity: Vec3,
    acceleration: Vec3,
    prev_acceleration: Vec3,
    dt: float,
) -> tuple[Vec3, Vec3]:
    """Velocity Verlet step."""
    position = position + velocity * dt + prev_acceleration * (0.5 * dt * dt)
    velocity = velocity + (prev_acceleration + acceleration) * (0.5 * dt)
    return position, velocity


def rk4_integrate(
    position: Vec3, velocity: Vec3, dt: float, acceleration_fn: AccelerationFn
) -> tuple[Vec3, Vec3]:
    """Classical fourth-order Runge-Kutta step for ``a = f(x, v)``."""
    half = dt * 0.5

    k1v = acceleration_fn(position, velocity)
    k1x = velocity

    k2v = acceleration_fn(position + k1x * half, velocity + k1v * half)
    k2x = velocity + k1v * half

    k3v = acceleration_fn(position + k2x * half, velocity + k2v * half)
    k3x = velocity + k2v * half

    k4v = acceleration_fn(position + k3x * dt, velocity + k3v * dt)
    k4x = velocity + k3v * dt

    position = position + (k1x + 2.0 * k2x + 2.0 * k3x + k4x) * (dt / 6.0)
    velocity = velocity + (k1v + 2.0 * k2v + 2.0 * k3v + k4v) * (dt / 6.0)
    return position, velocity