"""Particle system under uniform gravity bouncing inside a box."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .parameters import BoolParameter, FloatParameter, IntParameter, ParameterDef
from .simulation import Simulation
from .taxonomy import ClassicalMechanicsSubdomain, Domain, SimulationCategory
from .vector import Vec3

RESTITUTION = 0.8


@dataclass
class ParticleConfig:
    """Settings of the particle simulation."""

    particle_count: int = 100_000
    gravity: Vec3 = field(default_factory=lambda: Vec3(0.0, -9.8, 0.0))
    bounds: float = 50.0
    speed_multiplier: float = 1.0
    paused: bool = False


@dataclass(frozen=True)
class Particle:
    """A snapshot of one particle."""

    position: Vec3
    velocity: Vec3


@dataclass
class ParticleStats:
    """Runtime statistics."""

    fps: float = 0.0
    particle_count: int = 0


class ParticleSystem:
    """A cloud of particles; state is held in ``positions`` and ``velocities`` (N x 3)."""

    def __init__(
        self,
        config: Optional[ParticleConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config if config is not None else ParticleConfig()
        self.stats = ParticleStats()
        generator = rng if rng is not None else np.random.default_rng()
        count = self.config.particle_count
        bounds = self.config.bounds
        self.positions = np.column_stack(
            [
                generator.uniform(-bounds, bounds, count),
                generator.uniform(0.0, bounds * 2.0, count),
                generator.uniform(-bounds, bounds, count),
            ]
        )
        self.velocities = np.column_stack(
            [
                generator.uniform(-10.0, 10.0, count),
                generator.uniform(-5.0, 15.0, count),
                generator.uniform(-10.0, 10.0, count),
            ]
        )

    def __len__(self) -> int:
        return len(self.positions)

    @property
    def particles(self) -> list[Particle]:
        """Snapshots of every particle."""
        return [
            Particle(Vec3(*map(float, p)), Vec3(*map(float, v)))
            for p, v in zip(self.positions, self.velocities)
        ]

    def step(self, dt: float) -> None:
        """Advance by ``dt`` seconds of wall time, scaled by the speed multiplier."""
        if self.config.paused:
            return
        dt *= self.config.speed_multiplier
        bounds = self.config.bounds
        pos, vel = self.positions, self.velocities

        vel += np.array(self.config.gravity.to_tuple()) * dt
        pos += vel * dt

        for axis in (0, 2):
            outside = np.abs(pos[:, axis]) > bounds
            pos[outside, axis] = np.sign(pos[outside, axis]) * bounds
            vel[outside, axis] *= -RESTITUTION

        below = pos[:, 1] < -bounds
        pos[below, 1] = -bounds
        vel[below, 1] *= -RESTITUTION
        above = pos[:, 1] > bounds
        pos[above, 1] = bounds
        vel[above, 1] *= -RESTITUTION

    def update_stats(self, dt: float) -> None:
        """Record the frame rate implied by ``dt`` and the particle count."""
        self.stats.fps = 1.0 / dt if dt != 0.0 else math.inf
        self.stats.particle_count = len(self)

    def toggle_pause(self) -> None:
        """Pause a running simulation or resume a paused one."""
        self.config.paused = not self.config.paused


class ParticleSystemSimulation(Simulation):
    """Catalogue entry for the particle system."""

    id = "particle_system"
    name = "Particle System"
    category = SimulationCategory(
        Domain.CLASSICAL_MECHANICS, ClassicalMechanicsSubdomain.DYNAMICS
    )
    description = (
        "High-performance particle simulation with gravity and boundary collisions. "
        "Demonstrates parallel processing for large entity counts."
    )
    difficulty = 2
    tags = ("particles", "gravity", "collision", "performance")

    def parameters(self) -> list[ParameterDef]:
        return [
            IntParameter(
                id="particle_count",
                name="Particle Count",
                description="Number of particles to simulate",
                min=100,
                max=1_000_000,
                default=100_000,
            ),
            FloatParameter(
                id="gravity",
                name="Gravity",
                description="Gravitational acceleration",
                min=0.0,
                max=30.0,
                default=9.8,
                step=0.1,
                unit="m/s²",
            ),
            FloatParameter(
                id="bounds",
                name="Bounds",
                description="Size of the simulation boundary",
                min=10.0,
                max=200.0,
                default=50.0,
                step=1.0,
                unit="m",
            ),
            FloatParameter(
                id="speed",
                name="Speed Multiplier",
                description="Time scale for simulation",
                min=0.1,
                max=5.0,
                default=1.0,
                step=0.1,
                unit=None,
            ),
            BoolParameter(
                id="paused",
                name="Paused",
                description="Pause the simulation",
                default=False,
            ),
        ]

    def create(self) -> ParticleSystem:
        return ParticleSystem()