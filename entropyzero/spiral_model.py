"""State of the binary spiral simulation: sources, settings and the particle pool."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .color import Color
from .vector import Vec3

MAX_PARTICLES = 200_000
DEFAULT_ORBIT_RADIUS = 20.0
DEFAULT_EMISSION_RATE = 1000
DEFAULT_PARTICLE_LIFE = 300
DIRECTION_COUNT = 5000


@dataclass
class OrbitalSource:
    """A star circling the origin in the y = 0 plane."""

    index: int
    angle: float
    base_color: Color
    radius: float = DEFAULT_ORBIT_RADIUS
    velocity: Vec3 = field(default_factory=lambda: Vec3.ZERO)
    last_position: Optional[Vec3] = None

    def __post_init__(self) -> None:
        if self.last_position is None:
            self.last_position = self.current_position()

    def current_position(self) -> Vec3:
        """Position on the orbit for the current angle and radius."""
        return Vec3(
            math.cos(self.angle) * self.radius,
            0.0,
            math.sin(self.angle) * self.radius,
        )


@dataclass
class BinarySpiralConfig:
    """Settings of the binary spiral simulation."""

    orbit_speed: float = 1.5
    emission_rate: int = DEFAULT_EMISSION_RATE
    particle_speed: float = 2.0
    particle_life: int = DEFAULT_PARTICLE_LIFE
    paused: bool = False
    show_grid: bool = True
    show_orbit_ring: bool = True


@dataclass(frozen=True)
class SpiralParticle:
    """A snapshot of one slot of the particle pool."""

    position: Vec3 = Vec3.ZERO
    velocity: Vec3 = Vec3.ZERO
    color: tuple[float, float, float] = (0.0, 0.0, 0.0)
    life: int = 0
    active: bool = False


class ParticlePool:
    """A fixed-size ring of particle slots; new particles overwrite the oldest."""

    def __init__(self, capacity: int = MAX_PARTICLES) -> None:
        if capacity <= 0:
            raise ValueError("pool capacity must be positive")
        self.capacity = capacity
        self.positions = np.zeros((capacity, 3))
        self.velocities = np.zeros((capacity, 3))
        self.colors = np.zeros((capacity, 3))
        self.life = np.zeros(capacity, dtype=np.int64)
        self.active = np.zeros(capacity, dtype=bool)
        self.next_index = 0

    def __len__(self) -> int:
        return self.capacity

    def __getitem__(self, index: int) -> SpiralParticle:
        position = self.positions[index]
        velocity = self.velocities[index]
        color = self.colors[index]
        return SpiralParticle(
            position=Vec3(*map(float, position)),
            velocity=Vec3(*map(float, velocity)),
            color=(float(color[0]), float(color[1]), float(color[2])),
            life=int(self.life[index]),
            active=bool(self.active[index]),
        )

    def emit(
        self,
        position: Vec3,
        velocity: Vec3,
        color: tuple[float, float, float],
        life: int,
    ) -> None:
        """Activate the next slot with the given state."""
        if life < 0:
            raise ValueError("particle life cannot be negative")
        i = self.next_index
        self.positions[i] = tuple(position)
        self.velocities[i] = tuple(velocity)
        self.colors[i] = tuple(color)
        self.life[i] = life
        self.active[i] = True
        self.next_index = (i + 1) % self.capacity

    def emit_many(
        self,
        positions: np.ndarray,
        velocities: np.ndarray,
        colors: np.ndarray,
        life: int,
    ) -> None:
        """Emit a batch of particles in order, as repeated ``emit`` calls would."""
        if life < 0:
            raise ValueError("particle life cannot be negative")
        positions = np.asarray(positions, dtype=float).reshape(-1, 3)
        velocities = np.asarray(velocities, dtype=float).reshape(-1, 3)
        colors = np.asarray(colors, dtype=float).reshape(-1, 3)
        count = len(positions)
        if len(velocities) != count or len(colors) != count:
            raise ValueError("batch arrays differ in length")
        if count == 0:
            return
        if count > self.capacity:
            skipped = count - self.capacity
            self.next_index = (self.next_index + skipped) % self.capacity
            positions = positions[skipped:]
            velocities = velocities[skipped:]
            colors = colors[skipped:]
            count = self.capacity
        slots = (self.next_index + np.arange(count)) % self.capacity
        self.positions[slots] = positions
        self.velocities[slots] = velocities
        self.colors[slots] = colors
        self.life[slots] = life
        self.active[slots] = True
        self.next_index = (self.next_index + count) % self.capacity

    def active_count(self) -> int:
        """Number of live particles."""
        return int(np.count_nonzero(self.active))


@dataclass
class DragState:
    """Which source the pointer is dragging, and where on the ground it points."""

    dragging_source: Optional[int] = None
    drag_target: Vec3 = field(default_factory=lambda: Vec3.ZERO)


class RandomDirections:
    """A table of uniformly distributed unit vectors for spherical emission."""

    def __init__(
        self,
        count: int = DIRECTION_COUNT,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        if count <= 0:
            raise ValueError("direction count must be positive")
        generator = rng if rng is not None else np.random.default_rng()
        u = generator.uniform(-1.0, 1.0, count)
        theta = generator.uniform(0.0, math.tau, count)
        r = np.sqrt(1.0 - u * u)
        self.directions = np.column_stack([r * np.cos(theta), u, r * np.sin(theta)])

    def __len__(self) -> int:
        return len(self.directions)

    def get(self, rng: np.random.Generator) -> Vec3:
        """One direction picked at random from the table."""
        index = int(rng.integers(len(self.directions)))
        return Vec3(*map(float, self.directions[index]))

    def sample(self, rng: np.random.Generator, count: int) -> np.ndarray:
        """``count`` directions picked at random, as a (count, 3) array."""
        return self.directions[rng.integers(0, len(self.directions), count)]