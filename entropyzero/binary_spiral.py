"""Binary star system emitting particles that trace spiral density patterns."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from .color import Color, srgb
from .parameters import BoolParameter, FloatParameter, ParameterDef
from .simulation import Simulation
from .spiral_model import (
    DEFAULT_ORBIT_RADIUS,
    DIRECTION_COUNT,
    MAX_PARTICLES,
    BinarySpiralConfig,
    DragState,
    OrbitalSource,
    ParticlePool,
    RandomDirections,
)
from .taxonomy import Domain, RelativisticSubdomain, SimulationCategory
from .vector import Vec3

COLOR_SOURCE_A = srgb(0.67, 0.0, 1.0)
COLOR_SOURCE_B = srgb(1.0, 0.67, 0.0)
COLOR_FRONT = (0.0, 1.0, 1.0)
COLOR_BACK = (1.0, 0.0, 0.33)

GRID_SIZE = 300.0
GRID_DIVISIONS = 60
RING_SEGMENTS = 64
HIDDEN_POSITION = 99999.0
POINT_ALPHA = 0.8
PICK_DISTANCE = 8.0
MIN_ORBIT_RADIUS = 5.0
DRAG_EASING = 0.2
VELOCITY_GAIN = 5.0
MAX_JITTER = 1.5

Segment = tuple[tuple[float, float, float], tuple[float, float, float]]


def grid_lines(size: float, divisions: int) -> list[Segment]:
    """Line segments of a square ground grid centred on the origin."""
    if divisions <= 0:
        raise ValueError("grid needs at least one division")
    half = size / 2.0
    step = size / divisions
    segments: list[Segment] = []
    for i in range(divisions + 1):
        offset = -half + step * i
        segments.append(((offset, 0.0, -half), (offset, 0.0, half)))
        segments.append(((-half, 0.0, offset), (half, 0.0, offset)))
    return segments


def ring_lines(radius: float, segments: int) -> list[Segment]:
    """Line segments approximating a circle in the y = 0 plane."""
    if segments <= 0:
        raise ValueError("ring needs at least one segment")

    def point(i: int) -> tuple[float, float, float]:
        angle = i / segments * math.tau
        return (math.cos(angle) * radius, 0.0, math.sin(angle) * radius)

    return [(point(i), point(i + 1)) for i in range(segments)]


class BinarySpiral:
    """A running binary spiral: two orbiting sources and their particle cloud."""

    def __init__(
        self,
        config: Optional[BinarySpiralConfig] = None,
        rng: Optional[np.random.Generator] = None,
        capacity: int = MAX_PARTICLES,
        direction_count: int = DIRECTION_COUNT,
    ) -> None:
        self.config = config if config is not None else BinarySpiralConfig()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.pool = ParticlePool(capacity)
        self.drag = DragState()
        self.directions = RandomDirections(direction_count, self.rng)
        self.sources = [
            OrbitalSource(0, 0.0, COLOR_SOURCE_A, DEFAULT_ORBIT_RADIUS),
            OrbitalSource(1, math.pi, COLOR_SOURCE_B, DEFAULT_ORBIT_RADIUS),
        ]
        self.ring_scale = 1.0
        self._cloud_colors = np.tile([1.0, 1.0, 1.0, POINT_ALPHA], (capacity, 1))

    def handle_pointer(
        self,
        ray_origin: Vec3,
        ray_direction: Vec3,
        pressed: bool = False,
        released: bool = False,
    ) -> None:
        """Track the pointer ray; a press near a source starts dragging it."""
        direction = ray_direction.normalize_or_zero()
        if direction == Vec3.ZERO:
            raise ValueError("ray direction must be non-zero")
        if direction.y != 0.0:
            t = -ray_origin.y / direction.y
            if t > 0.0:
                self.drag.drag_target = ray_origin + direction * t

        if pressed:
            for source in self.sources:
                source_pos = source.current_position()
                along = (source_pos - ray_origin).dot(direction)
                closest = ray_origin + direction * along
                if (closest - source_pos).length() < PICK_DISTANCE:
                    self.drag.dragging_source = source.index
                    break

        if released:
            self.drag.dragging_source = None

    def update_orbital_sources(self, dt: float) -> None:
        """Advance the sources along their orbits, following any drag."""
        if self.config.paused:
            return
        max_radius = DEFAULT_ORBIT_RADIUS
        target = self.drag.drag_target
        for source in self.sources:
            if self.drag.dragging_source == source.index:
                dist = math.hypot(target.x, target.z)
                source.radius += (dist - source.radius) * DRAG_EASING
                source.radius = max(source.radius, MIN_ORBIT_RADIUS)
            source.angle += self.config.orbit_speed * dt
            new_pos = source.current_position()
            source.velocity = (new_pos - source.last_position) * VELOCITY_GAIN
            source.last_position = new_pos
            max_radius = max(max_radius, source.radius)
        self.ring_scale = max_radius / DEFAULT_ORBIT_RADIUS

    def emit_particles(self) -> None:
        """Emit a burst from each source, tinted by alignment with its motion."""
        if self.config.paused:
            return
        count = self.config.emission_rate
        if count <= 0:
            return
        for source in self.sources:
            vel_dir = np.array(source.velocity.normalize_or_zero().to_tuple())
            intensity = min(source.velocity.length() / 3.0, 1.0)
            base = np.array(_rgb(source.base_color))

            jitter = self.directions.sample(self.rng, count) * self.rng.uniform(
                0.0, MAX_JITTER, count
            )[:, None]
            positions = np.array(source.current_position().to_tuple()) + jitter

            dirs = self.directions.sample(self.rng, count)
            velocities = dirs * self.config.particle_speed

            alignment = dirs @ vel_dir
            targets = np.where(
                (alignment > 0.0)[:, None], np.array(COLOR_FRONT), np.array(COLOR_BACK)
            )
            t = (np.abs(alignment) * intensity)[:, None]
            colors = base + (targets - base) * t

            self.pool.emit_many(positions, velocities, colors, self.config.particle_life)

    def update_particles(self) -> None:
        """Move live particles one frame and retire those whose life runs out."""
        if self.config.paused:
            return
        pool = self.pool
        live = pool.active
        pool.positions[live] += pool.velocities[live]
        pool.life[live] = np.maximum(pool.life[live] - 1, 0)
        pool.active &= pool.life != 0

    def point_cloud(self) -> tuple[np.ndarray, np.ndarray]:
        """Vertex positions and RGBA colours for drawing the particle cloud.

        Inactive slots are parked far away and keep their last colour.
        """
        live = self.pool.active
        positions = np.full((self.pool.capacity, 3), HIDDEN_POSITION)
        positions[live] = self.pool.positions[live]
        self._cloud_colors[live, :3] = self.pool.colors[live]
        return positions, self._cloud_colors.copy()

    def step(self, dt: float) -> None:
        """Run one frame: orbit, emit, then move particles."""
        self.update_orbital_sources(dt)
        self.emit_particles()
        self.update_particles()


def _rgb(color: Color) -> tuple[float, float, float]:
    return (color.red, color.green, color.blue)


class BinarySpiralSimulation(Simulation):
    """Catalogue entry for the binary spiral."""

    id = "binary_spiral"
    name = "Binary Spiral"
    category = SimulationCategory(
        Domain.RELATIVISTIC_PHYSICS, RelativisticSubdomain.BLACK_HOLES
    )
    description = (
        "Binary star system with particle emission. Two orbiting sources emit particles "
        "in all directions, creating spiral density patterns. Brightness represents "
        "particle density through additive blending. Drag the stars to change orbit radius."
    )
    difficulty = 2
    tags = ("particles", "binary", "spiral", "density", "stars", "orbital")

    def parameters(self) -> list[ParameterDef]:
        return [
            FloatParameter(
                id="orbit_speed",
                name="Orbit Speed",
                description="Angular velocity of the orbiting sources",
                min=0.1,
                max=4.0,
                default=1.5,
                step=0.1,
                unit="rad/s",
            ),
            FloatParameter(
                id="emission_rate",
                name="Emission Rate",
                description="Particles emitted per source per frame",
                min=200.0,
                max=2000.0,
                default=1000.0,
                step=100.0,
                unit=None,
            ),
            FloatParameter(
                id="particle_speed",
                name="Particle Speed",
                description="Outward flow speed of particles",
                min=1.0,
                max=5.0,
                default=2.0,
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

    def create(self) -> BinarySpiral:
        return BinarySpiral()