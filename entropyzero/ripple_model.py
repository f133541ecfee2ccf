"""State of the ripple tank: the wave grid, settings, tools and scene components."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import numpy as np

from .color import Color
from .vector import Vec2

GRID_WIDTH = 640
GRID_HEIGHT = 400
GRID_SCALE = 2.0
MAX_PROBE_HISTORY = 512


def _grid_coordinate(value: float) -> int:
    """Truncate towards zero, saturating negatives and NaN at zero."""
    if not value > 0.0:
        return 0
    if math.isinf(value):
        return 2**63 - 1
    return int(value)


class WaveField:
    """Finite-difference grid of wave heights, stored row by row.

    ``obstacle_map`` holds a speed factor per cell: 1 for open water, 0 for a
    wall and a fraction inside slower media.
    """

    def __init__(self, width: int = GRID_WIDTH, height: int = GRID_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("wave field dimensions must be positive")
        self.width = width
        self.height = height
        size = width * height
        self.current = np.zeros(size)
        self.previous = np.zeros(size)
        self.obstacle_map = np.ones(size)

    def clear(self) -> None:
        """Flatten the water surface."""
        self.current.fill(0.0)
        self.previous.fill(0.0)

    def clear_obstacles(self) -> None:
        """Remove every obstacle from the speed map."""
        self.obstacle_map.fill(1.0)

    def idx(self, x: int, y: int) -> int:
        """Flat index of cell (x, y)."""
        return y * self.width + x

    def sample(self, world_pos: Vec2) -> float:
        """Wave height under a world position, or 0 off the grid."""
        grid_x = _grid_coordinate(world_pos.x / GRID_SCALE + self.width / 2.0)
        grid_y = _grid_coordinate(world_pos.y / GRID_SCALE + self.height / 2.0)
        if grid_x < self.width and grid_y < self.height:
            return float(self.current[self.idx(grid_x, grid_y)])
        return 0.0


class ColorScheme(Enum):
    DEEP_OCEAN = "Deep Ocean"
    SCIENTIFIC = "Scientific"
    PHASE_COLOR = "Phase Color"
    GRAYSCALE = "Grayscale"


@dataclass
class RippleTankConfig:
    """Global settings of the ripple tank."""

    wave_speed: float = 1.0
    damping: float = 0.995
    time_scale: float = 1.0
    paused: bool = False
    show_grid: bool = True
    color_scheme: ColorScheme = ColorScheme.DEEP_OCEAN
    accumulated_time: float = 0.0


class ToolType(Enum):
    SELECT = "select"
    POINT_SOURCE = "point_source"
    LINE_SOURCE = "line_source"
    PHASED_ARRAY = "phased_array"
    MOVING_SOURCE = "moving_source"
    REFLECTOR = "reflector"
    SINGLE_SLIT = "single_slit"
    DOUBLE_SLIT = "double_slit"
    REFRACTION_BLOCK = "refraction_block"
    PROBE = "probe"
    RULER = "ruler"


@dataclass
class UIState:
    """Interaction state; entities are referred to by their scene handles."""

    selected_tool: ToolType = ToolType.SELECT
    selected_entity: Optional[int] = None
    dragging: Optional[int] = None
    drag_offset: Vec2 = field(default_factory=lambda: Vec2.ZERO)
    show_data_panel: bool = False


@dataclass
class SimulationStats:
    """Figures shown in the status displays."""

    fps: float = 0.0
    simulation_time: float = 0.0
    wave_energy: float = 0.0
    probe_phase_diff: Optional[float] = None


class WaveSourceType(Enum):
    POINT = "point"
    LINE = "line"
    PHASED_ARRAY = "phased_array"
    MOVING = "moving"


class Waveform(Enum):
    SINE = "Sine"
    SQUARE = "Square"
    PULSE = "Pulse"


@dataclass
class WaveSource:
    """An oscillator driving the water; ``array_count`` applies to phased arrays."""

    source_type: WaveSourceType = WaveSourceType.POINT
    frequency: float = 2.0
    amplitude: float = 1.0
    phase: float = 0.0
    enabled: bool = True
    waveform: Waveform = Waveform.SINE
    array_count: int = 5

    def __post_init__(self) -> None:
        if self.source_type is WaveSourceType.PHASED_ARRAY and self.array_count < 1:
            raise ValueError("a phased array needs at least one element")


class MovementPath(Enum):
    LINEAR = "linear"
    CIRCULAR = "circular"
    CUSTOM = "custom"


@dataclass
class MovingSource:
    """Motion of a source across the tank, in world units per second."""

    velocity: Vec2
    path: MovementPath = MovementPath.LINEAR


class ObstacleType(Enum):
    REFLECTOR = "Reflector"
    SINGLE_SLIT = "Single Slit"
    DOUBLE_SLIT = "Double Slit"
    REFRACTION_BLOCK = "Refraction Block"


@dataclass
class Obstacle:
    """A barrier or a slower medium placed in the tank; sizes in world units."""

    obstacle_type: ObstacleType = ObstacleType.REFLECTOR
    width: float = 50.0
    height: float = 5.0
    rotation: float = 0.0
    slit_width: float = 10.0
    slit_separation: float = 30.0
    refractive_index: float = 1.5


@dataclass
class Probe:
    """An oscilloscope probe recording the wave height where it stands."""

    label: str
    color: Color
    history: list[float] = field(default_factory=list)

    def record(self, value: float) -> None:
        """Append a reading, keeping only the most recent ones."""
        self.history.append(value)
        if len(self.history) > MAX_PROBE_HISTORY:
            del self.history[:-MAX_PROBE_HISTORY]


@dataclass
class Ruler:
    """A measuring segment, relative to the ruler's position."""

    start: Vec2
    end: Vec2

    def length(self) -> float:
        """Distance between the ends."""
        return (self.end - self.start).length()


@dataclass
class SceneObject:
    """Identity and editing flags of a placed object."""

    id: int
    selected: bool = False
    locked: bool = False