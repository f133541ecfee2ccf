"""Wave propagation in the ripple tank and the systems that drive it each frame."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from .ripple_model import (
    GRID_HEIGHT,
    GRID_SCALE,
    GRID_WIDTH,
    ColorScheme,
    ObstacleType,
    RippleTankConfig,
    SimulationStats,
    ToolType,
    UIState,
    WaveField,
    WaveSource,
    WaveSourceType,
    Waveform,
)
from .ripple_scene import (
    DATA_PANEL_HEIGHT,
    INSPECTOR_PANEL_WIDTH,
    TOOLBOX_PANEL_WIDTH,
    TOP_BAR_HEIGHT,
    Entity,
    Scene,
)
from .vector import Vec2

WAVE_SPEED_FACTOR = 0.4
MAX_HEIGHT = 5.0
BOUNDARY_ABSORPTION = 0.5
LINE_HALF_LENGTH = 20
ARRAY_SPACING = 8
ARRAY_PHASE_STEP = 0.2
PULSE_DUTY = 0.1
OBSTACLE_RGB = (60, 60, 70)
CAMERA_PADDING = 1.1
MIN_VIEWPORT = 100.0
WRAP_MARGIN = 10.0

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _to_i32(value: float) -> int:
    """Truncate towards zero, saturating at the 32-bit range; NaN becomes 0."""
    if math.isnan(value):
        return 0
    return int(min(max(value, _I32_MIN), _I32_MAX))


def _to_index(value: float) -> int:
    """Truncate towards zero, saturating negatives and NaN at zero."""
    if not value > 0.0:
        return 0
    if math.isinf(value):
        return 2**63 - 1
    return int(value)


def _to_u8(values: np.ndarray) -> np.ndarray:
    """Saturating, truncating conversion of floats to bytes; NaN becomes 0."""
    cleaned = np.nan_to_num(np.asarray(values, dtype=float), nan=0.0)
    return np.clip(cleaned, 0.0, 255.0).astype(np.uint8)


# ══════════════════════════════════════════════════════════════════════════════
# Camera
# ══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class CameraFit:
    """Orthographic zoom and camera offset that fit the grid into the free viewport."""

    scale: float
    x: float
    y: float


def fit_camera(
    window_width: float, window_height: float, show_data_panel: bool
) -> CameraFit:
    """Fit the whole tank into the space the side, top and bottom panels leave."""
    available_w = window_width - (TOOLBOX_PANEL_WIDTH + INSPECTOR_PANEL_WIDTH)
    available_h = window_height - TOP_BAR_HEIGHT
    if show_data_panel:
        available_h -= DATA_PANEL_HEIGHT
    available_w = max(available_w, MIN_VIEWPORT)
    available_h = max(available_h, MIN_VIEWPORT)

    grid_w = GRID_WIDTH * GRID_SCALE
    grid_h = GRID_HEIGHT * GRID_SCALE
    scale = max(grid_w / available_w, grid_h / available_h) * CAMERA_PADDING

    offset_x = (TOOLBOX_PANEL_WIDTH - INSPECTOR_PANEL_WIDTH) / 2.0
    data_h = DATA_PANEL_HEIGHT if show_data_panel else 0.0
    offset_y = -(TOP_BAR_HEIGHT - data_h) / 2.0
    return CameraFit(scale=scale, x=-offset_x * scale, y=offset_y * scale)


# ══════════════════════════════════════════════════════════════════════════════
# Colouring
# ══════════════════════════════════════════════════════════════════════════════


def hsl_to_rgb(h: int, s: int, l: int) -> tuple[int, int, int]:
    """Convert hue in degrees and saturation, lightness in percent to 8-bit RGB."""
    hue = h / 360.0
    sat = s / 100.0
    light = l / 100.0

    c = (1.0 - abs(2.0 * light - 1.0)) * sat
    x = c * (1.0 - abs(math.fmod(hue * 6.0, 2.0) - 1.0))
    m = light - c / 2.0

    sector = min(_to_index(hue * 6.0), 255)
    if sector == 0:
        r, g, b = c, x, 0.0
    elif sector == 1:
        r, g, b = x, c, 0.0
    elif sector == 2:
        r, g, b = 0.0, c, x
    elif sector == 3:
        r, g, b = 0.0, x, c
    elif sector == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    red, green, blue = _to_u8(np.array([(r + m), (g + m), (b + m)]) * 255.0)
    return int(red), int(green), int(blue)


_PHASE_PALETTE = np.array([hsl_to_rgb(hue, 80, 50) for hue in range(361)], dtype=np.uint8)


def colorize(field: WaveField, scheme: ColorScheme) -> np.ndarray:
    """RGBA image of the field, shape (height, width, 4), walls drawn in grey."""
    value = field.current.reshape(field.height, field.width)
    walls = field.obstacle_map.reshape(field.height, field.width) == 0.0
    rgb = np.zeros((field.height, field.width, 3), dtype=np.uint8)

    with np.errstate(invalid="ignore"):
        if scheme is ColorScheme.DEEP_OCEAN:
            v = np.clip((value + 1.0) * 0.5, 0.0, 1.0)
            rgb[..., 0] = _to_u8(20.0 + v * 40.0)
            rgb[..., 1] = _to_u8(40.0 + v * 80.0)
            rgb[..., 2] = _to_u8(80.0 + v * 175.0)
        elif scheme is ColorScheme.SCIENTIFIC:
            v = np.clip((value + 1.0) * 0.5, 0.0, 1.0)
            low = v < 0.5
            t_low = v * 2.0
            t_high = (v - 0.5) * 2.0
            rgb[..., 0] = np.where(low, _to_u8(255.0 * (1.0 - t_low)), 0)
            rgb[..., 1] = np.where(
                low, _to_u8(255.0 * t_low), _to_u8(255.0 * (1.0 - t_high))
            )
            rgb[..., 2] = np.where(low, 0, _to_u8(255.0 * t_high))
        elif scheme is ColorScheme.PHASE_COLOR:
            hue = (np.arctan2(value, 0.5) + math.pi) / math.tau * 360.0
            hue = np.clip(np.nan_to_num(hue, nan=0.0), 0.0, 360.0).astype(np.int64)
            rgb[...] = _PHASE_PALETTE[hue]
        else:
            gray = _to_u8(np.clip((value + 1.0) * 0.5 * 255.0, 0.0, 255.0))
            rgb[...] = gray[..., None]

    rgb[walls] = OBSTACLE_RGB
    alpha = np.full((field.height, field.width, 1), 255, dtype=np.uint8)
    return np.concatenate([rgb, alpha], axis=2)


# ══════════════════════════════════════════════════════════════════════════════
# Obstacles and sources
# ══════════════════════════════════════════════════════════════════════════════


def _fill(
    grid: np.ndarray,
    center_x: int,
    center_y: int,
    dxs: np.ndarray,
    dys: np.ndarray,
    value: float,
) -> None:
    height, width = grid.shape
    xs = center_x + dxs
    ys = center_y + dys
    xs = xs[(xs >= 0) & (xs < width)]
    ys = ys[(ys >= 0) & (ys < height)]
    if xs.size and ys.size:
        grid[np.ix_(ys, xs)] = value


def rasterize_obstacles(field: WaveField, entities: Iterable[Entity]) -> None:
    """Redraw the speed map from the obstacles among the entities."""
    field.clear_obstacles()
    grid = field.obstacle_map.reshape(field.height, field.width)
    half_width = field.width / 2.0
    half_height = field.height / 2.0

    for entity in entities:
        obstacle = entity.obstacle
        if obstacle is None:
            continue
        center_x = _to_i32(entity.position.x / GRID_SCALE + half_width)
        center_y = _to_i32(entity.position.y / GRID_SCALE + half_height)
        half_w = _to_i32(obstacle.width / GRID_SCALE / 2.0)
        half_h = _to_i32(obstacle.height / GRID_SCALE / 2.0)
        dxs = np.arange(-half_w, half_w + 1)
        dys = np.arange(-half_h, half_h + 1)

        kind = obstacle.obstacle_type
        if kind is ObstacleType.REFLECTOR:
            _fill(grid, center_x, center_y, dxs, dys, 0.0)
        elif kind is ObstacleType.SINGLE_SLIT:
            slit_half = _to_i32(obstacle.slit_width / GRID_SCALE / 2.0)
            _fill(grid, center_x, center_y, dxs[np.abs(dxs) > slit_half], dys, 0.0)
        elif kind is ObstacleType.DOUBLE_SLIT:
            slit_half = _to_i32(obstacle.slit_width / GRID_SCALE / 2.0)
            sep_half = _to_i32(obstacle.slit_separation / GRID_SCALE / 2.0)
            in_slit = (np.abs(dxs - sep_half) <= slit_half) | (
                np.abs(dxs + sep_half) <= slit_half
            )
            _fill(grid, center_x, center_y, dxs[~in_slit], dys, 0.0)
        else:
            if obstacle.refractive_index == 0.0:
                raise ValueError("refractive index must be non-zero")
            speed_factor = 1.0 / obstacle.refractive_index
            _fill(grid, center_x, center_y, dxs, dys, speed_factor)


def _drive(source: WaveSource, t: float) -> float:
    argument = math.tau * source.frequency * t + source.phase
    if source.waveform is Waveform.SINE:
        return source.amplitude * math.sin(argument)
    if source.waveform is Waveform.SQUARE:
        level = math.sin(argument)
        if math.isnan(level):
            return math.nan
        return source.amplitude * math.copysign(1.0, level)
    cycle = math.fmod(source.frequency * t + source.phase / math.tau, 1.0)
    return source.amplitude if cycle < PULSE_DUTY else 0.0


def apply_wave_sources(field: WaveField, entities: Iterable[Entity], t: float) -> None:
    """Force the water height at every enabled source for time ``t``."""
    half_width = field.width / 2.0
    half_height = field.height / 2.0
    width, height = field.width, field.height

    for entity in entities:
        source = entity.wave_source
        if source is None or not source.enabled:
            continue
        grid_x = _to_index(entity.position.x / GRID_SCALE + half_width)
        grid_y = _to_index(entity.position.y / GRID_SCALE + half_height)
        if grid_y >= height:
            continue
        row = grid_y * width
        kind = source.source_type

        if kind in (WaveSourceType.POINT, WaveSourceType.MOVING):
            if grid_x < width:
                field.current[row + grid_x] = _drive(source, t)
        elif kind is WaveSourceType.LINE:
            start = max(grid_x - LINE_HALF_LENGTH, 0)
            xs = start + np.arange(LINE_HALF_LENGTH * 2)
            xs = xs[xs < width]
            field.current[row + xs] = _drive(source, t)
        else:
            count = source.array_count
            total_w = (count - 1) * ARRAY_SPACING
            start = max(grid_x - total_w // 2, 0)
            for i in range(count):
                x = start + i * ARRAY_SPACING
                if x < width:
                    field.current[row + x] = source.amplitude * math.sin(
                        math.tau * source.frequency * t
                        + source.phase
                        + i * ARRAY_PHASE_STEP
                    )


def step_wave_field(field: WaveField, config: RippleTankConfig, dt: float) -> None:
    """Advance the wave equation one finite-difference step and the clock by ``dt``."""
    if config.paused:
        return
    config.accumulated_time += dt * config.time_scale

    width, height = field.width, field.height
    c2 = (config.wave_speed * WAVE_SPEED_FACTOR) ** 2
    cur = field.current.reshape(height, width)
    prev = field.previous.reshape(height, width)
    obstacles = field.obstacle_map.reshape(height, width)

    nxt = np.zeros((height, width))
    centre = cur[1:-1, 1:-1]
    laplacian = (
        cur[1:-1, :-2] + cur[1:-1, 2:] + cur[:-2, 1:-1] + cur[2:, 1:-1] - 4.0 * centre
    )
    speed = obstacles[1:-1, 1:-1]
    with np.errstate(invalid="ignore", over="ignore"):
        updated = config.damping * (
            2.0 * centre - prev[1:-1, 1:-1] + c2 * speed * speed * laplacian
        )
        updated = np.clip(updated, -MAX_HEIGHT, MAX_HEIGHT)
    nxt[1:-1, 1:-1] = np.where(speed == 0.0, 0.0, updated)

    nxt[0, :] *= BOUNDARY_ABSORPTION
    nxt[-1, :] *= BOUNDARY_ABSORPTION
    nxt[:, 0] *= BOUNDARY_ABSORPTION
    nxt[:, -1] *= BOUNDARY_ABSORPTION

    field.previous = field.current
    field.current = nxt.reshape(-1)


# ══════════════════════════════════════════════════════════════════════════════
# The running tank
# ══════════════════════════════════════════════════════════════════════════════


class RippleTank:
    """A ripple tank with its scene, wave grid, settings and interaction state."""

    def __init__(
        self,
        config: Optional[RippleTankConfig] = None,
        scene: Optional[Scene] = None,
        field: Optional[WaveField] = None,
    ) -> None:
        self.config = config if config is not None else RippleTankConfig()
        self.scene = scene if scene is not None else Scene()
        self.field = field if field is not None else WaveField()
        self.ui = UIState()
        self.stats = SimulationStats()

    def handle_key(self, key: str) -> bool:
        """Space pauses, C clears the waves, G toggles the grid; True if handled."""
        name = key.lower()
        if name in (" ", "space"):
            self.config.paused = not self.config.paused
        elif name == "c":
            self.field.clear()
        elif name == "g":
            self.config.show_grid = not self.config.show_grid
        else:
            return False
        return True

    def press(self, position: Vec2) -> Optional[Entity]:
        """Left press in the tank: pick an object, or place one with the current tool."""
        tool = self.ui.selected_tool
        if tool is not ToolType.SELECT:
            return self.scene.spawn_tool(tool, position)
        found = self.scene.entity_at(position)
        self.ui.selected_entity = found.handle if found is not None else None
        if found is not None:
            self.ui.dragging = found.handle
            self.ui.drag_offset = found.position - position
        return found

    def drag(self, position: Vec2) -> None:
        """Move the object being dragged so it follows the pointer."""
        if self.ui.dragging is None:
            return
        entity = self.scene.entities.get(self.ui.dragging)
        if entity is None or entity.scene_object.locked:
            return
        entity.position = position + self.ui.drag_offset

    def release(self) -> None:
        """End any drag."""
        self.ui.dragging = None

    def right_click(self) -> None:
        """Clear the selection."""
        self.ui.selected_entity = None

    def update_moving_sources(self, dt: float) -> None:
        """Move travelling sources, wrapping them to the far side at the edges."""
        if self.config.paused:
            return
        dt *= self.config.time_scale
        bounds_x = GRID_WIDTH / 2.0 * GRID_SCALE
        bounds_y = GRID_HEIGHT / 2.0 * GRID_SCALE
        for entity in self.scene:
            if entity.moving is None:
                continue
            x = entity.position.x + entity.moving.velocity.x * dt
            y = entity.position.y + entity.moving.velocity.y * dt
            if abs(x) > bounds_x:
                x = -math.copysign(1.0, x) * (bounds_x - WRAP_MARGIN)
            if abs(y) > bounds_y:
                y = -math.copysign(1.0, y) * (bounds_y - WRAP_MARGIN)
            entity.position = Vec2(x, y)

    def update_probes(self) -> None:
        """Record the wave height under every probe."""
        for entity in self.scene:
            if entity.probe is not None:
                entity.probe.record(self.field.sample(entity.position))

    def update_stats(self, dt: float) -> None:
        """Refresh frame rate, clock, wave energy and the two-probe phase estimate."""
        self.stats.fps = 1.0 / dt if dt != 0.0 else math.inf
        self.stats.simulation_time = self.config.accumulated_time
        current, previous = self.field.current, self.field.previous
        self.stats.wave_energy = float(
            np.sum((current - previous) ** 2 + current**2)
        )

        probes = [entity.probe for entity in self.scene if entity.probe is not None]
        if len(probes) < 2:
            self.stats.probe_phase_diff = None
            return
        first, second = probes[0].history, probes[1].history
        if len(first) > 10 and len(second) > 10:
            length = min(len(first), len(second))
            correlation = sum(
                a * b
                for a, b in zip(first[length - 10 : length], second[length - 10 : length])
            )
            self.stats.probe_phase_diff = math.atan2(correlation, 1.0)

    def render_image(self) -> np.ndarray:
        """RGBA image of the water in the current colour scheme."""
        return colorize(self.field, self.config.color_scheme)

    def step(self, dt: float) -> None:
        """Run one frame of the simulation."""
        self.update_moving_sources(dt)
        entities = list(self.scene)
        rasterize_obstacles(self.field, entities)
        if not self.config.paused:
            apply_wave_sources(self.field, entities, self.config.accumulated_time)
        step_wave_field(self.field, self.config, dt)
        self.update_probes()
        self.update_stats(dt)