"""Objects placed in the ripple tank and the catalogue entry of the simulation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Union

from .color import Color, srgb, srgba
from .parameters import BoolParameter, FloatParameter, ParameterDef
from .ripple_model import (
    MovementPath,
    MovingSource,
    Obstacle,
    ObstacleType,
    Probe,
    Ruler,
    SceneObject,
    ToolType,
    WaveSource,
    WaveSourceType,
)
from .simulation import Simulation
from .taxonomy import Domain, SimulationCategory, WavePhysicsSubdomain
from .vector import Vec2

TOOLBOX_PANEL_WIDTH = 180.0
INSPECTOR_PANEL_WIDTH = 220.0
DATA_PANEL_HEIGHT = 150.0
TOP_BAR_HEIGHT = 40.0

PICK_RADIUS = 15.0


@dataclass(frozen=True)
class Sprite:
    """How an object is drawn: a coloured rectangle of the given size."""

    color: Color
    size: Vec2


@dataclass(eq=False)
class Entity:
    """A placed object with whichever components it carries."""

    handle: int
    position: Vec2
    z: float
    sprite: Sprite
    scene_object: SceneObject
    wave_source: Optional[WaveSource] = None
    moving: Optional[MovingSource] = None
    obstacle: Optional[Obstacle] = None
    probe: Optional[Probe] = None
    ruler: Optional[Ruler] = None


class Scene:
    """The objects in the tank, in the order they were placed."""

    def __init__(self, with_default_source: bool = True) -> None:
        self.entities: dict[int, Entity] = {}
        self.object_counter = 0
        self._next_handle = 0
        if with_default_source:
            self._spawn(
                Vec2.ZERO,
                1.0,
                Sprite(srgb(1.0, 0.3, 0.3), Vec2(12.0, 12.0)),
                object_id=0,
                wave_source=WaveSource(),
            )

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self.entities.values()))

    def __len__(self) -> int:
        return len(self.entities)

    def _spawn(
        self,
        position: Vec2,
        z: float,
        sprite: Sprite,
        object_id: Optional[int] = None,
        **components: Any,
    ) -> Entity:
        if object_id is None:
            self.object_counter += 1
            object_id = self.object_counter
        handle = self._next_handle
        self._next_handle += 1
        entity = Entity(
            handle=handle,
            position=position,
            z=z,
            sprite=sprite,
            scene_object=SceneObject(object_id),
            **components,
        )
        self.entities[handle] = entity
        return entity

    def spawn_tool(self, tool: ToolType, position: Vec2) -> Entity:
        """Place the object a placement tool creates."""
        spawners = {
            ToolType.POINT_SOURCE: self.spawn_point_source,
            ToolType.LINE_SOURCE: self.spawn_line_source,
            ToolType.PHASED_ARRAY: self.spawn_phased_array,
            ToolType.MOVING_SOURCE: self.spawn_moving_source,
            ToolType.REFLECTOR: self.spawn_reflector,
            ToolType.SINGLE_SLIT: self.spawn_single_slit,
            ToolType.DOUBLE_SLIT: self.spawn_double_slit,
            ToolType.REFRACTION_BLOCK: self.spawn_refraction_block,
            ToolType.PROBE: self.spawn_probe,
            ToolType.RULER: self.spawn_ruler,
        }
        try:
            spawner = spawners[tool]
        except KeyError:
            raise ValueError(f"{tool.name} does not place objects") from None
        return spawner(position)

    def spawn_point_source(self, position: Vec2) -> Entity:
        return self._spawn(
            position,
            1.0,
            Sprite(srgb(1.0, 0.3, 0.3), Vec2(12.0, 12.0)),
            wave_source=WaveSource(source_type=WaveSourceType.POINT),
        )

    def spawn_line_source(self, position: Vec2) -> Entity:
        return self._spawn(
            position,
            1.0,
            Sprite(srgb(1.0, 0.5, 0.2), Vec2(80.0, 8.0)),
            wave_source=WaveSource(source_type=WaveSourceType.LINE),
        )

    def spawn_phased_array(self, position: Vec2) -> Entity:
        return self._spawn(
            position,
            1.0,
            Sprite(srgb(0.8, 0.2, 0.8), Vec2(60.0, 12.0)),
            wave_source=WaveSource(
                source_type=WaveSourceType.PHASED_ARRAY, array_count=5
            ),
        )

    def spawn_moving_source(self, position: Vec2) -> Entity:
        return self._spawn(
            position,
            1.0,
            Sprite(srgb(0.2, 0.8, 0.4), Vec2(16.0, 10.0)),
            wave_source=WaveSource(source_type=WaveSourceType.MOVING),
            moving=MovingSource(Vec2(50.0, 0.0), MovementPath.LINEAR),
        )

    def spawn_reflector(self, position: Vec2) -> Entity:
        return self._spawn(
            position,
            1.0,
            Sprite(srgb(0.4, 0.4, 0.5), Vec2(80.0, 8.0)),
            obstacle=Obstacle(ObstacleType.REFLECTOR, width=80.0, height=8.0),
        )

    def spawn_single_slit(self, position: Vec2) -> Entity:
        return self._spawn(
            position,
            1.0,
            Sprite(srgb(0.3, 0.3, 0.6), Vec2(120.0, 8.0)),
            obstacle=Obstacle(
                ObstacleType.SINGLE_SLIT, width=120.0, height=8.0, slit_width=15.0
            ),
        )

    def spawn_double_slit(self, position: Vec2) -> Entity:
        return self._spawn(
            position,
            1.0,
            Sprite(srgb(0.3, 0.5, 0.6), Vec2(120.0, 8.0)),
            obstacle=Obstacle(
                ObstacleType.DOUBLE_SLIT,
                width=120.0,
                height=8.0,
                slit_width=10.0,
                slit_separation=30.0,
            ),
        )

    def spawn_refraction_block(self, position: Vec2) -> Entity:
        return self._spawn(
            position,
            0.5,
            Sprite(srgba(0.3, 0.6, 0.8, 0.5), Vec2(60.0, 60.0)),
            obstacle=Obstacle(
                ObstacleType.REFRACTION_BLOCK,
                width=60.0,
                height=60.0,
                refractive_index=1.5,
            ),
        )

    def spawn_probe(self, position: Vec2) -> Entity:
        object_id = self.object_counter + 1
        if object_id % 2 == 0:
            color = srgb(0.2, 0.6, 1.0)
        else:
            color = srgb(1.0, 0.4, 0.4)
        letter = chr((object_id % 256 + ord("A") - 1) % 256)
        return self._spawn(
            position,
            2.0,
            Sprite(color, Vec2(10.0, 10.0)),
            probe=Probe(f"Probe {letter}", color),
        )

    def spawn_ruler(self, position: Vec2) -> Entity:
        return self._spawn(
            position,
            2.0,
            Sprite(srgba(1.0, 1.0, 0.3, 0.8), Vec2(100.0, 5.0)),
            ruler=Ruler(Vec2(-50.0, 0.0), Vec2(50.0, 0.0)),
        )

    def despawn(self, entity: Union[Entity, int]) -> None:
        """Remove an object, given the entity or its handle."""
        handle = entity.handle if isinstance(entity, Entity) else entity
        try:
            del self.entities[handle]
        except KeyError:
            raise KeyError(f"no entity with handle {handle}") from None

    def entity_at(
        self, position: Vec2, radius: float = PICK_RADIUS
    ) -> Optional[Entity]:
        """The first placed object closer than ``radius`` to a point."""
        for entity in self.entities.values():
            if entity.position.distance(position) < radius:
                return entity
        return None


@dataclass
class _SceneDefaults:
    tools: tuple[ToolType, ...] = field(default_factory=tuple)


class RippleTankSimulation(Simulation):
    """Catalogue entry for the ripple tank."""

    id = "ripple_tank"
    name = "Ripple Tank"
    category = SimulationCategory(
        Domain.WAVE_PHYSICS, WavePhysicsSubdomain.MECHANICAL_WAVES
    )
    description = (
        "Professional ripple tank simulation for wave physics experiments. "
        "Features draggable wave sources, obstacles, slits for diffraction, "
        "and oscilloscope probes for quantitative analysis."
    )
    difficulty = 3
    tags = ("waves", "interference", "diffraction", "ripple", "huygen", "doppler")

    def parameters(self) -> list[ParameterDef]:
        return [
            FloatParameter(
                id="wave_speed",
                name="Wave Speed",
                description="Propagation speed of waves",
                min=0.1,
                max=5.0,
                default=1.0,
                step=0.1,
                unit="m/s",
            ),
            FloatParameter(
                id="damping",
                name="Damping",
                description="Energy dissipation rate (1.0 = no damping)",
                min=0.9,
                max=1.0,
                default=0.995,
                step=0.001,
                unit=None,
            ),
            FloatParameter(
                id="time_scale",
                name="Time Scale",
                description="Simulation speed multiplier",
                min=0.1,
                max=2.0,
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

    def create(self) -> Any:
        from .ripple_physics import RippleTank

        return RippleTank()