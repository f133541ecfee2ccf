"""The contract every simulation fulfils, and its catalogue metadata."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from .parameters import ParameterDef
from .taxonomy import SimulationCategory


class Simulation(ABC):
    """A simulation the platform can list, configure and start.

    Subclasses set ``id``, ``name``, ``category`` and ``description``; the
    remaining attributes have defaults.
    """

    id: ClassVar[str]
    name: ClassVar[str]
    category: ClassVar[SimulationCategory]
    description: ClassVar[str]
    thumbnail: ClassVar[Optional[str]] = None
    difficulty: ClassVar[int] = 3
    tags: ClassVar[tuple[str, ...]] = ()

    @abstractmethod
    def parameters(self) -> list[ParameterDef]:
        """Schema of the parameters the user can adjust."""

    @abstractmethod
    def create(self) -> Any:
        """Build a fresh running instance of the simulation."""


@dataclass(frozen=True)
class SimulationMetadata:
    """Catalogue entry for a simulation."""

    id: str
    name: str
    category: SimulationCategory
    description: str
    difficulty: int
    tags: tuple[str, ...]
    thumbnail: Optional[str]


def metadata_of(simulation: Simulation) -> SimulationMetadata:
    """Collect the catalogue entry for a simulation."""
    return SimulationMetadata(
        id=simulation.id,
        name=simulation.name,
        category=simulation.category,
        description=simulation.description,
        difficulty=simulation.difficulty,
        tags=tuple(simulation.tags),
        thumbnail=simulation.thumbnail,
    )