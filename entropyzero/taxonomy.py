"""Classification of simulations by scientific domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ScienceBranch(Enum):
    """Top-level branch of science."""

    PHYSICAL = "Physical Sciences"
    LIFE = "Life Sciences"
    SOCIAL = "Social Sciences"
    FORMAL = "Formal Sciences"

    def display_name(self) -> str:
        """Human-readable name."""
        return self.value


class ClassicalMechanicsSubdomain(Enum):
    KINEMATICS = "kinematics"
    DYNAMICS = "dynamics"
    FLUID_DYNAMICS = "fluid_dynamics"
    RIGID_BODY = "rigid_body"
    ELASTICITY = "elasticity"


class ElectromagnetismSubdomain(Enum):
    ELECTROSTATICS = "electrostatics"
    MAGNETOSTATICS = "magnetostatics"
    ELECTROMAGNETIC_WAVES = "electromagnetic_waves"
    CIRCUITS = "circuits"


class WavePhysicsSubdomain(Enum):
    MECHANICAL_WAVES = "mechanical_waves"
    INTERFERENCE = "interference"
    STANDING_WAVES = "standing_waves"
    DOPPLER_EFFECT = "doppler_effect"


class OpticsSubdomain(Enum):
    GEOMETRIC_OPTICS = "geometric_optics"
    WAVE_OPTICS = "wave_optics"
    POLARIZATION = "polarization"
    GUIDED_OPTICS = "guided_optics"


class ThermodynamicsSubdomain(Enum):
    HEAT_TRANSFER = "heat_transfer"
    STATISTICAL_MECHANICS = "statistical_mechanics"
    PHASE_TRANSITIONS = "phase_transitions"


class RelativisticSubdomain(Enum):
    SPECIAL_RELATIVITY = "special_relativity"
    GENERAL_RELATIVITY = "general_relativity"
    BLACK_HOLES = "black_holes"


class QuantumSubdomain(Enum):
    WAVE_FUNCTIONS = "wave_functions"
    TUNNELING = "tunneling"
    SPIN_SYSTEMS = "spin_systems"


class Domain(Enum):
    """Scientific domain; the value is its display name."""

    CLASSICAL_MECHANICS = "Classical Mechanics"
    ELECTROMAGNETISM = "Electromagnetism"
    WAVE_PHYSICS = "Wave Physics"
    OPTICS = "Optics"
    THERMODYNAMICS = "Thermodynamics"
    RELATIVISTIC_PHYSICS = "Relativistic Physics"
    QUANTUM_MECHANICS = "Quantum Mechanics"
    EPIDEMIOLOGY = "Epidemiology"
    ECOLOGY = "Ecology"
    NEUROSCIENCE = "Neuroscience"
    ECONOMICS = "Economics"
    GAME_THEORY = "Game Theory"
    SOCIAL_NETWORKS = "Social Networks"
    CELLULAR_AUTOMATA = "Cellular Automata"
    CHAOS_THEORY = "Chaos Theory"
    FRACTALS = "Fractals"


_SUBDOMAIN_TYPES: dict[Domain, type[Enum]] = {
    Domain.CLASSICAL_MECHANICS: ClassicalMechanicsSubdomain,
    Domain.ELECTROMAGNETISM: ElectromagnetismSubdomain,
    Domain.WAVE_PHYSICS: WavePhysicsSubdomain,
    Domain.OPTICS: OpticsSubdomain,
    Domain.THERMODYNAMICS: ThermodynamicsSubdomain,
    Domain.RELATIVISTIC_PHYSICS: RelativisticSubdomain,
    Domain.QUANTUM_MECHANICS: QuantumSubdomain,
}

_BRANCHES: dict[Domain, ScienceBranch] = {
    **{domain: ScienceBranch.PHYSICAL for domain in _SUBDOMAIN_TYPES},
    Domain.EPIDEMIOLOGY: ScienceBranch.LIFE,
    Domain.ECOLOGY: ScienceBranch.LIFE,
    Domain.NEUROSCIENCE: ScienceBranch.LIFE,
    Domain.ECONOMICS: ScienceBranch.SOCIAL,
    Domain.GAME_THEORY: ScienceBranch.SOCIAL,
    Domain.SOCIAL_NETWORKS: ScienceBranch.SOCIAL,
    Domain.CELLULAR_AUTOMATA: ScienceBranch.FORMAL,
    Domain.CHAOS_THEORY: ScienceBranch.FORMAL,
    Domain.FRACTALS: ScienceBranch.FORMAL,
}


@dataclass(frozen=True)
class SimulationCategory:
    """A domain, plus a subdomain for the physical-science domains that have one."""

    domain: Domain
    subdomain: Optional[Enum] = None

    def __post_init__(self) -> None:
        expected = _SUBDOMAIN_TYPES.get(self.domain)
        if expected is None:
            if self.subdomain is not None:
                raise TypeError(f"{self.domain.value} takes no subdomain")
        elif not isinstance(self.subdomain, expected):
            raise TypeError(
                f"{self.domain.value} needs a {expected.__name__}, "
                f"got {self.subdomain!r}"
            )

    def display_name(self) -> str:
        """Human-readable name of the domain."""
        return self.domain.value

    def science_branch(self) -> ScienceBranch:
        """The branch of science the domain belongs to."""
        return _BRANCHES[self.domain]