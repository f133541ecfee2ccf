"""Command line entry point: list the simulations or run one headless."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .binary_spiral import BinarySpiral, BinarySpiralSimulation
from .particles import ParticleSystemSimulation
from .reports import spiral_stats_text, top_bar_text
from .ripple_physics import RippleTank
from .ripple_scene import RippleTankSimulation
from .simulation import Simulation

DEFAULT_SIMULATION = "binary_spiral"
DEFAULT_FRAMES = 60
DEFAULT_DT = 1.0 / 60.0

log = logging.getLogger("entropyzero")


def all_simulations() -> list[Simulation]:
    """Every simulation the platform offers."""
    return [
        ParticleSystemSimulation(),
        RippleTankSimulation(),
        BinarySpiralSimulation(),
    ]


def _build_parser(ids: list[str]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="entropyzero",
        description="Entropy Zero - Scientific Simulation Platform",
    )
    parser.add_argument(
        "simulation",
        nargs="?",
        default=DEFAULT_SIMULATION,
        choices=ids,
        help="simulation to run",
    )
    parser.add_argument("--list", action="store_true", help="list the simulations")
    parser.add_argument(
        "--frames", type=int, default=DEFAULT_FRAMES, help="number of frames to run"
    )
    parser.add_argument(
        "--dt", type=float, default=DEFAULT_DT, help="frame duration in seconds"
    )
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    return parser


def _log_startup_info() -> None:
    log.info("Entropy Zero - Scientific Simulation Platform")
    log.debug("Debug logging is enabled.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; returns the exit status."""
    simulations = {sim.id: sim for sim in all_simulations()}
    parser = _build_parser(list(simulations))
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames cannot be negative")
    if not args.dt > 0.0:
        parser.error("--dt must be positive")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    _log_startup_info()

    if args.list:
        for sim in simulations.values():
            print(f"{sim.id:<16} {sim.name:<18} {sim.category.display_name()}")
        return 0

    sim = simulations[args.simulation]
    running = sim.create()
    for _ in range(args.frames):
        running.step(args.dt)

    print(f"{sim.name}: ran {args.frames} frames")
    if isinstance(running, BinarySpiral):
        print(spiral_stats_text(running.pool))
    elif isinstance(running, RippleTank):
        print(top_bar_text(running.config, running.stats))
    return 0