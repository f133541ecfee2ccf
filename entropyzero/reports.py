"""Text shown in the simulations' control panels and status read-outs."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from .ripple_model import Probe, RippleTankConfig, Ruler, SimulationStats
from .spiral_model import ParticlePool
from .vector import Vec2

SPARKLINE_LEVELS = "▁▂▄▆█"
SPARKLINE_WIDTH = 40
NO_PROBES_TEXT = "No probes placed. Add probes from toolbox."
NO_RULERS_TEXT = "Add rulers to measure wavelength"


def play_pause_label(paused: bool) -> str:
    """Label of the button that toggles running: it names the action it performs."""
    return "▶ Play" if paused else "⏸ Pause"


def fps_text(fps: float) -> str:
    """Frame-rate read-out."""
    return f"FPS: {fps:.0f}"


def entity_count_text(count: int, label: str) -> str:
    """Count of entities under a label."""
    return f"{label}: {count}"


def _level(value: float) -> str:
    if math.isnan(value):
        return SPARKLINE_LEVELS[0]
    normalized = min(max((value + 2.0) / 4.0, 0.0), 1.0)
    return SPARKLINE_LEVELS[min(int(normalized * 4.0), 4)]


def waveform_sparkline(history: Sequence[float], width: int = SPARKLINE_WIDTH) -> str:
    """The most recent readings drawn as block characters, one per reading."""
    if width < 0:
        raise ValueError("sparkline width cannot be negative")
    recent = history[max(len(history) - width, 0):] if width else []
    return "".join(_level(value) for value in recent)


def probe_readout(probe: Probe) -> str:
    """Probe label with its latest reading and the range of its history."""
    current = probe.history[-1] if probe.history else 0.0
    readings = [value for value in probe.history if not math.isnan(value)]
    low = min(readings, default=math.inf)
    high = max(readings, default=-math.inf)
    return f"{probe.label}: {current:+.3f} [{low:.2f}, {high:.2f}]"


def ruler_readout(position: Vec2, ruler: Ruler) -> str:
    """Where a ruler stands and how long it is."""
    return (
        f"Ruler at ({position.x:.0f}, {position.y:.0f}): "
        f"{ruler.length():.1f} units"
    )


def top_bar_text(config: RippleTankConfig, stats: SimulationStats) -> str:
    """One-line status of the ripple tank."""
    return " | ".join(
        [
            "🌊 Ripple Tank",
            play_pause_label(config.paused),
            fps_text(stats.fps),
            f"t = {stats.simulation_time:.2f}s",
        ]
    )


def data_panel_lines(
    stats: SimulationStats,
    probes: Iterable[Probe],
    rulers: Iterable[tuple[Vec2, Ruler]],
) -> list[str]:
    """Lines of the data panel: oscilloscope traces, then measurements."""
    lines = ["Oscilloscope"]
    probes = list(probes)
    if not probes:
        lines.append(NO_PROBES_TEXT)
    else:
        for probe in probes:
            lines.append(probe_readout(probe))
            lines.append(waveform_sparkline(probe.history))
        if stats.probe_phase_diff is not None:
            lines.append(f"Phase Difference: {stats.probe_phase_diff:.2f} rad")

    lines.append("Measurements")
    lines.append(f"Wave Energy: {stats.wave_energy:.2f}")
    rulers = list(rulers)
    lines.extend(ruler_readout(position, ruler) for position, ruler in rulers)
    if not rulers:
        lines.append(NO_RULERS_TEXT)
    return lines


def spiral_stats_text(pool: ParticlePool) -> str:
    """Number of live particles in the binary spiral."""
    return f"Active Particles: {pool.active_count()}"