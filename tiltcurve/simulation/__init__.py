"""
Simulation: the per-frame clock, scene layout and the frame loop.

Use _utils for visualization (snapshot drawing, handle paths).
"""

from tiltcurve.simulation.clock import CurveSnapshot, SimulationClock
from tiltcurve.simulation.driver import FrameDriver
from tiltcurve.simulation.scene import build_scene
from tiltcurve.simulation._utils import (
    plot_handle_paths,
    plot_snapshot,
)

__all__ = [
    "CurveSnapshot",
    "SimulationClock",
    "FrameDriver",
    "build_scene",
    "plot_snapshot",
    "plot_handle_paths",
]
