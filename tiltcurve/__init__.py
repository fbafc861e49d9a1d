"""
TiltCurve: tilt-driven spring simulation of a cubic Bezier curve.
"""

__version__ = "0.1.0"

from tiltcurve.config import SimulationConfig
from tiltcurve.core.points import ControlPoint
from tiltcurve.core.vector import Vector2
from tiltcurve.simulation.clock import CurveSnapshot, SimulationClock

__all__ = [
    "__version__",
    "SimulationConfig",
    "ControlPoint",
    "Vector2",
    "CurveSnapshot",
    "SimulationClock",
]
