"""Core: vectors, control points, orientation input and frame history."""

from tiltcurve.core.vector import Vector2
from tiltcurve.core.points import ControlPoint
from tiltcurve.core.signals import OrientationSample, OrientationSlot
from tiltcurve.core.history import FrameHistory

__all__ = ["Vector2", "ControlPoint", "OrientationSample", "OrientationSlot", "FrameHistory"]
