"""Initial curve layout inside a view of given size."""

from typing import List, Optional, Tuple

from tiltcurve.config import SimulationConfig
from tiltcurve.core.points import ControlPoint
from tiltcurve.core.vector import Vector2


def build_scene(
    width: float,
    height: float,
    config: Optional[SimulationConfig] = None,
) -> Tuple[List[ControlPoint], Vector2]:
    """
    Lay out [start, handle1, handle2, end] in a width x height view
    (y grows downward, as in screen coordinates).

    start sits near the bottom-left corner and end near the top-right,
    inset by config.endpoint_inset; the handles rest on the horizontal
    center line, config.handle_spread to each side of the center.

    Returns:
        (control_points, scene_center)
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"View size must be positive, got {width} x {height}")
    config = config or SimulationConfig()
    inset_x, inset_y = config.endpoint_inset
    spread = config.handle_spread
    cx, cy = width / 2.0, height / 2.0

    points = [
        ControlPoint.fixed(inset_x, height - inset_y),
        ControlPoint.free(cx - spread, cy),
        ControlPoint.free(cx + spread, cy),
        ControlPoint.fixed(width - inset_x, inset_y),
    ]
    return points, Vector2(cx, cy)
