"""Curve simulation orchestrator: tilt -> targets -> springs -> sampled curve."""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from tiltcurve.config import SimulationConfig
from tiltcurve.core.points import ControlPoint
from tiltcurve.core.signals import OrientationSample
from tiltcurve.core.vector import Vector2
from tiltcurve.curves.bezier import CurveSampler
from tiltcurve.physics.spring import SpringIntegrator
from tiltcurve.physics.tilt import TiltMapper
from tiltcurve.simulation.scene import build_scene

logger = logging.getLogger(__name__)

Orientation = Union[OrientationSample, Tuple[float, float]]


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True)
class CurveSnapshot:
    """
    Result of one frame: everything a renderer needs, read-only.

    Attributes:
        polyline: (N, 2) curve samples from t=0 to t=1
        tangent_segments: (M, 2, 2) (origin, tip) tangent markers
        control_points: (4, 2) current control point positions
        time: simulated time after this frame
        frame: frame index (0 for the first tick)
        integrated: False when the frame's dt was rejected
    """

    polyline: np.ndarray
    tangent_segments: np.ndarray
    control_points: np.ndarray
    time: float = 0.0
    frame: int = 0
    integrated: bool = True

    def polyline_points(self) -> List[Vector2]:
        return [Vector2(float(x), float(y)) for x, y in self.polyline]

    def tangent_pairs(self) -> List[Tuple[Vector2, Vector2]]:
        return [(Vector2.from_array(o), Vector2.from_array(t)) for o, t in self.tangent_segments]

    def control_point_positions(self) -> List[Vector2]:
        return [Vector2.from_array(p) for p in self.control_points]

    def to_dict(self) -> Dict[str, Any]:
        """Scalar fields and control points (the curve itself is derivable)."""
        return {
            "time": self.time,
            "frame": self.frame,
            "integrated": self.integrated,
            "control_points": self.control_points.copy(),
        }


class SimulationClock:
    """
    Owns the four control points and advances them one frame per tick().

    Per tick:
      1) orientation (if given) -> TiltMapper -> targets of the free handles
      2) SpringIntegrator on every point (locked endpoints untouched)
      3) polyline and tangent markers sampled from the new positions

    All mutable state lives here; the caller drives it sequentially from one
    execution context.
    """

    def __init__(
        self,
        control_points: Sequence[ControlPoint],
        scene_center: Vector2,
        config: Optional[SimulationConfig] = None,
        integrator: Optional[SpringIntegrator] = None,
        mapper: Optional[TiltMapper] = None,
        sampler: Optional[CurveSampler] = None,
    ) -> None:
        """
        Args:
            control_points: [start, handle1, handle2, end]; endpoints locked, handles free
            scene_center: rest focal point for the tilt mapping
            config: constants (default SimulationConfig())
            integrator, mapper, sampler: override the components built from config
        """
        self.config = config or SimulationConfig()
        points = list(control_points)
        _check_layout(points)
        self.integrator = integrator or SpringIntegrator.from_config(self.config)
        self.mapper = mapper or TiltMapper.from_config(self.config)
        self.sampler = sampler or CurveSampler.from_config(self.config)
        n_free = sum(1 for p in points if not p.locked)
        if len(self.mapper.offsets) != n_free:
            raise ValueError(
                f"TiltMapper has {len(self.mapper.offsets)} offsets for {n_free} free control points"
            )
        self.scene_center = scene_center
        self._initial: Tuple[ControlPoint, ...] = tuple(points)
        self._points: List[ControlPoint] = points
        self._time = 0.0
        self._frames = 0

    @classmethod
    def from_bounds(
        cls,
        width: float,
        height: float,
        config: Optional[SimulationConfig] = None,
    ) -> "SimulationClock":
        """Default scene laid out in a width x height view."""
        config = config or SimulationConfig()
        points, center = build_scene(width, height, config)
        return cls(points, center, config=config)

    def tick(self, dt: float, orientation: Optional[Orientation] = None) -> CurveSnapshot:
        """
        Advance one frame.

        Args:
            dt: elapsed seconds since the previous frame. Non-positive or
                non-finite values skip the physics for this frame.
            orientation: latest (roll, pitch) reading, or None to keep targets.

        Returns:
            CurveSnapshot of the curve after this frame.
        """
        if orientation is not None:
            self._apply_orientation(OrientationSample.coerce(orientation))

        integrated = math.isfinite(dt) and dt > 0
        if integrated:
            max_dt = self.config.max_dt
            if max_dt is not None and dt > max_dt:
                logger.debug("Clamping dt %.4f to %.4f", dt, max_dt)
                dt = max_dt
            self._points = [self.integrator.integrate(p, dt) for p in self._points]
            self._time += dt
        else:
            logger.debug("Skipping integration for invalid dt=%r", dt)

        snapshot = self._snapshot(integrated)
        self._frames += 1
        return snapshot

    def _apply_orientation(self, sample: OrientationSample) -> None:
        targets = iter(self.mapper.map_offsets(sample.roll, sample.pitch, self.scene_center))
        self._points = [p if p.locked else p.retarget(next(targets)) for p in self._points]

    def _snapshot(self, integrated: bool) -> CurveSnapshot:
        ctrl = np.array([[p.position.x, p.position.y] for p in self._points], dtype=float)
        return CurveSnapshot(
            polyline=_frozen(self.sampler.polyline(ctrl)),
            tangent_segments=_frozen(self.sampler.tangent_segments(ctrl)),
            control_points=_frozen(ctrl),
            time=self._time,
            frame=self._frames,
            integrated=integrated,
        )

    def reset(self) -> None:
        """Back to the construction state (positions, velocities, targets, time)."""
        self._points = list(self._initial)
        self._time = 0.0
        self._frames = 0

    @property
    def control_points(self) -> Tuple[ControlPoint, ...]:
        return tuple(self._points)

    @property
    def time(self) -> float:
        """Simulated time (sum of accepted dt)."""
        return self._time

    @property
    def frame_count(self) -> int:
        return self._frames

    def state_dict(self) -> Dict[str, Any]:
        return {
            "time": self._time,
            "frames": self._frames,
            "scene_center": tuple(self.scene_center),
            "control_points": [p.to_dict() for p in self._points],
        }


def _check_layout(points: List[ControlPoint]) -> None:
    if len(points) != 4:
        raise ValueError(f"Cubic curve requires exactly 4 control points, got {len(points)}")
    if not (points[0].locked and points[3].locked):
        raise ValueError("First and last control points must be locked (curve endpoints)")
    if points[1].locked or points[2].locked:
        raise ValueError("Interior control points must be free (curve handles)")
