"""
Cubic Bezier evaluation for the simulated curve.

Mathematical form:
    B(t)  = (1-t)^3 P0 + 3(1-t)^2 t P1 + 3(1-t) t^2 P2 + t^3 P3
    B'(t) = 3(1-t)^2 (P1-P0) + 6(1-t) t (P2-P1) + 3 t^2 (P3-P2)

Scalar helpers take four Vector2 and return a Vector2; the vectorized helpers
take an array of parameters and a (4, 2) control array and return (N, 2).
t must lie in [0, 1]; it is not clamped.
"""

from typing import Sequence, Union

import numpy as np

from tiltcurve.config import SimulationConfig
from tiltcurve.core.vector import Vector2

ControlArray = Union[np.ndarray, Sequence[Sequence[float]]]


def bezier_position(t: float, a: Vector2, b: Vector2, c: Vector2, d: Vector2) -> Vector2:
    u = 1.0 - t
    u2 = u * u
    t2 = t * t
    w0 = u2 * u
    w1 = 3.0 * u2 * t
    w2 = 3.0 * u * t2
    w3 = t2 * t
    return Vector2(
        w0 * a.x + w1 * b.x + w2 * c.x + w3 * d.x,
        w0 * a.y + w1 * b.y + w2 * c.y + w3 * d.y,
    )


def bezier_derivative(t: float, a: Vector2, b: Vector2, c: Vector2, d: Vector2) -> Vector2:
    u = 1.0 - t
    k0 = 3.0 * u * u
    k1 = 6.0 * u * t
    k2 = 3.0 * t * t
    return Vector2(
        k0 * (b.x - a.x) + k1 * (c.x - b.x) + k2 * (d.x - c.x),
        k0 * (b.y - a.y) + k1 * (c.y - b.y) + k2 * (d.y - c.y),
    )


def _as_controls(ctrl: ControlArray) -> np.ndarray:
    p = np.asarray(ctrl, dtype=float)
    if p.shape != (4, 2):
        raise ValueError(f"Cubic Bezier needs a (4, 2) control array, got shape {p.shape}")
    return p


def bezier_points(ts: np.ndarray, ctrl: ControlArray) -> np.ndarray:
    """Positions at each t: (N,) -> (N, 2)."""
    p = _as_controls(ctrl)
    t = np.asarray(ts, dtype=float).reshape(-1, 1)
    u = 1.0 - t
    return (u ** 3) * p[0] + (3.0 * u ** 2 * t) * p[1] + (3.0 * u * t ** 2) * p[2] + (t ** 3) * p[3]


def bezier_derivatives(ts: np.ndarray, ctrl: ControlArray) -> np.ndarray:
    """First derivatives at each t: (N,) -> (N, 2)."""
    p = _as_controls(ctrl)
    t = np.asarray(ts, dtype=float).reshape(-1, 1)
    u = 1.0 - t
    return (3.0 * u ** 2) * (p[1] - p[0]) + (6.0 * u * t) * (p[2] - p[1]) + (3.0 * t ** 2) * (p[3] - p[2])


def sample_parameters(count: int) -> np.ndarray:
    """count evenly spaced t in [0, 1], both ends included."""
    if count < 2:
        raise ValueError("count must be >= 2")
    return np.linspace(0.0, 1.0, count)


def interior_parameters(count: int) -> np.ndarray:
    """count evenly spaced t strictly inside (0, 1): i / (count + 1)."""
    if count < 0:
        raise ValueError("count must be >= 0")
    return np.arange(1, count + 1, dtype=float) / (count + 1)


class CurveSampler:
    """
    Samples the curve for rendering: a dense polyline and a few tangent markers.

    Usage:
        sampler = CurveSampler()
        pts = sampler.polyline(ctrl)           # (101, 2)
        segs = sampler.tangent_segments(ctrl)  # (8, 2, 2): origin, tip
    """

    position = staticmethod(bezier_position)
    derivative = staticmethod(bezier_derivative)

    def __init__(
        self,
        polyline_samples: int = 101,
        tangent_samples: int = 8,
        tangent_length: float = 32.0,
        min_magnitude: float = 1.0,
    ) -> None:
        if min_magnitude <= 0:
            raise ValueError("min_magnitude must be > 0")
        self._poly_t = sample_parameters(polyline_samples)
        self._tan_t = interior_parameters(tangent_samples)
        self.tangent_length = float(tangent_length)
        self.min_magnitude = float(min_magnitude)

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "CurveSampler":
        return cls(
            polyline_samples=config.polyline_samples,
            tangent_samples=config.tangent_samples,
            tangent_length=config.tangent_length,
            min_magnitude=config.min_tangent_magnitude,
        )

    @property
    def polyline_parameters(self) -> np.ndarray:
        return self._poly_t.copy()

    @property
    def tangent_parameters(self) -> np.ndarray:
        return self._tan_t.copy()

    def polyline(self, ctrl: ControlArray) -> np.ndarray:
        return bezier_points(self._poly_t, ctrl)

    def tangent_segments(self, ctrl: ControlArray) -> np.ndarray:
        """(M, 2, 2) array of (origin, tip); tip = origin + length * d / max(floor, |d|)."""
        origins = bezier_points(self._tan_t, ctrl)
        d = bezier_derivatives(self._tan_t, ctrl)
        mag = np.maximum(self.min_magnitude, np.hypot(d[:, 0], d[:, 1]))[:, None]
        tips = origins + d / mag * self.tangent_length
        return np.stack([origins, tips], axis=1)
