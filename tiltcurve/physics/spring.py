"""Spring-damper integration of a single control point."""

from functools import partial
from typing import Any, Callable, Optional, Tuple

from tiltcurve.config import SimulationConfig
from tiltcurve.core.points import ControlPoint
from tiltcurve.physics.integrators import (
    damping_ratio,
    natural_frequency,
    semi_implicit_euler_step,
    spring_damper_acceleration,
)

Scheme = Callable[..., Tuple[Any, Any]]


class SpringIntegrator:
    """
    Pulls a free control point toward its target with a linear spring,
    opposed by velocity-proportional damping.

    Locked points are returned unchanged (same object). No clamping is applied
    to velocity or position; inputs must be finite.
    """

    def __init__(
        self,
        stiffness: float = 120.0,
        damping: float = 16.0,
        scheme: Optional[Scheme] = None,
    ) -> None:
        """
        Args:
            stiffness: spring constant k (per unit mass)
            damping: damping coefficient c (per unit mass)
            scheme: step(accel, x, v, dt) -> (x, v). Default: semi-implicit Euler.
        """
        if stiffness <= 0:
            raise ValueError(f"stiffness must be > 0, got {stiffness}")
        if damping < 0:
            raise ValueError(f"damping must be >= 0, got {damping}")
        self.stiffness = float(stiffness)
        self.damping = float(damping)
        self.scheme = scheme or semi_implicit_euler_step

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "SpringIntegrator":
        return cls(stiffness=config.stiffness, damping=config.damping)

    def integrate(self, point: ControlPoint, dt: float) -> ControlPoint:
        """Advance one point by dt; returns a new point (or the same locked one)."""
        if point.locked:
            return point
        accel = partial(
            _accel_toward,
            target=point.target,
            stiffness=self.stiffness,
            damping=self.damping,
        )
        x_next, v_next = self.scheme(accel, point.position, point.velocity, dt)
        return point.moved(x_next, v_next)

    @property
    def natural_frequency(self) -> float:
        return natural_frequency(self.stiffness)

    @property
    def damping_ratio(self) -> float:
        return damping_ratio(self.stiffness, self.damping)


def _accel_toward(x: Any, v: Any, *, target: Any, stiffness: float, damping: float) -> Any:
    return spring_damper_acceleration(x, v, target, stiffness, damping)
