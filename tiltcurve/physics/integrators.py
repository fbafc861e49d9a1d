"""
Numerical steps for second-order point dynamics: (x, v) -> (x_next, v_next).

Pure numerical level: no dependency on ControlPoint.
Works on any type with +, - and scalar * (Vector2 or numpy arrays).
Interface: step(accel, x, v, dt) -> (x_next, v_next), accel(x, v) -> a.
"""

import math
from typing import Any, Callable, Tuple

# Acceleration field: (x, v) -> dv/dt
Accel = Callable[[Any, Any], Any]


def spring_damper_acceleration(x: Any, v: Any, target: Any, stiffness: float, damping: float) -> Any:
    """a = (target - x) * k - v * c  (unit mass)."""
    return (target - x) * stiffness - v * damping


def semi_implicit_euler_step(accel: Accel, x: Any, v: Any, dt: float) -> Tuple[Any, Any]:
    """Symplectic Euler, order 1: velocity first, position with the new velocity."""
    v_next = v + accel(x, v) * dt
    x_next = x + v_next * dt
    return x_next, v_next


def explicit_euler_step(accel: Accel, x: Any, v: Any, dt: float) -> Tuple[Any, Any]:
    """Explicit Euler, order 1: position advanced with the old velocity."""
    a = accel(x, v)
    return x + v * dt, v + a * dt


def natural_frequency(stiffness: float) -> float:
    """Undamped angular frequency sqrt(k) for unit mass (rad/s)."""
    return math.sqrt(stiffness)


def damping_ratio(stiffness: float, damping: float) -> float:
    """zeta = c / (2 sqrt(k)); < 1 means the spring overshoots before settling."""
    return damping / (2.0 * math.sqrt(stiffness))
