"""
Physics of the curve handles.

Hierarchy:
  - integrators: numerical steps for (position, velocity) pairs
  - spring: SpringIntegrator, spring-damper pull of a ControlPoint toward its target
  - tilt: TiltMapper, (roll, pitch) -> handle targets
"""

# --- Integrators (numerical level) ---
from tiltcurve.physics.integrators import (
    damping_ratio,
    explicit_euler_step,
    natural_frequency,
    semi_implicit_euler_step,
    spring_damper_acceleration,
)

# --- Control point physics ---
from tiltcurve.physics.spring import SpringIntegrator

# --- Input mapping ---
from tiltcurve.physics.tilt import TiltMapper

__all__ = [
    # Integrators
    "semi_implicit_euler_step",
    "explicit_euler_step",
    "spring_damper_acceleration",
    "natural_frequency",
    "damping_ratio",
    # Spring
    "SpringIntegrator",
    # Tilt
    "TiltMapper",
]
