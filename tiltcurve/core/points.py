"""Control points of the curve: fixed endpoints and spring-driven handles."""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from tiltcurve.core.vector import Vector2


@dataclass(frozen=True)
class ControlPoint:
    """
    One curve control point.

    Attributes:
        position: current location
        velocity: current rate of change (zero at rest)
        target: location the spring pulls toward; defaults to the starting
            position so a fresh handle is already at rest. Ignored when locked.
        locked: True for curve endpoints (never integrated or retargeted)
    """

    position: Vector2
    velocity: Vector2 = field(default_factory=Vector2.zero)
    target: Optional[Vector2] = None
    locked: bool = False

    def __post_init__(self) -> None:
        if self.target is None:
            object.__setattr__(self, "target", self.position)

    @classmethod
    def fixed(cls, x: float, y: float) -> "ControlPoint":
        """Locked endpoint at (x, y)."""
        return cls(position=Vector2(float(x), float(y)), locked=True)

    @classmethod
    def free(cls, x: float, y: float) -> "ControlPoint":
        """Free handle at rest at (x, y)."""
        return cls(position=Vector2(float(x), float(y)))

    def retarget(self, target: Vector2) -> "ControlPoint":
        """Copy of this point pulled toward a new target."""
        if self.locked:
            raise ValueError("Locked control points cannot be retargeted")
        return replace(self, target=target)

    def moved(self, position: Vector2, velocity: Vector2) -> "ControlPoint":
        """Copy with new kinematic state; target and flag unchanged."""
        return replace(self, position=position, velocity=velocity)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": tuple(self.position),
            "velocity": tuple(self.velocity),
            "target": tuple(self.target),
            "locked": self.locked,
        }
