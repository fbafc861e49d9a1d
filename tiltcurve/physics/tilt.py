"""Map a tilt reading (roll, pitch) to targets for the free curve handles."""

from typing import Sequence, Tuple

from tiltcurve.config import Offset, SimulationConfig
from tiltcurve.core.vector import Vector2


class TiltMapper:
    """
    Linear tilt -> focal point mapping.

    The focal point is the scene center shifted by tilt * sensitivity
    (roll moves x, pitch moves y). Each handle target is the focal point plus a
    fixed bias, so the handles stay apart while the curve bends. No smoothing
    and no clamping: raw sensor noise reaches the targets, the spring damps it.
    """

    def __init__(
        self,
        sensitivity: float = 130.0,
        offsets: Sequence[Offset] = ((-70.0, 20.0), (70.0, -20.0)),
    ) -> None:
        """
        Args:
            sensitivity: render units per radian of tilt
            offsets: (dx, dy) bias from the focal point, one per free handle
        """
        if not offsets:
            raise ValueError("offsets needs at least one entry")
        self.sensitivity = float(sensitivity)
        self.offsets = tuple(Vector2(float(dx), float(dy)) for dx, dy in offsets)

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "TiltMapper":
        return cls(sensitivity=config.tilt_sensitivity, offsets=config.handle_offsets)

    def focal_point(self, roll: float, pitch: float, scene_center: Vector2) -> Vector2:
        return Vector2(
            scene_center.x + roll * self.sensitivity,
            scene_center.y + pitch * self.sensitivity,
        )

    def map_offsets(self, roll: float, pitch: float, scene_center: Vector2) -> Tuple[Vector2, ...]:
        """Targets for every free handle, in offset order."""
        focus = self.focal_point(roll, pitch, scene_center)
        return tuple(focus + off for off in self.offsets)

    def map_to_targets(self, roll: float, pitch: float, scene_center: Vector2) -> Tuple[Vector2, Vector2]:
        """Two-handle form: (target1, target2)."""
        if len(self.offsets) != 2:
            raise ValueError(f"map_to_targets needs exactly 2 offsets, mapper has {len(self.offsets)}")
        t1, t2 = self.map_offsets(roll, pitch, scene_center)
        return t1, t2
