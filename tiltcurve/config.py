"""Construction-time constants for the curve simulation."""

import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional, Tuple

Offset = Tuple[float, float]


@dataclass(frozen=True)
class SimulationConfig:
    # Spring-damper
    stiffness: float = 120.0
    damping: float = 16.0

    # Tilt mapping (render units per radian, one bias per free handle)
    tilt_sensitivity: float = 130.0
    handle_offsets: Tuple[Offset, ...] = ((-70.0, 20.0), (70.0, -20.0))

    # Sampling
    polyline_samples: int = 101
    tangent_samples: int = 8
    tangent_length: float = 32.0
    min_tangent_magnitude: float = 1.0

    # Time step
    nominal_dt: float = 1.0 / 60.0
    max_dt: Optional[float] = 0.1  # None = no clamp

    # Scene layout (from view bounds)
    endpoint_inset: Offset = (40.0, 80.0)
    handle_spread: float = 110.0

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "handle_offsets",
            tuple((float(dx), float(dy)) for dx, dy in self.handle_offsets),
        )
        object.__setattr__(self, "endpoint_inset", tuple(float(v) for v in self.endpoint_inset))

        if self.stiffness <= 0:
            raise ValueError(f"stiffness must be > 0, got {self.stiffness}")
        if self.damping < 0:
            raise ValueError(f"damping must be >= 0, got {self.damping}")
        if not self.handle_offsets:
            raise ValueError("handle_offsets needs at least one entry")
        if self.polyline_samples < 2:
            raise ValueError("polyline_samples must be >= 2")
        if self.tangent_samples < 0:
            raise ValueError("tangent_samples must be >= 0")
        if self.tangent_length < 0:
            raise ValueError("tangent_length must be >= 0")
        if self.min_tangent_magnitude <= 0:
            raise ValueError("min_tangent_magnitude must be > 0")
        if not (math.isfinite(self.nominal_dt) and self.nominal_dt > 0):
            raise ValueError(f"nominal_dt must be positive and finite, got {self.nominal_dt}")
        if self.max_dt is not None and not (self.max_dt > 0):
            raise ValueError(f"max_dt must be > 0 or None, got {self.max_dt}")

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict (tuples become lists) for JSON."""
        d = asdict(self)
        d["handle_offsets"] = [list(o) for o in self.handle_offsets]
        d["endpoint_inset"] = list(self.endpoint_inset)
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        """Build from a dict; unknown keys are rejected."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**data)
