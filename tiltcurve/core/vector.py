"""Minimal immutable 2D vector used for control points and curve samples."""

import math
from dataclasses import dataclass
from typing import Iterator, Sequence, Union

import numpy as np

# Smallest divisor used when normalizing (render units).
MIN_MAGNITUDE = 1.0


@dataclass(frozen=True)
class Vector2:
    """Point or direction in the plane (x, y)."""

    x: float
    y: float

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    @classmethod
    def from_array(cls, arr: Union[Sequence[float], np.ndarray]) -> "Vector2":
        """Build from any length-2 sequence or numpy array."""
        a = np.asarray(arr, dtype=float).ravel()
        if a.size != 2:
            raise ValueError(f"Vector2 needs exactly 2 components, got {a.size}")
        return cls(float(a[0]), float(a[1]))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __mul__(self, k: float) -> "Vector2":
        return Vector2(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "Vector2":
        return Vector2(self.x / k, self.y / k)

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self, floor: float = MIN_MAGNITUDE) -> "Vector2":
        """
        Divide by max(floor, magnitude).

        Vectors shorter than `floor` come back shorter than unit length
        instead of blowing up near zero.
        """
        if floor <= 0:
            raise ValueError("floor must be positive")
        return self / max(floor, self.magnitude())

    def distance_to(self, other: "Vector2") -> float:
        return (other - self).magnitude()
