"""Orientation input: sample type and single-slot handoff between threads."""

import logging
import math
import threading
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrientationSample:
    """Tilt reading in radians."""

    roll: float
    pitch: float
    timestamp: Optional[float] = None

    @classmethod
    def coerce(cls, value: Union["OrientationSample", Sequence[float]]) -> "OrientationSample":
        """Accept a sample or a (roll, pitch) pair."""
        if isinstance(value, OrientationSample):
            return value
        roll, pitch = value
        return cls(float(roll), float(pitch))

    def is_finite(self) -> bool:
        return math.isfinite(self.roll) and math.isfinite(self.pitch)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.roll, self.pitch)


class OrientationSlot:
    """
    Last-write-wins holder for the latest orientation sample.

    A sensor thread calls publish() at its own cadence, the frame driver calls
    latest() once per frame. There is no queue: a newer sample replaces an
    unread one.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sample: Optional[OrientationSample] = None
        self._published = 0
        self._dropped = 0

    def publish(self, sample: Union[OrientationSample, Sequence[float]]) -> bool:
        """
        Store a sample. Non-finite readings are dropped.

        Returns:
            True if the sample replaced the slot content.
        """
        s = OrientationSample.coerce(sample)
        if not s.is_finite():
            with self._lock:
                self._dropped += 1
            logger.debug("Dropped non-finite orientation sample %s", s.as_tuple())
            return False
        with self._lock:
            self._sample = s
            self._published += 1
        return True

    def latest(self) -> Optional[OrientationSample]:
        """Most recent sample, or None if nothing arrived yet."""
        with self._lock:
            return self._sample

    def has_sample(self) -> bool:
        return self.latest() is not None

    def clear(self) -> None:
        with self._lock:
            self._sample = None

    @property
    def published(self) -> int:
        """Number of accepted samples."""
        return self._published

    @property
    def dropped(self) -> int:
        """Number of rejected (non-finite) samples."""
        return self._dropped
