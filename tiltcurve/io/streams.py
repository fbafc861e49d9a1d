"""Orientation sources: recorded replays and live (threaded) tilt feeds."""

import logging
import threading
import time
from typing import Callable, Iterator, Optional, Sequence, Tuple, Union

import numpy as np

from tiltcurve.core.signals import OrientationSample, OrientationSlot

logger = logging.getLogger(__name__)

TiltFn = Callable[[float], Tuple[float, float]]


class OrientationReplay:
    """
    Pre-recorded tilt sequence, iterated one sample per frame.
    """

    def __init__(
        self,
        rolls: Union[np.ndarray, Sequence[float]],
        pitches: Union[np.ndarray, Sequence[float]],
        timestamps: Optional[Union[np.ndarray, Sequence[float]]] = None,
    ) -> None:
        """
        Args:
            rolls: (N,) roll angles in radians
            pitches: (N,) pitch angles in radians
            timestamps: optional (N,) sample times in seconds
        """
        self._roll = np.asarray(rolls, dtype=float).ravel()
        self._pitch = np.asarray(pitches, dtype=float).ravel()
        if len(self._roll) != len(self._pitch):
            raise ValueError("rolls and pitches must have the same length")
        self._t = None if timestamps is None else np.asarray(timestamps, dtype=float).ravel()
        if self._t is not None and len(self._t) != len(self._roll):
            raise ValueError("timestamps must match rolls/pitches in length")
        self._index = 0

    @classmethod
    def from_function(cls, fn: TiltFn, n_samples: int, dt: float) -> "OrientationReplay":
        """Sample fn(t) -> (roll, pitch) at t = 0, dt, 2*dt, ..."""
        t = np.arange(n_samples) * dt
        values = np.array([fn(float(ti)) for ti in t], dtype=float).reshape(-1, 2)
        return cls(values[:, 0], values[:, 1], timestamps=t)

    def __iter__(self) -> Iterator[OrientationSample]:
        self._index = 0
        return self

    def __next__(self) -> OrientationSample:
        if self._index >= len(self._roll):
            raise StopIteration
        i = self._index
        self._index += 1
        ts = float(self._t[i]) if self._t is not None else None
        return OrientationSample(float(self._roll[i]), float(self._pitch[i]), timestamp=ts)

    def __len__(self) -> int:
        return len(self._roll)

    def reset(self) -> None:
        self._index = 0


class OrientationSource:
    """
    Push-based live source: writes readings into an OrientationSlot at its own
    cadence. Adapters for real sensors override start() and stop().
    """

    def __init__(self, slot: Optional[OrientationSlot] = None) -> None:
        self.slot = slot or OrientationSlot()

    def publish(self, roll: float, pitch: float, timestamp: Optional[float] = None) -> bool:
        return self.slot.publish(OrientationSample(float(roll), float(pitch), timestamp=timestamp))

    def start(self) -> None:
        raise NotImplementedError("Subclasses or adapters must implement start()")

    def stop(self) -> None:
        raise NotImplementedError("Subclasses or adapters must implement stop()")

    def __enter__(self) -> "OrientationSource":
        self.start()
        return self

    def __exit__(self, *exc: object) -> None:
        self.stop()


class SyntheticTiltSource(OrientationSource):
    """
    Background thread publishing fn(t) -> (roll, pitch) at a fixed rate,
    t being seconds since start(). Stands in for a device motion sensor.
    """

    def __init__(
        self,
        fn: TiltFn,
        rate_hz: float = 60.0,
        slot: Optional[OrientationSlot] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(slot)
        if rate_hz <= 0:
            raise ValueError("rate_hz must be > 0")
        self.fn = fn
        self.interval = 1.0 / rate_hz
        self._clock = clock
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._t0 = 0.0

    def emit(self, t: float) -> bool:
        """Publish the reading for time t (seconds)."""
        roll, pitch = self.fn(t)
        return self.publish(roll, pitch, timestamp=t)

    def _run(self) -> None:
        while not self._stop.is_set():
            self.emit(self._clock() - self._t0)
            self._stop.wait(self.interval)

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._t0 = self._clock()
        self._thread = threading.Thread(target=self._run, name="tilt-source", daemon=True)
        self._thread.start()
        logger.info("Tilt source started at %.1f Hz", 1.0 / self.interval)

    def stop(self) -> None:
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        logger.info("Tilt source stopped (%d samples)", self.slot.published)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()


def wobble(amplitude: float = 0.4, period: float = 4.0) -> TiltFn:
    """Slow circular tilt: roll = A sin(wt), pitch = A cos(wt)."""
    w = 2.0 * np.pi / period

    def fn(t: float) -> Tuple[float, float]:
        return float(amplitude * np.sin(w * t)), float(amplitude * np.cos(w * t))

    return fn

