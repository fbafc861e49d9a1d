"""Frame loop: measure dt, read the latest tilt, tick the clock, hand off the snapshot."""

import logging
import math
import time
from typing import Callable, Optional

from tiltcurve.core.history import FrameHistory
from tiltcurve.core.signals import OrientationSlot
from tiltcurve.simulation.clock import CurveSnapshot, SimulationClock

logger = logging.getLogger(__name__)

Renderer = Callable[[CurveSnapshot], None]


class FrameDriver:
    """
    Explicit replacement for a display-refresh callback.

    Each frame() reads the OrientationSlot once (last-write-wins, may be empty),
    calls clock.tick(dt, orientation) and passes the snapshot to the renderer.
    dt is measured with `timer`; the first frame uses the clock's nominal dt.
    """

    def __init__(
        self,
        clock: SimulationClock,
        slot: Optional[OrientationSlot] = None,
        renderer: Optional[Renderer] = None,
        history: Optional[FrameHistory] = None,
        timer: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.clock = clock
        self.slot = slot or OrientationSlot()
        self.renderer = renderer
        self.history = history
        self._timer = timer
        self._last: Optional[float] = None
        self._running = False
        self._stop_requested = False
        self.last_snapshot: Optional[CurveSnapshot] = None

    def frame(self, dt: Optional[float] = None) -> CurveSnapshot:
        """
        Run one frame.

        Args:
            dt: fixed step for this frame; None measures the time since the
                previous frame with the timer.
        """
        now = self._timer()
        if dt is None:
            dt = self.clock.config.nominal_dt if self._last is None else now - self._last
        self._last = now

        orientation = self.slot.latest()
        snapshot = self.clock.tick(dt, orientation)
        if self.history is not None:
            self.history.record(snapshot, orientation)
        if self.renderer is not None:
            self.renderer(snapshot)
        self.last_snapshot = snapshot
        return snapshot

    def run(
        self,
        n_frames: Optional[int] = None,
        dt: Optional[float] = None,
        realtime: bool = False,
    ) -> Optional[CurveSnapshot]:
        """
        Loop until n_frames are done or stop() is called.

        Args:
            n_frames: frame budget (None = until stop()).
            dt: fixed step (headless replay); None = measured wall-clock dt.
            realtime: sleep between frames to hold the nominal frame rate.

        Returns:
            The last snapshot produced (None if no frame ran).
        """
        if self._running:
            raise RuntimeError("FrameDriver.run() is already running")
        period = self.clock.config.nominal_dt
        self._running = True
        self._stop_requested = False
        logger.info("Frame loop started (frames=%s, dt=%s, realtime=%s)", n_frames, dt, realtime)
        done = 0
        try:
            while not self._stop_requested and (n_frames is None or done < n_frames):
                start = self._timer()
                self.frame(dt)
                done += 1
                if realtime:
                    remaining = period - (self._timer() - start)
                    if remaining > 0 and math.isfinite(remaining):
                        time.sleep(remaining)
        finally:
            self._running = False
            logger.info("Frame loop stopped after %d frames (t=%.3f s)", done, self.clock.time)
        return self.last_snapshot

    def stop(self) -> None:
        """Ask run() to return after the current frame."""
        self._stop_requested = True

    @property
    def running(self) -> bool:
        return self._running
