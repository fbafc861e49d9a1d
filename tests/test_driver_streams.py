"""Tests for the frame driver, the orientation slot and orientation sources."""

import itertools
import math
import threading
import time

import numpy as np
import pytest

from tiltcurve import SimulationClock
from tiltcurve.core import FrameHistory, OrientationSample, OrientationSlot
from tiltcurve.io import OrientationReplay, OrientationSource, SyntheticTiltSource, wobble
from tiltcurve.simulation import FrameDriver


def fake_timer(step: float):
    ticks = itertools.count()
    return lambda: next(ticks) * step


def test_slot_is_last_write_wins() -> None:
    slot = OrientationSlot()
    assert slot.latest() is None and not slot.has_sample()
    assert slot.publish((0.1, 0.2))
    assert slot.publish(OrientationSample(0.3, 0.4))
    assert slot.latest().as_tuple() == (0.3, 0.4)
    assert slot.published == 2
    slot.clear()
    assert slot.latest() is None


def test_slot_drops_non_finite_samples() -> None:
    slot = OrientationSlot()
    slot.publish((0.1, 0.1))
    assert not slot.publish((math.nan, 0.0))
    assert not slot.publish((0.0, math.inf))
    assert slot.latest().as_tuple() == (0.1, 0.1)
    assert slot.dropped == 2


def test_slot_handles_concurrent_writers() -> None:
    slot = OrientationSlot()

    def writer(k: int) -> None:
        for i in range(200):
            slot.publish((float(k), float(i)))

    threads = [threading.Thread(target=writer, args=(k,)) for k in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert slot.published == 800
    assert slot.latest().pitch == 199.0


def test_first_frame_uses_nominal_dt_then_measures() -> None:
    clock = SimulationClock.from_bounds(320, 480)
    driver = FrameDriver(clock, timer=fake_timer(0.02))
    driver.frame()
    assert clock.time == pytest.approx(1 / 60)
    driver.frame()
    assert clock.time == pytest.approx(1 / 60 + 0.02)


def test_driver_feeds_latest_orientation_and_renders() -> None:
    clock = SimulationClock.from_bounds(320, 480)
    slot = OrientationSlot()
    seen = []
    history = FrameHistory()
    driver = FrameDriver(clock, slot=slot, renderer=seen.append, history=history)

    driver.frame(dt=1 / 60)
    assert clock.control_points[1].target == clock.control_points[1].position

    slot.publish((0.0, 0.0))
    snap = driver.frame(dt=1 / 60)
    assert clock.control_points[1].target.x == pytest.approx(160.0 - 70.0)
    assert seen == [seen[0], snap] and driver.last_snapshot is snap
    assert len(history) == 2
    rolls = history.get("roll")
    assert math.isnan(rolls[0]) and rolls[1] == 0.0


def test_run_stops_after_budget_or_on_request() -> None:
    clock = SimulationClock.from_bounds(320, 480)
    driver = FrameDriver(clock)
    last = driver.run(n_frames=10, dt=1 / 60)
    assert last.frame == 9
    assert clock.frame_count == 10
    assert not driver.running

    def renderer(snap) -> None:
        if snap.frame >= 14:
            driver.stop()

    driver.renderer = renderer
    driver.run(dt=1 / 60)
    assert clock.frame_count == 15


def test_run_is_not_reentrant() -> None:
    clock = SimulationClock.from_bounds(320, 480)
    driver = FrameDriver(clock)
    errors = []

    def renderer(snap) -> None:
        try:
            driver.run(n_frames=1)
        except RuntimeError as exc:
            errors.append(exc)

    driver.renderer = renderer
    driver.run(n_frames=1, dt=1 / 60)
    assert len(errors) == 1


def test_replay_iterates_samples() -> None:
    replay = OrientationReplay([0.1, 0.2, 0.3], [0.0, -0.1, -0.2])
    samples = list(replay)
    assert len(replay) == 3
    assert [s.roll for s in samples] == [0.1, 0.2, 0.3]
    assert samples[0].timestamp is None
    assert list(replay)[2].pitch == -0.2
    with pytest.raises(ValueError):
        OrientationReplay([0.1], [0.1, 0.2])


def test_replay_from_function() -> None:
    replay = OrientationReplay.from_function(lambda t: (t, -t), n_samples=4, dt=0.5)
    samples = list(replay)
    assert [s.timestamp for s in samples] == [0.0, 0.5, 1.0, 1.5]
    assert samples[3].as_tuple() == (1.5, -1.5)


def test_base_source_requires_an_adapter() -> None:
    source = OrientationSource()
    assert source.publish(0.1, 0.2)
    assert source.slot.latest().as_tuple() == (0.1, 0.2)
    with pytest.raises(NotImplementedError):
        source.start()


def test_synthetic_source_emit_is_deterministic() -> None:
    source = SyntheticTiltSource(wobble(amplitude=0.5, period=4.0))
    source.emit(1.0)
    sample = source.slot.latest()
    assert sample.roll == pytest.approx(0.5)
    assert sample.pitch == pytest.approx(0.0, abs=1e-12)
    assert sample.timestamp == 1.0


def test_synthetic_source_thread_publishes_until_stopped() -> None:
    slot = OrientationSlot()
    with SyntheticTiltSource(lambda t: (0.25, -0.25), rate_hz=200.0, slot=slot) as source:
        deadline = time.monotonic() + 2.0
        while not slot.has_sample() and time.monotonic() < deadline:
            time.sleep(0.005)
        assert source.running
    assert not source.running
    assert slot.latest().as_tuple() == (0.25, -0.25)
    with pytest.raises(ValueError):
        SyntheticTiltSource(wobble(), rate_hz=0.0)


def test_replay_driven_run_matches_direct_ticks() -> None:
    replay = OrientationReplay.from_function(wobble(), n_samples=30, dt=1 / 60)
    a = SimulationClock.from_bounds(320, 480)
    b = SimulationClock.from_bounds(320, 480)
    slot = OrientationSlot()
    driver = FrameDriver(b, slot=slot)
    for sample in replay:
        snap_a = a.tick(1 / 60, sample)
        slot.publish(sample)
        snap_b = driver.frame(dt=1 / 60)
    np.testing.assert_array_equal(snap_a.polyline, snap_b.polyline)
