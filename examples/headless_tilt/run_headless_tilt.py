"""
Headless run: replay a recorded tilt sequence through the curve simulation.

Flow:
  1. Build the default scene for a view of --width x --height.
  2. Generate a wobbling (roll, pitch) sequence at the frame rate.
  3. Drive the SimulationClock with FrameDriver at a fixed dt, recording every frame.
  4. Print how far the handles are from their targets, optionally export CSV/plot.

Usage:
  python examples/headless_tilt/run_headless_tilt.py [--frames 600] [--csv out.csv] [--plot]
"""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from tiltcurve import SimulationClock, SimulationConfig
from tiltcurve.core import FrameHistory, OrientationSlot
from tiltcurve.io import OrientationReplay, load_config, wobble
from tiltcurve.simulation import FrameDriver


def main() -> None:
    parser = argparse.ArgumentParser(description="TiltCurve headless replay")
    parser.add_argument("--frames", type=int, default=600)
    parser.add_argument("--width", type=float, default=390.0)
    parser.add_argument("--height", type=float, default=844.0)
    parser.add_argument("--amplitude", type=float, default=0.4, help="Tilt amplitude (rad)")
    parser.add_argument("--period", type=float, default=4.0, help="Wobble period (s)")
    parser.add_argument("--config", type=Path, default=None, help="JSON SimulationConfig")
    parser.add_argument("--csv", type=Path, default=None, help="Export frame history to CSV")
    parser.add_argument("--plot", action="store_true", help="Save handle paths and last frame as PNG")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = load_config(args.config) if args.config else SimulationConfig()
    dt = config.nominal_dt
    clock = SimulationClock.from_bounds(args.width, args.height, config)
    slot = OrientationSlot()
    history = FrameHistory()
    driver = FrameDriver(clock, slot=slot, history=history)

    replay = OrientationReplay.from_function(wobble(args.amplitude, args.period), args.frames, dt)
    for sample in replay:
        slot.publish(sample)
        driver.frame(dt=dt)

    snap = driver.last_snapshot
    handles = clock.control_points[1:3]
    errors = [h.position.distance_to(h.target) for h in handles]
    print(f"Simulated {clock.frame_count} frames ({clock.time:.2f} s)")
    print(f"Handle lag behind targets: {errors[0]:.2f}, {errors[1]:.2f} units")
    cps = history.get("control_points")
    travel = np.sum(np.hypot(*np.diff(cps[:, 1], axis=0).T))
    print(f"Handle 1 travelled {travel:.1f} units")
    if snap is not None:
        print(f"Curve from {tuple(snap.polyline[0])} to {tuple(snap.polyline[-1])}")

    if args.csv:
        history.to_csv(args.csv)
        print(f"History saved to {args.csv}")

    if args.plot:
        try:
            import matplotlib
            matplotlib.use("Agg")
            import matplotlib.pyplot as plt
            from tiltcurve.simulation import plot_handle_paths, plot_snapshot
        except ImportError:
            print("matplotlib not available, skip plots")
            return
        fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(10, 6))
        plot_snapshot(snap, ax=ax1)
        plot_handle_paths(history, ax=ax2)
        out = Path("headless_tilt.png")
        fig.tight_layout()
        fig.savefig(out, dpi=120)
        plt.close(fig)
        print(f"Plot saved to {out}")


if __name__ == "__main__":
    main()
