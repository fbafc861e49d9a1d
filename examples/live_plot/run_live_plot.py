"""
Live view: a synthetic tilt sensor thread feeds the simulation, matplotlib draws it.

The sensor publishes into an OrientationSlot at its own rate; the animation
callback is the frame driver (measured dt, latest tilt per frame).

Usage:
  python examples/live_plot/run_live_plot.py [--rate 50] [--amplitude 0.6]
"""

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

try:
    import matplotlib.pyplot as plt
    from matplotlib.animation import FuncAnimation
except ImportError:
    print("This example requires matplotlib: pip install tiltcurve[plot]")
    sys.exit(1)

from tiltcurve import SimulationClock
from tiltcurve.io import SyntheticTiltSource, wobble
from tiltcurve.simulation import FrameDriver, plot_snapshot


def main() -> None:
    parser = argparse.ArgumentParser(description="TiltCurve live plot")
    parser.add_argument("--width", type=float, default=390.0)
    parser.add_argument("--height", type=float, default=844.0)
    parser.add_argument("--rate", type=float, default=50.0, help="Sensor rate (Hz)")
    parser.add_argument("--amplitude", type=float, default=0.6)
    parser.add_argument("--period", type=float, default=3.0)
    args = parser.parse_args()

    clock = SimulationClock.from_bounds(args.width, args.height)
    source = SyntheticTiltSource(wobble(args.amplitude, args.period), rate_hz=args.rate)
    driver = FrameDriver(clock, slot=source.slot)

    fig, ax = plt.subplots(figsize=(5, 9))
    fig.patch.set_facecolor((15 / 255, 16 / 255, 30 / 255))

    def update(_frame: int) -> None:
        snap = driver.frame()
        ax.clear()
        ax.set_facecolor("black")
        plot_snapshot(snap, ax=ax)
        ax.set_xlim(0, args.width)
        ax.set_ylim(args.height, 0)

    with source:
        anim = FuncAnimation(fig, update, interval=1000 * clock.config.nominal_dt, cache_frame_data=False)
        plt.show()
    del anim


if __name__ == "__main__":
    main()
