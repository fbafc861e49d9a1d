"""
Plotting helpers for curve snapshots and handle trajectories.

Both functions draw with matplotlib, which is an optional dependency
(pip install tiltcurve[plot]); without it they raise ImportError.
"""

from typing import Any, Optional

import numpy as np

CURVE_COLOR = "cyan"
TANGENT_COLOR = "magenta"
ENDPOINT_COLOR = "tab:green"
HANDLE_COLOR = "tab:blue"


def _pyplot() -> Any:
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib is required for plotting (pip install tiltcurve[plot]).")
    return plt


def plot_snapshot(
    snapshot: Any,
    ax: Optional[Any] = None,
    title: Optional[str] = None,
    invert_y: bool = True,
    **kwargs: Any,
) -> Any:
    """
    Draw one CurveSnapshot: stroked curve, tangent markers, control points.

    Args:
        snapshot: CurveSnapshot (read only).
        ax: matplotlib axes (if None, creates new figure).
        title: axes title (default: frame index and time).
        invert_y: screen coordinates (y grows downward).
        **kwargs: passed to the curve ax.plot().

    Returns:
        matplotlib axes.
    """
    plt = _pyplot()
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=(6, 6))
    kwargs.setdefault("color", CURVE_COLOR)
    kwargs.setdefault("lw", 3)
    pts = snapshot.polyline
    ax.plot(pts[:, 0], pts[:, 1], **kwargs)
    for origin, tip in snapshot.tangent_segments:
        ax.plot([origin[0], tip[0]], [origin[1], tip[1]], color=TANGENT_COLOR, lw=1.5)
    cp = snapshot.control_points
    ax.scatter(cp[[0, -1], 0], cp[[0, -1], 1], s=60, color=ENDPOINT_COLOR, zorder=3)
    ax.scatter(cp[1:-1, 0], cp[1:-1, 1], s=60, color=HANDLE_COLOR, zorder=3)
    ax.set_aspect("equal", adjustable="datalim")
    if invert_y and not ax.yaxis_inverted():
        ax.invert_yaxis()
    ax.set_title(title if title is not None else f"frame {snapshot.frame}  t={snapshot.time:.2f}s")
    ax.grid(True, alpha=0.3)
    return ax


def plot_handle_paths(
    history: Any,
    ax: Optional[Any] = None,
    title: str = "Handle paths",
    invert_y: bool = True,
    **kwargs: Any,
) -> Any:
    """
    Plot the path of each free handle recorded in a FrameHistory.

    Args:
        history: FrameHistory with a 'control_points' series of (4, 2) arrays.
        ax: matplotlib axes (if None, creates new figure).
        title: axes title.
        **kwargs: passed to ax.plot().

    Returns:
        matplotlib axes.
    """
    plt = _pyplot()
    cps = np.asarray(history.get("control_points"), dtype=float)
    if cps.ndim != 3 or cps.shape[1:] != (4, 2):
        raise ValueError("History has no 'control_points' series of shape (n, 4, 2).")
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=(6, 6))
    for i in (1, 2):
        ax.plot(cps[:, i, 0], cps[:, i, 1], label=f"handle {i}", **kwargs)
        ax.scatter(cps[-1, i, 0], cps[-1, i, 1], s=30)
    ax.scatter(cps[0, [0, 3], 0], cps[0, [0, 3], 1], s=60, color=ENDPOINT_COLOR, label="endpoints")
    ax.set_aspect("equal", adjustable="datalim")
    if invert_y and not ax.yaxis_inverted():
        ax.invert_yaxis()
    ax.set_title(title)
    ax.legend(loc="upper right", fontsize=8)
    ax.grid(True, alpha=0.3)
    return ax
