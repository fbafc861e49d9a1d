"""In-memory record of simulated frames with numpy and CSV export."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import numpy as np


class FrameHistory:
    """
    Per-frame buffer of scalar and array values (time, control points, tilt...).
    Array values are flattened into one CSV column per element on export.
    """

    def __init__(self, max_length: Optional[int] = None) -> None:
        """
        Args:
            max_length: number of frames to keep (None = unlimited).
        """
        if max_length is not None and max_length < 1:
            raise ValueError("max_length must be >= 1 or None")
        self._max_length = max_length
        self._data: Dict[str, List[Any]] = {}
        self._frames = 0

    def append(self, **kwargs: Any) -> None:
        """Add one frame (key -> value). Keys missing from a frame stay short."""
        for key, value in kwargs.items():
            self._data.setdefault(key, []).append(value)
        self._frames += 1
        if self._max_length is not None and self._frames > self._max_length:
            for key in self._data:
                self._data[key] = self._data[key][-self._max_length:]
            self._frames = self._max_length

    def record(self, snapshot: Any, orientation: Optional[Any] = None) -> None:
        """Append the scalar and control-point content of a CurveSnapshot."""
        row = snapshot.to_dict()
        if orientation is not None:
            row["roll"], row["pitch"] = orientation.roll, orientation.pitch
        else:
            row["roll"], row["pitch"] = np.nan, np.nan
        self.append(**row)

    def clear(self) -> None:
        self._data.clear()
        self._frames = 0

    def keys(self) -> List[str]:
        return list(self._data.keys())

    def get(self, key: str) -> np.ndarray:
        """Series for a key as a numpy array (stacked if values are arrays)."""
        if key not in self._data:
            return np.array([])
        return np.array(self._data[key])

    def to_dict(self) -> Dict[str, np.ndarray]:
        return {k: self.get(k) for k in self._data}

    def _columns(self, keys: List[str]) -> Dict[str, np.ndarray]:
        cols: Dict[str, np.ndarray] = {}
        for key in keys:
            arr = self.get(key)
            if arr.ndim <= 1:
                cols[key] = arr
                continue
            flat = arr.reshape(arr.shape[0], -1)
            for j in range(flat.shape[1]):
                idx = np.unravel_index(j, arr.shape[1:])
                cols[key + "_" + "_".join(str(i) for i in idx)] = flat[:, j]
        return cols

    def to_csv(
        self,
        path: Union[str, Path],
        keys: Optional[List[str]] = None,
        delimiter: str = ",",
    ) -> None:
        """
        Export to CSV, one row per frame. An array-valued key `k` with
        per-frame shape (4, 2) becomes columns k_0_0, k_0_1, ... k_3_1.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        cols = self._columns([k for k in (keys or self.keys()) if k in self._data])
        if not cols:
            path.write_text("")
            return
        n = max(len(c) for c in cols.values())
        rows = []
        for i in range(n):
            rows.append(delimiter.join(repr(float(c[i])) if i < len(c) else "" for c in cols.values()))
        header = delimiter.join(cols.keys())
        path.write_text(header + "\n" + "\n".join(rows) + "\n", encoding="utf-8")

    def __len__(self) -> int:
        return self._frames
