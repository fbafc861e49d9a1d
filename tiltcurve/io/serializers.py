"""Save and load simulation configurations as JSON."""

import json
from pathlib import Path
from typing import Any, Dict, Union

import numpy as np

from tiltcurve.config import SimulationConfig


def _to_builtin(d: Any) -> Any:
    """Recursively convert numpy values and tuples for JSON."""
    if isinstance(d, np.ndarray):
        return d.tolist()
    if isinstance(d, dict):
        return {k: _to_builtin(v) for k, v in d.items()}
    if isinstance(d, (list, tuple)):
        return [_to_builtin(x) for x in d]
    if isinstance(d, np.floating):
        return float(d)
    if isinstance(d, np.integer):
        return int(d)
    return d


def save_config(config: Union[SimulationConfig, Dict[str, Any]], path: Union[str, Path]) -> None:
    """
    Save a SimulationConfig (or a plain dict) to JSON.
    Numpy arrays and scalars are converted to built-in types.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.to_dict() if isinstance(config, SimulationConfig) else config
    with open(path, "w", encoding="utf-8") as f:
        json.dump(_to_builtin(data), f, indent=2, ensure_ascii=False)


def load_config(path: Union[str, Path]) -> SimulationConfig:
    """Load a SimulationConfig from JSON; missing keys take their defaults."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    return SimulationConfig.from_dict(data)
