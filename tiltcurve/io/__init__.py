"""Input/output: orientation sources and configuration files."""

from tiltcurve.io.streams import OrientationReplay, OrientationSource, SyntheticTiltSource, wobble
from tiltcurve.io.serializers import save_config, load_config

__all__ = [
    "OrientationReplay",
    "OrientationSource",
    "SyntheticTiltSource",
    "wobble",
    "save_config",
    "load_config",
]
