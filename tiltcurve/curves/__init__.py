"""Curve evaluation and sampling."""

from tiltcurve.curves.bezier import (
    CurveSampler,
    bezier_derivative,
    bezier_derivatives,
    bezier_points,
    bezier_position,
    interior_parameters,
    sample_parameters,
)

__all__ = [
    "CurveSampler",
    "bezier_position",
    "bezier_derivative",
    "bezier_points",
    "bezier_derivatives",
    "sample_parameters",
    "interior_parameters",
]
