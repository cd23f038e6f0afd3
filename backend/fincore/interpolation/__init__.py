"""Curve interpolators: piecewise-linear and natural cubic spline."""

from fincore.interpolation.base import Interpolation
from fincore.interpolation.cubic_spline import CubicSplineInterpolation
from fincore.interpolation.linear import LinearInterpolation

__all__ = [
    "CubicSplineInterpolation",
    "Interpolation",
    "LinearInterpolation",
]
