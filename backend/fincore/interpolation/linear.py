from __future__ import annotations

from fincore.errors import OutOfRange
from fincore.interpolation.base import Interpolation


class LinearInterpolation(Interpolation):
    """Piecewise-linear interpolation between consecutive pillars."""

    @staticmethod
    def _interp_linear(x: float, x0: float, x1: float, y0: float, y1: float) -> float:
        return y0 + (x - x0) * (y1 - y0) / (x1 - x0)

    def evaluate(self, x: float) -> float:
        x = self._check_in_range(x)

        xs, ys = self._x, self._y
        if x == xs[-1]:
            return ys[-1]

        # first closed segment [x[i-1], x[i]] containing x
        for i in range(1, len(xs)):
            if xs[i - 1] <= x <= xs[i]:
                return self._interp_linear(x, xs[i - 1], xs[i], ys[i - 1], ys[i])

        raise OutOfRange(f"{x!r} is outside the interpolation range [{self.x_min!r}, {self.x_max!r}].")
