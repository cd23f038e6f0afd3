"""
Natural cubic spline interpolation.

On each segment [x_i, x_{i+1}] with dx = x - x_i:

    S_i(x) = a_i + b_i dx + c_i dx^2 + d_i dx^3

with S, S' and S'' continuous at the interior knots and S'' = 0 at both end
knots. The c_i (half the second derivatives) come from the tri-diagonal
system

    h_{i-1} c_{i-1} + 2 (h_{i-1} + h_i) c_i + h_i c_{i+1} = alpha_i

solved by forward elimination (diag, mu, z) and back substitution; b_i and d_i
follow from c. Coefficients are fitted once, at construction.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from fincore.interpolation.base import Interpolation

logger = logging.getLogger(__name__)


class CubicSplineInterpolation(Interpolation):
    def __init__(self, points: Mapping[float, float] | Iterable[tuple[float, float]]) -> None:
        super().__init__(points)
        self._a, self._b, self._c, self._d = self._fit(self._x, self._y)
        logger.debug("Fitted natural cubic spline on %d segment(s)", len(self._b))

    @staticmethod
    def _fit(x: tuple[float, ...], y: tuple[float, ...]):
        n = len(x) - 1
        a = list(y)

        h = [x[i + 1] - x[i] for i in range(n)]

        alpha = [0.0] * n
        for i in range(1, n):
            alpha[i] = (3.0 / h[i]) * (a[i + 1] - a[i]) - (3.0 / h[i - 1]) * (a[i] - a[i - 1])

        # forward elimination; natural boundary at the left end
        diag = [0.0] * (n + 1)
        mu = [0.0] * n
        z = [0.0] * (n + 1)
        diag[0] = 1.0
        for i in range(1, n):
            diag[i] = 2.0 * (x[i + 1] - x[i - 1]) - h[i - 1] * mu[i - 1]
            mu[i] = h[i] / diag[i]
            z[i] = (alpha[i] - h[i - 1] * z[i - 1]) / diag[i]
        diag[n] = 1.0
        z[n] = 0.0

        # back substitution; natural boundary at the right end
        c = [0.0] * (n + 1)
        b = [0.0] * n
        d = [0.0] * n
        for j in range(n - 1, -1, -1):
            c[j] = z[j] - mu[j] * c[j + 1]
            b[j] = (a[j + 1] - a[j]) / h[j] - h[j] * (c[j + 1] + 2.0 * c[j]) / 3.0
            d[j] = (c[j + 1] - c[j]) / (3.0 * h[j])

        return tuple(a), tuple(b), tuple(c), tuple(d)

    @property
    def coefficients(self) -> list[tuple[float, float, float, float]]:
        """(a, b, c, d) of each segment, left to right."""
        return [
            (self._a[i], self._b[i], self._c[i], self._d[i])
            for i in range(len(self._b))
        ]

    def evaluate(self, x: float) -> float:
        x = self._check_in_range(x)

        if x == self.x_max:
            return self._y[-1]

        i = 0
        for j in range(1, len(self._x)):
            if x < self._x[j]:
                i = j - 1
                break

        dx = x - self._x[i]
        return self._a[i] + self._b[i] * dx + self._c[i] * dx * dx + self._d[i] * dx * dx * dx
