from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

import numpy as np

from fincore.errors import MinimalSizeViolation, NonIncreasingAxis, OutOfRange


class Interpolation(ABC):
    """
    Ordered (x, y) pillars and the evaluate() contract shared by every
    interpolator.

    `points` is a mapping x -> y or an iterable of (x, y) pairs, taken in
    iteration order. The axis is never re-sorted: keys must already be
    strictly increasing.
    """

    def __init__(self, points: Mapping[float, float] | Iterable[tuple[float, float]]) -> None:
        items = list(points.items()) if isinstance(points, Mapping) else list(points)

        if len(items) < 2:
            raise MinimalSizeViolation(
                f"At least 2 points are required to interpolate (got {len(items)})."
            )

        xs = [float(x) for x, _ in items]
        ys = [float(y) for _, y in items]

        prev = None
        for x in xs:
            if not math.isfinite(x):
                raise NonIncreasingAxis(f"The x-axis must hold finite values (got {x!r}).")
            if prev is not None and not x > prev:
                raise NonIncreasingAxis(
                    f"The x-axis must be strictly increasing ({x!r} follows {prev!r})."
                )
            prev = x

        self._x = tuple(xs)
        self._y = tuple(ys)

    @property
    def x_values(self) -> tuple[float, ...]:
        return self._x

    @property
    def y_values(self) -> tuple[float, ...]:
        return self._y

    @property
    def x_min(self) -> float:
        return self._x[0]

    @property
    def x_max(self) -> float:
        return self._x[-1]

    def _check_in_range(self, x: float) -> float:
        x = float(x)
        if not self.x_min <= x <= self.x_max:
            raise OutOfRange(
                f"{x!r} is outside the interpolation range [{self.x_min!r}, {self.x_max!r}]."
            )
        return x

    @abstractmethod
    def evaluate(self, x: float) -> float:
        ...

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

    def evaluate_many(self, xs: Iterable[float]) -> np.ndarray:
        return np.fromiter((self.evaluate(x) for x in xs), dtype=float)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={len(self._x)}, x=[{self.x_min}, {self.x_max}])"
