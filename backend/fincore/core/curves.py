from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Optional

import pandas as pd

from fincore.config.calendar_config import COL_INDEX, COL_X, COL_Y
from fincore.core.timestamps import EpochTimestamp
from fincore.interpolation import CubicSplineInterpolation, Interpolation, LinearInterpolation


class InterpolationKind(str, Enum):
    LINEAR = "linear"
    CUBIC_SPLINE = "cubic_spline"


_INTERPOLATORS = {
    InterpolationKind.LINEAR: LinearInterpolation,
    InterpolationKind.CUBIC_SPLINE: CubicSplineInterpolation,
}


@dataclass(frozen=True)
class CurvePoint:
    year_frac: float                          # T (years)
    value: float                              # y(T): rate, vol, ...
    tenor: str = ""                           # "ON", "1M", ...
    tenor_date: Optional[EpochTimestamp] = None


def build_interpolator(
    points: Mapping[float, float] | Iterable[tuple[float, float]],
    kind: InterpolationKind | str = InterpolationKind.LINEAR,
) -> Interpolation:
    try:
        cls = _INTERPOLATORS[InterpolationKind(kind)]
    except ValueError:
        available = [k.value for k in InterpolationKind]
        raise ValueError(f"Unsupported interpolation kind: {kind!r}. Available: {available}") from None
    return cls(points)


def curve_from_points(
    points: Iterable[CurvePoint],
    kind: InterpolationKind | str = InterpolationKind.LINEAR,
) -> Interpolation:
    """Pillars are sorted by year_frac; duplicates are rejected by the interpolator."""
    ordered = sorted(points, key=lambda p: p.year_frac)
    return build_interpolator([(p.year_frac, p.value) for p in ordered], kind)


def curve_from_long_df(
    df_long: pd.DataFrame,
    index_name: str,
    kind: InterpolationKind | str = InterpolationKind.LINEAR,
    col_index: str = COL_INDEX,
    col_x: str = COL_X,
    col_y: str = COL_Y,
) -> Interpolation:
    required = [col_index, col_x, col_y]
    missing = [c for c in required if c not in df_long.columns]
    if missing:
        raise ValueError(f"df_long is missing required columns: {missing}")

    sub = df_long[df_long[col_index] == index_name]
    if sub.empty:
        raise ValueError(f"No points found for {col_index}='{index_name}'.")

    if sub[col_x].isna().any():
        raise ValueError(f"Curve '{index_name}' has null {col_x}.")
    if sub[col_y].isna().any():
        raise ValueError(f"Curve '{index_name}' has null {col_y}.")

    sub = sub.sort_values(col_x, kind="stable")
    pairs = list(zip(sub[col_x].astype(float).tolist(), sub[col_y].astype(float).tolist()))
    return build_interpolator(pairs, kind)
