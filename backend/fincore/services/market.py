from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable

import pandas as pd

from fincore.config.calendar_config import COL_INDEX, DEFAULT_DAYCOUNT_BASE
from fincore.core.curves import InterpolationKind, curve_from_long_df
from fincore.core.daycount import DayCountConvention, normalize_daycount_base, year_fraction
from fincore.core.timestamps import EpochTimestamp
from fincore.interpolation import Interpolation

logger = logging.getLogger(__name__)


@dataclass
class CurveSet:
    """
    Curve set by IndexName, ready to query values by year fraction or date.
    """
    analysis: EpochTimestamp
    convention: DayCountConvention
    kind: InterpolationKind
    points: pd.DataFrame                  # canonical long table (debug/export)
    curves: Dict[str, Interpolation]      # index_name -> interpolator

    @property
    def available_indices(self) -> list[str]:
        return sorted(self.curves.keys())

    def get(self, index_name: str) -> Interpolation:
        if index_name not in self.curves:
            available = self.available_indices
            raise KeyError(f"Curve not found: {index_name!r}. Available: {available}")
        return self.curves[index_name]

    def require_indices(self, required_indices: Iterable[str]) -> None:
        """
        Fails if any required index is missing from the curve set.
        """
        required = sorted(
            {
                str(ix).strip()
                for ix in required_indices
                if ix is not None and str(ix).strip() != ""
            }
        )
        missing = [ix for ix in required if ix not in self.curves]
        if missing:
            raise KeyError(
                f"Missing curves for required indices: {missing}. "
                f"Available: {self.available_indices}"
            )

    def _t(self, ts: EpochTimestamp) -> float:
        """
        Converts a timestamp to year-fraction from the analysis timestamp.
        """
        return year_fraction(self.analysis, ts, self.convention)

    def value(self, index_name: str, t: float) -> float:
        return self.get(index_name).evaluate(t)

    def value_on_date(self, index_name: str, ts: EpochTimestamp) -> float:
        return self.value(index_name, self._t(ts))


def curve_set_from_long_df(
    df_long: pd.DataFrame,
    analysis: EpochTimestamp,
    convention: DayCountConvention | str = DEFAULT_DAYCOUNT_BASE,
    kind: InterpolationKind | str = InterpolationKind.LINEAR,
) -> CurveSet:
    """
    Pipeline:
      long table (IndexName, YearFrac, Rate) -> one interpolator per IndexName
    """
    if COL_INDEX not in df_long.columns:
        raise ValueError(f"df_long is missing required column: {COL_INDEX!r}")

    convention = normalize_daycount_base(convention)
    kind = InterpolationKind(kind)
    index_names = sorted(df_long[COL_INDEX].astype(str).unique().tolist())
    curves: Dict[str, Interpolation] = {}
    for ix in index_names:
        curves[ix] = curve_from_long_df(df_long, ix, kind=kind)

    logger.debug("Built %d %s curve(s): %s", len(curves), kind.value, index_names)

    return CurveSet(
        analysis=analysis,
        convention=convention,
        kind=kind,
        points=df_long,
        curves=curves,
    )
