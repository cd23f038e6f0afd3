from __future__ import annotations

from typing import Iterable

import pandas as pd

from fincore.config.calendar_config import COL_TENOR, COL_X
from fincore.core.daycount import DayCountConvention, year_fraction
from fincore.core.schedule import end_date_from_tenor
from fincore.core.tenors import Tenor, parse_tenor
from fincore.core.timestamps import EpochTimestamp
from fincore.errors import UndefinedTenor


def pillar_table(
    analysis: EpochTimestamp,
    tenors: Iterable[Tenor | str],
    convention: DayCountConvention,
) -> pd.DataFrame:
    """
    One row per tenor:
      Tenor | TenorDate | YearFrac
    with TenorDate = analysis + tenor (convention day count).
    """
    rows = []
    for t in tenors:
        tenor = parse_tenor(t)
        tenor_date = end_date_from_tenor(analysis, tenor, convention)
        rows.append(
            {
                COL_TENOR: tenor.value,
                "TenorDate": tenor_date,
                COL_X: year_fraction(analysis, tenor_date, convention),
            }
        )
    return pd.DataFrame(rows, columns=[COL_TENOR, "TenorDate", COL_X])


def enrich_with_year_fractions(
    df_long: pd.DataFrame,
    analysis: EpochTimestamp,
    convention: DayCountConvention,
    col_tenor: str = COL_TENOR,
) -> pd.DataFrame:
    """
    Add:
      - TenorDate = analysis + Tenor
      - YearFrac = year_fraction(analysis, TenorDate, convention)

    Validates tenors first: if any are unsupported, raises naming all of them.
    """
    if df_long.empty:
        raise ValueError("df_long is empty: no curve points to process.")
    if col_tenor not in df_long.columns:
        raise ValueError(f"df_long is missing required column: {col_tenor!r}")

    unique_tenors = sorted(df_long[col_tenor].astype(str).unique().tolist())
    invalid_tenors = []
    for t in unique_tenors:
        try:
            parse_tenor(t)
        except UndefinedTenor:
            invalid_tenors.append(t)

    if invalid_tenors:
        raise UndefinedTenor(f"Unsupported tenors found: {invalid_tenors}")

    # keyed by the original labels ("O/N"), not the canonical ones ("ON")
    pillars = pillar_table(analysis, unique_tenors, convention).drop(columns=[COL_TENOR])
    pillars.insert(0, col_tenor, unique_tenors)

    df_long = df_long.drop(columns=[c for c in ("TenorDate", COL_X) if c in df_long.columns])
    df_long[col_tenor] = df_long[col_tenor].astype(str)
    return df_long.merge(pillars, on=col_tenor, how="left")
