from __future__ import annotations

import logging
from datetime import tzinfo as TzInfo
from typing import Iterable, Optional

import pandas as pd

from fincore.core.daycount import DayCountConvention
from fincore.core.rounding import round_half_away
from fincore.core.tenors import Tenor, tenor_as_delta
from fincore.core.timestamps import EpochTimestamp, Precision, timedelta_between

logger = logging.getLogger(__name__)


def periods_between(
    start: EpochTimestamp,
    end: EpochTimestamp,
    frequency: Tenor,
    convention: DayCountConvention,
) -> int:
    """
    Number of `frequency` periods between start and end, rounded to nearest.
    """
    period_s = tenor_as_delta(frequency, convention).total_seconds()
    elapsed_s = timedelta_between(start, end, Precision.SECONDS).total_seconds()
    return round_half_away(elapsed_s / period_s)


def end_date_from_tenor(
    start: EpochTimestamp,
    tenor: Tenor,
    convention: DayCountConvention,
) -> EpochTimestamp:
    return start.apply_delta(tenor_as_delta(tenor, convention))


def order_sequence(dates: Iterable[EpochTimestamp]) -> list[EpochTimestamp]:
    """
    Ascending, de-duplicated copy of `dates` at NANOSECONDS precision.

    Instants equal at nanosecond resolution collapse into one entry.
    """
    unique_ticks = {d.convert_precision(Precision.NANOSECONDS).ticks for d in dates}
    return [EpochTimestamp(t, Precision.NANOSECONDS) for t in sorted(unique_ticks)]


def generate_sequence(
    start: EpochTimestamp,
    frequency: Tenor,
    convention: DayCountConvention,
    include_start: bool,
    include_end: bool,
    end: EpochTimestamp,
) -> list[EpochTimestamp]:
    """
    Dates stepping from `start` by `frequency`, bounded by `end`.

    With n = periods_between(start, end, ...), the interior points are
    start + k * frequency for k = 1 .. n-1; `start` and `end` are added on
    request. When n <= 1 there are no interior points. The last interior
    point is not adjusted to `end`, so the final step may be shorter or
    longer than `frequency`.
    """
    step = tenor_as_delta(frequency, convention)
    n = periods_between(start, end, frequency, convention)
    logger.debug(
        "generate_sequence: %d period(s) of %s under %s",
        n,
        frequency.value,
        convention.value,
    )

    out: list[EpochTimestamp] = []
    current = start
    for _ in range(1, n):
        current = current.apply_delta(step)
        out.append(current)

    if include_start:
        out.insert(0, start)
    if include_end:
        out.append(end)
    return out


def sequence_to_frame(
    dates: Iterable[EpochTimestamp],
    tzinfo: Optional[TzInfo] = None,
) -> pd.DataFrame:
    """
    Tabular view of a date sequence:
      Ticks | Precision | Date
    """
    rows = [
        {
            "Ticks": d.ticks,
            "Precision": d.precision.name,
            "Date": d.civil_fields(tzinfo).calendar_date,
        }
        for d in dates
    ]
    return pd.DataFrame(rows, columns=["Ticks", "Precision", "Date"])
