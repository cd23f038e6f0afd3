"""Core domain objects: timestamps, day-count conventions, tenor arithmetic, curves."""

from fincore.core.curves import (
    CurvePoint,
    InterpolationKind,
    build_interpolator,
    curve_from_long_df,
    curve_from_points,
)
from fincore.core.daycount import (
    DayCountConvention,
    day_count_name,
    days_per_month,
    days_per_year,
    normalize_daycount_base,
    year_fraction,
)
from fincore.core.schedule import (
    end_date_from_tenor,
    generate_sequence,
    order_sequence,
    periods_between,
    sequence_to_frame,
)
from fincore.core.tenors import (
    Tenor,
    add_tenor,
    parse_tenor,
    tenor_as_delta,
    tenor_in_days,
    tenor_name,
    tenor_year_fraction,
)
from fincore.core.timedelta import TimeDelta
from fincore.core.timestamps import CivilFields, EpochTimestamp, Precision, timedelta_between

__all__ = [
    "CivilFields",
    "CurvePoint",
    "DayCountConvention",
    "EpochTimestamp",
    "InterpolationKind",
    "Precision",
    "Tenor",
    "TimeDelta",
    "add_tenor",
    "build_interpolator",
    "curve_from_long_df",
    "curve_from_points",
    "day_count_name",
    "days_per_month",
    "days_per_year",
    "end_date_from_tenor",
    "generate_sequence",
    "normalize_daycount_base",
    "order_sequence",
    "parse_tenor",
    "periods_between",
    "sequence_to_frame",
    "tenor_as_delta",
    "tenor_in_days",
    "tenor_name",
    "tenor_year_fraction",
    "timedelta_between",
    "year_fraction",
]
