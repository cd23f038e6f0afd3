from __future__ import annotations

from enum import Enum

from fincore.core.rounding import round_half_away
from fincore.core.timedelta import NS_PER_S, SECONDS_PER_DAY
from fincore.core.timestamps import EpochTimestamp, Precision, timedelta_between
from fincore.errors import NonPositiveYearFraction, UndefinedDayCountConvention


class DayCountConvention(str, Enum):
    ACT360 = "ACT/360"
    ACT365 = "ACT/365"
    ACT364 = "ACT/364"


_DAYS_PER_YEAR = {
    DayCountConvention.ACT360: 360,
    DayCountConvention.ACT365: 365,
    DayCountConvention.ACT364: 364,
}


# --- Map typical input variants to canonical conventions ---
DAYCOUNT_BASE_MAP = {
    # ACT/360
    "ACT/360": DayCountConvention.ACT360,
    "ACT360": DayCountConvention.ACT360,
    "A/360": DayCountConvention.ACT360,
    "ACTUAL/360": DayCountConvention.ACT360,

    # ACT/365 (and fixed variants)
    "ACT/365": DayCountConvention.ACT365,
    "ACT365": DayCountConvention.ACT365,
    "A/365": DayCountConvention.ACT365,
    "ACTUAL/365": DayCountConvention.ACT365,
    "ACTUAL/365F": DayCountConvention.ACT365,
    "ACT/365F": DayCountConvention.ACT365,

    # ACT/364
    "ACT/364": DayCountConvention.ACT364,
    "ACT364": DayCountConvention.ACT364,
    "A/364": DayCountConvention.ACT364,
    "ACTUAL/364": DayCountConvention.ACT364,
}


def normalize_daycount_base(value) -> DayCountConvention:
    """
    Normalize input variants to a DayCountConvention:
    ACT/360, ACT/365, ACT/364
    """
    if isinstance(value, DayCountConvention):
        return value
    if value is None:
        raise UndefinedDayCountConvention("Daycount base is empty.")

    v = str(value).strip().upper()

    # basic normalization
    v = v.replace(" ", "").replace("-", "/")
    for ch in ("(", ")", "[", "]"):
        v = v.replace(ch, "")
    v = v.replace("FIXED", "F")      # ACT/365FIXED -> ACT/365F

    if v in DAYCOUNT_BASE_MAP:
        return DAYCOUNT_BASE_MAP[v]

    raise UndefinedDayCountConvention(f"Unrecognized daycount base: {value!r}")


def _checked(convention) -> DayCountConvention:
    if not isinstance(convention, DayCountConvention):
        raise UndefinedDayCountConvention(
            f"Undefined day count convention: {convention!r}"
        )
    return convention


def day_count_name(convention: DayCountConvention) -> str:
    return _checked(convention).value


def days_per_year(convention: DayCountConvention) -> int:
    return _DAYS_PER_YEAR[_checked(convention)]


def days_per_month(convention: DayCountConvention) -> int:
    # 30 for all three conventions
    return round_half_away(days_per_year(convention) / 12)


# ============================================================
# Year fraction
# ============================================================
def year_fraction(
    start: EpochTimestamp,
    end: EpochTimestamp,
    convention: DayCountConvention,
) -> float:
    """
    Elapsed time from start to end in convention years:
      nanoseconds(end - start) / (days_per_year * 86400 * 1e9)

    A zero fraction is valid; end before start raises NonPositiveYearFraction.
    """
    year_ns = days_per_year(convention) * SECONDS_PER_DAY * NS_PER_S
    total_ns = timedelta_between(start, end, Precision.NANOSECONDS).total_nanoseconds()

    t = total_ns / year_ns
    if t < 0:
        raise NonPositiveYearFraction(
            f"end precedes start: year fraction {t!r} under {convention.value}"
        )
    return t
