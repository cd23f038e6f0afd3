from __future__ import annotations

from datetime import date
from enum import Enum

from dateutil.relativedelta import relativedelta

from fincore.core.daycount import DayCountConvention, days_per_month, days_per_year
from fincore.core.timedelta import TimeDelta
from fincore.errors import UndefinedTenor


class Tenor(str, Enum):
    ON = "ON"
    TN = "TN"
    SN = "SN"
    W1 = "1W"
    W2 = "2W"
    M1 = "1M"
    M3 = "3M"
    M6 = "6M"
    Y1 = "1Y"
    Y5 = "5Y"
    Y10 = "10Y"
    Y20 = "20Y"
    Y30 = "30Y"


# Tenors with a fixed day count, independent of the convention.
_FIXED_DAYS = {
    Tenor.ON: 1,
    Tenor.TN: 2,
    Tenor.SN: 3,
    Tenor.W1: 7,
    Tenor.W2: 14,
}

_MONTHS = {Tenor.M1: 1, Tenor.M3: 3, Tenor.M6: 6}
_YEARS = {Tenor.Y1: 1, Tenor.Y5: 5, Tenor.Y10: 10, Tenor.Y20: 20, Tenor.Y30: 30}

_TENOR_ALIASES = {
    "O/N": Tenor.ON,
    "1D": Tenor.ON,
    "T/N": Tenor.TN,
    "S/N": Tenor.SN,
    "12M": Tenor.Y1,
}


def _checked(tenor) -> Tenor:
    if not isinstance(tenor, Tenor):
        raise UndefinedTenor(f"Undefined tenor: {tenor!r}")
    return tenor


def parse_tenor(value) -> Tenor:
    """
    Parse a tenor label like 'ON', 'o/n', '1W', '3M', '5Y'.

    Only the tenors of the Tenor enumeration are accepted.
    """
    if isinstance(value, Tenor):
        return value
    t = str(value).strip().upper().replace(" ", "")

    if t in _TENOR_ALIASES:
        return _TENOR_ALIASES[t]
    try:
        return Tenor(t)
    except ValueError:
        raise UndefinedTenor(f"Unsupported tenor: {value!r}") from None


def tenor_name(tenor: Tenor) -> str:
    return _checked(tenor).value


def tenor_in_days(tenor: Tenor, convention: DayCountConvention) -> int:
    tenor = _checked(tenor)
    if tenor in _FIXED_DAYS:
        return _FIXED_DAYS[tenor]
    if tenor in _MONTHS:
        return _MONTHS[tenor] * days_per_month(convention)
    return _YEARS[tenor] * days_per_year(convention)


def tenor_as_delta(tenor: Tenor, convention: DayCountConvention) -> TimeDelta:
    return TimeDelta(days=tenor_in_days(tenor, convention))


def tenor_year_fraction(
    tenor: Tenor,
    convention: DayCountConvention,
    *,
    floor_division: bool = False,
) -> float:
    """
    tenor_in_days / days_per_year.

    `floor_division=True` truncates to whole years (every tenor below 1Y
    gives 0.0), matching integer-division callers.
    """
    days = tenor_in_days(tenor, convention)
    year = days_per_year(convention)
    if floor_division:
        return float(days // year)
    return days / year


def add_tenor(d: date, tenor) -> date:
    """
    Add a tenor to a civil date using calendar months and years.

    Unlike tenor_as_delta (fixed day counts per convention), 1M from Jan 31
    lands on the last day of February. Does NOT apply business day adjustment.
    """
    tenor = parse_tenor(tenor)

    if tenor in _FIXED_DAYS:
        return d + relativedelta(days=_FIXED_DAYS[tenor])
    if tenor in _MONTHS:
        return d + relativedelta(months=_MONTHS[tenor])
    return d + relativedelta(years=_YEARS[tenor])
