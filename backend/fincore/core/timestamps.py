from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo as TzInfo
from enum import IntEnum
from functools import total_ordering
from typing import Iterable, NamedTuple, Optional

from dateutil import tz

from fincore.config.calendar_config import CIVIL_TIMEZONE
from fincore.core.rounding import round_ratio
from fincore.core.timedelta import NS_PER_S, SECONDS_PER_DAY, TimeDelta
from fincore.errors import NegativeTimestamp


class Precision(IntEnum):
    """Tick unit of an EpochTimestamp; the value is the per-second scale factor."""

    SECONDS = 1
    MILLISECONDS = 10**3
    MICROSECONDS = 10**6
    NANOSECONDS = 10**9


_EPOCH = datetime(1970, 1, 1, tzinfo=tz.UTC)


def civil_timezone(tzinfo: Optional[TzInfo] = None) -> TzInfo:
    """Explicit zone if given, else the configured one (platform local by default)."""
    if tzinfo is not None:
        return tzinfo
    zone = tz.gettz(CIVIL_TIMEZONE)
    if zone is None:
        raise ValueError(f"Unknown civil time zone: {CIVIL_TIMEZONE!r}")
    return zone


class CivilFields(NamedTuple):
    year: int
    month: int
    day: int
    weekday: int  # Monday=0 ... Sunday=6

    @property
    def calendar_date(self) -> date:
        return date(self.year, self.month, self.day)


@total_ordering
@dataclass(frozen=True, eq=False)
class EpochTimestamp:
    """
    Non-negative tick count since the Unix epoch, tagged with its precision.

    Values are immutable: precision conversion and delta application return
    new instances. Equality and ordering compare the instant, so the same
    moment held at two precisions compares equal.
    """

    ticks: int
    precision: Precision = Precision.SECONDS

    def __post_init__(self) -> None:
        if self.ticks < 0:
            raise NegativeTimestamp(
                f"A timestamp value cannot be negative (got ticks={self.ticks})."
            )
        # Accept raw scale factors (1, 1000, ...) as precision.
        object.__setattr__(self, "precision", Precision(self.precision))
        object.__setattr__(self, "ticks", int(self.ticks))

    # ---------- Constructors ----------
    @classmethod
    def from_datetime(
        cls,
        dt: datetime,
        precision: Precision = Precision.SECONDS,
    ) -> "EpochTimestamp":
        """
        Naive datetimes are read as civil time in the configured zone.
        Sub-microsecond ticks are zero (datetime resolution).
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=civil_timezone())

        delta = dt - _EPOCH
        nanos = (delta.days * SECONDS_PER_DAY + delta.seconds) * NS_PER_S
        nanos += delta.microseconds * 1000
        return cls(round_ratio(nanos * int(precision), NS_PER_S), precision)

    @classmethod
    def from_date(
        cls,
        d: date,
        precision: Precision = Precision.SECONDS,
        tzinfo: Optional[TzInfo] = None,
    ) -> "EpochTimestamp":
        """Midnight of `d` in the civil zone."""
        midnight = datetime(d.year, d.month, d.day, tzinfo=civil_timezone(tzinfo))
        return cls.from_datetime(midnight, precision)

    # ---------- Precision ----------
    @property
    def nanoseconds(self) -> int:
        return self.ticks * (NS_PER_S // int(self.precision))

    def convert_precision(self, target: Precision) -> "EpochTimestamp":
        """
        Same instant at `target` precision: round(ticks * target / current).

        Converting to a coarser precision rounds to the nearest tick (half up),
        so a round trip through a coarser precision may lose up to half a unit.
        """
        target = Precision(target)
        new_ticks = round_ratio(self.ticks * int(target), int(self.precision))
        return EpochTimestamp(new_ticks, target)

    def apply_delta(self, delta: TimeDelta) -> "EpochTimestamp":
        return EpochTimestamp(self.ticks + delta.total_in(self.precision), self.precision)

    # ---------- Civil calendar ----------
    def to_datetime(self, tzinfo: Optional[TzInfo] = None) -> datetime:
        micros = round_ratio(self.nanoseconds, 1000)
        return (_EPOCH + timedelta(microseconds=micros)).astimezone(civil_timezone(tzinfo))

    def civil_fields(self, tzinfo: Optional[TzInfo] = None) -> CivilFields:
        seconds = self.convert_precision(Precision.SECONDS).ticks
        dt = datetime.fromtimestamp(seconds, tz=civil_timezone(tzinfo))
        return CivilFields(dt.year, dt.month, dt.day, dt.weekday())

    def is_weekend(self, tzinfo: Optional[TzInfo] = None) -> bool:
        return self.civil_fields(tzinfo).weekday >= 5

    def is_holiday(
        self,
        holidays: Iterable["EpochTimestamp"],
        tzinfo: Optional[TzInfo] = None,
    ) -> bool:
        """True when this timestamp falls on the same civil date as any holiday."""
        day = self.civil_fields(tzinfo).calendar_date
        return any(h.civil_fields(tzinfo).calendar_date == day for h in holidays)

    # ---------- Comparison ----------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EpochTimestamp):
            return NotImplemented
        return self.nanoseconds == other.nanoseconds

    def __lt__(self, other: "EpochTimestamp") -> bool:
        if not isinstance(other, EpochTimestamp):
            return NotImplemented
        return self.nanoseconds < other.nanoseconds

    def __hash__(self) -> int:
        return hash(self.nanoseconds)


def timedelta_between(
    start: EpochTimestamp,
    end: EpochTimestamp,
    unit: Precision,
) -> TimeDelta:
    """
    end - start at `unit` precision, as a TimeDelta with only the field of
    `unit` populated (SECONDS -> seconds, NANOSECONDS -> nanoseconds, ...).

    Both endpoints are rounded to `unit` before subtracting. Inputs are not
    modified.
    """
    unit = Precision(unit)
    diff = end.convert_precision(unit).ticks - start.convert_precision(unit).ticks

    if unit is Precision.SECONDS:
        return TimeDelta(seconds=diff)
    if unit is Precision.MILLISECONDS:
        return TimeDelta(milliseconds=diff)
    if unit is Precision.MICROSECONDS:
        return TimeDelta(microseconds=diff)
    return TimeDelta(nanoseconds=diff)
