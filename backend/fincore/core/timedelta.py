from __future__ import annotations

from dataclasses import dataclass

from fincore.core.rounding import round_ratio


SECONDS_PER_DAY = 24 * 60 * 60
SECONDS_PER_HOUR = 60 * 60
SECONDS_PER_MINUTE = 60

MS_PER_S = 10**3
US_PER_S = 10**6
NS_PER_S = 10**9


@dataclass
class TimeDelta:
    """
    Duration split into seven independent signed fields.

    Fields are never normalized (hours may exceed 23, signs may differ).
    Each aggregation rounds every sub-unit contribution on its own before
    summing, so e.g. 500 ms + 500_000 us counts as 1 + 1 = 2 seconds.
    """

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0
    microseconds: int = 0
    nanoseconds: int = 0

    def _whole_seconds(self) -> int:
        return (
            self.days * SECONDS_PER_DAY
            + self.hours * SECONDS_PER_HOUR
            + self.minutes * SECONDS_PER_MINUTE
            + self.seconds
        )

    def total_seconds(self) -> int:
        return (
            self._whole_seconds()
            + round_ratio(self.microseconds, US_PER_S)
            + round_ratio(self.milliseconds, MS_PER_S)
            + round_ratio(self.nanoseconds, NS_PER_S)
        )

    def total_milliseconds(self) -> int:
        return (
            self._whole_seconds() * MS_PER_S
            + self.milliseconds
            + round_ratio(self.microseconds * MS_PER_S, US_PER_S)
            + round_ratio(self.nanoseconds * MS_PER_S, NS_PER_S)
        )

    def total_microseconds(self) -> int:
        total_ms = self._whole_seconds() * MS_PER_S + self.milliseconds
        return (
            total_ms * 1000
            + self.microseconds
            + round_ratio(self.nanoseconds * US_PER_S, NS_PER_S)
        )

    def total_nanoseconds(self) -> int:
        total_ms = self._whole_seconds() * MS_PER_S + self.milliseconds
        total_us = total_ms * 1000 + self.microseconds
        return total_us * 1000 + self.nanoseconds

    def total_in(self, precision: int) -> int:
        """Total expressed in the unit of `precision` (a Precision scale factor)."""
        scale = int(precision)
        if scale == 1:
            return self.total_seconds()
        if scale == MS_PER_S:
            return self.total_milliseconds()
        if scale == US_PER_S:
            return self.total_microseconds()
        if scale == NS_PER_S:
            return self.total_nanoseconds()
        raise ValueError(f"Unsupported precision: {precision!r}")
