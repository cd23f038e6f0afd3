"""Failure kinds raised by the temporal and interpolation engines."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    NEGATIVE_TIMESTAMP = "NegativeTimestamp"
    UNDEFINED_DAY_COUNT_CONVENTION = "UndefinedDayCountConvention"
    UNDEFINED_TENOR = "UndefinedTenor"
    NON_POSITIVE_YEAR_FRACTION = "NonPositiveYearFraction"
    MINIMAL_SIZE_VIOLATION = "MinimalSizeViolation"
    NON_INCREASING_AXIS = "NonIncreasingAxis"
    OUT_OF_RANGE = "OutOfRange"


class FinCoreError(ValueError):
    """
    Base class of every engine error.

    `kind` identifies the failure so callers can branch on it without
    relying on the message text.
    """

    kind: ErrorKind
    default_message = "fincore error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class NegativeTimestamp(FinCoreError):
    kind = ErrorKind.NEGATIVE_TIMESTAMP
    default_message = "A timestamp value cannot be negative."


class UndefinedDayCountConvention(FinCoreError):
    kind = ErrorKind.UNDEFINED_DAY_COUNT_CONVENTION
    default_message = "Undefined day count convention."


class UndefinedTenor(FinCoreError):
    kind = ErrorKind.UNDEFINED_TENOR
    default_message = "Undefined tenor."


class NonPositiveYearFraction(FinCoreError):
    kind = ErrorKind.NON_POSITIVE_YEAR_FRACTION
    default_message = "A year fraction cannot be negative (end precedes start)."


class MinimalSizeViolation(FinCoreError):
    kind = ErrorKind.MINIMAL_SIZE_VIOLATION
    default_message = "At least 2 points are required to interpolate."


class NonIncreasingAxis(FinCoreError):
    kind = ErrorKind.NON_INCREASING_AXIS
    default_message = "The x-axis must be strictly increasing."


class OutOfRange(FinCoreError):
    kind = ErrorKind.OUT_OF_RANGE
    default_message = "A value outside the interpolation range cannot be interpolated."
