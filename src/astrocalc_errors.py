"""
Exceptions raised by astrocalc.

Every error subclasses ValueError so callers guarding numeric input with
``except ValueError`` keep working.
"""

from typing import Optional


class AstroCalcError(ValueError):
    """Base class for all astrocalc errors"""


class DateRangeError(AstroCalcError):
    """A Julian Day fell outside the span an algorithm supports."""

    UNDERFLOW = "underflow"
    OVERFLOW = "overflow"

    def __init__(self, kind: str, value: float, limit: float, message: Optional[str] = None):
        self.kind = kind
        self.value = value
        self.limit = limit
        if message is None:
            relation = "below" if kind == self.UNDERFLOW else "above"
            message = f"Julian Day {value} {relation} limit {limit}"
        super().__init__(message)


class InvalidCalendarDateError(AstroCalcError):
    """Month/day combination is not valid for the calendar and year."""


class InvalidTimeOfDayError(AstroCalcError):
    """Hour, minute or second outside [0,24)/[0,60)/[0,60)."""


class InvalidAngleError(AstroCalcError):
    """An angle component violates its representation's limits."""


class NumericDomainError(AstroCalcError):
    """NaN or infinite value where a finite number is required."""


class InappropriateNegativeError(AstroCalcError):
    """Negative component given to a representation that forbids it."""


class LatitudeRangeError(AstroCalcError):
    """Angle outside the closed latitude range [-90, 90] degrees."""
