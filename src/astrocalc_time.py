"""
Astronomical Time Module

This module provides Julian Day based time values, including:
- Gregorian and Julian calendar conversions (astronomical year numbering)
- Leap year and date validity predicates, day-of-year conversions
- Universal Time (UT) and Dynamical Time (DT) tags and the delta-T
  correction between them
- Standard epochs and Greenwich mean sidereal time

Calendar formulas follow Astronomical Algorithms (2nd ed.), J. Meeus,
chapters 7, 10 and 12.
"""

import math
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from astrocalc_angles import RadianAngle, map_to_branch
from astrocalc_config import Config
from astrocalc_deltat import DELTA_T_ROWS
from astrocalc_errors import (
    DateRangeError, InvalidCalendarDateError, InvalidTimeOfDayError,
    NumericDomainError
)

logger = logging.getLogger(__name__)


# ============================================================================
# Calendar Functions
# ============================================================================

_DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap_year(year: int) -> bool:
    """Leap year rule of the Gregorian calendar (4/100/400)."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_julian_leap_year(year: int) -> bool:
    """Leap year rule of the Julian calendar (every fourth year)."""
    return year % 4 == 0


def _days_in_month(month: int, leap_year: bool) -> int:
    assert 1 <= month <= 12, f"month {month} out of range"
    if month == 2 and leap_year:
        return 29
    return _DAYS_PER_MONTH[month - 1]


def is_valid_gregorian(year: int, month: int, day: int) -> bool:
    return 1 <= month <= 12 and \
        1 <= day <= _days_in_month(month, is_gregorian_leap_year(year))


def is_valid_julian(year: int, month: int, day: int) -> bool:
    return 1 <= month <= 12 and \
        1 <= day <= _days_in_month(month, is_julian_leap_year(year))


def day_of_year_gregorian(year: int, month: int, day: int) -> int:
    """
    Day number within the year, 1 for January 1st.

    Raises:
        InvalidCalendarDateError: If the date is not a valid Gregorian date
    """
    if not is_valid_gregorian(year, month, day):
        raise InvalidCalendarDateError(
            f"{year}-{month:02d}-{day:02d} is not a valid Gregorian date")

    k = 1 if is_gregorian_leap_year(year) else 2
    return (275 * month) // 9 - k * ((month + 9) // 12) + day - 30


def month_and_day_gregorian(year: int, day_of_year: int) -> Tuple[int, int]:
    """
    Inverse of day_of_year_gregorian.

    Returns:
        Tuple of (month, day)

    Raises:
        InvalidCalendarDateError: If day_of_year is not in the given year
    """
    leap_year = is_gregorian_leap_year(year)
    days_in_year = 366 if leap_year else 365
    if not 1 <= day_of_year <= days_in_year:
        raise InvalidCalendarDateError(
            f"day {day_of_year} is outside year {year} ({days_in_year} days)")

    k = 1 if leap_year else 2
    if day_of_year < 32:
        month = 1
    else:
        month = int(9.0 * (k + day_of_year) / 275.0 + 0.98)
    day = day_of_year - (275 * month) // 9 + k * ((month + 9) // 12) + 30
    return month, day


def _check_time_of_day(hour: int, minute: int, second: float) -> None:
    if not 0 <= hour < 24:
        raise InvalidTimeOfDayError(f"hour {hour} outside [0, 24)")
    if not 0 <= minute < 60:
        raise InvalidTimeOfDayError(f"minute {minute} outside [0, 60)")
    if not 0.0 <= second < 60.0:
        raise InvalidTimeOfDayError(f"second {second} outside [0, 60)")


def _calendar_to_jd(year: int, month: int, day: int, hour: int, minute: int,
                    second: float, gregorian: bool) -> float:
    day_fraction = (hour + (minute + second / 60.0) / 60.0) / 24.0

    if month < 3:
        year -= 1
        month += 12

    correction = 0
    if gregorian:
        a = year // 100
        correction = 2 - a + a // 4

    return (math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1))
            + day + correction - 1524.5 + day_fraction)


def _jd_to_calendar(julian_day: float,
                    gregorian: bool) -> Tuple[int, int, int, int, int, int]:
    shifted = julian_day + 0.5
    z = math.floor(shifted)
    seconds_of_day = round((shifted - z) * Config.SECONDS_PER_DAY)
    if seconds_of_day >= Config.SECONDS_PER_DAY:
        z += 1
        seconds_of_day -= int(Config.SECONDS_PER_DAY)

    if gregorian:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - alpha // 4
    else:
        a = z

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    hour, remainder = divmod(seconds_of_day, 3600)
    minute, second = divmod(remainder, 60)
    return year, month, day, hour, minute, second


# ============================================================================
# Time Values
# ============================================================================

class TimeType(Enum):
    """Time scale a Julian Day is expressed in"""
    UT = "UT"  # Universal Time, follows the rotation of the Earth
    DT = "DT"  # Dynamical Time, uniform


@dataclass(frozen=True)
class AstroTime:
    """
    A Julian Day number tagged with its time scale.

    Julian Day 0 (-4712-01-01 12:00 on the Julian calendar) is the earliest
    supported instant. Times on different scales compare unequal and cannot
    be ordered.
    """
    julian_day: float
    time_type: TimeType = TimeType.UT

    def __post_init__(self):
        if not math.isfinite(self.julian_day):
            raise NumericDomainError(f"Julian Day must be finite, got {self.julian_day}")
        if self.julian_day < 0.0:
            raise DateRangeError(DateRangeError.UNDERFLOW, self.julian_day, 0.0)
        if not isinstance(self.time_type, TimeType):
            raise TypeError(f"time_type must be a TimeType, got {self.time_type!r}")
        object.__setattr__(self, "julian_day", float(self.julian_day))

    # Construction ----------------------------------------------------------

    @classmethod
    def from_julian_day(cls, julian_day: float,
                        time_type: TimeType = TimeType.UT) -> "AstroTime":
        return cls(julian_day, time_type)

    @classmethod
    def from_modified_julian_day(cls, modified_julian_day: float,
                                 time_type: TimeType = TimeType.UT) -> "AstroTime":
        return cls(modified_julian_day + Config.MJD_OFFSET, time_type)

    @classmethod
    def from_gregorian_utc(cls, year: int, month: int, day: int,
                           hour: int = 0, minute: int = 0,
                           second: float = 0.0) -> "AstroTime":
        """
        Build a UT time from a proleptic Gregorian calendar date.

        Args:
            year: Astronomical year (0 is 1 BC, -1 is 2 BC)
            month: Month (1-12)
            day: Day of month
            hour: Hour (0-23)
            minute: Minute (0-59)
            second: Second, may be fractional (0-60)

        Raises:
            InvalidCalendarDateError: Month or day out of range
            InvalidTimeOfDayError: Hour, minute or second out of range
            DateRangeError: Date falls before Julian Day 0
        """
        if not is_valid_gregorian(year, month, day):
            raise InvalidCalendarDateError(
                f"{year}-{month:02d}-{day:02d} is not a valid Gregorian date")
        _check_time_of_day(hour, minute, second)
        return cls(_calendar_to_jd(year, month, day, hour, minute, second,
                                   gregorian=True))

    @classmethod
    def from_julian_utc(cls, year: int, month: int, day: int,
                        hour: int = 0, minute: int = 0,
                        second: float = 0.0) -> "AstroTime":
        """Build a UT time from a Julian calendar date, see from_gregorian_utc."""
        if not is_valid_julian(year, month, day):
            raise InvalidCalendarDateError(
                f"{year}-{month:02d}-{day:02d} is not a valid Julian calendar date")
        _check_time_of_day(hour, minute, second)
        return cls(_calendar_to_jd(year, month, day, hour, minute, second,
                                   gregorian=False))

    # Time scales -----------------------------------------------------------

    def dynamical_time(self) -> "AstroTime":
        """
        Retag as Dynamical Time without changing the Julian Day.

        Use this when the calendar fields given were already in TD. To
        convert a UT instant, use as_dt().
        """
        return replace(self, time_type=TimeType.DT)

    def as_dt(self, model: Optional["DeltaTModel"] = None) -> "AstroTime":
        """Convert to Dynamical Time by adding delta-T."""
        if self.time_type is TimeType.DT:
            return self
        model = model or DEFAULT_DELTA_T
        return AstroTime(self.julian_day + model.days(self.julian_day), TimeType.DT)

    def as_ut(self, model: Optional["DeltaTModel"] = None) -> "AstroTime":
        """
        Convert to Universal Time by subtracting delta-T.

        Raises:
            DateRangeError: If the result falls before Julian Day 0
        """
        if self.time_type is TimeType.UT:
            return self
        model = model or DEFAULT_DELTA_T
        # delta-T is tabulated against UT; one refinement step is plenty
        estimate = self.julian_day - model.days(self.julian_day)
        return AstroTime(self.julian_day - model.days(estimate), TimeType.UT)

    # Calendar output -------------------------------------------------------

    def to_gregorian_utc(self) -> Tuple[int, int, int, int, int, int]:
        """
        Convert to a proleptic Gregorian calendar date.

        Returns:
            Tuple of (year, month, day, hour, minute, second), with the
            second rounded to the nearest whole second
        """
        return _jd_to_calendar(self.julian_day, gregorian=True)

    def to_julian_utc(self) -> Tuple[int, int, int, int, int, int]:
        """Convert to a Julian calendar date, see to_gregorian_utc."""
        return _jd_to_calendar(self.julian_day, gregorian=False)

    def modified_julian_day(self) -> float:
        return self.julian_day - Config.MJD_OFFSET

    def julian_centuries(self) -> float:
        """Julian centuries elapsed since J2000.0."""
        return (self.julian_day - Config.JD_EPOCH_2000) / Config.DAYS_PER_JULIAN_CENTURY

    # Ordering --------------------------------------------------------------

    def _check_orderable(self, other: "AstroTime") -> None:
        if other.time_type is not self.time_type:
            raise TypeError(
                f"cannot order a {self.time_type.value} time against a "
                f"{other.time_type.value} time")

    def __lt__(self, other):
        if not isinstance(other, AstroTime):
            return NotImplemented
        self._check_orderable(other)
        return self.julian_day < other.julian_day

    def __le__(self, other):
        if not isinstance(other, AstroTime):
            return NotImplemented
        self._check_orderable(other)
        return self.julian_day <= other.julian_day

    def __gt__(self, other):
        if not isinstance(other, AstroTime):
            return NotImplemented
        self._check_orderable(other)
        return self.julian_day > other.julian_day

    def __ge__(self, other):
        if not isinstance(other, AstroTime):
            return NotImplemented
        self._check_orderable(other)
        return self.julian_day >= other.julian_day

    def __str__(self) -> str:
        return f"JD {self.julian_day} {self.time_type.value}"


def julian_day_zero(year: int) -> AstroTime:
    """Julian Day of January 0.0 (December 31st, 0h) of a Gregorian year."""
    y = year - 1
    a = y // 100
    return AstroTime(math.floor(365.25 * y) - a + a // 4 + 1721424.5)


# ============================================================================
# Delta-T
# ============================================================================

class DeltaTModel:
    """
    Delta-T = TD - UT as a function of the UT Julian Day.

    Inside the sampled span the value is interpolated linearly between the
    two bracketing samples. Outside it, the polynomial approximations from
    Meeus chapter 10 are used; these are rough before 1620 and little more
    than a guess for future dates.
    """

    def __init__(self, julian_days: Sequence[float], delta_t_seconds: Sequence[float]):
        julian_days = np.array(julian_days, dtype=float)
        delta_t_seconds = np.array(delta_t_seconds, dtype=float)

        if julian_days.ndim != 1 or julian_days.shape != delta_t_seconds.shape:
            raise ValueError("delta-T samples need matching one dimensional arrays")
        if julian_days.size < 2:
            raise ValueError("delta-T model needs at least two samples")
        if np.any(np.diff(julian_days) <= 0.0):
            raise ValueError("delta-T sample Julian Days must be strictly increasing")

        julian_days.flags.writeable = False
        delta_t_seconds.flags.writeable = False
        self._julian_days = julian_days
        self._seconds = delta_t_seconds
        self._boundary_jd = _calendar_to_jd(
            Config.DELTA_T_POLYNOMIAL_BOUNDARY_YEAR, 1, 1, 0, 0, 0.0, gregorian=True)

    @classmethod
    def from_calendar_table(
            cls, rows: Iterable[Tuple[int, int, int, float]]) -> "DeltaTModel":
        """
        Build from (year, month, day, delta_t_seconds) rows on the Gregorian
        calendar at 0h UT.
        """
        julian_days = []
        seconds = []
        for year, month, day, delta_t in rows:
            julian_days.append(AstroTime.from_gregorian_utc(year, month, day).julian_day)
            seconds.append(delta_t)

        logger.debug(f"Building delta-T model from {len(julian_days)} samples")
        return cls(julian_days, seconds)

    @property
    def span(self) -> Tuple[float, float]:
        """First and last sampled Julian Day"""
        return float(self._julian_days[0]), float(self._julian_days[-1])

    def seconds(self, julian_day: float) -> float:
        """Delta-T in seconds at a UT Julian Day"""
        first, last = self.span
        if first <= julian_day <= last:
            return float(np.interp(julian_day, self._julian_days, self._seconds))

        logger.debug(f"JD {julian_day} outside delta-T samples, using polynomial")
        return self._polynomial_seconds(julian_day)

    def days(self, julian_day: float) -> float:
        """Delta-T in days at a UT Julian Day"""
        return self.seconds(julian_day) / Config.SECONDS_PER_DAY

    def _polynomial_seconds(self, julian_day: float) -> float:
        t = (julian_day - Config.JD_EPOCH_2000) / Config.DAYS_PER_JULIAN_CENTURY

        if julian_day < self._boundary_jd:
            a, b, c = Config.DELTA_T_ANCIENT_COEFFS
            return a + b * t + c * t * t

        a, b, c = Config.DELTA_T_MODERN_COEFFS
        seconds = a + b * t + c * t * t
        year = 2000.0 + 100.0 * t
        if 2000.0 <= year <= 2100.0:
            seconds += Config.DELTA_T_CENTURY_CORRECTION * (year - 2100.0)
        return seconds


DEFAULT_DELTA_T = DeltaTModel.from_calendar_table(DELTA_T_ROWS)


# ============================================================================
# Standard Epochs (Dynamical Time)
# ============================================================================

J2000 = AstroTime(Config.JD_EPOCH_2000, TimeType.DT)
J2050 = AstroTime(2469807.5, TimeType.DT)
B1950 = AstroTime(2433282.4235, TimeType.DT)
B1900 = AstroTime(2415020.3135, TimeType.DT)


# ============================================================================
# Sidereal Time
# ============================================================================

def greenwich_mean_sidereal_time(time: AstroTime,
                                 model: Optional[DeltaTModel] = None) -> RadianAngle:
    """
    Calculate Greenwich Mean Sidereal Time (Meeus eq. 12.4).

    Args:
        time: Instant; DT values are converted to UT first
        model: Delta-T model used for that conversion

    Returns:
        GMST as an angle in [0, 2*pi)
    """
    jd = time.as_ut(model).julian_day
    t = (jd - Config.JD_EPOCH_2000) / Config.DAYS_PER_JULIAN_CENTURY

    theta = (280.46061837
             + 360.98564736629 * (jd - Config.JD_EPOCH_2000)
             + 0.000387933 * t * t
             - t * t * t / 38710000.0)

    theta = map_to_branch(theta, 0.0, 360.0)
    return RadianAngle(theta * Config.DEG_TO_RAD).map_to_time_range()
