"""
Angle Representations

This module provides four interchangeable angle types:
- RadianAngle: radians, the canonical form used for trigonometry
- DegreeAngle: decimal degrees
- DMSAngle: signed degrees, arcminutes and arcseconds
- HMSAngle: hours, minutes and seconds of time in [0h, 24h)

Every type converts to every other, supports addition, subtraction and
negation against any other angle type (the result keeps the type of the
left operand) and maps into the time, longitude and latitude ranges.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple, Type, TypeVar

from astrocalc_config import Config
from astrocalc_errors import (
    InappropriateNegativeError, InvalidAngleError, LatitudeRangeError,
    NumericDomainError
)

AngleT = TypeVar("AngleT", bound="Angle")


# ============================================================================
# Helpers
# ============================================================================

def map_to_branch(value: float, low: float, high: float,
                  include_high: bool = False) -> float:
    """
    Shift a periodic value by whole periods into a branch.

    Args:
        value: Value to map
        low: Lower end of the branch
        high: Upper end of the branch; the period is high - low
        include_high: Map into (low, high] instead of [low, high)

    Returns:
        Equivalent value inside the branch. Values already inside are
        returned unchanged.
    """
    span = high - low

    if include_high:
        if low < value <= high:
            return value
        result = value - math.ceil((value - high) / span) * span
    else:
        if low <= value < high:
            return value
        result = value - math.floor((value - low) / span) * span

    # Rounding in the shift can land a few ulps past either end
    if include_high:
        if result > high:
            result -= span
        if result <= low:
            result = min(result + span, high)
    else:
        if result < low:
            result += span
        if result >= high:
            result = max(result - span, low)
    return result


def normalize_sexagesimal_sign(major: int, minor: int,
                               seconds: float) -> Tuple[int, int, float]:
    """
    Give all components the sign of the most significant non-zero one.

    DMSAngle(-12, 15, 28.8) therefore means -12 deg 15' 28.8", and
    DMSAngle(0, -49, 1.92) means -0 deg 49' 1.92".
    """
    if major < 0:
        return major, -abs(minor), -abs(seconds)
    if major > 0:
        return major, abs(minor), abs(seconds)
    if minor < 0:
        return 0, minor, -abs(seconds)
    if minor > 0:
        return 0, minor, abs(seconds)
    return 0, 0, seconds


def split_sexagesimal(value: float) -> Tuple[int, int, float]:
    """
    Split a decimal value into whole units, minutes and seconds.

    Units and minutes are truncated toward zero; seconds keep
    Config.SEXAGESIMAL_SECONDS_DIGITS decimal places. All parts carry the
    sign of the input.
    """
    digits = Config.SEXAGESIMAL_SECONDS_DIGITS
    sign = -1 if value < 0 else 1

    total_seconds = round(abs(value) * 3600.0, digits)
    total_minutes, seconds = divmod(total_seconds, 60.0)
    whole, minutes = divmod(int(total_minutes), 60)
    seconds = round(seconds, digits)

    return sign * whole, sign * minutes, sign * seconds if seconds else 0.0


def _check_finite(*values: float) -> None:
    for value in values:
        if not math.isfinite(value):
            raise NumericDomainError(f"angle component must be finite, got {value}")


def _check_whole(name: str, value) -> int:
    if value != int(value):
        raise InvalidAngleError(f"{name} must be a whole number, got {value}")
    return int(value)


# ============================================================================
# Angle Types
# ============================================================================

class Angle(ABC):
    """
    Behaviour shared by every angle representation.

    Each subclass stores its value in a native unit: radians for
    RadianAngle, degrees for the others. Conversions go through radians,
    except between the degree based types, which share decimal degrees.
    """

    _USES_DEGREES = True
    _FULL_TURN = 360.0

    @abstractmethod
    def _value(self) -> float:
        """Value in the native unit of the type"""

    @classmethod
    @abstractmethod
    def _from_value(cls: Type[AngleT], value: float) -> AngleT:
        """Build from a value in the native unit of the type"""

    @classmethod
    def _native(cls, angle: "Angle") -> float:
        if not isinstance(angle, Angle):
            raise TypeError(f"expected an Angle, got {type(angle).__name__}")
        if cls._USES_DEGREES:
            return angle.to_degrees()
        return angle.to_radians()

    @classmethod
    def from_angle(cls: Type[AngleT], angle: "Angle") -> AngleT:
        """Convert any angle to this representation."""
        if type(angle) is cls:
            return angle
        return cls._from_value(cls._native(angle))

    def to_radians(self) -> float:
        value = self._value()
        return value * Config.DEG_TO_RAD if self._USES_DEGREES else value

    def to_degrees(self) -> float:
        value = self._value()
        return value if self._USES_DEGREES else value * Config.RAD_TO_DEG

    # Arithmetic ------------------------------------------------------------

    def __add__(self: AngleT, other: "Angle") -> AngleT:
        if not isinstance(other, Angle):
            return NotImplemented
        return type(self)._from_value(self._value() + type(self)._native(other))

    def __sub__(self: AngleT, other: "Angle") -> AngleT:
        if not isinstance(other, Angle):
            return NotImplemented
        return type(self)._from_value(self._value() - type(self)._native(other))

    def __neg__(self: AngleT) -> AngleT:
        return type(self)._from_value(-self._value())

    # Range mapping ---------------------------------------------------------

    def map_to_time_range(self: AngleT) -> AngleT:
        """Map into [0, 360) degrees."""
        return type(self)._from_value(
            map_to_branch(self._value(), 0.0, self._FULL_TURN))

    def map_to_longitude_range(self: AngleT) -> AngleT:
        """Map into (-180, 180] degrees."""
        half = self._FULL_TURN / 2.0
        return type(self)._from_value(
            map_to_branch(self._value(), -half, half, include_high=True))

    def map_to_latitude_range(self: AngleT) -> AngleT:
        """
        Reduce to the longitude range and check the result is a latitude.

        Raises:
            LatitudeRangeError: If the reduced value is outside [-90, 90] degrees
        """
        half = self._FULL_TURN / 2.0
        value = map_to_branch(self._value(), -half, half, include_high=True)
        if abs(value) > half / 2.0:
            raise LatitudeRangeError(f"{self} is outside the latitude range")
        return type(self)._from_value(value)

    # Trigonometry ----------------------------------------------------------

    def sin(self) -> float:
        return math.sin(self.to_radians())

    def cos(self) -> float:
        return math.cos(self.to_radians())

    def tan(self) -> float:
        return math.tan(self.to_radians())


@dataclass(frozen=True)
class RadianAngle(Angle):
    """Angle in radians"""
    radians: float

    _USES_DEGREES = False
    _FULL_TURN = 2.0 * math.pi

    def __post_init__(self):
        _check_finite(self.radians)
        object.__setattr__(self, "radians", float(self.radians))

    def _value(self) -> float:
        return self.radians

    @classmethod
    def _from_value(cls, value: float) -> "RadianAngle":
        return cls(value)

    @classmethod
    def asin(cls, value: float) -> "RadianAngle":
        return cls(_inverse_trig(math.asin, value))

    @classmethod
    def acos(cls, value: float) -> "RadianAngle":
        return cls(_inverse_trig(math.acos, value))

    @classmethod
    def atan(cls, value: float) -> "RadianAngle":
        return cls(math.atan(value))

    @classmethod
    def atan2(cls, y: float, x: float) -> "RadianAngle":
        return cls(math.atan2(y, x))

    def __str__(self) -> str:
        return f"{self.radians / math.pi}*π rad"


def _inverse_trig(func, value: float) -> float:
    try:
        return func(value)
    except ValueError as exc:
        raise NumericDomainError(f"{func.__name__}({value}) is undefined") from exc


@dataclass(frozen=True)
class DegreeAngle(Angle):
    """Angle in decimal degrees"""
    degrees: float

    def __post_init__(self):
        _check_finite(self.degrees)
        object.__setattr__(self, "degrees", float(self.degrees))

    def _value(self) -> float:
        return self.degrees

    @classmethod
    def _from_value(cls, value: float) -> "DegreeAngle":
        return cls(value)

    def __str__(self) -> str:
        return f"{self.degrees}°"


@dataclass(frozen=True)
class DMSAngle(Angle):
    """
    Angle in degrees, arcminutes and arcseconds.

    The components are normalized on construction so that they all share
    one sign (see normalize_sexagesimal_sign). Minutes and seconds must have
    a magnitude below 60.
    """
    degrees: int
    minutes: int = 0
    seconds: float = 0.0

    def __post_init__(self):
        _check_finite(self.degrees, self.minutes, self.seconds)
        degrees = _check_whole("degrees", self.degrees)
        minutes = _check_whole("minutes", self.minutes)
        degrees, minutes, seconds = normalize_sexagesimal_sign(
            degrees, minutes, float(self.seconds))

        if abs(minutes) >= 60:
            raise InvalidAngleError(f"arcminutes must be below 60, got {minutes}")
        if abs(seconds) >= 60.0:
            raise InvalidAngleError(f"arcseconds must be below 60, got {seconds}")

        object.__setattr__(self, "degrees", degrees)
        object.__setattr__(self, "minutes", minutes)
        object.__setattr__(self, "seconds", seconds)

    def _value(self) -> float:
        return self.degrees + self.minutes / 60.0 + self.seconds / 3600.0

    @classmethod
    def _from_value(cls, value: float) -> "DMSAngle":
        _check_finite(value)
        return cls(*split_sexagesimal(value))

    def __str__(self) -> str:
        minutes = abs(self.minutes) if self.degrees != 0 else self.minutes
        seconds = self.seconds
        if self.degrees != 0 or self.minutes != 0:
            seconds = abs(seconds)
        return f"{self.degrees}° {minutes}' {seconds}\""


@dataclass(frozen=True)
class HMSAngle(Angle):
    """
    Angle in hours, minutes and seconds of time (1h = 15 degrees).

    Used for right ascension, so the value is restricted to [0h, 24h) and
    no component may be negative. Conversions into HMSAngle wrap the value
    into the time range first.
    """
    hours: int
    minutes: int = 0
    seconds: float = 0.0

    def __post_init__(self):
        _check_finite(self.hours, self.minutes, self.seconds)
        hours = _check_whole("hours", self.hours)
        minutes = _check_whole("minutes", self.minutes)
        seconds = float(self.seconds)

        if hours < 0 or minutes < 0 or seconds < 0.0:
            raise InappropriateNegativeError(
                f"HMS components must be non-negative, got "
                f"({hours}, {minutes}, {seconds})")
        if hours >= 24:
            raise InvalidAngleError(f"hours must be below 24, got {hours}")
        if minutes >= 60:
            raise InvalidAngleError(f"minutes must be below 60, got {minutes}")
        if seconds >= 60.0:
            raise InvalidAngleError(f"seconds must be below 60, got {seconds}")

        object.__setattr__(self, "hours", hours)
        object.__setattr__(self, "minutes", minutes)
        object.__setattr__(self, "seconds", seconds)

    def _value(self) -> float:
        hours = self.hours + self.minutes / 60.0 + self.seconds / 3600.0
        return hours * Config.HOURS_TO_DEG

    @classmethod
    def _from_value(cls, value: float) -> "HMSAngle":
        _check_finite(value)
        hours = map_to_branch(value, 0.0, 360.0) / Config.HOURS_TO_DEG
        whole, minutes, seconds = split_sexagesimal(hours)
        # 23h 59m 59.9999999999s rounds up to a full day
        if whole == 24:
            whole = 0
        return cls(whole, minutes, seconds)

    def __str__(self) -> str:
        return f"{self.hours}h {self.minutes}m {self.seconds}s"
