"""
Coordinate Frames

Immutable value types for positions in the supported frames:
- GeoCoords: terrestrial observer location
- EquatorialCoords: right ascension / declination for an equinox
- EclipticCoords: ecliptic latitude / longitude for an equinox
- HorizontalCoords: altitude / azimuth for an observer and instant
- GalacticCoords: galactic latitude / longitude

plus the ProperMotionEq / ProperMotionEc rate records and the Nutation
record. Angular fields accept any Angle and are stored as RadianAngle.
Latitude-like fields must lie in [-90, 90] degrees; longitude-like fields
are wrapped into their canonical range on construction.

Azimuth is measured westward from the south.
"""

from dataclasses import dataclass
from typing import Optional

from astrocalc_angles import Angle, DegreeAngle, DMSAngle, HMSAngle, RadianAngle
from astrocalc_time import AstroTime


# ============================================================================
# Constants
# ============================================================================

EPSILON_2000 = DegreeAngle(23.4392911)  # mean obliquity at J2000.0
EPSILON_1950 = DegreeAngle(23.4457889)  # mean obliquity at B1950.0


def _radians(name: str, value: Angle) -> RadianAngle:
    if not isinstance(value, Angle):
        raise TypeError(f"{name} must be an Angle, got {type(value).__name__}")
    return RadianAngle.from_angle(value)


def _check_time(name: str, value: AstroTime) -> None:
    if not isinstance(value, AstroTime):
        raise TypeError(f"{name} must be an AstroTime, got {type(value).__name__}")


def _degrees_text(angle: RadianAngle) -> str:
    return str(DegreeAngle.from_angle(angle))


# ============================================================================
# Observer Location
# ============================================================================

@dataclass(frozen=True, init=False)
class GeoCoords:
    """
    Geographic location of an observer.

    Longitude is given and returned positive east of Greenwich, but stored
    positive west as in the Meeus formulas (see meeus_longitude).
    """
    _latitude: RadianAngle
    _meeus_longitude: RadianAngle

    def __init__(self, latitude: Angle, longitude: Angle):
        latitude = _radians("latitude", latitude).map_to_latitude_range()
        longitude = _radians("longitude", longitude)
        object.__setattr__(self, "_latitude", latitude)
        object.__setattr__(self, "_meeus_longitude", (-longitude).map_to_longitude_range())

    @property
    def latitude(self) -> RadianAngle:
        return self._latitude

    @property
    def longitude(self) -> RadianAngle:
        """Longitude, positive east"""
        return -self._meeus_longitude

    @property
    def meeus_longitude(self) -> RadianAngle:
        """Longitude, positive west"""
        return self._meeus_longitude

    def __str__(self) -> str:
        return (f"Geographic Location - latitude: {_degrees_text(self.latitude)}, "
                f"longitude: {_degrees_text(self.longitude)}")


# ============================================================================
# Celestial Frames
# ============================================================================

@dataclass(frozen=True)
class EquatorialCoords:
    """
    Right ascension and declination referred to the equinox of epoch.

    valid_time is the instant the position applies to (it differs from the
    epoch once proper motion has been applied) and defaults to epoch.
    """
    right_ascension: RadianAngle
    declination: RadianAngle
    epoch: AstroTime
    valid_time: Optional[AstroTime] = None

    def __post_init__(self):
        _check_time("epoch", self.epoch)
        valid_time = self.epoch if self.valid_time is None else self.valid_time
        _check_time("valid_time", valid_time)
        object.__setattr__(self, "right_ascension",
                           _radians("right_ascension", self.right_ascension).map_to_time_range())
        object.__setattr__(self, "declination",
                           _radians("declination", self.declination).map_to_latitude_range())
        object.__setattr__(self, "valid_time", valid_time)

    def __str__(self) -> str:
        return (f"Equatorial Coordinates\n"
                f"  RA: {HMSAngle.from_angle(self.right_ascension)}\n"
                f"  dec: {DMSAngle.from_angle(self.declination)}\n"
                f"  epoch: {self.epoch}\n"
                f"  valid time: {self.valid_time}")


@dataclass(frozen=True)
class EclipticCoords:
    """Ecliptic latitude and longitude referred to the equinox of epoch."""
    latitude: RadianAngle
    longitude: RadianAngle
    epoch: AstroTime
    valid_time: Optional[AstroTime] = None

    def __post_init__(self):
        _check_time("epoch", self.epoch)
        valid_time = self.epoch if self.valid_time is None else self.valid_time
        _check_time("valid_time", valid_time)
        object.__setattr__(self, "latitude",
                           _radians("latitude", self.latitude).map_to_latitude_range())
        object.__setattr__(self, "longitude",
                           _radians("longitude", self.longitude).map_to_time_range())
        object.__setattr__(self, "valid_time", valid_time)

    def __str__(self) -> str:
        return (f"Ecliptic Coordinates\n"
                f"  latitude: {_degrees_text(self.latitude)}\n"
                f"  longitude: {_degrees_text(self.longitude)}\n"
                f"  epoch: {self.epoch}\n"
                f"  valid time: {self.valid_time}")


@dataclass(frozen=True)
class HorizontalCoords:
    """
    Altitude and azimuth seen by an observer at an instant.

    Azimuth runs westward from the south point, so due west is 90 degrees
    and due north 180 degrees.
    """
    altitude: RadianAngle
    azimuth: RadianAngle
    observer: GeoCoords
    valid_time: AstroTime

    def __post_init__(self):
        if not isinstance(self.observer, GeoCoords):
            raise TypeError(f"observer must be a GeoCoords, got {type(self.observer).__name__}")
        _check_time("valid_time", self.valid_time)
        object.__setattr__(self, "altitude",
                           _radians("altitude", self.altitude).map_to_latitude_range())
        object.__setattr__(self, "azimuth",
                           _radians("azimuth", self.azimuth).map_to_time_range())

    def __str__(self) -> str:
        return (f"Horizontal Coordinates\n"
                f"  altitude: {_degrees_text(self.altitude)}\n"
                f"  azimuth: {_degrees_text(self.azimuth)}\n"
                f"  observer: {self.observer}\n"
                f"  valid time: {self.valid_time}")


@dataclass(frozen=True)
class GalacticCoords:
    latitude: RadianAngle
    longitude: RadianAngle

    def __post_init__(self):
        object.__setattr__(self, "latitude",
                           _radians("latitude", self.latitude).map_to_latitude_range())
        object.__setattr__(self, "longitude",
                           _radians("longitude", self.longitude).map_to_time_range())

    def __str__(self) -> str:
        return (f"Galactic Coordinates\n"
                f"  latitude: {_degrees_text(self.latitude)}\n"
                f"  longitude: {_degrees_text(self.longitude)}")


# ============================================================================
# Corrections
# ============================================================================

@dataclass(frozen=True)
class ProperMotionEq:
    """Annual proper motion in right ascension and declination."""
    ra_rate: RadianAngle
    dec_rate: RadianAngle
    epoch: AstroTime

    def __post_init__(self):
        _check_time("epoch", self.epoch)
        object.__setattr__(self, "ra_rate", _radians("ra_rate", self.ra_rate))
        object.__setattr__(self, "dec_rate", _radians("dec_rate", self.dec_rate))


@dataclass(frozen=True)
class ProperMotionEc:
    """Annual proper motion in ecliptic latitude and longitude."""
    lat_rate: RadianAngle
    lon_rate: RadianAngle
    epoch: AstroTime

    def __post_init__(self):
        _check_time("epoch", self.epoch)
        object.__setattr__(self, "lat_rate", _radians("lat_rate", self.lat_rate))
        object.__setattr__(self, "lon_rate", _radians("lon_rate", self.lon_rate))


@dataclass(frozen=True)
class Nutation:
    """
    Nutation in longitude and obliquity for an instant (Dynamical Time),
    together with the mean obliquity of the ecliptic.
    """
    delta_longitude: RadianAngle
    delta_obliquity: RadianAngle
    mean_obliquity: RadianAngle
    epoch: AstroTime

    def __post_init__(self):
        _check_time("epoch", self.epoch)
        for name in ("delta_longitude", "delta_obliquity", "mean_obliquity"):
            object.__setattr__(self, name, _radians(name, getattr(self, name)))

    @property
    def true_obliquity(self) -> RadianAngle:
        return self.mean_obliquity + self.delta_obliquity

    def __str__(self) -> str:
        return (f"Nutation\n"
                f"  delta longitude: {DMSAngle.from_angle(self.delta_longitude)}\n"
                f"  delta obliquity: {DMSAngle.from_angle(self.delta_obliquity)}\n"
                f"  mean obliquity: {DMSAngle.from_angle(self.mean_obliquity)}\n"
                f"  epoch: {self.epoch}")
