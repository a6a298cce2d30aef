"""
Coordinate Transformations

This module converts positions between frames, including:
- Local mean sidereal time and local hour angle
- Equatorial <-> ecliptic for a given obliquity
- Equatorial <-> horizontal for an observer (azimuth west from south)
- Equatorial <-> galactic through the B1950 equinox
- Angular separation of two equatorial positions

Formulas follow Astronomical Algorithms (2nd ed.), J. Meeus, chapters 12,
13 and 17. Sign conventions: observer longitudes are used positive west,
hour angles positive west, azimuths measured westward from the south.
"""

import math
from dataclasses import replace
from typing import Optional

from astrocalc_angles import Angle, RadianAngle
from astrocalc_config import Config
from astrocalc_coords import (
    EclipticCoords, EquatorialCoords, GalacticCoords, GeoCoords, HorizontalCoords
)
from astrocalc_corrections import precess_coords
from astrocalc_time import B1950, J2000, AstroTime, DeltaTModel, greenwich_mean_sidereal_time


def _asin(value: float) -> float:
    # Rounding can push |value| a hair past 1 near the poles
    return math.asin(max(-1.0, min(1.0, value)))


def _obliquity_radians(obliquity: Angle) -> float:
    if not isinstance(obliquity, Angle):
        raise TypeError(f"obliquity must be an Angle, got {type(obliquity).__name__}")
    return obliquity.to_radians()


# ============================================================================
# Sidereal Time and Hour Angle
# ============================================================================

def local_sidereal_time(time: AstroTime, observer: GeoCoords,
                        model: Optional[DeltaTModel] = None) -> RadianAngle:
    """
    Local mean sidereal time: GMST minus the west-positive longitude.

    Args:
        time: Instant (DT values are converted to UT)
        observer: Observer location
        model: Delta-T model for DT inputs

    Returns:
        LMST in [0, 2*pi)
    """
    gmst = greenwich_mean_sidereal_time(time, model)
    return (gmst - observer.meeus_longitude).map_to_time_range()


def local_hour_angle(time: AstroTime, observer: GeoCoords, coords: EquatorialCoords,
                     model: Optional[DeltaTModel] = None) -> RadianAngle:
    """Hour angle (positive west) of a position, in [0, 2*pi)."""
    lst = local_sidereal_time(time, observer, model)
    return (lst - coords.right_ascension).map_to_time_range()


def right_ascension_from_hour_angle(hour_angle: Angle, time: AstroTime,
                                    observer: GeoCoords,
                                    model: Optional[DeltaTModel] = None) -> RadianAngle:
    """Inverse of local_hour_angle."""
    lst = local_sidereal_time(time, observer, model)
    return (lst - hour_angle).map_to_time_range()


# ============================================================================
# Ecliptic
# ============================================================================

def equatorial_to_ecliptic(coords: EquatorialCoords, obliquity: Angle) -> EclipticCoords:
    """
    Convert to ecliptic coordinates (Meeus eq. 13.1, 13.2).

    Args:
        coords: Equatorial position
        obliquity: Obliquity of the ecliptic to rotate by, mean or true

    Returns:
        EclipticCoords with the same epoch and valid time
    """
    ra = coords.right_ascension.radians
    dec = coords.declination.radians
    eps = _obliquity_radians(obliquity)

    lon = math.atan2(math.sin(ra) * math.cos(eps) + math.tan(dec) * math.sin(eps),
                     math.cos(ra))
    lat = _asin(math.sin(dec) * math.cos(eps)
                - math.cos(dec) * math.sin(eps) * math.sin(ra))

    return EclipticCoords(RadianAngle(lat), RadianAngle(lon), coords.epoch,
                          coords.valid_time)


def ecliptic_to_equatorial(coords: EclipticCoords, obliquity: Angle) -> EquatorialCoords:
    """Convert to equatorial coordinates (Meeus eq. 13.3, 13.4)."""
    lon = coords.longitude.radians
    lat = coords.latitude.radians
    eps = _obliquity_radians(obliquity)

    ra = math.atan2(math.sin(lon) * math.cos(eps) - math.tan(lat) * math.sin(eps),
                    math.cos(lon))
    dec = _asin(math.sin(lat) * math.cos(eps)
                + math.cos(lat) * math.sin(eps) * math.sin(lon))

    return EquatorialCoords(RadianAngle(ra), RadianAngle(dec), coords.epoch,
                            coords.valid_time)


# ============================================================================
# Horizontal
# ============================================================================

def equatorial_to_horizontal(coords: EquatorialCoords, observer: GeoCoords,
                             time: Optional[AstroTime] = None,
                             model: Optional[DeltaTModel] = None) -> HorizontalCoords:
    """
    Convert to altitude and azimuth (Meeus eq. 13.5, 13.6).

    Args:
        coords: Equatorial position, normally referred to the equinox of date
        observer: Observer location
        time: Instant of observation; defaults to coords.valid_time
        model: Delta-T model for DT times

    Returns:
        HorizontalCoords, azimuth measured westward from the south
    """
    time = coords.valid_time if time is None else time
    hour_angle = local_hour_angle(time, observer, coords, model).radians
    lat = observer.latitude.radians
    dec = coords.declination.radians

    azimuth = math.atan2(math.sin(hour_angle),
                         math.cos(hour_angle) * math.sin(lat)
                         - math.tan(dec) * math.cos(lat))
    altitude = _asin(math.sin(lat) * math.sin(dec)
                     + math.cos(lat) * math.cos(dec) * math.cos(hour_angle))

    return HorizontalCoords(RadianAngle(altitude), RadianAngle(azimuth), observer, time)


def horizontal_to_equatorial(coords: HorizontalCoords,
                             epoch: Optional[AstroTime] = None,
                             model: Optional[DeltaTModel] = None) -> EquatorialCoords:
    """
    Convert altitude and azimuth back to right ascension and declination.

    Args:
        coords: Horizontal position
        epoch: Equinox to label the result with; defaults to coords.valid_time
        model: Delta-T model for DT times

    Returns:
        EquatorialCoords valid at coords.valid_time
    """
    azimuth = coords.azimuth.radians
    altitude = coords.altitude.radians
    lat = coords.observer.latitude.radians

    hour_angle = math.atan2(math.sin(azimuth),
                            math.cos(azimuth) * math.sin(lat)
                            + math.tan(altitude) * math.cos(lat))
    dec = _asin(math.sin(lat) * math.sin(altitude)
                - math.cos(lat) * math.cos(altitude) * math.cos(azimuth))

    ra = right_ascension_from_hour_angle(RadianAngle(hour_angle), coords.valid_time,
                                         coords.observer, model)
    epoch = coords.valid_time if epoch is None else epoch
    return EquatorialCoords(ra, RadianAngle(dec), epoch, coords.valid_time)


# ============================================================================
# Galactic
# ============================================================================

def equatorial_to_galactic(coords: EquatorialCoords,
                           model: Optional[DeltaTModel] = None) -> GalacticCoords:
    """
    Convert to galactic coordinates (Meeus eq. 13.7, 13.8).

    The position is precessed to the B1950 equinox first, the equinox the
    galactic pole is defined for.
    """
    b1950 = precess_coords(coords, B1950, model)
    ra = b1950.right_ascension.radians
    dec = b1950.declination.radians

    pole_ra = Config.GALACTIC_POLE_RA_B1950 * Config.DEG_TO_RAD
    pole_dec = Config.GALACTIC_POLE_DEC_B1950 * Config.DEG_TO_RAD

    x = math.atan2(math.sin(pole_ra - ra),
                   math.cos(pole_ra - ra) * math.sin(pole_dec)
                   - math.tan(dec) * math.cos(pole_dec))
    lon = Config.GALACTIC_LONGITUDE_OFFSET * Config.DEG_TO_RAD - x
    lat = _asin(math.sin(dec) * math.sin(pole_dec)
                + math.cos(dec) * math.cos(pole_dec) * math.cos(pole_ra - ra))

    return GalacticCoords(RadianAngle(lat), RadianAngle(lon))


def galactic_to_equatorial(coords: GalacticCoords, epoch: AstroTime = J2000,
                           model: Optional[DeltaTModel] = None) -> EquatorialCoords:
    """
    Convert galactic coordinates to an equatorial position.

    Args:
        coords: Galactic position
        epoch: Equinox of the result, J2000 by default
        model: Delta-T model for UT epochs

    Returns:
        EquatorialCoords referred to and valid at epoch
    """
    lon = coords.longitude.radians
    lat = coords.latitude.radians

    pole_ra = Config.GALACTIC_POLE_RA_B1950 * Config.DEG_TO_RAD
    pole_dec = Config.GALACTIC_POLE_DEC_B1950 * Config.DEG_TO_RAD
    node = lon - Config.GALACTIC_INVERSE_OFFSET * Config.DEG_TO_RAD

    y = math.atan2(math.sin(node),
                   math.cos(node) * math.sin(pole_dec)
                   - math.tan(lat) * math.cos(pole_dec))
    ra = y + pole_ra - math.pi
    dec = _asin(math.sin(lat) * math.sin(pole_dec)
                + math.cos(lat) * math.cos(pole_dec) * math.cos(node))

    b1950 = EquatorialCoords(RadianAngle(ra), RadianAngle(dec), B1950)
    return replace(precess_coords(b1950, epoch, model), valid_time=epoch)


# ============================================================================
# Separation
# ============================================================================

def angular_separation(first: EquatorialCoords, second: EquatorialCoords,
                       model: Optional[DeltaTModel] = None) -> RadianAngle:
    """
    Angular distance between two positions.

    second is precessed to the equinox of first when the two differ. Uses
    the atan2 form, which stays accurate for very small and very large
    separations.
    """
    if second.epoch != first.epoch:
        second = precess_coords(second, first.epoch, model)

    ra1, dec1 = first.right_ascension.radians, first.declination.radians
    ra2, dec2 = second.right_ascension.radians, second.declination.radians
    delta_ra = ra2 - ra1

    x = math.cos(dec1) * math.sin(dec2) - math.sin(dec1) * math.cos(dec2) * math.cos(delta_ra)
    y = math.cos(dec2) * math.sin(delta_ra)
    z = math.sin(dec1) * math.sin(dec2) + math.cos(dec1) * math.cos(dec2) * math.cos(delta_ra)

    return RadianAngle(math.atan2(math.hypot(x, y), z))
