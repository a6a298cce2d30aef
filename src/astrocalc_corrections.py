"""
Positional Corrections

This module moves equatorial and ecliptic positions in time:
- Proper motion (applied first when composing with precession)
- Precession between equinoxes (Meeus chapter 21, IAU 1976 angles)
- Nutation in longitude and obliquity, mean and true obliquity of the
  ecliptic (Meeus chapter 22, 63-term series)
- Nutation correction of right ascension and declination (Meeus eq. 23.1)

All of these work in Dynamical Time. UT inputs are converted with the
delta-T model, and any error from that conversion propagates.
"""

import math
import logging
from typing import Optional

import numpy as np

from astrocalc_angles import RadianAngle
from astrocalc_config import Config
from astrocalc_coords import (
    EclipticCoords, EquatorialCoords, Nutation, ProperMotionEc, ProperMotionEq
)
from astrocalc_time import AstroTime, DeltaTModel

logger = logging.getLogger(__name__)


# ============================================================================
# Proper Motion
# ============================================================================

def _elapsed_julian_years(start: AstroTime, end: AstroTime,
                          model: Optional[DeltaTModel]) -> float:
    start_jd = start.as_dt(model).julian_day
    end_jd = end.as_dt(model).julian_day
    return (end_jd - start_jd) / Config.DAYS_PER_JULIAN_YEAR


def apply_proper_motion_eq(coords: EquatorialCoords, to_time: AstroTime,
                           motion: ProperMotionEq,
                           model: Optional[DeltaTModel] = None) -> EquatorialCoords:
    """
    Move an equatorial position along its proper motion.

    The equinox is unchanged; the returned position is valid at to_time,
    expressed in Dynamical Time.

    Args:
        coords: Position valid at coords.valid_time
        to_time: Instant to move the position to
        motion: Annual rates in right ascension and declination
        model: Delta-T model for UT inputs

    Returns:
        New EquatorialCoords
    """
    years = _elapsed_julian_years(coords.valid_time, to_time, model)

    ra = coords.right_ascension.radians + motion.ra_rate.radians * years
    dec = coords.declination.radians + motion.dec_rate.radians * years

    return EquatorialCoords(RadianAngle(ra), RadianAngle(dec), coords.epoch,
                            to_time.as_dt(model))


def apply_proper_motion_ec(coords: EclipticCoords, to_time: AstroTime,
                           motion: ProperMotionEc,
                           model: Optional[DeltaTModel] = None) -> EclipticCoords:
    """Ecliptic counterpart of apply_proper_motion_eq."""
    years = _elapsed_julian_years(coords.valid_time, to_time, model)

    lat = coords.latitude.radians + motion.lat_rate.radians * years
    lon = coords.longitude.radians + motion.lon_rate.radians * years

    return EclipticCoords(RadianAngle(lat), RadianAngle(lon), coords.epoch,
                          to_time.as_dt(model))


# ============================================================================
# Precession
# ============================================================================

def precess_coords(coords: EquatorialCoords, to_epoch: AstroTime,
                   model: Optional[DeltaTModel] = None) -> EquatorialCoords:
    """
    Precess an equatorial position to a new equinox (Meeus eq. 21.2-21.4).

    Both equinoxes are converted to Dynamical Time before the elapsed
    centuries are formed.

    Args:
        coords: Position referred to coords.epoch
        to_epoch: Equinox of the result
        model: Delta-T model for UT epochs

    Returns:
        EquatorialCoords referred to to_epoch with the same valid time
    """
    jd0 = coords.epoch.as_dt(model).julian_day
    jd = to_epoch.as_dt(model).julian_day

    big_t = (jd0 - Config.JD_EPOCH_2000) / Config.DAYS_PER_JULIAN_CENTURY
    t = (jd - jd0) / Config.DAYS_PER_JULIAN_CENTURY

    # Precession angles in arcseconds
    first = (2306.2181 + (1.39656 - 0.000139 * big_t) * big_t) * t
    zeta = first + ((0.30188 - 0.000344 * big_t) + 0.017998 * t) * t * t
    z = first + ((1.09468 + 0.000066 * big_t) + 0.018203 * t) * t * t
    theta = ((2004.3109 - (0.85330 + 0.000217 * big_t) * big_t)
             - ((0.42665 + 0.000217 * big_t) + 0.041833 * t) * t) * t

    zeta *= Config.ARCSEC_TO_RAD
    z *= Config.ARCSEC_TO_RAD
    theta *= Config.ARCSEC_TO_RAD

    ra = coords.right_ascension.radians
    dec = coords.declination.radians

    a = math.cos(dec) * math.sin(ra + zeta)
    b = (math.cos(theta) * math.cos(dec) * math.cos(ra + zeta)
         - math.sin(theta) * math.sin(dec))
    c = (math.sin(theta) * math.cos(dec) * math.cos(ra + zeta)
         + math.cos(theta) * math.sin(dec))

    new_ra = math.atan2(a, b) + z
    new_dec = math.atan2(c, math.hypot(a, b))

    return EquatorialCoords(RadianAngle(new_ra), RadianAngle(new_dec), to_epoch,
                            coords.valid_time)


def propagate_coords(coords: EquatorialCoords, to_epoch: AstroTime,
                     motion: Optional[ProperMotionEq] = None,
                     to_time: Optional[AstroTime] = None,
                     model: Optional[DeltaTModel] = None) -> EquatorialCoords:
    """
    Apply proper motion and then precession, in that order.

    Args:
        coords: Starting position
        to_epoch: Equinox of the result
        motion: Proper motion of the object, if any
        to_time: Instant the result should be valid at; defaults to to_epoch
        model: Delta-T model for UT inputs
    """
    to_time = to_epoch if to_time is None else to_time
    if motion is not None:
        coords = apply_proper_motion_eq(coords, to_time, motion, model)
    return precess_coords(coords, to_epoch, model)


# ============================================================================
# Nutation
# ============================================================================

# Periodic terms for nutation, Meeus Table 22.A. Columns: multiples of
# D, M, M', F, Omega; then sine coefficient and its T rate for delta psi,
# cosine coefficient and its T rate for delta epsilon, in 0.0001".
_NUTATION_TERMS = np.array([
    [0, 0, 0, 0, 1, -171996, -174.2, 92025, 8.9],
    [-2, 0, 0, 2, 2, -13187, -1.6, 5736, -3.1],
    [0, 0, 0, 2, 2, -2274, -0.2, 977, -0.5],
    [0, 0, 0, 0, 2, 2062, 0.2, -895, 0.5],
    [0, 1, 0, 0, 0, 1426, -3.4, 54, -0.1],
    [0, 0, 1, 0, 0, 712, 0.1, -7, 0],
    [-2, 1, 0, 2, 2, -517, 1.2, 224, -0.6],
    [0, 0, 0, 2, 1, -386, -0.4, 200, 0],
    [0, 0, 1, 2, 2, -301, 0, 129, -0.1],
    [-2, -1, 0, 2, 2, 217, -0.5, -95, 0.3],
    [-2, 0, 1, 0, 0, -158, 0, 0, 0],
    [-2, 0, 0, 2, 1, 129, 0.1, -70, 0],
    [0, 0, -1, 2, 2, 123, 0, -53, 0],
    [2, 0, 0, 0, 0, 63, 0, 0, 0],
    [0, 0, 1, 0, 1, 63, 0.1, -33, 0],
    [2, 0, -1, 2, 2, -59, 0, 26, 0],
    [0, 0, -1, 0, 1, -58, -0.1, 32, 0],
    [0, 0, 1, 2, 1, -51, 0, 27, 0],
    [-2, 0, 2, 0, 0, 48, 0, 0, 0],
    [0, 0, -2, 2, 1, 46, 0, -24, 0],
    [2, 0, 0, 2, 2, -38, 0, 16, 0],
    [0, 0, 2, 2, 2, -31, 0, 13, 0],
    [0, 0, 2, 0, 0, 29, 0, 0, 0],
    [-2, 0, 1, 2, 2, 29, 0, -12, 0],
    [0, 0, 0, 2, 0, 26, 0, 0, 0],
    [-2, 0, 0, 2, 0, -22, 0, 0, 0],
    [0, 0, -1, 2, 1, 21, 0, -10, 0],
    [0, 2, 0, 0, 0, 17, -0.1, 0, 0],
    [2, 0, -1, 0, 1, 16, 0, -8, 0],
    [-2, 2, 0, 2, 2, -16, 0.1, 7, 0],
    [0, 1, 0, 0, 1, -15, 0, 9, 0],
    [-2, 0, 1, 0, 1, -13, 0, 7, 0],
    [0, -1, 0, 0, 1, -12, 0, 6, 0],
    [0, 0, 2, -2, 0, 11, 0, 0, 0],
    [2, 0, -1, 2, 1, -10, 0, 5, 0],
    [2, 0, 1, 2, 2, -8, 0, 3, 0],
    [0, 1, 0, 2, 2, 7, 0, -3, 0],
    [-2, 1, 1, 0, 0, -7, 0, 0, 0],
    [0, -1, 0, 2, 2, -7, 0, 3, 0],
    [2, 0, 0, 2, 1, -7, 0, 3, 0],
    [2, 0, 1, 0, 0, 6, 0, 0, 0],
    [-2, 0, 2, 2, 2, 6, 0, -3, 0],
    [-2, 0, 1, 2, 1, 6, 0, -3, 0],
    [2, 0, -2, 0, 1, -6, 0, 3, 0],
    [2, 0, 0, 0, 1, -6, 0, 3, 0],
    [0, -1, 1, 0, 0, 5, 0, 0, 0],
    [-2, -1, 0, 2, 1, -5, 0, 3, 0],
    [-2, 0, 0, 0, 1, -5, 0, 3, 0],
    [0, 0, 2, 2, 1, -5, 0, 3, 0],
    [-2, 0, 2, 0, 1, 4, 0, 0, 0],
    [-2, 1, 0, 2, 1, 4, 0, 0, 0],
    [0, 0, 1, -2, 0, 4, 0, 0, 0],
    [-1, 0, 1, 0, 0, -4, 0, 0, 0],
    [-2, 1, 0, 0, 0, -4, 0, 0, 0],
    [1, 0, 0, 0, 0, -4, 0, 0, 0],
    [0, 0, 1, 2, 0, 3, 0, 0, 0],
    [0, 0, -2, 2, 2, -3, 0, 0, 0],
    [-1, -1, 1, 0, 0, -3, 0, 0, 0],
    [0, 1, 1, 0, 0, -3, 0, 0, 0],
    [0, -1, 1, 2, 2, -3, 0, 0, 0],
    [2, -1, -1, 2, 2, -3, 0, 0, 0],
    [0, 0, 3, 2, 2, -3, 0, 0, 0],
    [2, -1, 0, 2, 2, -3, 0, 0, 0],
], dtype=float)
_NUTATION_TERMS.flags.writeable = False

_ARGUMENT_MULTIPLES = _NUTATION_TERMS[:, :5]
_PSI_SIN, _PSI_SIN_T, _EPS_COS, _EPS_COS_T = _NUTATION_TERMS[:, 5:].T

# Mean obliquity at J2000.0 in arcseconds: 23 deg 26' 21.448"
_OBLIQUITY_J2000_ARCSEC = 23.0 * 3600.0 + 26.0 * 60.0 + 21.448


def _fundamental_arguments(t: float) -> np.ndarray:
    """D, M, M', F and Omega in degrees for T Julian centuries from J2000."""
    elongation = 297.85036 + t * (445267.111480 + t * (-0.0019142 + t / 189474.0))
    sun_anomaly = 357.52772 + t * (35999.050340 + t * (-0.0001603 - t / 300000.0))
    moon_anomaly = 134.96298 + t * (477198.867398 + t * (0.0086972 + t / 56250.0))
    moon_latitude = 93.27191 + t * (483202.017538 + t * (-0.0036825 + t / 327270.0))
    node = 125.04452 + t * (-1934.136261 + t * (0.0020708 + t / 450000.0))
    return np.mod([elongation, sun_anomaly, moon_anomaly, moon_latitude, node], 360.0)


def mean_obliquity(time: AstroTime,
                   model: Optional[DeltaTModel] = None) -> RadianAngle:
    """
    Mean obliquity of the ecliptic (Meeus eq. 22.3, Laskar).

    Valid to about 0.01" within 1000 years of J2000 and a few arcseconds
    over 10000 years.
    """
    u = time.as_dt(model).julian_centuries() / 100.0

    correction = u * (-4680.93 + u * (-1.55 + u * (1999.25 + u * (-51.38
                 + u * (-249.67 + u * (-39.05 + u * (7.12 + u * (27.87
                 + u * (5.79 + u * 2.45)))))))))

    return RadianAngle((_OBLIQUITY_J2000_ARCSEC + correction) * Config.ARCSEC_TO_RAD)


def calculate_nutation(time: AstroTime,
                       model: Optional[DeltaTModel] = None) -> Nutation:
    """
    Nutation in longitude and obliquity from the 63-term series.

    Args:
        time: Instant; UT values are converted to Dynamical Time
        model: Delta-T model for that conversion

    Returns:
        Nutation record with delta psi, delta epsilon and the mean obliquity
    """
    dt = time.as_dt(model)
    t = dt.julian_centuries()

    arguments = np.radians(_ARGUMENT_MULTIPLES @ _fundamental_arguments(t))

    # Sums are in units of 0.0001"
    delta_psi = np.sum((_PSI_SIN + _PSI_SIN_T * t) * np.sin(arguments)) / 10000.0
    delta_eps = np.sum((_EPS_COS + _EPS_COS_T * t) * np.cos(arguments)) / 10000.0

    logger.debug(f"Nutation at {dt}: dpsi={delta_psi:.4f}\" deps={delta_eps:.4f}\"")

    return Nutation(
        RadianAngle(float(delta_psi) * Config.ARCSEC_TO_RAD),
        RadianAngle(float(delta_eps) * Config.ARCSEC_TO_RAD),
        mean_obliquity(dt, model),
        dt,
    )


def true_obliquity(time: AstroTime,
                   model: Optional[DeltaTModel] = None) -> RadianAngle:
    """Mean obliquity plus nutation in obliquity"""
    return calculate_nutation(time, model).true_obliquity


def apply_nutation(coords: EquatorialCoords, nutation: Nutation) -> EquatorialCoords:
    """
    Correct a mean position for nutation (nutation terms of Meeus eq. 23.1).

    Args:
        coords: Mean position referred to the equinox of date
        nutation: Nutation for the same date

    Returns:
        EquatorialCoords including nutation
    """
    ra = coords.right_ascension.radians
    dec = coords.declination.radians
    eps = nutation.true_obliquity.radians
    dpsi = nutation.delta_longitude.radians
    deps = nutation.delta_obliquity.radians

    tan_dec = math.tan(dec)
    delta_ra = ((math.cos(eps) + math.sin(eps) * math.sin(ra) * tan_dec) * dpsi
                - math.cos(ra) * tan_dec * deps)
    delta_dec = math.sin(eps) * math.cos(ra) * dpsi + math.sin(ra) * deps

    return EquatorialCoords(RadianAngle(ra + delta_ra), RadianAngle(dec + delta_dec),
                            coords.epoch, coords.valid_time)
