"""
Configuration Constants for astrocalc

Unit conversions, reference epochs and the tunable parameters of the
time and coordinate models. Everything is a class-level constant; the
library reads no environment variables or files.
"""

import math


class Config:
    """Configuration constants for the positional astronomy library"""

    # Unit conversions
    DEG_TO_RAD = math.pi / 180.0
    RAD_TO_DEG = 180.0 / math.pi
    HOURS_TO_DEG = 15.0
    ARCSEC_TO_RAD = math.pi / (180.0 * 3600.0)

    # Time constants
    JD_EPOCH_2000 = 2451545.0  # JD for 2000-01-01 12:00 TD
    MJD_OFFSET = 2400000.5
    SECONDS_PER_DAY = 86400.0
    DAYS_PER_JULIAN_YEAR = 365.25
    DAYS_PER_JULIAN_CENTURY = 36525.0

    # Delta-T polynomial fallback, seconds, T in centuries from J2000
    DELTA_T_POLYNOMIAL_BOUNDARY_YEAR = 948
    DELTA_T_ANCIENT_COEFFS = (2177.0, 497.0, 44.1)
    DELTA_T_MODERN_COEFFS = (102.0, 102.0, 25.3)
    DELTA_T_CENTURY_CORRECTION = 0.37  # seconds per year, 2000 to 2100

    # Galactic pole and node for the B1950 equinox, degrees
    GALACTIC_POLE_RA_B1950 = 192.25
    GALACTIC_POLE_DEC_B1950 = 27.4
    GALACTIC_LONGITUDE_OFFSET = 303.0  # l = 303 deg - x, Meeus eq. 13.7
    GALACTIC_INVERSE_OFFSET = 123.0  # l - 123 deg, Meeus eq. 13.8

    # Number of decimal places kept in the seconds field when splitting an
    # angle into degrees/minutes/seconds or hours/minutes/seconds
    SEXAGESIMAL_SECONDS_DIGITS = 9
