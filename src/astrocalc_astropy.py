"""
Reference Calculations using Astropy

This module computes the quantities of the astrocalc modules with the
astropy package, so the hand-written Meeus formulas can be checked
against an independent implementation:
- Julian Date and Greenwich mean sidereal time
- Precession between FK5 equinoxes
- Galactic and ecliptic coordinates
- Angular separation

Angles are plain floats in degrees. Julian Dates are UT for sidereal time
and TT (Dynamical Time) for equinoxes, matching astrocalc.
"""

import logging
import warnings
from datetime import datetime, timedelta
from typing import Tuple

from astropy import units as u
from astropy.coordinates import BarycentricMeanEcliptic, FK5, SkyCoord
from astropy.time import Time
from astropy.utils import iers

from astrocalc_coords import EquatorialCoords
from astrocalc_time import AstroTime

logger = logging.getLogger(__name__)

# Suppress astropy warnings for cleaner output
warnings.filterwarnings('ignore', category=UserWarning, module='astropy')

# Everything below works from the bundled tables; never hit the network
iers.conf.auto_download = False
logger.debug("astropy IERS auto-download disabled")


def _equinox(epoch: AstroTime) -> Time:
    return Time(epoch.as_dt().julian_day, format='jd', scale='tt')


# ============================================================================
# Time Functions
# ============================================================================

def julian_date(year: int, month: int, day: int,
                hour: int = 0, minute: int = 0, second: float = 0.0) -> float:
    """
    Calculate Julian Date for a Gregorian date and time using astropy.

    Args:
        year: Year (1 or later)
        month: Month (1-12)
        day: Day of month
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second (0-59)

    Returns:
        Julian Date
    """
    dt = datetime(year, month, day, hour, minute, int(second))
    dt = dt + timedelta(seconds=(second % 1))

    # TT avoids leap second handling; the calendar mapping is the same
    t = Time(dt, scale='tt')
    return t.jd


def gmst(jd: float) -> float:
    """
    Greenwich Mean Sidereal Time using astropy's IAU 1982 model.

    Args:
        jd: Julian Date (UT1)

    Returns:
        GMST in degrees (0-360)
    """
    t = Time(jd, format='jd', scale='ut1')
    return t.sidereal_time('mean', 'greenwich', model='IAU1982').deg


# ============================================================================
# Coordinate Functions
# ============================================================================

def to_skycoord(coords: EquatorialCoords) -> SkyCoord:
    """Equivalent astropy SkyCoord in the FK5 frame of coords.epoch"""
    return SkyCoord(ra=coords.right_ascension.radians * u.rad,
                    dec=coords.declination.radians * u.rad,
                    frame=FK5(equinox=_equinox(coords.epoch)))


def precess_coordinates(ra: float, dec: float,
                        jd_from: float, jd_to: float) -> Tuple[float, float]:
    """
    Precess coordinates between FK5 equinoxes using astropy.

    Args:
        ra: Right ascension in degrees
        dec: Declination in degrees
        jd_from: Julian Date (TT) of the initial equinox
        jd_to: Julian Date (TT) of the target equinox

    Returns:
        Tuple of (ra, dec) in degrees at the target equinox
    """
    t_from = Time(jd_from, format='jd', scale='tt')
    t_to = Time(jd_to, format='jd', scale='tt')

    coord_from = SkyCoord(ra=ra*u.deg, dec=dec*u.deg, frame=FK5(equinox=t_from))
    coord_to = coord_from.transform_to(FK5(equinox=t_to))

    return coord_to.ra.deg, coord_to.dec.deg


def galactic_coordinates(ra: float, dec: float) -> Tuple[float, float]:
    """
    Convert FK5 J2000 coordinates to galactic coordinates using astropy.

    Returns:
        Tuple of (l, b) galactic longitude and latitude in degrees
    """
    coord_eq = SkyCoord(ra=ra*u.deg, dec=dec*u.deg, frame=FK5(equinox='J2000'))
    coord_gal = coord_eq.galactic
    return coord_gal.l.deg, coord_gal.b.deg


def ecliptic_coordinates(ra: float, dec: float, jd: float) -> Tuple[float, float]:
    """
    Convert FK5 J2000 coordinates to mean ecliptic coordinates of date.

    Args:
        ra: Right ascension in degrees
        dec: Declination in degrees
        jd: Julian Date (TT) of the ecliptic equinox

    Returns:
        Tuple of (longitude, latitude) in degrees
    """
    coord_eq = SkyCoord(ra=ra*u.deg, dec=dec*u.deg, frame=FK5(equinox='J2000'))
    t = Time(jd, format='jd', scale='tt')
    coord_ecl = coord_eq.transform_to(BarycentricMeanEcliptic(equinox=t))
    return coord_ecl.lon.deg, coord_ecl.lat.deg


def angular_separation(ra1: float, dec1: float, ra2: float, dec2: float) -> float:
    """Angular separation in degrees of two FK5 J2000 positions"""
    coord1 = SkyCoord(ra=ra1*u.deg, dec=dec1*u.deg, frame=FK5(equinox='J2000'))
    coord2 = SkyCoord(ra=ra2*u.deg, dec=dec2*u.deg, frame=FK5(equinox='J2000'))
    return coord1.separation(coord2).deg
