#!/usr/bin/env python3
"""
Test script to compare the astrocalc modules with astrocalc_astropy.
Verifies that the Meeus formulas agree with astropy's implementation.
"""

import math
import os
import sys

import pytest

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

import astrocalc_astropy as astro_py
from astrocalc_angles import DegreeAngle, DMSAngle, HMSAngle
from astrocalc_corrections import mean_obliquity, precess_coords
from astrocalc_coords import EquatorialCoords
from astrocalc_time import J2000, AstroTime, TimeType, greenwich_mean_sidereal_time
from astrocalc_transforms import (
    angular_separation, equatorial_to_ecliptic, equatorial_to_galactic
)

THETA_PERSEI = EquatorialCoords(HMSAngle(2, 44, 12.975), DMSAngle(49, 13, 39.90), J2000)
TARGET_DT = AstroTime(2462088.69, TimeType.DT)


def _degrees(angle):
    return math.degrees(angle.radians)


def compare_values(name, val1, val2, tolerance=0.01, unit=""):
    """Compare two values and report differences"""
    diff = abs(val1 - val2)
    if diff <= tolerance:
        print(f"  {name:30s}: {val1:.6f} vs {val2:.6f} {unit} (diff: {diff:.8f}) - OK")
        return True
    print(f"  {name:30s}: {val1:.6f} vs {val2:.6f} {unit} (diff: {diff:.8f}) - MISMATCH")
    return False


def compare_longitudes(name, val1, val2, tolerance=0.01):
    """Compare two angles in degrees, allowing for the wrap at 360"""
    return compare_values(name, 0.0, math.remainder(val1 - val2, 360.0), tolerance, "deg")


# ============================================================================
# Time
# ============================================================================

def test_julian_date():
    jd = AstroTime.from_gregorian_utc(2025, 10, 3, 12, 30, 45.5).julian_day
    jd_py = astro_py.julian_date(2025, 10, 3, 12, 30, 45.5)
    assert compare_values("Julian Date", jd, jd_py, tolerance=1e-8)


def test_gmst():
    time = AstroTime.from_gregorian_utc(1987, 4, 10, 19, 21, 0)
    gmst = _degrees(greenwich_mean_sidereal_time(time))
    gmst_py = astro_py.gmst(time.julian_day)
    assert compare_longitudes("GMST", gmst, gmst_py, tolerance=1e-4)


# ============================================================================
# Coordinates
# ============================================================================

def test_precession():
    precessed = precess_coords(THETA_PERSEI, TARGET_DT)
    ra_py, dec_py = astro_py.precess_coordinates(
        _degrees(THETA_PERSEI.right_ascension), _degrees(THETA_PERSEI.declination),
        J2000.julian_day, TARGET_DT.julian_day)

    assert compare_longitudes("Precessed RA", _degrees(precessed.right_ascension), ra_py, 1e-4)
    assert compare_values("Precessed Dec", _degrees(precessed.declination), dec_py, 1e-4, "deg")


@pytest.mark.parametrize("name,ra,dec", [
    ("Vega", 279.2347, 38.7837),
    ("Sirius", 101.287, -16.716),
])
def test_galactic(name, ra, dec):
    coords = EquatorialCoords(DegreeAngle(ra), DegreeAngle(dec), J2000)
    galactic = equatorial_to_galactic(coords)
    l_py, b_py = astro_py.galactic_coordinates(ra, dec)

    assert compare_longitudes(f"{name} l", _degrees(galactic.longitude), l_py)
    assert compare_values(f"{name} b", _degrees(galactic.latitude), b_py, unit="deg")


def test_ecliptic():
    ra, dec = 116.328942, 28.026183
    coords = EquatorialCoords(DegreeAngle(ra), DegreeAngle(dec), J2000)
    ecliptic = equatorial_to_ecliptic(coords, mean_obliquity(J2000))
    lon_py, lat_py = astro_py.ecliptic_coordinates(ra, dec, J2000.julian_day)

    assert compare_longitudes("Ecliptic longitude", _degrees(ecliptic.longitude), lon_py, 1e-4)
    assert compare_values("Ecliptic latitude", _degrees(ecliptic.latitude), lat_py, 1e-4, "deg")


def test_angular_separation():
    arcturus = EquatorialCoords(DegreeAngle(213.9154), DegreeAngle(19.1825), J2000)
    spica = EquatorialCoords(DegreeAngle(201.2983), DegreeAngle(-11.1614), J2000)

    separation = _degrees(angular_separation(arcturus, spica))
    separation_py = astro_py.angular_separation(213.9154, 19.1825, 201.2983, -11.1614)
    assert compare_values("Separation", separation, separation_py, 1e-6, "deg")


def test_to_skycoord():
    sky = astro_py.to_skycoord(THETA_PERSEI)
    assert sky.ra.deg == pytest.approx(_degrees(THETA_PERSEI.right_ascension), abs=1e-9)
    assert sky.dec.deg == pytest.approx(_degrees(THETA_PERSEI.declination), abs=1e-9)
    assert sky.frame.equinox.jd == pytest.approx(J2000.julian_day)
