#!/usr/bin/env python3
"""
Tests for astrocalc_transforms: sidereal time, hour angle and the frame
conversions, against the worked examples of Meeus chapters 12, 13 and 17.
"""

import math
import os
import sys

import pytest

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from astrocalc_angles import DegreeAngle, DMSAngle, HMSAngle, RadianAngle
from astrocalc_corrections import precess_coords
from astrocalc_coords import (
    EPSILON_2000, EclipticCoords, EquatorialCoords, GalacticCoords, GeoCoords
)
from astrocalc_errors import DateRangeError
from astrocalc_time import B1950, J2000, AstroTime, TimeType
from astrocalc_transforms import (
    angular_separation, ecliptic_to_equatorial, equatorial_to_ecliptic,
    equatorial_to_galactic, equatorial_to_horizontal, galactic_to_equatorial,
    horizontal_to_equatorial, local_hour_angle, local_sidereal_time,
    right_ascension_from_hour_angle
)

WASHINGTON = GeoCoords(DMSAngle(38, 55, 17.0), DMSAngle(-77, 3, 56.0))
VENUS_TIME = AstroTime.from_gregorian_utc(1987, 4, 10, 19, 21, 0)
VENUS = EquatorialCoords(HMSAngle(23, 9, 16.641), DMSAngle(-6, 43, 11.61),
                         VENUS_TIME, VENUS_TIME)


def _degrees(angle):
    return math.degrees(angle.radians)


def compare_values(name, val1, val2, tolerance):
    """Compare two values and report the difference"""
    diff = abs(val1 - val2)
    status = "OK" if diff <= tolerance else "MISMATCH"
    print(f"  {name:30s}: {val1:.6f} vs {val2:.6f} (diff: {diff:.2e}) - {status}")
    return diff <= tolerance


# ============================================================================
# Sidereal Time and Hour Angle
# ============================================================================

def test_local_sidereal_time():
    # GMST 128.7378734 deg less 77.0655556 deg west
    lst = local_sidereal_time(VENUS_TIME, WASHINGTON)
    assert compare_values("LMST", _degrees(lst), 51.6723178, 2e-5)


def test_local_hour_angle():
    hour_angle = local_hour_angle(VENUS_TIME, WASHINGTON, VENUS)
    assert compare_values("Hour angle (mean)", _degrees(hour_angle), 64.3529803, 2e-5)

    # Meeus uses apparent sidereal time, 0.0009858 deg smaller
    assert _degrees(hour_angle) - 0.0009858333 == pytest.approx(64.352133, abs=2e-4)


def test_right_ascension_from_hour_angle():
    hour_angle = local_hour_angle(VENUS_TIME, WASHINGTON, VENUS)
    ra = right_ascension_from_hour_angle(hour_angle, VENUS_TIME, WASHINGTON)
    assert ra.radians == pytest.approx(VENUS.right_ascension.radians, abs=1e-12)


def test_sidereal_time_failure_propagates():
    with pytest.raises(DateRangeError):
        local_hour_angle(AstroTime(0.5, TimeType.DT), WASHINGTON, VENUS)


# ============================================================================
# Ecliptic
# ============================================================================

def test_equatorial_to_ecliptic():
    # Meeus example 13.a, Pollux
    pollux = EquatorialCoords(DegreeAngle(116.328942), DegreeAngle(28.026183), J2000)
    ecliptic = equatorial_to_ecliptic(pollux, EPSILON_2000)

    assert compare_values("Ecliptic longitude", _degrees(ecliptic.longitude), 113.215630, 1e-6)
    assert compare_values("Ecliptic latitude", _degrees(ecliptic.latitude), 6.684170, 1e-6)
    assert ecliptic.epoch == pollux.epoch
    assert ecliptic.valid_time == pollux.valid_time


def test_ecliptic_round_trip():
    obliquity = DMSAngle(23, 26, 36.85)
    for ra, dec in [(0.0, 0.0), (116.328942, 28.026183), (250.0, -60.0), (359.5, 89.0)]:
        original = EquatorialCoords(DegreeAngle(ra), DegreeAngle(dec), J2000)
        back = ecliptic_to_equatorial(equatorial_to_ecliptic(original, obliquity), obliquity)

        ra_diff = abs(math.remainder(back.right_ascension.radians
                                     - original.right_ascension.radians, 2.0 * math.pi))
        assert ra_diff < 1e-9
        assert back.declination.radians == pytest.approx(original.declination.radians, abs=1e-9)


def test_ecliptic_pole():
    pole = EclipticCoords(DegreeAngle(90.0), DegreeAngle(0.0), J2000)
    equatorial = ecliptic_to_equatorial(pole, EPSILON_2000)
    assert _degrees(equatorial.right_ascension) == pytest.approx(270.0, abs=1e-9)
    assert _degrees(equatorial.declination) == pytest.approx(90.0 - 23.4392911, abs=1e-9)


# ============================================================================
# Horizontal
# ============================================================================

def test_equatorial_to_horizontal():
    # Meeus example 13.b (apparent sidereal time there, mean here)
    horizontal = equatorial_to_horizontal(VENUS, WASHINGTON)

    assert compare_values("Altitude", _degrees(horizontal.altitude), 15.1249, 2e-3)
    assert compare_values("Azimuth (from south)", _degrees(horizontal.azimuth), 68.0337, 2e-3)
    assert horizontal.valid_time == VENUS_TIME
    assert horizontal.observer == WASHINGTON


def test_azimuth_is_measured_from_south():
    # An object on the meridian south of the zenith has azimuth 0
    lst = local_sidereal_time(VENUS_TIME, WASHINGTON)
    south = EquatorialCoords(lst, DegreeAngle(0.0), VENUS_TIME)
    horizontal = equatorial_to_horizontal(south, WASHINGTON)

    azimuth = math.remainder(horizontal.azimuth.radians, 2.0 * math.pi)
    assert azimuth == pytest.approx(0.0, abs=1e-9)
    assert _degrees(horizontal.altitude) == pytest.approx(90.0 - 38.921389, abs=1e-6)


def test_horizontal_round_trip():
    for ra, dec in [(347.3193375, -6.719892), (10.0, 80.0), (200.0, -30.0), (100.0, 0.0)]:
        original = EquatorialCoords(DegreeAngle(ra), DegreeAngle(dec), J2000, VENUS_TIME)
        horizontal = equatorial_to_horizontal(original, WASHINGTON)
        back = horizontal_to_equatorial(horizontal, J2000)

        ra_diff = abs(math.remainder(back.right_ascension.radians
                                     - original.right_ascension.radians, 2.0 * math.pi))
        assert ra_diff < 1e-9
        assert back.declination.radians == pytest.approx(original.declination.radians, abs=1e-9)
        assert back.epoch == J2000
        assert back.valid_time == VENUS_TIME


def test_horizontal_to_equatorial_default_epoch():
    horizontal = equatorial_to_horizontal(VENUS, WASHINGTON)
    assert horizontal_to_equatorial(horizontal).epoch == VENUS_TIME


# ============================================================================
# Galactic
# ============================================================================

def test_equatorial_to_galactic():
    # Meeus example 13.c, Nova Serpentis 1978 (B1950)
    nova = EquatorialCoords(HMSAngle(17, 48, 59.74), DMSAngle(-14, 43, 8.2), B1950)
    galactic = equatorial_to_galactic(nova)

    assert compare_values("Galactic longitude", _degrees(galactic.longitude), 12.9593, 1e-3)
    assert compare_values("Galactic latitude", _degrees(galactic.latitude), 6.0463, 1e-3)


def test_galactic_round_trip():
    for ra, dec in [(10.0, 41.0), (266.4, -28.9), (150.0, -70.0)]:
        original = EquatorialCoords(DegreeAngle(ra), DegreeAngle(dec), J2000)
        back = galactic_to_equatorial(equatorial_to_galactic(original), J2000)

        assert back.epoch == J2000
        assert back.valid_time == J2000
        assert _degrees(back.right_ascension) == pytest.approx(ra, abs=1e-6)
        assert _degrees(back.declination) == pytest.approx(dec, abs=1e-6)


def test_galactic_pole():
    pole = GalacticCoords(DegreeAngle(90.0), DegreeAngle(0.0))
    equatorial = galactic_to_equatorial(pole, B1950)
    assert _degrees(equatorial.right_ascension) == pytest.approx(192.25, abs=1e-6)
    assert _degrees(equatorial.declination) == pytest.approx(27.4, abs=1e-6)


# ============================================================================
# Separation
# ============================================================================

def test_angular_separation():
    # Meeus example 17.a, Arcturus and Spica
    arcturus = EquatorialCoords(DegreeAngle(213.9154), DegreeAngle(19.1825), J2000)
    spica = EquatorialCoords(DegreeAngle(201.2983), DegreeAngle(-11.1614), J2000)

    separation = angular_separation(arcturus, spica)
    assert compare_values("Separation", _degrees(separation), 32.7930, 1e-4)
    assert angular_separation(spica, arcturus).radians == pytest.approx(separation.radians)
    assert angular_separation(spica, spica).radians == pytest.approx(0.0, abs=1e-12)


def test_angular_separation_precesses_second_position():
    star = EquatorialCoords(DegreeAngle(41.054063), DegreeAngle(49.227750), J2000)
    moved = precess_coords(star, B1950)

    assert angular_separation(star, moved).radians == pytest.approx(0.0, abs=5e-8)
    assert isinstance(angular_separation(star, moved), RadianAngle)
