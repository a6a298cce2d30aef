#!/usr/bin/env python3
"""
Tests for astrocalc_coords: construction, canonical ranges, the observer
longitude sign convention and display of the coordinate records.
"""

import dataclasses
import math
import os
import sys

import pytest

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from astrocalc_angles import DegreeAngle, DMSAngle, HMSAngle, RadianAngle
from astrocalc_coords import (
    EPSILON_1950, EPSILON_2000, EclipticCoords, EquatorialCoords,
    GalacticCoords, GeoCoords, HorizontalCoords, Nutation, ProperMotionEc,
    ProperMotionEq
)
from astrocalc_errors import LatitudeRangeError
from astrocalc_time import J2000, AstroTime

# Observer of Meeus example 13.b (US Naval Observatory)
WASHINGTON = GeoCoords(DMSAngle(38, 55, 17.0), DMSAngle(-77, 3, 56.0))


def test_geo_longitude_sign_convention():
    assert math.degrees(WASHINGTON.latitude.radians) == pytest.approx(38.921389, abs=1e-6)
    assert math.degrees(WASHINGTON.longitude.radians) == pytest.approx(-77.065556, abs=1e-6)
    assert math.degrees(WASHINGTON.meeus_longitude.radians) == pytest.approx(77.065556, abs=1e-6)

    east = GeoCoords(DegreeAngle(-29.2567), DegreeAngle(290.0))
    assert math.degrees(east.longitude.radians) == pytest.approx(-70.0)


def test_geo_rejects_bad_input():
    with pytest.raises(LatitudeRangeError):
        GeoCoords(DegreeAngle(95.0), DegreeAngle(0.0))
    with pytest.raises(TypeError):
        GeoCoords(38.9, -77.0)


def test_equatorial_construction():
    coords = EquatorialCoords(HMSAngle(2, 44, 12.975), DMSAngle(49, 13, 39.9), J2000)

    assert isinstance(coords.right_ascension, RadianAngle)
    assert isinstance(coords.declination, RadianAngle)
    assert math.degrees(coords.right_ascension.radians) == pytest.approx(41.054063, abs=1e-6)
    assert math.degrees(coords.declination.radians) == pytest.approx(49.227750, abs=1e-6)
    assert coords.valid_time == J2000

    later = AstroTime(2462088.69)
    assert EquatorialCoords(DegreeAngle(10.0), DegreeAngle(0.0), J2000, later).valid_time == later


def test_canonical_ranges_on_construction():
    coords = EquatorialCoords(DegreeAngle(370.0), DegreeAngle(-10.0), J2000)
    assert math.degrees(coords.right_ascension.radians) == pytest.approx(10.0)

    coords = EquatorialCoords(DegreeAngle(-15.0), DegreeAngle(10.0), J2000)
    assert math.degrees(coords.right_ascension.radians) == pytest.approx(345.0)

    with pytest.raises(LatitudeRangeError):
        EquatorialCoords(DegreeAngle(10.0), DegreeAngle(90.5), J2000)
    with pytest.raises(LatitudeRangeError):
        EclipticCoords(DegreeAngle(-91.0), DegreeAngle(10.0), J2000)
    with pytest.raises(LatitudeRangeError):
        GalacticCoords(DegreeAngle(100.0), DegreeAngle(10.0))
    with pytest.raises(LatitudeRangeError):
        HorizontalCoords(DegreeAngle(91.0), DegreeAngle(0.0), WASHINGTON, J2000)

    ecliptic = EclipticCoords(DegreeAngle(5.0), DegreeAngle(-90.0), J2000)
    assert math.degrees(ecliptic.longitude.radians) == pytest.approx(270.0)


def test_type_checks():
    with pytest.raises(TypeError):
        EquatorialCoords(1.0, DegreeAngle(0.0), J2000)
    with pytest.raises(TypeError):
        EquatorialCoords(DegreeAngle(1.0), DegreeAngle(0.0), 2451545.0)
    with pytest.raises(TypeError):
        HorizontalCoords(DegreeAngle(1.0), DegreeAngle(0.0), None, J2000)


def test_records_are_immutable():
    coords = EquatorialCoords(DegreeAngle(10.0), DegreeAngle(20.0), J2000)
    with pytest.raises(dataclasses.FrozenInstanceError):
        coords.declination = RadianAngle(0.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        WASHINGTON._latitude = RadianAngle(0.0)


def test_proper_motion_records():
    motion = ProperMotionEq(HMSAngle(0, 0, 0.03425), DMSAngle(0, 0, -0.0895), J2000)
    assert motion.ra_rate.radians == pytest.approx(math.radians(0.03425 * 15.0 / 3600.0))
    assert motion.dec_rate.radians == pytest.approx(math.radians(-0.0895 / 3600.0))

    motion = ProperMotionEc(DegreeAngle(-0.001), DegreeAngle(0.002), J2000)
    assert motion.lat_rate.radians < 0.0 < motion.lon_rate.radians


def test_nutation_record():
    nutation = Nutation(DMSAngle(0, 0, -3.788), DMSAngle(0, 0, 9.443),
                        DMSAngle(23, 26, 27.407), J2000)
    expected = DMSAngle(23, 26, 36.850).to_radians()
    assert nutation.true_obliquity.radians == pytest.approx(expected, abs=1e-12)


def test_standard_obliquities():
    assert EPSILON_2000.degrees == 23.4392911
    assert EPSILON_1950.degrees == 23.4457889


def test_display():
    coords = EquatorialCoords(HMSAngle(2, 44, 12.975), DMSAngle(49, 13, 39.9), J2000)
    text = str(coords)
    assert text.startswith("Equatorial Coordinates")
    assert "RA: 2h 44m 12.975s" in text
    assert "dec: 49° 13' 39.9" in text

    assert str(WASHINGTON).startswith("Geographic Location - latitude: 38.92")
    assert "longitude: -77.06" in str(WASHINGTON)

    galactic = GalacticCoords(DegreeAngle(6.0463), DegreeAngle(12.9593))
    assert "latitude: 6.046" in str(galactic)

    nutation = Nutation(DMSAngle(0, 0, -3.788), DMSAngle(0, 0, 9.443),
                        DMSAngle(23, 26, 27.407), J2000)
    assert "delta longitude: 0° 0' -3.788" in str(nutation)
