#!/usr/bin/env python3
"""
Tests for astrocalc_corrections: proper motion, precession and nutation,
using theta Persei (Meeus examples 21.b and 23.a) and the nutation example
of Meeus chapter 22.
"""

import math
import os
import sys

import pytest

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from astrocalc_angles import DegreeAngle, DMSAngle, HMSAngle
from astrocalc_config import Config
from astrocalc_coords import (
    EclipticCoords, EquatorialCoords, Nutation, ProperMotionEc, ProperMotionEq
)
from astrocalc_corrections import (
    apply_nutation, apply_proper_motion_ec, apply_proper_motion_eq,
    calculate_nutation, mean_obliquity, precess_coords, propagate_coords,
    true_obliquity
)
from astrocalc_errors import LatitudeRangeError
from astrocalc_time import J2000, AstroTime, TimeType

ARCSEC_PER_RAD = 1.0 / Config.ARCSEC_TO_RAD

# theta Persei, J2000 mean position and proper motion
THETA_PERSEI = EquatorialCoords(HMSAngle(2, 44, 11.986), DMSAngle(49, 13, 42.48), J2000)
THETA_PERSEI_MOTION = ProperMotionEq(HMSAngle(0, 0, 0.03425), DMSAngle(0, 0, -0.0895), J2000)

# 2028 November 13.19
TARGET_UT = AstroTime.from_gregorian_utc(2028, 11, 13, 4, 33, 36)
TARGET_DT = AstroTime(2462088.69, TimeType.DT)


def _degrees(angle):
    return math.degrees(angle.radians)


# ============================================================================
# Proper Motion
# ============================================================================

def test_apply_proper_motion_eq():
    moved = apply_proper_motion_eq(THETA_PERSEI, TARGET_UT, THETA_PERSEI_MOTION)

    expected_ra = HMSAngle(2, 44, 12.975).to_radians()
    expected_dec = DMSAngle(49, 13, 39.9).to_radians()
    assert moved.right_ascension.radians == pytest.approx(expected_ra, abs=1e-7)
    assert moved.declination.radians == pytest.approx(expected_dec, abs=1e-7)

    assert moved.epoch == J2000
    assert moved.valid_time.time_type is TimeType.DT
    assert moved.valid_time == TARGET_UT.as_dt()


def test_proper_motion_reverses():
    moved = apply_proper_motion_eq(THETA_PERSEI, TARGET_UT, THETA_PERSEI_MOTION)
    back = apply_proper_motion_eq(moved, J2000, THETA_PERSEI_MOTION)

    assert back.right_ascension.radians == pytest.approx(
        THETA_PERSEI.right_ascension.radians, abs=1e-12)
    assert back.declination.radians == pytest.approx(
        THETA_PERSEI.declination.radians, abs=1e-12)
    assert back.valid_time == J2000


def test_apply_proper_motion_ec():
    coords = EclipticCoords(DegreeAngle(10.0), DegreeAngle(100.0), J2000)
    motion = ProperMotionEc(DegreeAngle(0.001), DegreeAngle(-0.002), J2000)
    later = AstroTime(J2000.julian_day + 100.0 * 365.25, TimeType.DT)

    moved = apply_proper_motion_ec(coords, later, motion)
    assert _degrees(moved.latitude) == pytest.approx(10.1, abs=1e-9)
    assert _degrees(moved.longitude) == pytest.approx(99.8, abs=1e-9)
    assert moved.valid_time == later
    assert moved.epoch == J2000


def test_proper_motion_past_pole_raises():
    coords = EquatorialCoords(DegreeAngle(10.0), DegreeAngle(89.9), J2000)
    motion = ProperMotionEq(DegreeAngle(0.0), DegreeAngle(1.0), J2000)
    later = AstroTime(J2000.julian_day + 365.25, TimeType.DT)

    with pytest.raises(LatitudeRangeError):
        apply_proper_motion_eq(coords, later, motion)


# ============================================================================
# Precession
# ============================================================================

def test_precess_theta_persei():
    # Meeus example 21.b
    mean_j2000 = EquatorialCoords(HMSAngle(2, 44, 12.975), DMSAngle(49, 13, 39.90), J2000)
    precessed = precess_coords(mean_j2000, TARGET_DT)

    assert _degrees(precessed.right_ascension) == pytest.approx(41.547214, abs=2e-6)
    assert _degrees(precessed.declination) == pytest.approx(49.348483, abs=2e-6)
    assert precessed.epoch == TARGET_DT
    assert precessed.valid_time == mean_j2000.valid_time


def test_precession_round_trip():
    for ra, dec in [(41.054063, 49.227750), (0.0, 0.0), (180.0, -45.0), (300.0, 85.0)]:
        original = EquatorialCoords(DegreeAngle(ra), DegreeAngle(dec), J2000)
        there = precess_coords(original, TARGET_DT)
        back = precess_coords(there, J2000)

        ra_diff = math.remainder(_degrees(back.right_ascension) - ra, 360.0)
        assert abs(ra_diff) < 1e-6
        assert _degrees(back.declination) == pytest.approx(dec, abs=1e-6)


def test_precession_uses_dynamical_time():
    ut_epoch = AstroTime(2462088.69, TimeType.UT)
    from_ut = precess_coords(THETA_PERSEI, ut_epoch)
    from_dt = precess_coords(THETA_PERSEI, ut_epoch.as_dt())

    assert from_ut.epoch == ut_epoch
    assert from_ut.right_ascension.radians == pytest.approx(
        from_dt.right_ascension.radians, abs=1e-15)
    assert from_ut.declination.radians == pytest.approx(
        from_dt.declination.radians, abs=1e-15)


def test_propagate_applies_proper_motion_first():
    propagated = propagate_coords(THETA_PERSEI, TARGET_DT, THETA_PERSEI_MOTION)

    expected = precess_coords(
        apply_proper_motion_eq(THETA_PERSEI, TARGET_DT, THETA_PERSEI_MOTION), TARGET_DT)
    assert propagated == expected

    # Meeus example 21.b final mean position
    assert _degrees(propagated.right_ascension) == pytest.approx(41.547214, abs=1e-5)
    assert _degrees(propagated.declination) == pytest.approx(49.348483, abs=1e-5)

    assert propagate_coords(THETA_PERSEI, TARGET_DT) == precess_coords(THETA_PERSEI, TARGET_DT)


# ============================================================================
# Nutation
# ============================================================================

def test_nutation_1987():
    # Meeus example 22.a, 1987 April 10 0h TD
    time = AstroTime.from_gregorian_utc(1987, 4, 10).dynamical_time()
    nutation = calculate_nutation(time)

    assert nutation.delta_longitude.radians * ARCSEC_PER_RAD == pytest.approx(-3.788, abs=1e-3)
    assert nutation.delta_obliquity.radians * ARCSEC_PER_RAD == pytest.approx(9.443, abs=1e-3)

    mean = DMSAngle(23, 26, 27.407).to_radians()
    assert nutation.mean_obliquity.radians == pytest.approx(mean, abs=2e-3 / ARCSEC_PER_RAD)

    true = DMSAngle(23, 26, 36.850).to_radians()
    assert nutation.true_obliquity.radians == pytest.approx(true, abs=2e-3 / ARCSEC_PER_RAD)
    assert nutation.epoch == time


def test_nutation_2028():
    # Meeus example 23.a
    nutation = calculate_nutation(TARGET_DT)
    assert nutation.delta_longitude.radians * ARCSEC_PER_RAD == pytest.approx(14.861, abs=5e-3)
    assert nutation.delta_obliquity.radians * ARCSEC_PER_RAD == pytest.approx(2.705, abs=5e-3)


def test_nutation_converts_universal_time():
    ut = AstroTime.from_gregorian_utc(1987, 4, 10)
    nutation = calculate_nutation(ut)
    assert nutation.epoch == ut.as_dt()
    assert nutation.epoch.time_type is TimeType.DT


def test_obliquity():
    assert _degrees(mean_obliquity(J2000)) == pytest.approx(23.4392911, abs=1e-7)

    time = AstroTime.from_gregorian_utc(1987, 4, 10).dynamical_time()
    assert true_obliquity(time).radians == pytest.approx(
        calculate_nutation(time).true_obliquity.radians)


def test_apply_nutation():
    # Meeus example 23.a, nutation terms only
    mean = EquatorialCoords(DegreeAngle(41.547214), DegreeAngle(49.348483), TARGET_DT)
    nutation = Nutation(DMSAngle(0, 0, 14.861), DMSAngle(0, 0, 2.705),
                        DegreeAngle(23.436 - 2.705 / 3600.0), TARGET_DT)

    corrected = apply_nutation(mean, nutation)
    delta_ra = (corrected.right_ascension.radians - mean.right_ascension.radians) * ARCSEC_PER_RAD
    delta_dec = (corrected.declination.radians - mean.declination.radians) * ARCSEC_PER_RAD

    assert delta_ra == pytest.approx(15.843, abs=5e-3)
    assert delta_dec == pytest.approx(6.218, abs=5e-3)
    assert corrected.epoch == mean.epoch
