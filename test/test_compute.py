"""
Convenience API tests

Positions of the sun seen from Bern compared with published ephemerides.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

import dataclasses
import warnings
from datetime import datetime, timezone

import numpy as np
import pytest

import pySPA
from pySPA.atmosphere import pressure_at
from pySPA.compute import ASTRONOMICAL_UNIT, Position, solar_position
from pySPA.config import fixed_delta_t, range_warnings_disabled
from pySPA.deltat import decimal_year, delta_t
from pySPA.spa import Params, calculate, julian_date

BERN_POSITIONS = [
    # (instant, altitude, azimuth, declination, right ascension)
    (datetime(2020, 9, 2, 2, 31, tzinfo=timezone.utc), -22.18, 49.48, 7.783, 161.62),
    (datetime(2021, 3, 29, 13, 21, tzinfo=timezone.utc), 40.97, 216.18, 3.6, 8.33),
]


@pytest.mark.parametrize("instant,altitude,azimuth,declination,ra", BERN_POSITIONS)
def test_bern_horizontal(clean_config, bern, instant, altitude, azimuth, declination, ra):
    """Altitude and azimuth seen from Bern"""
    lat, lon = bern
    pos = solar_position(instant, lat, lon)
    assert np.isclose(pos.altitude, altitude, rtol=0.0, atol=0.01)
    assert np.isclose(pos.azimuth, azimuth, rtol=0.0, atol=0.01)


@pytest.mark.parametrize("instant,altitude,azimuth,declination,ra", BERN_POSITIONS)
def test_bern_equatorial(clean_config, bern, instant, altitude, azimuth, declination, ra):
    """Geocentric declination and right ascension"""
    lat, lon = bern
    pos = solar_position(instant, lat, lon)
    assert np.isclose(pos.declination, declination, rtol=0.0, atol=0.05)
    assert np.isclose(pos.right_ascension, ra, rtol=0.0, atol=0.05)


def test_position_fields(clean_config, bern):
    """Altitude and zenith are complementary"""
    lat, lon = bern
    pos = solar_position(datetime(2021, 6, 21, 11, 30), lat, lon)
    assert isinstance(pos, Position)
    assert np.isclose(pos.altitude + pos.zenith, 90.0)
    assert 0.0 <= pos.azimuth < 360.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        pos.altitude = 0.0


def test_matches_full_algorithm(clean_config):
    """Defaults are filled in from the estimators"""
    dt = datetime(2003, 10, 17, 19, 30, 30, tzinfo=timezone.utc)
    pos = solar_position(dt, 39.742476, -105.1786, altitude=1830.14)
    result = calculate(Params(
        instant=dt,
        delta_t=delta_t(decimal_year(dt)),
        longitude=-105.1786,
        latitude=39.742476,
        elevation=1830.14,
        pressure=pressure_at(1830.14) / 100.0,
        temperature=21.0,
    ))
    assert pos.zenith == result.zenith
    assert pos.azimuth == result.azimuth
    assert pos.distance == result.heliocentric_radius * ASTRONOMICAL_UNIT


def test_explicit_weather(clean_config, worked_example):
    """Given temperature, pressure and fixed Delta T reproduce the worked example"""
    with fixed_delta_t(67.0):
        pos = solar_position(
            worked_example.instant,
            worked_example.latitude,
            worked_example.longitude,
            altitude=worked_example.elevation,
            temperature=11.0,
            pressure=82000.0,
        )
    assert np.isclose(pos.zenith, 50.111622, rtol=0.0, atol=1e-6)
    assert np.isclose(pos.azimuth, 194.34024, rtol=0.0, atol=1e-6)


def test_distance_is_geocentric(clean_config, worked_example):
    """Distance is the heliocentric radius of the Earth in metres"""
    with fixed_delta_t(67.0):
        pos = solar_position(
            worked_example.instant,
            worked_example.latitude,
            worked_example.longitude,
            altitude=worked_example.elevation,
        )
    # R = 0.9965422974 AU in the worked example
    assert np.isclose(pos.distance / ASTRONOMICAL_UNIT, 0.9965422974, rtol=0.0, atol=1e-7)


def test_default_temperature(clean_config, bern):
    """Configured temperature changes refraction"""
    lat, lon = bern
    dt = datetime(2021, 3, 29, 7, 0, tzinfo=timezone.utc)
    warm = solar_position(dt, lat, lon)
    pySPA.set_default_temperature(-30.0)
    cold = solar_position(dt, lat, lon)
    assert cold.altitude > warm.altitude
    assert cold == solar_position(dt, lat, lon, temperature=-30.0)


def test_delta_ut1_from_config(clean_config, bern):
    """Configured UT1 - UTC shifts the instant"""
    lat, lon = bern
    dt = datetime(2021, 3, 29, 13, 21, tzinfo=timezone.utc)
    base = solar_position(dt, lat, lon)
    pySPA.set_delta_ut1(0.9)
    shifted = solar_position(dt, lat, lon)
    assert shifted.azimuth != base.azimuth
    assert np.isclose(shifted.azimuth, base.azimuth, atol=0.01)


def test_datetime64(clean_config, bern):
    """numpy datetime64 instants are accepted"""
    lat, lon = bern
    a = solar_position(np.datetime64('2021-03-29T13:21'), lat, lon)
    b = solar_position(datetime(2021, 3, 29, 13, 21, tzinfo=timezone.utc), lat, lon)
    assert a == b


def test_unsupported_kwargs_warn(clean_config, bern):
    """Unknown keyword arguments are ignored with a warning"""
    lat, lon = bern
    dt = datetime(2021, 3, 29, 13, 21, tzinfo=timezone.utc)
    with pytest.warns(UserWarning, match="ignoring unsupported kwargs"):
        pos = solar_position(dt, lat, lon, method='fast')
    assert pos == solar_position(dt, lat, lon)


@pytest.mark.parametrize("latitude", [-90.5, 91.0, 180.0])
def test_invalid_latitude(clean_config, latitude):
    """Latitudes beyond the poles are rejected"""
    with pytest.raises(ValueError, match="Latitude"):
        solar_position(datetime(2021, 3, 29), latitude, 0.0)


def test_poles_accepted(clean_config):
    """Latitude at the poles is valid"""
    pos = solar_position(datetime(2021, 6, 21, 12), 90.0, 0.0)
    assert np.isfinite(pos.altitude)


def test_out_of_range_year_warns(clean_config):
    """Years beyond the validated range warn"""
    with pytest.warns(RuntimeWarning, match="outside the validated range"):
        solar_position(np.datetime64('7000-06-01T12:00'), 0.0, 0.0)


def test_out_of_range_warning_disabled(clean_config):
    """Range warnings can be silenced"""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        with range_warnings_disabled():
            solar_position(np.datetime64('7000-06-01T12:00'), 0.0, 0.0)


def test_in_range_year_silent(clean_config, bern):
    """No warning inside the validated range"""
    lat, lon = bern
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        solar_position(datetime(1600, 1, 1), lat, lon)


def test_public_api():
    """Every exported name resolves"""
    for name in pySPA.__all__:
        assert hasattr(pySPA, name), name
    assert pySPA.julian_date is julian_date
    assert not hasattr(pySPA, 'datetime_to_jd')


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
