"""
pySPA.spa - Solar Position Algorithm

Computes the topocentric position of the sun following the Solar Position
Algorithm (SPA) of the National Renewable Energy Laboratory, as described
in Reda and Andreas (2004), https://midcdmz.nrel.gov/spa/.

The calculation runs as a chain of pure stages, each returning an
immutable intermediate (time scales, heliocentric position, ecliptic
position, equatorial position, topocentric position, horizon position).
Nothing is cached between calls and no module state is read.

Usage:
    from datetime import datetime, timezone
    import pySPA

    params = pySPA.Params(
        instant=datetime(2003, 10, 17, 19, 30, 30, tzinfo=timezone.utc),
        delta_t=67.0, longitude=-105.1786, latitude=39.742476,
        elevation=1830.14, pressure=820.0, temperature=11.0,
    )
    result = pySPA.calculate(params)
    result.zenith, result.azimuth

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import NamedTuple, Union

import numpy as np

from .astro.ephemeris import (
    heliocentric_latitude,
    heliocentric_longitude,
    heliocentric_radius,
    mean_obliquity,
    mean_sidereal_time,
    normalize_angle,
    nutation,
    sun_mean_longitude,
)

__all__ = [
    'Params',
    'Result',
    'atmospheric_refraction',
    'calculate',
    'julian_date',
]

# Constants
_JD_UNIX_EPOCH = 2440587.5  # JD of 1970-01-01T00:00:00Z
_JD_J2000 = 2451545.0  # JD of J2000.0
_JULIAN_CENTURY = 36525.0  # Julian century (days)
_DAY_SECONDS = 86400.0  # Seconds per day
_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_UNIX_EPOCH64 = np.datetime64('1970-01-01T00:00:00', 'us')
_TWO_PI = 2.0 * np.pi

# Aberration constant and equatorial horizontal parallax at 1 AU (arcseconds)
_ABERRATION = 20.4898
_PARALLAX = 8.794

# Earth equatorial radius (metres) and polar/equatorial axis ratio
_EARTH_RADIUS = 6378140.0
_AXIS_RATIO = 0.99664719

Instant = Union[datetime, np.datetime64]


@dataclass(frozen=True)
class Params:
    """
    Input parameters of the Solar Position Algorithm

    Attributes
    ----------
    instant : datetime or np.datetime64
        Time of observation; naive values are read as UTC
    delta_t : float
        Difference between terrestrial and universal time, TT - UT (seconds)
    longitude : float
        Observer geographic longitude sigma, east positive (degrees)
    latitude : float
        Observer geographic latitude phi (degrees)
    elevation : float
        Observer elevation E above sea level (metres)
    pressure : float
        Annual average local pressure P (millibars)
    temperature : float
        Annual average local temperature T (degrees Celsius)
    delta_ut1 : float, default 0.0
        Difference UT1 - UTC in the range [-0.9, 0.9] (seconds)
    slope : float, default 0.0
        Surface slope omega measured from the horizontal plane (degrees)
    azimuth_rotation : float, default 0.0
        Surface azimuth rotation gamma measured from south towards
        west (degrees)
    """

    instant: Instant
    delta_t: float
    longitude: float
    latitude: float
    elevation: float
    pressure: float
    temperature: float
    delta_ut1: float = 0.0
    slope: float = 0.0
    azimuth_rotation: float = 0.0


@dataclass(frozen=True)
class Result:
    """
    Output of the Solar Position Algorithm

    All angles are in degrees. Longitude-like angles are normalized to
    [0, 360); latitude-like angles and nutation terms are not.
    """

    julian_date: float
    heliocentric_longitude: float  # L
    heliocentric_latitude: float  # B
    heliocentric_radius: float  # R (AU)
    geocentric_longitude: float  # Theta
    geocentric_latitude: float  # beta
    nutation_longitude: float  # delta psi
    nutation_obliquity: float  # delta epsilon
    true_obliquity: float  # epsilon
    apparent_longitude: float  # lambda
    right_ascension: float  # alpha
    declination: float  # delta
    hour_angle: float  # H
    topocentric_right_ascension: float  # alpha'
    topocentric_declination: float  # delta'
    topocentric_hour_angle: float  # H'
    zenith: float  # theta
    azimuth: float  # Phi, eastward from north
    elevation: float  # e, refraction corrected
    sun_mean_longitude: float  # M
    equation_of_time: float  # E (minutes)
    incidence: float  # I


# ============================================================
# Time
# ============================================================

def julian_date(instant: Instant, delta_ut1: float = 0.0) -> float:
    """
    Compute the Julian Date of an instant

    Parameters
    ----------
    instant : datetime or np.datetime64
        Time; naive datetimes are read as UTC
    delta_ut1 : float, default 0.0
        UT1 - UTC correction (seconds)

    Returns
    -------
    float
        Julian Date (UT1)
    """
    if isinstance(instant, np.datetime64):
        seconds = (instant - _UNIX_EPOCH64) / np.timedelta64(1, 's')
    elif isinstance(instant, datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        seconds = (instant - _UNIX_EPOCH).total_seconds()
    else:
        raise TypeError(
            f"Unsupported instant type: {type(instant).__name__}. "
            "Expected datetime or numpy.datetime64"
        )
    return _JD_UNIX_EPOCH + (float(seconds) + delta_ut1) / _DAY_SECONDS


class _TimeScales(NamedTuple):
    jd: float  # Julian Day
    jde: float  # Julian Ephemeris Day
    jc: float  # Julian Century
    jce: float  # Julian Ephemeris Century
    jme: float  # Julian Ephemeris Millennium


def _time_scales(params: Params) -> _TimeScales:
    jd = julian_date(params.instant, params.delta_ut1)
    jde = jd + params.delta_t / _DAY_SECONDS
    jc = (jd - _JD_J2000) / _JULIAN_CENTURY
    jce = (jde - _JD_J2000) / _JULIAN_CENTURY
    return _TimeScales(jd, jde, jc, jce, jce / 10.0)


# ============================================================
# Pipeline stages (radians throughout)
# ============================================================

class _Heliocentric(NamedTuple):
    longitude: float
    latitude: float
    radius: float


def _heliocentric(ts: _TimeScales) -> _Heliocentric:
    return _Heliocentric(
        heliocentric_longitude(ts.jme),
        heliocentric_latitude(ts.jme),
        heliocentric_radius(ts.jme),
    )


class _Ecliptic(NamedTuple):
    longitude: float  # geocentric
    latitude: float  # geocentric
    delta_psi: float
    delta_epsilon: float
    obliquity: float  # true obliquity
    apparent_longitude: float


def _ecliptic(ts: _TimeScales, helio: _Heliocentric) -> _Ecliptic:
    theta = normalize_angle(helio.longitude + np.pi, circle=_TWO_PI)
    beta = -helio.latitude
    delta_psi, delta_epsilon = nutation(ts.jce)
    epsilon = np.radians(mean_obliquity(ts.jme) / 3600.0) + delta_epsilon
    # Aberration correction
    delta_tau = np.radians(-_ABERRATION / (3600.0 * helio.radius))
    lamda = theta + delta_psi + delta_tau
    return _Ecliptic(theta, beta, delta_psi, delta_epsilon, epsilon, lamda)


class _Equatorial(NamedTuple):
    sidereal_time: float  # apparent, at Greenwich
    right_ascension: float
    declination: float
    hour_angle: float


def _equatorial(ts: _TimeScales, ecl: _Ecliptic, longitude: float) -> _Equatorial:
    nu0 = np.radians(mean_sidereal_time(ts.jd))
    nu = nu0 + ecl.delta_psi * np.cos(ecl.obliquity)
    sin_eps = np.sin(ecl.obliquity)
    cos_eps = np.cos(ecl.obliquity)
    lamda = ecl.apparent_longitude
    beta = ecl.latitude
    alpha = normalize_angle(
        np.arctan2(np.sin(lamda) * cos_eps - np.tan(beta) * sin_eps, np.cos(lamda)),
        circle=_TWO_PI,
    )
    delta = np.arcsin(np.sin(beta) * cos_eps + np.cos(beta) * sin_eps * np.sin(lamda))
    H = normalize_angle(nu + longitude - alpha, circle=_TWO_PI)
    return _Equatorial(nu, alpha, delta, H)


class _Topocentric(NamedTuple):
    right_ascension: float
    declination: float
    hour_angle: float


def _topocentric(
    helio: _Heliocentric,
    eq: _Equatorial,
    latitude: float,
    elevation: float,
) -> _Topocentric:
    # Equatorial horizontal parallax of the sun
    xi = np.radians(_PARALLAX / (3600.0 * helio.radius))
    u = np.arctan(_AXIS_RATIO * np.tan(latitude))
    x = np.cos(u) + elevation / _EARTH_RADIUS * np.cos(latitude)
    y = _AXIS_RATIO * np.sin(u) + elevation / _EARTH_RADIUS * np.sin(latitude)
    denominator = np.cos(eq.declination) - x * np.sin(xi) * np.cos(eq.hour_angle)
    delta_alpha = np.arctan2(-x * np.sin(xi) * np.sin(eq.hour_angle), denominator)
    alpha_prime = normalize_angle(eq.right_ascension + delta_alpha, circle=_TWO_PI)
    delta_prime = np.arctan2(
        (np.sin(eq.declination) - y * np.sin(xi)) * np.cos(delta_alpha),
        denominator,
    )
    H_prime = normalize_angle(eq.hour_angle - delta_alpha, circle=_TWO_PI)
    return _Topocentric(alpha_prime, delta_prime, H_prime)


def atmospheric_refraction(
    e0: np.ndarray,
    pressure: np.ndarray,
    temperature: np.ndarray,
) -> np.ndarray:
    """
    Atmospheric refraction correction to the sun elevation

    Parameters
    ----------
    e0 : float or np.ndarray
        Topocentric elevation angle without refraction (degrees)
    pressure : float or np.ndarray
        Local pressure (millibars)
    temperature : float or np.ndarray
        Local temperature (degrees Celsius)

    Returns
    -------
    np.ndarray
        Refraction correction delta e (degrees)

    Notes
    -----
    Applied for any elevation; the correction is not limited to a sun
    above the horizon.
    """
    e0 = np.asarray(e0, dtype=np.float64)
    pressure = np.asarray(pressure, dtype=np.float64)
    temperature = np.asarray(temperature, dtype=np.float64)
    return ((pressure / 1010.0) * (283.0 / (273.0 + temperature)) * 1.02
            / (60.0 * np.tan(np.radians(e0 + 10.3 / (e0 + 5.11)))))


class _Horizon(NamedTuple):
    elevation: float  # refraction corrected
    zenith: float
    azimuth: float  # eastward from north
    astronomers_azimuth: float  # westward from south


def _horizon(
    topo: _Topocentric,
    latitude: float,
    pressure: float,
    temperature: float,
) -> _Horizon:
    sin_phi = np.sin(latitude)
    cos_phi = np.cos(latitude)
    e0 = np.arcsin(sin_phi * np.sin(topo.declination)
                   + cos_phi * np.cos(topo.declination) * np.cos(topo.hour_angle))
    delta_e = atmospheric_refraction(np.degrees(e0), pressure, temperature)
    e = e0 + np.radians(delta_e)
    zenith = np.pi / 2.0 - e
    gamma = np.arctan2(
        np.sin(topo.hour_angle),
        np.cos(topo.hour_angle) * sin_phi - np.tan(topo.declination) * cos_phi,
    )
    azimuth = normalize_angle(gamma + np.pi, circle=_TWO_PI)
    return _Horizon(e, zenith, azimuth, gamma)


def _equation_of_time(ts: _TimeScales, ecl: _Ecliptic, eq: _Equatorial) -> float:
    """Equation of time (minutes) folded into [-20, 20]"""
    M = sun_mean_longitude(ts.jme)
    E = 4.0 * (M - 0.0057183 - np.degrees(eq.right_ascension)
               + np.degrees(ecl.delta_psi) * np.cos(ecl.obliquity))
    if E < -20.0:
        E += 1440.0
    elif E > 20.0:
        E -= 1440.0
    return E


def _incidence(hor: _Horizon, slope: float, azimuth_rotation: float) -> float:
    """Incidence angle of the sun on a tilted surface (radians)"""
    return np.arccos(
        np.cos(hor.zenith) * np.cos(slope)
        + np.sin(slope) * np.sin(hor.zenith)
        * np.cos(hor.astronomers_azimuth - azimuth_rotation)
    )


# ============================================================
# Entry point
# ============================================================

def calculate(params: Params) -> Result:
    """
    Compute the solar position for the given parameters

    Parameters
    ----------
    params : Params
        Time, observer and atmosphere

    Returns
    -------
    Result
        All intermediate and final quantities of the algorithm (degrees)

    Notes
    -----
    The heliocentric radius divides the aberration and parallax terms;
    inputs must describe a physical date so that it is non-zero. Inputs
    are not validated: NaN propagates to the outputs.
    """
    phi = np.radians(params.latitude)
    sigma = np.radians(params.longitude)

    ts = _time_scales(params)
    helio = _heliocentric(ts)
    ecl = _ecliptic(ts, helio)
    eq = _equatorial(ts, ecl, sigma)
    topo = _topocentric(helio, eq, phi, params.elevation)
    hor = _horizon(topo, phi, params.pressure, params.temperature)
    incidence = _incidence(
        hor, np.radians(params.slope), np.radians(params.azimuth_rotation))

    return Result(
        julian_date=ts.jd,
        heliocentric_longitude=_degrees(helio.longitude),
        heliocentric_latitude=_degrees(helio.latitude),
        heliocentric_radius=float(helio.radius),
        geocentric_longitude=_degrees(ecl.longitude),
        geocentric_latitude=_degrees(ecl.latitude),
        nutation_longitude=_degrees(ecl.delta_psi),
        nutation_obliquity=_degrees(ecl.delta_epsilon),
        true_obliquity=_degrees(ecl.obliquity),
        apparent_longitude=_degrees(ecl.apparent_longitude),
        right_ascension=_degrees(eq.right_ascension),
        declination=_degrees(eq.declination),
        hour_angle=_degrees(eq.hour_angle),
        topocentric_right_ascension=_degrees(topo.right_ascension),
        topocentric_declination=_degrees(topo.declination),
        topocentric_hour_angle=_degrees(topo.hour_angle),
        zenith=_degrees(hor.zenith),
        azimuth=_degrees(hor.azimuth),
        elevation=_degrees(hor.elevation),
        sun_mean_longitude=float(sun_mean_longitude(ts.jme)),
        equation_of_time=float(_equation_of_time(ts, ecl, eq)),
        incidence=_degrees(incidence),
    )


def _degrees(radians: float) -> float:
    return float(np.degrees(radians))
