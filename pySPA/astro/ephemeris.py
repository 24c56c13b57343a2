"""
Solar ephemeris evaluators

Evaluates the Earth heliocentric periodic series, the nutation series and
the polynomial time arguments of the Solar Position Algorithm using NumPy.
All functions accept scalars or arrays and are free of side effects.

References
----------
I. Reda and A. Andreas, "Solar Position Algorithm for Solar Radiation
    Applications", Solar Energy, 76(5), 577-589, (2004).
J. Meeus, "Astronomical Algorithms", 2nd edition, 1998.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""


import numpy as np

from .terms import (
    B_TERMS,
    FUNDAMENTAL_ARGUMENTS,
    L_TERMS,
    NUTATION_LONGITUDE,
    NUTATION_MULTIPLIERS,
    NUTATION_OBLIQUITY,
    OBLIQUITY_TERMS,
    R_TERMS,
    SUN_MEAN_LONGITUDE,
)

# Constants
_JD_J2000 = 2451545.0  # JD of J2000.0
_JULIAN_CENTURY = 36525.0  # Julian century (days)
_TERM_SCALE = 1e8  # Scale of the heliocentric coefficients
_NUTATION_SCALE = 36000000.0  # 0.0001 arcseconds per degree
_TWO_PI = 2.0 * np.pi


def polynomial_sum(coefficients: np.ndarray, t: np.ndarray) -> np.ndarray:
    """
    Compute polynomial sum using Horner's method

    Parameters
    ----------
    coefficients : np.ndarray
        Coefficient array [c0, c1, c2, ...]
    t : np.ndarray
        Time variable

    Returns
    -------
    np.ndarray
        c0 + c1*t + c2*t^2 + ...
    """
    result = np.zeros_like(t, dtype=np.float64)
    for c in reversed(coefficients):
        result = result * t + c
    return result


def normalize_angle(theta: np.ndarray, circle: float = 360.0) -> np.ndarray:
    """
    Normalize an angle to a single rotation

    ``np.mod`` takes the sign of the divisor, so negative angles wrap
    into the same range as positive ones.

    Parameters
    ----------
    theta : float or np.ndarray
        Angle to normalize
    circle : float, default 360.0
        Circle of the angle (360.0 for degrees, 2*pi for radians)

    Returns
    -------
    np.ndarray
        Normalized angle in range [0, circle)
    """
    return np.mod(theta, circle)


# ============================================================
# Earth heliocentric position
# ============================================================

def periodic_series(groups: tuple, t: np.ndarray) -> np.ndarray:
    """
    Evaluate a grouped periodic series

    Each group ``i`` contributes ``t**i * sum(A * cos(B + C * t))``;
    the total is divided by 1e8.

    Parameters
    ----------
    groups : tuple of np.ndarray
        Term groups of shape (n, 3) with rows (A, B, C), ordered by
        ascending power of ``t``
    t : float or np.ndarray
        Julian Ephemeris Millennium

    Returns
    -------
    np.ndarray
        Series value (radians for longitude and latitude, AU for radius)
    """
    t = np.asarray(t, dtype=np.float64)
    total = np.zeros_like(t)
    for power, group in enumerate(groups):
        A = group[:, 0]
        B = group[:, 1]
        C = group[:, 2]
        # Broadcast terms along a trailing axis so array times work
        subtotal = np.sum(A * np.cos(B + C * t[..., np.newaxis]), axis=-1)
        total = total + subtotal * t ** power
    return total / _TERM_SCALE


def heliocentric_longitude(jme: np.ndarray) -> np.ndarray:
    """
    Earth heliocentric longitude L (radians, 0 to 2*pi)

    Parameters
    ----------
    jme : float or np.ndarray
        Julian Ephemeris Millennium
    """
    return normalize_angle(periodic_series(L_TERMS, jme), circle=_TWO_PI)


def heliocentric_latitude(jme: np.ndarray) -> np.ndarray:
    """Earth heliocentric latitude B (radians)"""
    return periodic_series(B_TERMS, jme)


def heliocentric_radius(jme: np.ndarray) -> np.ndarray:
    """Earth heliocentric radius vector R (astronomical units)"""
    return periodic_series(R_TERMS, jme)


# ============================================================
# Nutation and obliquity
# ============================================================

def fundamental_arguments(jce: np.ndarray) -> np.ndarray:
    """
    Compute the five fundamental arguments of the nutation series

    Parameters
    ----------
    jce : float or np.ndarray
        Julian Ephemeris Century

    Returns
    -------
    np.ndarray
        Angles X0..X4 (degrees) stacked along the first axis: mean
        elongation of the moon, mean anomaly of the sun, mean anomaly
        of the moon, argument of latitude of the moon and longitude of
        the ascending node of the moon
    """
    jce = np.asarray(jce, dtype=np.float64)
    return np.stack([polynomial_sum(c, jce) for c in FUNDAMENTAL_ARGUMENTS])


def nutation(jce: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Compute the nutation in longitude and obliquity

    Parameters
    ----------
    jce : float or np.ndarray
        Julian Ephemeris Century

    Returns
    -------
    delta_psi : np.ndarray
        Nutation in longitude (radians)
    delta_epsilon : np.ndarray
        Nutation in obliquity (radians)
    """
    jce = np.asarray(jce, dtype=np.float64)
    X = fundamental_arguments(jce)
    # Argument of each of the 63 terms, shape (63, ...)
    arguments = np.radians(np.tensordot(NUTATION_MULTIPLIERS, X, axes=1))
    # Coefficients vary linearly with time
    psi = NUTATION_LONGITUDE[:, 0] + NUTATION_LONGITUDE[:, 1] * jce[..., np.newaxis]
    eps = NUTATION_OBLIQUITY[:, 0] + NUTATION_OBLIQUITY[:, 1] * jce[..., np.newaxis]
    arguments = np.moveaxis(arguments, 0, -1)
    delta_psi = np.sum(psi * np.sin(arguments), axis=-1) / _NUTATION_SCALE
    delta_epsilon = np.sum(eps * np.cos(arguments), axis=-1) / _NUTATION_SCALE
    return np.radians(delta_psi), np.radians(delta_epsilon)


def mean_obliquity(jme: np.ndarray) -> np.ndarray:
    """
    Mean obliquity of the ecliptic epsilon0 (arcseconds)

    Parameters
    ----------
    jme : float or np.ndarray
        Julian Ephemeris Millennium
    """
    U = np.asarray(jme, dtype=np.float64) / 10.0
    return polynomial_sum(OBLIQUITY_TERMS, U)


# ============================================================
# Sidereal time and mean longitude
# ============================================================

def mean_sidereal_time(jd: np.ndarray) -> np.ndarray:
    """
    Greenwich mean sidereal time nu0 (degrees, 0-360)

    Parameters
    ----------
    jd : float or np.ndarray
        Julian Day (UT1)
    """
    jd = np.asarray(jd, dtype=np.float64)
    jc = (jd - _JD_J2000) / _JULIAN_CENTURY
    nu0 = (280.46061837 + 360.98564736629 * (jd - _JD_J2000)
           + 0.000387933 * jc**2 - jc**3 / 38710000.0)
    return normalize_angle(nu0)


def sun_mean_longitude(jme: np.ndarray) -> np.ndarray:
    """
    Sun mean longitude M (degrees, 0-360)

    Parameters
    ----------
    jme : float or np.ndarray
        Julian Ephemeris Millennium
    """
    jme = np.asarray(jme, dtype=np.float64)
    return normalize_angle(polynomial_sum(SUN_MEAN_LONGITUDE, jme))
