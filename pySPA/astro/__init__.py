"""
pySPA.astro - Astronomical calculation module

Provides functions for:
- Earth heliocentric longitude, latitude and radius
- Nutation in longitude and obliquity
- Mean obliquity of the ecliptic
- Greenwich mean sidereal time

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from . import terms
from .ephemeris import (
    polynomial_sum,
    normalize_angle,
    periodic_series,
    heliocentric_longitude,
    heliocentric_latitude,
    heliocentric_radius,
    fundamental_arguments,
    nutation,
    mean_obliquity,
    mean_sidereal_time,
    sun_mean_longitude,
)

__all__ = [
    'terms',
    'polynomial_sum',
    'normalize_angle',
    'periodic_series',
    'heliocentric_longitude',
    'heliocentric_latitude',
    'heliocentric_radius',
    'fundamental_arguments',
    'nutation',
    'mean_obliquity',
    'mean_sidereal_time',
    'sun_mean_longitude',
]
