"""
pySPA.compute - Solar position for an observer on Earth

Fills in the inputs of the full algorithm that most callers do not know
(Delta T, air pressure and temperature) and returns the apparent position
of the sun in the horizontal coordinate system.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

import warnings
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

import numpy as np

from . import config
from .atmosphere import PASCALS_PER_MILLIBAR, pressure_at
from .deltat import decimal_year, delta_t
from .spa import Params, calculate

__all__ = [
    'ASTRONOMICAL_UNIT',
    'Position',
    'solar_position',
]

ASTRONOMICAL_UNIT = 149597870700.0  # metres

# Years for which the algorithm is validated (uncertainty +/- 0.0003 degrees)
_VALID_YEARS = (-2000.0, 6000.0)


@dataclass(frozen=True)
class Position:
    """
    Apparent position of the sun seen by an observer

    Attributes
    ----------
    altitude : float
        Topocentric elevation above the horizon, refraction corrected (degrees)
    azimuth : float
        Topocentric azimuth, eastward from north (degrees, 0-360)
    zenith : float
        Topocentric zenith angle (degrees)
    right_ascension : float
        Geocentric right ascension (degrees, 0-360)
    declination : float
        Geocentric declination (degrees)
    distance : float
        Distance between the centres of the Earth and the sun (metres)
    """

    altitude: float
    azimuth: float
    zenith: float
    right_ascension: float
    declination: float
    distance: float


def solar_position(
    dt: Union[datetime, np.datetime64],
    latitude: float,
    longitude: float,
    altitude: float = 0.0,
    temperature: Optional[float] = None,
    pressure: Optional[float] = None,
    **kwargs
) -> Position:
    """
    Compute the position of the sun for a date and an observer

    Parameters
    ----------
    dt : datetime or np.datetime64
        Time of observation; naive values are read as UTC
    latitude : float
        Observer latitude (degrees, north positive)
    longitude : float
        Observer longitude (degrees, east positive)
    altitude : float, default 0.0
        Observer altitude above sea level (metres)
    temperature : float, optional
        Air temperature (degrees Celsius). Uses the configured default
        (21 C unless changed) if not given.
    pressure : float, optional
        Air pressure (pascals). Estimated from ``altitude`` if not given.
    **kwargs
        Accepted for compatibility and ignored

    Returns
    -------
    Position
        Apparent position of the sun

    Raises
    ------
    ValueError
        If the latitude is outside [-90, 90] degrees

    Notes
    -----
    Delta T is estimated from the date with the NASA polynomial
    expressions unless a fixed value is configured with
    ``pySPA.config.set_fixed_delta_t``. UT1 - UTC comes from the
    configuration (0 unless changed).

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> import pySPA
    >>> dt = datetime(2021, 3, 29, 13, 21, tzinfo=timezone.utc)
    >>> pos = pySPA.solar_position(dt, 46.94806, 7.45264)
    """
    if kwargs:
        warnings.warn(
            f"pySPA.solar_position: ignoring unsupported kwargs: {list(kwargs.keys())}. "
            "These parameters are accepted for compatibility but have no effect.",
            UserWarning,
            stacklevel=2
        )
    if not -90.0 <= latitude <= 90.0:
        raise ValueError(f"Latitude must be within [-90, 90] degrees, got {latitude}")

    year = decimal_year(dt)
    lower, upper = _VALID_YEARS
    if config.is_range_warnings_enabled() and not lower <= year <= upper:
        warnings.warn(
            f"pySPA.solar_position: year {year:.1f} is outside the validated "
            f"range [{lower:.0f}, {upper:.0f}]; accuracy is not guaranteed.",
            RuntimeWarning,
            stacklevel=2
        )

    if temperature is None:
        temperature = config.get_default_temperature()
    if pressure is None:
        pressure = pressure_at(altitude)
    fixed = config.get_fixed_delta_t()

    params = Params(
        instant=dt,
        delta_t=delta_t(year) if fixed is None else fixed,
        longitude=longitude,
        latitude=latitude,
        elevation=altitude,
        pressure=pressure / PASCALS_PER_MILLIBAR,
        temperature=temperature,
        delta_ut1=config.get_delta_ut1(),
    )
    result = calculate(params)

    return Position(
        altitude=90.0 - result.zenith,
        azimuth=result.azimuth,
        zenith=result.zenith,
        right_ascension=result.right_ascension,
        declination=result.declination,
        distance=result.heliocentric_radius * ASTRONOMICAL_UNIT,
    )
