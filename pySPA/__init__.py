"""
pySPA - Solar Position Algorithm

Computes the position of the sun for an observer on Earth with the
Solar Position Algorithm of Reda and Andreas (2004), valid for the years
-2000 to 6000 with an uncertainty of +/- 0.0003 degrees.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.

Usage:
    from datetime import datetime, timezone
    import pySPA

    # Apparent position with estimated Delta T and air pressure
    dt = datetime(2021, 3, 29, 13, 21, tzinfo=timezone.utc)
    pos = pySPA.solar_position(dt, latitude=46.94806, longitude=7.45264)
    pos.altitude, pos.azimuth

    # Full algorithm with every input given
    result = pySPA.calculate(pySPA.Params(
        instant=dt, delta_t=69.4, longitude=7.45264, latitude=46.94806,
        elevation=540.0, pressure=950.0, temperature=12.0,
    ))
    result.zenith, result.equation_of_time
"""

from . import astro
from . import compute
from . import config
from .spa import (
    Params,
    Result,
    atmospheric_refraction,
    calculate,
    julian_date,
)
from .compute import (
    Position,
    solar_position,
)
from .deltat import (
    decimal_year,
    delta_t,
)
from .atmosphere import (
    pressure_at,
)
from .config import (
    # Defaults
    get_default_temperature,
    set_default_temperature,
    get_delta_ut1,
    set_delta_ut1,
    get_fixed_delta_t,
    set_fixed_delta_t,
    # Range warnings
    enable_range_warnings,
    disable_range_warnings,
    is_range_warnings_enabled,
    # Context managers
    fixed_delta_t,
    range_warnings_disabled,
    # Status
    get_config_info,
    show_config,
)

__version__ = '0.1.0'
__all__ = [
    'astro',
    'compute',
    'config',
    # Algorithm
    'Params',
    'Result',
    'atmospheric_refraction',
    'calculate',
    'julian_date',
    # Convenience
    'Position',
    'solar_position',
    # Estimators
    'decimal_year',
    'delta_t',
    'pressure_at',
    # Configuration
    'get_default_temperature',
    'set_default_temperature',
    'get_delta_ut1',
    'set_delta_ut1',
    'get_fixed_delta_t',
    'set_fixed_delta_t',
    'enable_range_warnings',
    'disable_range_warnings',
    'is_range_warnings_enabled',
    'fixed_delta_t',
    'range_warnings_disabled',
    'get_config_info',
    'show_config',
]
