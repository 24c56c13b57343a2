"""
pySPA.deltat - Approximate Delta T (TT - UT)

Polynomial expressions for Delta T from the NASA GSFC eclipse pages
(F. Espenak and J. Meeus, "Five Millennium Canon of Solar Eclipses",
NASA/TP-2006-214141), https://eclipse.gsfc.nasa.gov/SEcat5/deltatpoly.html

The year bands are contiguous and cover the whole real line: the
outermost bands share the long-term parabola, so every year maps to
exactly one expression.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from datetime import datetime, timezone
from typing import Union

import numpy as np

from .astro.ephemeris import polynomial_sum

__all__ = [
    'decimal_year',
    'delta_t',
]

# (upper bound of band, origin, scale, coefficients in ascending powers)
# The polynomial of a band is evaluated at (y - origin) / scale
_BANDS = (
    (-500.0, 1820.0, 100.0, (-20.0, 0.0, 32.0)),
    (500.0, 0.0, 100.0, (10583.6, -1014.41, 33.78311, -5.952053,
                         -0.1798452, 0.022174192, 0.0090316521)),
    (1600.0, 1000.0, 100.0, (1574.2, -556.01, 71.23472, 0.319781,
                             -0.8503463, -0.005050998, 0.0083572073)),
    (1700.0, 1600.0, 1.0, (120.0, -0.9808, -0.01532, 1.0 / 7129.0)),
    (1800.0, 1700.0, 1.0, (8.83, 0.1603, -0.0059285, 0.00013336,
                           -1.0 / 1174000.0)),
    (1860.0, 1800.0, 1.0, (13.72, -0.332447, 0.0068612, 0.0041116,
                           -0.00037436, 0.0000121272, -0.0000001699,
                           0.000000000875)),
    (1900.0, 1860.0, 1.0, (7.62, 0.5737, -0.251754, 0.01680668,
                           -0.0004473624, 1.0 / 233174.0)),
    (1920.0, 1900.0, 1.0, (-2.79, 1.494119, -0.0598939, 0.0061966,
                           -0.000197)),
    (1941.0, 1920.0, 1.0, (21.20, 0.84493, -0.076100, 0.0020936)),
    (1961.0, 1950.0, 1.0, (29.07, 0.407, -1.0 / 233.0, 1.0 / 2547.0)),
    (1986.0, 1975.0, 1.0, (45.45, 1.067, -1.0 / 260.0, -1.0 / 718.0)),
    (2005.0, 2000.0, 1.0, (63.86, 0.3345, -0.060374, 0.0017275,
                           0.000651814, 0.00002373599)),
    (2050.0, 2000.0, 1.0, (62.92, 0.32217, 0.005589)),
)

# Long-term parabola used before -500 and after 2150
_LONG_TERM = _BANDS[0][1:]


def decimal_year(dt: Union[datetime, np.datetime64]) -> float:
    """
    Convert a calendar date to a decimal year at mid-month

    Parameters
    ----------
    dt : datetime or np.datetime64
        Calendar date; aware datetimes are converted to UTC first and
        naive values are read as UTC

    Returns
    -------
    float
        year + (month - 0.5) / 12
    """
    if isinstance(dt, np.datetime64):
        # Months since 1970-01
        months = int(dt.astype('datetime64[M]').astype(np.int64))
        years, month0 = divmod(months, 12)
        return 1970 + years + (month0 + 0.5) / 12.0
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return dt.year + (dt.month - 0.5) / 12.0


def _evaluate(band: tuple, y: np.ndarray) -> np.ndarray:
    origin, scale, coefficients = band
    return polynomial_sum(coefficients, (y - origin) / scale)


def delta_t(year: np.ndarray) -> np.ndarray:
    """
    Estimate Delta T, the difference between terrestrial time and
    universal time

    Parameters
    ----------
    year : float or np.ndarray
        Decimal year (astronomical numbering, year 0 = 1 BCE)

    Returns
    -------
    np.ndarray
        Delta T (seconds)
    """
    y = np.asarray(year, dtype=np.float64)
    # Default to the long-term parabola, then overwrite each band
    result = _evaluate(_LONG_TERM, y)
    lower = -np.inf
    for upper, *band in _BANDS:
        mask = (y >= lower) & (y < upper)
        result = np.where(mask, _evaluate(band, y), result)
        lower = upper
    # Transition from the 2005-2050 expression to the long-term parabola
    u = (y - 1820.0) / 100.0
    mask = (y >= 2050.0) & (y < 2150.0)
    result = np.where(mask, -20.0 + 32.0 * u**2 - 0.5628 * (2150.0 - y), result)
    if result.ndim == 0:
        return float(result)
    return result
