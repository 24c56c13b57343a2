"""
pySPA.atmosphere - Atmospheric pressure estimate

Estimates the air pressure at an altitude using the barometric formula
with constant temperature in the lower troposphere.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

import numpy as np

__all__ = [
    'PASCALS_PER_MILLIBAR',
    'STANDARD_PRESSURE',
    'pressure_at',
]

STANDARD_PRESSURE = 101325.0  # Sea level standard pressure (Pa)
PASCALS_PER_MILLIBAR = 100.0

_GRAVITY = 9.80665  # Standard gravity (m/s^2)
_MOLAR_MASS = 0.02896968  # Molar mass of dry air (kg/mol)
_SEA_LEVEL_TEMPERATURE = 288.16  # Sea level standard temperature (K)
_GAS_CONSTANT = 8.314462618  # Universal gas constant (J/(mol K))


def pressure_at(altitude: np.ndarray) -> np.ndarray:
    """
    Estimate the atmospheric pressure at an altitude

    Parameters
    ----------
    altitude : float or np.ndarray
        Altitude above sea level (metres)

    Returns
    -------
    np.ndarray
        Pressure (pascals)

    Examples
    --------
    >>> pressure_at(0.0)
    101325.0
    """
    h = np.asarray(altitude, dtype=np.float64)
    exponent = -_GRAVITY * h * _MOLAR_MASS / (_SEA_LEVEL_TEMPERATURE * _GAS_CONSTANT)
    pressure = STANDARD_PRESSURE * np.exp(exponent)
    if pressure.ndim == 0:
        return float(pressure)
    return pressure
