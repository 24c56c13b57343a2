"""
Atmospheric pressure estimate tests

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

import numpy as np
import pytest

from pySPA.atmosphere import PASCALS_PER_MILLIBAR, STANDARD_PRESSURE, pressure_at


@pytest.mark.parametrize("altitude,expected", [
    (-500.0, 107514.01),
    (0.0, 101325.0),
    (500.0, 95492.26),
    (1000.0, 89995.28),
])
def test_pressure_at(altitude, expected):
    """Barometric formula in pascals"""
    assert np.isclose(pressure_at(altitude), expected, rtol=0.0, atol=1e-2)


def test_sea_level():
    """Standard pressure at sea level"""
    assert pressure_at(0.0) == STANDARD_PRESSURE
    assert np.isclose(pressure_at(0.0) / PASCALS_PER_MILLIBAR, 1013.25)


def test_array_input():
    """Pressure decreases with altitude"""
    altitude = np.linspace(-400.0, 9000.0, 50)
    pressure = pressure_at(altitude)
    assert pressure.shape == altitude.shape
    assert np.all(np.diff(pressure) < 0.0)


def test_scalar_returns_float():
    """Scalar input gives a plain float"""
    assert isinstance(pressure_at(1830.14), float)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
