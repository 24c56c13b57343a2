"""
pySPA.config - Defaults for the convenience API

Holds the values that `pySPA.solar_position` fills in when the caller
does not supply them. The core algorithm in `pySPA.spa` never reads
this module.

Environment variables (read at import):
    PYSPA_TEMPERATURE: default air temperature (degrees Celsius, 21)
    PYSPA_DELTA_UT1: default UT1 - UTC (seconds, 0)
    PYSPA_DELTA_T: fixed TT - UT (seconds); estimated from the date if unset
    PYSPA_RANGE_WARNINGS: set to 0/false/no to silence date range warnings

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

import os
import threading
import warnings
from contextlib import contextmanager
from typing import Optional

__all__ = [
    'disable_range_warnings',
    'enable_range_warnings',
    'fixed_delta_t',
    'get_config_info',
    'get_default_temperature',
    'get_delta_ut1',
    'get_fixed_delta_t',
    'is_range_warnings_enabled',
    'range_warnings_disabled',
    'set_default_temperature',
    'set_delta_ut1',
    'set_fixed_delta_t',
    'show_config',
]

DEFAULT_TEMPERATURE = 21.0
DEFAULT_DELTA_UT1 = 0.0
DELTA_UT1_LIMIT = 0.9


def _check_delta_ut1(value: float) -> float:
    value = float(value)
    if not -DELTA_UT1_LIMIT <= value <= DELTA_UT1_LIMIT:
        raise ValueError(
            f"delta_ut1 must be within [-{DELTA_UT1_LIMIT}, {DELTA_UT1_LIMIT}] "
            f"seconds, got {value}"
        )
    return value


# =============================================================================
# Global State
# =============================================================================

class _ConfigState:
    """Thread-safe configuration state."""

    def __init__(self):
        self._lock = threading.Lock()
        self._temperature = DEFAULT_TEMPERATURE
        self._delta_ut1 = DEFAULT_DELTA_UT1
        self._delta_t: Optional[float] = None
        self._range_warnings = True

        # Read environment variables
        self._init_from_env()

    def _init_from_env(self):
        """Initialize state from environment variables."""
        # PYSPA_TEMPERATURE
        temperature = self._read_float('PYSPA_TEMPERATURE')
        if temperature is not None:
            self._temperature = temperature

        # PYSPA_DELTA_UT1
        delta_ut1 = self._read_float('PYSPA_DELTA_UT1')
        if delta_ut1 is not None:
            try:
                self._delta_ut1 = _check_delta_ut1(delta_ut1)
            except ValueError as e:
                warnings.warn(
                    f"Ignoring PYSPA_DELTA_UT1: {e}",
                    RuntimeWarning,
                    stacklevel=2
                )

        # PYSPA_DELTA_T
        self._delta_t = self._read_float('PYSPA_DELTA_T')

        # PYSPA_RANGE_WARNINGS
        range_warnings = os.environ.get('PYSPA_RANGE_WARNINGS', '').lower()
        if range_warnings in ('0', 'false', 'no'):
            self._range_warnings = False

    @staticmethod
    def _read_float(name: str) -> Optional[float]:
        raw = os.environ.get(name, '').strip()
        if not raw:
            return None
        try:
            return float(raw)
        except ValueError:
            warnings.warn(
                f"Ignoring {name}={raw!r}: not a number. The default is used instead.",
                RuntimeWarning,
                stacklevel=3
            )
            return None

    @property
    def temperature(self) -> float:
        with self._lock:
            return self._temperature

    @temperature.setter
    def temperature(self, value: float):
        with self._lock:
            self._temperature = float(value)

    @property
    def delta_ut1(self) -> float:
        with self._lock:
            return self._delta_ut1

    @delta_ut1.setter
    def delta_ut1(self, value: float):
        value = _check_delta_ut1(value)
        with self._lock:
            self._delta_ut1 = value

    @property
    def delta_t(self) -> Optional[float]:
        with self._lock:
            return self._delta_t

    @delta_t.setter
    def delta_t(self, value: Optional[float]):
        with self._lock:
            self._delta_t = None if value is None else float(value)

    @property
    def range_warnings(self) -> bool:
        with self._lock:
            return self._range_warnings

    @range_warnings.setter
    def range_warnings(self, value: bool):
        with self._lock:
            self._range_warnings = bool(value)


# Global state instance
_state = _ConfigState()


# =============================================================================
# Getters and Setters
# =============================================================================

def get_default_temperature() -> float:
    """Default air temperature (degrees Celsius)."""
    return _state.temperature


def set_default_temperature(value: float) -> None:
    """Set the default air temperature (degrees Celsius)."""
    _state.temperature = value


def get_delta_ut1() -> float:
    """Default UT1 - UTC (seconds)."""
    return _state.delta_ut1


def set_delta_ut1(value: float) -> None:
    """Set the default UT1 - UTC.

    Parameters
    ----------
    value : float
        UT1 - UTC in seconds, within [-0.9, 0.9]

    Raises
    ------
    ValueError
        If the value is outside [-0.9, 0.9]
    """
    _state.delta_ut1 = value


def get_fixed_delta_t() -> Optional[float]:
    """Fixed TT - UT (seconds), or None when it is estimated from the date."""
    return _state.delta_t


def set_fixed_delta_t(value: Optional[float]) -> None:
    """Use a fixed TT - UT for every date.

    Parameters
    ----------
    value : float or None
        TT - UT in seconds; None restores the estimate from the date
    """
    _state.delta_t = value


def enable_range_warnings() -> None:
    """Warn for dates outside the validated range of the algorithm."""
    _state.range_warnings = True


def disable_range_warnings() -> None:
    """Do not warn for dates outside the validated range."""
    _state.range_warnings = False


def is_range_warnings_enabled() -> bool:
    """Check if date range warnings are enabled."""
    return _state.range_warnings


# =============================================================================
# Context Managers
# =============================================================================

@contextmanager
def fixed_delta_t(value: float):
    """Context manager to temporarily use a fixed TT - UT.

    Example
    -------
    >>> with fixed_delta_t(67.0):
    ...     pos = solar_position(dt, lat, lon)
    """
    prev = _state.delta_t
    _state.delta_t = value
    try:
        yield
    finally:
        _state.delta_t = prev


@contextmanager
def range_warnings_disabled():
    """Context manager to temporarily silence date range warnings."""
    prev = _state.range_warnings
    _state.range_warnings = False
    try:
        yield
    finally:
        _state.range_warnings = prev


# =============================================================================
# Status
# =============================================================================

def get_config_info() -> dict:
    """Get the current configuration.

    Returns
    -------
    dict
        Configuration values keyed by name
    """
    return {
        'temperature': _state.temperature,
        'delta_ut1': _state.delta_ut1,
        'delta_t': _state.delta_t,
        'range_warnings': _state.range_warnings,
    }


def show_config() -> None:
    """Print the configuration to stdout."""
    info = get_config_info()
    delta_t = info['delta_t']
    print(f"{'Temperature':<16} {info['temperature']:.2f} C")
    print(f"{'Delta UT1':<16} {info['delta_ut1']:.3f} s")
    if delta_t is None:
        print(f"{'Delta T':<16} estimated from date")
    else:
        print(f"{'Delta T':<16} {delta_t:.3f} s (fixed)")
    print(f"{'Range warnings':<16} {'Yes' if info['range_warnings'] else 'No'}")
