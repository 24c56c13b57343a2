"""
Shared fixtures for pySPA tests

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from datetime import datetime, timedelta, timezone

import pytest

from pySPA import config
from pySPA.spa import Params

# Observatory used in the published worked example (Golden, Colorado)
WORKED_EXAMPLE_INSTANT = datetime(
    2003, 10, 17, 12, 30, 30, tzinfo=timezone(timedelta(hours=-7))
)

# Bern, Switzerland (degrees)
BERN = (46.94806, 7.45264)


@pytest.fixture
def worked_example():
    """ Returns the inputs of the published worked example """
    return Params(
        instant=WORKED_EXAMPLE_INSTANT,
        delta_t=67.0,
        longitude=-105.1786,
        latitude=39.742476,
        elevation=1830.14,
        pressure=820.0,
        temperature=11.0,
        delta_ut1=0.0,
        slope=30.0,
        azimuth_rotation=-10.0,
    )


@pytest.fixture
def bern():
    """ Returns latitude and longitude of Bern """
    return BERN


@pytest.fixture
def clean_config():
    """ Restores the global configuration after the test """
    state = config._state
    saved = (state.temperature, state.delta_ut1, state.delta_t, state.range_warnings)
    state.temperature = config.DEFAULT_TEMPERATURE
    state.delta_ut1 = config.DEFAULT_DELTA_UT1
    state.delta_t = None
    state.range_warnings = True
    yield state
    state.temperature, state.delta_ut1, state.delta_t, state.range_warnings = saved
