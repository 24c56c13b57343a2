"""
Daily path of the sun for an observer

Prints the altitude and azimuth of the sun every 30 minutes over one day,
with Delta T and air pressure estimated from the date and altitude.

Usage:
    python sun_path.py [latitude longitude [YYYY-MM-DD [altitude]]]

Example:
    python sun_path.py 46.94806 7.45264 2021-03-29 540
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import numpy as np

# Add parent to path for local development
sys.path.insert(0, str(Path(__file__).parent.parent))

import pySPA


def sun_path(lat: float, lon: float, day: datetime, altitude: float = 0.0,
             step_minutes: int = 30) -> tuple:
    """
    Compute the sun position over one UTC day

    Parameters
    ----------
    lat : float
        Latitude in degrees
    lon : float
        Longitude in degrees
    day : datetime
        Day (UTC)
    altitude : float
        Observer altitude in metres
    step_minutes : int
        Time step in minutes

    Returns
    -------
    tuple
        (times, altitudes, azimuths)
    """
    start = day.replace(hour=0, minute=0, second=0, microsecond=0, tzinfo=timezone.utc)
    times = [start + timedelta(minutes=m) for m in range(0, 24 * 60 + 1, step_minutes)]
    positions = [pySPA.solar_position(t, lat, lon, altitude=altitude) for t in times]
    altitudes = np.array([p.altitude for p in positions])
    azimuths = np.array([p.azimuth for p in positions])
    return times, altitudes, azimuths


def main(argv):
    lat, lon = 46.94806, 7.45264
    day = datetime.now(timezone.utc)
    altitude = 0.0
    if len(argv) >= 2:
        lat, lon = float(argv[0]), float(argv[1])
    if len(argv) >= 3:
        day = datetime.strptime(argv[2], '%Y-%m-%d')
    if len(argv) >= 4:
        altitude = float(argv[3])

    times, altitudes, azimuths = sun_path(lat, lon, day, altitude)

    print(f"Sun path at lat={lat:.5f}, lon={lon:.5f}, altitude={altitude:.0f} m "
          f"on {times[0]:%Y-%m-%d} (UTC)")
    print(f"{'Time':>6} {'Altitude':>10} {'Azimuth':>10}")
    for t, alt, az in zip(times, altitudes, azimuths):
        print(f"{t:%H:%M} {alt:>10.3f} {az:>10.3f}")

    print()
    i = int(np.argmax(altitudes))
    print(f"Highest at {times[i]:%H:%M} UTC, altitude {altitudes[i]:.2f} deg")


if __name__ == "__main__":
    main(sys.argv[1:])
