"""
Worked example: SPA output vs published reference values

Runs the Solar Position Algorithm for the example of Reda and Andreas
(2004), Table A5.1 (Golden, Colorado, 17 October 2003) and prints every
quantity next to its published value.

Usage:
    python worked_example.py
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Add parent to path for local development
sys.path.insert(0, str(Path(__file__).parent.parent))

import pySPA

PUBLISHED = [
    ('julian_date', 'JD', 2452930.312847),
    ('heliocentric_longitude', 'L', 24.0182616917),
    ('heliocentric_latitude', 'B', -0.0001011219),
    ('heliocentric_radius', 'R', 0.9965422974),
    ('geocentric_longitude', 'Theta', 204.0182616917),
    ('geocentric_latitude', 'beta', 0.0001011219),
    ('nutation_longitude', 'dpsi', -0.0039984),
    ('nutation_obliquity', 'deps', 0.00166657),
    ('true_obliquity', 'eps', 23.440465),
    ('apparent_longitude', 'lambda', 204.0085519281),
    ('right_ascension', 'alpha', 202.227408),
    ('declination', 'delta', -9.31434),
    ('hour_angle', 'H', 11.105902),
    ('topocentric_right_ascension', "alpha'", 202.22704),
    ('topocentric_declination', "delta'", -9.316179),
    ('topocentric_hour_angle', "H'", 11.10629),
    ('zenith', 'theta', 50.111622),
    ('azimuth', 'Phi', 194.34024),
    ('sun_mean_longitude', 'M', 205.8971722516),
    ('equation_of_time', 'E', 14.641503),
    ('incidence', 'I', 25.18700),
]


def main():
    params = pySPA.Params(
        instant=datetime(2003, 10, 17, 12, 30, 30,
                         tzinfo=timezone(timedelta(hours=-7))),
        delta_t=67.0,
        longitude=-105.1786,
        latitude=39.742476,
        elevation=1830.14,
        pressure=820.0,
        temperature=11.0,
        slope=30.0,
        azimuth_rotation=-10.0,
    )
    result = pySPA.calculate(params)

    print(f"{'Quantity':<8} {'Computed':>20} {'Published':>20} {'Difference':>12}")
    print("-" * 63)
    for field, symbol, published in PUBLISHED:
        value = getattr(result, field)
        print(f"{symbol:<8} {value:>20.10f} {published:>20.10f} {value - published:>12.2e}")


if __name__ == "__main__":
    main()
