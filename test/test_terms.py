"""
Periodic term table tests

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

import numpy as np
import pytest

from pySPA.astro import terms


@pytest.mark.parametrize("groups,rows", [
    (terms.L_TERMS, (64, 34, 20, 7, 3, 1)),
    (terms.B_TERMS, (5, 2)),
    (terms.R_TERMS, (40, 10, 6, 2, 1)),
])
def test_heliocentric_group_shapes(groups, rows):
    """Each heliocentric group has the published number of rows"""
    assert isinstance(groups, tuple)
    assert tuple(g.shape[0] for g in groups) == rows
    for g in groups:
        assert g.shape[1] == 3
        assert g.dtype == np.float64


def test_nutation_table_shapes():
    """Nutation tables have 63 terms"""
    assert terms.FUNDAMENTAL_ARGUMENTS.shape == (5, 4)
    assert terms.NUTATION_MULTIPLIERS.shape == (63, 5)
    assert terms.NUTATION_LONGITUDE.shape == (63, 2)
    assert terms.NUTATION_OBLIQUITY.shape == (63, 2)
    assert np.issubdtype(terms.NUTATION_MULTIPLIERS.dtype, np.integer)


def test_polynomial_lengths():
    """Obliquity and mean longitude polynomials"""
    assert terms.OBLIQUITY_TERMS.shape == (11,)
    assert terms.SUN_MEAN_LONGITUDE.shape == (6,)


@pytest.mark.parametrize("group,index,row", [
    (terms.L_TERMS[0], 0, (175347046.0, 0.0, 0.0)),
    (terms.L_TERMS[0], 1, (3341656.0, 4.6692568, 6283.07585)),
    (terms.L_TERMS[1], 0, (628331966747.0, 0.0, 0.0)),
    (terms.L_TERMS[5], 0, (1.0, 3.14, 0.0)),
    (terms.B_TERMS[0], 0, (280.0, 3.199, 84334.662)),
    (terms.B_TERMS[1], 1, (6.0, 1.73, 5223.69)),
    (terms.R_TERMS[0], 0, (100013989.0, 0.0, 0.0)),
    (terms.R_TERMS[0], 39, (26.0, 4.59, 10447.39)),
    (terms.R_TERMS[1], 2, (702.0, 3.142, 0.0)),
    (terms.R_TERMS[4], 0, (4.0, 2.56, 6283.08)),
])
def test_heliocentric_sample_rows(group, index, row):
    """Sample rows of the heliocentric tables"""
    assert np.allclose(group[index], row, rtol=0.0, atol=1e-12)


def test_nutation_sample_rows():
    """First and last rows of the nutation tables"""
    assert tuple(terms.NUTATION_MULTIPLIERS[0]) == (0, 0, 0, 0, 1)
    assert tuple(terms.NUTATION_MULTIPLIERS[1]) == (-2, 0, 0, 2, 2)
    assert tuple(terms.NUTATION_MULTIPLIERS[-1]) == (2, -1, 0, 2, 2)
    assert np.allclose(terms.NUTATION_LONGITUDE[0], (-171996.0, -174.2))
    assert np.allclose(terms.NUTATION_LONGITUDE[-1], (-3.0, 0.0))
    assert np.allclose(terms.NUTATION_OBLIQUITY[0], (92025.0, 8.9))
    assert np.allclose(terms.NUTATION_OBLIQUITY[-1], (0.0, 0.0))


def test_fundamental_argument_rows():
    """Constant and linear coefficients of X0..X4"""
    expected = [
        (297.85036, 445267.11148),
        (357.52772, 35999.05034),
        (134.96298, 477198.867398),
        (93.27191, 483202.017538),
        (125.04452, -1934.136261),
    ]
    assert np.allclose(terms.FUNDAMENTAL_ARGUMENTS[:, :2], expected)
    assert np.isclose(terms.FUNDAMENTAL_ARGUMENTS[0, 3], 1.0 / 189474.0)


def test_obliquity_terms():
    """Mean obliquity polynomial coefficients"""
    assert terms.OBLIQUITY_TERMS[0] == 84381.448
    assert terms.OBLIQUITY_TERMS[1] == -4680.93
    assert terms.OBLIQUITY_TERMS[-1] == 2.45


@pytest.mark.parametrize("table", [
    terms.L_TERMS[0],
    terms.R_TERMS[2],
    terms.NUTATION_MULTIPLIERS,
    terms.NUTATION_LONGITUDE,
    terms.OBLIQUITY_TERMS,
])
def test_tables_are_read_only(table):
    """Tables cannot be modified in place"""
    assert not table.flags.writeable
    with pytest.raises(ValueError):
        table[0] = 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
