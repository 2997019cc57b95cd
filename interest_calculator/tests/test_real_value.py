from __future__ import annotations

from math import isclose

from interest_calculator.core.projection import compute_real_value


def test_three_percent_inflation_over_ten_years():
    assert isclose(compute_real_value(1000, 3, 10), 744.09, abs_tol=0.01)


def test_zero_years_keeps_nominal_amount():
    assert compute_real_value(1000, 3, 0) == 1000
    assert compute_real_value(1000, -2, 0) == 1000


def test_zero_inflation_keeps_nominal_amount():
    assert isclose(compute_real_value(2500, 0, 25), 2500, rel_tol=1e-12)


def test_deflation_increases_real_value():
    assert compute_real_value(1000, -2, 5) > 1000
