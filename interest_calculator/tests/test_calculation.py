from __future__ import annotations

from math import isclose

import pytest
from pydantic import ValidationError

from interest_calculator.core.calculation import run_calculation
from interest_calculator.core.projection import GoalTimeline, compute_real_value
from interest_calculator.schemas.calculation import CalculationRequest


def make_request(**overrides) -> CalculationRequest:
    form = {
        "principal": 1000,
        "contribution": 0,
        "contributionFrequency": 12,
        "annualRatePercent": 5,
        "compoundFrequency": 12,
        "years": 20,
        "inflationRatePercent": 3,
    }
    form.update(overrides)
    return CalculationRequest.model_validate(form)


def test_real_value_is_taken_from_the_final_amount():
    response = run_calculation(make_request())

    assert isclose(
        response.real_value,
        compute_real_value(response.result.final_amount, 3, 20),
        rel_tol=1e-12,
    )
    assert response.formatted.final_amount.startswith("$")


def test_goal_is_skipped_without_a_target():
    assert run_calculation(make_request()).goal is None
    assert run_calculation(make_request(targetAmount=0)).goal is None


def test_goal_is_solved_with_a_target():
    response = run_calculation(make_request(targetAmount=2000))

    assert response.goal == GoalTimeline(years_to_goal=14, reached=True)
    assert response.warnings == []


def test_negative_rate_skips_goal_with_warning():
    response = run_calculation(make_request(annualRatePercent=-2, targetAmount=2000))

    assert response.goal is None
    assert any("negative interest rate" in warning for warning in response.warnings)
    assert response.result.final_amount < 1000


def test_unreachable_goal_is_reported():
    response = run_calculation(make_request(annualRatePercent=1, targetAmount=1_000_000))

    assert response.goal == GoalTimeline(years_to_goal=None, reached=False)
    assert response.warnings == ["target of $1,000,000.00 is not reached within 100 years"]


def test_chart_series_follow_the_breakdown():
    response = run_calculation(make_request(contribution=50, years=5))

    assert response.chart.years == [0, 1, 2, 3, 4, 5]
    assert response.chart.balance == [row.balance for row in response.breakdown]
    last = response.breakdown[-1]
    assert response.chart.final_split.contributions == last.cumulative_contributions
    assert response.chart.final_split.interest == last.cumulative_interest


def test_request_parses_localized_form_values():
    request = make_request(currency="gbp", principal="£12,500", annualRatePercent="4.5%", targetAmount="")

    assert request.currency == "GBP"
    assert request.principal == 12500.0
    assert request.annualRatePercent == 4.5
    assert request.targetAmount is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"compoundFrequency": 0},
        {"contributionFrequency": 0},
        {"principal": -1},
        {"principal": "lots"},
        {"years": 101},
        {"currency": "XYZ"},
        {"unexpected": 1},
    ],
)
def test_request_rejects_invalid_forms(overrides):
    with pytest.raises(ValidationError):
        make_request(**overrides)
