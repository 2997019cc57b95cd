"""Runs the projection engine for one calculator request."""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from interest_calculator.core.projection import (
    GOAL_SEARCH_MAX_YEARS,
    GoalTimeline,
    compute_future_value,
    compute_real_value,
    compute_yearly_breakdown,
    solve_goal_timeline,
)
from interest_calculator.domain.chart import build_chart_series
from interest_calculator.domain.currency import format_currency
from interest_calculator.domain.query_state import encode_query
from interest_calculator.schemas.calculation import (
    CalculationRequest,
    CalculationResponse,
    FormattedSummary,
)

logger = logging.getLogger(__name__)


def _solve_goal(request: CalculationRequest, warnings: List[str]) -> Optional[GoalTimeline]:
    if not request.targetAmount:
        return None

    # bisection needs a projection that never shrinks
    if request.annualRatePercent < 0:
        warnings.append("goal timeline is not computed for a negative interest rate")
        return None

    goal = solve_goal_timeline(
        principal=request.principal,
        contribution=request.contribution,
        contribution_frequency=request.contributionFrequency,
        target_amount=request.targetAmount,
        annual_rate_percent=request.annualRatePercent,
        compound_frequency=request.compoundFrequency,
    )
    if not goal.reached:
        warnings.append(
            f"target of {format_currency(request.targetAmount, request.currency)} "
            f"is not reached within {GOAL_SEARCH_MAX_YEARS:g} years"
        )
    return goal


def run_calculation(request: CalculationRequest) -> CalculationResponse:
    """Projection, real value, goal timeline and yearly breakdown for one form submission."""
    logger.debug("calculating projection: %s", request.model_dump())
    warnings: List[str] = []

    result = compute_future_value(
        principal=request.principal,
        contribution=request.contribution,
        contribution_frequency=request.contributionFrequency,
        annual_rate_percent=request.annualRatePercent,
        compound_frequency=request.compoundFrequency,
        years=request.years,
    )
    real_value = compute_real_value(result.final_amount, request.inflationRatePercent, request.years)
    if not math.isfinite(result.final_amount):
        warnings.append("projection overflowed; amounts that are not finite are reported as null")
    goal = _solve_goal(request, warnings)

    breakdown = compute_yearly_breakdown(
        principal=request.principal,
        contribution=request.contribution,
        contribution_frequency=request.contributionFrequency,
        years=request.years,
        annual_rate_percent=request.annualRatePercent,
        compound_frequency=request.compoundFrequency,
        inflation_rate_percent=request.inflationRatePercent,
    )

    for message in warnings:
        logger.warning(message)

    return CalculationResponse(
        currency=request.currency,
        result=result,
        real_value=real_value,
        goal=goal,
        breakdown=breakdown,
        chart=build_chart_series(breakdown),
        formatted=FormattedSummary(
            final_amount=format_currency(result.final_amount, request.currency),
            total_contributions=format_currency(result.total_contributions, request.currency),
            interest_earned=format_currency(result.interest_earned, request.currency),
            real_value=format_currency(real_value, request.currency),
        ),
        share_query=encode_query(request),
        warnings=warnings,
    )
