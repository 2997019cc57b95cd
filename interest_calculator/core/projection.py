from __future__ import annotations

import math
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

GOAL_SEARCH_MAX_YEARS = 100.0
GOAL_SEARCH_MAX_ITERATIONS = 1000
GOAL_TOLERANCE = 0.01


# -----------------------------
# Result models
# -----------------------------


class ProjectionResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    final_amount: float
    total_contributions: float
    interest_earned: float
    # interest_earned split into what the starting balance and the contributions produced
    principal_growth: float
    contribution_growth: float


class GoalTimeline(BaseModel):
    """years_to_goal is None when the target is not reachable within the search window."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    years_to_goal: Optional[int]
    reached: bool


class YearlyRow(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int
    balance: float
    cumulative_contributions: float
    cumulative_interest: float
    real_value: float


# -----------------------------
# Float helpers
# -----------------------------


def _divide(numerator: float, denominator: float) -> float:
    """IEEE-754 division: x/0 gives +-inf, 0/0 gives nan instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf
    except ValueError:
        # negative base with a fractional exponent
        return math.nan


def _growth_factor(rate: float, periods_per_year: float, years: float) -> float:
    """(1 + r/n)^(n*t)"""
    return _power(1 + _divide(rate, periods_per_year), periods_per_year * years)


# -----------------------------
# Engine
# -----------------------------


def compute_future_value(
    principal: float,
    contribution: float,
    contribution_frequency: int,
    annual_rate_percent: float,
    compound_frequency: int,
    years: float,
) -> ProjectionResult:
    """
    Closed-form future value of a starting balance plus a periodic contribution.

      principal_fv    = P * (1 + r/n)^(n*t)
      contribution_fv = PMT * ((1 + r/n)^(n*t) - 1) / (r/n)

    PMT is the contribution re-expressed per compounding period
    (contribution * contribution_frequency / n). With a zero rate the
    contributions simply accumulate.

    No rounding happens here; a zero frequency produces inf/nan rather than an error.
    """
    r = annual_rate_percent / 100
    n = compound_frequency
    t = years

    growth = _growth_factor(r, n, t)
    principal_fv = principal * growth

    contributed = contribution * contribution_frequency * t
    if contribution > 0 and r != 0:
        per_period = _divide(contribution * contribution_frequency, n)
        contribution_fv = per_period * _divide(growth - 1, _divide(r, n))
    elif contribution > 0:
        contribution_fv = contributed
    else:
        contribution_fv = 0.0

    final_amount = principal_fv + contribution_fv
    total_contributions = principal + contributed

    return ProjectionResult(
        final_amount=final_amount,
        total_contributions=total_contributions,
        interest_earned=final_amount - total_contributions,
        principal_growth=principal_fv - principal,
        contribution_growth=contribution_fv - contributed,
    )


def compute_real_value(nominal_amount: float, inflation_rate_percent: float, years: float) -> float:
    """Deflate a nominal amount by compound inflation over the given number of years."""
    if years == 0:
        return nominal_amount
    return _divide(nominal_amount, _power(1 + inflation_rate_percent / 100, years))


def solve_goal_timeline(
    principal: float,
    contribution: float,
    contribution_frequency: int,
    target_amount: float,
    annual_rate_percent: float,
    compound_frequency: int,
) -> GoalTimeline:
    """
    Smallest whole number of years for the projection to reach target_amount.

    Bisection on t over [0, GOAL_SEARCH_MAX_YEARS]. Converges when the projected
    amount is within GOAL_TOLERANCE (currency units) of the target; the reported
    year is rounded up. Assumes the projection is non-decreasing in t, i.e.
    a non-negative rate and contribution. Callers are expected to enforce that.
    """
    if target_amount <= principal:
        return GoalTimeline(years_to_goal=0, reached=True)

    r = annual_rate_percent / 100
    n = compound_frequency
    pmt = _divide(contribution * contribution_frequency, n)

    def future_value(t: float) -> float:
        growth = _growth_factor(r, n, t)
        amount = principal * growth
        if pmt > 0:
            if r == 0:
                amount += pmt * n * t
            else:
                amount += pmt * _divide(growth - 1, _divide(r, n))
        return amount

    low, high = 0.0, GOAL_SEARCH_MAX_YEARS
    for _ in range(GOAL_SEARCH_MAX_ITERATIONS):
        t = (low + high) / 2
        amount = future_value(t)
        if abs(amount - target_amount) < GOAL_TOLERANCE:
            return GoalTimeline(years_to_goal=math.ceil(t), reached=True)
        if amount < target_amount:
            low = t
        else:
            high = t

    return GoalTimeline(years_to_goal=None, reached=False)


def advance_year(
    previous: YearlyRow,
    yearly_contribution: float,
    annual_growth_factor: float,
    inflation_rate_percent: float,
) -> YearlyRow:
    """
    Build the next breakdown row from the previous one.

    The whole year's contributions are added as a lump sum at the start of the
    year, then the balance grows by one year of compounding.
    """
    year = previous.year + 1
    balance = (previous.balance + yearly_contribution) * annual_growth_factor
    cumulative_contributions = previous.cumulative_contributions + yearly_contribution
    return YearlyRow(
        year=year,
        balance=balance,
        cumulative_contributions=cumulative_contributions,
        cumulative_interest=balance - cumulative_contributions,
        real_value=compute_real_value(balance, inflation_rate_percent, year),
    )


def compute_yearly_breakdown(
    principal: float,
    contribution: float,
    contribution_frequency: int,
    years: float,
    annual_rate_percent: float,
    compound_frequency: int,
    inflation_rate_percent: float,
) -> List[YearlyRow]:
    """
    Year-by-year table for years 0..floor(years), inclusive.

    Iterative rather than closed-form, so with contribution_frequency != compound_frequency
    the last row will not match compute_future_value exactly. Both are kept as they are.
    """
    yearly_contribution = contribution * contribution_frequency
    annual_growth_factor = _power(
        1 + _divide(annual_rate_percent / 100, compound_frequency), compound_frequency
    )

    rows: List[YearlyRow] = [
        YearlyRow(
            year=0,
            balance=principal,
            cumulative_contributions=principal,
            cumulative_interest=0.0,
            real_value=principal,
        )
    ]
    for _ in range(math.floor(years)):
        rows.append(advance_year(rows[-1], yearly_contribution, annual_growth_factor, inflation_rate_percent))

    return rows


__all__ = [
    "GOAL_SEARCH_MAX_YEARS",
    "GOAL_SEARCH_MAX_ITERATIONS",
    "GOAL_TOLERANCE",
    "ProjectionResult",
    "GoalTimeline",
    "YearlyRow",
    "compute_future_value",
    "compute_real_value",
    "solve_goal_timeline",
    "advance_year",
    "compute_yearly_breakdown",
]
