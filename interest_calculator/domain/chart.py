"""Plain numeric series for the frontend chart."""

from __future__ import annotations

from typing import List, Sequence

from pydantic import BaseModel, ConfigDict

from interest_calculator.core.projection import YearlyRow


class FinalSplit(BaseModel):
    model_config = ConfigDict(extra="forbid")

    contributions: float
    interest: float


class ChartSeries(BaseModel):
    model_config = ConfigDict(extra="forbid")

    years: List[int]
    balance: List[float]
    contributions: List[float]
    real_value: List[float]
    final_split: FinalSplit


def build_chart_series(rows: Sequence[YearlyRow]) -> ChartSeries:
    """Line series per year plus the contributions/interest split of the last row (doughnut chart)."""
    if not rows:
        raise ValueError("breakdown must contain at least the year 0 row")

    last = rows[-1]
    return ChartSeries(
        years=[row.year for row in rows],
        balance=[row.balance for row in rows],
        contributions=[row.cumulative_contributions for row in rows],
        real_value=[row.real_value for row in rows],
        final_split=FinalSplit(
            contributions=last.cumulative_contributions,
            interest=last.cumulative_interest,
        ),
    )
