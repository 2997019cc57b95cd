"""Data contracts for the calculator endpoints."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from interest_calculator.config import DEFAULT_CURRENCY
from interest_calculator.core.projection import GoalTimeline, ProjectionResult, YearlyRow
from interest_calculator.domain.chart import ChartSeries
from interest_calculator.domain.currency import get_currency, parse_amount, parse_percent


class CalculationRequest(BaseModel):
    """Form fields of the calculator. Field names match the frontend form."""

    model_config = ConfigDict(extra="forbid")

    # declared first so the amount validators can see it
    currency: str = Field(DEFAULT_CURRENCY, description="ISO code used to parse and format amounts.")

    principal: float = Field(..., ge=0, allow_inf_nan=False, description="Starting balance.")
    contribution: float = Field(
        0.0,
        ge=0,
        allow_inf_nan=False,
        description="Amount added every contribution period.",
    )
    contributionFrequency: int = Field(12, ge=1, le=365, description="Contributions per year.")
    annualRatePercent: float = Field(
        ...,
        ge=-50,
        le=100,
        description="Nominal annual rate in percent (5 means 5%).",
    )
    compoundFrequency: int = Field(12, ge=1, le=365, description="Compounding periods per year.")
    years: float = Field(
        ...,
        ge=0,
        le=100,
        description="Projection horizon in years; the breakdown covers whole years only.",
    )
    inflationRatePercent: float = Field(0.0, ge=-50, le=100, description="Annual inflation in percent.")
    targetAmount: Optional[float] = Field(
        None,
        ge=0,
        allow_inf_nan=False,
        description="Goal amount; 0 or missing skips the goal timeline.",
    )

    @field_validator("currency", mode="before")
    @classmethod
    def _normalize_currency(cls, value: Any) -> Any:
        if isinstance(value, str):
            return get_currency(value.strip()).code
        return value

    @field_validator("principal", "contribution", "targetAmount", mode="before")
    @classmethod
    def _parse_amounts(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return value
        if info.field_name == "targetAmount" and isinstance(value, str) and not value.strip():
            return None
        return parse_amount(value, info.data.get("currency", DEFAULT_CURRENCY))

    @field_validator("annualRatePercent", "inflationRatePercent", mode="before")
    @classmethod
    def _parse_rates(cls, value: Any) -> Any:
        if value is None:
            return value
        return parse_percent(value)


class FormattedSummary(BaseModel):
    """Display strings for the result panel."""

    final_amount: str
    total_contributions: str
    interest_earned: str
    real_value: str


class CalculationResponse(BaseModel):
    """Amounts that overflowed serialize as JSON null."""

    model_config = ConfigDict(ser_json_inf_nan="null")

    currency: str
    result: ProjectionResult
    real_value: float
    goal: Optional[GoalTimeline] = None
    breakdown: List[YearlyRow]
    chart: ChartSeries
    formatted: FormattedSummary
    share_query: str
    warnings: List[str] = Field(default_factory=list)
