"""CSV export of the yearly breakdown."""

from __future__ import annotations

import io
from typing import Optional, Sequence

import pandas as pd

from interest_calculator.core.projection import ProjectionResult, YearlyRow

BREAKDOWN_COLUMNS = {
    "year": "Year",
    "balance": "Balance",
    "cumulative_contributions": "Contributions",
    "cumulative_interest": "Interest",
    "real_value": "Real Value",
}


def breakdown_frame(rows: Sequence[YearlyRow]) -> pd.DataFrame:
    frame = pd.DataFrame([row.model_dump() for row in rows], columns=list(BREAKDOWN_COLUMNS))
    return frame.rename(columns=BREAKDOWN_COLUMNS)


def breakdown_to_csv(rows: Sequence[YearlyRow], result: Optional[ProjectionResult] = None) -> str:
    """
    Render the breakdown as CSV with every amount at two decimals.

    When a result is given, a two-column summary block and a blank line come first.
    """
    buffer = io.StringIO()

    if result is not None:
        summary = pd.DataFrame(
            {
                "Metric": ["Final Amount", "Total Contributions", "Interest Earned"],
                "Value": [result.final_amount, result.total_contributions, result.interest_earned],
            }
        )
        summary.to_csv(buffer, index=False, float_format="%.2f", lineterminator="\n")
        buffer.write("\n")

    breakdown_frame(rows).to_csv(buffer, index=False, float_format="%.2f", lineterminator="\n")
    return buffer.getvalue()
