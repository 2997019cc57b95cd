from __future__ import annotations

from interest_calculator.core.projection import compute_future_value, compute_yearly_breakdown
from interest_calculator.domain.export import breakdown_frame, breakdown_to_csv


def test_breakdown_csv_uses_two_decimals():
    rows = compute_yearly_breakdown(1000, 0, 12, 1, 0, 12, 0)

    lines = breakdown_to_csv(rows).splitlines()

    assert lines == [
        "Year,Balance,Contributions,Interest,Real Value",
        "0,1000.00,1000.00,0.00,1000.00",
        "1,1000.00,1000.00,0.00,1000.00",
    ]


def test_summary_block_precedes_the_table():
    rows = compute_yearly_breakdown(10000, 0, 12, 10, 5, 12, 0)
    result = compute_future_value(10000, 0, 12, 5, 12, 10)

    lines = breakdown_to_csv(rows, result).splitlines()

    assert lines[:4] == [
        "Metric,Value",
        "Final Amount,16470.09",
        "Total Contributions,10000.00",
        "Interest Earned,6470.09",
    ]
    assert lines[4] == ""
    assert lines[5] == "Year,Balance,Contributions,Interest,Real Value"
    assert len(lines) == 6 + len(rows)


def test_breakdown_frame_columns():
    rows = compute_yearly_breakdown(500, 10, 12, 3, 4, 12, 2)

    frame = breakdown_frame(rows)

    assert list(frame.columns) == ["Year", "Balance", "Contributions", "Interest", "Real Value"]
    assert frame["Year"].tolist() == [0, 1, 2, 3]
