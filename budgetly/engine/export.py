from __future__ import annotations

import io
from typing import List

import pandas as pd

from ..data_model import PeriodRecord, Summary

EXPORT_COLUMNS = [
    "Period",
    "Costs",
    "Work Income",
    "Financial Aid",
    "Savings",
    "Total Income",
    "Running Balance",
]


def periods_frame(periods: List[PeriodRecord]) -> pd.DataFrame:
    rows = [
        {
            "Period": p.label,
            "Costs": p.costs,
            "Work Income": p.income,
            "Financial Aid": p.aid,
            "Savings": p.savings,
            "Total Income": p.total_income,
            "Running Balance": p.balance,
        }
        for p in periods
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_csv(periods: List[PeriodRecord], summary: Summary) -> str:
    """Render periods plus a trailing summary block as CSV text."""
    buffer = io.StringIO()
    periods_frame(periods).to_csv(buffer, index=False, float_format="%.2f", lineterminator="\n")
    buffer.write("\n")
    buffer.write("Summary\n")
    buffer.write(f"Total Semesters,{summary.total_semesters}\n")
    buffer.write(f"Total Costs,{summary.total_costs:.2f}\n")
    buffer.write(f"Total Income,{summary.total_income:.2f}\n")
    buffer.write(f"Final Balance,{summary.final_balance:.2f}\n")
    return buffer.getvalue()


def export_filename(as_of) -> str:
    return f"budget-forecast-{as_of.isoformat()}.csv"
