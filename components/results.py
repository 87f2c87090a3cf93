# components/results.py
from __future__ import annotations

from typing import Dict, List

import dash_bootstrap_components as dbc
from dash import dash_table, html

from budgetly.data_model import PeriodRecord, Summary

RESULT_COLUMNS = [
    ("Period", "label"),
    ("Costs", "costs"),
    ("Work Income", "income"),
    ("Financial Aid", "aid"),
    ("Savings", "savings"),
    ("Total Income", "total_income"),
    ("Available Funds", "available_funds"),
    ("Ending Balance", "balance"),
]


def format_currency(value: float) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def period_rows(periods: List[PeriodRecord]) -> List[Dict[str, str]]:
    rows = []
    for period in periods:
        row = {}
        for header, attr in RESULT_COLUMNS:
            value = getattr(period, attr)
            row[header] = value if attr == "label" else format_currency(value)
        rows.append(row)
    return rows


def build_results_table(periods: List[PeriodRecord]):
    return dash_table.DataTable(
        id="results-table",
        data=period_rows(periods),
        columns=[{"name": header, "id": header} for header, _ in RESULT_COLUMNS],
        style_header={"backgroundColor": "#222", "color": "#eee", "fontWeight": "bold"},
        style_data={"backgroundColor": "#111", "color": "#eee"},
        style_data_conditional=[
            {
                "if": {"filter_query": "{Ending Balance} contains '-'", "column_id": "Ending Balance"},
                "color": "#e4572e",
            }
        ],
        fill_width=True,
    )


def build_summary_cards(summary: Summary, shortfall: str | None = None):
    cards = [
        ("Total Semesters", str(summary.total_semesters)),
        ("Total Costs", format_currency(summary.total_costs)),
        ("Total Income", format_currency(summary.total_income)),
        ("Final Balance", format_currency(summary.final_balance)),
    ]
    row = dbc.Row(
        [
            dbc.Col(dbc.Card([html.H6(title), html.H4(value)], body=True), md=3)
            for title, value in cards
        ],
        className="mb-3",
    )
    if shortfall is None:
        return row
    return html.Div([row, dbc.Alert(f"Your balance drops below zero in {shortfall}.", color="warning")])
