# components/charts.py
from __future__ import annotations

from typing import List

import plotly.graph_objects as go

from budgetly.data_model import PeriodRecord


def build_cashflow_figure(periods: List[PeriodRecord], scenario: List[PeriodRecord] | None = None) -> go.Figure:
    labels = [p.label for p in periods]
    fig = go.Figure()
    fig.add_trace(go.Bar(name="Costs", x=labels, y=[p.costs for p in periods], marker_color="#e4572e"))
    fig.add_trace(go.Bar(name="Available Funds", x=labels, y=[p.available_funds for p in periods], marker_color="#29335c"))
    fig.add_trace(
        go.Scatter(name="Ending Balance", x=labels, y=[p.balance for p in periods], mode="lines+markers")
    )
    if scenario:
        fig.add_trace(
            go.Scatter(
                name="Scenario Balance",
                x=[p.label for p in scenario],
                y=[p.balance for p in scenario],
                mode="lines+markers",
                line={"dash": "dash"},
            )
        )
    fig.update_layout(
        barmode="group",
        template="plotly_dark",
        yaxis_title="Amount ($)",
        legend={"orientation": "h"},
        margin={"l": 40, "r": 20, "t": 30, "b": 40},
    )
    return fig
