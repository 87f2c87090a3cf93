"""Dash front end for the semester budget calculator."""

from __future__ import annotations

import datetime
import logging

import dash
import dash_bootstrap_components as dbc
from dash import Input, Output, State, dcc, html

from budgetly import config
from budgetly.data_model import FinancialInputs, ProjectionOptions, UnknownScenarioError, parse_scenario
from budgetly.engine.export import export_csv, export_filename
from budgetly.engine.projection import compute_sequence
from budgetly.engine.scenarios import compare_scenario
from budgetly.engine.summary import compute_summary, first_shortfall
from components.charts import build_cashflow_figure
from components.form import FIELD_IDS, build_calculator_form, field_id
from components.results import build_results_table, build_summary_cards

logger = logging.getLogger(__name__)

app = dash.Dash(__name__, external_stylesheets=[dbc.themes.DARKLY])

app.layout = dbc.Container(
    [
        html.H2("Student Budget Planner", className="my-3"),
        dbc.Row(
            [
                dbc.Col(build_calculator_form(), md=4),
                dbc.Col(
                    [
                        html.Div(id="summary-cards"),
                        dcc.Graph(id="cashflow-graph"),
                        html.Div(id="results-container"),
                    ],
                    md=8,
                ),
            ]
        ),
    ],
    fluid=True,
)


def _options(apply_tax: bool) -> ProjectionOptions:
    return ProjectionOptions(
        apply_tax=apply_tax,
        tax_rate=config.DEFAULT_TAX_RATE,
        inflation_rate=config.DEFAULT_INFLATION_RATE,
    )


def render_projection(values: dict, apply_tax: bool, scenario_kind: str, scenario_value, as_of: datetime.date):
    inputs = FinancialInputs.from_form(values)
    options = _options(apply_tax)
    periods = None
    scenario_periods = None
    if scenario_kind:
        try:
            scenario = parse_scenario({"kind": scenario_kind, "value": scenario_value})
        except UnknownScenarioError:
            logger.warning("Ignoring unknown scenario kind %r", scenario_kind)
        else:
            comparison = compare_scenario(inputs, scenario, options, as_of=as_of)
            periods = comparison.baseline_periods
            scenario_periods = comparison.scenario_periods
    if periods is None:
        periods = compute_sequence(inputs, options, as_of=as_of)
    summary = compute_summary(periods)
    return (
        build_summary_cards(summary, first_shortfall(periods)),
        build_cashflow_figure(periods, scenario_periods),
        build_results_table(periods),
    )


@app.callback(
    Output("summary-cards", "children"),
    Output("cashflow-graph", "figure"),
    Output("results-container", "children"),
    Input("calculate-btn", "n_clicks"),
    State("apply-tax", "value"),
    State("scenario-kind", "value"),
    State("scenario-value", "value"),
    *[State(field_id(name), "value") for name in FIELD_IDS],
    prevent_initial_call=True,
)
def on_calculate(_clicks, apply_tax, scenario_kind, scenario_value, *field_values):
    values = dict(zip(FIELD_IDS, field_values))
    return render_projection(values, "tax" in (apply_tax or []), scenario_kind, scenario_value, datetime.date.today())


@app.callback(
    Output("download-csv", "data"),
    Input("download-btn", "n_clicks"),
    State("apply-tax", "value"),
    *[State(field_id(name), "value") for name in FIELD_IDS],
    prevent_initial_call=True,
)
def on_download(_clicks, apply_tax, *field_values):
    today = datetime.date.today()
    values = dict(zip(FIELD_IDS, field_values))
    periods = compute_sequence(FinancialInputs.from_form(values), _options("tax" in (apply_tax or [])), as_of=today)
    return dcc.send_string(export_csv(periods, compute_summary(periods)), export_filename(today))


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    app.run(debug=False, port=8050)
