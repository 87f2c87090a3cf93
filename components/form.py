# components/form.py
from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from budgetly.data_model import SCENARIO_TYPES, ColumnDefinition, FormModel, form_steps

FORM_STEPS = form_steps()
FIELD_IDS = [col.field for step in FORM_STEPS for col in step.columns]


def field_id(field: str) -> str:
    return f"field-{field}"


def _input_for(col: ColumnDefinition):
    if col.kind == "select":
        return dbc.Select(
            id=field_id(col.field),
            options=[{"label": "", "value": ""}] + [{"label": opt, "value": opt} for opt in col.options or []],
            value=col.default,
        )
    return dbc.Input(
        id=field_id(col.field),
        type="number" if col.kind == "number" else "text",
        value=col.default,
        min=col.min_value,
        max=col.max_value,
        step=col.step,
        placeholder="0",
    )


def _field(col: ColumnDefinition):
    label = f"{col.label} *" if col.required else col.label
    children = [dbc.Label(label, html_for=field_id(col.field)), _input_for(col)]
    if col.help:
        children.append(dbc.FormText(col.help))
    return html.Div(children, className="mb-2")


def build_step(step: FormModel, number: int):
    return dbc.Card(
        [
            html.H5(f"Step {number}: {step.title}", className="card-title"),
            *[_field(col) for col in step.columns],
        ],
        body=True,
        className="mb-3",
        id=f"step-{step.name}",
    )


def build_calculator_form():
    return dbc.Card(
        [
            html.H4("Calculate your cash flow", className="card-title"),
            *[build_step(step, i) for i, step in enumerate(FORM_STEPS, start=1)],
            dbc.Checklist(
                id="apply-tax",
                options=[{"label": "Deduct income tax from work income", "value": "tax"}],
                value=[],
                switch=True,
            ),
            html.Hr(),
            html.H5("What if?"),
            dbc.Select(
                id="scenario-kind",
                options=[{"label": "None", "value": ""}]
                + [{"label": cls.label, "value": kind} for kind, cls in SCENARIO_TYPES.items()],
                value="",
            ),
            dbc.Input(id="scenario-value", type="number", min=0, step=1, value=None, className="mt-2"),
            dbc.Button("Calculate", id="calculate-btn", color="primary", className="mt-3 w-100"),
            dbc.Button("Download CSV", id="download-btn", color="secondary", className="mt-2 w-100"),
            dcc.Download(id="download-csv"),
        ],
        body=True,
    )


__all__ = [
    "FIELD_IDS",
    "FORM_STEPS",
    "build_calculator_form",
    "build_step",
    "field_id",
]
