"""REST backend for the student semester budget calculator."""

from __future__ import annotations

import datetime
import logging
import math
from typing import Any, Dict, List

from flask import Flask, Response, jsonify, request

from budgetly import config
from budgetly.data_model import (
    SCENARIO_TYPES,
    FinancialInputs,
    PeriodRecord,
    ProjectionOptions,
    UnknownScenarioError,
    WhatIfPlan,
    form_steps,
    parse_scenario,
)
from budgetly.engine.export import export_csv, export_filename
from budgetly.engine.projection import compute_sequence, periods_to_records
from budgetly.engine.scenarios import compare_scenario
from budgetly.engine.state import CalculationState, DraftState, WhatIfState
from budgetly.engine.summary import balance_status, compute_summary, first_shortfall
from budgetly.engine.validation import validate_form
from budgetly.engine.whatif import best_plan, projected_balance, scenario_series

logger = logging.getLogger(__name__)

app = Flask(__name__)

calculation_state = CalculationState(str(config.CALCULATIONS_PATH))
whatif_state = WhatIfState(str(config.WHATIF_PATH))
draft_state = DraftState(str(config.DRAFTS_PATH))


def _is_nan(value: Any) -> bool:
    try:
        return not math.isfinite(value)
    except (TypeError, ValueError):
        return False


def _sanitize_records(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    clean_rows: List[Dict[str, Any]] = []
    for row in records:
        clean_rows.append({key: (None if _is_nan(value) else value) for key, value in row.items()})
    return clean_rows


def _extract_payload_value(payload: dict, *keys: str, default=None):
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


def _parse_as_of(payload: dict) -> datetime.date:
    raw = _extract_payload_value(payload, "asOf", "as_of")
    if raw:
        try:
            return datetime.date.fromisoformat(str(raw)[:10])
        except ValueError:
            logger.warning("Ignoring invalid asOf value %r", raw)
    return datetime.date.today()


def _options_from(payload: dict) -> ProjectionOptions:
    return ProjectionOptions.from_payload(
        payload.get("options") or {},
        tax_rate=config.DEFAULT_TAX_RATE,
        inflation_rate=config.DEFAULT_INFLATION_RATE,
    )


def _form_from(payload: dict) -> dict:
    form = _extract_payload_value(payload, "inputs", "formInputs", default={})
    return form if isinstance(form, dict) else {}


def _projection_payload(form: dict, options: ProjectionOptions, as_of: datetime.date) -> Dict[str, Any]:
    periods = compute_sequence(FinancialInputs.from_form(form), options, as_of=as_of)
    summary = compute_summary(periods)
    return {
        "asOf": as_of.isoformat(),
        "options": options.to_payload(),
        "periods": _sanitize_records(periods_to_records(periods)),
        "summary": summary.to_dict(),
        "status": balance_status(summary.final_balance),
        "shortfallPeriod": first_shortfall(periods),
        "errors": validate_form(form),
    }


def _model_payload(model) -> Dict[str, Any]:
    columns: List[Dict[str, Any]] = []
    for col in model.columns:
        columns.append(
            {
                "field": col.field,
                "label": col.label,
                "kind": col.kind,
                "default": col.default,
                "options": col.options or [],
                "min": col.min_value,
                "max": col.max_value,
                "step": col.step,
                "required": col.required,
                "help": col.help,
            }
        )
    return {"name": model.name, "title": model.title, "columns": columns}


def _stored_periods(calculation: dict | None) -> List[PeriodRecord]:
    if not calculation:
        return []
    return [PeriodRecord.from_dict(row) for row in calculation.get("semesterData") or []]


def _whatif_payload(record: dict, periods: List[PeriodRecord]) -> Dict[str, Any]:
    plan = WhatIfPlan.from_payload(record)
    balance = projected_balance(periods, plan)
    payload = dict(record)
    payload["projectedBalance"] = balance
    payload["status"] = balance_status(balance)
    payload["series"] = scenario_series(periods, plan)
    return payload


@app.after_request
def apply_cors_headers(response):
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET,POST,PUT,DELETE,OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


@app.get("/api/health")
def healthcheck():
    return jsonify({"status": "ok"})


@app.get("/api/schema")
def get_schema():
    payload = {
        "steps": [_model_payload(step) for step in form_steps()],
        "optionDefaults": ProjectionOptions(
            tax_rate=config.DEFAULT_TAX_RATE,
            inflation_rate=config.DEFAULT_INFLATION_RATE,
        ).to_payload(),
        "scenarioKinds": [{"label": cls.label, "value": kind} for kind, cls in SCENARIO_TYPES.items()],
    }
    return jsonify(payload)


@app.post("/api/calculate")
def calculate():
    payload = request.get_json(silent=True) or {}
    form = _form_from(payload)
    return jsonify(_projection_payload(form, _options_from(payload), _parse_as_of(payload)))


@app.post("/api/export")
def export_projection():
    payload = request.get_json(silent=True) or {}
    as_of = _parse_as_of(payload)
    periods = compute_sequence(FinancialInputs.from_form(_form_from(payload)), _options_from(payload), as_of=as_of)
    body = export_csv(periods, compute_summary(periods))
    return Response(
        body,
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={export_filename(as_of)}"},
    )


@app.post("/api/validate")
def validate():
    payload = request.get_json(silent=True) or {}
    errors = validate_form(_form_from(payload))
    return jsonify({"valid": not errors, "errors": errors})


@app.post("/api/scenarios/compare")
def compare():
    payload = request.get_json(silent=True) or {}
    try:
        scenario = parse_scenario(payload.get("scenario"))
    except UnknownScenarioError as exc:
        return jsonify({"error": str(exc)}), 400
    comparison = compare_scenario(
        FinancialInputs.from_form(_form_from(payload)),
        scenario,
        _options_from(payload),
        as_of=_parse_as_of(payload),
    )
    return jsonify(comparison.to_dict())


@app.get("/api/users/<user_id>/calculations")
def list_calculations(user_id: str):
    return jsonify({"calculations": calculation_state.list_for(user_id)})


@app.post("/api/users/<user_id>/calculations")
def save_calculation(user_id: str):
    payload = request.get_json(silent=True) or {}
    form = _form_from(payload)
    if not form:
        return jsonify({"error": "Calculation inputs are required."}), 400
    projection = _projection_payload(form, _options_from(payload), _parse_as_of(payload))
    record = calculation_state.add(
        user_id,
        {
            "formInputs": form,
            "options": projection["options"],
            "asOf": projection["asOf"],
            "semesterData": projection["periods"],
            "summary": projection["summary"],
            "projectedBalance": projection["summary"]["finalBalance"],
            "remainingSemesters": FinancialInputs.from_form(form).remaining_semesters,
        },
    )
    logger.info("Saved calculation %s for user %s", record["id"], user_id)
    return jsonify({"message": "Calculation saved.", "calculation": record}), 201


@app.get("/api/users/<user_id>/calculations/latest")
def latest_calculation(user_id: str):
    record = calculation_state.latest(user_id)
    if not record:
        return jsonify({"error": "No calculations saved."}), 404
    return jsonify(record)


@app.get("/api/users/<user_id>/calculations/<calc_id>")
def get_calculation(user_id: str, calc_id: str):
    record = calculation_state.get(user_id, calc_id)
    if not record:
        return jsonify({"error": "Calculation not found."}), 404
    return jsonify(record)


@app.delete("/api/users/<user_id>/calculations/<calc_id>")
def delete_calculation(user_id: str, calc_id: str):
    if not calculation_state.delete(user_id, calc_id):
        return jsonify({"error": "Calculation not found."}), 404
    logger.info("Deleted calculation %s for user %s", calc_id, user_id)
    return jsonify({"message": "Calculation deleted."})


@app.get("/api/users/<user_id>/whatif")
def list_whatif_plans(user_id: str):
    periods = _stored_periods(calculation_state.latest(user_id))
    plans = [_whatif_payload(record, periods) for record in whatif_state.list_for(user_id)]
    best = best_plan([(plan, plan["projectedBalance"]) for plan in plans])
    return jsonify(
        {
            "baselineBalance": periods[-1].balance if periods else 0.0,
            "plans": plans,
            "bestPlanId": best["id"] if best else None,
        }
    )


@app.post("/api/users/<user_id>/whatif")
def save_whatif_plan(user_id: str):
    payload = request.get_json(silent=True) or {}
    try:
        plan = WhatIfPlan.from_payload(payload)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    if not plan.name:
        return jsonify({"error": "Scenario name is required."}), 400
    record = whatif_state.add(user_id, plan.to_dict())
    periods = _stored_periods(calculation_state.latest(user_id))
    logger.info("Saved what-if plan %s for user %s", record["id"], user_id)
    return jsonify({"message": "Scenario saved.", "plan": _whatif_payload(record, periods)}), 201


@app.put("/api/users/<user_id>/whatif/<plan_id>")
def update_whatif_plan(user_id: str, plan_id: str):
    payload = request.get_json(silent=True) or {}
    existing = whatif_state.get(user_id, plan_id)
    if existing is None:
        return jsonify({"error": "Scenario not found."}), 404
    merged = dict(existing)
    merged.update(payload)
    try:
        plan = WhatIfPlan.from_payload(merged)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    changes = plan.to_dict()
    if plan.one_time_event is None:
        changes["oneTimeEvent"] = None
    record = whatif_state.update(user_id, plan_id, changes)
    periods = _stored_periods(calculation_state.latest(user_id))
    return jsonify({"message": "Scenario updated.", "plan": _whatif_payload(record, periods)})


@app.delete("/api/users/<user_id>/whatif/<plan_id>")
def delete_whatif_plan(user_id: str, plan_id: str):
    if not whatif_state.delete(user_id, plan_id):
        return jsonify({"error": "Scenario not found."}), 404
    return jsonify({"message": "Scenario deleted."})


@app.get("/api/users/<user_id>/draft")
def get_draft(user_id: str):
    return jsonify({"inputs": draft_state.get(user_id) or {}})


@app.post("/api/users/<user_id>/draft")
def save_draft(user_id: str):
    payload = request.get_json(silent=True) or {}
    form = _form_from(payload)
    draft_state.save(user_id, form)
    return jsonify({"message": "Draft saved.", "inputs": form})


@app.delete("/api/users/<user_id>/draft")
def clear_draft(user_id: str):
    draft_state.clear(user_id)
    return jsonify({"message": "Draft cleared."})


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    config.ensure_data_directories()
    app.run(debug=False, port=config.PORT)
