from __future__ import annotations

import math
from typing import Any, Dict, Mapping

from ..data_model import ColumnDefinition, form_steps, parse_number


def _is_blank(value: Any) -> bool:
    return value is None or str(value).strip() == ""


def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False


def _format_bound(col: ColumnDefinition, bound: float) -> str:
    if col.field.startswith("hoursPerWeek") or col.field == "semestersLeft":
        return f"{bound:,.0f}"
    return f"${bound:,.0f}"


def _check_column(col: ColumnDefinition, value: Any) -> str | None:
    if _is_blank(value):
        return f"{col.label} is required" if col.required else None
    if col.kind == "select" and col.options and col.min_value is None:
        if str(value).strip().lower() not in col.options:
            return f"{col.label} must be one of: {', '.join(col.options)}"
        return None
    if not _is_numeric(value):
        return f"{col.label} must be a number"
    number = parse_number(value)
    low = col.min_value if col.min_value is not None else -math.inf
    high = col.max_value if col.max_value is not None else math.inf
    if number < low or number > high:
        return f"{col.label} must be between {_format_bound(col, low)} and {_format_bound(col, high)}"
    return None


def validate_form(form: Mapping[str, Any] | None) -> Dict[str, str]:
    """Range-check raw form values. Returns ``{field: message}``; empty means valid."""
    form = dict(form or {})
    if "semestersLeft" not in form and "remainingSemesters" in form:
        form["semestersLeft"] = form["remainingSemesters"]
    errors: Dict[str, str] = {}
    for step in form_steps():
        for col in step.columns:
            message = _check_column(col, form.get(col.field))
            if message:
                errors[col.field] = message
    return errors
