from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping

_NUMBER_PREFIX = re.compile(r"^\s*[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?")
_INTEGER_PREFIX = re.compile(r"^\s*[-+]?\d+")

DEFAULT_TAX_RATE = 0.15
DEFAULT_INFLATION_RATE = 0.03
MAX_SEMESTERS = 8


def parse_number(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        raw = value
    else:
        match = _NUMBER_PREFIX.match(str(value))
        if not match:
            return 0.0
        raw = match.group(0)
    try:
        number = float(raw)
    except (OverflowError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def safe_parse_float(value: Any) -> float:
    """Coerce form input to a non-negative finite float; anything unusable becomes 0."""
    return max(0.0, parse_number(value))


def safe_parse_int(value: Any) -> int:
    """Leading integer digits only, so "1e5" reads as 1 and "10.9" as 10."""
    if value is None or isinstance(value, bool) or isinstance(value, (int, float)):
        return max(0, int(parse_number(value)))
    match = _INTEGER_PREFIX.match(str(value))
    if not match:
        return 0
    return max(0, int(match.group(0)))


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def parse_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in {"yes", "true", "1", "on"}


def _first_present(payload: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


@dataclass(frozen=True)
class FinancialInputs:
    remaining_semesters: int = 0
    tuition: float = 0.0
    books: float = 0.0
    supplies: float = 0.0
    rent: float = 0.0
    utilities: float = 0.0
    groceries: float = 0.0
    cell_phone: float = 0.0
    transportation: float = 0.0
    memberships: float = 0.0
    has_job: bool = False
    hours_school: int = 0
    hours_summer: int = 0
    hourly_rate: float = 0.0
    scholarship: float = 0.0
    bursary: float = 0.0
    grant: float = 0.0
    savings: float = 0.0

    @classmethod
    def from_form(cls, form: Mapping[str, Any] | None) -> "FinancialInputs":
        form = form or {}
        return cls(
            remaining_semesters=safe_parse_int(_first_present(form, "semestersLeft", "remainingSemesters")),
            tuition=safe_parse_float(form.get("tuition")),
            books=safe_parse_float(form.get("books")),
            supplies=safe_parse_float(form.get("supplies")),
            rent=safe_parse_float(form.get("rent")),
            utilities=safe_parse_float(form.get("utilities")),
            groceries=safe_parse_float(form.get("groceries")),
            cell_phone=safe_parse_float(form.get("cellPhone")),
            transportation=safe_parse_float(form.get("transportation")),
            memberships=safe_parse_float(form.get("memberships")),
            has_job=parse_flag(form.get("hasJob")),
            hours_school=safe_parse_int(form.get("hoursPerWeekSchool")),
            hours_summer=safe_parse_int(form.get("hoursPerWeekSummer")),
            hourly_rate=safe_parse_float(form.get("hourlyRate")),
            scholarship=safe_parse_float(form.get("scholarship")),
            bursary=safe_parse_float(form.get("bursary")),
            grant=safe_parse_float(form.get("grant")),
            savings=safe_parse_float(form.get("savings")),
        )

    def to_form(self) -> Dict[str, str]:
        return {
            "semestersLeft": str(self.remaining_semesters),
            "tuition": _format_number(self.tuition),
            "books": _format_number(self.books),
            "supplies": _format_number(self.supplies),
            "rent": _format_number(self.rent),
            "utilities": _format_number(self.utilities),
            "groceries": _format_number(self.groceries),
            "cellPhone": _format_number(self.cell_phone),
            "transportation": _format_number(self.transportation),
            "memberships": _format_number(self.memberships),
            "hasJob": "yes" if self.has_job else "no",
            "hoursPerWeekSchool": str(self.hours_school),
            "hoursPerWeekSummer": str(self.hours_summer),
            "hourlyRate": _format_number(self.hourly_rate),
            "scholarship": _format_number(self.scholarship),
            "bursary": _format_number(self.bursary),
            "grant": _format_number(self.grant),
            "savings": _format_number(self.savings),
        }

    def monthly_living_costs(self) -> float:
        return (
            self.rent
            + self.utilities
            + self.groceries
            + self.cell_phone
            + self.transportation
            + self.memberships
        )

    def aid_per_semester(self) -> float:
        return self.scholarship + self.bursary + self.grant


def _rate(value: Any, default: float) -> float:
    if value is None or value == "":
        return default
    rate = safe_parse_float(value)
    # 15 means 15%, 0.15 also means 15%
    return rate / 100.0 if rate > 1 else rate


@dataclass(frozen=True)
class ProjectionOptions:
    apply_tax: bool = False
    tax_rate: float = DEFAULT_TAX_RATE
    apply_inflation: bool = False
    inflation_rate: float = DEFAULT_INFLATION_RATE

    @classmethod
    def from_payload(
        cls,
        payload: Mapping[str, Any] | None,
        tax_rate: float = DEFAULT_TAX_RATE,
        inflation_rate: float = DEFAULT_INFLATION_RATE,
    ) -> "ProjectionOptions":
        payload = payload or {}
        return cls(
            apply_tax=parse_flag(_first_present(payload, "applyTax", "includeTaxes", default=False)),
            tax_rate=_rate(payload.get("taxRate"), tax_rate),
            apply_inflation=parse_flag(_first_present(payload, "applyInflation", "includeInflation", default=False)),
            inflation_rate=_rate(payload.get("inflationRate"), inflation_rate),
        )

    def effective_tax_rate(self) -> float:
        if not self.apply_tax or self.tax_rate <= 0:
            return 0.0
        return min(self.tax_rate, 1.0)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "applyTax": self.apply_tax,
            "taxRate": self.tax_rate,
            "applyInflation": self.apply_inflation,
            "inflationRate": self.inflation_rate,
        }
