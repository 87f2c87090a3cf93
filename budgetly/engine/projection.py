from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Mapping

from ..data_model import MAX_SEMESTERS, MONTHS_PER_PERIOD, FinancialInputs, PeriodRecord, ProjectionOptions

logger = logging.getLogger(__name__)

WEEKS_PER_MONTH = 4
# 4 weeks/month x 4 months/period
WORK_WEEKS_PER_PERIOD = WEEKS_PER_MONTH * MONTHS_PER_PERIOD

TERM_NAMES = ("Winter", "Summer", "Fall")
SUMMER_SLOT = 1


def term_slot(month: int) -> int:
    """Map a calendar month (1-12) to Winter (0), Summer (1) or Fall (2)."""
    if month <= 4:
        return 0
    if month <= 8:
        return 1
    return 2


def period_label(position: int, start_year: int) -> str:
    return f"{TERM_NAMES[position % 3]} {start_year + position // 3}"


def _work_income(inputs: FinancialInputs, hours_per_week: int, tax_rate: float) -> float:
    if not inputs.has_job or inputs.hourly_rate <= 0:
        return 0.0
    gross = WORK_WEEKS_PER_PERIOD * hours_per_week * inputs.hourly_rate
    if tax_rate <= 0:
        return gross
    return gross - gross * tax_rate


def _tuition_for(inputs: FinancialInputs, years_elapsed: int, options: ProjectionOptions) -> float:
    half = inputs.tuition / 2
    if not options.apply_inflation or options.inflation_rate <= 0:
        return half
    return half * (1 + options.inflation_rate) ** years_elapsed


def coerce_inputs(inputs: FinancialInputs | Mapping[str, Any] | None) -> FinancialInputs:
    if isinstance(inputs, FinancialInputs):
        return inputs
    return FinancialInputs.from_form(inputs)


def compute_sequence(
    inputs: FinancialInputs | Mapping[str, Any] | None,
    options: ProjectionOptions | None = None,
    *,
    as_of: date,
) -> List[PeriodRecord]:
    """Project semester-by-semester cash flow starting from the term containing ``as_of``.

    Terms cycle Winter -> Summer -> Fall. Summer is a break: living costs only,
    summer work hours, no aid. Emission stops right after the last academic
    semester, and each period's ending balance is carried into the next one.
    """
    inputs = coerce_inputs(inputs)
    options = options or ProjectionOptions()
    n_semesters = inputs.remaining_semesters
    if n_semesters < 1:
        logger.warning("No projection produced: %s remaining semesters", n_semesters)
        return []
    if n_semesters > MAX_SEMESTERS:
        logger.warning("Capping %d remaining semesters at %d", n_semesters, MAX_SEMESTERS)
        n_semesters = MAX_SEMESTERS

    tax_rate = options.effective_tax_rate()
    living_costs = inputs.monthly_living_costs() * MONTHS_PER_PERIOD
    aid_per_semester = inputs.aid_per_semester()
    school_income = _work_income(inputs, inputs.hours_school, tax_rate)
    summer_income = _work_income(inputs, inputs.hours_summer, tax_rate)

    periods: List[PeriodRecord] = []
    savings = inputs.savings
    academic_count = 0
    position = term_slot(as_of.month)

    while academic_count < n_semesters:
        years_elapsed = position // 3
        is_summer = position % 3 == SUMMER_SLOT

        if is_summer:
            semester = 0
            tuition = 0.0
            costs = living_costs
            income = summer_income
            aid = 0.0
            hours = inputs.hours_summer
        else:
            academic_count += 1
            semester = academic_count
            tuition = _tuition_for(inputs, years_elapsed, options)
            costs = tuition + living_costs + inputs.books + inputs.supplies
            income = school_income
            aid = aid_per_semester
            hours = inputs.hours_school

        total_income = income + aid
        available_funds = savings + total_income
        balance = available_funds - costs

        periods.append(
            PeriodRecord(
                index=len(periods),
                semester=semester,
                label=period_label(position, as_of.year),
                is_summer=is_summer,
                costs=costs,
                income=income,
                aid=aid,
                savings=savings,
                total_income=total_income,
                available_funds=available_funds,
                balance=balance,
                is_surplus=balance >= 0,
                deficit=-balance if balance < 0 else 0.0,
                tuition=tuition,
                work_hours_per_week=hours,
            )
        )
        savings = balance
        position += 1

    logger.debug("Projected %d periods for %d semesters", len(periods), n_semesters)
    return periods


def periods_to_records(periods: List[PeriodRecord]) -> List[Dict[str, Any]]:
    return [period.to_dict() for period in periods]
