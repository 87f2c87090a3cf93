from __future__ import annotations

from typing import Iterable, List, Optional

from ..data_model import PeriodRecord, Summary

GREAT_THRESHOLD = 1000.0
SHORT_THRESHOLD = -2000.0


def compute_summary(periods: Iterable[PeriodRecord]) -> Summary:
    """Totals over every period (summers included); semester count is academic terms only."""
    periods = list(periods)
    if not periods:
        return Summary()

    total_costs = sum(p.costs for p in periods)
    total_income = sum(p.total_income for p in periods)
    count = len(periods)
    return Summary(
        total_semesters=sum(1 for p in periods if not p.is_summer),
        total_periods=count,
        total_costs=total_costs,
        total_income=total_income,
        final_balance=periods[-1].balance,
        average_cost_per_period=total_costs / count,
        average_income_per_period=total_income / count,
    )


def first_shortfall(periods: List[PeriodRecord]) -> Optional[str]:
    for period in periods:
        if period.balance < 0:
            return period.label
    return None


def balance_status(amount: float) -> str:
    if amount >= GREAT_THRESHOLD:
        return "great"
    if amount >= 0:
        return "good"
    if amount >= SHORT_THRESHOLD:
        return "short"
    return "critical"
