from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..data_model import MONTHS_PER_PERIOD, PeriodRecord, WhatIfPlan


def horizon_months(periods: Sequence[PeriodRecord]) -> int:
    return MONTHS_PER_PERIOD * len(periods)


def _event_impact(periods: Sequence[PeriodRecord], plan: WhatIfPlan) -> float:
    event = plan.one_time_event
    if event is None or all(period.label != event.period_label for period in periods):
        return 0.0
    return event.signed_amount()


def projected_balance(periods: Sequence[PeriodRecord], plan: WhatIfPlan) -> float:
    """Final balance of the baseline projection after applying the plan's adjustments.

    A one-time event counts only when its label names one of the projected periods.
    """
    base = periods[-1].balance if periods else 0.0
    one_time = _event_impact(periods, plan)
    return base + plan.monthly_net_change() * horizon_months(periods) + one_time


def scenario_series(periods: Sequence[PeriodRecord], plan: WhatIfPlan) -> List[Dict[str, Any]]:
    net = plan.monthly_net_change()
    event = plan.one_time_event
    event_impact = 0.0
    rows: List[Dict[str, Any]] = []
    for i, period in enumerate(periods):
        if event is not None and period.label == event.period_label:
            event_impact = event.signed_amount()
        accumulated = net * MONTHS_PER_PERIOD * (i + 1)
        rows.append(
            {
                "name": period.label,
                "current": period.balance,
                "scenario": period.balance + accumulated + event_impact,
            }
        )
    return rows


def best_plan(ranked: Sequence[Tuple[Any, float]]) -> Optional[Any]:
    """Pick the entry with the highest projected balance from ``(plan, balance)`` pairs."""
    if not ranked:
        return None
    return max(ranked, key=lambda pair: pair[1])[0]
