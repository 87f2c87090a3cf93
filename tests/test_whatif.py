import datetime

import pytest

from budgetly.data_model import OneTimeEvent, WhatIfPlan
from budgetly.engine.projection import compute_sequence
from budgetly.engine.whatif import best_plan, horizon_months, projected_balance, scenario_series

FALL_DAY = datetime.date(2026, 10, 19)


@pytest.fixture
def periods(base_form):
    base_form.update({"remainingSemesters": "4", "savings": "20000", "rent": "500"})
    return compute_sequence(base_form, as_of=FALL_DAY)


def test_horizon_follows_projection_length(periods):
    # Fall, Winter, Summer, Fall, Winter
    assert len(periods) == 5
    assert horizon_months(periods) == 20


def test_projected_balance_applies_monthly_change(periods):
    plan = WhatIfPlan(name="Car loan", monthly_expense_change=340)

    assert projected_balance(periods, plan) == pytest.approx(periods[-1].balance - 340 * 20)


def test_projected_balance_includes_one_time_event(periods):
    plan = WhatIfPlan(
        name="Laptop",
        monthly_income_change=100,
        one_time_event=OneTimeEvent(name="Laptop", amount=1500, effect="expense", period_label="Winter 2027"),
    )

    assert projected_balance(periods, plan) == pytest.approx(periods[-1].balance + 2000 - 1500)


def test_projected_balance_without_projection():
    plan = WhatIfPlan(name="Side gig", monthly_income_change=200)

    assert projected_balance([], plan) == 0


def test_series_ends_at_projected_balance(periods):
    plan = WhatIfPlan(
        name="Tutoring",
        monthly_income_change=250,
        monthly_expense_change=50,
        one_time_event=OneTimeEvent(name="Bonus", amount=800, effect="income", period_label="Summer 2027"),
    )

    series = scenario_series(periods, plan)

    assert [row["name"] for row in series] == [p.label for p in periods]
    assert [row["current"] for row in series] == [p.balance for p in periods]
    assert series[0]["scenario"] == pytest.approx(periods[0].balance + 200 * 4)
    assert series[2]["scenario"] == pytest.approx(periods[2].balance + 200 * 12 + 800)
    assert series[-1]["scenario"] == pytest.approx(projected_balance(periods, plan))


def test_zero_amount_event_has_no_effect(periods):
    plan = WhatIfPlan(name="Nothing", one_time_event=OneTimeEvent(name="Gift", amount=0, effect="income"))

    assert projected_balance(periods, plan) == periods[-1].balance


def test_event_outside_projection_is_ignored_everywhere(periods):
    plan = WhatIfPlan(
        name="Trip",
        monthly_income_change=50,
        one_time_event=OneTimeEvent(name="Flight", amount=900, effect="expense", period_label="Fall 2031"),
    )

    series = scenario_series(periods, plan)

    assert projected_balance(periods, plan) == pytest.approx(periods[-1].balance + 50 * 20)
    assert series[-1]["scenario"] == pytest.approx(projected_balance(periods, plan))


@pytest.mark.parametrize("semester", [None, "", "   "])
def test_plan_from_payload_drops_event_without_semester(periods, semester):
    plan = WhatIfPlan.from_payload(
        {"name": "Car", "oneTimeEvent": {"name": "car", "amount": "500", "semester": semester}}
    )

    assert plan.one_time_event is None
    assert scenario_series(periods, plan)[-1]["scenario"] == projected_balance(periods, plan) == periods[-1].balance


def test_plan_from_payload_keeps_signed_changes():
    plan = WhatIfPlan.from_payload(
        {
            "name": " Roommate ",
            "monthlyIncomeChange": "-50",
            "monthlyExpenseChange": "-400",
            "oneTimeEvent": {"name": "Deposit", "amount": "600", "effect": "expense", "semester": "Fall 2026"},
        }
    )

    assert plan.name == "Roommate"
    assert plan.monthly_net_change() == 350
    assert plan.one_time_event == OneTimeEvent("Deposit", 600.0, "expense", "Fall 2026")
    assert WhatIfPlan.from_payload(plan.to_dict()) == plan


def test_plan_from_payload_rejects_bad_effect():
    with pytest.raises(ValueError):
        WhatIfPlan.from_payload({"name": "x", "oneTimeEvent": {"name": "y", "amount": 1, "effect": "gift"}})


def test_best_plan_picks_highest_balance():
    assert best_plan([("a", -100.0), ("b", 250.0), ("c", 10.0)]) == "b"
    assert best_plan([]) is None
