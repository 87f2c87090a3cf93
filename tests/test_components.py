import datetime

from budgetly.engine.projection import compute_sequence
from budgetly.engine.summary import compute_summary
from components.charts import build_cashflow_figure
from components.form import FIELD_IDS, build_calculator_form, field_id
from components.results import build_summary_cards, format_currency, period_rows

FALL_DAY = datetime.date(2026, 10, 19)


def test_form_covers_every_input_field():
    assert "semestersLeft" in FIELD_IDS
    assert "hourlyRate" in FIELD_IDS
    assert field_id("tuition") == "field-tuition"
    assert build_calculator_form() is not None


def test_format_currency():
    assert format_currency(1234.4) == "$1,234"
    assert format_currency(-5000) == "-$5,000"


def test_period_rows_are_currency_formatted(working_form):
    rows = period_rows(compute_sequence(working_form, as_of=FALL_DAY))

    assert rows[0]["Period"] == "Fall 2026"
    assert rows[0]["Costs"] == "$5,000"
    assert rows[1]["Ending Balance"] == "-$3,200"


def test_figure_traces(working_form):
    periods = compute_sequence(working_form, as_of=FALL_DAY)

    fig = build_cashflow_figure(periods, scenario=periods)

    names = [trace.name for trace in fig.data]
    assert names == ["Costs", "Available Funds", "Ending Balance", "Scenario Balance"]
    assert list(fig.data[2].y) == [-1600, -3200]


def test_summary_cards_warn_on_shortfall(working_form):
    periods = compute_sequence(working_form, as_of=FALL_DAY)

    cards = build_summary_cards(compute_summary(periods), "Fall 2026")

    assert "Fall 2026" in str(cards)
