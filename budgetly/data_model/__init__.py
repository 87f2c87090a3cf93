from .base import ColumnDefinition, FormModel
from .forms import (
    AcademicFormModel,
    ExpensesFormModel,
    IncomeFormModel,
    blank_form,
    form_steps,
)
from .inputs import (
    MAX_SEMESTERS,
    FinancialInputs,
    ProjectionOptions,
    parse_flag,
    parse_number,
    safe_parse_float,
    safe_parse_int,
)
from .periods import MONTHS_PER_PERIOD, PeriodRecord, Summary
from .scenarios import (
    SCENARIO_TYPES,
    RentIncrease,
    Scenario,
    ScholarshipIncrease,
    SummerHours,
    TuitionIncrease,
    UnknownScenarioError,
    parse_scenario,
    scenario_to_dict,
)
from .whatif import OneTimeEvent, WhatIfPlan

__all__ = [
    "AcademicFormModel",
    "ColumnDefinition",
    "ExpensesFormModel",
    "FinancialInputs",
    "FormModel",
    "IncomeFormModel",
    "MAX_SEMESTERS",
    "MONTHS_PER_PERIOD",
    "OneTimeEvent",
    "PeriodRecord",
    "ProjectionOptions",
    "RentIncrease",
    "SCENARIO_TYPES",
    "Scenario",
    "ScholarshipIncrease",
    "Summary",
    "SummerHours",
    "TuitionIncrease",
    "UnknownScenarioError",
    "WhatIfPlan",
    "blank_form",
    "form_steps",
    "parse_flag",
    "parse_number",
    "parse_scenario",
    "safe_parse_float",
    "safe_parse_int",
    "scenario_to_dict",
]
