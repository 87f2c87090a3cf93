from __future__ import annotations

from typing import Dict, List

from .base import ColumnDefinition, FormModel
from .inputs import MAX_SEMESTERS

STUDENT_TYPES = ["domestic", "international"]
JOB_OPTIONS = ["yes", "no"]
SEMESTER_OPTIONS = [str(n) for n in range(1, MAX_SEMESTERS + 1)]


class AcademicFormModel(FormModel):
    def __init__(self) -> None:
        columns = [
            ColumnDefinition(
                "studentType",
                "Student Type",
                kind="select",
                default="domestic",
                options=STUDENT_TYPES,
                help="Shown on the form and kept with saved inputs. Does not change the projection.",
            ),
            ColumnDefinition(
                "semestersLeft",
                "Semesters Left",
                kind="select",
                default="",
                options=SEMESTER_OPTIONS,
                min_value=1,
                max_value=MAX_SEMESTERS,
                required=True,
            ),
            ColumnDefinition(
                "tuition",
                "Tuition per Year",
                default="",
                min_value=0.0,
                max_value=200000.0,
                step=100.0,
                required=True,
            ),
            ColumnDefinition(
                "books",
                "Books per Semester",
                default="",
                min_value=0.0,
                max_value=10000.0,
                step=10.0,
            ),
            ColumnDefinition(
                "supplies",
                "Supplies per Semester",
                default="",
                min_value=0.0,
                max_value=10000.0,
                step=10.0,
            ),
        ]
        super().__init__("academic", "Academic Year Details", columns)


class ExpensesFormModel(FormModel):
    def __init__(self) -> None:
        columns = [
            ColumnDefinition("rent", "Rent", default="", min_value=0.0, max_value=10000.0, step=25.0, help="per month"),
            ColumnDefinition("utilities", "Utilities", default="", min_value=0.0, max_value=1000.0, step=5.0, help="per month"),
            ColumnDefinition("groceries", "Groceries", default="", min_value=0.0, max_value=2000.0, step=5.0, help="per month"),
            ColumnDefinition("cellPhone", "Cell Phone", default="", min_value=0.0, max_value=500.0, step=5.0, help="per month"),
            ColumnDefinition(
                "transportation",
                "Transportation",
                default="",
                min_value=0.0,
                max_value=1000.0,
                step=5.0,
                help="per month",
            ),
            ColumnDefinition(
                "memberships",
                "Memberships & Subscriptions",
                default="",
                min_value=0.0,
                max_value=500.0,
                step=5.0,
                help="per month",
            ),
        ]
        super().__init__("expenses", "Monthly Expenses", columns)


class IncomeFormModel(FormModel):
    def __init__(self) -> None:
        columns = [
            ColumnDefinition("hasJob", "Do you have a job?", kind="select", default="", options=JOB_OPTIONS),
            ColumnDefinition(
                "hoursPerWeekSchool",
                "Hours per Week (school term)",
                default="",
                min_value=0,
                max_value=40,
                step=1,
            ),
            ColumnDefinition(
                "hoursPerWeekSummer",
                "Hours per Week (summer)",
                default="",
                min_value=0,
                max_value=80,
                step=1,
            ),
            ColumnDefinition("hourlyRate", "Hourly Rate", default="", min_value=0.0, max_value=100.0, step=0.25),
            ColumnDefinition(
                "scholarship",
                "Scholarship",
                default="",
                min_value=0.0,
                max_value=50000.0,
                step=100.0,
                help="per semester",
            ),
            ColumnDefinition("bursary", "Bursary", default="", min_value=0.0, max_value=50000.0, step=100.0, help="per semester"),
            ColumnDefinition("grant", "Grant", default="", min_value=0.0, max_value=50000.0, step=100.0, help="per semester"),
            ColumnDefinition("savings", "Current Savings", default="", min_value=0.0, max_value=1000000.0, step=100.0),
        ]
        super().__init__("income", "Income & Financial Aid", columns)


def form_steps() -> List[FormModel]:
    return [AcademicFormModel(), ExpensesFormModel(), IncomeFormModel()]


def blank_form() -> Dict[str, str]:
    values: Dict[str, str] = {}
    for step in form_steps():
        values.update(step.default_values())
    return values
