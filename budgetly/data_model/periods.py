from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

MONTHS_PER_PERIOD = 4


@dataclass(frozen=True)
class PeriodRecord:
    """One academic semester or summer break in a projection."""

    index: int
    semester: int  # academic ordinal, 0 for summer breaks
    label: str
    is_summer: bool
    costs: float
    income: float  # work income after tax
    aid: float
    savings: float  # balance carried in
    total_income: float
    available_funds: float
    balance: float
    is_surplus: bool
    deficit: float
    tuition: float = 0.0
    work_hours_per_week: int = 0
    months: int = MONTHS_PER_PERIOD

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "semester": self.semester,
            "semesterLabel": self.label,
            "isSummer": self.is_summer,
            "costs": self.costs,
            "income": self.income,
            "aid": self.aid,
            "savings": self.savings,
            "totalIncome": self.total_income,
            "availableFunds": self.available_funds,
            "balance": self.balance,
            "isSurplus": self.is_surplus,
            "deficit": self.deficit,
            "tuitionThisSemester": self.tuition,
            "workHoursPerWeek": self.work_hours_per_week,
            "monthsInSemester": self.months,
        }

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "PeriodRecord":
        """Rebuild a record from a stored snapshot."""
        return cls(
            index=int(row.get("index", 0) or 0),
            semester=int(row.get("semester", 0) or 0),
            label=str(row.get("semesterLabel", "")),
            is_summer=bool(row.get("isSummer", False)),
            costs=float(row.get("costs", 0.0) or 0.0),
            income=float(row.get("income", 0.0) or 0.0),
            aid=float(row.get("aid", 0.0) or 0.0),
            savings=float(row.get("savings", 0.0) or 0.0),
            total_income=float(row.get("totalIncome", 0.0) or 0.0),
            available_funds=float(row.get("availableFunds", 0.0) or 0.0),
            balance=float(row.get("balance", 0.0) or 0.0),
            is_surplus=bool(row.get("isSurplus", False)),
            deficit=float(row.get("deficit", 0.0) or 0.0),
            tuition=float(row.get("tuitionThisSemester", 0.0) or 0.0),
            work_hours_per_week=int(row.get("workHoursPerWeek", 0) or 0),
            months=int(row.get("monthsInSemester", MONTHS_PER_PERIOD) or MONTHS_PER_PERIOD),
        )


@dataclass(frozen=True)
class Summary:
    total_semesters: int = 0
    total_periods: int = 0
    total_costs: float = 0.0
    total_income: float = 0.0
    final_balance: float = 0.0
    average_cost_per_period: float = 0.0
    average_income_per_period: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalSemesters": self.total_semesters,
            "totalPeriods": self.total_periods,
            "totalCosts": self.total_costs,
            "totalIncome": self.total_income,
            "finalBalance": self.final_balance,
            "averageCostPerPeriod": self.average_cost_per_period,
            "averageIncomePerPeriod": self.average_income_per_period,
        }
