from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Mapping

from ..data_model import FinancialInputs, PeriodRecord, ProjectionOptions, Scenario, Summary, scenario_to_dict
from .projection import coerce_inputs, compute_sequence, periods_to_records
from .summary import compute_summary


@dataclass(frozen=True)
class ScenarioComparison:
    scenario: Scenario
    baseline_periods: List[PeriodRecord]
    scenario_periods: List[PeriodRecord]
    baseline_summary: Summary
    scenario_summary: Summary

    @property
    def balance_change(self) -> float:
        return self.scenario_summary.final_balance - self.baseline_summary.final_balance

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scenario": scenario_to_dict(self.scenario),
            "baseline": {
                "periods": periods_to_records(self.baseline_periods),
                "summary": self.baseline_summary.to_dict(),
            },
            "modified": {
                "periods": periods_to_records(self.scenario_periods),
                "summary": self.scenario_summary.to_dict(),
            },
            "balanceChange": self.balance_change,
        }


def apply_scenario(inputs: FinancialInputs | Mapping[str, Any], scenario: Scenario) -> FinancialInputs:
    """Return a modified copy of ``inputs``; the baseline is left untouched."""
    return scenario.apply(coerce_inputs(inputs))


def compare_scenario(
    inputs: FinancialInputs | Mapping[str, Any],
    scenario: Scenario,
    options: ProjectionOptions | None = None,
    *,
    as_of: date,
) -> ScenarioComparison:
    baseline = coerce_inputs(inputs)
    baseline_periods = compute_sequence(baseline, options, as_of=as_of)
    scenario_periods = compute_sequence(apply_scenario(baseline, scenario), options, as_of=as_of)
    return ScenarioComparison(
        scenario=scenario,
        baseline_periods=baseline_periods,
        scenario_periods=scenario_periods,
        baseline_summary=compute_summary(baseline_periods),
        scenario_summary=compute_summary(scenario_periods),
    )
