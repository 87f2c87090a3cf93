from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, ClassVar, Dict, Mapping, Type, Union

from .inputs import FinancialInputs, safe_parse_float, safe_parse_int


class UnknownScenarioError(ValueError):
    pass


@dataclass(frozen=True)
class TuitionIncrease:
    percent: float
    kind: ClassVar[str] = "tuition-increase"
    label: ClassVar[str] = "Tuition Increase (%)"

    def apply(self, inputs: FinancialInputs) -> FinancialInputs:
        return replace(inputs, tuition=inputs.tuition * (1 + self.percent / 100.0))

    @property
    def value(self) -> float:
        return self.percent


@dataclass(frozen=True)
class SummerHours:
    hours_per_week: int
    kind: ClassVar[str] = "more-summer-hours"
    label: ClassVar[str] = "Summer Work Hours"

    def apply(self, inputs: FinancialInputs) -> FinancialInputs:
        return replace(inputs, hours_summer=self.hours_per_week)

    @property
    def value(self) -> int:
        return self.hours_per_week


@dataclass(frozen=True)
class RentIncrease:
    percent: float
    kind: ClassVar[str] = "higher-rent"
    label: ClassVar[str] = "Rent Increase (%)"

    def apply(self, inputs: FinancialInputs) -> FinancialInputs:
        return replace(inputs, rent=inputs.rent * (1 + self.percent / 100.0))

    @property
    def value(self) -> float:
        return self.percent


@dataclass(frozen=True)
class ScholarshipIncrease:
    amount: float
    kind: ClassVar[str] = "more-scholarship"
    label: ClassVar[str] = "Additional Scholarship ($)"

    def apply(self, inputs: FinancialInputs) -> FinancialInputs:
        return replace(inputs, scholarship=inputs.scholarship + self.amount)

    @property
    def value(self) -> float:
        return self.amount


Scenario = Union[TuitionIncrease, SummerHours, RentIncrease, ScholarshipIncrease]

SCENARIO_TYPES: Dict[str, Type[Any]] = {
    cls.kind: cls for cls in (TuitionIncrease, SummerHours, RentIncrease, ScholarshipIncrease)
}


def parse_scenario(payload: Mapping[str, Any] | None) -> Scenario:
    payload = payload or {}
    kind = str(payload.get("kind") or payload.get("type") or "").strip()
    value = payload.get("value")
    if kind == SummerHours.kind:
        return SummerHours(safe_parse_int(value))
    cls = SCENARIO_TYPES.get(kind)
    if cls is None:
        raise UnknownScenarioError(f"Unknown scenario kind: {kind!r}")
    return cls(safe_parse_float(value))


def scenario_to_dict(scenario: Scenario) -> Dict[str, Any]:
    return {"kind": scenario.kind, "label": scenario.label, "value": scenario.value}
