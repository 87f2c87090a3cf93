from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Mapping

from .inputs import parse_number, safe_parse_float

EVENT_EFFECTS = ("income", "expense")


@dataclass(frozen=True)
class OneTimeEvent:
    name: str
    amount: float
    effect: Literal["income", "expense"] = "expense"
    period_label: str = ""

    def signed_amount(self) -> float:
        if self.amount <= 0:
            return 0.0
        return self.amount if self.effect == "income" else -self.amount

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "amount": self.amount, "effect": self.effect, "semester": self.period_label}


@dataclass(frozen=True)
class WhatIfPlan:
    """Monthly income/expense adjustments layered on top of a stored projection."""

    name: str
    monthly_income_change: float = 0.0
    monthly_expense_change: float = 0.0
    one_time_event: OneTimeEvent | None = None

    def monthly_net_change(self) -> float:
        return self.monthly_income_change - self.monthly_expense_change

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "WhatIfPlan":
        event = None
        raw_event = payload.get("oneTimeEvent")
        if isinstance(raw_event, Mapping) and str(raw_event.get("name", "")).strip():
            effect = str(raw_event.get("effect", "expense")).lower()
            if effect not in EVENT_EFFECTS:
                raise ValueError(f"One-time event effect must be one of {', '.join(EVENT_EFFECTS)}.")
            label = str(raw_event.get("semester") or raw_event.get("periodLabel") or "").strip()
            # an event without a semester never lands anywhere
            if label:
                event = OneTimeEvent(
                    name=str(raw_event["name"]).strip(),
                    amount=safe_parse_float(raw_event.get("amount")),
                    effect=effect,  # type: ignore[arg-type]
                    period_label=label,
                )
        return cls(
            name=str(payload.get("name", "")).strip(),
            # changes may be negative: "reduce income", "save on expenses"
            monthly_income_change=parse_number(payload.get("monthlyIncomeChange")),
            monthly_expense_change=parse_number(payload.get("monthlyExpenseChange")),
            one_time_event=event,
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "name": self.name,
            "monthlyIncomeChange": self.monthly_income_change,
            "monthlyExpenseChange": self.monthly_expense_change,
        }
        if self.one_time_event is not None:
            payload["oneTimeEvent"] = self.one_time_event.to_dict()
        return payload
