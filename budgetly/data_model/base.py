from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class ColumnDefinition:
    """Lightweight schema descriptor used by the form builders and /api/schema."""

    field: str
    label: str
    kind: str = "number"  # text | number | select
    default: Any = ""
    options: List[str] | None = None
    min_value: float | None = None
    max_value: float | None = None
    step: float | None = None
    required: bool = False
    help: str | None = None


@dataclass
class FormModel:
    """One step of the calculator form: a titled group of fields."""

    name: str
    title: str
    columns: List[ColumnDefinition] = field(default_factory=list)

    def default_values(self) -> Dict[str, Any]:
        return {col.field: col.default for col in self.columns}

    def field_names(self) -> List[str]:
        return [col.field for col in self.columns]

    def get(self, name: str) -> ColumnDefinition | None:
        for col in self.columns:
            if col.field == name:
                return col
        return None
