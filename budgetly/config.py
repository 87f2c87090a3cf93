"""Configuration for the budget service.

Paths and defaults live here, each overridable through an environment variable.
"""

from __future__ import annotations

import os
from pathlib import Path

_PROJECT_ROOT = Path(__file__).parent.parent.resolve()

DATA_DIR = Path(os.getenv("BUDGETLY_DATA_DIR", _PROJECT_ROOT / "user_data"))
CALCULATIONS_PATH = DATA_DIR / "calculations.json"
WHATIF_PATH = DATA_DIR / "whatif.json"
DRAFTS_PATH = DATA_DIR / "drafts.json"

DEFAULT_TAX_RATE = float(os.getenv("BUDGETLY_TAX_RATE", "0.15"))
DEFAULT_INFLATION_RATE = float(os.getenv("BUDGETLY_INFLATION_RATE", "0.03"))

PORT = int(os.getenv("BUDGETLY_PORT", "8000"))
LOG_LEVEL = os.getenv("BUDGETLY_LOG_LEVEL", "INFO").upper()


def ensure_data_directories() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
