# engine/storage.py
import json
import logging
import math
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)


def json_safe(value: Any) -> Any:
    """Copy ``value`` with NaN and infinities turned into ``None`` so strict JSON accepts it."""
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, dict):
        return {key: json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [json_safe(item) for item in value]
    return value


class JsonDocumentFile:
    """A single JSON object on disk, keyed by user id."""

    def __init__(self, path: str):
        self.path = Path(path)

    def read(self) -> Dict[str, Any]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError:
            logger.warning("Could not read %s; starting empty", self.path)
            return {}
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            logger.warning("Ignoring corrupt JSON in %s", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Expected a JSON object in %s, found %s", self.path, type(data).__name__)
            return {}
        return json_safe(data)

    def write(self, documents: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        staging = self.path.with_name(self.path.name + ".tmp")
        staging.write_text(json.dumps(json_safe(documents), allow_nan=False), encoding="utf-8")
        # readers never see a half-written file
        staging.replace(self.path)
