# engine/state.py
import datetime
import uuid
from typing import Dict, List

from .storage import JsonDocumentFile


def _timestamp() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


class _UserCollection:
    """Per-user list of JSON documents persisted in a single file."""

    def __init__(self, storage_path: str):
        self.storage_path = storage_path
        self._file = JsonDocumentFile(storage_path)
        self.documents: Dict[str, List[dict]] = self._file.read()

    def list_for(self, user_id: str) -> List[dict]:
        rows = self.documents.get(user_id, [])
        # newest first; insertion order breaks timestamp ties
        ordered = sorted(enumerate(rows), key=lambda pair: (pair[1].get("createdAt") or "", pair[0]), reverse=True)
        return [row for _, row in ordered]

    def get(self, user_id: str, doc_id: str) -> dict | None:
        for row in self.documents.get(user_id, []):
            if row.get("id") == doc_id:
                return row
        return None

    def add(self, user_id: str, payload: dict) -> dict:
        record = dict(payload)
        record["id"] = uuid.uuid4().hex
        record["userId"] = user_id
        record["createdAt"] = _timestamp()
        self.documents.setdefault(user_id, []).append(record)
        self._save()
        return record

    def update(self, user_id: str, doc_id: str, changes: dict) -> dict | None:
        record = self.get(user_id, doc_id)
        if record is None:
            return None
        for key, value in changes.items():
            if key in {"id", "userId", "createdAt"}:
                continue
            if value is None:
                record.pop(key, None)
            else:
                record[key] = value
        record["updatedAt"] = _timestamp()
        self._save()
        return record

    def delete(self, user_id: str, doc_id: str) -> bool:
        rows = self.documents.get(user_id, [])
        kept = [row for row in rows if row.get("id") != doc_id]
        if len(kept) == len(rows):
            return False
        self.documents[user_id] = kept
        self._save()
        return True

    def _save(self) -> None:
        self._file.write(self.documents)


class CalculationState(_UserCollection):
    def __init__(self, storage_path: str = "user_data/calculations.json"):
        super().__init__(storage_path)

    def latest(self, user_id: str) -> dict | None:
        rows = self.list_for(user_id)
        return rows[0] if rows else None


class WhatIfState(_UserCollection):
    def __init__(self, storage_path: str = "user_data/whatif.json"):
        super().__init__(storage_path)


class DraftState:
    def __init__(self, storage_path: str = "user_data/drafts.json"):
        self.storage_path = storage_path
        self._file = JsonDocumentFile(storage_path)
        self.drafts: Dict[str, dict] = self._file.read()

    def get(self, user_id: str) -> dict | None:
        return self.drafts.get(user_id)

    def save(self, user_id: str, form: dict) -> None:
        self.drafts[user_id] = form or {}
        self._save()

    def clear(self, user_id: str) -> None:
        if user_id in self.drafts:
            del self.drafts[user_id]
            self._save()

    def _save(self) -> None:
        self._file.write(self.drafts)
