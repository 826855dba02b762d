"""Persistent history of tailored resumes.

A newest-first list of TailoringResult kept in a single JSON file. Every
mutation is written through immediately, so the file always matches the list
the caller holds.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from resume_tailor.errors import PersistenceError
from resume_tailor.tailoring.models import TailoringResult

logger = logging.getLogger(__name__)

HistoryLog = list[TailoringResult]


class HistoryStore:
    """A JSON-file-backed store for the tailoring history."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> HistoryLog:
        """Load the history, newest first.

        A missing file yields an empty log. So does an unreadable or corrupt
        one: the problem is logged and the caller starts fresh.
        """
        if not self.path.exists():
            return []

        try:
            return self._read()
        except PersistenceError as e:
            logger.warning(f"Failed to load history, starting empty: {e}")
            return []

    def append(self, result: TailoringResult, log: HistoryLog) -> HistoryLog:
        """Prepend a result to the log and persist the new log.

        The input log is left untouched and no deduplication is done.

        Raises:
            PersistenceError: If the new log cannot be written.
        """
        updated = [result, *log]
        self._write(updated)
        logger.info(f"Saved tailored resume {result.id} to history ({len(updated)} total)")
        return updated

    def clear(self) -> HistoryLog:
        """Erase all persisted history. Irreversible.

        Raises:
            PersistenceError: If the history file cannot be removed.
        """
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise PersistenceError(f"Failed to clear history: {e}", e) from e
        logger.info("Cleared tailoring history")
        return []

    @staticmethod
    def get(log: HistoryLog, result_id: str) -> TailoringResult | None:
        """Find an entry by identifier."""
        for item in log:
            if item.id == result_id:
                return item
        return None

    def _read(self) -> HistoryLog:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise PersistenceError(f"Unreadable history file {self.path}: {e}", e) from e

        entries = raw.get("entries") if isinstance(raw, dict) else raw
        if not isinstance(entries, list):
            raise PersistenceError(f"Unexpected history format in {self.path}")

        try:
            return [TailoringResult.from_dict(entry) for entry in entries]
        except PydanticValidationError as e:
            raise PersistenceError(f"Invalid history entry in {self.path}: {e}", e) from e

    def _write(self, log: HistoryLog) -> None:
        payload = {"entries": [item.to_dict() for item in log]}
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            raise PersistenceError(f"Failed to save history: {e}", e) from e
