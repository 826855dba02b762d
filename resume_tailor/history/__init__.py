"""Tailoring history persistence.

Public API:
- HistoryStore: JSON-file-backed, newest-first store of tailored resumes
- HistoryLog: Type alias for the in-memory list of results
"""

from resume_tailor.history.store import HistoryLog, HistoryStore

__all__ = ["HistoryStore", "HistoryLog"]
