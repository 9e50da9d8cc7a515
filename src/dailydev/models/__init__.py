"""Pydantic models for dailydev."""

from .journal import (
    DEFAULT_LANGUAGE,
    INDEX_HEADERS,
    LANGUAGES,
    EntryResult,
    IndexUpdateResult,
    InitResult,
    JournalSettings,
    Language,
    TaskResult,
)

__all__ = [
    "Language",
    "LANGUAGES",
    "DEFAULT_LANGUAGE",
    "INDEX_HEADERS",
    "JournalSettings",
    # Results
    "InitResult",
    "IndexUpdateResult",
    "EntryResult",
    "TaskResult",
]
