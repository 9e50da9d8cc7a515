"""Pydantic models for journal settings and operation results."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

Language = Literal["ru", "en"]

LANGUAGES: tuple[str, ...] = ("ru", "en")
DEFAULT_LANGUAGE: Language = "ru"

INDEX_HEADERS: dict[str, str] = {
    "ru": "# Дневник разработки\nСписок записей:\n\n",
    "en": "# Dev Journal\nEntries:\n\n",
}


class JournalSettings(BaseModel):
    """Persisted journal settings.

    Written once as <root>/config.json by init and read-only afterwards.
    """

    lang: Language = Field(default=DEFAULT_LANGUAGE, description="Template language")

    model_config = {"frozen": True}

    @property
    def index_header(self) -> str:
        """Header text for a freshly written index in this language."""
        return INDEX_HEADERS[self.lang]


class InitResult(BaseModel):
    """Result of journal initialization."""

    lang: Language = Field(..., description="Language in effect after init")
    already_initialized: bool = Field(False, description="Config existed before this run")
    created: list[Path] = Field(default_factory=list, description="Files written by this run")


class IndexUpdateResult(BaseModel):
    """Result of adding a link-line to the index."""

    line: str = Field(..., description="Canonical link-line text")
    added: bool = Field(..., description="False when the line was already present")
    position: int | None = Field(None, description="Zero-based line number of the inserted line")


class EntryResult(BaseModel):
    """Result of creating today's entry."""

    date: str = Field(..., description="Entry date (YYYY-MM-DD)")
    entry_path: Path = Field(..., description="Path to the entry file")
    created: bool = Field(..., description="False when the entry was already started")
    index_update: IndexUpdateResult | None = Field(None, description="Index change, if any")


class TaskResult(BaseModel):
    """Result of appending a task block to an entry."""

    date: str = Field(..., description="Entry date (YYYY-MM-DD)")
    entry_path: Path = Field(..., description="Path to the entry file")
    task_name: str = Field(..., description="Rendered task name")
    timestamp: str = Field(..., description="Time of the append (HH:MM)")
