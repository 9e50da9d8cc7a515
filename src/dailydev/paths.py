"""Path management and journal layout for dailydev."""

from datetime import date
from pathlib import Path
from typing import Optional

from .config import DailyConfig


def format_date(value: Optional[date] = None) -> str:
    """Format a date as YYYY-MM-DD (default: today)."""
    return (value or date.today()).isoformat()


class DailyPaths:
    """Manages paths within the journal directory."""

    def __init__(self, root: Path):
        """Initialize journal paths from the root directory.

        Args:
            root: Journal root directory (usually ./.daily)
        """
        self.root = root

        # Persisted state
        self.config_file = root / "config.json"
        self.index_file = root / "index.md"

        # Working templates
        self.template_start = root / "template-start.md"
        self.template_task = root / "template-task.md"

    @classmethod
    def from_config(cls, config: DailyConfig) -> "DailyPaths":
        """Create DailyPaths from a DailyConfig."""
        return cls(config.root)

    def template_path(self, kind: str) -> Path:
        """Get path to the working template of the given kind ("start" or "task")."""
        if kind == "start":
            return self.template_start
        if kind == "task":
            return self.template_task
        raise ValueError(f"Unknown template kind: {kind}")

    def relative_entry_path(self, date_str: str) -> str:
        """Get entry path relative to the index file, as used in link-lines.

        Args:
            date_str: Date in YYYY-MM-DD format

        Returns:
            POSIX path YYYY/MM/YYYY-MM-DD.md
        """
        year, month, _ = date_str.split("-")
        return f"{year}/{month}/{date_str}.md"

    def entry_path(self, date_str: str) -> Path:
        """Get path to the entry file for a specific date.

        Args:
            date_str: Date in YYYY-MM-DD format

        Returns:
            Path to <root>/YYYY/MM/YYYY-MM-DD.md
        """
        return self.root / self.relative_entry_path(date_str)

    def ensure_entry_dir(self, date_str: str) -> Path:
        """Create the YYYY/MM folder for a date if needed and return the entry path."""
        path = self.entry_path(date_str)
        path.parent.mkdir(parents=True, exist_ok=True)
        return path
