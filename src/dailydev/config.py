"""Configuration management for dailydev."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_ROOT = ".daily"
DEFAULT_EDITOR = "code"


def _packaged_templates_dir() -> Path:
    """Directory holding the canonical per-language templates."""
    return Path(__file__).parent / "templates_data"


class DailyConfig(BaseModel):
    """Runtime configuration passed to every journal operation."""

    root: Path = Field(default_factory=lambda: Path(DEFAULT_ROOT))
    editor: str = Field(default=DEFAULT_EDITOR)
    templates_source: Path = Field(default_factory=_packaged_templates_dir)

    model_config = {"frozen": False}

    @classmethod
    def from_env(cls, cli_root: Optional[str] = None) -> "DailyConfig":
        """Load configuration from the CLI, environment variables or defaults.

        Journal root precedence:
        1. CLI --dir option
        2. DAILYDEV_DIR environment variable
        3. ./.daily

        Args:
            cli_root: Journal root from the CLI --dir option
        """
        root = cli_root or os.environ.get("DAILYDEV_DIR") or DEFAULT_ROOT
        templates_env = os.environ.get("DAILYDEV_TEMPLATES")

        return cls(
            root=Path(root),
            editor=os.environ.get("DAILYDEV_EDITOR", DEFAULT_EDITOR),
            templates_source=Path(templates_env) if templates_env else _packaged_templates_dir(),
        )
