"""Template store: canonical templates, working copies and persisted settings."""

import json
import logging
import shutil
from pathlib import Path

from pydantic import ValidationError

from .config import DailyConfig
from .errors import DailyDevError, NotInitializedError, TemplatesMissingError
from .models.journal import InitResult, JournalSettings, Language
from .paths import DailyPaths

logger = logging.getLogger(__name__)

TEMPLATE_FILES = {
    "start": "template-start.md",
    "task": "template-task.md",
}


def render(template: str, **values: str) -> str:
    """Replace every {{key}} token in the template with its value.

    Plain global text replacement; substituted values are not escaped.
    """
    rendered = template
    for key, value in values.items():
        rendered = rendered.replace("{{" + key + "}}", value)
    return rendered


class TemplateStore:
    """Working templates and settings under the journal root."""

    def __init__(self, config: DailyConfig, paths: DailyPaths):
        self.config = config
        self.paths = paths

    def is_initialized(self) -> bool:
        return self.paths.config_file.exists()

    def canonical_template(self, lang: Language, kind: str) -> Path:
        """Path of the shipped template for a language and kind."""
        return self.config.templates_source / lang / TEMPLATE_FILES[kind]

    def initialize(self, lang: Language) -> InitResult:
        """Copy templates, write the index header and persist the language.

        Idempotent: when config.json already exists nothing is written.

        Args:
            lang: Template language ("ru" or "en")

        Returns:
            InitResult describing what was created

        Raises:
            TemplatesMissingError: If a canonical template for lang is missing
        """
        if self.is_initialized():
            settings = self.load_settings()
            logger.info(f"Journal already initialized at {self.paths.root} ({settings.lang})")
            return InitResult(lang=settings.lang, already_initialized=True)

        sources = {kind: self.canonical_template(lang, kind) for kind in TEMPLATE_FILES}
        missing = [str(path) for path in sources.values() if not path.is_file()]
        if missing:
            raise TemplatesMissingError(
                f"Templates for language '{lang}' not found: {', '.join(missing)}"
            )

        self.paths.root.mkdir(parents=True, exist_ok=True)
        settings = JournalSettings(lang=lang)
        created: list[Path] = []

        for kind, source in sources.items():
            target = self.paths.template_path(kind)
            if not target.exists():
                shutil.copyfile(source, target)
                created.append(target)
                logger.debug(f"Copied {source} -> {target}")

        if not self.paths.index_file.exists():
            self.paths.index_file.write_text(settings.index_header, encoding="utf-8")
            created.append(self.paths.index_file)

        self.paths.config_file.write_text(settings.model_dump_json(), encoding="utf-8")
        created.append(self.paths.config_file)
        logger.info(f"Initialized journal at {self.paths.root} ({lang})")

        return InitResult(lang=lang, created=created)

    def load_settings(self) -> JournalSettings:
        """Read config.json.

        Raises:
            NotInitializedError: If config.json does not exist
            DailyDevError: If config.json cannot be parsed
        """
        if not self.paths.config_file.exists():
            raise NotInitializedError(f"Journal config not found: {self.paths.config_file}")

        raw = self.paths.config_file.read_text(encoding="utf-8")
        try:
            return JournalSettings(**json.loads(raw))
        except (json.JSONDecodeError, TypeError, ValidationError) as e:
            raise DailyDevError(f"Malformed journal config {self.paths.config_file}: {e}") from e

    def load_template(self, kind: str) -> str:
        """Read a working template ("start" or "task").

        Raises:
            NotInitializedError: If the template file does not exist
        """
        path = self.paths.template_path(kind)
        if not path.exists():
            raise NotInitializedError(f"Template not found: {path}")
        return path.read_text(encoding="utf-8")
