"""Journal operations: init, create today's entry, append a task."""

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from .editor import Editor
from .errors import EntryMissingError
from .index import add_entry
from .models.journal import (
    DEFAULT_LANGUAGE,
    LANGUAGES,
    EntryResult,
    InitResult,
    Language,
    TaskResult,
)
from .paths import DailyPaths, format_date
from .prompting import InputSource
from .templates import TemplateStore, render

logger = logging.getLogger(__name__)

console = Console()

DEFAULT_TASK_NAME = "Untitled"
LANGUAGE_PROMPT = f"Template language ({'/'.join(LANGUAGES)}, default {DEFAULT_LANGUAGE}): "


def parse_language(answer: str) -> Optional[Language]:
    """Map a prompt answer to a language, or None if it is blank or unknown."""
    value = answer.strip().lower()
    if value in LANGUAGES:
        return value  # type: ignore[return-value]
    return None


def init_journal(
    store: TemplateStore,
    input_source: InputSource,
    lang: Optional[str] = None,
) -> InitResult:
    """Initialize the journal, asking for the language when not given.

    Does nothing (and asks nothing) when the journal is already configured.
    Blank or unknown answers fall back to the default language with a
    warning.

    Args:
        store: Template store for the journal root
        input_source: Where the language answer is read from
        lang: Language chosen up front (skips the prompt)

    Returns:
        InitResult from the template store
    """
    if store.is_initialized():
        settings = store.load_settings()
        return InitResult(lang=settings.lang, already_initialized=True)

    answer = lang if lang is not None else input_source.ask(LANGUAGE_PROMPT)
    chosen = parse_language(answer)
    if chosen is None:
        console.print(
            f"[yellow]Warning: unknown language {escape(repr(answer.strip()))}, "
            f"using '{DEFAULT_LANGUAGE}'[/yellow]"
        )
        chosen = DEFAULT_LANGUAGE

    return store.initialize(chosen)


def create_today_entry(
    paths: DailyPaths,
    store: TemplateStore,
    editor: Editor,
    today: Optional[date] = None,
) -> EntryResult:
    """Create the entry for today (or the given date) and list it in the index.

    An entry that already exists is left untouched and the index is not
    modified. In both cases the entry is then opened in the editor.

    Args:
        paths: Journal paths
        store: Template store
        editor: Editor used to open the entry afterwards
        today: Entry date (default: today)

    Returns:
        EntryResult for the entry
    """
    date_str = format_date(today)
    entry_path = paths.entry_path(date_str)

    if entry_path.exists():
        logger.info(f"Entry {entry_path} already exists")
        result = EntryResult(date=date_str, entry_path=entry_path, created=False)
    else:
        template = store.load_template("start")
        header = None
        if not paths.index_file.exists():
            header = store.load_settings().index_header

        paths.ensure_entry_dir(date_str)
        entry_path.write_text(render(template, date=date_str), encoding="utf-8")
        logger.info(f"Created entry {entry_path}")

        index_update = add_entry(
            paths.index_file,
            date_str,
            paths.relative_entry_path(date_str),
            header=header,
        )
        result = EntryResult(
            date=date_str,
            entry_path=entry_path,
            created=True,
            index_update=index_update,
        )

    editor.open(entry_path)
    return result


def append_task(
    paths: DailyPaths,
    store: TemplateStore,
    editor: Editor,
    name_words: Sequence[str] = (),
    now: Optional[datetime] = None,
) -> TaskResult:
    """Append a timestamped task block to today's entry.

    Args:
        paths: Journal paths
        store: Template store
        editor: Editor used to open the entry afterwards
        name_words: Task name words, joined with spaces (default: Untitled)
        now: Time of the append (default: now, local time)

    Returns:
        TaskResult for the appended block

    Raises:
        EntryMissingError: If today's entry has not been created
    """
    now = now or datetime.now()
    date_str = format_date(now.date())
    entry_path = paths.entry_path(date_str)

    if not entry_path.exists():
        raise EntryMissingError(f"No entry for {date_str}: {entry_path}")

    template = store.load_template("task")
    task_name = " ".join(name_words).strip() or DEFAULT_TASK_NAME
    timestamp = now.strftime("%H:%M")
    block = render(template, taskName=task_name, timestamp=timestamp)

    with open(entry_path, "a", encoding="utf-8") as f:
        f.write("\n" + block)
    logger.info(f"Appended task {task_name!r} to {entry_path}")

    editor.open(entry_path)
    return TaskResult(
        date=date_str,
        entry_path=entry_path,
        task_name=task_name,
        timestamp=timestamp,
    )
