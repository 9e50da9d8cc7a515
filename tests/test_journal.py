"""Tests for journal operations."""

import re
from datetime import date, datetime

import pytest

from dailydev.errors import EntryMissingError, NotInitializedError
from dailydev.index import list_entries
from dailydev.journal import append_task, create_today_entry, init_journal, parse_language
from dailydev.models.journal import INDEX_HEADERS


@pytest.mark.parametrize(
    "answer,expected",
    [("en", "en"), (" RU \n", "ru"), ("", None), ("fr", None)],
)
def test_parse_language(answer, expected):
    assert parse_language(answer) == expected


def test_init_with_scripted_answer(template_store, daily_paths, scripted_input):
    """Test init with input "en" writes the English config and header."""
    source = scripted_input(["en"])

    result = init_journal(template_store, source)

    assert result.lang == "en"
    assert len(source.prompts) == 1
    assert daily_paths.config_file.read_text(encoding="utf-8") == '{"lang":"en"}'
    assert daily_paths.index_file.read_text(encoding="utf-8") == INDEX_HEADERS["en"]


@pytest.mark.parametrize("answer", ["", "klingon"])
def test_init_falls_back_to_default(template_store, scripted_input, answer):
    result = init_journal(template_store, scripted_input([answer]))

    assert result.lang == "ru"
    assert not result.already_initialized


def test_init_skips_prompt_when_initialized(initialized_store, scripted_input):
    source = scripted_input([])

    result = init_journal(initialized_store, source)

    assert result.already_initialized
    assert result.lang == "en"
    assert source.prompts == []


def test_init_with_lang_option_skips_prompt(template_store, scripted_input):
    source = scripted_input([])

    result = init_journal(template_store, source, lang="en")

    assert result.lang == "en"
    assert source.prompts == []


def test_create_entry(initialized_store, daily_paths, editor):
    """Test that create writes the rendered entry and lists it in the index."""
    result = create_today_entry(daily_paths, initialized_store, editor, today=date(2026, 1, 19))

    expected_path = daily_paths.root / "2026" / "01" / "2026-01-19.md"
    assert result.created
    assert result.entry_path == expected_path
    content = expected_path.read_text(encoding="utf-8")
    assert content.startswith("## 2026-01-19")
    assert "{{date}}" not in content
    assert list_entries(daily_paths.index_file) == [("2026-01-19", "2026/01/2026-01-19.md")]
    assert editor.opened == [expected_path]


def test_create_twice_same_date(initialized_store, daily_paths, editor):
    """Test that a second create leaves the entry and the index alone."""
    first = create_today_entry(daily_paths, initialized_store, editor, today=date(2026, 1, 19))
    first.entry_path.write_text("edited\n", encoding="utf-8")
    index_before = daily_paths.index_file.read_text(encoding="utf-8")

    second = create_today_entry(daily_paths, initialized_store, editor, today=date(2026, 1, 19))

    assert not second.created
    assert second.index_update is None
    assert first.entry_path.read_text(encoding="utf-8") == "edited\n"
    assert daily_paths.index_file.read_text(encoding="utf-8") == index_before
    assert list(daily_paths.root.rglob("2026-01-19.md")) == [first.entry_path]
    # The entry is reopened either way
    assert editor.opened == [first.entry_path, first.entry_path]


def test_create_in_creation_order(initialized_store, daily_paths, editor):
    for day in [date(2026, 3, 2), date(2026, 1, 15), date(2026, 2, 1)]:
        create_today_entry(daily_paths, initialized_store, editor, today=day)

    content = daily_paths.index_file.read_text(encoding="utf-8")
    assert content.startswith(INDEX_HEADERS["en"])
    assert [d for d, _ in list_entries(daily_paths.index_file)] == ["2026-03-02", "2026-01-15", "2026-02-01"]


def test_create_with_preinserted_link(initialized_store, daily_paths, editor):
    """Test that a manually added link-line is not duplicated."""
    link = "- [2026-01-19](2026/01/2026-01-19.md)"
    with open(daily_paths.index_file, "a", encoding="utf-8") as f:
        f.write(link + "\n")

    result = create_today_entry(daily_paths, initialized_store, editor, today=date(2026, 1, 19))

    assert result.created
    assert not result.index_update.added
    assert daily_paths.index_file.read_text(encoding="utf-8").count(link) == 1


def test_create_recreates_missing_index(initialized_store, daily_paths, editor):
    daily_paths.index_file.unlink()

    create_today_entry(daily_paths, initialized_store, editor, today=date(2026, 1, 19))

    content = daily_paths.index_file.read_text(encoding="utf-8")
    assert content == INDEX_HEADERS["en"] + "- [2026-01-19](2026/01/2026-01-19.md)\n"


def test_create_before_init(template_store, daily_paths, editor):
    with pytest.raises(NotInitializedError):
        create_today_entry(daily_paths, template_store, editor, today=date(2026, 1, 19))

    assert not daily_paths.entry_path("2026-01-19").exists()
    assert editor.opened == []


def test_append_task(initialized_store, daily_paths, editor):
    """Test that a task block is appended after the existing content."""
    entry = create_today_entry(daily_paths, initialized_store, editor, today=date(2026, 1, 19))
    before = entry.entry_path.read_text(encoding="utf-8")

    result = append_task(
        daily_paths,
        initialized_store,
        editor,
        name_words=["Fix", "bug"],
        now=datetime(2026, 1, 19, 9, 5),
    )

    content = entry.entry_path.read_text(encoding="utf-8")
    assert content.startswith(before)
    appended = content[len(before):]
    assert appended.startswith("\n")
    assert "Fix bug" in appended
    assert "09:05" in appended
    assert re.search(r"\b\d{2}:\d{2}\b", appended)
    assert result.task_name == "Fix bug"
    assert result.timestamp == "09:05"
    assert editor.opened[-1] == entry.entry_path


def test_append_task_default_name(initialized_store, daily_paths, editor):
    create_today_entry(daily_paths, initialized_store, editor, today=date(2026, 1, 19))

    result = append_task(daily_paths, initialized_store, editor, now=datetime(2026, 1, 19, 18, 30))

    assert result.task_name == "Untitled"
    assert "Untitled (18:30)" in result.entry_path.read_text(encoding="utf-8")


def test_append_task_without_entry(initialized_store, daily_paths, editor):
    """Test that task fails without creating anything when no entry exists."""
    files_before = sorted(daily_paths.root.rglob("*"))

    with pytest.raises(EntryMissingError) as exc_info:
        append_task(daily_paths, initialized_store, editor, name_words=["x"], now=datetime(2026, 1, 19, 9, 0))

    assert "dailydev create" in exc_info.value.hint
    assert sorted(daily_paths.root.rglob("*")) == files_before
    assert editor.opened == []


def test_create_without_config_writes_no_entry(initialized_store, daily_paths, editor):
    """Test that a failed create leaves no entry behind, so a retry works."""
    daily_paths.config_file.unlink()
    daily_paths.index_file.unlink()

    with pytest.raises(NotInitializedError):
        create_today_entry(daily_paths, initialized_store, editor, today=date(2026, 1, 19))

    assert not daily_paths.entry_path("2026-01-19").exists()
    assert not daily_paths.index_file.exists()
    assert editor.opened == []
