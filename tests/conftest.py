"""Pytest fixtures for dailydev tests."""

from pathlib import Path

import pytest

from dailydev.config import DailyConfig
from dailydev.paths import DailyPaths
from dailydev.templates import TemplateStore


class ScriptedInput:
    """Input source answering prompts from a fixed list of lines."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.answers.pop(0)


class RecordingEditor:
    """Editor that records the paths it was asked to open."""

    def __init__(self):
        self.opened: list[Path] = []

    def open(self, path: Path) -> bool:
        self.opened.append(path)
        return True


@pytest.fixture
def journal_root(tmp_path):
    """Journal root inside a temporary directory (not created yet).
    
    Args:
        tmp_path: pytest's built-in temporary directory fixture
        
    Returns:
        Path to <tmp>/.daily
    """
    return tmp_path / ".daily"


@pytest.fixture
def daily_config(journal_root):
    """DailyConfig pointing to the temporary journal root."""
    return DailyConfig(root=journal_root)


@pytest.fixture
def daily_paths(daily_config):
    return DailyPaths.from_config(daily_config)


@pytest.fixture
def template_store(daily_config, daily_paths):
    return TemplateStore(daily_config, daily_paths)


@pytest.fixture
def initialized_store(template_store):
    """Template store with an English journal already initialized."""
    template_store.initialize("en")
    return template_store


@pytest.fixture
def editor():
    return RecordingEditor()


@pytest.fixture
def scripted_input():
    """Factory for input sources that answer with the given lines."""
    return ScriptedInput
