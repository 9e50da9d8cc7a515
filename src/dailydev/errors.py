"""Exceptions raised by dailydev operations."""


class DailyDevError(Exception):
    """Base class for journal errors reported to the user.

    Attributes:
        hint: Optional corrective command shown under the error message
    """

    def __init__(self, message: str, hint: str | None = None):
        super().__init__(message)
        self.hint = hint


class NotInitializedError(DailyDevError):
    """Raised when config.json or a working template is missing."""

    def __init__(self, message: str):
        super().__init__(message, hint="Run 'dailydev init' first")


class TemplatesMissingError(DailyDevError):
    """Raised when the canonical templates for a language cannot be found."""
    pass


class EntryMissingError(DailyDevError):
    """Raised when a task is appended before today's entry exists."""

    def __init__(self, message: str):
        super().__init__(message, hint="Run 'dailydev create' first")
