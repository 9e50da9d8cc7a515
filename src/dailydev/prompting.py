"""Input sources for interactive questions."""

from typing import Protocol

from rich.console import Console


class InputSource(Protocol):
    def ask(self, prompt: str) -> str:
        """Show the prompt and return one line of input (without newline)."""
        ...


class ConsoleInput:
    """Reads a line from the terminal through a rich console."""

    def __init__(self, console: Console):
        self.console = console

    def ask(self, prompt: str) -> str:
        try:
            return self.console.input(prompt)
        except EOFError:
            # Closed stdin counts as a blank answer
            return ""
