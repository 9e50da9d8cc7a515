"""dailydev - dated markdown dev journal."""

__version__ = "0.1.0"
