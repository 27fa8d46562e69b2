"""Custom exceptions for the parsing context."""

from pathlib import Path
from typing import Optional


class HistoryReadError(OSError):
    """
    Exception raised when the history file cannot be opened or read.

    Attributes:
        message: Error description
        path: History file that failed
        original_error: The underlying OS error, if any
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.path = path
        self.original_error = original_error

        parts = [message]

        if original_error:
            parts.append(f"Original error: {original_error}")

        parts.append("Try specifying the path with --history or shell with --shell")

        super().__init__("\n".join(parts))


class EmptyHistoryError(ValueError):
    """
    Exception raised when a history file exists but yields no commands.

    Attributes:
        path: History file that was parsed
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = path
        super().__init__(f"No commands found in history file: {path}")
