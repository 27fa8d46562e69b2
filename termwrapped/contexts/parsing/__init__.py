"""
Parsing Context

Responsibilities:
- Locates the history file and detects the shell kind
- Streams history files and merges backslash continuations
- Extracts zsh extended-history timestamps
- Tokenizes commands (quote-aware) into CommandRecords

Owns: History file format knowledge, CommandRecord/HistoryDataset
Never: Computes statistics
"""

from termwrapped.contexts.parsing.exceptions import EmptyHistoryError, HistoryReadError
from termwrapped.contexts.parsing.history_parser import parse, split_command_parts
from termwrapped.contexts.parsing.models import CommandRecord, HistoryDataset
from termwrapped.contexts.parsing.shells import detect_shell, get_history_path

__all__ = [
    "parse",
    "split_command_parts",
    "detect_shell",
    "get_history_path",
    "CommandRecord",
    "HistoryDataset",
    "HistoryReadError",
    "EmptyHistoryError",
]
