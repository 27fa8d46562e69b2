"""
History data structures for the Parsing context.

Records are frozen once the parser builds them; the Analysis context only reads them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class CommandRecord:
    """
    One logical history entry (a single line or a merged continuation).

    Attributes:
        raw: Command text after the timestamp prefix was stripped (not trimmed)
        command: First token of the command line
        args: Remaining tokens, quote-aware, quotes retained
        timestamp: Local time the command was recorded (None without timestamp)
    """

    raw: str
    command: str
    args: Tuple[str, ...] = ()
    timestamp: Optional[datetime] = None

    @property
    def has_time(self) -> bool:
        """Whether this record carries a timestamp (distinct from epoch zero)."""
        return self.timestamp is not None


@dataclass(frozen=True)
class HistoryDataset:
    """
    Ordered command records (oldest first) plus metadata about the source.

    Attributes:
        commands: Parsed records in file order
        shell: Shell kind the file was parsed as ("zsh" or "bash")
        source_path: History file path
        has_any_timestamps: True if at least one record has a timestamp
        line_count: Physical lines read from the file
    """

    commands: Tuple[CommandRecord, ...] = field(default_factory=tuple)
    shell: str = "zsh"
    source_path: Optional[Path] = None
    has_any_timestamps: bool = False
    line_count: int = 0

    def __len__(self) -> int:
        return len(self.commands)
