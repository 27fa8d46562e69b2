"""
Shell History Parser

Streams a history file line by line and builds CommandRecords:
- Lines ending in a backslash are joined with the following lines (newline kept)
  until a line without a trailing backslash closes the command
- zsh extended-history lines (": <epoch>:<duration>;<command>") carry a timestamp
- Blank commands are skipped; tokenization is quote-aware but not full shell grammar
"""

import re
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from termwrapped.contexts.parsing.exceptions import HistoryReadError
from termwrapped.contexts.parsing.logger import log_parse_start, log_skipped_line
from termwrapped.contexts.parsing.models import CommandRecord, HistoryDataset

# zsh extended history format: `: 1703961234:0;command`
# DOTALL so merged continuation lines keep their timestamp
ZSH_EXTENDED_PATTERN = re.compile(r"^:\s*(\d+):\d+;(.*)$", re.DOTALL)

CONTINUATION_SUFFIX = "\\"
QUOTE_CHARS = ("'", '"')
TOKEN_SEPARATORS = (" ", "\t")


class MalformedLineError(ValueError):
    """A single history line that cannot become a record (skipped by the parser)."""


def split_command_parts(line: str) -> List[str]:
    """
    Split a command line on spaces/tabs outside of quotes.

    A quote character opens a quoted run when none is open, and closes it only
    when it matches the open quote. Quote characters stay in the token.

    Args:
        line: Command text

    Returns:
        List of tokens (empty for blank input)

    Example:
        >>> split_command_parts('git commit -m "fix bug"')
        ['git', 'commit', '-m', '"fix bug"']
    """
    parts = []
    current = []
    open_quote = None

    for char in line:
        if char in QUOTE_CHARS:
            if open_quote is None:
                open_quote = char
            elif char == open_quote:
                open_quote = None
            current.append(char)
        elif char in TOKEN_SEPARATORS and open_quote is None:
            if current:
                parts.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        parts.append("".join(current))

    return parts


def _extract_timestamp(line: str) -> Tuple[str, Optional[datetime]]:
    """
    Strip a zsh extended-history prefix from a line.

    Returns:
        (command text, local timestamp or None)

    Raises:
        MalformedLineError: If the epoch digits do not map to a representable time
    """
    match = ZSH_EXTENDED_PATTERN.match(line)
    if not match:
        return line, None

    try:
        timestamp = datetime.fromtimestamp(int(match.group(1)))
    except (OverflowError, OSError, ValueError) as e:
        raise MalformedLineError(f"unparseable timestamp {match.group(1)!r} ({e})") from e

    return match.group(2), timestamp


def parse_command(line: str, shell: str) -> Optional[CommandRecord]:
    """
    Parse one logical history line into a CommandRecord.

    Args:
        line: Logical line (continuations already merged)
        shell: Shell kind; only "zsh" lines get timestamp extraction

    Returns:
        CommandRecord, or None if the line holds no command

    Raises:
        MalformedLineError: If a zsh timestamp cannot be converted
    """
    raw, timestamp = line, None
    if shell == "zsh":
        raw, timestamp = _extract_timestamp(line)

    text = raw.strip()
    if not text:
        return None

    parts = split_command_parts(text)
    if not parts:
        return None

    return CommandRecord(raw=raw, command=parts[0], args=tuple(parts[1:]), timestamp=timestamp)


def iter_logical_lines(lines) -> Iterator[Tuple[int, str]]:
    """
    Merge backslash-continued physical lines into logical lines.

    Args:
        lines: Iterable of physical lines (trailing newlines allowed)

    Yields:
        (line number where the logical line starts, logical line text)
    """
    buffer: List[str] = []
    start_line = 0

    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")

        if not buffer:
            start_line = line_number
        buffer.append(line)

        if not line.endswith(CONTINUATION_SUFFIX):
            yield start_line, "\n".join(buffer)
            buffer = []

    # Continuation still open at end of file
    if buffer:
        yield start_line, "\n".join(buffer)


def parse(history_path: Path, shell: str) -> HistoryDataset:
    """
    Parse a shell history file into a HistoryDataset.

    The file is streamed, never loaded whole. Malformed lines are skipped and
    logged at debug level.

    Args:
        history_path: History file to read
        shell: Shell kind ("zsh" or "bash")

    Returns:
        HistoryDataset with records in file order

    Raises:
        HistoryReadError: If the file cannot be opened or read
    """
    history_path = Path(history_path)
    log_parse_start(history_path, shell)

    commands: List[CommandRecord] = []
    line_count = 0

    def counted(file):
        nonlocal line_count
        for line in file:
            line_count += 1
            yield line

    try:
        with open(history_path, encoding="utf-8", errors="replace") as file:
            for line_number, logical_line in iter_logical_lines(counted(file)):
                try:
                    record = parse_command(logical_line, shell)
                except MalformedLineError as e:
                    log_skipped_line(line_number, str(e))
                    continue
                if record is not None:
                    commands.append(record)
    except OSError as e:
        raise HistoryReadError(
            f"Cannot read history file: {history_path}", path=history_path, original_error=e
        ) from e

    return HistoryDataset(
        commands=tuple(commands),
        shell=shell,
        source_path=history_path,
        has_any_timestamps=any(record.has_time for record in commands),
        line_count=line_count,
    )
