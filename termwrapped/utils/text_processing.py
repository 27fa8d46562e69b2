"""Text processing utilities for formatting and display."""

from typing import List


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def single_line(text: str) -> str:
    """Collapse a multi-line command to one display line (continuations shown as ' ')."""
    return " ".join(part.rstrip("\\").strip() for part in text.splitlines() if part.strip())


def wrap_words(text: str, width: int) -> List[str]:
    """
    Greedy word wrap without breaking words.

    Words longer than width are placed on their own line unbroken.

    Example:
        >>> wrap_words("Commit early, commit often", 14)
        ['Commit early,', 'commit often']
    """
    lines: List[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if len(candidate) <= width or not current:
            current = candidate
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines
