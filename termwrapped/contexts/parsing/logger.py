"""
Parsing context logger.

Provides logging interface for parsing context with automatic [parse] prefix.
All parsing modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[parse]"


def _log_info(message: str) -> None:
    """Log info message with [parse] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [parse] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [parse] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [parse] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level parsing-specific logging helpers


def log_shell_detection(shell: str, source: str) -> None:
    """Log which shell kind was chosen and why."""
    _log_info(f"Shell: {shell} ({source})")


def log_parse_start(history_path: Path, shell: str) -> None:
    """Log start of parsing with context."""
    _log_info(f"Parsing {shell} history: {history_path}")


def log_skipped_line(line_number: int, reason: str) -> None:
    """Log a history line that was skipped without aborting the parse."""
    _log_debug(f"  Skipped line {line_number}: {reason}")


def log_parse_result(dataset, elapsed_time: float) -> None:
    """
    Log parsing result.

    Args:
        dataset: HistoryDataset returned by parse()
        elapsed_time: Time taken to parse in seconds
    """
    _log_success(
        f"{len(dataset.commands)} commands from {dataset.line_count} lines ({elapsed_time:.2f}s)"
    )
    if dataset.commands and not dataset.has_any_timestamps:
        if dataset.shell == "zsh":
            _log_warning("No timestamps found (setopt EXTENDED_HISTORY to record them)")
        else:
            _log_info("No timestamps found, time-based stats will be empty")
