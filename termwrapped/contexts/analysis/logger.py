"""
Analysis context logger.

Provides logging interface for analysis context with automatic [analyze] prefix.
All analysis modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[analyze]"


def _log_info(message: str) -> None:
    """Log info message with [analyze] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [analyze] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_analysis_result(stats) -> None:
    """Log headline numbers of a StatsSummary."""
    _log_info(f"{stats.total_commands} commands, {stats.unique_commands} unique")
    if stats.top_command:
        _log_debug(f"  Top command: {stats.top_command}")
    if stats.has_time_data:
        _log_debug(f"  Span: {stats.first_command} -> {stats.last_command}")
        _log_debug(f"  Longest streak: {stats.longest_streak} days")


def log_archetype_scores(scores: dict) -> None:
    """Log every rule's score at debug level."""
    for name, score in scores.items():
        _log_debug(f"  {name}: {score:.2f}")


def log_archetype_result(primary, secondary: list) -> None:
    """Log the selected archetype and notable runners-up."""
    _log_info(f"Archetype: {primary.name} (score {primary.score:.2f})")
    if secondary:
        _log_info(f"Secondary: {', '.join(arch.name for arch in secondary)}")
