"""
Analysis Context

Responsibilities:
- Resolves the base command behind env assignments and wrappers (sudo, time, ...)
- Aggregates frequency, category, time-of-day and streak statistics
- Scores the fixed archetype rule table against the statistics

Owns: Command tables, StatsSummary, archetype rules
Never: Reads files or renders output
"""

from termwrapped.contexts.analysis.archetypes import (
    DEFAULT_ARCHETYPE,
    Archetype,
    detect_archetype,
    detect_secondary_archetypes,
)
from termwrapped.contexts.analysis.command_resolution import get_base_command
from termwrapped.contexts.analysis.stats import CommandCount, StatsSummary, analyze

__all__ = [
    "analyze",
    "get_base_command",
    "detect_archetype",
    "detect_secondary_archetypes",
    "Archetype",
    "CommandCount",
    "StatsSummary",
    "DEFAULT_ARCHETYPE",
]
