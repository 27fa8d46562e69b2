"""
Wrapped Pipeline

Runs the batch computation end to end: parse the history file, analyze it,
then score archetypes. Phases run strictly one after the other.

Example:
    from termwrapped.pipeline import run_pipeline

    result = run_pipeline(Path("~/.zsh_history").expanduser(), shell="zsh")
    print(result.archetype.name)
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

from termwrapped.contexts.analysis import (
    Archetype,
    CommandCount,
    StatsSummary,
    analyze,
    detect_archetype,
    detect_secondary_archetypes,
)
from termwrapped.contexts.analysis.logger import log_archetype_result
from termwrapped.contexts.analysis.stats import DEFAULT_TOP_N
from termwrapped.contexts.parsing import EmptyHistoryError, HistoryDataset, parse
from termwrapped.contexts.parsing.logger import log_parse_result


@dataclass
class WrappedResult:
    """
    Everything a report needs from one run.

    Attributes:
        dataset: Parsed history
        stats: Computed statistics
        archetype: Primary archetype
        secondary_archetypes: Other archetypes above the notable threshold
        parse_time: Seconds spent parsing the history file
        top_n: How many top commands the outputs show (never affects scoring)
    """

    dataset: HistoryDataset
    stats: StatsSummary
    archetype: Archetype
    secondary_archetypes: List[Archetype] = field(default_factory=list)
    parse_time: float = 0.0
    top_n: int = DEFAULT_TOP_N

    @property
    def shown_top_commands(self) -> Tuple[CommandCount, ...]:
        """Top commands trimmed to the display limit."""
        return self.stats.top_commands[: self.top_n]


def run_pipeline(history_path: Path, shell: str, top_n: int = DEFAULT_TOP_N) -> WrappedResult:
    """
    Parse, analyze and classify a history file.

    Statistics and archetypes are always computed on the full top-10 list;
    top_n only limits how many top commands the outputs show.

    Args:
        history_path: History file to read
        shell: Shell kind ("zsh" or "bash")
        top_n: Number of top commands to show

    Returns:
        WrappedResult

    Raises:
        HistoryReadError: If the file cannot be opened or read
        EmptyHistoryError: If the file contains no commands
    """
    start_time = time.perf_counter()
    dataset = parse(history_path, shell)
    parse_time = time.perf_counter() - start_time
    log_parse_result(dataset, parse_time)

    if not dataset.commands:
        raise EmptyHistoryError(history_path)

    stats = analyze(dataset)
    archetype = detect_archetype(stats)
    secondary = detect_secondary_archetypes(stats, archetype)
    log_archetype_result(archetype, secondary)

    return WrappedResult(
        dataset=dataset,
        stats=stats,
        archetype=archetype,
        secondary_archetypes=secondary,
        parse_time=parse_time,
        top_n=top_n,
    )
