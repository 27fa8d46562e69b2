"""
History Statistics Aggregator

Computes a StatsSummary from a HistoryDataset in a single pass over the records,
followed by a few derived values (percentages, peak slot, streaks, top commands).

Tie-breaking is deterministic:
- Top commands: descending count, ties keep first-seen order
- Peak slot: first maximum scanning Sunday..Saturday, then hour 0..23
- Busiest day: earliest date among the maxima
- Favorite directory / editor: first-seen among the maxima
- Most repeated: later runs replace earlier runs of equal length
"""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Set, Tuple

from termwrapped.contexts.analysis.command_resolution import get_base_command, is_privileged
from termwrapped.contexts.analysis.command_tables import (
    CATEGORY_COMMANDS,
    COMMAND_CATEGORIES,
    EDITOR_COMMANDS,
)
from termwrapped.contexts.analysis.logger import log_analysis_result
from termwrapped.contexts.parsing.models import HistoryDataset

DEFAULT_TOP_N = 10
DAYS_PER_WEEK = 7
HOURS_PER_DAY = 24
NIGHT_OWL_HOURS = range(0, 5)
WEEKEND_DAYS = (0, 6)  # Sunday, Saturday

HeatMap = Tuple[Tuple[int, ...], ...]


def _empty_heat_map() -> HeatMap:
    return tuple((0,) * HOURS_PER_DAY for _ in range(DAYS_PER_WEEK))


@dataclass(frozen=True)
class CommandCount:
    """A resolved command name and how often it was run."""

    command: str
    count: int


@dataclass(frozen=True)
class StatsSummary:
    """
    Aggregate statistics for one history file.

    Every field is derived from the HistoryDataset alone. Percentages are
    relative to total_commands, including the time-based ones.

    Attributes:
        total_commands: Number of parsed records
        unique_commands: Distinct resolved command names
        has_time_data: Whether any record carried a timestamp
        first_command / last_command: Earliest and latest timestamps
        history_span: last_command - first_command
        commands_per_day: total_commands / span in days (0 for a zero span)
        longest_streak: Longest run of consecutive active calendar days
        busiest_day / busiest_day_count: Date with most commands
        heat_map: [weekday (0=Sunday)][hour] command counts
        peak_day / peak_hour: Busiest heat map cell
        night_owl_pct: Share of commands run between 00:00 and 05:00
        weekend_pct: Share of commands run on Saturday or Sunday
        top_commands: Most used resolved commands, descending, cut at DEFAULT_TOP_N
        categories / category_pct: Per-category counts and shares (non-zero only)
        sudo_count / sudo_pct: Commands run through sudo or doas
        pipe_count / pipe_pct: Commands containing a pipe
        avg_command_length: Mean raw command length in characters (code points)
        longest_command / longest_command_length: Longest raw command, in characters
        most_repeated / most_repeated_count: Longest run of identical consecutive commands
        favorite_dir / favorite_dir_count: Most common `cd` target
        editor_choice / editor_count: Most used editor
    """

    total_commands: int = 0
    unique_commands: int = 0

    has_time_data: bool = False
    first_command: Optional[datetime] = None
    last_command: Optional[datetime] = None
    history_span: timedelta = timedelta(0)
    commands_per_day: float = 0.0
    longest_streak: int = 0
    busiest_day: Optional[date] = None
    busiest_day_count: int = 0

    heat_map: HeatMap = field(default_factory=_empty_heat_map)
    peak_day: int = 0
    peak_hour: int = 0
    night_owl_pct: float = 0.0
    weekend_pct: float = 0.0

    top_commands: Tuple[CommandCount, ...] = ()

    categories: Dict[str, int] = field(default_factory=dict)
    category_pct: Dict[str, float] = field(default_factory=dict)

    sudo_count: int = 0
    sudo_pct: float = 0.0
    pipe_count: int = 0
    pipe_pct: float = 0.0
    avg_command_length: float = 0.0
    longest_command: str = ""
    longest_command_length: int = 0

    most_repeated: str = ""
    most_repeated_count: int = 0
    favorite_dir: Optional[str] = None
    favorite_dir_count: int = 0
    editor_choice: Optional[str] = None
    editor_count: int = 0

    @property
    def top_command(self) -> Optional[str]:
        """Most used resolved command, or None for an empty history."""
        return self.top_commands[0].command if self.top_commands else None


def _percent(count: float, total: int) -> float:
    return count / total * 100 if total else 0.0


def top_n(counts: Dict[str, int], n: int = DEFAULT_TOP_N) -> Tuple[CommandCount, ...]:
    """
    Top n entries by descending count.

    sorted() is stable, so equal counts keep the dict's insertion (first-seen) order.
    """
    ranked = sorted(counts.items(), key=lambda x: x[1], reverse=True)
    return tuple(CommandCount(command=name, count=count) for name, count in ranked[:n])


def most_common(counts: Dict[str, int]) -> Tuple[Optional[str], int]:
    """Key with the highest count (first-seen wins ties), or (None, 0) when empty."""
    best_key, best_count = None, 0
    for key, count in counts.items():
        if count > best_count:
            best_key, best_count = key, count
    return best_key, best_count


def longest_repeat_run(raw_commands: Iterable[str]) -> Tuple[str, int]:
    """
    Longest run of byte-identical consecutive commands.

    A later run of equal length replaces the current best.

    Returns:
        (command text, run length), ("", 0) for no input
    """
    best_text, best_len = "", 0
    current_text, current_len = None, 0

    for raw in raw_commands:
        if raw == current_text:
            current_len += 1
            continue
        if current_len and current_len >= best_len:
            best_text, best_len = current_text, current_len
        current_text, current_len = raw, 1

    if current_len and current_len >= best_len:
        best_text, best_len = current_text, current_len

    return best_text, best_len


def longest_streak(active_days: Set[date]) -> int:
    """Longest run of consecutive calendar days in the set."""
    if not active_days:
        return 0

    days = sorted(active_days)
    longest = current = 1
    for previous, day in zip(days, days[1:]):
        if (day - previous).days <= 1:
            current += 1
        else:
            current = 1
        longest = max(longest, current)

    return longest


def busiest_day(day_counts: Dict[date, int]) -> Tuple[Optional[date], int]:
    """Date with the most commands (earliest wins ties), or (None, 0)."""
    best_day, best_count = None, 0
    for day in sorted(day_counts):
        if day_counts[day] > best_count:
            best_day, best_count = day, day_counts[day]
    return best_day, best_count


def peak_slot(heat_map: HeatMap) -> Tuple[int, int]:
    """(day, hour) of the first maximum, scanning day-major then hour-minor; (0, 0) if all zero."""
    best_day, best_hour, best_count = 0, 0, 0
    for day, hours in enumerate(heat_map):
        for hour, count in enumerate(hours):
            if count > best_count:
                best_day, best_hour, best_count = day, hour, count
    return best_day, best_hour


def sunday_first_weekday(moment: datetime) -> int:
    """Weekday index with 0=Sunday ... 6=Saturday."""
    return (moment.weekday() + 1) % DAYS_PER_WEEK


def analyze(dataset: HistoryDataset) -> StatsSummary:
    """
    Compute all statistics for a parsed history.

    Pure function of the dataset; an empty dataset yields a zero-valued summary.

    Args:
        dataset: Parsed history

    Returns:
        StatsSummary
    """
    records = dataset.commands
    total = len(records)
    if total == 0:
        return StatsSummary()

    command_counts: Dict[str, int] = defaultdict(int)
    category_counts: Dict[str, int] = defaultdict(int)
    dir_counts: Dict[str, int] = defaultdict(int)
    editor_counts: Dict[str, int] = defaultdict(int)

    sudo_count = 0
    pipe_count = 0
    total_length = 0
    longest_command, longest_length = "", 0

    first_command: Optional[datetime] = None
    last_command: Optional[datetime] = None
    day_counts: Dict[date, int] = defaultdict(int)
    heat_map: List[List[int]] = [[0] * HOURS_PER_DAY for _ in range(DAYS_PER_WEEK)]
    night_owl_count = 0
    weekend_count = 0

    for record in records:
        base = get_base_command(record)
        command_counts[base] += 1

        raw_length = len(record.raw)
        total_length += raw_length
        if raw_length > longest_length:
            longest_command, longest_length = record.raw, raw_length

        if is_privileged(record):
            sudo_count += 1
        if "|" in record.raw:
            pipe_count += 1

        if base == "cd" and record.args:
            directory = record.args[0]
            dir_counts[directory] += 1

        if base in EDITOR_COMMANDS:
            editor_counts[base] += 1

        for category in COMMAND_CATEGORIES.get(base, ()):
            category_counts[category] += 1

        if record.has_time:
            moment = record.timestamp
            if first_command is None or moment < first_command:
                first_command = moment
            if last_command is None or moment > last_command:
                last_command = moment

            day_counts[moment.date()] += 1

            weekday = sunday_first_weekday(moment)
            heat_map[weekday][moment.hour] += 1
            if moment.hour in NIGHT_OWL_HOURS:
                night_owl_count += 1
            if weekday in WEEKEND_DAYS:
                weekend_count += 1

    has_time_data = first_command is not None
    history_span = last_command - first_command if has_time_data else timedelta(0)
    span_days = history_span.total_seconds() / 86400
    frozen_heat_map = tuple(tuple(hours) for hours in heat_map)
    peak_day, peak_hour = peak_slot(frozen_heat_map)
    best_day, best_day_count = busiest_day(day_counts)
    most_repeated, most_repeated_count = longest_repeat_run(record.raw for record in records)
    favorite_dir, favorite_dir_count = most_common(dir_counts)
    editor_choice, editor_count = most_common(editor_counts)

    categories = {
        category: category_counts[category]
        for category in CATEGORY_COMMANDS
        if category_counts.get(category)
    }

    stats = StatsSummary(
        total_commands=total,
        unique_commands=len(command_counts),
        has_time_data=has_time_data,
        first_command=first_command,
        last_command=last_command,
        history_span=history_span,
        commands_per_day=total / span_days if span_days > 0 else 0.0,
        longest_streak=longest_streak(set(day_counts)),
        busiest_day=best_day,
        busiest_day_count=best_day_count,
        heat_map=frozen_heat_map,
        peak_day=peak_day,
        peak_hour=peak_hour,
        night_owl_pct=_percent(night_owl_count, total),
        weekend_pct=_percent(weekend_count, total),
        top_commands=top_n(command_counts, DEFAULT_TOP_N),
        categories=categories,
        category_pct={category: _percent(count, total) for category, count in categories.items()},
        sudo_count=sudo_count,
        sudo_pct=_percent(sudo_count, total),
        pipe_count=pipe_count,
        pipe_pct=_percent(pipe_count, total),
        avg_command_length=total_length / total,
        longest_command=longest_command,
        longest_command_length=longest_length,
        most_repeated=most_repeated,
        most_repeated_count=most_repeated_count,
        favorite_dir=favorite_dir,
        favorite_dir_count=favorite_dir_count,
        editor_choice=editor_choice,
        editor_count=editor_count,
    )

    log_analysis_result(stats)
    return stats
