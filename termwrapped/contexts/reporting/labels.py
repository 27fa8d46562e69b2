"""
Display labels for report values.

Small pure helpers that turn numbers into the playful labels shown in the report.
"""

from typing import Tuple

DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

# (upper bound exclusive, label)
SUDO_LEVELS = (
    (1, "Peasant"),
    (5, "Apprentice"),
    (10, "Elevated"),
    (20, "Power User"),
)

# (upper bound exclusive, label, filled blocks)
SUDO_METER_LEVELS = (
    (1, "none", 0),
    (10, "low", 1),
    (50, "med", 2),
    (100, "high", 3),
    (500, "power", 4),
)
SUDO_METER_BLOCKS = 5


def get_day_name(day: int) -> str:
    """Short day name for a Sunday-first weekday index."""
    if 0 <= day < len(DAY_NAMES):
        return DAY_NAMES[day]
    return "Unknown"


def get_sudo_level(pct: float) -> str:
    """Label for the share of commands run with sudo."""
    for bound, label in SUDO_LEVELS:
        if pct < bound:
            return label
    return "Root God"


def sudo_meter_level(count: int) -> Tuple[str, int]:
    """(label, filled blocks) for an absolute sudo count."""
    for bound, label, blocks in SUDO_METER_LEVELS:
        if count < bound:
            return label, blocks
    return "god", SUDO_METER_BLOCKS


def sudo_meter(count: int) -> str:
    """
    Five-block meter for an absolute sudo count.

    Example:
        >>> sudo_meter(42)
        '[##---] med'
    """
    label, blocks = sudo_meter_level(count)
    return f"[{'#' * blocks}{'-' * (SUDO_METER_BLOCKS - blocks)}] {label}"


def format_number(n: int) -> str:
    """Integer with thousands separators (12345 -> "12,345")."""
    return f"{n:,}"
