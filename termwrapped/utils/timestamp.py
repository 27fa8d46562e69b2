"""Timestamp and duration formatting utilities."""

from datetime import timedelta


def format_duration(span: timedelta) -> str:
    """
    Format a history span in coarse human units.

    Uses 365-day years and 30-day months:
    - Years: "2 years 3 months" or "1 year"
    - Months: "5 months"
    - Days: "12 days"
    - Anything shorter: "< 1 day"

    Args:
        span: Duration to format

    Returns:
        Compact duration string

    Examples:
        format_duration(timedelta(days=400))
        # "1 year 1 month"

        format_duration(timedelta(hours=3))
        # "< 1 day"
    """
    days = span.days
    years = days // 365
    months = (days % 365) // 30

    if years > 0:
        if months > 0:
            return f"{_plural(years, 'year')} {_plural(months, 'month')}"
        return _plural(years, "year")
    if months > 0:
        return _plural(months, "month")
    if days > 0:
        return _plural(days, "day")
    return "< 1 day"


def _plural(n: int, unit: str) -> str:
    """Format a count with its unit, pluralized when n != 1."""
    return f"1 {unit}" if n == 1 else f"{n} {unit}s"
