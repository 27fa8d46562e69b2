"""
Utility functions for formatting text-based reports and tables.

Provides consistent table formatting for the terminal report. Values are padded
before styling so ANSI codes never disturb column alignment.
"""

from typing import Any, Dict, List, Optional

import typer

BAR_FILLED = "█"
BAR_EMPTY = "░"


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<", style: Optional[Dict] = None):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
            style: Keyword arguments for typer.style applied to values (e.g., {"bold": True})
        """
        self.name = name
        self.width = width
        self.align = align
        self.style = style or {}

    def format_header(self) -> str:
        """Format column header with alignment."""
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        """Format column value with alignment, then apply the column style."""
        text = f"{value:{self.align}{self.width}}"
        return typer.style(text, **self.style) if self.style else text


class TableFormatter:
    """Builder for formatted text tables with aligned columns."""

    def __init__(self, columns: List[Column] = None, total_width: int = 76, indent: int = 1):
        """
        Args:
            columns: List of Column definitions (may be empty for free-form sections)
            total_width: Total report width for separators
            indent: Spaces before every table row and text line
        """
        self.columns = columns or []
        self.total_width = total_width
        self.indent = " " * indent
        self.lines: List[str] = []

    def add_section_header(self, title: str, color: str = typer.colors.CYAN) -> "TableFormatter":
        """
        Add section header: `-- TITLE -----` filling the report width.

        Args:
            title: Section title
            color: Title color

        Returns:
            Self for method chaining
        """
        label = f"-- {title} "
        rule = "-" * max(self.total_width - len(label), 0)
        self.lines.append(typer.style(label, fg=color, bold=True) + typer.style(rule, dim=True))
        return self

    def add_table_header(self) -> "TableFormatter":
        """
        Add table header row with column names.

        Returns:
            Self for method chaining
        """
        header_parts = [col.format_header() for col in self.columns]
        self.lines.append(self.indent + typer.style(" ".join(header_parts), dim=True))
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Args:
            values: List of values (one per column)

        Returns:
            Self for method chaining

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        row_parts = [col.format_value(val) for col, val in zip(self.columns, values)]
        self.lines.append(self.indent + " ".join(row_parts))
        return self

    def add_blank_line(self) -> "TableFormatter":
        """
        Add blank line.

        Returns:
            Self for method chaining
        """
        self.lines.append("")
        return self

    def add_text(self, text: str, **style) -> "TableFormatter":
        """
        Add arbitrary text line.

        Args:
            text: Text to add
            **style: Optional typer.style keyword arguments

        Returns:
            Self for method chaining
        """
        self.lines.append(self.indent + (typer.style(text, **style) if style else text))
        return self

    def render(self) -> str:
        """
        Render accumulated lines to string.

        Returns:
            Formatted report string
        """
        return "\n".join(self.lines)


def format_percentage(count: int, total: int, decimal_places: int = 1) -> str:
    """
    Format count as percentage of total.

    Args:
        count: Count value
        total: Total value
        decimal_places: Number of decimal places

    Returns:
        Formatted percentage string (e.g., "75.0%")
    """
    if total == 0:
        return "0.0%"
    percent = (count / total) * 100
    return f"{percent:.{decimal_places}f}%"


def progress_bar(value: float, maximum: float, width: int) -> str:
    """
    Horizontal bar of `width` cells filled in proportion to value / maximum.

    Example:
        >>> progress_bar(5, 10, 4)
        '██░░'
    """
    if maximum <= 0:
        maximum = 1
    filled = min(int(value / maximum * width), width)
    filled = max(filled, 0)
    return BAR_FILLED * filled + BAR_EMPTY * (width - filled)


def mini_bar(pct: float, blocks: int = 4) -> str:
    """Compact bar with one block per 10%, capped at `blocks`."""
    filled = min(max(int(pct / 10), 0), blocks)
    return BAR_FILLED * filled + BAR_EMPTY * (blocks - filled)
