"""
Terminal Report Renderer

Builds the styled "wrapped" report from a StatsSummary and the detected archetypes.
Styling uses typer.style (ANSI); callers strip it with typer.echo(color=False).

Sections, top to bottom:
    banner, total commands, archetype, quick stats, top commands, categories,
    activity heatmap, insights, history tip (no timestamps only), footer
"""

from typing import List, Sequence

import typer

from termwrapped.contexts.analysis.archetypes import Archetype
from termwrapped.contexts.analysis.stats import HeatMap, StatsSummary
from termwrapped.contexts.reporting.labels import (
    format_number,
    get_day_name,
    get_sudo_level,
    sudo_meter,
)
from termwrapped.utils.report_formatter import (
    Column,
    TableFormatter,
    format_percentage,
    mini_bar,
    progress_bar,
)
from termwrapped.utils.text_processing import single_line, truncate_display, wrap_words
from termwrapped.utils.timestamp import format_duration

BANNER = r"""
 _____                   _             _  __      __                           _
|_   _|__ _ __ _ __ ___ (_)_ __   __ _| | \ \    / / _ __ __ _ _ __  _ __  ___  __| |
  | |/ _ \ '__| '_ ` _ \| | '_ \ / _` | |  \ \/\/ / | '__/ _` | '_ \| '_ \/ _ \/ _` |
  | |  __/ |  | | | | | | | | | | (_| | |   \    /  | | | (_| | |_) | |_) \  __/ (_| |
  |_|\___|_|  |_| |_| |_|_|_| |_|\__,_|_|    \/\/   |_|  \__,_| .__/| .__/\___|\__,_|
                                                             |_|   |_|
"""

BANNER_COLORS = (
    typer.colors.RED,
    typer.colors.BRIGHT_RED,
    typer.colors.YELLOW,
    typer.colors.GREEN,
    typer.colors.CYAN,
    typer.colors.BLUE,
)

CATEGORY_COLORS = {
    "Git": typer.colors.BRIGHT_RED,
    "Containers": typer.colors.BLUE,
    "Packages": typer.colors.GREEN,
    "Editors": typer.colors.MAGENTA,
    "Navigation": typer.colors.CYAN,
    "Search": typer.colors.BRIGHT_MAGENTA,
    "Network": typer.colors.YELLOW,
    "Files": typer.colors.RED,
}

# Heatmap intensity, lowest to highest
HEAT_SHADES = (" ", "·", "░", "▒", "▓", "█")
HEAT_BLOCK_HOURS = 3
HEAT_DAY_LABELS = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")


def render_banner() -> str:
    """ASCII banner with one color per line."""
    lines = BANNER.strip("\n").split("\n")
    return "\n".join(
        typer.style(line, fg=BANNER_COLORS[i % len(BANNER_COLORS)], bold=True)
        for i, line in enumerate(lines)
    )


def _hero_section(stats: StatsSummary, width: int) -> str:
    table = TableFormatter(total_width=width)
    table.add_section_header("TOTAL COMMANDS", color=typer.colors.RED)
    table.add_text(f"[#] {format_number(stats.total_commands)}", fg=typer.colors.YELLOW, bold=True)

    if stats.has_time_data:
        span = (
            f"{stats.first_command:%b %Y} -> {stats.last_command:%b %Y} "
            f"({format_duration(stats.history_span)})"
        )
        table.add_text(span)
        table.add_text(f"~{stats.commands_per_day:.0f} commands/day", dim=True)
    else:
        table.add_text("All-time history")
        table.add_text("(no timestamps)", dim=True)

    return table.render()


def _archetype_section(archetype: Archetype, secondary: Sequence[Archetype], width: int) -> str:
    table = TableFormatter(total_width=width)
    table.add_section_header("YOUR ARCHETYPE", color=typer.colors.MAGENTA)
    table.add_text(
        typer.style(archetype.tag, fg=typer.colors.YELLOW, bold=True)
        + "  "
        + typer.style(archetype.name, bold=True)
    )
    for line in wrap_words(f'"{archetype.tagline}"', width - 4):
        table.add_text(line, dim=True)

    if secondary:
        names = ", ".join(arch.name.title() for arch in secondary)
        table.add_blank_line()
        for line in wrap_words(f"Also a bit of: {names}", width - 4):
            table.add_text(line, dim=True)

    return table.render()


def _busiest_label(stats: StatsSummary) -> str:
    if stats.busiest_day is None:
        return "N/A"
    return f"{stats.busiest_day:%b} {stats.busiest_day.day} ({stats.busiest_day_count})"


def _quick_stats_section(stats: StatsSummary, width: int) -> str:
    value_style = {"bold": True}
    columns = [
        Column("Unique Cmds", 12, style=value_style),
        Column("Streak", 10, style=value_style),
        Column("Busiest", 14, style=value_style),
        Column("sudo", 16, style=value_style),
        Column("Pipes", 10, style=value_style),
    ]
    table = TableFormatter(columns, total_width=width)
    table.add_section_header("QUICK STATS")
    table.add_table_header()
    table.add_row(
        [
            format_number(stats.unique_commands),
            f"{stats.longest_streak} days",
            _busiest_label(stats),
            sudo_meter(stats.sudo_count),
            format_number(stats.pipe_count),
        ]
    )
    return table.render()


def _top_commands_section(stats: StatsSummary, width: int, shown: int) -> str:
    bar_width = 30
    columns = [
        Column("#", 3, align=">", style={"dim": True}),
        Column("Command", 14, style={"bold": True}),
        Column("", bar_width, style={"fg": typer.colors.CYAN}),
        Column("Count", 8, align=">"),
    ]
    table = TableFormatter(columns, total_width=width)
    table.add_section_header("TOP COMMANDS")

    max_count = stats.top_commands[0].count if stats.top_commands else 0
    for rank, entry in enumerate(stats.top_commands[:shown], start=1):
        table.add_row(
            [
                f"{rank}.",
                truncate_display(entry.command, 14),
                progress_bar(entry.count, max_count, bar_width),
                format_number(entry.count),
            ]
        )

    return table.render()


def _categories_section(stats: StatsSummary, width: int, shown: int) -> str:
    table = TableFormatter(total_width=width)
    table.add_section_header("CATEGORIES")

    ranked = sorted(stats.category_pct.items(), key=lambda item: item[1], reverse=True)
    if not ranked:
        table.add_text("No categorized commands", dim=True)

    for name, pct in ranked[:shown]:
        color = CATEGORY_COLORS.get(name, typer.colors.WHITE)
        bar = typer.style(mini_bar(pct), fg=color)
        table.add_text(f"{bar} {name:<12}" + typer.style(f"{pct:5.1f}%", bold=True))

    return table.render()


def render_heatmap(heat_map: HeatMap) -> List[str]:
    """
    7 x 8 heatmap lines (days x three-hour blocks) shaded by relative intensity.

    Args:
        heat_map: [weekday (0=Sunday)][hour] counts

    Returns:
        Header line followed by one line per day
    """
    blocks = [
        [sum(hours[start : start + HEAT_BLOCK_HOURS]) for start in range(0, 24, HEAT_BLOCK_HOURS)]
        for hours in heat_map
    ]
    max_value = max(1, max(max(row) for row in blocks))

    lines = [typer.style("    " + "".join(f"{hour:<3}" for hour in range(0, 24, 3)), dim=True)]
    for day, row in enumerate(blocks):
        cells = []
        for value in row:
            level = 0 if value == 0 else 1 + int(value / max_value * (len(HEAT_SHADES) - 2))
            shade = HEAT_SHADES[min(level, len(HEAT_SHADES) - 1)]
            cells.append(typer.style(shade * 2, fg=typer.colors.GREEN) + " ")
        lines.append(typer.style(f" {HEAT_DAY_LABELS[day]} ", dim=True) + "".join(cells))

    return lines


def _activity_section(stats: StatsSummary, width: int) -> str:
    table = TableFormatter(total_width=width)
    table.add_section_header("ACTIVITY")

    if stats.has_time_data:
        for line in render_heatmap(stats.heat_map):
            table.add_text(line)
        table.add_text(
            f">> Peak: {get_day_name(stats.peak_day)} {stats.peak_hour:02d}:00",
            fg=typer.colors.YELLOW,
            bold=True,
        )
    else:
        table.add_text("No timestamp data", dim=True)
        table.add_text("Enable EXTENDED_HISTORY", dim=True)

    return table.render()


def _insights_section(stats: StatsSummary, width: int) -> str:
    facts = []
    if stats.has_time_data:
        facts.append(("(O)", "Night Owl", f"{stats.night_owl_pct:.0f}% after midnight"))
        facts.append(("[S]", "Weekend", f"{stats.weekend_pct:.0f}% on Sat/Sun"))
    if stats.favorite_dir:
        facts.append(("~/", "Home Dir", truncate_display(stats.favorite_dir, 40)))
    if stats.editor_choice:
        editor = f"{stats.editor_choice} ({format_number(stats.editor_count)})"
        facts.append((":w", "Editor", editor))
    facts.append(("##", "Avg Length", f"{stats.avg_command_length:.0f} chars"))
    if stats.pipe_count:
        pipes = format_percentage(stats.pipe_count, stats.total_commands)
        facts.append(("|>", "Complexity", f"{pipes} use pipes"))
    sudo_share = format_percentage(stats.sudo_count, stats.total_commands)
    facts.append(("[#]", "sudo Level", f"{get_sudo_level(stats.sudo_pct)} ({sudo_share})"))
    if stats.most_repeated_count > 1:
        repeated = truncate_display(single_line(stats.most_repeated), 30)
        facts.append(("x2", "On Repeat", f"{repeated} ({stats.most_repeated_count}x in a row)"))
    if stats.longest_command:
        facts.append(("<>", "Longest", f"{format_number(stats.longest_command_length)} chars"))

    columns = [
        Column("", 4, style={"fg": typer.colors.YELLOW, "bold": True}),
        Column("", 12, style={"dim": True}),
        Column("", max(width - 20, 8), style={"bold": True}),
    ]
    table = TableFormatter(columns, total_width=width)
    table.add_section_header("INSIGHTS")
    for icon, label, value in facts:
        table.add_row([icon, f"{label}:", value])

    return table.render()


def _history_tip() -> str:
    return "\n".join(
        [
            typer.style(" Tip: ", fg=typer.colors.YELLOW, bold=True)
            + "add these to ~/.zshrc for time-based stats:",
            typer.style("      setopt EXTENDED_HISTORY", fg=typer.colors.CYAN),
            typer.style("      setopt INC_APPEND_HISTORY", fg=typer.colors.CYAN),
        ]
    )


def _footer(width: int) -> str:
    return "\n".join(
        [
            typer.style("-" * width, dim=True),
            " Share your stats! " + typer.style("#TerminalWrapped", fg=typer.colors.YELLOW, bold=True),
        ]
    )


def render_report(
    stats: StatsSummary,
    archetype: Archetype,
    secondary: Sequence[Archetype] = (),
    width: int = 76,
    top_commands_shown: int = 8,
    max_categories_shown: int = 8,
) -> str:
    """
    Render the complete terminal report.

    Args:
        stats: Computed statistics
        archetype: Primary archetype
        secondary: Notable secondary archetypes
        width: Report width in characters
        top_commands_shown: Rows in the top commands table
        max_categories_shown: Rows in the category mix

    Returns:
        Styled multi-line report
    """
    sections = [
        render_banner(),
        _hero_section(stats, width),
        _archetype_section(archetype, secondary, width),
        _quick_stats_section(stats, width),
        _top_commands_section(stats, width, top_commands_shown),
        _categories_section(stats, width, max_categories_shown),
        _activity_section(stats, width),
        _insights_section(stats, width),
    ]
    if not stats.has_time_data:
        sections.append(_history_tip())
    sections.append(_footer(width))

    return "\n\n".join(sections) + "\n"
