#!/usr/bin/env python3
"""
Terminal Wrapped CLI

Reads your shell history once and prints a developer stats report card.

Usage:
    terminal-wrapped [--shell zsh|bash] [--history PATH] [--json] [--no-color]
"""

import platform
from pathlib import Path
from typing import Any, Dict, NoReturn, Optional

import typer
from typing_extensions import Annotated

from termwrapped import __version__
from termwrapped.contexts.parsing import (
    EmptyHistoryError,
    HistoryReadError,
    detect_shell,
    get_history_path,
)
from termwrapped.contexts.parsing.shells import SUPPORTED_SHELLS
from termwrapped.contexts.reporting import render_report, to_json
from termwrapped.pipeline import run_pipeline
from termwrapped.utils.config import load_settings, resolve_log_dir
from termwrapped.utils.logger import setup_logger

app = typer.Typer(
    help="Your shell history as a developer stats report card",
    add_completion=False,
)


def _fail(message: str, hint: Optional[str] = None) -> NoReturn:
    """Print an error (and optional hint) to stderr and exit with code 1."""
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    if hint:
        typer.echo(hint, err=True)
    raise typer.Exit(code=1)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"terminal-wrapped {__version__}")
        typer.echo(f"Python: {platform.python_version()}")
        raise typer.Exit()


def _cli_overrides(
    shell: Optional[str],
    history: Optional[Path],
    top: Optional[int],
    log_dir: Optional[Path],
) -> Dict[str, Any]:
    """Nested settings overrides for the flags that were actually given."""
    overrides: Dict[str, Any] = {}
    if shell is not None:
        overrides.setdefault("history", {})["shell"] = shell
    if history is not None:
        overrides.setdefault("history", {})["path"] = str(history)
    if top is not None:
        overrides["analysis"] = {"top_n": top}
    if log_dir is not None:
        overrides["logging"] = {"log_dir": str(log_dir)}
    return overrides


@app.command()
def main(
    shell: Annotated[
        Optional[str],
        typer.Option(
            "--shell",
            "-s",
            help="Force shell type: zsh, bash (auto-detected if not set)",
        ),
    ] = None,
    history: Annotated[
        Optional[Path],
        typer.Option(
            "--history",
            help="Custom history file path",
            dir_okay=False,
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output raw stats as JSON",
        ),
    ] = False,
    no_color: Annotated[
        bool,
        typer.Option(
            "--no-color",
            help="Disable colors (for piping)",
        ),
    ] = False,
    top: Annotated[
        Optional[int],
        typer.Option(
            "--top",
            "-n",
            help="Number of top commands to show (at most 10, default: 10)",
            min=1,
        ),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="YAML settings file merged over the defaults",
            dir_okay=False,
        ),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--log-dir",
            help="Write a debug log file to this directory",
            file_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show progress messages on stderr",
        ),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            help="Show version information",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
):
    """
    Analyze your shell history and print your developer stats report card.

    Examples:\n

        $ terminal-wrapped                          # Auto-detect and display

        $ terminal-wrapped --shell bash             # Force bash history

        $ terminal-wrapped --history ~/.histfile    # Custom history file

        $ terminal-wrapped --json > stats.json      # Machine-readable output
    """
    try:
        settings = load_settings(config, overrides=_cli_overrides(shell, history, top, log_dir))
    except ValueError as e:
        _fail(str(e))

    setup_logger(
        context_name="wrapped",
        log_dir=resolve_log_dir(settings),
        console_level="INFO" if verbose else settings.logging.console_level,
        extra_provenance={"Version": __version__},
    )

    shell_kind = detect_shell(settings.history.shell)
    if shell_kind not in SUPPORTED_SHELLS:
        _fail(f"Unsupported shell '{shell_kind}'. Supported shells: {', '.join(SUPPORTED_SHELLS)}")

    history_path = get_history_path(shell_kind, settings.history.path)
    if not history_path.exists():
        _fail(
            f"History file not found: {history_path}",
            hint="Try specifying the path with --history or shell with --shell",
        )

    try:
        result = run_pipeline(history_path, shell_kind, top_n=settings.analysis.top_n)
    except (HistoryReadError, EmptyHistoryError) as e:
        _fail(str(e))

    if json_output:
        typer.echo(to_json(result, __version__))
        return

    report = render_report(
        result.stats,
        result.archetype,
        result.secondary_archetypes,
        width=settings.report.width,
        top_commands_shown=min(settings.report.top_commands_shown, result.top_n),
        max_categories_shown=settings.report.max_categories_shown,
    )
    typer.echo(report, color=False if no_color else None)


if __name__ == "__main__":
    app()
