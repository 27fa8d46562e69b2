"""
Generic logger setup utilities.

Provides reusable loguru configuration with provenance tracking.
Context-specific wrappers should be defined in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Optional[Path] = None,
    console_level: str = "WARNING",
    extra_provenance: dict = None,
    level_colors: dict = {},
) -> Optional[Path]:
    """
    Configure loguru for a run with provenance tracking.

    The console sink writes to stderr so that the report (or JSON dump) on
    stdout stays clean. A file sink is only added when a log directory is given.

    Args:
        context_name: Context identifier (e.g., "wrapped", "parse")
        log_dir: Directory for this logging session (None disables file logging)
        console_level: Minimum level shown on the console (e.g., "WARNING", "INFO")
        extra_provenance: Additional key-value pairs for provenance header
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})

    Returns:
        Path to log file, or None when file logging is disabled

    Example:
        from termwrapped.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="wrapped",
            log_dir=Path("outs/logs"),
            extra_provenance={"Shell": "zsh"},
        )
    """
    # Remove default logger
    logger.remove()

    colors = {**LEVEL_COLORS, **level_colors}
    for level_name, color in colors.items():
        logger.level(level_name, color=color)

    log_file = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(exist_ok=True, parents=True)
        log_file = log_dir / f"{context_name}.log"

        # File handler captures everything
        logger.add(
            log_file, format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}", level="DEBUG"
        )

    logger.add(
        sys.stderr,
        format="<level>{level: <7}</level> | <level>{message}</level>",
        level=console_level,
        colorize=True,
    )

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Log execution provenance to current logger.

    Logs standard context (script, command, working directory, Python version)
    plus any additional context provided.

    Args:
        extra_context: Additional key-value pairs to log
    """
    logger.info("=" * 80)
    logger.info(f"Script: {sys.argv[0]}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.info(f"{key}: {value}")

    logger.info("=" * 80)
