"""
Shell detection and history file location.

Resolution order for the shell kind:
1. Explicit choice (CLI flag or config)
2. $SHELL containing "zsh" or "bash"
3. zsh

Resolution order for the history file:
1. Explicit path (CLI flag or config)
2. $HISTFILE
3. Shell default (~/.zsh_history or ~/.bash_history)
"""

import os
from pathlib import Path
from typing import Optional

from termwrapped.contexts.parsing.logger import log_shell_detection

SUPPORTED_SHELLS = ("zsh", "bash")
DEFAULT_SHELL = "zsh"

DEFAULT_HISTORY_FILES = {
    "zsh": ".zsh_history",
    "bash": ".bash_history",
}


def detect_shell(explicit: Optional[str] = None) -> str:
    """
    Determine the shell kind to parse as.

    Args:
        explicit: Shell kind chosen by the user, used as-is when given

    Returns:
        "zsh" or "bash" (or the explicit value)
    """
    if explicit:
        log_shell_detection(explicit, "explicit")
        return explicit

    shell_env = os.getenv("SHELL", "")
    for shell in SUPPORTED_SHELLS:
        if shell in shell_env:
            log_shell_detection(shell, f"$SHELL={shell_env}")
            return shell

    log_shell_detection(DEFAULT_SHELL, "default")
    return DEFAULT_SHELL


def get_history_path(shell: str, explicit: Optional[Path] = None) -> Path:
    """
    Return the history file path for a shell.

    Args:
        shell: Shell kind ("zsh" or "bash"); unknown kinds fall back to the zsh default
        explicit: Path chosen by the user, used as-is when given

    Returns:
        Path to the history file (not checked for existence)
    """
    if explicit:
        return Path(explicit).expanduser()

    hist_file = os.getenv("HISTFILE")
    if hist_file:
        return Path(hist_file).expanduser()

    filename = DEFAULT_HISTORY_FILES.get(shell, DEFAULT_HISTORY_FILES[DEFAULT_SHELL])
    return Path.home() / filename
