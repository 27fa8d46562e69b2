"""
Base Command Resolution

Maps a CommandRecord to the command that actually does the work:

    FOO=1 BAR=2 make test      -> make
    sudo -u root ls            -> ls
    nice -n 10 nohup rsync ... -> nohup   (one wrapper level only)
"""

import re
from typing import Optional, Sequence

from termwrapped.contexts.analysis.command_tables import (
    PRIVILEGE_COMMANDS,
    WRAPPER_COMMANDS,
    WRAPPER_VALUE_OPTIONS,
)
from termwrapped.contexts.parsing.models import CommandRecord

ENV_ASSIGNMENT_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*=")


def is_env_assignment(token: str) -> bool:
    """Return True for `KEY=VALUE` tokens."""
    return bool(ENV_ASSIGNMENT_PATTERN.match(token))


def _skip_env_assignments(tokens: Sequence[str]) -> int:
    """
    Index of the first token that is not an env assignment.

    A line made only of assignments resolves to its first token.
    """
    for index, token in enumerate(tokens):
        if not is_env_assignment(token):
            return index
    return 0


def _first_operand(wrapper: str, args: Sequence[str]) -> Optional[str]:
    """First argument of a wrapper that is neither an option, an option value, nor an assignment."""
    value_options = WRAPPER_VALUE_OPTIONS.get(wrapper, frozenset())
    skip_next = False

    for arg in args:
        if skip_next:
            skip_next = False
            continue
        if arg in value_options:
            skip_next = True
            continue
        if arg.startswith("-") or is_env_assignment(arg):
            continue
        return arg

    return None


def invoked_command(record: CommandRecord) -> str:
    """The first token after leading env assignments (before unwrapping)."""
    tokens = (record.command, *record.args)
    return tokens[_skip_env_assignments(tokens)]


def get_base_command(record: CommandRecord) -> str:
    """
    Resolve the command name used for counting and categorization.

    Leading `KEY=VALUE` assignments are skipped, then a single wrapper level
    (sudo, doas, time, nice, nohup, strace, ltrace) is unwrapped. A wrapper
    with no operand resolves to itself.

    Args:
        record: Parsed history record

    Returns:
        Resolved command name

    Example:
        >>> get_base_command(CommandRecord(raw="sudo -u root ls", command="sudo", args=("-u", "root", "ls")))
        'ls'
    """
    tokens = (record.command, *record.args)
    start = _skip_env_assignments(tokens)
    command = tokens[start]

    if command in WRAPPER_COMMANDS:
        operand = _first_operand(command, tokens[start + 1 :])
        if operand is not None:
            return operand

    return command


def is_privileged(record: CommandRecord) -> bool:
    """Whether the record was run through sudo/doas."""
    return invoked_command(record) in PRIVILEGE_COMMANDS
