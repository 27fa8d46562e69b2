"""Shared fixtures for Terminal Wrapped tests."""

from pathlib import Path
from typing import Callable, List

import pytest


@pytest.fixture
def write_history(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing history lines (newline-terminated) to a file under tmp_path."""

    def _write(lines: List[str], name: str = "history") -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write
