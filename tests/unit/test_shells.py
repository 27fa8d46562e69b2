"""
Unit tests for shell detection and history path resolution.
"""

from pathlib import Path

import pytest

from termwrapped.contexts.parsing.shells import detect_shell, get_history_path


class TestDetectShell:
    """Tests for detect_shell."""

    @pytest.mark.unit
    def test_explicit_wins(self, monkeypatch):
        """Test an explicit shell is used as-is."""
        monkeypatch.setenv("SHELL", "/bin/zsh")

        assert detect_shell("bash") == "bash"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "shell_env, expected",
        [
            ("/bin/zsh", "zsh"),
            ("/usr/local/bin/bash", "bash"),
            ("/usr/bin/fish", "zsh"),
            ("", "zsh"),
        ],
    )
    def test_shell_env(self, monkeypatch, shell_env, expected):
        """Test $SHELL detection with zsh as the fallback."""
        monkeypatch.setenv("SHELL", shell_env)

        assert detect_shell() == expected

    @pytest.mark.unit
    def test_unset_shell_env(self, monkeypatch):
        """Test missing $SHELL falls back to zsh."""
        monkeypatch.delenv("SHELL", raising=False)

        assert detect_shell() == "zsh"


class TestGetHistoryPath:
    """Tests for get_history_path."""

    @pytest.mark.unit
    def test_explicit_path(self, monkeypatch, tmp_path):
        """Test an explicit path beats $HISTFILE."""
        monkeypatch.setenv("HISTFILE", str(tmp_path / "other"))

        assert get_history_path("zsh", tmp_path / "mine") == tmp_path / "mine"

    @pytest.mark.unit
    def test_histfile_env(self, monkeypatch, tmp_path):
        """Test $HISTFILE beats the shell default."""
        monkeypatch.setenv("HISTFILE", str(tmp_path / "hist"))

        assert get_history_path("bash") == tmp_path / "hist"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "shell, filename",
        [("zsh", ".zsh_history"), ("bash", ".bash_history"), ("fish", ".zsh_history")],
    )
    def test_shell_defaults(self, monkeypatch, tmp_path, shell, filename):
        """Test per-shell default files under the home directory."""
        monkeypatch.delenv("HISTFILE", raising=False)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

        assert get_history_path(shell) == tmp_path / filename
