"""
Unit tests for the shell history parser.

Tests tokenization, continuation merging, zsh timestamps and error handling in
termwrapped.contexts.parsing.
"""

from datetime import datetime

import pytest

from termwrapped.contexts.parsing import HistoryReadError, parse, split_command_parts
from termwrapped.contexts.parsing.history_parser import iter_logical_lines, parse_command


class TestSplitCommandParts:
    """Tests for quote-aware tokenization."""

    @pytest.mark.unit
    def test_double_quotes_keep_spaces(self):
        """Test quoted argument stays one token with its quotes."""
        assert split_command_parts('git commit -m "fix bug"') == [
            "git",
            "commit",
            "-m",
            '"fix bug"',
        ]

    @pytest.mark.unit
    def test_other_quote_does_not_close(self):
        """Test a single quote inside double quotes is literal."""
        assert split_command_parts('echo "it\'s here" done') == ["echo", '"it\'s here"', "done"]

    @pytest.mark.unit
    def test_tabs_and_repeated_spaces(self):
        """Test runs of spaces/tabs separate tokens."""
        assert split_command_parts("ls \t  -la\t/tmp") == ["ls", "-la", "/tmp"]

    @pytest.mark.unit
    def test_unclosed_quote_runs_to_end(self):
        """Test an unclosed quote swallows the rest of the line."""
        assert split_command_parts('echo "a b') == ["echo", '"a b']

    @pytest.mark.unit
    def test_blank_line(self):
        """Test blank input has no tokens."""
        assert split_command_parts("   \t ") == []


class TestParseCommand:
    """Tests for single logical line parsing."""

    @pytest.mark.unit
    def test_bash_line(self):
        """Test command and args split for a plain line."""
        record = parse_command("git status --short", "bash")

        assert record.command == "git"
        assert record.args == ("status", "--short")
        assert record.raw == "git status --short"
        assert record.has_time is False

    @pytest.mark.unit
    def test_zsh_extended_line(self):
        """Test timestamp extraction and prefix stripping."""
        record = parse_command(": 1700000000:0;cd /tmp", "zsh")

        assert record.has_time is True
        assert record.timestamp == datetime.fromtimestamp(1700000000)
        assert record.raw == "cd /tmp"
        assert record.command == "cd"

    @pytest.mark.unit
    def test_zsh_line_without_prefix(self):
        """Test a zsh line in plain format has no timestamp."""
        record = parse_command("ls -la", "zsh")

        assert record.has_time is False
        assert record.command == "ls"

    @pytest.mark.unit
    def test_bash_never_extracts_timestamps(self):
        """Test the zsh prefix is just text for bash."""
        record = parse_command(": 1700000000:0;ls", "bash")

        assert record.has_time is False
        assert record.command == ":"
        assert record.raw == ": 1700000000:0;ls"

    @pytest.mark.unit
    def test_empty_zsh_command_is_skipped(self):
        """Test a timestamped line with no command yields nothing."""
        assert parse_command(": 1700000000:0;   ", "zsh") is None

    @pytest.mark.unit
    def test_epoch_zero_has_time(self):
        """Test epoch zero is a timestamp, not missing data."""
        record = parse_command(": 0:0;ls", "zsh")

        assert record.has_time is True
        assert record.timestamp == datetime.fromtimestamp(0)


class TestIterLogicalLines:
    """Tests for backslash continuation merging."""

    @pytest.mark.unit
    def test_continuation_merges_with_newline(self):
        """Test continued lines are joined and numbered by their first line."""
        lines = ["a \\\n", "b\n", "c\n"]

        assert list(iter_logical_lines(lines)) == [(1, "a \\\nb"), (3, "c")]

    @pytest.mark.unit
    def test_open_continuation_flushed_at_eof(self):
        """Test a continuation still open at end of input is emitted."""
        lines = ["a \\\n", "b \\\n"]

        assert list(iter_logical_lines(lines)) == [(1, "a \\\nb \\")]

    @pytest.mark.unit
    def test_crlf_line_endings(self):
        """Test Windows line endings are stripped before the continuation check."""
        lines = ["a \\\r\n", "b\r\n"]

        assert list(iter_logical_lines(lines)) == [(1, "a \\\nb")]


class TestParse:
    """Tests for whole-file parsing."""

    @pytest.mark.unit
    def test_bash_history(self, write_history):
        """Test plain bash history keeps order and has no timestamps."""
        path = write_history(["git status", "git commit -m x", "ls"])

        dataset = parse(path, "bash")

        assert [record.command for record in dataset.commands] == ["git", "git", "ls"]
        assert dataset.has_any_timestamps is False
        assert dataset.shell == "bash"
        assert dataset.source_path == path
        assert dataset.line_count == 3
        assert len(dataset) == 3

    @pytest.mark.unit
    def test_zsh_history_timestamps(self, write_history):
        """Test every extended-format record carries its timestamp."""
        path = write_history([": 1700000000:0;cd /tmp", ": 1700003600:0;ls"])

        dataset = parse(path, "zsh")

        assert dataset.has_any_timestamps is True
        assert all(record.has_time for record in dataset.commands)
        assert dataset.commands[0].timestamp == datetime.fromtimestamp(1700000000)
        assert dataset.commands[1].timestamp == datetime.fromtimestamp(1700003600)

    @pytest.mark.unit
    def test_multiline_command(self, write_history):
        """Test a backslash-continued line becomes one record with an embedded newline."""
        path = write_history(["docker run \\", "  -it ubuntu"])

        dataset = parse(path, "bash")

        assert len(dataset.commands) == 1
        record = dataset.commands[0]
        assert "\n" in record.raw
        assert record.command == "docker"
        assert dataset.line_count == 2

    @pytest.mark.unit
    def test_multiline_zsh_command_keeps_timestamp(self, write_history):
        """Test continuation lines do not lose the zsh timestamp."""
        path = write_history([": 1700000000:0;echo one \\", "two"])

        dataset = parse(path, "zsh")

        assert len(dataset.commands) == 1
        assert dataset.commands[0].has_time is True
        assert dataset.commands[0].raw == "echo one \\\ntwo"

    @pytest.mark.unit
    def test_blank_lines_skipped_but_counted(self, write_history):
        """Test blank lines yield no record but count as read lines."""
        path = write_history(["ls", "", "   ", "pwd"])

        dataset = parse(path, "bash")

        assert [record.command for record in dataset.commands] == ["ls", "pwd"]
        assert dataset.line_count == 4

    @pytest.mark.unit
    def test_unparseable_timestamp_skips_line(self, write_history):
        """Test an out-of-range epoch skips only that line."""
        path = write_history([": 99999999999999999999:0;ls", ": 1700000000:0;pwd"])

        dataset = parse(path, "zsh")

        assert [record.command for record in dataset.commands] == ["pwd"]

    @pytest.mark.unit
    def test_empty_file(self, write_history):
        """Test an empty file parses to an empty dataset."""
        path = write_history([])

        dataset = parse(path, "zsh")

        assert dataset.commands == ()
        assert dataset.line_count == 0

    @pytest.mark.unit
    def test_missing_file_raises(self, tmp_path):
        """Test a missing file raises HistoryReadError (an OSError)."""
        missing = tmp_path / "nope"

        with pytest.raises(HistoryReadError) as excinfo:
            parse(missing, "zsh")

        assert isinstance(excinfo.value, OSError)
        assert excinfo.value.path == missing
        assert "--history" in str(excinfo.value)
