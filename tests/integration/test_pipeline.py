"""
Integration tests for the parse -> analyze -> classify pipeline and JSON export.
"""

import json
from datetime import datetime

import pytest

from termwrapped import __version__
from termwrapped.contexts.parsing import EmptyHistoryError, HistoryReadError
from termwrapped.contexts.reporting import build_payload, render_report, to_json
from termwrapped.pipeline import run_pipeline


def zsh_line(moment: datetime, command: str) -> str:
    """Extended-history line for a local timestamp."""
    return f": {int(moment.timestamp())}:0;{command}"


@pytest.fixture
def git_history(write_history):
    """Two days of git-heavy zsh history."""
    day_one = datetime(2024, 3, 4, 10, 0)
    day_two = datetime(2024, 3, 5, 23, 30)
    return write_history(
        [
            zsh_line(day_one, "git status"),
            zsh_line(day_one, "git add -A"),
            zsh_line(day_one, 'git commit -m "first pass"'),
            zsh_line(day_one, "ls -la"),
            zsh_line(day_two, "git pull"),
            zsh_line(day_two, "cd ~/projects"),
            zsh_line(day_two, "git push"),
            zsh_line(day_two, "sudo apt update"),
            zsh_line(day_two, "git log | head"),
        ]
    )


class TestRunPipeline:
    """Tests for run_pipeline."""

    @pytest.mark.integration
    def test_git_heavy_history(self, git_history):
        """Test a git-heavy history is classified as the git archetype."""
        result = run_pipeline(git_history, "zsh")

        assert result.stats.total_commands == 9
        assert result.stats.top_command == "git"
        assert result.stats.has_time_data is True
        assert result.stats.longest_streak == 2
        assert result.stats.sudo_count == 1
        assert result.stats.pipe_count == 1
        assert result.archetype.name == "THE GIT GLADIATOR"
        assert result.dataset.line_count == 9
        assert result.parse_time >= 0

    @pytest.mark.integration
    def test_bash_history_without_timestamps(self, write_history):
        """Test bash histories produce counts but no time data."""
        path = write_history(["ls", "docker ps", "docker compose up", "kubectl get pods"])

        result = run_pipeline(path, "bash")

        assert result.stats.has_time_data is False
        assert result.stats.categories == {"Containers": 3, "Navigation": 1}
        assert result.archetype.name == "THE DOCKER CAPTAIN"

    @pytest.mark.integration
    def test_top_n_limits_display_only(self, git_history):
        """Test top_n trims the shown list while stats keep the full ranking."""
        result = run_pipeline(git_history, "zsh", top_n=2)

        assert [entry.command for entry in result.shown_top_commands] == ["git", "ls"]
        assert [entry.command for entry in result.stats.top_commands] == ["git", "ls", "cd", "apt"]

    @pytest.mark.integration
    @pytest.mark.parametrize("top_n", [1, 2, 10, 50])
    def test_top_n_never_changes_archetype(self, write_history, top_n):
        """Test the archetype is scored on the full top list whatever top_n is."""
        path = write_history(["ls"] * 5 + ["python3 a.py"] * 4)

        result = run_pipeline(path, "bash", top_n=top_n)

        assert result.archetype.name == "THE SCRIPT SORCERER"
        assert result.stats == run_pipeline(path, "bash").stats

    @pytest.mark.integration
    def test_empty_history(self, write_history):
        """Test a history with only blank lines raises EmptyHistoryError."""
        path = write_history(["", "   "])

        with pytest.raises(EmptyHistoryError, match="No commands found"):
            run_pipeline(path, "zsh")

    @pytest.mark.integration
    def test_missing_history(self, tmp_path):
        """Test an unreadable file raises HistoryReadError."""
        with pytest.raises(HistoryReadError):
            run_pipeline(tmp_path / "missing_history", "zsh")


class TestExport:
    """Tests for JSON export and the terminal report of a full run."""

    @pytest.mark.integration
    def test_payload_structure(self, git_history):
        """Test the payload carries stats, archetypes and run metadata."""
        result = run_pipeline(git_history, "zsh")

        payload = build_payload(result, __version__)

        assert set(payload) == {"stats", "archetype", "secondary_archetypes", "meta"}
        assert payload["stats"]["total_commands"] == 9
        assert payload["archetype"]["name"] == "THE GIT GLADIATOR"
        assert payload["meta"]["shell"] == "zsh"
        assert payload["meta"]["version"] == __version__
        assert payload["meta"]["history_path"] == str(git_history)
        assert payload["meta"]["line_count"] == 9

    @pytest.mark.integration
    def test_payload_trims_top_commands(self, git_history):
        """Test the exported top list honors the display limit."""
        result = run_pipeline(git_history, "zsh", top_n=1)

        payload = build_payload(result, __version__)

        assert payload["stats"]["top_commands"] == [{"command": "git", "count": 6}]
        assert payload["archetype"]["name"] == "THE GIT GLADIATOR"

    @pytest.mark.integration
    def test_json_round_trips_through_parser(self, git_history):
        """Test dates and durations serialize to JSON-native values."""
        result = run_pipeline(git_history, "zsh")

        data = json.loads(to_json(result, __version__))

        assert data["stats"]["first_command"] == result.stats.first_command.isoformat()
        assert data["stats"]["history_span"] == result.stats.history_span.total_seconds()
        assert data["stats"]["busiest_day"] == result.stats.busiest_day.isoformat()
        assert len(data["stats"]["heat_map"]) == 7
        assert all(len(hours) == 24 for hours in data["stats"]["heat_map"])

    @pytest.mark.integration
    def test_report_mentions_key_facts(self, git_history):
        """Test the rendered report contains the archetype and top command."""
        result = run_pipeline(git_history, "zsh")

        report = render_report(result.stats, result.archetype, result.secondary_archetypes)

        assert "THE GIT GLADIATOR" in report
        assert "TOP COMMANDS" in report
        assert "git" in report
        assert "Tip:" not in report

    @pytest.mark.integration
    def test_report_without_timestamps_shows_tip(self, write_history):
        """Test histories without timestamps get the EXTENDED_HISTORY tip."""
        result = run_pipeline(write_history(["ls", "pwd"]), "bash")

        report = render_report(result.stats, result.archetype)

        assert "No timestamp data" in report
        assert "setopt EXTENDED_HISTORY" in report
