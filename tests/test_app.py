"""Tests for the command line interface."""

from __future__ import annotations

import pytest
import yaml

from ridekick_research import app, sources
from ridekick_research.commands.run import parse_tool_args
from ridekick_research.records import ResearchRecord
from ridekick_research.tools import ToolInputError


class StaticSource:
    def __init__(self, records):
        self.records = records

    async def fetch(self, project, limit):
        return self.records


@pytest.fixture
def cli_env(tmp_path, monkeypatch, no_env):
    """Run the CLI in an empty directory without any service configuration."""

    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestMain:
    def test_help_command(self, cli_env, capsys):
        assert app.main(["help"]) == 0

        out = capsys.readouterr().out
        assert "ridekick_hypothesis" in out
        assert "ridekick_pain_points" in out

    def test_status_command(self, cli_env, capsys):
        assert app.main(["status"]) == 0

        out = capsys.readouterr().out
        assert "lore-ridekick-research 0.1.0" in out
        assert "Default project: ridekick" in out
        assert "not configured" in out
        assert "ridekick_speakers" in out

    def test_status_reads_settings(self, cli_env, capsys):
        (cli_env / "ridekick.yaml").write_text("default_project: carbuy\n", encoding="utf-8")

        assert app.main(["status"]) == 0
        assert "Default project: carbuy" in capsys.readouterr().out

    def test_missing_explicit_config(self, cli_env, capsys):
        assert app.main(["status", "--config", "nope.yaml"]) == 2
        assert "Settings file not found" in capsys.readouterr().err

    def test_run_without_credentials(self, cli_env, capsys):
        assert app.main(["run", "ridekick_pain_points"]) == 2
        assert "SUPABASE_URL" in capsys.readouterr().err

    def test_run_unknown_tool(self, cli_env, capsys):
        assert app.main(["run", "ridekick_unknown"]) == 2
        assert "Unknown tool" in capsys.readouterr().err

    def test_run_missing_argument(self, cli_env, capsys):
        assert app.main(["run", "ridekick_hypothesis"]) == 2
        assert "hypothesis is required" in capsys.readouterr().err

    def test_run_prints_yaml(self, cli_env, capsys, monkeypatch):
        records = [
            ResearchRecord(id="1", title="A", summary="The pricing was confusing and I felt scammed"),
        ]
        monkeypatch.setattr(sources, "select_source", lambda context: StaticSource(records))

        assert app.main(["run", "ridekick_pain_points", "--arg", "limit=2"]) == 0

        result = yaml.safe_load(capsys.readouterr().out)
        assert result["total_sources_analyzed"] == 1
        assert [p["category"] for p in result["pain_points"]] == ["Pricing Confusion", "Trust Issues"]
        assert result["top_pain_point"] == "Pricing Confusion"


class TestParseToolArgs:
    def test_pairs(self):
        assert parse_tool_args(["a=1", "hypothesis=x = y"]) == {"a": "1", "hypothesis": "x = y"}

    def test_invalid_pair(self):
        with pytest.raises(ToolInputError):
            parse_tool_args(["novalue"])


class TestCommandRepository:
    def test_registered_commands(self):
        repository = app._command_repository()

        assert list(repository) == ["status", "help", "run"]
        for name, command in repository.items():
            assert command.name == name
            assert command.help
            assert isinstance(command.requires_config, bool)

    def test_config_option_only_where_required(self, capsys):
        repository = app._command_repository()

        assert [n for n, c in repository.items() if c.requires_config] == ["status", "run"]
        with pytest.raises(SystemExit):
            app.build_parser().parse_args(["help", "--config", "x.yaml"])
