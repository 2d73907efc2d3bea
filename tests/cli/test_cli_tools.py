"""Tests for ``ghmcp tools`` CLI command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from ghmcp.cli import main


class TestToolsCommand:
    def test_table(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["tools"])

        assert result.exit_code == 0
        assert "GitHub Tools" in result.output
        assert "github_list_repos" in result.output
        assert "github_list_files" in result.output

    def test_json_matches_tools_list(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["tools", "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.output)
        names = [tool["name"] for tool in payload["tools"]]
        assert len(names) == 12
        assert names[0] == "github_list_repos"
        assert payload["tools"][0]["inputSchema"]["type"] == "object"

    def test_needs_no_token(self) -> None:
        runner = CliRunner(env={"GITHUB_TOKEN": None})
        result = runner.invoke(main, ["tools", "--json"])
        assert result.exit_code == 0


class TestVersion:
    def test_version_option(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "ghmcp" in result.output
        assert "0.1.0" in result.output
