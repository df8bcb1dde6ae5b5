"""Tests for the version command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from click.testing import CliRunner

from swaycmd import __version__
from swaycmd.cli import cli

if TYPE_CHECKING:
    from tests.conftest import FakeSway


class TestVersionCommand:
    def test_human_output(self, cli_runner: CliRunner, fake_sway: FakeSway) -> None:
        result = cli_runner.invoke(cli, ["--socket", fake_sway.path, "version"])
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "OK: version",
            f"  swaycmd: {__version__}",
            "  sway: 1.10",
        ]

    def test_json_output(self, cli_runner: CliRunner, fake_sway: FakeSway) -> None:
        result = cli_runner.invoke(cli, ["--json", "--socket", fake_sway.path, "version"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["data"]["sway"] == "1.10"
        assert data["data"]["major"] == 1

    def test_no_socket_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["version"])
        assert result.exit_code == 1
        assert "ERROR: version" in result.output

    def test_root_version_flag_does_not_connect(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbose_json_logs_carry_socket(
        self, cli_runner: CliRunner, fake_sway: FakeSway
    ) -> None:
        result = cli_runner.invoke(
            cli, ["-v", "--log-json", "--socket", fake_sway.path, "version"]
        )
        assert result.exit_code == 0, result.output
        events = [json.loads(line) for line in result.output.splitlines() if line.startswith("{")]
        sent = [e for e in events if e["event"] == "ipc_sent"]
        assert sent
        assert sent[0]["message_type"] == 7
        assert sent[0]["socket"] == fake_sway.path
