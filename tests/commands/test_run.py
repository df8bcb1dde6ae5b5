"""Tests for the run command against a fake window manager."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from swaycmd.cli import cli
from swaycmd.infrastructure.ipc import RUN_COMMAND

if TYPE_CHECKING:
    from tests.conftest import FakeSway


class TestRunCommand:
    def test_sends_one_message(self, cli_runner: CliRunner, fake_sway: FakeSway) -> None:
        result = cli_runner.invoke(
            cli, ["--socket", fake_sway.path, "run", "workspace 5", "exec foot"]
        )
        assert result.exit_code == 0, result.output
        assert "OK: run" in result.output
        assert fake_sway.commands == ["workspace 5;exec foot"]

    def test_uses_swaysock(
        self,
        cli_runner: CliRunner,
        fake_sway: FakeSway,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("SWAYSOCK", fake_sway.path)
        result = cli_runner.invoke(cli, ["run", "reload"])
        assert result.exit_code == 0, result.output
        assert fake_sway.commands == ["reload"]

    def test_dry_run_does_not_connect(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "run", "--dry-run", "kill"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"] == {"command": "kill", "count": 1, "dry_run": True}

    def test_command_failure_exits_1(self, cli_runner: CliRunner, fake_sway: FakeSway) -> None:
        fake_sway.replies[RUN_COMMAND] = [
            {"success": False, "parse_error": True, "error": "Unknown/invalid command 'frob'"}
        ]
        result = cli_runner.invoke(cli, ["--socket", fake_sway.path, "run", "frob"])
        assert result.exit_code == 1
        assert "ERROR: run" in result.output
        assert "Unknown/invalid command 'frob'" in result.output

    def test_no_socket_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "run", "reload"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "NO_SOCKET"

    def test_quiet_prints_command(self, cli_runner: CliRunner, fake_sway: FakeSway) -> None:
        result = cli_runner.invoke(cli, ["-q", "--socket", fake_sway.path, "run", "reload"])
        assert result.exit_code == 0
        assert result.output.strip() == "reload"
