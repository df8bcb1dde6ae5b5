"""Tests for --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from swaycmd.cli import cli
from swaycmd.commands._base import format_examples

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--examples"], ["swaycmd render", "swaycmd run"]),
    (["render", "--examples"], ["swaycmd render", "--json"]),
    (["run", "--examples"], ["--dry-run", "--socket"]),
    (["workspace", "--examples"], ["--number 3", "--by-number"]),
    (["version", "--examples"], ["swaycmd version", "swaycmd -v version"]),
]


def _examples_id(item: tuple[list[str], list[str]]) -> str:
    args, _ = item
    return "_".join(a for a in args if a != "--examples") or "root"


@pytest.mark.parametrize(
    "args,expected_keywords",
    EXAMPLES_COMMANDS,
    ids=[_examples_id(item) for item in EXAMPLES_COMMANDS],
)
def test_examples_flag(
    cli_runner: CliRunner, args: list[str], expected_keywords: list[str]
) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in examples output for {args}"


class TestExamplesEagerExit:
    """--examples exits before argument validation."""

    @pytest.mark.parametrize("command", ["render", "run", "version", "workspace"])
    def test_examples_skips_required_args(self, cli_runner: CliRunner, command: str) -> None:
        result = cli_runner.invoke(cli, [command, "--examples"])
        assert result.exit_code == 0

    @pytest.mark.parametrize("command", ["render", "run", "version", "workspace"])
    def test_examples_in_help(self, cli_runner: CliRunner, command: str) -> None:
        result = cli_runner.invoke(cli, [command, "--help"])
        assert result.exit_code == 0
        assert "--examples" in result.output


class TestExampleFormatting:
    def test_arguments_are_shell_quoted(self) -> None:
        text = format_examples([["run", "--dry-run", '[class="Firefox"]kill']])
        assert text == """  swaycmd run --dry-run '[class="Firefox"]kill'"""

    def test_one_line_per_example(self) -> None:
        text = format_examples([["version"], ["render", "workspace 5"]])
        assert text.splitlines() == ["  swaycmd version", "  swaycmd render 'workspace 5'"]


def _all_examples() -> list[list[str]]:
    found = [list(argv) for argv in cli.examples]
    for command in cli.commands.values():
        found.extend(list(argv) for argv in getattr(command, "examples", ()))
    return found


@pytest.mark.parametrize("argv", _all_examples(), ids=lambda argv: " ".join(argv))
def test_every_example_parses(cli_runner: CliRunner, argv: list[str]) -> None:
    """Each documented invocation is accepted by the parser as written."""
    result = cli_runner.invoke(cli, [*argv, "--help"])
    assert result.exit_code == 0, result.output
    assert "Usage:" in result.output
