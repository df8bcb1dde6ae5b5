"""Root CLI group for swaycmd with global flags and command registration."""

from __future__ import annotations

import click

from swaycmd import __version__
from swaycmd.commands import register_commands
from swaycmd.commands._base import PROG_NAME, SwayGroup
from swaycmd.commands._context import AppContext
from swaycmd.config.settings import SwaycmdSettings


@click.group(
    name=PROG_NAME,
    cls=SwayGroup,
    invoke_without_command=True,
    examples=[
        ["render", "workspace 5", "border none"],
        ["run", "exec foot"],
        ["--json", "workspace", "web", "--dry-run"],
        ["version"],
    ],
)
@click.version_option(version=__version__, prog_name=PROG_NAME)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--socket", default=None, help="Sway IPC socket path (default: $SWAYSOCK).")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    socket: str | None,
) -> None:
    """swaycmd: build and send sway commands."""
    ctx.ensure_object(dict)
    flags: dict[str, object] = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    if socket:
        flags["socket"] = socket
    settings = SwaycmdSettings.from_cli(config_path=config_path, **flags)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
