"""Command: send a command list to the running window manager."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from swaycmd.commands._base import SwayCommand

if TYPE_CHECKING:
    from swaycmd.commands._context import AppContext


@click.command(
    cls=SwayCommand,
    dry_run=True,
    examples=[
        ["run", "workspace 5", "exec foot"],
        ["run", "--dry-run", '[class="Firefox"]kill'],
        ["--socket", "/run/user/1000/sway-ipc.sock", "run", "reload"],
    ],
)
@click.argument("commands", nargs=-1, required=True)
@click.pass_obj
def run(app: AppContext, commands: tuple[str, ...], dry_run: bool) -> None:
    """Send COMMANDS to sway as one IPC message."""
    app.emit(app.dispatch.run(commands, dry_run=dry_run))
