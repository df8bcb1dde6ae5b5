"""Command: render a command list without sending it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from swaycmd.commands._base import SwayCommand

if TYPE_CHECKING:
    from swaycmd.commands._context import AppContext


@click.command(
    cls=SwayCommand,
    examples=[
        ["render", "workspace 5", "border none"],
        ["render", '[app_id="mpv"]floating enable'],
        ["--json", "render", "reload"],
    ],
)
@click.argument("commands", nargs=-1, required=True)
@click.pass_obj
def render(app: AppContext, commands: tuple[str, ...]) -> None:
    """Join COMMANDS into one ';'-separated command list and print it."""
    app.emit(app.dispatch.render(commands))
