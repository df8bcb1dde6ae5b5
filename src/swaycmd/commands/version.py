"""Command: show the swaycmd and sway versions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from swaycmd.commands._base import SwayCommand

if TYPE_CHECKING:
    from swaycmd.commands._context import AppContext


@click.command(
    cls=SwayCommand,
    examples=[
        ["version"],
        ["-v", "version"],
        ["--json", "version"],
    ],
)
@click.pass_obj
def version(app: AppContext) -> None:
    """Ask the running sway for its version."""
    app.emit(app.version_service.version())
