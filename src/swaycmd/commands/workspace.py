"""Command: switch to a workspace by name or number."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from swaycmd.commands._base import SwayCommand
from swaycmd.domain.command import CommandList
from swaycmd.domain.standalone import Workspace
from swaycmd.domain.values import WorkspaceName, WorkspaceNumber

if TYPE_CHECKING:
    from swaycmd.commands._context import AppContext


@click.command(
    cls=SwayCommand,
    dry_run=True,
    examples=[
        ["workspace", "web"],
        ["workspace", "mail", "--number", "3"],
        ["workspace", "mail", "--number", "3", "--by-number"],
        ["workspace", "scratch", "--dry-run"],
    ],
)
@click.argument("name")
@click.option("--number", type=int, default=None, help="Workspace number prefix (N:NAME).")
@click.option("--by-number", is_flag=True, help="Match the workspace by number only.")
@click.pass_obj
def workspace(
    app: AppContext,
    name: str,
    number: int | None,
    by_number: bool,
    dry_run: bool,
) -> None:
    """Switch to workspace NAME, creating it if needed."""
    if by_number and number is None:
        raise click.UsageError("--by-number requires --number.")
    target = WorkspaceName(name, number)
    ref = WorkspaceNumber(target) if by_number else target
    app.emit(app.dispatch.run(CommandList([Workspace(ref)]), dry_run=dry_run))
