"""Subcommand modules for swaycmd.

Provides register_commands() which uses deferred imports to keep
``swaycmd --help`` fast as the codebase grows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from swaycmd.commands.render import render
    from swaycmd.commands.run import run
    from swaycmd.commands.version import version
    from swaycmd.commands.workspace import workspace

    cli.add_command(render)
    cli.add_command(run)
    cli.add_command(version)
    cli.add_command(workspace)
