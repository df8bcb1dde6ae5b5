"""Click base classes shared by every swaycmd command.

Examples are given as argument lists rather than prose, so the same
data can be printed by ``--examples`` and invoked by the test suite.
Each list is the full argv after the program name::

    @click.command(cls=SwayCommand, dry_run=True, examples=[
        ["run", "workspace 5", "exec foot"],
        ["--json", "run", "--dry-run", '[class="Firefox"]kill'],
    ])

``--examples`` quotes every argument for the shell, so a criteria clause
comes out exactly as it would have to be typed.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from typing import Any

import click

PROG_NAME = "swaycmd"

Example = Sequence[str]


def format_examples(examples: Sequence[Example]) -> str:
    """Render argument lists as indented, shell-quoted command lines."""
    return "\n".join(f"  {shlex.join([PROG_NAME, *argv])}" for argv in examples)


def _add_examples_option(cmd: click.Command, examples: Sequence[Example]) -> None:
    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(format_examples(examples))
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class SwayCommand(click.Command):
    """Command with an optional ``--examples`` flag and ``--dry-run`` option.

    With ``dry_run=True`` the callback receives a ``dry_run`` keyword,
    for commands that would otherwise send something to sway.
    """

    def __init__(
        self,
        *args: Any,
        examples: Sequence[Example] | None = None,
        dry_run: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples: tuple[Example, ...] = tuple(examples or ())
        if dry_run:
            self.params.append(
                click.Option(
                    ["--dry-run"],
                    is_flag=True,
                    help="Render the command list without sending it.",
                )
            )
        if self.examples:
            _add_examples_option(self, self.examples)


class SwayGroup(click.Group):
    """Root group; subcommands default to :class:`SwayCommand`."""

    command_class = SwayCommand

    def __init__(
        self, *args: Any, examples: Sequence[Example] | None = None, **kwargs: Any
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples: tuple[Example, ...] = tuple(examples or ())
        if self.examples:
            _add_examples_option(self, self.examples)
