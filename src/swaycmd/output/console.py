"""Rich Console factory and theme for swaycmd output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  Soft wrapping keeps long
command lines on one line.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SWAY_THEME = Theme(
    {
        "sway.ok": "bold green",
        "sway.error": "bold red",
        "sway.warning": "bold yellow",
        "sway.op": "bold cyan",
        "sway.key": "dim",
        "sway.command": "bold",
        "sway.failed": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=SWAY_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
