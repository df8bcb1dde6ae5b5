"""Tests for config-file-only commands."""

from __future__ import annotations

import pytest

from swaycmd.domain.configfile import (
    Bar,
    DefaultOrientation,
    Include,
    Orientation,
    SwaybgCommand,
    SwaynagCommand,
    WorkspaceLayout,
    WorkspaceLayoutMode,
    Xwayland,
    XwaylandMode,
    render_config_command,
)


class TestRenderConfigCommand:
    @pytest.mark.parametrize(
        ("command", "expected"),
        [
            (DefaultOrientation(Orientation.AUTO), "default_orientation auto"),
            (Include("~/.config/sway/config.d/*"), "include ~/.config/sway/config.d/*"),
            (SwaybgCommand("-"), "swaybg_command -"),
            (SwaynagCommand("swaynag"), "swaynag_command swaynag"),
            (WorkspaceLayout(WorkspaceLayoutMode.TABBED), "workspace_layout tabbed"),
            (Xwayland(XwaylandMode.FORCE), "xwayland force"),
        ],
    )
    def test_render(self, command: object, expected: str) -> None:
        assert render_config_command(command) == expected  # type: ignore[arg-type]

    def test_bar_with_id_and_subcommands(self) -> None:
        bar = Bar("main", ("position top", "mode dock"))
        assert render_config_command(bar) == "bar main position top mode dock"

    def test_bare_bar_keeps_slots(self) -> None:
        assert render_config_command(Bar()) == "bar  "

    def test_not_a_config_command(self) -> None:
        with pytest.raises(TypeError):
            render_config_command("include x")  # type: ignore[arg-type]
