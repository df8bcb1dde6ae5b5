"""Commands only accepted in the configuration file, not over IPC."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from swaycmd.domain.values import or_empty, separated


class Orientation(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    AUTO = "auto"


class WorkspaceLayoutMode(StrEnum):
    DEFAULT = "default"
    STACKING = "stacking"
    TABBED = "tabbed"


class XwaylandMode(StrEnum):
    """``ENABLE`` starts Xwayland lazily; ``FORCE`` starts it immediately."""

    ENABLE = "enable"
    DISABLE = "disable"
    FORCE = "force"


@dataclass(frozen=True)
class Bar:
    """A ``bar`` block line; subcommands are passed through verbatim."""

    bar_id: str | None = None
    subcommands: tuple[str, ...] = ()


@dataclass(frozen=True)
class DefaultOrientation:
    orientation: Orientation


@dataclass(frozen=True)
class Include:
    """Include another config file; shell syntax in *path* is expanded by sway."""

    path: str


@dataclass(frozen=True)
class SwaybgCommand:
    """Background command; ``"-"`` disables it."""

    command: str


@dataclass(frozen=True)
class SwaynagCommand:
    """swaynag command; ``"-"`` disables it."""

    command: str


@dataclass(frozen=True)
class WorkspaceLayout:
    mode: WorkspaceLayoutMode


@dataclass(frozen=True)
class Xwayland:
    mode: XwaylandMode


ConfigCommand = (
    Bar
    | DefaultOrientation
    | Include
    | SwaybgCommand
    | SwaynagCommand
    | WorkspaceLayout
    | Xwayland
)

CONFIG_COMMAND_TYPES: tuple[type, ...] = ConfigCommand.__args__  # type: ignore[attr-defined]


def render_config_command(command: ConfigCommand) -> str:
    match command:
        case Bar(bar_id=bar_id, subcommands=subcommands):
            return f"bar {or_empty(bar_id)} {separated(subcommands, ' ')}"
        case DefaultOrientation(orientation=orientation):
            return f"default_orientation {orientation.value}"
        case Include(path=path):
            return f"include {path}"
        case SwaybgCommand(command=cmd):
            return f"swaybg_command {cmd}"
        case SwaynagCommand(command=cmd):
            return f"swaynag_command {cmd}"
        case WorkspaceLayout(mode=mode):
            return f"workspace_layout {mode.value}"
        case Xwayland(mode=mode):
            return f"xwayland {mode.value}"
    msg = f"Not a config command: {command!r}"
    raise TypeError(msg)
