"""Sub-commands: operations on the focused or criteria-selected window.

Every sub-command is a frozen dataclass named after its keyword.  Any of
them can follow a criteria clause inside a
:class:`~swaycmd.domain.command.TargetedCommand`.  Text is produced by
:func:`render_subcommand`, one ``match`` over the whole family.

Optional arguments keep their slot when absent: ``Border(BorderStyle.normal())``
renders ``"border normal "`` with the trailing space.  Sway tolerates the
extra whitespace.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from swaycmd.domain.values import (
    Direction,
    EnDisable,
    EnDisTog,
    GapsDirection,
    Length,
    OutputRef,
    WorkspaceRef,
    format_number,
    or_empty,
    render_value,
    separated,
    when,
)

# --- Argument types ---


class BorderKind(StrEnum):
    NONE = "none"
    NORMAL = "normal"
    CSD = "csd"
    PIXEL = "pixel"
    TOGGLE = "toggle"


@dataclass(frozen=True)
class BorderStyle:
    """A border style; ``normal`` and ``pixel`` take an optional thickness.

    Use the constructors rather than the raw fields so a thickness is
    only ever attached to the styles that accept one.
    """

    kind: BorderKind
    thickness: int | None = None

    @classmethod
    def none(cls) -> BorderStyle:
        return cls(BorderKind.NONE)

    @classmethod
    def normal(cls, thickness: int | None = None) -> BorderStyle:
        """Title bar plus a border *thickness* pixels wide."""
        return cls(BorderKind.NORMAL, thickness)

    @classmethod
    def csd(cls) -> BorderStyle:
        """Let the client draw its own decorations."""
        return cls(BorderKind.CSD)

    @classmethod
    def pixel(cls, thickness: int | None = None) -> BorderStyle:
        """Border without title bar."""
        return cls(BorderKind.PIXEL, thickness)

    @classmethod
    def toggle(cls) -> BorderStyle:
        """Cycle through the available styles."""
        return cls(BorderKind.TOGGLE)


def render_border_style(style: BorderStyle) -> str:
    if style.kind in (BorderKind.NORMAL, BorderKind.PIXEL):
        return f"{style.kind.value} {or_empty(style.thickness)}"
    return style.kind.value


class FocusTarget(StrEnum):
    """Focus targets that take no argument.

    ``THIS`` focuses the window picked by the criteria and renders as an
    empty slot (``focus ``).
    """

    THIS = ""
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"
    CHILD = "child"
    PARENT = "parent"
    TILING = "tiling"
    FLOATING = "floating"
    MODE_TOGGLE = "mode_toggle"


class Cycle(StrEnum):
    PREV = "prev"
    NEXT = "next"


@dataclass(frozen=True)
class FocusCycle:
    """Focus the previous/next container in the current layout.

    With ``sibling`` the focus stays on the container itself instead of
    descending into its last active child.
    """

    cycle: Cycle
    sibling: bool = False


@dataclass(frozen=True)
class FocusOutput:
    output: OutputRef


FocusArg = FocusTarget | FocusCycle | FocusOutput


class GapsScope(StrEnum):
    ALL = "all"
    CURRENT = "current"


class GapsChange(StrEnum):
    SET = "set"
    PLUS = "plus"
    MINUS = "minus"
    TOGGLE = "toggle"


class IdleInhibit(StrEnum):
    FOCUS = "focus"
    FULLSCREEN = "fullscreen"
    OPEN = "open"
    NONE = "none"
    VISIBLE = "visible"


class LayoutMode(StrEnum):
    DEFAULT = "default"
    SPLITH = "splith"
    SPLITV = "splitv"
    STACKING = "stacking"
    TABBED = "tabbed"


class LayoutCycle(StrEnum):
    """Preset cycles for ``layout toggle``."""

    SPLIT = "split"
    ALL = "all"


class LayoutOption(StrEnum):
    SPLIT = "split"
    TABBED = "tabbed"
    STACKING = "stacking"
    SPLITV = "splitv"
    SPLITH = "splith"


@dataclass(frozen=True)
class LayoutToggle:
    """``layout toggle`` over a preset cycle, an explicit list, or the default.

    ``over=None`` cycles through stacking, tabbed and the last split
    layout and leaves an empty slot (``layout toggle ``).
    """

    over: LayoutCycle | tuple[LayoutOption, ...] | None = None


class MarkMode(StrEnum):
    ADD = "--add"
    ADD_TOGGLE = "--add --toggle"
    REPLACE = "--replace"
    REPLACE_TOGGLE = "--replace --toggle"


class OpacityChange(StrEnum):
    SET = "set"
    PLUS = "plus"
    MINUS = "minus"


class ResizeAction(StrEnum):
    GROW = "grow"
    SHRINK = "shrink"


class Dimension(StrEnum):
    WIDTH = "width"
    HEIGHT = "height"


@dataclass(frozen=True)
class ResizeBy:
    """Grow or shrink one dimension; units omitted use the container default."""

    action: ResizeAction
    dimension: Dimension
    amount: Length


@dataclass(frozen=True)
class ResizeSet:
    """Set width and/or height.  A size of 0 leaves that axis unchanged."""

    width: Length | None = None
    height: Length | None = None


class SplitMode(StrEnum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    NONE = "none"
    TOGGLE = "toggle"


class SwapKind(StrEnum):
    ID = "id"
    CON_ID = "con_id"
    MARK = "mark"


class UrgentAction(StrEnum):
    ENABLE = "enable"
    DISABLE = "disable"
    ALLOW = "allow"
    DENY = "deny"


# --- Move targets ---


@dataclass(frozen=True)
class MoveDirection:
    """Move in *direction*; pixels only apply to floating containers."""

    direction: Direction
    pixels: int


@dataclass(frozen=True)
class MovePosition:
    x: Length
    y: Length


@dataclass(frozen=True)
class MoveAbsolutePosition:
    """Position relative to the union of all outputs, in pixels."""

    x: int
    y: int


class MovePlacement(StrEnum):
    POSITION_CENTER = "position center"
    ABSOLUTE_POSITION_CENTER = "absolute position center"
    POSITION_CURSOR = "position cursor"
    SCRATCHPAD = "container to scratchpad"


@dataclass(frozen=True)
class MoveToMark:
    mark: str


@dataclass(frozen=True)
class MoveToWorkspace:
    workspace: WorkspaceRef
    no_auto_back_and_forth: bool = False


@dataclass(frozen=True)
class MoveContainerToOutput:
    output: OutputRef


@dataclass(frozen=True)
class MoveWorkspaceToOutput:
    output: OutputRef


MoveTarget = (
    MoveDirection
    | MovePosition
    | MoveAbsolutePosition
    | MovePlacement
    | MoveToMark
    | MoveToWorkspace
    | MoveContainerToOutput
    | MoveWorkspaceToOutput
)


# --- Sub-command variants ---


@dataclass(frozen=True)
class Border:
    style: BorderStyle


@dataclass(frozen=True)
class Exit:
    """End the session."""


@dataclass(frozen=True)
class Floating:
    state: EnDisTog


@dataclass(frozen=True)
class Focus:
    target: FocusArg


@dataclass(frozen=True)
class Fullscreen:
    """Fullscreen on one output, or across all of them with ``global_``."""

    state: EnDisTog
    global_: bool = False


@dataclass(frozen=True)
class Gaps:
    direction: GapsDirection
    scope: GapsScope
    change: GapsChange
    amount: int


@dataclass(frozen=True)
class InhibitIdle:
    mode: IdleInhibit


@dataclass(frozen=True)
class Kill:
    pass


@dataclass(frozen=True)
class Layout:
    mode: LayoutMode | LayoutToggle


@dataclass(frozen=True)
class Mark:
    identifier: str
    mode: MarkMode = MarkMode.REPLACE


@dataclass(frozen=True)
class MaxRenderTime:
    """Render deadline in milliseconds before composition; ``None`` is ``off``."""

    msec: int | None = None


@dataclass(frozen=True)
class Move:
    target: MoveTarget


@dataclass(frozen=True)
class Nop:
    """No-op; the optional comment is only logged by sway."""

    comment: str | None = None


@dataclass(frozen=True)
class Opacity:
    change: OpacityChange
    value: float


@dataclass(frozen=True)
class Reload:
    pass


@dataclass(frozen=True)
class RenameWorkspace:
    """Rename *old_name*, or the focused workspace when it is omitted."""

    new_name: str
    old_name: str | None = None


@dataclass(frozen=True)
class Resize:
    change: ResizeBy | ResizeSet


@dataclass(frozen=True)
class ScratchpadShow:
    pass


@dataclass(frozen=True)
class ShortcutsInhibitor:
    state: EnDisable


@dataclass(frozen=True)
class Split:
    mode: SplitMode


@dataclass(frozen=True)
class Sticky:
    state: EnDisTog


@dataclass(frozen=True)
class Swap:
    """Swap with the container identified by *kind* and *value*."""

    kind: SwapKind
    value: str


@dataclass(frozen=True)
class TitleFormat:
    """Window title format; placeholders like ``%title`` pass through as-is."""

    format: str


@dataclass(frozen=True)
class Unmark:
    identifier: str | None = None


@dataclass(frozen=True)
class UrgentHint:
    action: UrgentAction


SubCommand = (
    Border
    | Exit
    | Floating
    | Focus
    | Fullscreen
    | Gaps
    | InhibitIdle
    | Kill
    | Layout
    | Mark
    | MaxRenderTime
    | Move
    | Nop
    | Opacity
    | Reload
    | RenameWorkspace
    | Resize
    | ScratchpadShow
    | ShortcutsInhibitor
    | Split
    | Sticky
    | Swap
    | TitleFormat
    | Unmark
    | UrgentHint
)

SUBCOMMAND_TYPES: tuple[type, ...] = SubCommand.__args__  # type: ignore[attr-defined]


# --- Rendering ---


def _render_focus(target: FocusArg) -> str:
    match target:
        case FocusCycle(cycle=cycle, sibling=sibling):
            return f"{cycle.value} {when(sibling, 'sibling')}"
        case FocusOutput(output=output):
            return f"output {render_value(output)}"
    return render_value(target)


def _render_layout(mode: LayoutMode | LayoutToggle) -> str:
    match mode:
        case LayoutToggle(over=None):
            return "toggle "
        case LayoutToggle(over=tuple() as options):
            return f"toggle {separated(options, ' ')}"
        case LayoutToggle(over=cycle):
            return f"toggle {render_value(cycle)}"
    return render_value(mode)


def _render_move(target: MoveTarget) -> str:
    match target:
        case MoveDirection(direction=direction, pixels=pixels):
            return f"{direction.value} {pixels} px"
        case MovePosition(x=x, y=y):
            return f"position {render_value(x)} {render_value(y)}"
        case MoveAbsolutePosition(x=x, y=y):
            return f"absolute position {x} px {y} px"
        case MoveToMark(mark=mark):
            return f"container to mark {mark}"
        case MoveToWorkspace(workspace=workspace, no_auto_back_and_forth=flag):
            prefix = when(flag, "--no-auto-back-and-forth ")
            return f"{prefix}container to workspace {render_value(workspace)}"
        case MoveContainerToOutput(output=output):
            return f"container to output {render_value(output)}"
        case MoveWorkspaceToOutput(output=output):
            return f"workspace to output {render_value(output)}"
    return render_value(target)


def _render_resize(change: ResizeBy | ResizeSet) -> str:
    match change:
        case ResizeBy(action=action, dimension=dimension, amount=amount):
            return f"{action.value} {dimension.value} {render_value(amount)}"
        case ResizeSet(width=width, height=None):
            return f"set width {or_empty(width)}"
        case ResizeSet(width=None, height=height):
            return f"set height {render_value(height)}"
        case ResizeSet(width=width, height=height):
            return f"set width {render_value(width)} height {render_value(height)}"
    msg = f"Not a resize change: {change!r}"
    raise TypeError(msg)


def render_subcommand(command: SubCommand) -> str:
    """Render a sub-command to protocol text."""
    match command:
        case Border(style=style):
            return f"border {render_border_style(style)}"
        case Exit():
            return "exit"
        case Floating(state=state):
            return f"floating {state.value}"
        case Focus(target=target):
            return f"focus {_render_focus(target)}"
        case Fullscreen(state=state, global_=global_):
            return f"fullscreen {state.value} {when(global_, 'global')}"
        case Gaps(direction=direction, scope=scope, change=change, amount=amount):
            return f"gaps {direction.value} {scope.value} {change.value} {amount}"
        case InhibitIdle(mode=mode):
            return f"inhibit_idle {mode.value}"
        case Kill():
            return "kill"
        case Layout(mode=mode):
            return f"layout {_render_layout(mode)}"
        case Mark(identifier=identifier, mode=mode):
            return f"mark {mode.value} {identifier}"
        case MaxRenderTime(msec=None):
            return "max_render_time off"
        case MaxRenderTime(msec=msec):
            return f"max_render_time {msec}"
        case Move(target=target):
            return f"move {_render_move(target)}"
        case Nop(comment=comment):
            return f"nop {or_empty(comment)}"
        case Opacity(change=change, value=value):
            return f"opacity {change.value} {format_number(value)}"
        case Reload():
            return "reload"
        case RenameWorkspace(new_name=new_name, old_name=None):
            return f"rename workspace to {new_name}"
        case RenameWorkspace(new_name=new_name, old_name=old_name):
            return f"rename workspace {old_name} to {new_name}"
        case Resize(change=change):
            return f"resize {_render_resize(change)}"
        case ScratchpadShow():
            return "scratchpad show"
        case ShortcutsInhibitor(state=state):
            return f"shortcuts_inhibitor {state.value}"
        case Split(mode=mode):
            return f"split {mode.value}"
        case Sticky(state=state):
            return f"sticky {state.value}"
        case Swap(kind=kind, value=value):
            return f"swap container with {kind.value} {value}"
        case TitleFormat(format=format_):
            return f"title_format {format_}"
        case Unmark(identifier=identifier):
            return f"unmark {or_empty(identifier)}"
        case UrgentHint(action=action):
            return f"urgent {action.value}"
    msg = f"Not a sub-command: {command!r}"
    raise TypeError(msg)
