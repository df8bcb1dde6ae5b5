"""Top-level commands that take no criteria.

Global settings, key bindings, window rules and workspace setup.  They
can be sent over IPC or written to the config file, but never follow a
criteria clause.  Binding commands embed a complete
:data:`~swaycmd.domain.command.Command` which is rendered in place.

Window rules and bindings freeze the criteria groups and targeted units
they are given, so they are immutable and hashable like every other
command here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from swaycmd.domain.criteria import CriteriaGroup
from swaycmd.domain.font import Font as FontSpec
from swaycmd.domain.font import render_font
from swaycmd.domain.runtime import BorderKind, BorderStyle, render_border_style
from swaycmd.domain.values import (
    Color,
    EnDisTog,
    GapsDirection,
    OutputRef,
    WorkspaceName,
    WorkspaceRef,
    YesNo,
    or_empty,
    render_value,
    separated,
    when,
)

if TYPE_CHECKING:
    from swaycmd.domain.command import Command
    from swaycmd.domain.runtime import SubCommand

# --- Key bindings ---


@dataclass(frozen=True)
class BindFlags:
    """Options of ``bindsym``/``bindcode``.

    Every option occupies a slot in the rendered text, so unset options
    leave runs of spaces between the ones that are set.
    """

    whole_window: bool = False
    border: bool = False
    exclude_title_bar: bool = False
    release: bool = False
    locked: bool = False
    to_code: bool = False
    input_device: str | None = None
    no_warn: bool = False
    no_repeat: bool = False
    inhibited: bool = False


@dataclass(frozen=True)
class Modifiers:
    mod1: bool = False
    mod2: bool = False
    mod3: bool = False
    mod4: bool = False
    shift: bool = False
    control: bool = False


class Group(StrEnum):
    """XKB layout group a binding is restricted to."""

    NONE = ""
    GROUP1 = "Group1+"
    GROUP2 = "Group2+"
    GROUP3 = "Group3+"
    GROUP4 = "Group4+"


@dataclass(frozen=True)
class SymKey:
    """A key combination by XKB keysym name, e.g. ``Mod4+Return``."""

    key: str
    modifiers: Modifiers = field(default_factory=Modifiers)
    group: Group = Group.NONE


@dataclass(frozen=True)
class KeyCode:
    """A key combination by numeric keycode."""

    code: int
    modifiers: Modifiers = field(default_factory=Modifiers)


@dataclass(frozen=True)
class BindswitchFlags:
    locked: bool = False
    no_warn: bool = False
    reload: bool = False


class SwitchKind(StrEnum):
    LID = "lid"
    TABLET = "tablet"


class SwitchState(StrEnum):
    ON = "on"
    OFF = "off"
    TOGGLE = "toggle"


# --- Argument enums ---


class ClientState(StrEnum):
    """Window state a ``client.<state>`` color set applies to."""

    FOCUSED = "focused"
    FOCUSED_INACTIVE = "focused_inactive"
    FOCUSED_TAB_TITLE = "focused_tab_title"
    PLACEHOLDER = "placeholder"
    UNFOCUSED = "unfocused"
    URGENT = "urgent"


class FloatingModifierMode(StrEnum):
    NORMAL = "normal"
    INVERSE = "inverse"


class MouseFocus(StrEnum):
    YES = "yes"
    NO = "no"
    ALWAYS = "always"


class WindowActivation(StrEnum):
    SMART = "smart"
    URGENT = "urgent"
    FOCUS = "focus"
    NONE = "none"


class FocusWrap(StrEnum):
    YES = "yes"
    NO = "no"
    FORCE = "force"
    WORKSPACE = "workspace"


class EdgeBorders(StrEnum):
    NONE = "none"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    BOTH = "both"
    SMART = "smart"
    SMART_NO_GAPS = "smart_no_gaps"


class SmartBorderMode(StrEnum):
    ON = "on"
    NO_GAPS = "no_gaps"
    OFF = "off"


class SmartGapsMode(StrEnum):
    ON = "on"
    OFF = "off"
    TOGGLE = "toggle"
    INVERSE_OUTER = "inverse_outer"


class MouseWarp(StrEnum):
    OUTPUT = "output"
    CONTAINER = "container"
    NONE = "none"


class PopupPolicy(StrEnum):
    SMART = "smart"
    IGNORE = "ignore"
    LEAVE_FULLSCREEN = "leave_fullscreen"


class Alignment(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# --- Command variants ---


@dataclass(frozen=True)
class AssignToWorkspace:
    criteria: CriteriaGroup
    workspace: WorkspaceRef

    def __post_init__(self) -> None:
        _snapshot_criteria(self)


@dataclass(frozen=True)
class AssignToOutput:
    criteria: CriteriaGroup
    output: OutputRef

    def __post_init__(self) -> None:
        _snapshot_criteria(self)


@dataclass(frozen=True)
class Bindsym:
    key: SymKey
    command: Command | SubCommand | str
    flags: BindFlags = field(default_factory=BindFlags)

    def __post_init__(self) -> None:
        _snapshot_command(self)


@dataclass(frozen=True)
class Bindcode:
    key: KeyCode
    command: Command | SubCommand | str
    flags: BindFlags = field(default_factory=BindFlags)

    def __post_init__(self) -> None:
        _snapshot_command(self)


@dataclass(frozen=True)
class Bindswitch:
    switch: SwitchKind
    state: SwitchState
    command: Command | SubCommand | str
    flags: BindswitchFlags = field(default_factory=BindswitchFlags)

    def __post_init__(self) -> None:
        _snapshot_command(self)


@dataclass(frozen=True)
class ClientBackground:
    """Background color shown behind empty containers (ignored by sway)."""

    color: Color


@dataclass(frozen=True)
class ClientColors:
    """Colors for one window state.

    ``child_border`` is only emitted when ``indicator`` is set, since the
    protocol reads the two positionally.
    """

    state: ClientState
    border: Color
    background: Color
    text: Color
    indicator: Color | None = None
    child_border: Color | None = None


@dataclass(frozen=True)
class DefaultBorder:
    style: BorderStyle

    def __post_init__(self) -> None:
        _check_default_border(self.style)


@dataclass(frozen=True)
class DefaultFloatingBorder:
    style: BorderStyle

    def __post_init__(self) -> None:
        _check_default_border(self.style)


@dataclass(frozen=True)
class Exec:
    command: str


@dataclass(frozen=True)
class ExecAlways:
    command: str


@dataclass(frozen=True)
class FloatingMaximumSize:
    """Size limit; ``-1`` disables it and ``0`` restores the default."""

    width: int
    height: int


@dataclass(frozen=True)
class FloatingMinimumSize:
    width: int
    height: int


@dataclass(frozen=True)
class FloatingModifier:
    """Modifier key for dragging floating windows; ``None`` leaves the slot blank."""

    modifier: str | None
    mode: FloatingModifierMode = FloatingModifierMode.NORMAL


@dataclass(frozen=True)
class FocusFollowsMouse:
    mode: MouseFocus


@dataclass(frozen=True)
class FocusOnWindowActivation:
    mode: WindowActivation


@dataclass(frozen=True)
class FocusWrapping:
    mode: FocusWrap


@dataclass(frozen=True)
class Font:
    font: FontSpec


@dataclass(frozen=True)
class ForceDisplayUrgencyHint:
    msec: int


@dataclass(frozen=True)
class TitlebarBorderThickness:
    thickness: int


@dataclass(frozen=True)
class TitlebarPadding:
    horizontal: int
    vertical: int | None = None


@dataclass(frozen=True)
class ForWindow:
    """Run *command* for every window matching *criteria* when it appears."""

    criteria: CriteriaGroup
    command: Command | SubCommand | str

    def __post_init__(self) -> None:
        _snapshot_criteria(self)
        _snapshot_command(self)


@dataclass(frozen=True)
class DefaultGaps:
    direction: GapsDirection
    amount: int


@dataclass(frozen=True)
class HideEdgeBorders:
    mode: EdgeBorders
    i3: bool = False


@dataclass(frozen=True)
class Input:
    """``input <identifier> ...``; settings are passed through verbatim."""

    identifier: str
    settings: tuple[str, ...] = ()


@dataclass(frozen=True)
class Seat:
    name: str
    settings: tuple[str, ...] = ()


@dataclass(frozen=True)
class Output:
    name: str
    settings: tuple[str, ...] = ()


@dataclass(frozen=True)
class SmartBorders:
    mode: SmartBorderMode


@dataclass(frozen=True)
class SmartGaps:
    mode: SmartGapsMode


@dataclass(frozen=True)
class Mode:
    """Switch to binding mode *name*."""

    name: str


@dataclass(frozen=True)
class DefineMode:
    """Declare binding mode *name* with its commands inline."""

    name: str
    commands: tuple[str, ...] = ()
    pango_markup: bool = False


@dataclass(frozen=True)
class MouseWarping:
    mode: MouseWarp


@dataclass(frozen=True)
class NoFocus:
    criteria: CriteriaGroup

    def __post_init__(self) -> None:
        _snapshot_criteria(self)


@dataclass(frozen=True)
class PopupDuringFullscreen:
    policy: PopupPolicy


@dataclass(frozen=True)
class SetVariable:
    """``set $name value``; *name* is given without the ``$``."""

    name: str
    value: str


@dataclass(frozen=True)
class ShowMarks:
    state: YesNo


@dataclass(frozen=True)
class TilingDrag:
    state: EnDisTog


@dataclass(frozen=True)
class TilingDragThreshold:
    threshold: int


@dataclass(frozen=True)
class TitleAlign:
    alignment: Alignment


@dataclass(frozen=True)
class Unbindswitch:
    switch: SwitchKind
    state: SwitchState


@dataclass(frozen=True)
class Unbindsym:
    key: SymKey
    flags: BindFlags = field(default_factory=BindFlags)


@dataclass(frozen=True)
class Unbindcode:
    key: KeyCode
    flags: BindFlags = field(default_factory=BindFlags)


@dataclass(frozen=True)
class Workspace:
    workspace: WorkspaceRef


@dataclass(frozen=True)
class WorkspaceGaps:
    workspace: WorkspaceName
    direction: GapsDirection
    amount: int


@dataclass(frozen=True)
class WorkspaceOutputs:
    """Pin a workspace to the first available output of a non-empty list."""

    workspace: WorkspaceName
    outputs: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.outputs:
            msg = "WorkspaceOutputs requires at least one output"
            raise ValueError(msg)


@dataclass(frozen=True)
class WorkspaceAutoBackAndForth:
    state: YesNo


StandaloneCommand = (
    AssignToWorkspace
    | AssignToOutput
    | Bindsym
    | Bindcode
    | Bindswitch
    | ClientBackground
    | ClientColors
    | DefaultBorder
    | DefaultFloatingBorder
    | Exec
    | ExecAlways
    | FloatingMaximumSize
    | FloatingMinimumSize
    | FloatingModifier
    | FocusFollowsMouse
    | FocusOnWindowActivation
    | FocusWrapping
    | Font
    | ForceDisplayUrgencyHint
    | TitlebarBorderThickness
    | TitlebarPadding
    | ForWindow
    | DefaultGaps
    | HideEdgeBorders
    | Input
    | Seat
    | Output
    | SmartBorders
    | SmartGaps
    | Mode
    | DefineMode
    | MouseWarping
    | NoFocus
    | PopupDuringFullscreen
    | SetVariable
    | ShowMarks
    | TilingDrag
    | TilingDragThreshold
    | TitleAlign
    | Unbindswitch
    | Unbindsym
    | Unbindcode
    | Workspace
    | WorkspaceGaps
    | WorkspaceOutputs
    | WorkspaceAutoBackAndForth
)

STANDALONE_TYPES: tuple[type, ...] = StandaloneCommand.__args__  # type: ignore[attr-defined]

_DEFAULT_BORDER_KINDS = frozenset({BorderKind.NONE, BorderKind.NORMAL, BorderKind.PIXEL})


def _snapshot_command(owner: Bindsym | Bindcode | Bindswitch | ForWindow) -> None:
    """Store the embedded command as a frozen list entry."""
    from swaycmd.domain.command import as_command

    object.__setattr__(owner, "command", as_command(owner.command))


def _snapshot_criteria(
    owner: AssignToWorkspace | AssignToOutput | ForWindow | NoFocus,
) -> None:
    object.__setattr__(owner, "criteria", owner.criteria.freeze())


def _check_default_border(style: BorderStyle) -> None:
    if style.kind not in _DEFAULT_BORDER_KINDS:
        msg = f"Default border style must be none, normal or pixel, got {style.kind.value}"
        raise ValueError(msg)


# --- Rendering ---


def render_modifiers(modifiers: Modifiers) -> str:
    """Render set modifiers in fixed order, each self-delimited by ``+``."""
    return (
        when(modifiers.mod1, "Mod1+")
        + when(modifiers.mod2, "Mod2+")
        + when(modifiers.mod3, "Mod3+")
        + when(modifiers.mod4, "Mod4+")
        + when(modifiers.shift, "Shift+")
        + when(modifiers.control, "Control+")
    )


def render_bind_flags(flags: BindFlags) -> str:
    device = f"--input-device={flags.input_device}" if flags.input_device is not None else ""
    return " ".join(
        [
            when(flags.whole_window, "--whole-window"),
            when(flags.border, "--border"),
            when(flags.exclude_title_bar, "--exclude-title-bar"),
            when(flags.release, "--release"),
            when(flags.locked, "--locked"),
            when(flags.to_code, "--to-code"),
            device,
            when(flags.no_warn, "--no-warn"),
            when(flags.no_repeat, "--no-repeat"),
            when(flags.inhibited, "--inhibited"),
        ]
    )


def render_bindswitch_flags(flags: BindswitchFlags) -> str:
    return " ".join(
        [
            when(flags.locked, "--locked"),
            when(flags.no_warn, "--no-warn"),
            when(flags.reload, "--reload"),
        ]
    )


def render_sym_key(key: SymKey) -> str:
    return f"{key.group.value}{render_modifiers(key.modifiers)}{key.key}"


def render_key_code(key: KeyCode) -> str:
    return f"{render_modifiers(key.modifiers)}{key.code}"


def render_client_colors(colors: ClientColors) -> str:
    child_border = colors.child_border if colors.indicator is not None else None
    return (
        f"{colors.state.value} {render_value(colors.border)} "
        f"{render_value(colors.background)} {render_value(colors.text)} "
        f"{or_empty(colors.indicator)} {or_empty(child_border)}"
    )


def render_standalone(command: StandaloneCommand) -> str:
    """Render a top-level command to protocol text."""
    from swaycmd.domain.command import render_command

    match command:
        case AssignToWorkspace(criteria=criteria, workspace=workspace):
            return f"assign {criteria.text} → workspace {render_value(workspace)}"
        case AssignToOutput(criteria=criteria, output=output):
            return f"assign {criteria.text} → output {render_value(output)}"
        case Bindsym(key=key, command=cmd, flags=flags):
            return f"bindsym {render_bind_flags(flags)} {render_sym_key(key)} {render_command(cmd)}"
        case Bindcode(key=key, command=cmd, flags=flags):
            return (
                f"bindcode {render_bind_flags(flags)} {render_key_code(key)} "
                f"{render_command(cmd)}"
            )
        case Bindswitch(switch=switch, state=state, command=cmd, flags=flags):
            return (
                f"bindswitch {render_bindswitch_flags(flags)} "
                f"{switch.value}:{state.value} {render_command(cmd)}"
            )
        case ClientBackground(color=color):
            return f"client.background {render_value(color)}"
        case ClientColors():
            return f"client.{render_client_colors(command)}"
        case DefaultBorder(style=style):
            return f"default_border {render_border_style(style)}"
        case DefaultFloatingBorder(style=style):
            return f"default_floating_border {render_border_style(style)}"
        case Exec(command=cmd):
            return f"exec {cmd}"
        case ExecAlways(command=cmd):
            return f"exec_always {cmd}"
        case FloatingMaximumSize(width=width, height=height):
            return f"floating_maximum_size {width} x {height}"
        case FloatingMinimumSize(width=width, height=height):
            return f"floating_minimum_size {width} x {height}"
        case FloatingModifier(modifier=modifier, mode=mode):
            return f"floating_modifier {or_empty(modifier)} {mode.value}"
        case FocusFollowsMouse(mode=mode):
            return f"focus_follows_mouse {mode.value}"
        case FocusOnWindowActivation(mode=mode):
            return f"focus_on_window_activation {mode.value}"
        case FocusWrapping(mode=mode):
            return f"focus_wrapping {mode.value}"
        case Font(font=font):
            return f"font {render_font(font)}"
        case ForceDisplayUrgencyHint(msec=msec):
            return f"force_display_urgency_hint {msec} ms"
        case TitlebarBorderThickness(thickness=thickness):
            return f"titlebar_border_thickness {thickness}"
        case TitlebarPadding(horizontal=horizontal, vertical=vertical):
            return f"titlebar_padding {horizontal} {or_empty(vertical)}"
        case ForWindow(criteria=criteria, command=cmd):
            return f"for_window {criteria.text} {render_command(cmd)}"
        case DefaultGaps(direction=direction, amount=amount):
            return f"gaps {direction.value} {amount}"
        case HideEdgeBorders(mode=mode, i3=i3):
            return f"hide_edge_borders {when(i3, '--i3 ')}{mode.value}"
        case Input(identifier=identifier, settings=settings):
            return f"input {identifier} {separated(settings, ' ')}"
        case Seat(name=name, settings=settings):
            return f"seat {name} {separated(settings, ' ')}"
        case Output(name=name, settings=settings):
            return f"output {name} {separated(settings, ' ')}"
        case SmartBorders(mode=mode):
            return f"smart_borders {mode.value}"
        case SmartGaps(mode=mode):
            return f"smart_gaps {mode.value}"
        case Mode(name=name):
            return f"mode {name}"
        case DefineMode(name=name, commands=commands, pango_markup=pango_markup):
            markup = when(pango_markup, "--pango_markup ")
            return f"mode {markup}{name} {separated(commands, ' ')}"
        case MouseWarping(mode=mode):
            return f"mouse_warping {mode.value}"
        case NoFocus(criteria=criteria):
            return f"no_focus {criteria.text}"
        case PopupDuringFullscreen(policy=policy):
            return f"popup_during_fullscreen {policy.value}"
        case SetVariable(name=name, value=value):
            return f"set ${name} {value}"
        case ShowMarks(state=state):
            return f"show_marks {state.value}"
        case TilingDrag(state=state):
            return f"tiling_drag {state.value}"
        case TilingDragThreshold(threshold=threshold):
            return f"tiling_drag_threshold {threshold}"
        case TitleAlign(alignment=alignment):
            return f"title_align {alignment.value}"
        case Unbindswitch(switch=switch, state=state):
            return f"unbindswitch {switch.value}:{state.value}"
        case Unbindsym(key=key, flags=flags):
            return f"unbindsym {render_bind_flags(flags)} {render_sym_key(key)}"
        case Unbindcode(key=key, flags=flags):
            return f"unbindcode {render_bind_flags(flags)} {render_key_code(key)}"
        case Workspace(workspace=workspace):
            return f"workspace {render_value(workspace)}"
        case WorkspaceGaps(workspace=workspace, direction=direction, amount=amount):
            return f"workspace {render_value(workspace)} gaps {direction.value} {amount}"
        case WorkspaceOutputs(workspace=workspace, outputs=outputs):
            return f"workspace {render_value(workspace)} output {separated(outputs, ' ')}"
        case WorkspaceAutoBackAndForth(state=state):
            return f"workspace_auto_back_and_forth {state.value}"
    msg = f"Not a top-level command: {command!r}"
    raise TypeError(msg)
