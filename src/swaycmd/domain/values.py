"""Argument primitives shared by every command family.

Keyword enums render as their value.  Composite primitives (lengths,
colors, workspace and output references) are frozen dataclasses rendered
by :func:`render_value`, the single dispatch point for this category.

The small helpers at the bottom (``when``, ``or_empty``, ``separated``,
``format_number``) encode the blank-slot rule: an absent optional
argument renders as an empty string and the spaces around it stay.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

FOCUSED_TOKEN = "__focused__"


# --- Toggles and switches ---


class EnDisable(StrEnum):
    """Two-state switch."""

    ENABLE = "enable"
    DISABLE = "disable"


class EnDisTog(StrEnum):
    """Two-state switch that can also flip the current state."""

    ENABLE = "enable"
    DISABLE = "disable"
    TOGGLE = "toggle"


class YesNo(StrEnum):
    YES = "yes"
    NO = "no"


class GapsDirection(StrEnum):
    """Which gaps a gaps command changes."""

    INNER = "inner"
    OUTER = "outer"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


class Direction(StrEnum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"


# --- Focused marker ---


@dataclass(frozen=True)
class Focused:
    """Marker meaning "the same value as the currently focused window".

    Fields typed ``T | Focused`` hold either a literal or this marker,
    never both.
    """


FOCUSED = Focused()


# --- Outputs ---


class OutputDirection(StrEnum):
    """Output relative to the focused one."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"
    CURRENT = "current"


@dataclass(frozen=True)
class OutputName:
    """An output addressed by its connector or description, e.g. ``DP-1``."""

    name: str


OutputRef = OutputDirection | OutputName


# --- Workspaces ---


@dataclass(frozen=True)
class WorkspaceName:
    """A workspace name, optionally prefixed by its number (``3:mail``)."""

    name: str
    number: int | None = None


class WorkspaceStep(StrEnum):
    """Workspaces addressed relative to the focused one."""

    PREV = "prev"
    NEXT = "next"
    CURRENT = "current"
    PREV_ON_OUTPUT = "prev_on_output"
    NEXT_ON_OUTPUT = "next_on_output"
    BACK_AND_FORTH = "back_and_forth"


@dataclass(frozen=True)
class WorkspaceNumber:
    """Match a workspace by number even if its name differs."""

    workspace: WorkspaceName


WorkspaceRef = WorkspaceName | WorkspaceNumber | WorkspaceStep


# --- Sizes and colors ---


class LengthUnit(StrEnum):
    PX = "px"
    PPT = "ppt"


@dataclass(frozen=True)
class Length:
    """An amount in pixels, percentage points, or the container's default unit."""

    amount: int
    unit: LengthUnit | None = None


@dataclass(frozen=True)
class Color:
    """An RGB color with optional alpha, rendered ``#RRGGBB[AA]``."""

    red: int
    green: int
    blue: int
    alpha: int | None = None

    def __post_init__(self) -> None:
        for channel in ("red", "green", "blue", "alpha"):
            value = getattr(self, channel)
            if value is None:
                continue
            if not 0 <= value <= 255:
                msg = f"Color {channel} component must be within 0..255, got {value}"
                raise ValueError(msg)

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> Color:
        return cls(red, green, blue)

    @classmethod
    def rgba(cls, red: int, green: int, blue: int, alpha: int) -> Color:
        return cls(red, green, blue, alpha)


# --- Rendering helpers ---


def when(condition: bool, token: str) -> str:
    """Return *token* if *condition* holds, else the empty string."""
    return token if condition else ""


def format_number(value: int | float) -> str:
    """Render a number in decimal, dropping a redundant ``.0`` on floats.

    Examples:
        >>> format_number(12)
        '12'
        >>> format_number(12.0)
        '12'
        >>> format_number(0.85)
        '0.85'
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def or_empty(value: Any) -> str:
    """Render *value*, or the empty string when it is absent."""
    if value is None:
        return ""
    return render_value(value)


def separated(values: Iterable[Any], separator: str) -> str:
    """Join rendered *values* with *separator*; no trailing separator."""
    return separator.join(render_value(value) for value in values)


def render_color(color: Color) -> str:
    text = f"#{color.red:02X}{color.green:02X}{color.blue:02X}"
    if color.alpha is not None:
        text += f"{color.alpha:02X}"
    return text


def render_value(value: Any) -> str:
    """Render an argument primitive to protocol text.

    Keyword enums render as their value; ``bool`` is not an argument
    primitive and is rejected by the type checker rather than here.
    """
    match value:
        case Focused():
            return FOCUSED_TOKEN
        case StrEnum():
            return value.value
        case str():
            return value
        case int() | float():
            return format_number(value)
        case Color():
            return render_color(value)
        case Length(amount=amount, unit=None):
            return format_number(amount)
        case Length(amount=amount, unit=unit):
            return f"{format_number(amount)} {unit.value}"
        case OutputName(name=name):
            return name
        case WorkspaceName(name=name, number=None):
            return name
        case WorkspaceName(name=name, number=number):
            return f"{number}:{name}"
        case WorkspaceNumber(workspace=workspace):
            return f"number {render_value(workspace)}"
    msg = f"Not an argument primitive: {value!r}"
    raise TypeError(msg)
