"""Criteria: conditions selecting the windows a command applies to.

A criterion is an immutable value tagged by its class.  Criteria are
stacked in a :class:`CriteriaGroup`, rendered as one bracketed clause::

    [app_id="firefox" floating]

String values are placed between the quotes verbatim.  Regular
expressions are neither escaped nor validated; sway reports a bad
pattern in its reply.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import FrozenInstanceError, dataclass
from enum import StrEnum

from swaycmd.domain.values import Focused, render_value


class UrgentState(StrEnum):
    """Which urgent window an ``urgent`` criterion selects."""

    FIRST = "first"
    LAST = "last"
    LATEST = "latest"
    NEWEST = "newest"
    OLDEST = "oldest"
    RECENT = "recent"


class WindowKind(StrEnum):
    """Values of ``_NET_WM_WINDOW_TYPE`` understood by ``window_type``."""

    NORMAL = "normal"
    DIALOG = "dialog"
    UTILITY = "utility"
    TOOLBAR = "toolbar"
    SPLASH = "splash"
    MENU = "menu"
    DROPDOWN_MENU = "dropdown_menu"
    POPUP_MENU = "popup_menu"
    TOOLTIP = "tooltip"
    NOTIFICATION = "notification"


# --- Criterion variants ---


@dataclass(frozen=True)
class AppId:
    """Wayland app id; may be a regular expression."""

    value: str | Focused


@dataclass(frozen=True)
class Class:
    """X11 window class; may be a regular expression."""

    value: str | Focused


@dataclass(frozen=True)
class ConId:
    """Internal container id as reported over IPC."""

    value: int | Focused


@dataclass(frozen=True)
class ConMark:
    """Window mark; may be a regular expression."""

    value: str


@dataclass(frozen=True)
class Floating:
    pass


@dataclass(frozen=True)
class Id:
    """X11 window id."""

    value: int


@dataclass(frozen=True)
class Instance:
    """X11 window instance; may be a regular expression."""

    value: str | Focused


@dataclass(frozen=True)
class Pid:
    value: int


@dataclass(frozen=True)
class Shell:
    """Window shell such as ``xdg_shell`` or ``xwayland``."""

    value: str | Focused


@dataclass(frozen=True)
class Tiling:
    pass


@dataclass(frozen=True)
class Title:
    value: str | Focused


@dataclass(frozen=True)
class Urgent:
    value: UrgentState


@dataclass(frozen=True)
class WindowRole:
    """X11 ``WM_WINDOW_ROLE``; may be a regular expression."""

    value: str | Focused


@dataclass(frozen=True)
class WindowType:
    value: WindowKind


@dataclass(frozen=True)
class Workspace:
    """Name of the workspace holding the view.

    With :data:`~swaycmd.domain.values.FOCUSED` every view on the focused
    workspace matches.
    """

    value: str | Focused


Criterion = (
    AppId
    | Class
    | ConId
    | ConMark
    | Floating
    | Id
    | Instance
    | Pid
    | Shell
    | Tiling
    | Title
    | Urgent
    | WindowRole
    | WindowType
    | Workspace
)


def _quoted(key: str, value: object) -> str:
    return f'{key}="{render_value(value)}"'


def render_criterion(criterion: Criterion) -> str:
    """Render a single criterion, without brackets."""
    match criterion:
        case AppId(value=value):
            return _quoted("app_id", value)
        case Class(value=value):
            return _quoted("class", value)
        case ConId(value=value):
            return _quoted("con_id", value)
        case ConMark(value=value):
            return _quoted("con_mark", value)
        case Floating():
            return "floating"
        case Id(value=value):
            return _quoted("id", value)
        case Instance(value=value):
            return _quoted("instance", value)
        case Pid(value=value):
            return _quoted("pid", value)
        case Shell(value=value):
            return _quoted("shell", value)
        case Tiling():
            return "tiling"
        case Title(value=value):
            return _quoted("title", value)
        case Urgent(value=value):
            return _quoted("urgent", value)
        case WindowRole(value=value):
            return _quoted("window_role", value)
        case WindowType(value=value):
            return _quoted("window_type", value)
        case Workspace(value=value):
            return _quoted("workspace", value)
    msg = f"Not a criterion: {criterion!r}"
    raise TypeError(msg)


def render_criteria(criteria: Iterable[Criterion]) -> str:
    """Render criteria as one bracketed clause, from scratch."""
    return "[" + " ".join(render_criterion(c) for c in criteria) + "]"


class CriteriaGroup:
    """Ordered, append-only, never-empty collection of criteria.

    The bracketed text is cached and patched in place on every
    :meth:`add`, so ``text`` always equals ``render_criteria(criteria)``.
    A group held by a window rule is frozen: :meth:`add` raises and the
    group becomes hashable.  Call :meth:`copy` to get an editable group.

    Usage::

        group = CriteriaGroup(AppId("firefox")).add(Floating())
        group.text  # '[app_id="firefox" floating]'
    """

    __slots__ = ("_criteria", "_frozen", "_text")

    def __init__(self, first: Criterion) -> None:
        self._criteria: list[Criterion] = [first]
        self._text = f"[{render_criterion(first)}]"
        self._frozen = False

    @classmethod
    def of(cls, first: Criterion, *rest: Criterion) -> CriteriaGroup:
        """Build a group from one or more criteria, in order."""
        group = cls(first)
        for criterion in rest:
            group.add(criterion)
        return group

    def add(self, criterion: Criterion) -> CriteriaGroup:
        """Append *criterion*, replacing the closing bracket in the cache."""
        if self._frozen:
            msg = f"cannot add to frozen {self!r}"
            raise FrozenInstanceError(msg)
        self._criteria.append(criterion)
        self._text = f"{self._text[:-1]} {render_criterion(criterion)}]"
        return self

    def copy(self) -> CriteriaGroup:
        """Return an editable copy, even of a frozen group."""
        clone = CriteriaGroup.__new__(CriteriaGroup)
        clone._criteria = list(self._criteria)
        clone._text = self._text
        clone._frozen = False
        return clone

    def freeze(self) -> CriteriaGroup:
        """Return a frozen snapshot; a frozen group is returned as is."""
        if self._frozen:
            return self
        clone = self.copy()
        clone._frozen = True
        return clone

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def criteria(self) -> tuple[Criterion, ...]:
        return tuple(self._criteria)

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._criteria)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"CriteriaGroup({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CriteriaGroup):
            return NotImplemented
        return self._criteria == other._criteria

    def __hash__(self) -> int:
        if not self._frozen:
            msg = "unhashable type: 'CriteriaGroup' (call freeze() first)"
            raise TypeError(msg)
        return hash(tuple(self._criteria))
