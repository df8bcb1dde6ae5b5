"""Command builders: targeted units and the semicolon-joined command list.

Both builders store their structured sequence as the source of truth and
a rendered string as a derived cache.  Each mutating method either
patches the cache, rendering only the new piece and extending the
cached string, or rebuilds it, rendering every piece accumulated so far:

========================================  ===============
Operation                                 Cache update
========================================  ===============
``TargetedCommand.add_command``           patch
``TargetedCommand.add_criterion`` before
any sub-command                           patch
``TargetedCommand.add_criterion`` after
a sub-command                             **rebuild**
``CommandList.append``                    patch
========================================  ===============

Supply criteria before sub-commands to stay on the patch path.

A :class:`CommandList` freezes every :class:`TargetedCommand` it stores,
so entries read back from the list cannot be changed in place.

INVARIANT: ``text`` always equals the from-scratch render of the
structured data.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import FrozenInstanceError, dataclass

from swaycmd.domain.configfile import CONFIG_COMMAND_TYPES, ConfigCommand, render_config_command
from swaycmd.domain.criteria import CriteriaGroup, Criterion
from swaycmd.domain.runtime import SUBCOMMAND_TYPES, SubCommand, render_subcommand
from swaycmd.domain.standalone import STANDALONE_TYPES, StandaloneCommand, render_standalone

logger = logging.getLogger(__name__)

COMMAND_SEPARATOR = ";"
SUBCOMMAND_SEPARATOR = ","


@dataclass(frozen=True)
class RawCommand:
    """Untyped command text, sent exactly as given.

    Escape hatch for syntax the typed grammar does not cover.  The text
    is neither escaped nor validated.
    """

    text: str


class TargetedCommand:
    """Sub-commands sharing one optional criteria clause.

    Renders ``[c1 c2]s1,s2`` with criteria, or ``s1,s2`` without.  Both
    sequences only grow.  A frozen unit, as stored by a command list or
    a binding, rejects further additions and is hashable.

    Usage::

        unit = (
            TargetedCommand()
            .add_criterion(AppId("mpv"))
            .add_criterion(Floating())
            .add_command(Sticky(EnDisTog.ENABLE))
        )
        unit.text  # '[app_id="mpv" floating]sticky enable'
    """

    __slots__ = ("_commands", "_criteria", "_frozen", "_text")

    def __init__(self) -> None:
        self._criteria: CriteriaGroup | None = None
        self._commands: list[SubCommand] = []
        self._text = ""
        self._frozen = False

    @classmethod
    def from_subcommand(cls, command: SubCommand) -> TargetedCommand:
        """Start a unit without criteria from its first sub-command."""
        return cls().add_command(command)

    def _check_mutable(self) -> None:
        if self._frozen:
            msg = f"cannot modify frozen {self!r}; call copy() first"
            raise FrozenInstanceError(msg)

    def add_command(self, command: SubCommand) -> TargetedCommand:
        """Append a sub-command.  Always a patch."""
        self._check_mutable()
        if self._commands:
            self._text += SUBCOMMAND_SEPARATOR
        self._text += render_subcommand(command)
        self._commands.append(command)
        return self

    def add_criterion(self, criterion: Criterion) -> TargetedCommand:
        """Append a criterion to the unit's criteria clause.

        Before any sub-command exists the clause sits at the tail of the
        cached text and is patched in place.  Once sub-commands follow
        it, the whole text is rebuilt from scratch: a criterion added
        late re-renders everything accumulated so far.
        """
        self._check_mutable()
        if not self._commands:
            if self._criteria is None:
                self._criteria = CriteriaGroup(criterion)
                self._text = self._criteria.text
            else:
                # The clause is the whole text until a sub-command follows it.
                self._text = self._criteria.add(criterion).text
            return self

        if self._criteria is None:
            self._criteria = CriteriaGroup(criterion)
        else:
            self._criteria.add(criterion)
        logger.debug("criteria_rebuild", extra={"subcommands": len(self._commands)})
        self._text = self.render()
        return self

    def render(self) -> str:
        """Render the unit from its structured data, ignoring the cache."""
        prefix = self._criteria.text if self._criteria is not None else ""
        body = SUBCOMMAND_SEPARATOR.join(render_subcommand(c) for c in self._commands)
        return prefix + body

    def copy(self) -> TargetedCommand:
        """Return an independent, editable snapshot of this unit."""
        clone = TargetedCommand.__new__(TargetedCommand)
        clone._criteria = self._criteria.copy() if self._criteria is not None else None
        clone._commands = list(self._commands)
        clone._text = self._text
        clone._frozen = False
        return clone

    def freeze(self) -> TargetedCommand:
        """Return a frozen snapshot; a frozen unit is returned as is."""
        if self._frozen:
            return self
        clone = self.copy()
        if clone._criteria is not None:
            clone._criteria = clone._criteria.freeze()
        clone._frozen = True
        return clone

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def criteria(self) -> CriteriaGroup | None:
        return self._criteria

    @property
    def commands(self) -> tuple[SubCommand, ...]:
        return tuple(self._commands)

    @property
    def text(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"TargetedCommand({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TargetedCommand):
            return NotImplemented
        return self._criteria == other._criteria and self._commands == other._commands

    def __hash__(self) -> int:
        if not self._frozen:
            msg = "unhashable type: 'TargetedCommand' (call freeze() first)"
            raise TypeError(msg)
        criteria = self._criteria.criteria if self._criteria is not None else ()
        return hash((criteria, tuple(self._commands)))


Command = TargetedCommand | StandaloneCommand | ConfigCommand | RawCommand


def render_command(command: Command | SubCommand) -> str:
    """Render any entry of a command list, or a bare sub-command."""
    if isinstance(command, TargetedCommand | RawCommand):
        return command.text
    if isinstance(command, SUBCOMMAND_TYPES):
        return render_subcommand(command)
    if isinstance(command, STANDALONE_TYPES):
        return render_standalone(command)
    if isinstance(command, CONFIG_COMMAND_TYPES):
        return render_config_command(command)
    msg = f"Not a command: {command!r}"
    raise TypeError(msg)


def as_command(value: Command | SubCommand | str) -> Command:
    """Coerce a sub-command or plain string into a list entry.

    A bare sub-command becomes a criteria-less :class:`TargetedCommand`,
    a string becomes a :class:`RawCommand`, and an existing
    :class:`TargetedCommand` is frozen into a snapshot.  Neither later
    changes to the caller's builder nor edits through the stored entry
    can then desynchronise a list that holds it.
    """
    if isinstance(value, TargetedCommand):
        return value.freeze()
    if isinstance(value, str):
        return RawCommand(value)
    if isinstance(value, SUBCOMMAND_TYPES):
        return TargetedCommand.from_subcommand(value).freeze()
    return value


class CommandList:
    """Ordered batch of commands rendered as ``cmd1;cmd2;...``.

    Usage::

        batch = (
            CommandList()
            .append("workspace 5")
            .append(Border(BorderStyle.none()))
        )
        batch.text      # 'workspace 5;border none'
        batch.encode()  # b'workspace 5;border none'

    Stored entries are immutable: targeted units are frozen on append, so
    ``batch.commands[0].copy()`` is the way to derive an editable unit.
    """

    __slots__ = ("_commands", "_text")

    def __init__(self, commands: Iterable[Command | SubCommand | str] = ()) -> None:
        self._commands: list[Command] = []
        self._text = ""
        for command in commands:
            self.append(command)

    def append(self, command: Command | SubCommand | str) -> CommandList:
        """Append one command.  Always a patch."""
        entry = as_command(command)
        if self._commands:
            self._text += COMMAND_SEPARATOR
        self._text += render_command(entry)
        self._commands.append(entry)
        return self

    def render(self) -> str:
        """Render the list from its entries, ignoring the cache."""
        return COMMAND_SEPARATOR.join(render_command(c) for c in self._commands)

    def encode(self) -> bytes:
        """The rendered text as the UTF-8 payload a transport sends."""
        return self._text.encode("utf-8")

    @property
    def commands(self) -> tuple[Command, ...]:
        return tuple(self._commands)

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __bool__(self) -> bool:
        return bool(self._commands)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"CommandList({self._text!r})"


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and strip the ends.

    Rendered text keeps blank slots for absent optional arguments; use
    this before comparing output where exact spacing is not significant.
    Quoted values are not exempt, so ``title="a  b"`` becomes
    ``title="a b"``.

    Examples:
        >>> normalize_whitespace("border normal ")
        'border normal'
    """
    return " ".join(text.split())
