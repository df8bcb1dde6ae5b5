"""DispatchService: render command lists and send them to sway."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from swaycmd.domain.command import Command, CommandList, normalize_whitespace
from swaycmd.domain.runtime import SubCommand
from swaycmd.infrastructure.ipc import IpcError, SocketNotFoundError
from swaycmd.services.base import BaseService, ClientFactory
from swaycmd.services.result import ServiceResult

logger = logging.getLogger(__name__)

CommandInput = CommandList | Iterable[Command | SubCommand | str]


def _as_list(commands: CommandInput) -> CommandList:
    if isinstance(commands, CommandList):
        return commands
    return CommandList(commands)


class DispatchService(BaseService):
    """Build command lists and deliver them over IPC.

    Args:
        client_factory: Zero-argument callable returning an unconnected
            :class:`~swaycmd.infrastructure.ipc.SwayIpcClient`.
        normalize: Collapse whitespace runs in rendered text.  This
            removes blank argument slots but also squeezes runs inside
            quoted criteria values.
    """

    def __init__(self, client_factory: ClientFactory, *, normalize: bool = False) -> None:
        super().__init__(client_factory)
        self._normalize = normalize

    def _text(self, batch: CommandList) -> str:
        return normalize_whitespace(batch.text) if self._normalize else batch.text

    def render(self, commands: CommandInput) -> ServiceResult:
        """Render *commands* without contacting the window manager."""
        batch = _as_list(commands)
        return ServiceResult(
            ok=True,
            op="render",
            data={"command": self._text(batch), "count": len(batch)},
        )

    def run(self, commands: CommandInput, *, dry_run: bool = False) -> ServiceResult:
        """Send *commands* as one ``RUN_COMMAND`` message.

        A dry run renders and reports without connecting.  Expected
        failures come back as ``ok=False`` results, never as exceptions.
        """
        op = "run"
        batch = _as_list(commands)
        if not batch:
            return ServiceResult.failure(op, "EMPTY_COMMAND", "No commands to run")

        text = self._text(batch)
        if dry_run:
            return ServiceResult(
                ok=True,
                op=op,
                data={"command": text, "count": len(batch), "dry_run": True},
            )

        try:
            with self._connect() as client:
                outcomes = client.run_command(text)
        except SocketNotFoundError as exc:
            return ServiceResult.failure(op, "NO_SOCKET", str(exc))
        except IpcError as exc:
            logger.debug("ipc_failure", extra={"command": text}, exc_info=True)
            return ServiceResult.failure(op, "IPC_ERROR", str(exc), {"command": text})

        results = [o.model_dump() for o in outcomes]
        failed = [o for o in outcomes if not o.success]
        if failed:
            first = failed[0].error or "command failed"
            return ServiceResult.failure(
                op,
                "COMMAND_FAILED",
                f"{len(failed)} of {len(outcomes)} command(s) failed: {first}",
                {"command": text, "outcomes": results},
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={"command": text, "count": len(batch), "outcomes": results},
        )
