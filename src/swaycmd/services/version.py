"""VersionService: report which window manager swaycmd is talking to."""

from __future__ import annotations

import logging

from swaycmd import __version__
from swaycmd.infrastructure.ipc import IpcError, SocketNotFoundError
from swaycmd.services.base import BaseService
from swaycmd.services.result import ServiceResult

logger = logging.getLogger(__name__)


class VersionService(BaseService):
    """Query ``GET_VERSION`` over IPC."""

    def version(self) -> ServiceResult:
        """Return swaycmd's version next to the running sway's.

        ``data`` holds ``swaycmd``, ``sway`` (the human-readable string),
        ``major``/``minor``/``patch`` and ``config_file``, the config
        sway loaded.  Fields sway leaves out are ``None``.
        """
        op = "version"
        try:
            with self._connect() as client:
                reply = client.get_version()
        except SocketNotFoundError as exc:
            return ServiceResult.failure(op, "NO_SOCKET", str(exc))
        except IpcError as exc:
            logger.debug("ipc_failure", exc_info=True)
            return ServiceResult.failure(op, "IPC_ERROR", str(exc))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "swaycmd": __version__,
                "sway": reply.get("human_readable"),
                "major": reply.get("major"),
                "minor": reply.get("minor"),
                "patch": reply.get("patch"),
                "config_file": reply.get("loaded_config_file_name"),
            },
        )
