"""BaseService: abstract foundation for all swaycmd services.

Every service receives a client factory at construction time.  The
factory is only called when an operation actually needs the window
manager, so rendering and dry runs never touch the IPC socket.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from swaycmd.infrastructure.ipc import SwayIpcClient

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], "SwayIpcClient"]


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class DispatchService(BaseService):
            def run(self, commands) -> ServiceResult:
                with self._connect() as client:
                    ...
    """

    def __init__(self, client_factory: ClientFactory) -> None:
        self._client_factory = client_factory

    def _connect(self) -> SwayIpcClient:
        """Build a fresh client; callers use it as a context manager."""
        client = self._client_factory()
        logger.debug("ipc_client_created", extra={"socket": client.path})
        return client
