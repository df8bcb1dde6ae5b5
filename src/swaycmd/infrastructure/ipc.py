"""Sway IPC client: i3-ipc message framing over a Unix socket.

Every message, in both directions, is a fixed header followed by a
payload::

    b"i3-ipc" | uint32 payload length | uint32 message type | payload

Integers use the host's native byte order.  Replies to ``RUN_COMMAND``
are a JSON array with one object per command in the submitted list.
"""

from __future__ import annotations

import json
import logging
import socket
import struct
from typing import Any

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

MAGIC = b"i3-ipc"
_HEADER = struct.Struct("=II")
HEADER_SIZE = len(MAGIC) + _HEADER.size

RUN_COMMAND = 0
GET_VERSION = 7


class IpcError(RuntimeError):
    """Socket failure or malformed reply from the window manager."""


class SocketNotFoundError(IpcError):
    """No IPC socket path could be resolved."""


class CommandOutcome(BaseModel):
    """Result of one command from a ``RUN_COMMAND`` reply."""

    model_config = {"frozen": True}

    success: bool
    error: str | None = None
    parse_error: bool = False


def pack_message(message_type: int, payload: bytes = b"") -> bytes:
    """Frame *payload* as an i3-ipc message."""
    return MAGIC + _HEADER.pack(len(payload), message_type) + payload


def unpack_header(header: bytes) -> tuple[int, int]:
    """Parse a message header into ``(payload_length, message_type)``.

    Raises:
        IpcError: If the header is truncated or the magic string is wrong.
    """
    if len(header) != HEADER_SIZE:
        msg = f"Truncated header: expected {HEADER_SIZE} bytes, got {len(header)}"
        raise IpcError(msg)
    if not header.startswith(MAGIC):
        msg = f"Bad magic string: {header[: len(MAGIC)]!r}"
        raise IpcError(msg)
    length, message_type = _HEADER.unpack(header[len(MAGIC) :])
    return length, message_type


class SwayIpcClient:
    """Blocking client for one sway IPC connection.

    Usage::

        with SwayIpcClient(settings.resolve_socket_path()) as client:
            outcomes = client.run_command(batch.encode())

    A connected *sock* may be passed instead of a path; the client then
    owns and closes it.
    """

    def __init__(
        self,
        path: str | None = None,
        *,
        timeout: float = 5.0,
        sock: socket.socket | None = None,
    ) -> None:
        if sock is None and not path:
            msg = "No sway IPC socket path (is SWAYSOCK set?)"
            raise SocketNotFoundError(msg)
        self.path = path
        self.timeout = timeout
        self._sock = sock

    def __enter__(self) -> SwayIpcClient:
        self.connect()
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def connect(self) -> None:
        """Open the socket if it is not open yet."""
        if self._sock is not None:
            self._sock.settimeout(self.timeout)
            return
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        sock.settimeout(self.timeout)
        try:
            sock.connect(self.path)
        except FileNotFoundError as exc:
            sock.close()
            msg = f"Sway IPC socket not found: {self.path}"
            raise SocketNotFoundError(msg) from exc
        except OSError as exc:
            sock.close()
            msg = f"Cannot connect to {self.path}: {exc}"
            raise IpcError(msg) from exc
        logger.debug("ipc_connected", extra={"socket": self.path})
        self._sock = sock

    def close(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def request(self, message_type: int, payload: bytes = b"") -> Any:
        """Send one message and return the JSON-decoded reply payload.

        Raises:
            IpcError: On socket errors, a reply of another message type,
                or a payload that is not JSON.
        """
        if self._sock is None:
            self.connect()
        assert self._sock is not None
        try:
            self._sock.sendall(pack_message(message_type, payload))
            logger.debug("ipc_sent", extra={"message_type": message_type, "size": len(payload)})
            length, reply_type = unpack_header(self._recv_exact(HEADER_SIZE))
            body = self._recv_exact(length)
        except OSError as exc:
            msg = f"IPC transport failure: {exc}"
            raise IpcError(msg) from exc
        logger.debug("ipc_reply", extra={"message_type": reply_type, "size": length})
        if reply_type != message_type:
            msg = f"Reply type {reply_type} does not match request type {message_type}"
            raise IpcError(msg)
        try:
            return json.loads(body)
        except ValueError as exc:
            msg = f"Malformed reply payload: {exc}"
            raise IpcError(msg) from exc

    def run_command(self, command: str | bytes) -> list[CommandOutcome]:
        """Run a command list and return one outcome per command."""
        payload = command.encode("utf-8") if isinstance(command, str) else command
        reply = self.request(RUN_COMMAND, payload)
        if not isinstance(reply, list):
            msg = f"Expected a list reply to RUN_COMMAND, got {type(reply).__name__}"
            raise IpcError(msg)
        try:
            return [CommandOutcome.model_validate(item) for item in reply]
        except ValidationError as exc:
            msg = f"Malformed command outcome: {exc}"
            raise IpcError(msg) from exc

    def get_version(self) -> dict[str, Any]:
        """Return the window manager's version object."""
        reply = self.request(GET_VERSION)
        if not isinstance(reply, dict):
            msg = f"Expected an object reply to GET_VERSION, got {type(reply).__name__}"
            raise IpcError(msg)
        return reply

    def _recv_exact(self, size: int) -> bytes:
        assert self._sock is not None
        chunks: list[bytes] = []
        remaining = size
        while remaining:
            chunk = self._sock.recv(remaining)
            if not chunk:
                msg = f"Connection closed with {remaining} of {size} bytes unread"
                raise IpcError(msg)
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)
