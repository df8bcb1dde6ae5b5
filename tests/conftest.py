"""Shared pytest fixtures and test helpers for swaycmd tests."""

from __future__ import annotations

import json
import logging
import os
import shutil
import socket
import tempfile
import threading
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

from swaycmd.infrastructure.ipc import (
    GET_VERSION,
    HEADER_SIZE,
    RUN_COMMAND,
    SwayIpcClient,
    pack_message,
    unpack_header,
)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the real session's socket and config files out of every test."""
    monkeypatch.delenv("SWAYSOCK", raising=False)
    for name in [k for k in os.environ if k.startswith("SWAYCMD_")]:
        monkeypatch.delenv(name)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test.

    The CLI configures logging on every invocation and replaces the root
    handlers with one bound to the runner's temporary stderr.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    sway = logging.getLogger("swaycmd")
    sway_level = sway.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    sway.setLevel(sway_level)
    structlog.contextvars.clear_contextvars()


# ---------------------------------------------------------------------------
# Fake window manager
# ---------------------------------------------------------------------------

Reply = Any | Callable[[bytes], Any]


def _recv_exact(conn: socket.socket, size: int) -> bytes:
    data = b""
    while len(data) < size:
        chunk = conn.recv(size - len(data))
        if not chunk:
            return b""
        data += chunk
    return data


def default_reply(message_type: int, payload: bytes) -> Any:
    """What sway answers when a test does not script a reply."""
    if message_type == RUN_COMMAND:
        return [{"success": True} for _ in payload.decode("utf-8").split(";")]
    if message_type == GET_VERSION:
        return {"major": 1, "minor": 10, "patch": 0, "human_readable": "1.10"}
    return {}


class FakeSway:
    """Minimal IPC server answering on a Unix socket from a worker thread.

    ``received`` records every ``(message_type, payload)`` in arrival
    order.  ``replies`` maps a message type to the object sent back, a
    callable taking the payload, or raw ``bytes`` sent unframed.
    """

    def __init__(self, path: Path) -> None:
        self.path = str(path)
        self.received: list[tuple[int, bytes]] = []
        self.replies: dict[int, Reply] = {}
        self._server = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        self._server.bind(self.path)
        self._server.listen()
        self._server.settimeout(0.1)
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    @property
    def commands(self) -> list[str]:
        """Payloads of the ``RUN_COMMAND`` messages received so far."""
        return [p.decode("utf-8") for t, p in self.received if t == RUN_COMMAND]

    def client(self, timeout: float = 2.0) -> SwayIpcClient:
        return SwayIpcClient(self.path, timeout=timeout)

    def close(self) -> None:
        self._stop.set()
        self._thread.join(timeout=2)
        self._server.close()

    def _serve(self) -> None:
        while not self._stop.is_set():
            try:
                conn, _ = self._server.accept()
            except TimeoutError:
                continue
            except OSError:
                return
            with conn:
                self._handle(conn)

    def _handle(self, conn: socket.socket) -> None:
        while True:
            header = _recv_exact(conn, HEADER_SIZE)
            if not header:
                return
            length, message_type = unpack_header(header)
            payload = _recv_exact(conn, length)
            self.received.append((message_type, payload))
            reply = self.replies.get(message_type)
            if reply is None:
                reply = default_reply(message_type, payload)
            elif callable(reply):
                reply = reply(payload)
            if isinstance(reply, bytes):
                conn.sendall(reply)
                return
            conn.sendall(pack_message(message_type, json.dumps(reply).encode("utf-8")))


@pytest.fixture
def fake_sway() -> Generator[FakeSway]:
    """A running fake window manager; its socket lives in a short temp dir.

    Unix socket paths are limited to about 100 bytes, which the nested
    pytest ``tmp_path`` can exceed.
    """
    sock_dir = tempfile.mkdtemp(prefix="swaycmd-")
    server = FakeSway(Path(sock_dir) / "ipc.sock")
    try:
        yield server
    finally:
        server.close()
        shutil.rmtree(sock_dir, ignore_errors=True)
