"""Tests for i3-ipc framing and the SwayIpcClient."""

from __future__ import annotations

import json
import socket
import struct
import sys
from typing import TYPE_CHECKING

import pytest

from swaycmd.infrastructure.ipc import (
    GET_VERSION,
    HEADER_SIZE,
    MAGIC,
    RUN_COMMAND,
    CommandOutcome,
    IpcError,
    SocketNotFoundError,
    SwayIpcClient,
    pack_message,
    unpack_header,
)

if TYPE_CHECKING:
    from tests.conftest import FakeSway

# ---------------------------------------------------------------------------
# Framing
# ---------------------------------------------------------------------------


class TestFraming:
    def test_pack_layout(self) -> None:
        message = pack_message(RUN_COMMAND, b"exit")
        assert message[:6] == b"i3-ipc"
        assert struct.unpack("=II", message[6:14]) == (4, 0)
        assert message[14:] == b"exit"

    def test_native_byte_order(self) -> None:
        header = pack_message(GET_VERSION)[len(MAGIC) :]
        assert header == (0).to_bytes(4, sys.byteorder) + (7).to_bytes(4, sys.byteorder)

    def test_unpack_header(self) -> None:
        message = pack_message(RUN_COMMAND, b"reload")
        assert unpack_header(message[:HEADER_SIZE]) == (6, RUN_COMMAND)

    def test_bad_magic(self) -> None:
        with pytest.raises(IpcError, match="magic"):
            unpack_header(b"i4-ipc" + struct.pack("=II", 0, 0))

    def test_truncated_header(self) -> None:
        with pytest.raises(IpcError, match="Truncated"):
            unpack_header(b"i3-ipc")


# ---------------------------------------------------------------------------
# Client over a live socket
# ---------------------------------------------------------------------------


class TestSwayIpcClient:
    def test_run_command(self, fake_sway: FakeSway) -> None:
        with fake_sway.client() as client:
            outcomes = client.run_command("workspace 5;border none")
        assert outcomes == [CommandOutcome(success=True), CommandOutcome(success=True)]
        assert fake_sway.commands == ["workspace 5;border none"]

    def test_run_command_accepts_bytes(self, fake_sway: FakeSway) -> None:
        with fake_sway.client() as client:
            client.run_command(b"reload")
        assert fake_sway.received == [(RUN_COMMAND, b"reload")]

    def test_failed_outcome(self, fake_sway: FakeSway) -> None:
        fake_sway.replies[RUN_COMMAND] = [
            {"success": False, "parse_error": True, "error": "Unknown command 'frobnicate'"}
        ]
        with fake_sway.client() as client:
            (outcome,) = client.run_command("frobnicate")
        assert outcome.success is False
        assert outcome.parse_error is True
        assert outcome.error == "Unknown command 'frobnicate'"

    def test_get_version(self, fake_sway: FakeSway) -> None:
        with fake_sway.client() as client:
            version = client.get_version()
        assert version["major"] == 1

    def test_several_requests_on_one_connection(self, fake_sway: FakeSway) -> None:
        with fake_sway.client() as client:
            client.run_command("nop one")
            client.run_command("nop two")
        assert fake_sway.commands == ["nop one", "nop two"]

    def test_malformed_payload(self, fake_sway: FakeSway) -> None:
        fake_sway.replies[RUN_COMMAND] = pack_message(RUN_COMMAND, b"not json")
        with fake_sway.client() as client, pytest.raises(IpcError, match="Malformed"):
            client.run_command("reload")

    def test_reply_type_mismatch(self, fake_sway: FakeSway) -> None:
        fake_sway.replies[RUN_COMMAND] = pack_message(GET_VERSION, b"{}")
        with fake_sway.client() as client, pytest.raises(IpcError, match="does not match"):
            client.run_command("reload")

    def test_non_list_reply(self, fake_sway: FakeSway) -> None:
        fake_sway.replies[RUN_COMMAND] = {"success": True}
        with fake_sway.client() as client, pytest.raises(IpcError, match="list reply"):
            client.run_command("reload")

    def test_connection_closed_mid_reply(self, fake_sway: FakeSway) -> None:
        fake_sway.replies[RUN_COMMAND] = MAGIC
        with fake_sway.client() as client, pytest.raises(IpcError):
            client.run_command("reload")


class TestConnection:
    def test_requires_path_or_socket(self) -> None:
        with pytest.raises(SocketNotFoundError, match="SWAYSOCK"):
            SwayIpcClient(None)

    def test_missing_socket_file(self) -> None:
        client = SwayIpcClient("/nonexistent/swaycmd/ipc.sock")
        with pytest.raises(SocketNotFoundError, match="not found"):
            client.connect()

    def test_socket_not_found_is_an_ipc_error(self) -> None:
        assert issubclass(SocketNotFoundError, IpcError)
        assert issubclass(IpcError, RuntimeError)

    def test_preconnected_socket(self) -> None:
        ours, theirs = socket.socketpair()
        reply = json.dumps([{"success": True}]).encode()
        theirs.sendall(pack_message(RUN_COMMAND, reply))
        with SwayIpcClient(sock=ours) as client:
            outcomes = client.run_command("kill")
        sent = theirs.recv(64)
        theirs.close()
        assert outcomes == [CommandOutcome(success=True)]
        assert sent == pack_message(RUN_COMMAND, b"kill")
