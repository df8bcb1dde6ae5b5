"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, swaycmd.toml only contains
overrides.  An empty or missing file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- swaycmd.toml sections ---


class IpcConfig(BaseModel):
    """[ipc] section."""

    model_config = {"frozen": True}

    # Falls back to $SWAYSOCK when unset.
    socket_path: str | None = None
    timeout: float = 5.0


class RenderConfig(BaseModel):
    """[render] section.

    ``normalize_whitespace`` collapses every whitespace run in the
    rendered text, not only blank argument slots.  Runs inside quoted
    criteria values and ``exec`` arguments are squeezed too, so
    ``[title="a  b"]`` is sent as ``[title="a b"]``.  Leave it off when
    exact spacing matters.
    """

    model_config = {"frozen": True}

    normalize_whitespace: bool = False
