"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``SWAYCMD_*`` prefix (``SWAYCMD_IPC__TIMEOUT=2``)
  3. TOML file: ``swaycmd.toml`` located by :func:`find_config`
  4. Code defaults: baked into the section models

The IPC socket path has one more fallback after all of these: the
``SWAYSOCK`` variable sway exports into every child process.
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from swaycmd.config.discovery import find_config
from swaycmd.config.models import IpcConfig, RenderConfig

SWAYSOCK_ENV_VAR = "SWAYSOCK"


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``swaycmd.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class SwaycmdSettings(BaseSettings):
    """Unified settings for the swaycmd CLI.

    Stored on the :class:`~swaycmd.commands._context.AppContext` created
    by the root command group.

    Attributes:
        config_path: The TOML file that was read, or None.
        socket: ``--socket`` override for the IPC socket path.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SWAYCMD_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    socket: str | None = None

    # --- TOML sections ---
    ipc: IpcConfig = Field(default_factory=IpcConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> SwaycmdSettings:
        """Construct settings from a CLI invocation.

        Reads the explicit *config_path* if given, otherwise the file found
        by discovery, and merges CLI flags as highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(cwd)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

    def resolve_socket_path(self) -> str | None:
        """Return the IPC socket path: ``--socket``, then config, then ``$SWAYSOCK``."""
        if self.socket:
            return self.socket
        if self.ipc.socket_path:
            return self.ipc.socket_path
        return os.environ.get(SWAYSOCK_ENV_VAR) or None
