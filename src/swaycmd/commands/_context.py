"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy IPC client construction and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from swaycmd.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from swaycmd.config.settings import SwaycmdSettings
    from swaycmd.infrastructure.ipc import SwayIpcClient
    from swaycmd.services.dispatch import DispatchService
    from swaycmd.services.result import ServiceResult
    from swaycmd.services.version import VersionService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  IPC clients are
    created on demand so ``--help``, ``render`` and dry runs never
    look for a socket.
    """

    def __init__(self, settings: SwaycmdSettings) -> None:
        self.settings = settings

        # Configure structured logging
        from swaycmd.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            context={
                "socket": settings.resolve_socket_path(),
                "config": str(settings.config_path) if settings.config_path else None,
            },
        )

    def make_client(self) -> SwayIpcClient:
        """Build an unconnected client for the resolved socket path."""
        from swaycmd.infrastructure.ipc import SwayIpcClient

        return SwayIpcClient(
            self.settings.resolve_socket_path(),
            timeout=self.settings.ipc.timeout,
        )

    @property
    def dispatch(self) -> DispatchService:
        from swaycmd.services.dispatch import DispatchService

        return DispatchService(
            self.make_client,
            normalize=self.settings.render.normalize_whitespace,
        )

    @property
    def version_service(self) -> VersionService:
        from swaycmd.services.version import VersionService

        return VersionService(self.make_client)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
