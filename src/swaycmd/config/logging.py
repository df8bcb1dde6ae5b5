"""Log routing for swaycmd.

Every record leaves through a single stderr handler, whether it comes
from structlog or from a library module's ``logging.getLogger(__name__)``.
Library modules log a short event name and put the details in
``extra`` (``logger.debug("ipc_sent", extra={"size": 12})``); the extras
become structured fields, so a ``--log-json`` line reads::

    {"event": "ipc_sent", "size": 12, "socket": "/run/user/1000/sway-ipc.sock", ...}

Values passed as *context* (the socket path of the invocation, for
example) are bound as context variables and appear on every line.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping

import structlog

LOGGER_NAME = "swaycmd"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _final_processors(log_json: bool) -> list[structlog.types.Processor]:
    if log_json:
        # Tracebacks from exc_info become a list of frames, not a text blob.
        return [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    context: Mapping[str, object] | None = None,
) -> None:
    """Route structlog and stdlib records to stderr.

    Safe to call more than once: the root handler is replaced and the
    bound context is reset on every call.

    Args:
        verbose: Show DEBUG records from ``swaycmd`` loggers (IPC
            traffic, criteria rebuilds).  Otherwise WARNING and above.
        log_json: One JSON object per line instead of console output.
        context: Fields bound to every record of this invocation.
            ``None`` values are left out.
    """
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[*shared, structlog.stdlib.ExtraAdder()],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *_final_processors(log_json),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)

    structlog.contextvars.clear_contextvars()
    if context:
        structlog.contextvars.bind_contextvars(
            **{key: value for key, value in context.items() if value is not None}
        )
