"""Structured diagnostic logging via structlog.

Configures structlog once per process. Diagnostic output goes to stderr;
stdout is left to the operator log sink so build consoles stay readable.

Renderer selection:
  json_logs=False: `ConsoleRenderer` for humans.
  json_logs=True:  `JSONRenderer` for log shippers.

ContextVar injection:
  The `build_id` field is injected into every structlog event from a
  ContextVar set by the CLI, so all diagnostics of one run can be
  correlated with the CI build that triggered it.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar

import structlog

_build_id_var: ContextVar[str] = ContextVar("build_id", default="")


def get_build_id() -> str:
    """Return the current build ID, or empty string if not set."""
    return _build_id_var.get()


def set_build_id(build_id: str) -> None:
    _build_id_var.set(build_id)


def _inject_context_vars(
    logger: logging.Logger,
    method: str,
    event_dict: dict,
) -> dict:
    """Structlog processor: inject build_id from its ContextVar."""
    build_id = get_build_id()
    if build_id:
        event_dict["build_id"] = build_id
    return event_dict


def configure_structlog(debug: bool = False, json_logs: bool = False) -> None:
    """Configure structlog for the process lifetime.

    Safe to call more than once.
    """
    shared_processors: list = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _inject_context_vars,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    level = logging.DEBUG if debug else logging.WARNING

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    # Bridge stdlib logging (publisher modules, httpx) to the same stream.
    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )
