# src/telemetry_metrics/core/logging.py
"""Structured logging for the metric compiler.

The compiler only logs at DEBUG: one metric_compiled event per descriptor
and one metric_rejected event per failed declaration. Nothing is configured
on import; telemetry_metrics is a library, so output is whatever the host
application set up.

configure_logging() is an opt-in for applications (and reporter test suites)
that want readable compiler output. It routes both structlog and stdlib
records through structlog's ProcessorFormatter on a single named handler,
which it adds to the root logger next to any handlers already there.
Calling it again swaps that handler out, never anyone else's.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.stdlib import ProcessorFormatter

from telemetry_metrics.core.config import CompilerSettings

HANDLER_NAME = "telemetry_metrics"

# Loggers that are chatty at DEBUG and irrelevant to metric definitions
_NOISY_LOGGERS: tuple[str, ...] = ("dynaconf",)


def _drop_formatter_keys(
    logger: logging.Logger | None,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    # Added by ProcessorFormatter for every record
    event_dict.pop("_record")
    event_dict.pop("_from_structlog")
    return event_dict


def _pre_chain() -> list[Any]:
    """Processors applied to structlog and stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]


def _render_chain(json_output: bool) -> list[Any]:
    if json_output:
        return [_drop_formatter_keys, structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [_drop_formatter_keys, structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]


def _install_handler(handler: logging.Handler, level: int) -> None:
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)


def configure_logging(*, json_output: bool = False, level: str = "INFO") -> None:
    """Send compiler (and reporter) logs to stdout.

    Args:
        json_output: Render JSON lines instead of console output
        level: Root log level name (DEBUG shows the compiler events)
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Reconfiguring must reach loggers created at import time
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(ProcessorFormatter(processors=_render_chain(json_output), foreign_pre_chain=pre_chain))
    _install_handler(handler, log_level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))


def configure_logging_from_settings(settings: CompilerSettings) -> None:
    """Apply the logging fields of CompilerSettings."""
    configure_logging(json_output=settings.json_logs, level=settings.log_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Module logger; every telemetry_metrics module logs through this."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
