"""Structured logging for fallible.

The library only logs at the interop boundary, where a raised exception is
captured into an Err. Loggers returned by get_logger() wrap the stdlib
``fallible.*`` loggers with their own processor chain, so the global
structlog configuration of the host application is never replaced.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    "add_log_hook",
    "clear_log_hooks",
    "configure_logging",
    "get_logger",
    "remove_log_hook",
]

LOGGER_NAME = "fallible"

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Processor passing a copy of each event to the registered hooks."""
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: S112
            continue
    return event_dict


def _event_processors() -> list[Any]:
    """Processors applied to structlog events and to plain stdlib records."""
    import structlog

    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _run_hooks,
    ]


def _library_processors() -> list[Any]:
    """Processor chain of the loggers handed out by get_logger()."""
    import structlog

    return [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        *_event_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def configure_logging(
    level: str = "INFO",
    *,
    json_output: bool = True,
) -> None:
    """Attach a rendering handler to the ``fallible`` stdlib logger.

    Neither the root logger nor the structlog defaults are touched, and
    records from the library stop propagating to the host's handlers.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use console output.
    """
    import structlog

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_event_processors(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    library_logger = logging.getLogger(LOGGER_NAME)
    library_logger.handlers.clear()
    library_logger.addHandler(handler)
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    library_logger.propagate = False


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger under the ``fallible`` namespace.

    Events below the effective level of the underlying stdlib logger are
    dropped before any processor or hook sees them.

    Args:
        name: Child logger name, e.g. "interop". None returns the
            library logger itself.

    Returns:
        A structlog BoundLogger.
    """
    import structlog

    logger_name = LOGGER_NAME if name is None else f"{LOGGER_NAME}.{name}"
    return structlog.wrap_logger(
        logging.getLogger(logger_name),
        processors=_library_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=False,
    )


def add_log_hook(hook: LogHook) -> None:
    """Register a hook called with a copy of each emitted log event.

    A hook that raises is skipped; logging carries on.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()
