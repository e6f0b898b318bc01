"""structlog adapter for validation outcome events.

The only emitter is ValidationService, which reports one event per call:
"Validation passed" (debug), "Validation rejected" (info) or
"Unknown validation rule" (warning), each carrying rule, category and
error code fields. Raw input values are never part of an event.

Rendering follows the environment chosen in the container: colored console
lines while developing, one JSON object per line everywhere else so log
shippers can index the rule/code/reason fields.

ConsoleAdapter satisfies LoggerProtocol structurally and does not inherit
from it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _resolve_level(level: str) -> int:
    """Map a level name to its numeric value, INFO when unrecognized."""
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


class ConsoleAdapter:
    """Writes validation events to stdout through structlog.

    Events below ``level`` are dropped by structlog's filtering bound
    logger, so "Validation passed" debug events cost nothing in production
    unless DEBUG is configured.

    Args:
        use_json (bool): Render events as JSON lines instead of console text.
        level (str): Minimum level name, e.g. "DEBUG" or "WARNING".
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        event_processors: list[structlog.types.Processor] = [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            (
                structlog.processors.JSONRenderer()
                if use_json
                else structlog.dev.ConsoleRenderer(colors=True)
            ),
        ]

        structlog.configure(
            processors=event_processors,
            wrapper_class=structlog.make_filtering_bound_logger(
                _resolve_level(level)
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at error level, flattening ``error`` into type/message fields."""
        self._logger.error(message, **_with_error_fields(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at critical level, flattening ``error`` like error()."""
        self._logger.critical(message, **_with_error_fields(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return an adapter whose events all carry ``context``.

        The container binds app, version and environment once; every
        validation event then includes them without the service passing
        them along.
        """
        bound = ConsoleAdapter.__new__(ConsoleAdapter)
        bound._logger = self._logger.bind(**context)
        return bound

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Alias for bind()."""
        return self.bind(**context)


def _with_error_fields(
    context: dict[str, Any], error: Exception | None
) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context
