"""Logging helpers for ngqlspec.

Library modules log through :func:`get_logger`, which places every logger
under the ``ngqlspec`` namespace. Nothing is emitted until the application
attaches handlers, either its own or through :func:`configure_logging`.

Statement records carry structured fields (``parameter_count``, ``dialect``)
and, when one is set, the correlation ID of the request that issued them.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, TextIO

from ngqlspec._serialization import encode_json

if TYPE_CHECKING:
    from collections.abc import Iterable
    from logging import LogRecord

__all__ = (
    "CorrelationIDFilter",
    "StructuredFormatter",
    "configure_logging",
    "get_correlation_id",
    "get_logger",
    "log_with_context",
    "set_correlation_id",
)

ROOT_LOGGER_NAME = "ngqlspec"

_RECORD_FIELDS = ("timestamp", "level", "logger", "message")

_correlation_id: ContextVar[str | None] = ContextVar("ngqlspec_correlation_id", default=None)


def set_correlation_id(correlation_id: str | None) -> None:
    """Tag records logged from the current context; ``None`` clears the tag."""
    _correlation_id.set(correlation_id)


def get_correlation_id() -> str | None:
    return _correlation_id.get()


class StructuredFormatter(logging.Formatter):
    """One JSON object per record.

    The object holds the timestamp, level, logger and message, the
    correlation ID if set, the fields passed to :func:`log_with_context`, and
    the formatted exception if any. Extra fields never replace the record's own.
    """

    def format(self, record: LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        correlation_id = getattr(record, "correlation_id", None) or get_correlation_id()
        if correlation_id:
            entry["correlation_id"] = correlation_id
        for key, value in getattr(record, "extra_fields", {}).items():
            if key not in _RECORD_FIELDS:
                entry[key] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return encode_json(entry)


class CorrelationIDFilter(logging.Filter):
    """Copies the context's correlation ID onto each record."""

    def filter(self, record: LogRecord) -> bool:
        correlation_id = get_correlation_id()
        if correlation_id:
            record.correlation_id = correlation_id  # type: ignore[attr-defined]
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the ``ngqlspec`` namespace.

    Args:
        name: Dotted name below the namespace, e.g. ``"core.statement"``.
            ``None`` returns the namespace root.

    Returns:
        The logger, with a single :class:`CorrelationIDFilter` attached.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    logger = logging.getLogger(name)
    if not any(isinstance(f, CorrelationIDFilter) for f in logger.filters):
        logger.addFilter(CorrelationIDFilter())
    return logger


def configure_logging(
    level: int | str = logging.INFO,
    structured: bool = True,
    stream: TextIO | None = None,
    extra_handlers: Iterable[logging.Handler] = (),
) -> logging.Logger:
    """Send ngqlspec records to a stream, replacing earlier handlers.

    Records stop propagating to the root logger so applications that also log
    through the root do not see them twice.

    Args:
        level: Level name or number for the ``ngqlspec`` namespace
        structured: JSON lines via :class:`StructuredFormatter` when True, plain text otherwise
        stream: Output stream (default: ``sys.stderr``)
        extra_handlers: Handlers attached in addition to the stream handler

    Returns:
        The namespace root logger.
    """
    root_logger = get_logger()
    root_logger.setLevel(level.upper() if isinstance(level, str) else level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    if structured:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    root_logger.addHandler(handler)
    for extra_handler in extra_handlers:
        root_logger.addHandler(extra_handler)
    root_logger.propagate = False
    return root_logger


def log_with_context(logger: logging.Logger, level: int, message: str, **extra_fields: Any) -> None:
    """Log ``message`` with structured fields for :class:`StructuredFormatter`."""
    if logger.isEnabledFor(level):
        logger.log(level, message, extra={"extra_fields": extra_fields})
