"""Tests for logging helpers."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator

import msgspec
import pytest

from ngqlspec import PreparedStatement
from ngqlspec.utils.logging import (
    CorrelationIDFilter,
    StructuredFormatter,
    configure_logging,
    get_correlation_id,
    get_logger,
    log_with_context,
    set_correlation_id,
)


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger("ngqlspec")
    handlers, level, propagate = list(root.handlers), root.level, root.propagate
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    root.propagate = propagate


@pytest.fixture
def correlation_id() -> Iterator[str]:
    set_correlation_id("req-123")
    yield "req-123"
    set_correlation_id(None)


def test_get_logger_namespaces_names() -> None:
    assert get_logger().name == "ngqlspec"
    assert get_logger("core.statement").name == "ngqlspec.core.statement"
    assert get_logger("ngqlspec.parameters").name == "ngqlspec.parameters"
    assert get_logger("ngqlspecx").name == "ngqlspec.ngqlspecx"


def test_get_logger_adds_single_filter() -> None:
    logger = get_logger("test.filters")
    get_logger("test.filters")
    assert sum(isinstance(f, CorrelationIDFilter) for f in logger.filters) == 1


def test_correlation_id_round_trip(correlation_id: str) -> None:
    assert get_correlation_id() == correlation_id


def test_structured_formatter(correlation_id: str) -> None:
    record = logging.LogRecord("ngqlspec.test", logging.INFO, __file__, 10, "built %d", (2,), None)
    record.extra_fields = {"parameter_count": 2, "message": "ignored"}
    entry = msgspec.json.decode(StructuredFormatter().format(record))

    assert entry["message"] == "built 2"
    assert entry["level"] == "INFO"
    assert entry["logger"] == "ngqlspec.test"
    assert entry["correlation_id"] == correlation_id
    assert entry["parameter_count"] == 2


def test_configure_logging(restore_root_logger: logging.Logger) -> None:
    extra = logging.NullHandler()
    logger = configure_logging(level="debug", structured=False, extra_handlers=[extra])

    assert logger is restore_root_logger
    assert restore_root_logger.level == logging.DEBUG
    assert extra in restore_root_logger.handlers
    assert restore_root_logger.propagate is False
    assert not isinstance(restore_root_logger.handlers[0].formatter, StructuredFormatter)


def test_statement_records_are_structured(restore_root_logger: logging.Logger, correlation_id: str) -> None:
    stream = io.StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)

    stmt = PreparedStatement("YIELD ?, ?")
    stmt.bind_parameters([1, "a"])
    stmt.build()
    stmt.release()

    entries = [msgspec.json.decode(line) for line in stream.getvalue().splitlines()]
    built = next(e for e in entries if e["message"] == "Built query")
    released = next(e for e in entries if e["message"] == "Released statement")
    assert built["parameter_count"] == 2
    assert built["dialect"] == "ngql"
    assert built["correlation_id"] == correlation_id
    assert released["parameter_count"] == 2


def test_log_with_context(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("test.context")
    with caplog.at_level(logging.INFO, logger="ngqlspec"):
        log_with_context(logger, logging.INFO, "statement released", parameter_count=3)
        log_with_context(logger, logging.DEBUG, "not emitted")

    record = caplog.records[-1]
    assert record.getMessage() == "statement released"
    assert record.extra_fields == {"parameter_count": 3}
