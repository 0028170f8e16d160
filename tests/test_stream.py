import asyncio
import logging

from bunkmeter.engine.stream import (
    RequestContextFilter,
    current_request_id,
    request_logging_context,
    setup_logger,
)


def _record():
    return logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)


def test_filter_defaults_request_id_to_dash():
    record = _record()

    assert RequestContextFilter().filter(record)
    assert record.request_id == "-"


def test_context_scopes_request_id():
    seen = []

    async def run():
        async with request_logging_context("req-1"):
            record = _record()
            RequestContextFilter().filter(record)
            seen.append(record.request_id)
        seen.append(current_request_id.get())

    asyncio.run(run())

    assert seen == ["req-1", None]


def test_setup_logger_replaces_handlers():
    logger = setup_logger("bunkmeter.test", level="DEBUG")
    logger = setup_logger("bunkmeter.test", level="DEBUG")

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
