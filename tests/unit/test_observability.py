"""Unit tests for structured logging utilities in ``observability``."""

from __future__ import annotations

import logging

import pytest

from minicat import get_logger
from minicat.observability import log_debug, log_error, make_event


def test_null_handler_present() -> None:
    """Package logger should always include a NullHandler to stay silent by default."""

    logger = get_logger()
    assert logger.name == "minicat"
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)


def test_context_attached_to_record(caplog: pytest.LogCaptureFixture) -> None:
    """Structured fields should travel on the record's ``context`` attribute."""

    caplog.set_level(logging.DEBUG, logger="minicat")
    log_debug("source_finished", source="a.txt", lines=3)
    record = caplog.records[-1]
    assert record.levelno == logging.DEBUG
    assert getattr(record, "context") == {"source": "a.txt", "lines": 3}


def test_log_error_level(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR, logger="minicat")
    log_error("source_open_failed", **make_event("gone.txt", {"reason": "missing"}))
    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert getattr(record, "context") == {"source": "gone.txt", "reason": "missing"}


def test_make_event_merges_optional_payload() -> None:
    assert make_event("<stdin>") == {"source": "<stdin>"}
    assert make_event("a.txt", {"lines": 2}) == {"source": "a.txt", "lines": 2}
