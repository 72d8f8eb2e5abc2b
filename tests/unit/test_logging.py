"""Tests for structured logging helpers."""

import logging

from kgraph_search.utils.logging import StructuredFormatter, redact_url, setup_logger


def test_redact_url_masks_key():
    url = "https://kgsearch.googleapis.com/v1/entities:search?query=Myst&key=AIzaSecret&limit=10"

    assert redact_url(url) == (
        "https://kgsearch.googleapis.com/v1/entities:search?query=Myst&key=***&limit=10"
    )


def test_redact_url_without_key():
    url = "https://kgsearch.googleapis.com/v1/entities:search?query=Myst"

    assert redact_url(url) == url


def test_structured_formatter_appends_extras():
    formatter = StructuredFormatter("%(levelname)s | %(message)s")
    record = logging.LogRecord("test", logging.WARNING, __file__, 1, "clamped", None, None)
    record.limit = 20

    assert formatter.format(record) == "WARNING | clamped | limit=20"


def test_structured_formatter_without_extras():
    formatter = StructuredFormatter("%(message)s")
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "plain", None, None)

    assert formatter.format(record) == "plain"


def test_setup_logger_is_idempotent():
    first = setup_logger("kgraph_search.test_idempotent", level="DEBUG")
    second = setup_logger("kgraph_search.test_idempotent", level="DEBUG")

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.DEBUG
