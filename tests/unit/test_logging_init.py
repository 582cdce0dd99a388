from __future__ import annotations

import logging
from io import StringIO

import pytest

import oilforms.logging.init as log_init
from oilforms.logging.init import (
    SUMMARY_LEVEL,
    LabeledFormatter,
    get_logger,
    log_summary,
    reset_logging,
    set_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _clean_logging():
    reset_logging()
    yield
    reset_logging()


def test_setup_logging_creates_logger_with_labeled_formatter():
    logger = setup_logging()
    assert logger.name == "oilforms"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, LabeledFormatter)
    assert logger.propagate is False


def test_setup_logging_is_idempotent():
    first = setup_logging()
    assert setup_logging() is first
    assert get_logger() is first
    assert len(first.handlers) == 1


def test_reset_logging_does_not_duplicate_handlers():
    setup_logging()
    reset_logging()
    logger = setup_logging()
    assert len(logger.handlers) == 1


def test_logging_labeled_prefixes():
    logger = setup_logging()
    stream = StringIO()
    logger.handlers[0].setStream(stream)

    logger.info("loaded")
    logger.warning("careful")
    logger.error("broken")
    log_summary("records=3")
    # module loggers propagate into the package logger
    logging.getLogger("oilforms.services.ingestion").info("child")

    lines = stream.getvalue().splitlines()
    assert lines == [
        "INFO loaded",
        "WARN careful",
        "ERROR broken",
        "SUMMARY records=3",
        "INFO child",
    ]


def test_summary_level_value():
    assert SUMMARY_LEVEL == 25
    setup_logging()
    assert logging.getLevelName(SUMMARY_LEVEL) == "SUMMARY"


def test_get_logger_configures_on_first_use():
    assert log_init._logger is None
    logger = get_logger()
    assert log_init._logger is logger


def test_set_level_applies_to_handlers():
    logger = setup_logging()
    stream = StringIO()
    logger.handlers[0].setStream(stream)
    logger.debug("hidden")
    set_level(logging.DEBUG)
    logger.debug("shown")
    assert stream.getvalue().splitlines() == ["DEBUG shown"]
    assert logger.handlers[0].level == logging.DEBUG
