"""Tests for logging configuration."""

import logging

from preparedness_tracker.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("preparedness_tracker")
    logger.handlers.clear()

    try:
        configure_logging()
        first_count = len(logger.handlers)

        configure_logging()
        second_count = len(logger.handlers)
    finally:
        logger.handlers.clear()
        logger.propagate = True

    assert first_count == 1
    assert second_count == 1
