"""Pytest configuration shared by the rmclone test suite."""

import logging

import pytest


@pytest.fixture
def clean_logger():
    """The 'RmClone' logger without handlers, restored after the test."""
    logger = logging.getLogger("RmClone")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    for h in saved_handlers:
        logger.removeHandler(h)
    yield logger
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    for h in saved_handlers:
        logger.addHandler(h)
    logger.setLevel(saved_level)
