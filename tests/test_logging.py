"""Tests for logging setup."""

import logging

from remotekeeper.utils.logging import get_logger, setup_logging


def test_get_logger_configures_once():
    logger = get_logger("remotekeeper.test_once")
    get_logger("remotekeeper.test_once")

    assert len(logger.handlers) == 1


def test_setup_logging_levels():
    assert setup_logging(verbose=True).level == logging.DEBUG
    assert setup_logging(quiet=True).level == logging.ERROR
    assert setup_logging(level="warning").level == logging.WARNING
    assert setup_logging(level="nonsense").level == logging.INFO
