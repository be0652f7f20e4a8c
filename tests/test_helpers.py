"""Tests for logging setup helper."""
import logging

from src.utils.helpers import setup_logging


def test_setup_logging_adds_one_console_handler():
    logger = setup_logging("fleet_test_logger")
    setup_logging("fleet_test_logger")

    console = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
    assert len(console) == 1
    assert logger.level == logging.INFO


def test_setup_logging_custom_level():
    logger = setup_logging("fleet_test_debug", level=logging.DEBUG)
    assert logger.level == logging.DEBUG


def test_library_loggers_propagate_to_package_logger():
    from src.fleet import validation

    assert validation.logger.name == "src.fleet.validation"
    assert validation.logger.propagate
